"""Stateless field decoders for CMIS module memory.

Every numeric field in the memory map uses one of a handful of encodings:
big-endian 16-bit fixed point (signed for temperatures), enumerated byte
codes, a length byte with a 2-bit multiplier, single-bit lane flags, and
space-padded ASCII. Scaling constants live here and nowhere else.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import TypeVar

from cmisview.core.fields import FieldDef, FieldKind
from cmisview.core.pages import resolve

E = TypeVar("E", bound=IntEnum)

_LEN_MUL_MASK = 0xC0
_LEN_VAL_MASK = 0x3F


@dataclass(frozen=True)
class FixedPoint:
    """Scale of a fixed-point field: value = raw * numerator / denominator."""

    numerator: int
    denominator: int
    unit: str

    def apply(self, raw: int) -> float:
        return raw * self.numerator / self.denominator


VOLTAGE_MV = FixedPoint(1, 10, "mV")
TEMPERATURE_C = FixedPoint(1, 256, "degC")
BIAS_UA = FixedPoint(2, 1, "uA")
OPTICAL_POWER_UW = FixedPoint(1, 10, "uW")
WAVELENGTH_NM = FixedPoint(1, 20, "nm")
WAVELENGTH_TOLERANCE_NM = FixedPoint(1, 200, "nm")
MAX_POWER_W = FixedPoint(1, 4, "W")

# Multiplier code (bits 7-6) -> (numerator, denominator)
CABLE_LENGTH_MULTIPLIERS: dict[int, tuple[int, int]] = {
    0: (1, 10),
    1: (1, 1),
    2: (10, 1),
    3: (100, 1),
}

SMF_LENGTH_MULTIPLIERS: dict[int, tuple[int, int]] = {
    0: (1, 10),
    1: (1, 1),
}


def read_u8(buf: bytes, pos: int) -> int:
    return buf[pos]


def read_u16(buf: bytes, pos: int) -> int:
    """Big-endian unsigned 16-bit value at ``pos``."""
    return struct.unpack_from(">H", buf, pos)[0]


def read_s16(buf: bytes, pos: int) -> int:
    """Big-endian two's-complement 16-bit value at ``pos``."""
    return struct.unpack_from(">h", buf, pos)[0]


def decode_enum(code: int, enum_cls: type[E]) -> E | None:
    """Map a byte code to its enum member, or None for unmapped codes."""
    try:
        return enum_cls(code)
    except ValueError:
        return None


def describe_code(code: int, enum_cls: type[E], labels: dict[E, str]) -> str:
    """Human-readable label for a code, "Unknown/Reserved" when unmapped."""
    member = decode_enum(code, enum_cls)
    if member is None or member not in labels:
        return f"Unknown/Reserved (0x{code:02x})"
    return labels[member]


def decode_scaled_length(
    byte: int,
    multipliers: dict[int, tuple[int, int]],
    sentinel: int | None = None,
) -> float | None:
    """Decode a length byte: bits 7-6 select a multiplier, bits 5-0 the magnitude.

    Returns None when ``byte`` equals ``sentinel`` (length beyond the
    representable range). Multiplier codes missing from ``multipliers``
    scale by 1.
    """
    if sentinel is not None and byte == sentinel:
        return None
    num, den = multipliers.get((byte & _LEN_MUL_MASK) >> 6, (1, 1))
    return (byte & _LEN_VAL_MASK) * num / den


def read_bit_flag(mask: int, bit: int) -> bool:
    """Whether bit ``bit`` (e.g. a lane index) is set in ``mask``."""
    return bool(mask & (1 << bit))


def decode_ascii(span: bytes) -> str:
    """Decode a space-padded ASCII span; zero-filled spans give ''."""
    return span.decode("ascii", errors="replace").rstrip(" \x00")


def decode_oui(span: bytes) -> str:
    return ":".join(f"{b:02x}" for b in span)


def read_field(buf: bytes, field: FieldDef, index: int = 0) -> int | str:
    """Read element ``index`` of ``field`` from a flattened buffer.

    Numeric kinds return the raw integer (scaling is left to the caller);
    ASCII and OUI return strings.

    Raises:
        PageNotPresentError: ``buf`` does not carry the field's page.
    """
    pos = resolve(field.element(index), len(buf))
    kind = field.kind
    if kind is FieldKind.U16:
        return read_u16(buf, pos)
    if kind is FieldKind.S16:
        return read_s16(buf, pos)
    if kind is FieldKind.ASCII:
        return decode_ascii(bytes(buf[pos:pos + field.size]))
    if kind is FieldKind.OUI:
        return decode_oui(bytes(buf[pos:pos + field.size]))
    return read_u8(buf, pos)
