"""Typed field table for the CMIS / QSFP-DD memory map.

Maps field names to their page location and encoding so the decoders and
the diagnostics extractor never carry literal offsets of their own.
Addresses are given in CMIS notation (page number, byte 0-255).

References:
  - CMIS Rev. 4.0, Tables 8-2 .. 8-34 (pages 00h, 01h)
  - CMIS Rev. 4.0, Tables 8-41, 8-42 (page 02h thresholds)
  - CMIS Rev. 4.0, Tables 8-60 .. 8-62 (page 11h lane flags and monitors)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cmisview.core.pages import PageOffset
from cmisview.core.types import Page


class FieldKind(str, Enum):
    """How the bytes of a field are encoded."""

    U8 = "u8"
    U16 = "u16"
    S16 = "s16"
    ENUM = "enum"
    SCALED_LENGTH = "scaled_length"
    BITMASK = "bitmask"
    ASCII = "ascii"
    OUI = "oui"


@dataclass(frozen=True)
class FieldDef:
    """Location and encoding of a named field.

    ``count`` > 1 describes a run of consecutive elements of ``size`` bytes,
    e.g. four thresholds in HA, LA, HW, LW order or one value per lane.
    """

    name: str
    location: PageOffset
    kind: FieldKind
    size: int = 1
    count: int = 1
    description: str = ""

    @property
    def page(self) -> Page:
        return self.location.page

    def element(self, index: int) -> PageOffset:
        """Location of element ``index`` of a multi-element field."""
        if not 0 <= index < self.count:
            raise IndexError(f"{self.name}: element {index} out of range 0..{self.count - 1}")
        return self.location.advance(index * self.size)


def _field(
    name: str,
    page_number: int,
    address: int,
    kind: FieldKind,
    size: int = 1,
    count: int = 1,
    description: str = "",
) -> FieldDef:
    return FieldDef(
        name=name,
        location=PageOffset.cmis(page_number, address),
        kind=kind,
        size=size,
        count=count,
        description=description,
    )


_FIELD_LIST: tuple[FieldDef, ...] = (
    # Page 00h lower: identity and module-level monitors
    _field("identifier", 0x00, 0x00, FieldKind.U8, description="SFF-8024 identifier"),
    _field("revision_compliance", 0x00, 0x01, FieldKind.U8, description="CMIS revision"),
    _field("clei_present", 0x00, 0x02, FieldKind.BITMASK, description="CLEI present bit"),
    _field("temperature", 0x00, 0x0E, FieldKind.S16, size=2,
           description="Module temperature, 1/256 degC"),
    _field("voltage", 0x00, 0x10, FieldKind.U16, size=2,
           description="Module supply voltage, 0.1 mV"),
    _field("module_type", 0x00, 0x55, FieldKind.ENUM, description="Module media type"),

    # Page 00h upper: vendor block and advertising
    _field("vendor_name", 0x00, 0x81, FieldKind.ASCII, size=16),
    _field("vendor_oui", 0x00, 0x91, FieldKind.OUI, size=3),
    _field("vendor_pn", 0x00, 0x94, FieldKind.ASCII, size=16),
    _field("vendor_rev", 0x00, 0xA4, FieldKind.ASCII, size=2),
    _field("vendor_sn", 0x00, 0xA6, FieldKind.ASCII, size=16),
    _field("date_code", 0x00, 0xB6, FieldKind.ASCII, size=8),
    _field("clei_code", 0x00, 0xBE, FieldKind.ASCII, size=10),
    _field("power_class", 0x00, 0xC8, FieldKind.U8, description="Power class, bits 7-5"),
    _field("max_power", 0x00, 0xC9, FieldKind.U8, description="Max power, 0.25 W"),
    _field("cable_assembly_length", 0x00, 0xCA, FieldKind.SCALED_LENGTH),
    _field("connector", 0x00, 0xCB, FieldKind.U8, description="SFF-8024 connector"),
    _field("copper_attenuation", 0x00, 0xCC, FieldKind.U8, count=4,
           description="Attenuation in dB at 5, 7, 12.9, 25.8 GHz"),
    _field("media_technology", 0x00, 0xD4, FieldKind.ENUM,
           description="Media interface technology"),

    # Page 01h: link lengths, wavelength, signal integrity
    _field("smf_length", 0x01, 0x84, FieldKind.SCALED_LENGTH, description="Length (SMF), km"),
    _field("om5_length", 0x01, 0x85, FieldKind.U8, description="Length (OM5), 2 m"),
    _field("om4_length", 0x01, 0x86, FieldKind.U8, description="Length (OM4), 2 m"),
    _field("om3_length", 0x01, 0x87, FieldKind.U8, description="Length (OM3), 2 m"),
    _field("om2_length", 0x01, 0x88, FieldKind.U8, description="Length (OM2), 1 m"),
    _field("nominal_wavelength", 0x01, 0x8A, FieldKind.U16, size=2,
           description="Nominal wavelength, 0.05 nm"),
    _field("wavelength_tolerance", 0x01, 0x8C, FieldKind.U16, size=2,
           description="Wavelength tolerance, 0.005 nm"),
    _field("signal_integrity_tx", 0x01, 0xA1, FieldKind.BITMASK),
    _field("signal_integrity_rx", 0x01, 0xA2, FieldKind.BITMASK),

    # Page 02h: module and lane thresholds, HA/LA/HW/LW
    _field("temperature_thresholds", 0x02, 0x80, FieldKind.S16, size=2, count=4),
    _field("voltage_thresholds", 0x02, 0x88, FieldKind.U16, size=2, count=4),
    _field("tx_power_thresholds", 0x02, 0xB0, FieldKind.U16, size=2, count=4),
    _field("tx_bias_thresholds", 0x02, 0xB8, FieldKind.U16, size=2, count=4),
    _field("rx_power_thresholds", 0x02, 0xC0, FieldKind.U16, size=2, count=4),

    # Page 11h: lane flags (one mask byte per kind, one bit per lane) and monitors
    _field("tx_flags", 0x11, 0x8B, FieldKind.BITMASK, count=4,
           description="Tx power HA/LA/HW/LW lane masks"),
    _field("rx_flags", 0x11, 0x95, FieldKind.BITMASK, count=4,
           description="Rx power HA/LA/HW/LW lane masks"),
    _field("tx_power", 0x11, 0x9A, FieldKind.U16, size=2, count=8,
           description="Tx output power per lane, 0.1 uW"),
    _field("tx_bias", 0x11, 0xAA, FieldKind.U16, size=2, count=8,
           description="Tx bias current per lane, 2 uA"),
    _field("rx_power", 0x11, 0xBA, FieldKind.U16, size=2, count=8,
           description="Rx input power per lane, 0.1 uW"),
)

FIELDS: dict[str, FieldDef] = {f.name: f for f in _FIELD_LIST}


def get_field(name: str) -> FieldDef:
    """Look up a field definition by name."""
    try:
        return FIELDS[name]
    except KeyError:
        raise KeyError(f"Unknown CMIS field: {name!r}") from None


def fields_for_page(page: Page) -> list[FieldDef]:
    """All fields stored in ``page``, in address order."""
    return sorted(
        (f for f in _FIELD_LIST if f.page is page),
        key=lambda f: f.location.offset,
    )
