"""Load module EEPROM dumps from raw binary or hex text files.

Hex text may be a plain run of byte pairs or the ethtool ``-m hex on``
layout::

    Offset          Values
    ------          ------
    0x0000:         18 40 00 07 00 00 00 00 00 00 00 00 00 00 1b 80
"""

from __future__ import annotations

import re
import string
from pathlib import Path

from cmisview.config import DumpFormat
from cmisview.exceptions import DumpFormatError
from cmisview.utils.logging import get_logger

logger = get_logger(__name__)

_HEX_TOKEN_RE = re.compile(r"^(?:0[xX])?([0-9a-fA-F]{2})$")
_TEXT_CHARS = set(string.hexdigits + string.whitespace + "xX:-OffsetValue")


def parse_hex_dump(text: str) -> bytes:
    """Parse hex text into bytes.

    Raises:
        DumpFormatError: A token is not a two-digit hex byte.
    """
    out = bytearray()
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith(("Offset", "------")):
            continue
        if ":" in line:
            line = line.split(":", 1)[1]
        for token in line.split():
            match = _HEX_TOKEN_RE.match(token)
            if match is None:
                raise DumpFormatError(f"Line {lineno}: invalid hex byte {token!r}")
            out.append(int(match.group(1), 16))
    return bytes(out)


def _looks_like_hex(data: bytes) -> bool:
    try:
        text = data.decode("ascii")
    except UnicodeDecodeError:
        return False
    return bool(text.strip()) and set(text) <= _TEXT_CHARS


def load_dump(path: str | Path, fmt: DumpFormat = "auto") -> bytes:
    """Read a module memory dump.

    Args:
        path: Dump file location.
        fmt: "raw" binary, "hex" text, or "auto" to detect hex text.

    Raises:
        DumpFormatError: The file cannot be read or parsed.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise DumpFormatError(f"Cannot read dump {path}: {exc}") from exc

    if fmt == "auto":
        fmt = "hex" if _looks_like_hex(data) else "raw"
        logger.debug("dump_format_detected", path=str(path), format=fmt)

    if fmt == "hex":
        return parse_hex_dump(data.decode("ascii", errors="replace"))
    return data
