"""Top-level decode entry point for a CMIS module memory buffer."""

from __future__ import annotations

from cmisview.core.descriptor import decode_descriptor
from cmisview.core.diagnostics import extract_diagnostics
from cmisview.core.types import EEPROM_5PAG_LEN, EEPROM_BASE_LEN
from cmisview.exceptions import BufferLengthError
from cmisview.models.module import ModuleInfo
from cmisview.utils.logging import get_logger

logger = get_logger(__name__)

_EXPECTED_LENGTHS = (EEPROM_BASE_LEN, EEPROM_5PAG_LEN)


def decode_module(buf: bytes) -> ModuleInfo:
    """Decode the descriptor and diagnostics of a module memory buffer.

    Args:
        buf: Flattened pages 00h lower/upper, optionally followed by the
            upper halves of pages 01h, 02h, 10h and 11h (768 bytes total).

    Returns:
        ModuleInfo holding both decoded snapshots.

    Raises:
        BufferLengthError: The buffer does not hold page 00h.
    """
    buf = bytes(buf)
    if len(buf) < EEPROM_BASE_LEN:
        raise BufferLengthError(
            f"Module memory requires at least {EEPROM_BASE_LEN} bytes, got {len(buf)}"
        )
    if len(buf) not in _EXPECTED_LENGTHS:
        logger.warning("unexpected_buffer_length", length=len(buf))

    return ModuleInfo(
        length=len(buf),
        descriptor=decode_descriptor(buf),
        diagnostics=extract_diagnostics(buf),
    )
