"""cmisview - CMIS / QSFP-DD transceiver memory map decoder.

Decodes the flattened module memory (page 00h, optionally pages 01h, 02h,
10h and 11h) into typed identity, capability and diagnostics snapshots.
"""

from cmisview.core.module import decode_module
from cmisview.exceptions import (
    BufferLengthError,
    CmisViewError,
    DumpFormatError,
    PageNotPresentError,
)
from cmisview.models import DiagnosticsRecord, ModuleDescriptor, ModuleInfo

__version__ = "0.1.0"

__all__ = [
    "BufferLengthError",
    "CmisViewError",
    "DiagnosticsRecord",
    "DumpFormatError",
    "ModuleDescriptor",
    "ModuleInfo",
    "PageNotPresentError",
    "decode_module",
]
