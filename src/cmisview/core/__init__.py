"""CMIS memory map decoding engine.

Page address resolution, typed field decoders, diagnostics extraction and
module descriptor assembly over a flattened module memory buffer.
"""

from cmisview.core.descriptor import decode_descriptor
from cmisview.core.diagnostics import extract_diagnostics, has_extended_diagnostics
from cmisview.core.module import decode_module
from cmisview.core.pages import PageOffset, resolve

__all__ = [
    "PageOffset",
    "decode_descriptor",
    "decode_module",
    "extract_diagnostics",
    "has_extended_diagnostics",
    "resolve",
]
