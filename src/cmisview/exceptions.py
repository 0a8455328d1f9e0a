"""Exception hierarchy for CMIS memory map decoding."""

from __future__ import annotations


class CmisViewError(Exception):
    """Base exception for all cmisview errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class PageNotPresentError(CmisViewError):
    """A page offset was requested from a buffer that does not carry that page."""

    def __init__(self, page_name: str, length: int) -> None:
        self.page_name = page_name
        self.length = length
        super().__init__(
            f"{page_name} is not present in a {length}-byte module memory buffer"
        )


class BufferLengthError(CmisViewError):
    """The buffer is too short to hold the mandatory page 0."""


class DumpFormatError(CmisViewError):
    """An EEPROM dump file could not be parsed."""
