"""Page address resolution for the flattened CMIS module memory buffer.

The physical module only exposes one 128-byte upper page at a time through
a bank/page select register. Callers hand us a pre-flattened buffer holding
the pages in a fixed order::

    +----------+----------+----------+----------+----------+----------+
    | Page 00h | Page 00h | Page 01h | Page 02h | Page 10h | Page 11h |
    |  lower   |  upper   |  upper   |  upper   |  upper   |  upper   |
    +----------+----------+----------+----------+----------+----------+

so resolving an address is a static slot lookup: ``slot * 128 + offset``.
"""

from __future__ import annotations

from typing import NamedTuple

from cmisview.core.types import PAGE_SIZE, UPPER_PAGES, Page
from cmisview.exceptions import PageNotPresentError


class PageOffset(NamedTuple):
    """A byte position inside one 128-byte page half."""

    page: Page
    offset: int

    @classmethod
    def cmis(cls, page_number: int, address: int) -> PageOffset:
        """Build a PageOffset from CMIS notation (page number, byte 0-255).

        Bytes 0-127 of page 00h are the lower page; bytes 128-255 of any
        page are its upper half.
        """
        if not 0 <= address < PAGE_SIZE * 2:
            raise ValueError(f"CMIS byte address out of range: {address}")
        if address < PAGE_SIZE:
            if page_number != 0x00:
                raise ValueError(
                    f"Lower memory is only addressable through page 00h, "
                    f"got page 0x{page_number:02X}"
                )
            return cls(Page.LOWER_0, address)
        try:
            page = UPPER_PAGES[page_number]
        except KeyError:
            raise ValueError(
                f"Page 0x{page_number:02X} is not part of the flattened layout"
            ) from None
        return cls(page, address - PAGE_SIZE)

    def advance(self, delta: int) -> PageOffset:
        """Return the offset ``delta`` bytes further into the same page."""
        return PageOffset(self.page, self.offset + delta)


def page_present(page: Page, length: int) -> bool:
    """Whether a buffer of ``length`` bytes carries ``page``."""
    return length >= page.required_length


def resolve(location: PageOffset, length: int) -> int:
    """Convert a (page, local offset) pair to an absolute buffer offset.

    Raises:
        ValueError: The local offset is outside [0, 128).
        PageNotPresentError: The buffer length does not include the page.
    """
    page, offset = location
    if not 0 <= offset < PAGE_SIZE:
        raise ValueError(f"Local page offset out of range: {offset}")
    if not page_present(page, length):
        raise PageNotPresentError(page.label, length)
    return page.base + offset
