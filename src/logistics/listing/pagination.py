"""Page arithmetic for shipment listings.

Query-string values arrive as text. They are read the way a lenient integer
parser reads them: leading whitespace and a sign are allowed, digits are taken
up to the first non-digit, and anything unreadable falls back to the default.
Page and page size never drop below 1.
"""

import math
import re
from dataclasses import dataclass

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def coerce_positive_int(raw, default: int) -> int:
    if raw is None:
        return default
    if isinstance(raw, bool):
        return default
    if isinstance(raw, int):
        value = raw
    else:
        match = _LEADING_INT.match(str(raw))
        if not match:
            return default
        value = int(match.group(1))
    return max(value, 1)


@dataclass(frozen=True)
class PageRequest:
    page: int = DEFAULT_PAGE
    size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def from_params(cls, page=None, limit=None) -> "PageRequest":
        return cls(
            page=coerce_positive_int(page, DEFAULT_PAGE),
            size=coerce_positive_int(limit, DEFAULT_PAGE_SIZE),
        )

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.size

    @property
    def limit(self) -> int:
        return self.size

    def total_pages(self, total_items: int) -> int:
        """Number of pages needed for ``total_items``; zero when there is nothing to show."""
        if total_items <= 0:
            return 0
        return math.ceil(total_items / self.size)


@dataclass(frozen=True)
class PageInfo:
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int

    @classmethod
    def build(cls, request: PageRequest, total_items: int) -> "PageInfo":
        return cls(
            current_page=request.page,
            total_pages=request.total_pages(total_items),
            total_items=total_items,
            items_per_page=request.size,
        )
