"""Derived pagination values and the page-number window."""

from __future__ import annotations

import math
from dataclasses import dataclass

ELLIPSIS = "..."
MAX_PAGE_BUTTONS = 5


def page_window(current_page: int, total_pages: int) -> list[int | str]:
    """Return the page buttons to render, zero-based, with ellipsis markers.

    Up to five pages are shown in full. Beyond that the first and last page
    are always present: near the start pages 0..3 are shown, near the end
    the last four, and elsewhere the current page with one neighbour on
    each side.
    """
    if total_pages <= MAX_PAGE_BUTTONS:
        return list(range(total_pages))

    last = total_pages - 1
    if current_page < 3:
        return [0, 1, 2, 3, ELLIPSIS, last]
    if current_page > total_pages - 4:
        return [0, ELLIPSIS, *range(total_pages - 4, total_pages)]
    return [0, ELLIPSIS, current_page - 1, current_page, current_page + 1, ELLIPSIS, last]


@dataclass(frozen=True)
class PageInfo:
    """Display values for one page of a paginated collection."""

    page: int
    page_size: int
    total: int

    @classmethod
    def for_page(cls, page: int, page_size: int, total: int) -> PageInfo:
        """Build page info with ``page`` clamped to the pages that exist."""
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        total = max(total, 0)
        last_page = max(math.ceil(total / page_size) - 1, 0)
        return cls(page=min(max(page, 0), last_page), page_size=page_size, total=total)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size)

    @property
    def start_item(self) -> int:
        return self.page * self.page_size + 1

    @property
    def end_item(self) -> int:
        return min((self.page + 1) * self.page_size, self.total)

    @property
    def show_controls(self) -> bool:
        """Pagination is not rendered at all for an empty collection."""
        return self.total > 0

    @property
    def shows_all(self) -> bool:
        """A single page replaces prev/next with a "showing all" line."""
        return self.show_controls and self.total_pages <= 1

    @property
    def has_previous(self) -> bool:
        return self.page > 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages - 1

    @property
    def window(self) -> list[int | str]:
        return page_window(self.page, self.total_pages)

    @property
    def summary(self) -> str:
        if not self.show_controls:
            return ""
        if self.shows_all:
            return f"Showing all {self.total} items"
        return f"Showing {self.start_item} to {self.end_item} of {self.total} items"

    @property
    def position(self) -> str:
        return f"Page {self.page + 1} of {self.total_pages}"
