"""Application response – PagingWindow."""
from __future__ import annotations

import dataclasses
import math

__all__ = ["PagingWindow", "paging_window", "total_pages"]


@dataclasses.dataclass(frozen=True, slots=True)
class PagingWindow:
    """1-based inclusive bounds of the visible slice of a result set."""

    start: int
    end: int
    total: int

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    @property
    def is_past_end(self) -> bool:
        """True when the requested page starts after the last result."""
        return self.start > self.end

    @property
    def size(self) -> int:
        if self.is_empty or self.is_past_end:
            return 0
        return self.end - self.start + 1


def paging_window(current: int, results_per_page: int, total_results: int) -> PagingWindow:
    """Bounds of page *current* with *results_per_page* over *total_results*.

    >>> paging_window(2, 20, 1000)
    PagingWindow(start=21, end=40, total=1000)
    >>> paging_window(2, 20, 30)
    PagingWindow(start=21, end=30, total=30)

    ``start`` always follows the page arithmetic, so a page past the last
    result yields ``start > end`` (see :attr:`PagingWindow.is_past_end`)
    rather than being clamped to the last page:

    >>> paging_window(5, 20, 30)
    PagingWindow(start=81, end=30, total=30)
    """
    if total_results <= 0:
        return PagingWindow(0, 0, 0)
    start = (current - 1) * results_per_page + 1
    end = min(current * results_per_page, total_results)
    return PagingWindow(start, end, total_results)


def total_pages(total_results: int, results_per_page: int) -> int:
    if results_per_page <= 0 or total_results <= 0:
        return 0
    return math.ceil(total_results / results_per_page)
