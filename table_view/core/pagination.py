from __future__ import annotations

import math
from typing import List, Sequence, TypeVar, Union

T = TypeVar("T")

ELLIPSIS = "..."
MAX_PAGES_SHOWN = 5


def page_count(total: int, page_size: int) -> int:
    """Number of pages needed for 'total' rows; 0 when there are no rows."""
    if total <= 0:
        return 0
    return math.ceil(total / page_size)


def clamp_page_index(page_index: int, total: int, page_size: int) -> int:
    """
    Clamp a 0-based page index into [0, max(0, page_count - 1)], so a shrinking
    result set pulls the page back instead of leaving it blank.
    """
    last = max(0, page_count(total, page_size) - 1)
    return min(max(page_index, 0), last)


def paginate(rows: Sequence[T], page_size: int, page_index: int) -> List[T]:
    """
    Return the half-open slice [page_index * page_size, page_index * page_size + page_size).
    """
    start = page_index * page_size
    return list(rows[start:start + page_size])


def page_window(current_page: int, num_pages: int, max_pages: int = MAX_PAGES_SHOWN) -> List[Union[int, str]]:
    """
    1-based page numbers to show in a pager, at most 'max_pages' of them,
    centred on current_page where possible. ELLIPSIS marks elided pages at
    either end.

    e.g. page_window(15, 50) -> ["...", 13, 14, 15, 16, 17, "..."]
    """
    if num_pages <= 0:
        return []

    half = max_pages // 2

    start = max(1, current_page - half)
    end = min(num_pages, current_page + half)

    # Near the start: extend the window to the right
    if current_page - half <= 0:
        end = min(num_pages, end + (1 - current_page + half))

    # Near the end: extend the window to the left
    if current_page + half > num_pages:
        start = max(1, start - (current_page + half - num_pages))

    pages: List[Union[int, str]] = list(range(start, end + 1))

    if start > 1:
        pages.insert(0, ELLIPSIS)
    if end < num_pages:
        pages.append(ELLIPSIS)

    return pages
