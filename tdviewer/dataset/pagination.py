"""
Stateless pagination helpers.

Pages are 1-based. Nothing here clamps the requested page: asking for a
page past the end (or below 1) simply produces an empty slice.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

from tdviewer.config import PAGE_SIZE_OPTIONS

T = TypeVar("T")


def paginate(items: Sequence[T], page: int, page_size: int) -> list[T]:
    """
    Items on the given page.

    Args:
        items: Full ordered sequence
        page: 1-based page number
        page_size: Items per page

    Returns:
        items[(page-1)*page_size : page*page_size], empty if out of range
    """
    start = (page - 1) * page_size
    end = start + page_size
    if start < 0 or end <= 0:
        return []
    return list(items[start:end])


def total_pages(total_items: int, page_size: int) -> int:
    if total_items <= 0:
        return 0
    return math.ceil(total_items / page_size)


def has_next_page(page: int, pages: int) -> bool:
    return page < pages


def has_previous_page(page: int) -> bool:
    return page > 1


def page_info(page: int, pages: int) -> str:
    return f"Page {page} of {pages}"


def item_range(page: int, page_size: int, total_items: int) -> tuple[int, int]:
    """1-based (first, last) item numbers shown on a page; (0, 0) when nothing is shown."""
    first = (page - 1) * page_size + 1
    last = min(page * page_size, total_items)
    if total_items <= 0 or first < 1 or first > last:
        return (0, 0)
    return (first, last)


def is_valid_page_size(page_size: int) -> bool:
    return page_size in PAGE_SIZE_OPTIONS
