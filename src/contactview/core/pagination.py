"""Fixed-size page slicing with boundary flags."""

from __future__ import annotations

from typing import Sequence

from ..domain.models import PageResult, Record
from ..errors import InvariantViolation


def total_pages(count: int, page_size: int) -> int:
    """Number of pages needed for *count* items; never less than one."""
    if page_size <= 0:
        raise InvariantViolation(f"page_size must be positive, got {page_size}")
    if count <= 0:
        return 1
    return (count + page_size - 1) // page_size


def clamp_page(page: int, pages: int) -> int:
    """Clamp *page* into ``[1, pages]``."""
    return max(1, min(page, max(1, pages)))


def paginate(records: Sequence[Record], page: int, page_size: int) -> PageResult:
    """Slice page *page* (1-based) out of *records*.

    An out-of-range *page* yields a short or empty slice rather than an error;
    callers clamp the page number themselves.
    """
    pages = total_pages(len(records), page_size)
    start = max(0, (page - 1) * page_size)
    end = max(0, page * page_size)
    return PageResult(
        items=list(records[start:end]),
        page=page,
        page_size=page_size,
        total_count=len(records),
        total_pages=pages,
    )
