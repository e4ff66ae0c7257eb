from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .core import Record


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: "str | SortDirection") -> "SortDirection":
        if isinstance(value, cls):
            return value
        return cls(str(value).lower())

    def reversed(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@dataclass
class ViewState:
    """Search key, sort order and page position of the one active view."""

    search_key: str = ""
    sort_field: str = "FirstName"
    sort_direction: SortDirection = SortDirection.ASC
    current_page: int = 1
    page_size: int = 5


@dataclass
class PageResult:
    """Result of slicing one page out of an ordered sequence."""

    items: List[Record] = field(default_factory=list)
    page: int = 1
    page_size: int = 5
    total_count: int = 0
    total_pages: int = 1

    @property
    def is_first_page(self) -> bool:
        return self.page == 1

    @property
    def is_last_page(self) -> bool:
        return self.page == self.total_pages
