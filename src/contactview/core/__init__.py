"""Pure view-pipeline functions: filter, sort and paginate records."""

from .filtering import filter_records
from .pagination import clamp_page, paginate, total_pages
from .sorting import sort_key, sort_records

__all__ = [
    "clamp_page",
    "filter_records",
    "paginate",
    "sort_key",
    "sort_records",
    "total_pages",
]
