"""Stable, case-insensitive ordering of records by one field."""

from __future__ import annotations

from typing import Any, Callable, Collection, List, Optional, Sequence

from ..domain.models import Record, SortDirection
from ..errors import UnsortableFieldError


def sort_key(field_name: str) -> Callable[[Record], str]:
    """Build the comparison key for *field_name*; missing values sort as ``""``."""

    def _key(record: Record) -> str:
        value: Any = record.get(field_name)
        if value is None:
            return ""
        return str(value).lower()

    return _key


def sort_records(
    records: Sequence[Record],
    field_name: str,
    direction: SortDirection | str = SortDirection.ASC,
    sortable_fields: Optional[Collection[str]] = None,
) -> List[Record]:
    """Return *records* ordered by *field_name*.

    ``sorted`` is stable and ``reverse=True`` keeps equal keys in their
    incoming order, so ties keep their filtered order in both directions.
    """
    if sortable_fields is not None and field_name not in sortable_fields:
        raise UnsortableFieldError(f"{field_name!r} is not a sortable field")
    direction = SortDirection.parse(direction)
    return sorted(
        records,
        key=sort_key(field_name),
        reverse=direction is SortDirection.DESC,
    )
