"""Case-insensitive substring search over a record collection."""

from __future__ import annotations

from typing import Any, Iterable, List, Sequence

from ..domain.models import Record


def _searchable_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).lower()


def matches(record: Record, needle: str, searchable_fields: Iterable[str]) -> bool:
    """Return ``True`` if any searchable field of *record* contains *needle*.

    *needle* must already be lower-cased.
    """
    if not needle:
        return True
    return any(needle in _searchable_text(record.get(name)) for name in searchable_fields)


def filter_records(
    canonical: Sequence[Record],
    search_key: str,
    searchable_fields: Iterable[str],
) -> List[Record]:
    """Return the records of *canonical* matching *search_key*, in order."""
    needle = (search_key or "").lower()
    if not needle:
        return list(canonical)
    fields = tuple(searchable_fields)
    return [record for record in canonical if matches(record, needle, fields)]
