from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional


# Backend rows carry their identifier under this key (Salesforce style).
DEFAULT_ID_FIELD = "Id"


@dataclass(frozen=True)
class Record:
    """One contact as last fetched from the backend.

    ``fields`` is an opaque field-name to scalar mapping; the identifier is
    kept apart so it can never be edited through a draft.
    """

    id: str
    fields: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # read-only view over a private copy
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def get(self, name: str, default: Any = None) -> Any:
        return self.fields.get(name, default)

    def __getitem__(self, name: str) -> Any:
        return self.fields[name]

    def to_mapping(self, id_field: str = DEFAULT_ID_FIELD) -> Dict[str, Any]:
        return {id_field: self.id, **self.fields}

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any], id_field: str = DEFAULT_ID_FIELD) -> Record:
        if id_field not in row:
            raise KeyError(f"row has no {id_field!r} column")
        values = {k: v for k, v in row.items() if k != id_field}
        return cls(id=str(row[id_field]), fields=values)


@dataclass
class DraftEdit:
    """Pending, uncommitted field changes for a single record."""

    record_id: str
    changed_fields: Dict[str, Any] = field(default_factory=dict)

    def merge(self, name: str, value: Any) -> None:
        # last write wins per field
        self.changed_fields[name] = value

    def merged_with(self, newer: Optional[DraftEdit]) -> DraftEdit:
        """Return a copy of this draft overlaid with the fields of *newer*."""
        combined = dict(self.changed_fields)
        if newer is not None:
            combined.update(newer.changed_fields)
        return DraftEdit(record_id=self.record_id, changed_fields=combined)

    def copy(self) -> DraftEdit:
        return DraftEdit(record_id=self.record_id, changed_fields=dict(self.changed_fields))

    def to_mapping(self, id_field: str = DEFAULT_ID_FIELD) -> Dict[str, Any]:
        return {id_field: self.record_id, **self.changed_fields}
