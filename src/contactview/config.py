"""Default configuration values for contactview."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from .errors import InvariantViolation

DEFAULT_PAGE_SIZE: Final[int] = 5

# Columns shown by the contact list; every one of them is searchable,
# sortable and editable unless the settings file narrows the sets.
CONTACT_FIELDS: Final[tuple[str, ...]] = ("FirstName", "LastName", "Email")

DEFAULT_SORT_FIELD: Final[str] = "FirstName"
DEFAULT_SORT_DIRECTION: Final[str] = "asc"

APP_DIR_NAME: Final[str] = "contactview"
SETTINGS_FILE_NAME: Final[str] = "settings.json"


@dataclass(frozen=True)
class ViewConfig:
    """Recognised options of the contact list view.

    Field sets given as any iterable are normalised to frozensets.  The
    default sort must name a sortable field so the first recompute of a
    view can never fail.
    """

    page_size: int = DEFAULT_PAGE_SIZE
    columns: tuple[str, ...] = CONTACT_FIELDS
    searchable_fields: frozenset[str] = field(default_factory=lambda: frozenset(CONTACT_FIELDS))
    sortable_fields: frozenset[str] = field(default_factory=lambda: frozenset(CONTACT_FIELDS))
    editable_fields: frozenset[str] = field(default_factory=lambda: frozenset(CONTACT_FIELDS))
    default_sort_field: str = DEFAULT_SORT_FIELD
    default_sort_direction: str = DEFAULT_SORT_DIRECTION

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))
        for name in ("searchable_fields", "sortable_fields", "editable_fields"):
            object.__setattr__(self, name, frozenset(getattr(self, name)))
        if self.page_size <= 0:
            raise InvariantViolation(f"page_size must be positive, got {self.page_size}")
        if self.default_sort_field not in self.sortable_fields:
            raise InvariantViolation(f"default sort field {self.default_sort_field!r} is not sortable")
        if self.default_sort_direction not in ("asc", "desc"):
            raise InvariantViolation(f"unknown sort direction {self.default_sort_direction!r}")
