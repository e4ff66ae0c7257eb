"""Schema helpers for the contact view settings file."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from ..config import (
    CONTACT_FIELDS,
    DEFAULT_PAGE_SIZE,
    DEFAULT_SORT_DIRECTION,
    DEFAULT_SORT_FIELD,
    ViewConfig,
)

_FIELD_LIST = {
    "type": "array",
    "items": {"type": "string", "minLength": 1},
    "uniqueItems": True,
}

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "contactview/settings.schema.json",
    "type": "object",
    "required": ["schema", "view"],
    "properties": {
        "schema": {"const": "contactview/settings@1"},
        "view": {
            "type": "object",
            "required": ["page_size", "columns"],
            "properties": {
                "page_size": {"type": "integer", "minimum": 1},
                "columns": {**_FIELD_LIST, "minItems": 1},
                "searchable_fields": _FIELD_LIST,
                "sortable_fields": _FIELD_LIST,
                "editable_fields": _FIELD_LIST,
                "default_sort_field": {"type": "string", "minLength": 1},
                "default_sort_direction": {"type": "string", "enum": ["asc", "desc"]},
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": True,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": "contactview/settings@1",
    "view": {
        "page_size": DEFAULT_PAGE_SIZE,
        "columns": list(CONTACT_FIELDS),
        "searchable_fields": list(CONTACT_FIELDS),
        "sortable_fields": list(CONTACT_FIELDS),
        "editable_fields": list(CONTACT_FIELDS),
        "default_sort_field": DEFAULT_SORT_FIELD,
        "default_sort_direction": DEFAULT_SORT_DIRECTION,
    },
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)


class FieldSetError(ValueError):
    """Raised when a field set names a column the view does not show."""


def _check_field_sets(data: dict[str, Any]) -> None:
    view = data["view"]
    columns = set(view["columns"])
    for key in ("searchable_fields", "sortable_fields", "editable_fields"):
        unknown = set(view.get(key, [])) - columns
        if unknown:
            raise FieldSetError(f"{key} names unknown columns: {', '.join(sorted(unknown))}")
    sort_field = view.get("default_sort_field")
    if sort_field is not None and sort_field not in view.get("sortable_fields", columns):
        raise FieldSetError(f"default_sort_field {sort_field!r} is not sortable")


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            if key == "view" and isinstance(value, dict):
                target = merged.setdefault("view", {})
                for sub_key, sub_value in value.items():
                    target[sub_key] = sub_value
                if "columns" in value and isinstance(value["columns"], list):
                    # Field sets left at their defaults follow the new columns.
                    for set_key in ("searchable_fields", "sortable_fields", "editable_fields"):
                        if set_key not in value:
                            target[set_key] = list(value["columns"])
                    if "default_sort_field" not in value and value["columns"]:
                        target["default_sort_field"] = value["columns"][0]
                continue
            merged[key] = value
    validate_settings(merged)
    return merged


def validate_settings(data: dict[str, Any]) -> None:
    """Validate *data* against the settings schema and the field-set rules."""

    _validator.validate(data)
    _check_field_sets(data)


def to_view_config(data: dict[str, Any]) -> ViewConfig:
    """Build the :class:`ViewConfig` described by validated settings *data*."""

    view = data["view"]
    columns = tuple(view["columns"])
    return ViewConfig(
        page_size=view["page_size"],
        columns=columns,
        searchable_fields=frozenset(view.get("searchable_fields", columns)),
        sortable_fields=frozenset(view.get("sortable_fields", columns)),
        editable_fields=frozenset(view.get("editable_fields", columns)),
        default_sort_field=view.get("default_sort_field", DEFAULT_SORT_FIELD),
        default_sort_direction=view.get("default_sort_direction", DEFAULT_SORT_DIRECTION),
    )


__all__ = [
    "DEFAULT_SETTINGS",
    "SETTINGS_SCHEMA",
    "FieldSetError",
    "merge_with_defaults",
    "to_view_config",
    "validate_settings",
]
