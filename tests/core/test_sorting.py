"""Tests for the stable case-insensitive sort."""

import pytest

from contactview.core.sorting import sort_records
from contactview.domain.models import Record, SortDirection
from contactview.errors import InvariantViolation, UnsortableFieldError


def _last(*names):
    return [Record(id=f"r{i}", fields={"LastName": name}) for i, name in enumerate(names)]


def test_ascending_then_descending():
    records = _last("Zed", "Ann")
    asc = sort_records(records, "LastName", SortDirection.ASC)
    assert [r["LastName"] for r in asc] == ["Ann", "Zed"]
    desc = sort_records(records, "LastName", SortDirection.DESC)
    assert [r["LastName"] for r in desc] == ["Zed", "Ann"]


def test_accepts_string_direction():
    records = _last("b", "a")
    assert [r["LastName"] for r in sort_records(records, "LastName", "desc")] == ["b", "a"]
    assert [r["LastName"] for r in sort_records(records, "LastName", "ASC")] == ["a", "b"]


def test_comparison_ignores_case():
    records = _last("bob", "Alice", "carol")
    result = sort_records(records, "LastName")
    assert [r["LastName"] for r in result] == ["Alice", "bob", "carol"]


def test_missing_values_sort_as_empty_string():
    records = [
        Record(id="1", fields={"LastName": "Baker"}),
        Record(id="2", fields={}),
        Record(id="3", fields={"LastName": None}),
    ]
    result = sort_records(records, "LastName")
    assert [r.id for r in result] == ["2", "3", "1"]


def test_adjacent_pairs_are_ordered():
    records = _last("delta", "Alpha", "charlie", "Bravo", "alpha", "echo")
    result = sort_records(records, "LastName")
    keys = [r["LastName"].lower() for r in result]
    assert all(a <= b for a, b in zip(keys, keys[1:]))


def test_ties_keep_incoming_order_in_both_directions():
    records = _last("same", "Same", "SAME")
    assert [r.id for r in sort_records(records, "LastName", "asc")] == ["r0", "r1", "r2"]
    assert [r.id for r in sort_records(records, "LastName", "desc")] == ["r0", "r1", "r2"]


def test_input_is_not_mutated():
    records = _last("b", "a")
    sort_records(records, "LastName")
    assert [r["LastName"] for r in records] == ["b", "a"]


def test_unsortable_field_is_an_invariant_violation():
    with pytest.raises(UnsortableFieldError):
        sort_records(_last("a"), "Phone", sortable_fields={"LastName"})
    assert issubclass(UnsortableFieldError, InvariantViolation)


def test_unknown_direction_raises():
    with pytest.raises(ValueError):
        sort_records(_last("a"), "LastName", "sideways")
