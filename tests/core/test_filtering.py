"""Tests for the case-insensitive record filter."""

from contactview.core.filtering import filter_records
from contactview.domain.models import Record

SEARCHABLE = {"FirstName", "LastName", "Email"}


def _records():
    return [
        Record(id="1", fields={"FirstName": "John", "LastName": "Smith", "Email": "john@smith.com"}),
        Record(id="2", fields={"FirstName": "Jane", "LastName": "Doe", "Email": "jane@doe.com"}),
        Record(id="3", fields={"FirstName": "Ann", "LastName": None}),
        Record(id="4", fields={"FirstName": "SMITHERS", "Phone": "smith-555"}),
    ]


def test_search_matches_email_substring():
    result = filter_records(_records()[:2], "smith", SEARCHABLE)
    assert [r.id for r in result] == ["1"]


def test_search_is_case_insensitive():
    result = filter_records(_records(), "SmItH", SEARCHABLE)
    assert [r.id for r in result] == ["1", "4"]


def test_empty_key_is_identity():
    records = _records()
    assert filter_records(records, "", SEARCHABLE) == records
    assert filter_records(records, None, SEARCHABLE) == records


def test_none_and_missing_fields_do_not_match():
    result = filter_records(_records(), "none", SEARCHABLE)
    assert result == []


def test_only_searchable_fields_are_considered():
    # "555" only appears in Phone, which is not searchable
    assert filter_records(_records(), "555", SEARCHABLE) == []
    assert [r.id for r in filter_records(_records(), "555", {"Phone"})] == ["4"]


def test_result_preserves_canonical_order_and_is_subset():
    records = _records()
    for key in ["", "j", "doe", "a", "zzz", "@"]:
        result = filter_records(records, key, SEARCHABLE)
        assert len(result) <= len(records)
        positions = [records.index(r) for r in result]
        assert positions == sorted(positions)
        for record in records:
            hit = any(key.lower() in str(record.get(f) or "").lower() for f in SEARCHABLE)
            assert (record in result) == hit


def test_non_string_values_are_matched_by_their_string_form():
    records = [Record(id="1", fields={"FirstName": 12345})]
    assert filter_records(records, "234", {"FirstName"}) == records
