"""Tests for page slicing and boundary flags."""

import pytest

from contactview.core.pagination import clamp_page, paginate, total_pages
from contactview.domain.models import Record
from contactview.errors import InvariantViolation


def _named(count):
    return [Record(id=f"A{i}", fields={"FirstName": f"A{i}"}) for i in range(count)]


def test_seven_records_page_size_five():
    records = _named(7)
    first = paginate(records, 1, 5)
    assert first.total_pages == 2
    assert [r.id for r in first.items] == ["A0", "A1", "A2", "A3", "A4"]
    assert first.is_first_page and not first.is_last_page

    second = paginate(records, 2, 5)
    assert [r.id for r in second.items] == ["A5", "A6"]
    assert second.is_last_page and not second.is_first_page


@pytest.mark.parametrize("count,size", [(0, 5), (1, 5), (5, 5), (6, 5), (12, 5), (13, 1)])
def test_pages_cover_sequence_exactly_once(count, size):
    records = _named(count)
    pages = total_pages(count, size)
    joined = []
    for page in range(1, pages + 1):
        joined.extend(paginate(records, page, size).items)
    assert joined == records


def test_empty_sequence_has_one_empty_page():
    result = paginate([], 1, 5)
    assert result.items == []
    assert result.total_pages == 1
    assert result.is_first_page and result.is_last_page


def test_out_of_range_page_gives_empty_slice():
    assert paginate(_named(3), 4, 5).items == []
    assert paginate(_named(3), 0, 5).items == []


def test_total_pages():
    assert total_pages(0, 5) == 1
    assert total_pages(5, 5) == 1
    assert total_pages(6, 5) == 2
    with pytest.raises(InvariantViolation):
        total_pages(3, 0)


def test_clamp_page():
    assert clamp_page(0, 3) == 1
    assert clamp_page(2, 3) == 2
    assert clamp_page(9, 3) == 3
    assert clamp_page(4, 0) == 1
