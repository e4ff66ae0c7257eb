import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Qt adapter tests run headless.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from contactview.domain.models import Record  # noqa: E402


def _make_contact(record_id, first=None, last=None, email=None):
    fields = {}
    if first is not None:
        fields["FirstName"] = first
    if last is not None:
        fields["LastName"] = last
    if email is not None:
        fields["Email"] = email
    return Record(id=record_id, fields=fields)


@pytest.fixture
def make_contact():
    return _make_contact


@pytest.fixture
def seven_contacts():
    """Seven contacts A0..A6, fetched out of alphabetical order."""
    order = [3, 0, 6, 1, 5, 2, 4]
    return [
        _make_contact(f"r{i}", first=f"A{i}", last=f"Last{i}", email=f"a{i}@example.com")
        for i in order
    ]
