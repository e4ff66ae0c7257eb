"""Tests for the Qt table model adapter."""

from __future__ import annotations

import pytest

pytest.importorskip("PySide6", reason="PySide6 is required for model tests")
pytest.importorskip("PySide6.QtCore", reason="QtCore not available")

from PySide6.QtCore import QCoreApplication, Qt  # noqa: E402

from contactview.config import ViewConfig  # noqa: E402
from contactview.domain.models import Record  # noqa: E402
from contactview.gui.ui.models.contact_table_model import ContactTableModel  # noqa: E402
from contactview.gui.viewmodels.contact_list_viewmodel import ContactListViewModel  # noqa: E402
from contactview.infrastructure.gateways.memory_gateway import InMemoryContactGateway  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


def _model(config=None):
    records = [
        Record(id=f"r{i}", fields={"FirstName": name, "LastName": "X", "Email": f"{name}@x.com"})
        for i, name in enumerate(["Cid", "Ann", "Bea"])
    ]
    vm = ContactListViewModel(InMemoryContactGateway(records), config=config or ViewConfig(page_size=2))
    model = ContactTableModel(vm)
    vm.load()
    return model, vm


def test_shape_and_headers(qapp):
    model, _ = _model()
    assert model.rowCount() == 2
    assert model.columnCount() == 3
    assert model.headerData(0, Qt.Orientation.Horizontal) == "FirstName"
    assert model.data(model.index(0, 0)) == "Ann"
    assert model.data(model.index(1, 0)) == "Bea"


def test_follows_paging(qapp):
    model, vm = _model()
    vm.next_page()
    assert model.rowCount() == 1
    assert model.data(model.index(0, 0)) == "Cid"


def test_set_data_records_draft(qapp):
    model, vm = _model()
    index = model.index(0, 2)

    assert model.setData(index, "new@x.com") is True

    assert model.data(index) == "new@x.com"
    assert vm.edits.draft_for("r1").changed_fields == {"Email": "new@x.com"}
    assert vm.store.get("r1")["Email"] == "Ann@x.com"


def test_non_editable_column(qapp):
    config = ViewConfig(page_size=2, editable_fields=frozenset({"Email"}))
    model, vm = _model(config)
    index = model.index(0, 0)

    assert not (model.flags(index) & Qt.ItemFlag.ItemIsEditable)
    assert model.setData(index, "Zed") is False
    assert vm.edits.has_pending is False


def test_sort_delegates_to_viewmodel(qapp):
    model, vm = _model()
    model.sort(0, Qt.SortOrder.DescendingOrder)
    assert model.data(model.index(0, 0)) == "Cid"
    assert vm.sort_direction.value.value == "desc"


def test_sort_on_unsortable_column_is_ignored(qapp):
    config = ViewConfig(page_size=2, sortable_fields=frozenset({"FirstName"}))
    model, vm = _model(config)

    model.sort(1, Qt.SortOrder.DescendingOrder)

    assert vm.sort_field.value == "FirstName"
    assert model.data(model.index(0, 0)) == "Ann"
