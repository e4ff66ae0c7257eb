"""Qt table model exposing the current contact page to item views."""

from __future__ import annotations

import logging
from typing import Any

from PySide6.QtCore import QAbstractTableModel, QModelIndex, QObject, Qt

from ....domain.models import PageResult
from ....errors import UnknownFieldError
from ...viewmodels.contact_list_viewmodel import ContactListViewModel

logger = logging.getLogger(__name__)


class ContactTableModel(QAbstractTableModel):
    """Bind a :class:`ContactListViewModel` page to a Qt table view.

    Rows are the records of the current page, columns the configured
    fields.  Edits made through the view become drafts on the view model;
    cells with a pending draft show the draft value.
    """

    def __init__(self, viewmodel: ContactListViewModel, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._viewmodel = viewmodel
        self._columns = list(viewmodel.config.columns)
        self._rows = list(viewmodel.records.value)
        viewmodel.view_changed.connect(self._on_view_changed)

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:  # noqa: N802  # Qt override
        if parent.isValid():
            return 0
        return len(self._rows)

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:  # noqa: N802  # Qt override
        if parent.isValid():
            return 0
        return len(self._columns)

    def headerData(  # noqa: N802  # Qt override
        self,
        section: int,
        orientation: Qt.Orientation,
        role: int = Qt.ItemDataRole.DisplayRole,
    ) -> Any:
        if role != Qt.ItemDataRole.DisplayRole:
            return None
        if orientation == Qt.Orientation.Horizontal and 0 <= section < len(self._columns):
            return self._columns[section]
        if orientation == Qt.Orientation.Vertical:
            return section + 1
        return None

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid() or not (0 <= index.row() < len(self._rows)):
            return None
        if role not in (Qt.ItemDataRole.DisplayRole, Qt.ItemDataRole.EditRole):
            return None
        record = self._rows[index.row()]
        value = self._viewmodel.row_values(record).get(self._columns[index.column()])
        return "" if value is None else value

    def flags(self, index: QModelIndex) -> Qt.ItemFlag:
        if not index.isValid():
            return Qt.ItemFlag.NoItemFlags
        flags = Qt.ItemFlag.ItemIsEnabled | Qt.ItemFlag.ItemIsSelectable
        if self._columns[index.column()] in self._viewmodel.config.editable_fields:
            flags |= Qt.ItemFlag.ItemIsEditable
        return flags

    def setData(self, index: QModelIndex, value: Any, role: int = Qt.ItemDataRole.EditRole) -> bool:  # noqa: N802
        if not index.isValid() or role != Qt.ItemDataRole.EditRole:
            return False
        record = self._rows[index.row()]
        try:
            self._viewmodel.edit(record.id, self._columns[index.column()], value)
        except UnknownFieldError as exc:
            logger.warning("Rejected edit: %s", exc)
            return False
        self.dataChanged.emit(index, index, [Qt.ItemDataRole.DisplayRole, Qt.ItemDataRole.EditRole])
        return True

    def sort(self, column: int, order: Qt.SortOrder = Qt.SortOrder.AscendingOrder) -> None:
        if not (0 <= column < len(self._columns)):
            return
        if self._columns[column] not in self._viewmodel.config.sortable_fields:
            logger.debug("Ignoring sort request on %s", self._columns[column])
            return
        direction = "asc" if order == Qt.SortOrder.AscendingOrder else "desc"
        self._viewmodel.sort(self._columns[column], direction)

    def _on_view_changed(self, result: PageResult) -> None:
        self.beginResetModel()
        self._rows = list(result.items)
        self.endResetModel()
