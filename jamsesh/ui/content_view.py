"""
Root view listing the stored items.

Shows every Item's timestamp in a table and lets the user add a new item
stamped with the current time or delete the selected rows.
"""
import logging
from datetime import datetime

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QMessageBox, QPushButton, QTableView, QToolBar, QVBoxLayout, QWidget

from .. import config
from ..models import AppContext, ContainerError, Item

logger = logging.getLogger(__name__)

ID_COLUMN_INDEX = 0          # hidden persistent id
TIMESTAMP_COLUMN_INDEX = 1


class ContentView(QWidget):
    def __init__(self, parent=None, cxt: AppContext | None = None):
        super().__init__(parent)
        self._cxt = None

# ===== UI set up==============================================================
        lay = QVBoxLayout(self)
        lay.setContentsMargins(0, 0, 0, 0)

        header = QToolBar("Items", self)
        lay.addWidget(header)
        self.btn_add = QPushButton("Add Item", self); header.addWidget(self.btn_add)
        self.btn_delete = QPushButton("Delete Selected", self); header.addWidget(self.btn_delete)
        self.btn_add.setToolTip("Store a new item stamped with the current time")
        self.btn_add.clicked.connect(self.add_item)
        self.btn_delete.clicked.connect(self.delete_selected)

        self.table_view = QTableView(self)
        self.table_view.setSelectionBehavior(QTableView.SelectRows)
        self.table_view.setSelectionMode(QTableView.ExtendedSelection)
        self.table_view.setEditTriggers(QTableView.NoEditTriggers)
        self.table_view.horizontalHeader().setStretchLastSection(True)
        self.table_view.verticalHeader().setVisible(False)
        lay.addWidget(self.table_view, 1)

        self.cxt = cxt if cxt is not None else AppContext()

    @property
    def cxt(self) -> AppContext:
        return self._cxt

    @cxt.setter
    def cxt(self, new_cxt: AppContext):
        self._cxt = new_cxt
        self._bind_model()

    @property
    def container(self):
        return self._cxt.container if self._cxt else None

    def _bind_model(self):
        if self._cxt is None or not self._cxt.has_container:
            self.table_view.setModel(None)
            self.btn_add.setEnabled(False)
            self.btn_delete.setEnabled(False)
            return
        model = self.container.table_model(Item)
        model.setHeaderData(TIMESTAMP_COLUMN_INDEX, Qt.Horizontal, "Timestamp")
        self.table_view.setModel(model)
        self.table_view.setColumnHidden(ID_COLUMN_INDEX, True)
        self.btn_add.setEnabled(True)
        self.btn_delete.setEnabled(True)

    # ------------------------------------------------------------------
    # item actions
    # ------------------------------------------------------------------
    def row_count(self) -> int:
        model = self.table_view.model()
        return model.rowCount() if model is not None else 0

    def item_at(self, row: int) -> Item | None:
        model = self.table_view.model()
        if model is None:
            return None
        pid = model.data(model.index(row, ID_COLUMN_INDEX))
        if pid is None:
            return None
        return self.container.fetch_by_id(Item, int(pid))

    def display_text(self, row: int) -> str:
        """Timestamp of the given row formatted for display."""
        item = self.item_at(row)
        if item is None:
            return ""
        return item.timestamp.strftime(config.con_dict["timestamp_format"])

    def add_item(self):
        if self.container is None:
            return None
        item = Item(timestamp=datetime.now())
        try:
            self.container.insert(item)
        except ContainerError as e:
            logger.error(f"Failed to add item: {e}")
            QMessageBox.warning(self, "Add Item", f"Failed to add item: {e}")
            return None
        logger.info(f"Added item {item.persistent_id} at {item.timestamp.isoformat()}")
        return item

    def delete_items(self, rows) -> int:
        """Delete the items shown at *rows*. Returns how many were removed."""
        items = [self.item_at(r) for r in sorted(set(rows))]
        removed = 0
        for item in items:
            if item is None:
                continue
            self.container.delete(item)
            removed += 1
        logger.info(f"Deleted {removed} item(s)")
        return removed

    def _selected_rows(self) -> list[int]:
        sel = self.table_view.selectionModel()
        if sel is None:
            return []
        return [idx.row() for idx in sel.selectedRows(ID_COLUMN_INDEX)]

    def delete_selected(self):
        rows = self._selected_rows()
        if not rows:
            QMessageBox.information(self, "No Selection", "Select one or more rows to delete.")
            return

        reply = QMessageBox.question(
            self,
            "Confirm Delete",
            f"Delete {len(rows)} item(s)? This cannot be undone.",
            QMessageBox.Yes | QMessageBox.No
        )
        if reply != QMessageBox.Yes:
            return

        try:
            self.delete_items(rows)
        except ContainerError as e:
            logger.error(f"Failed to delete items: {e}")
            QMessageBox.warning(self, "Delete Errors", f"Failed to delete: {e}")
