"""
Children screen.

Lists one employee's children (name and age) and offers the Add Child action.
"""

from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from gui.adapters.record_store_adapter import RecordStoreAdapter
from gui.dialogs.add_child_dialog import AddChildDialog


class ChildrenScreen(QWidget):
    """Screen listing the children of the active employee."""

    back_requested = Signal()
    child_selected = Signal(int, int)  # employee_ref, child_index

    def __init__(self, store: RecordStoreAdapter) -> None:
        super().__init__()
        self._store = store
        self._employee_ref: int | None = None
        self._store.children_changed.connect(self._on_children_changed)

        root = QVBoxLayout(self)
        root.setContentsMargins(12, 12, 12, 12)

        top = QHBoxLayout()
        self.title = QLabel("")
        f = self.title.font()
        f.setBold(True)
        self.title.setFont(f)
        self.btn_back = QPushButton("Back")
        self.btn_back.clicked.connect(self.back_requested)
        top.addWidget(self.title, 1)
        top.addWidget(self.btn_back)
        root.addLayout(top)

        self.list = QListWidget()
        self.list.itemClicked.connect(self._on_item_clicked)
        root.addWidget(self.list, 1)

        self.btn_add = QPushButton("Add child")
        self.btn_add.clicked.connect(self._add_child)
        root.addWidget(self.btn_add)

    def set_employee(self, employee_ref: int) -> None:
        self._employee_ref = employee_ref
        self.refresh()

    def refresh(self) -> None:
        self.list.clear()
        if self._employee_ref is None:
            self.title.setText("")
            return

        employee = self._store.employee(self._employee_ref)
        self.title.setText("" if employee is None else f"Children of {employee.name}")

        for index, child in enumerate(self._store.children(self._employee_ref)):
            item = QListWidgetItem(f"{child.name}    {child.age}")
            item.setData(Qt.UserRole, index)
            self.list.addItem(item)

    def _on_children_changed(self, employee_ref: int) -> None:
        if employee_ref == self._employee_ref:
            self.refresh()

    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        if self._employee_ref is None:
            return
        self.child_selected.emit(self._employee_ref, int(item.data(Qt.UserRole)))

    def _add_child(self) -> None:
        if self._employee_ref is None:
            return
        employee = self._store.employee(self._employee_ref)
        dlg = AddChildDialog(self, employee_name="" if employee is None else employee.name)
        if not dlg.exec():
            return
        res = dlg.result_value()
        if res is None:
            return

        added = self._store.add_child(
            self._employee_ref,
            name=res.name,
            age_text=res.age_text,
            appearance=res.appearance,
            favorite_color=res.favorite_color,
            comments=res.comments,
        )
        if added:
            QMessageBox.information(self, "Child Added", "Child has been successfully added.")
