"""
Employee list screen.

Shows every employee with a child count and offers the Add Employee action.
Selecting an employee asks the window to open that employee's children.
"""

from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QListWidget,
    QListWidgetItem,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from gui.adapters.record_store_adapter import RecordStoreAdapter
from gui.dialogs.add_employee_dialog import AddEmployeeDialog


def employee_row_text(name: str, child_count: int) -> str:
    return f"{name}\n   {child_count} children"


class EmployeeListScreen(QWidget):
    """Main screen: the employee collection."""

    employee_selected = Signal(int)  # employee_ref

    def __init__(self, store: RecordStoreAdapter) -> None:
        super().__init__()
        self._store = store
        self._store.employees_changed.connect(self.refresh)

        root = QHBoxLayout(self)
        root.setContentsMargins(12, 12, 12, 12)

        self.list = QListWidget()
        self.list.itemClicked.connect(self._on_item_clicked)
        root.addWidget(self.list, 1)

        side = QVBoxLayout()
        self.btn_add = QPushButton("Add employee")
        self.btn_add.clicked.connect(self._add_employee)
        side.addWidget(self.btn_add)
        side.addStretch(1)
        root.addLayout(side)

        self.refresh()

    def refresh(self) -> None:
        self.list.clear()
        for ref, employee in enumerate(self._store.employees()):
            item = QListWidgetItem(employee_row_text(employee.name, employee.child_count))
            item.setData(Qt.UserRole, ref)
            self.list.addItem(item)

    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        self.employee_selected.emit(int(item.data(Qt.UserRole)))

    def _add_employee(self) -> None:
        dlg = AddEmployeeDialog(self)
        if not dlg.exec():
            return
        res = dlg.result_value()
        if res is None:
            return

        if self._store.add_employee(res.name, res.children_text):
            QMessageBox.information(self, "Employee Added", "Employee has been successfully added.")
