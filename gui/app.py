"""
Employee children registry GUI app.

Stacked screens (employees, children, child details) backed by one RecordStore.
"""

from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication, QMessageBox, QStackedWidget, QVBoxLayout, QWidget

from gui.adapters.record_store_adapter import RecordStoreAdapter
from gui.screens.child_details_screen import ChildDetailsScreen
from gui.screens.children_screen import ChildrenScreen
from gui.screens.employee_list_screen import EmployeeListScreen
from roster_engine.record_store.api import RecordStore
from roster_engine.record_store.json_store import open_record_store


class AppWindow(QWidget):
    """
    Main window for the registry GUI.

    Responsibilities
    ----------------
    - Host the employee, children and child details screens
    - Route navigation between them
    - Surface store errors to the user
    """

    def __init__(self, store: RecordStore) -> None:
        """
        Initialize the main window around an already loaded store.

        Parameters
        ----------
        store:
            Record store owned by the application root.
        """
        super().__init__()
        self.setWindowTitle("Employees' Children")
        self.resize(1280, 720)

        self._adapter = RecordStoreAdapter(store, parent=self)
        self._adapter.error.connect(self._on_store_error)

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)

        self._stack = QStackedWidget()
        self.employee_screen = EmployeeListScreen(self._adapter)
        self.children_screen = ChildrenScreen(self._adapter)
        self.details_screen = ChildDetailsScreen(self._adapter)
        for screen in (self.employee_screen, self.children_screen, self.details_screen):
            self._stack.addWidget(screen)
        root.addWidget(self._stack, 1)

        self.employee_screen.employee_selected.connect(self.show_children)
        self.children_screen.back_requested.connect(self.show_main)
        self.children_screen.child_selected.connect(self.show_child_details)
        self.details_screen.back_requested.connect(self.show_children)

        self._stack.setCurrentWidget(self.employee_screen)

    def show_main(self) -> None:
        # Re-read the backing file before rendering the employee list.
        self._adapter.reload()
        self._stack.setCurrentWidget(self.employee_screen)

    def show_children(self, employee_ref: int) -> None:
        self.children_screen.set_employee(employee_ref)
        self._stack.setCurrentWidget(self.children_screen)

    def show_child_details(self, employee_ref: int, child_index: int) -> None:
        self.details_screen.show_child(employee_ref, child_index)
        self._stack.setCurrentWidget(self.details_screen)

    def _on_store_error(self, message: str) -> None:
        QMessageBox.critical(self, "Error", message)


def main(data_file: Path | None = None) -> int:
    """
    Run the registry GUI application.

    Parameters
    ----------
    data_file:
        Optional override for the backing file path.

    Returns
    -------
    int
        Qt application exit code.
    """
    store = open_record_store(data_file)

    app = QApplication(sys.argv)
    w = AppWindow(store)
    w.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
