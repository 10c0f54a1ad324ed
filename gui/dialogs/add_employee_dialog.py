"""
Add Employee dialog (UI only).

Collects an employee name and a comma-separated list of child names. The
caller splits the list and talks to the store.
"""

from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLineEdit,
    QVBoxLayout,
    QWidget,
)


@dataclass(frozen=True, slots=True)
class AddEmployeeResult:
    """
    Raw form values returned by AddEmployeeDialog.

    Attributes
    ----------
    name:
        Employee name as typed. May be empty.
    children_text:
        Comma-separated child names as typed.
    """

    name: str
    children_text: str


class AddEmployeeDialog(QDialog):
    """Modal form for a new employee."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Add Employee")
        self.setModal(True)

        self._result: AddEmployeeResult | None = None

        root = QVBoxLayout(self)
        root.setContentsMargins(12, 12, 12, 12)

        form = QFormLayout()
        self.name_edit = QLineEdit()
        self.children_edit = QLineEdit()
        self.children_edit.setPlaceholderText("Example: Anna, Bob, Cy")
        form.addRow("Name", self.name_edit)
        form.addRow("Children (comma-separated)", self.children_edit)
        root.addLayout(form)

        self.buttons = QDialogButtonBox(QDialogButtonBox.Cancel)
        self.btn_submit = self.buttons.addButton("Submit", QDialogButtonBox.AcceptRole)
        self.buttons.rejected.connect(self.reject)
        self.btn_submit.clicked.connect(self._on_submit)
        root.addWidget(self.buttons)

    def result_value(self) -> AddEmployeeResult | None:
        return self._result

    def _on_submit(self) -> None:
        self._result = AddEmployeeResult(
            name=self.name_edit.text(),
            children_text=self.children_edit.text(),
        )
        self.accept()
