"""
Add Child dialog (UI only).

Purpose
-------
- Collect the fields of a new child record.
- Check the age with the engine's parser before closing, so that an invalid
  age keeps the form open for another try.

Notes
-----
- The dialog does not touch the store. The caller submits the result.
"""

from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLineEdit,
    QMessageBox,
    QVBoxLayout,
    QWidget,
)

from roster_engine.record_store.errors import InvalidInputError
from roster_engine.record_store.input_rules import parse_age


@dataclass(frozen=True, slots=True)
class AddChildResult:
    """
    Raw form values returned by AddChildDialog.

    Attributes
    ----------
    name:
        Child name as typed.
    age_text:
        Age text that has already passed `parse_age`.
    appearance:
        Free-form text.
    favorite_color:
        Free-form text.
    comments:
        Free-form text.
    """

    name: str
    age_text: str
    appearance: str
    favorite_color: str
    comments: str


class AddChildDialog(QDialog):
    """Modal form for a new child of one employee."""

    def __init__(self, parent: QWidget | None = None, *, employee_name: str = "") -> None:
        super().__init__(parent)
        title = "Add Child" if not employee_name else f"Add Child: {employee_name}"
        self.setWindowTitle(title)
        self.setModal(True)

        self._result: AddChildResult | None = None

        root = QVBoxLayout(self)
        root.setContentsMargins(12, 12, 12, 12)

        form = QFormLayout()
        self.name_edit = QLineEdit()
        self.age_edit = QLineEdit()
        self.age_edit.setPlaceholderText("Whole number, e.g. 7")
        self.appearance_edit = QLineEdit()
        self.color_edit = QLineEdit()
        self.comments_edit = QLineEdit()

        form.addRow("Name", self.name_edit)
        form.addRow("Age", self.age_edit)
        form.addRow("Appearance", self.appearance_edit)
        form.addRow("Favorite Color", self.color_edit)
        form.addRow("Comments", self.comments_edit)
        root.addLayout(form)

        self.buttons = QDialogButtonBox(QDialogButtonBox.Cancel)
        self.btn_add = self.buttons.addButton("Add", QDialogButtonBox.AcceptRole)
        self.buttons.rejected.connect(self.reject)
        self.btn_add.clicked.connect(self._on_add)
        root.addWidget(self.buttons)

    def result_value(self) -> AddChildResult | None:
        return self._result

    def _on_add(self) -> None:
        age_text = self.age_edit.text()
        try:
            parse_age(age_text)
        except InvalidInputError as exc:
            QMessageBox.critical(self, "Add Child", str(exc))
            self.age_edit.setFocus()
            return

        self._result = AddChildResult(
            name=self.name_edit.text(),
            age_text=age_text,
            appearance=self.appearance_edit.text(),
            favorite_color=self.color_edit.text(),
            comments=self.comments_edit.text(),
        )
        self.accept()
