"""Read-only details of one child."""

from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from gui.adapters.record_store_adapter import RecordStoreAdapter


class ChildDetailsScreen(QWidget):
    """Screen showing every field of the selected child."""

    back_requested = Signal(int)  # employee_ref

    def __init__(self, store: RecordStoreAdapter) -> None:
        super().__init__()
        self._store = store
        self._employee_ref: int | None = None

        root = QVBoxLayout(self)
        root.setContentsMargins(12, 12, 12, 12)

        header = QHBoxLayout()
        self.btn_back = QPushButton("Back")
        self.btn_back.clicked.connect(self._on_back)
        self.header_label = QLabel("")
        header.addWidget(self.btn_back)
        header.addWidget(self.header_label, 1)
        root.addLayout(header)

        self.name_label = QLabel("")
        self.age_label = QLabel("")
        self.appearance_label = QLabel("")
        self.color_label = QLabel("")
        self.comments_label = QLabel("")
        self.comments_label.setWordWrap(True)

        self._field_labels = (
            self.name_label,
            self.age_label,
            self.appearance_label,
            self.color_label,
            self.comments_label,
        )
        for label in self._field_labels:
            root.addWidget(label)
        root.addStretch(1)

    def show_child(self, employee_ref: int, child_index: int) -> None:
        self._employee_ref = employee_ref
        children = self._store.children(employee_ref)
        if not 0 <= child_index < len(children):
            self.header_label.setText("Select a child to view details.")
            for label in self._field_labels:
                label.setText("")
            return

        child = children[child_index]
        self.header_label.setText(f"Details of {child.name}:")
        self.name_label.setText(f"Name: {child.name}")
        self.age_label.setText(f"Age: {child.age}")
        self.appearance_label.setText(f"Appearance: {child.appearance}")
        self.color_label.setText(f"Favorite color: {child.favorite_color}")
        self.comments_label.setText(f"Comments: {child.comments}")

    def _on_back(self) -> None:
        if self._employee_ref is not None:
            self.back_requested.emit(self._employee_ref)
