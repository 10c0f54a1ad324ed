"""Qt adapter for the engine RecordStore.

The engine owns persistence. Screens talk to this adapter instead of the store
so that they never see engine exceptions or the backing file.

Threading model
--------------
Calls run synchronously on the GUI thread. Each operation reads or writes one
small JSON file, and the user waits for it to finish before continuing.
"""

from __future__ import annotations

import logging
from typing import Sequence

from PySide6.QtCore import QObject, Signal

from roster_engine.data_models import Child, Employee
from roster_engine.record_store.api import EmployeeRef, RecordStore
from roster_engine.record_store.errors import InvalidInputError, UnknownEmployeeError
from roster_engine.record_store.input_rules import split_names

logger = logging.getLogger(__name__)


class RecordStoreAdapter(QObject):
    """Qt adapter that forwards screen requests to a RecordStore."""

    employees_changed = Signal()
    children_changed = Signal(int)  # employee_ref
    error = Signal(str)  # user-visible message

    def __init__(self, store: RecordStore, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._store = store

    def reload(self) -> None:
        """Reload from disk. A failed reload keeps the current records."""
        self._store.load()
        self.employees_changed.emit()

    def employees(self) -> Sequence[Employee]:
        return self._store.list_employees()

    def employee(self, employee_ref: EmployeeRef) -> Employee | None:
        try:
            return self._store.get_employee(employee_ref)
        except UnknownEmployeeError as exc:
            self.error.emit(str(exc))
            return None

    def children(self, employee_ref: EmployeeRef) -> Sequence[Child]:
        try:
            return self._store.children(employee_ref)
        except UnknownEmployeeError as exc:
            self.error.emit(str(exc))
            return ()

    def add_employee(self, name: str, children_text: str) -> bool:
        """Add an employee from raw form text. Children are comma-separated."""
        self._store.add_employee(name, split_names(children_text))
        self.employees_changed.emit()
        return True

    def add_child(
        self,
        employee_ref: EmployeeRef,
        *,
        name: str,
        age_text: str,
        appearance: str,
        favorite_color: str,
        comments: str,
    ) -> bool:
        """Add a child from raw form text. Returns False if nothing was added."""
        try:
            self._store.add_child(
                employee_ref,
                name,
                age_text,
                appearance=appearance,
                favorite_color=favorite_color,
                comments=comments,
            )
        except (InvalidInputError, UnknownEmployeeError) as exc:
            logger.debug("Rejected child for employee %s: %s", employee_ref, exc)
            self.error.emit(str(exc))
            return False

        self.children_changed.emit(employee_ref)
        return True
