"""
RecordStore public API.

This module defines the persistence surface that the presentation layer and
the command line are allowed to call. Callers must not touch the backing file
directly and must not depend on its encoding; they speak only in typed domain
objects.

Notes
-----
- Employees are addressed by position. Positions are stable because the
  collection is append-only.
- Every mutator persists the full collection before returning.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from ..data_models import Child, Employee

EmployeeRef = int


class RecordStore(Protocol):
    """
    Persistence API for employees and their children.

    There is no update or delete operation for either record type.
    """

    @property
    def is_loaded(self) -> bool:
        """True once a load from the backing file has succeeded."""
        raise NotImplementedError

    def load(self) -> bool:
        """
        Replace the in-memory collection with the backing file's contents.

        Returns
        -------
        bool
            True on success. On failure the collection is left unchanged.
        """
        raise NotImplementedError

    def save(self) -> bool:
        """
        Overwrite the backing file with the full in-memory collection.

        Returns
        -------
        bool
            True on success. On failure the in-memory collection is kept.
        """
        raise NotImplementedError

    def list_employees(self) -> Sequence[Employee]:
        """Return the employee collection in insertion order."""
        raise NotImplementedError

    def get_employee(self, employee_ref: EmployeeRef) -> Employee:
        """
        Return the employee at `employee_ref`.

        Raises
        ------
        UnknownEmployeeError
            If the reference is out of range.
        """
        raise NotImplementedError

    def children(self, employee_ref: EmployeeRef) -> Sequence[Child]:
        """
        Return one employee's children in insertion order.

        Raises
        ------
        UnknownEmployeeError
            If the reference is out of range.
        """
        raise NotImplementedError

    def add_employee(self, name: str, child_names: Sequence[str]) -> EmployeeRef:
        """
        Append an employee with children seeded from `child_names`.

        Returns
        -------
        EmployeeRef
            Reference of the new employee.
        """
        raise NotImplementedError

    def add_child(
        self,
        employee_ref: EmployeeRef,
        name: str,
        age: str | int,
        appearance: str = "",
        favorite_color: str = "",
        comments: str = "",
    ) -> Child:
        """
        Append a child to an employee.

        Raises
        ------
        UnknownEmployeeError
            If the reference is out of range.
        InvalidInputError
            If `age` does not parse as an integer. Nothing is mutated or saved.
        """
        raise NotImplementedError
