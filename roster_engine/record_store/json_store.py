"""
JSON file implementation of RecordStore.

This module owns the on-disk persistence format for employees and children.

Design constraints
------------------
- The backing file is read in full on load and rewritten in full on save.
- Writes go to a sibling temp file that then replaces the backing file.
- Load and save failures are logged and reported through the return value;
  they never propagate to the caller.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Sequence

from ..data_models import Child, Employee, employees_from_payload, employees_to_payload
from ..paths import resolve_data_file
from .api import EmployeeRef, RecordStore
from .errors import RecordDecodeError, RecordIOError, RecordStoreError, UnknownEmployeeError
from .input_rules import parse_age

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RecordWriteOptions:
    """Options controlling backing file serialization."""

    pretty: bool = True
    indent: int = 2
    ensure_ascii: bool = False


def read_json_document(json_path: Path) -> Any:
    """
    Read and decode a JSON document from disk.

    Raises
    ------
    RecordIOError
        If the file cannot be read.
    RecordDecodeError
        If the contents are not valid UTF-8 JSON.
    """
    try:
        raw = json_path.read_bytes()
    except OSError as exc:
        raise RecordIOError(f"Failed to read data file: {json_path} ({exc!s})") from exc

    try:
        return json.loads(raw.decode("utf-8"))
    except ValueError as exc:
        raise RecordDecodeError(f"Invalid JSON in data file: {json_path} ({exc!s})") from exc


def write_json_atomic(
    json_path: Path,
    payload: Any,
    *,
    options: RecordWriteOptions | None = None,
) -> None:
    """
    Write JSON to disk through a temp file and replace.

    Raises
    ------
    RecordIOError
        If the payload cannot be encoded or the file cannot be written.
    """
    opts = options or RecordWriteOptions()

    try:
        if opts.pretty:
            text = json.dumps(payload, indent=opts.indent, ensure_ascii=opts.ensure_ascii) + "\n"
        else:
            text = json.dumps(payload, separators=(",", ":"), ensure_ascii=opts.ensure_ascii)
        data = text.encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise RecordIOError(f"Failed to encode records for {json_path} ({exc!s})") from exc

    temp_path = json_path.with_suffix(json_path.suffix + ".tmp")
    try:
        json_path.parent.mkdir(parents=True, exist_ok=True)
        with temp_path.open("wb") as handle:
            handle.write(data)
        os.replace(temp_path, json_path)
    except OSError as exc:
        try:
            temp_path.unlink(missing_ok=True)
        except OSError:
            pass
        raise RecordIOError(f"Failed to write data file: {json_path} ({exc!s})") from exc


class JsonRecordStore(RecordStore):
    """
    RecordStore backed by a single JSON document.

    Parameters
    ----------
    data_file:
        Path to the backing file. It need not exist yet.
    options:
        Serialization options for saves.
    """

    def __init__(self, data_file: Path, *, options: RecordWriteOptions | None = None) -> None:
        self._data_file = data_file
        self._options = options or RecordWriteOptions()
        self._employees: list[Employee] = []
        self._is_loaded = False

    @property
    def data_file(self) -> Path:
        return self._data_file

    @property
    def is_loaded(self) -> bool:
        return self._is_loaded

    def load(self) -> bool:
        """Replace the collection with the backing file's contents."""
        try:
            payload = read_json_document(self._data_file)
            try:
                employees = employees_from_payload(payload)
            except ValueError as exc:
                raise RecordDecodeError(
                    f"Unexpected record shape in data file: {self._data_file} ({exc!s})"
                ) from exc
        except RecordStoreError as exc:
            logger.error("Error loading records: %s", exc)
            return False

        self._employees = employees
        self._is_loaded = True
        logger.debug("Loaded %d employee(s) from %s", len(employees), self._data_file)
        return True

    def save(self) -> bool:
        """Overwrite the backing file with the full collection."""
        try:
            write_json_atomic(
                self._data_file, employees_to_payload(self._employees), options=self._options
            )
        except RecordStoreError as exc:
            logger.error("Error saving records: %s", exc)
            return False

        logger.debug("Saved %d employee(s) to %s", len(self._employees), self._data_file)
        return True

    def list_employees(self) -> tuple[Employee, ...]:
        return tuple(self._employees)

    def get_employee(self, employee_ref: EmployeeRef) -> Employee:
        if not 0 <= employee_ref < len(self._employees):
            raise UnknownEmployeeError(f"No employee at position {employee_ref}.")
        return self._employees[employee_ref]

    def children(self, employee_ref: EmployeeRef) -> tuple[Child, ...]:
        return self.get_employee(employee_ref).children

    def add_employee(self, name: str, child_names: Sequence[str]) -> EmployeeRef:
        employee = Employee(name=name, children=tuple(Child(name=n) for n in child_names))
        self._employees.append(employee)
        logger.info("Added employee %r with %d child(ren)", name, employee.child_count)
        self.save()
        return len(self._employees) - 1

    def add_child(
        self,
        employee_ref: EmployeeRef,
        name: str,
        age: str | int,
        appearance: str = "",
        favorite_color: str = "",
        comments: str = "",
    ) -> Child:
        employee = self.get_employee(employee_ref)
        child = Child(
            name=name,
            age=parse_age(age),
            appearance=appearance,
            favorite_color=favorite_color,
            comments=comments,
        )
        self._employees[employee_ref] = replace(employee, children=(*employee.children, child))
        logger.info("Added child %r to employee %r", name, employee.name)
        self.save()
        return child


def open_record_store(data_file: Path | str | None = None) -> JsonRecordStore:
    """
    Create a store for the resolved backing file and load it.

    A missing or malformed backing file is tolerated; the store then starts
    empty and the failure is logged.

    Parameters
    ----------
    data_file:
        Optional override for the backing file path.

    Returns
    -------
    JsonRecordStore
        Store with the file's contents loaded when available.
    """
    store = JsonRecordStore(resolve_data_file(data_file))
    store.load()
    return store
