"""Domain exceptions for the record store."""

from __future__ import annotations

from ..errors import RosterError


class RecordStoreError(RosterError):
    """Base error for record store operations."""


class UnknownEmployeeError(RecordStoreError):
    """Raised when an employee reference does not point at a stored employee."""


class InvalidInputError(RecordStoreError):
    """Raised when user-supplied text cannot be turned into a field value."""


class RecordIOError(RecordStoreError):
    """Raised when the backing file cannot be read or written."""


class RecordDecodeError(RecordStoreError):
    """Raised when the backing file does not decode into employee records."""
