"""Data models for the employee children registry.

This module defines the typed, in-memory representation of the records held by
the record store, plus their mapping to and from the JSON backing file.

The models in this module are intentionally standard-library-only (dataclasses)
so that the store stays free of any GUI dependency.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Self

EMPLOYEE_NAME_KEY = "name"
EMPLOYEE_CHILDREN_KEY = "children"

CHILD_NAME_KEY = "name"
CHILD_AGE_KEY = "age"
CHILD_APPEARANCE_KEY = "appearance"
CHILD_FAVORITE_COLOR_KEY = "favoriteColor"
CHILD_COMMENTS_KEY = "comments"


def _lookup(payload: Mapping[str, Any], key: str) -> Any:
    """
    Return the value stored under `key`, matching key names case-insensitively.

    An exact match wins over a case-insensitive one. Missing keys yield None.
    """
    if key in payload:
        return payload[key]
    folded = key.casefold()
    for candidate, value in payload.items():
        if isinstance(candidate, str) and candidate.casefold() == folded:
            return value
    return None


def _str_field(payload: Mapping[str, Any], key: str, *, context: str) -> str:
    value = _lookup(payload, key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{context}.{key} must be a string, got {type(value).__name__}")
    return value


def _int_field(payload: Mapping[str, Any], key: str, *, context: str) -> int:
    value = _lookup(payload, key)
    if value is None:
        return 0
    # bool is an int subclass but never a valid age.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{context}.{key} must be an integer, got {type(value).__name__}")
    return value


@dataclass(frozen=True, slots=True)
class Child:
    """
    A child record owned by exactly one employee.

    Attributes
    ----------
    name:
        User-supplied name. May be empty.
    age:
        Age in years as entered by the user. No range validation.
    appearance:
        Free-form description.
    favorite_color:
        Free-form text.
    comments:
        Free-form text.
    """

    name: str
    age: int = 0
    appearance: str = ""
    favorite_color: str = ""
    comments: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable payload."""
        return {
            CHILD_NAME_KEY: self.name,
            CHILD_AGE_KEY: self.age,
            CHILD_APPEARANCE_KEY: self.appearance,
            CHILD_FAVORITE_COLOR_KEY: self.favorite_color,
            CHILD_COMMENTS_KEY: self.comments,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> Self:
        """
        Construct a :class:`Child` from a mapping.

        Absent fields decode to an empty string or zero.

        Raises
        ------
        ValueError
            If the payload is not a mapping or a field has the wrong type.
        """
        if not isinstance(payload, Mapping):
            raise ValueError(f"child must be an object, got {type(payload).__name__}")
        return cls(
            name=_str_field(payload, CHILD_NAME_KEY, context="child"),
            age=_int_field(payload, CHILD_AGE_KEY, context="child"),
            appearance=_str_field(payload, CHILD_APPEARANCE_KEY, context="child"),
            favorite_color=_str_field(payload, CHILD_FAVORITE_COLOR_KEY, context="child"),
            comments=_str_field(payload, CHILD_COMMENTS_KEY, context="child"),
        )


@dataclass(frozen=True, slots=True)
class Employee:
    """
    An employee and the ordered list of their children.

    Notes
    -----
    Records are immutable; the store appends a child by replacing the employee
    with a copy whose `children` tuple is one longer. Insertion order is
    display order.
    """

    name: str
    children: tuple[Child, ...] = ()

    @property
    def child_count(self) -> int:
        return len(self.children)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable payload."""
        return {
            EMPLOYEE_NAME_KEY: self.name,
            EMPLOYEE_CHILDREN_KEY: [c.to_dict() for c in self.children],
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> Self:
        """
        Construct an :class:`Employee` from a mapping.

        A missing or null `children` value decodes to an empty tuple.

        Raises
        ------
        ValueError
            If the payload shape does not match an employee record.
        """
        if not isinstance(payload, Mapping):
            raise ValueError(f"employee must be an object, got {type(payload).__name__}")

        raw_children = _lookup(payload, EMPLOYEE_CHILDREN_KEY)
        if raw_children is None:
            raw_children = []
        if not isinstance(raw_children, list):
            raise ValueError("employee.children must be a list")

        return cls(
            name=_str_field(payload, EMPLOYEE_NAME_KEY, context="employee"),
            children=tuple(Child.from_dict(c) for c in raw_children),
        )


def employees_to_payload(employees: list[Employee] | tuple[Employee, ...]) -> list[dict[str, Any]]:
    """Convert an employee collection to the backing file's JSON shape."""
    return [e.to_dict() for e in employees]


def employees_from_payload(payload: Any) -> list[Employee]:
    """
    Decode the backing file's JSON document into employees.

    A top-level null decodes to an empty collection.

    Raises
    ------
    ValueError
        If the document is not a list of employee objects.
    """
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise ValueError(f"document must be a list of employees, got {type(payload).__name__}")
    return [Employee.from_dict(item) for item in payload]
