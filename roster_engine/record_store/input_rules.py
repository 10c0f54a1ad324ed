"""
Input parsing for record store fields.

This module turns raw form text into field values. It performs no file access
and never mutates the store.

Invariants
----------
- Name lists are comma-separated; each segment is stripped of surrounding
  whitespace and empty segments are kept as empty names.
- Ages are an optional sign followed by ASCII decimal digits. Surrounding
  whitespace, underscores, and non-ASCII digits are rejected.
- Ages fit a signed 64-bit integer.
"""

from __future__ import annotations

import re

from .errors import InvalidInputError

_AGE_PATTERN = re.compile(r"[+-]?[0-9]+")

AGE_MIN = -(2**63)
AGE_MAX = 2**63 - 1


def split_names(text: str) -> list[str]:
    """
    Split comma-separated names.

    Parameters
    ----------
    text:
        Raw text such as ``"Anna, Bob ,  Cy"``.

    Returns
    -------
    list[str]
        Stripped names in input order. ``""`` yields ``[""]``.
    """
    return [part.strip() for part in text.split(",")]


def parse_age(value: str | int) -> int:
    """
    Parse an age entered as text.

    Parameters
    ----------
    value:
        Age text from a form, or an already parsed integer.

    Returns
    -------
    int
        Parsed age within the signed 64-bit range.

    Raises
    ------
    InvalidInputError
        If the text is not an integer or falls outside the 64-bit range.
    """
    if isinstance(value, bool):
        raise InvalidInputError("Invalid age")
    if isinstance(value, int):
        age = value
    elif isinstance(value, str) and _AGE_PATTERN.fullmatch(value) is not None:
        try:
            age = int(value)
        except ValueError as exc:
            # Digit strings past the interpreter's int conversion limit.
            raise InvalidInputError("Invalid age") from exc
    else:
        raise InvalidInputError("Invalid age")
    if not AGE_MIN <= age <= AGE_MAX:
        raise InvalidInputError("Invalid age")
    return age
