"""
Domain exceptions for the employee children registry.

Notes
-----
Engine code raises a domain exception for every expected failure mode. The
record store catches persistence failures itself; input errors propagate to
the caller.
"""

from __future__ import annotations


class RosterError(RuntimeError):
    """Base exception for all registry domain failures."""
