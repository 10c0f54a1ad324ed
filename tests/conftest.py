"""Shared pytest fixtures."""

from __future__ import annotations

import logging
from typing import Iterator

import pytest


@pytest.fixture(autouse=True)
def _reset_root_logging() -> Iterator[None]:
    """Drop handlers installed by setup_logging so they never outlive a test's streams."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
    if hasattr(root, "_roster_logging_configured"):
        del root._roster_logging_configured  # type: ignore[attr-defined]
