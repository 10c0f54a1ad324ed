"""Logging configuration for the registry application."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def parse_log_level(value: str | int) -> int:
    """
    Convert a level name such as ``"debug"`` or a numeric level to an int.

    Raises
    ------
    ValueError
        If the name is not a known logging level.
    """
    if isinstance(value, int):
        return value
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {value!r}")
    return level


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
    """
    Configure root logging once for the process.

    Repeated calls only adjust the level; the stream handler is installed once.

    Returns
    -------
    logging.Logger
        The root logger.
    """
    root = logging.getLogger()
    resolved = parse_log_level(level)
    root.setLevel(resolved)

    if getattr(root, "_roster_logging_configured", False):
        return root

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    root._roster_logging_configured = True  # type: ignore[attr-defined]
    return root
