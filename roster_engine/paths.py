"""
Backing file location policy.

The registry keeps all of its records in one JSON document. By convention the
document is `data.json` in the current working directory; callers may point the
store at another file (tests, the command line `--data-file` option).
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_FILE_NAME = "data.json"


def default_data_file() -> Path:
    """
    Return the conventional backing file path.

    Returns
    -------
    pathlib.Path
        `data.json` under the current working directory.
    """
    return Path.cwd() / DEFAULT_DATA_FILE_NAME


def resolve_data_file(data_file: Path | str | None = None) -> Path:
    """
    Resolve the backing file path from an optional override.

    Parameters
    ----------
    data_file:
        Explicit path to use. If None, the conventional default is used.

    Returns
    -------
    pathlib.Path
        Absolute path to the backing file. The file need not exist.
    """
    if data_file is None:
        return default_data_file()
    return Path(data_file).expanduser().resolve()
