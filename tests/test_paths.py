from __future__ import annotations

from pathlib import Path

import pytest

from roster_engine.paths import default_data_file, resolve_data_file


def test_default_data_file_is_in_working_directory(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.chdir(tmp_path)
    assert default_data_file().resolve() == (tmp_path / "data.json").resolve()


def test_resolve_data_file_uses_override(tmp_path: Path) -> None:
    override = tmp_path / "nested" / "records.json"
    assert resolve_data_file(override) == override.resolve()


def test_resolve_data_file_accepts_strings(tmp_path: Path) -> None:
    assert resolve_data_file(str(tmp_path / "x.json")) == (tmp_path / "x.json").resolve()
