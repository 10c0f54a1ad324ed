from __future__ import annotations

import json
from pathlib import Path

import pytest

from roster_engine.data_models import Child
from roster_engine.record_store.errors import InvalidInputError, UnknownEmployeeError
from roster_engine.record_store.input_rules import split_names
from roster_engine.record_store.json_store import JsonRecordStore


def _file_children(path: Path, index: int) -> list[dict[str, object]]:
    return json.loads(path.read_text(encoding="utf-8"))[index]["children"]


def test_add_employee_seeds_children_from_names(tmp_path: Path) -> None:
    store = JsonRecordStore(tmp_path / "data.json")

    ref = store.add_employee("Ivan", split_names("Anna, Bob ,  Cy"))

    assert ref == 0
    assert store.children(ref) == (Child(name="Anna"), Child(name="Bob"), Child(name="Cy"))


def test_add_employee_persists_immediately(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    store = JsonRecordStore(path)

    store.add_employee("Ivan", [])
    store.add_employee("Ivan", [])

    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload == [{"name": "Ivan", "children": []}, {"name": "Ivan", "children": []}]


def test_add_child_appends_and_persists(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    store = JsonRecordStore(path)
    ref = store.add_employee("Ivan", ["Anna"])

    child = store.add_child(ref, "Bob", "7")

    assert child == Child(name="Bob", age=7)
    assert store.children(ref) == (Child(name="Anna"), Child(name="Bob", age=7))
    assert [c["name"] for c in _file_children(path, ref)] == ["Anna", "Bob"]
    assert _file_children(path, ref)[1]["age"] == 7


def test_add_child_invalid_age_mutates_nothing(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    store = JsonRecordStore(path)
    ref = store.add_employee("Ivan", ["Anna"])
    before = path.read_text(encoding="utf-8")

    with pytest.raises(InvalidInputError):
        store.add_child(ref, "Bob", "abc")

    assert store.children(ref) == (Child(name="Anna"),)
    assert path.read_text(encoding="utf-8") == before


def test_add_child_invalid_age_does_not_save(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    store = JsonRecordStore(tmp_path / "data.json")
    ref = store.add_employee("Ivan", [])

    calls: list[int] = []
    monkeypatch.setattr(store, "save", lambda: calls.append(1) or True)

    with pytest.raises(InvalidInputError):
        store.add_child(ref, "Bob", "7 years")
    assert calls == []


@pytest.mark.parametrize("ref", [-1, 1, 5])
def test_unknown_employee_ref_is_rejected(tmp_path: Path, ref: int) -> None:
    store = JsonRecordStore(tmp_path / "data.json")
    store.add_employee("Ivan", [])

    with pytest.raises(UnknownEmployeeError):
        store.children(ref)
    with pytest.raises(UnknownEmployeeError):
        store.add_child(ref, "Bob", "3")


def test_list_employees_is_a_snapshot(tmp_path: Path) -> None:
    store = JsonRecordStore(tmp_path / "data.json")
    listed = store.list_employees()

    store.add_employee("Ivan", [])

    assert listed == ()
    assert len(store.list_employees()) == 1


def test_listed_records_cannot_mutate_the_store(tmp_path: Path) -> None:
    store = JsonRecordStore(tmp_path / "data.json")
    ref = store.add_employee("Ivan", ["Anna"])
    employee = store.list_employees()[ref]

    with pytest.raises(AttributeError):
        employee.children.append(Child(name="Bob"))  # type: ignore[attr-defined]
    with pytest.raises(AttributeError):
        employee.name = "Olga"  # type: ignore[misc]

    assert store.children(ref) == (Child(name="Anna"),)


def test_add_child_replaces_employee_record(tmp_path: Path) -> None:
    store = JsonRecordStore(tmp_path / "data.json")
    ref = store.add_employee("Ivan", [])
    before = store.get_employee(ref)

    store.add_child(ref, "Bob", "3")

    assert before.children == ()
    assert store.get_employee(ref).children == (Child(name="Bob", age=3),)
