from __future__ import annotations

import pytest

from roster_engine.data_models import Child, Employee, employees_from_payload, employees_to_payload


def test_child_to_dict_uses_file_field_names() -> None:
    child = Child(name="Masha", age=5, appearance="curly", favorite_color="red", comments="shy")
    assert child.to_dict() == {
        "name": "Masha",
        "age": 5,
        "appearance": "curly",
        "favoriteColor": "red",
        "comments": "shy",
    }


def test_child_absent_fields_decode_to_defaults() -> None:
    assert Child.from_dict({"name": "Bob"}) == Child(name="Bob", age=0)
    assert Child.from_dict({}) == Child(name="")


def test_employee_keys_match_case_insensitively() -> None:
    payload = {
        "Name": "Ivan",
        "Children": [
            {"Name": "Masha", "Age": 5, "Appearance": "", "FavoriteColor": "red", "Comments": ""}
        ],
    }
    employee = Employee.from_dict(payload)
    assert employee.name == "Ivan"
    assert employee.children == (Child(name="Masha", age=5, favorite_color="red"),)


def test_employee_null_children_decode_to_empty_list() -> None:
    assert Employee.from_dict({"name": "Ivan", "children": None}).children == ()


def test_top_level_null_decodes_to_empty_collection() -> None:
    assert employees_from_payload(None) == []


@pytest.mark.parametrize(
    "payload",
    [
        {"employees": []},
        [1, 2],
        [{"name": 5}],
        [{"name": "Ivan", "children": {}}],
        [{"name": "Ivan", "children": [{"name": "Bob", "age": "7"}]}],
        [{"name": "Ivan", "children": [{"name": "Bob", "age": 7.5}]}],
        [{"name": "Ivan", "children": [{"name": "Bob", "age": True}]}],
    ],
)
def test_malformed_payloads_are_rejected(payload: object) -> None:
    with pytest.raises(ValueError):
        employees_from_payload(payload)


def test_employee_payload_preserves_order() -> None:
    employees = [
        Employee(name="B", children=(Child(name="z"), Child(name="a"))),
        Employee(name="A"),
    ]
    payload = employees_to_payload(employees)
    assert [e["name"] for e in payload] == ["B", "A"]
    assert [c["name"] for c in payload[0]["children"]] == ["z", "a"]
    assert employees_from_payload(payload) == employees
