"""
Tests for field derivation and row projection.
"""

from __future__ import annotations

from json_xlsx_converter.fields import (
    default_selection,
    derive_fields,
    order_selection,
    project_rows,
)

ROWS = [
    {"id": 1, "name": "a", "meta.x": 1},
    {"id": 2, "extra": True},
    {"name": "c", "id": 3},
]


def test_derive_fields_empty() -> None:
    assert derive_fields([]) == []


def test_derive_fields_first_seen_order() -> None:
    assert derive_fields([{"a": 1}, {"b": 2}]) == ["a", "b"]
    assert derive_fields(ROWS) == ["id", "name", "meta.x", "extra"]


def test_default_selection_is_everything() -> None:
    fields = derive_fields(ROWS)
    assert default_selection(fields) == fields


def test_order_selection_follows_field_order() -> None:
    fields = derive_fields(ROWS)
    assert order_selection(fields, ["extra", "id", "missing"]) == ["id", "extra"]
    assert order_selection(fields, None) == []


def test_project_with_no_fields_yields_empty_rows() -> None:
    assert project_rows(ROWS, []) == [{}, {}, {}]


def test_project_omits_missing_keys() -> None:
    assert project_rows(ROWS, ["name", "extra"]) == [
        {"name": "a"},
        {"extra": True},
        {"name": "c"},
    ]


def test_project_uses_field_order() -> None:
    projected = project_rows(ROWS, ["name", "id"])
    assert list(projected[2]) == ["name", "id"]


def test_project_is_idempotent() -> None:
    fields = ["id", "meta.x"]
    once = project_rows(ROWS, fields)
    assert project_rows(once, fields) == once


def test_project_keeps_none_values() -> None:
    assert project_rows([{"a": None}], ["a"]) == [{"a": None}]
