"""
Tests for spreadsheet export.
"""

from __future__ import annotations

from pathlib import Path

import openpyxl
import pytest

from json_xlsx_converter.errors import EmptySelectionError, NoDataError
from json_xlsx_converter.export import export_dataset, output_filename_for, write_workbook
from json_xlsx_converter.records import load_dataset


def read_sheet(path: str, sheet: str = "Data"):
    workbook = openpyxl.load_workbook(path)
    assert workbook.sheetnames == [sheet]
    return [list(row) for row in workbook[sheet].iter_rows(values_only=True)]


@pytest.mark.parametrize(
    "source, expected",
    [
        ("report.json", "report.xlsx"),
        ("/tmp/upload/report.JSON", "report.xlsx"),
        ("archive.2024.json", "archive.2024.xlsx"),
        ("noext", "noext.xlsx"),
        ("", "output.xlsx"),
    ],
)
def test_output_filename(source: str, expected: str) -> None:
    assert output_filename_for(source) == expected


def test_write_workbook_blank_for_missing(tmp_path: Path) -> None:
    path = str(tmp_path / "x.xlsx")
    write_workbook([{"a": 1}, {"b": "two"}], ["a", "b"], path)
    assert read_sheet(path) == [["a", "b"], [1, None], [None, "two"]]


def test_write_workbook_strips_control_characters(tmp_path: Path) -> None:
    path = str(tmp_path / "x.xlsx")
    write_workbook([{"note": "bell\u0007here", "tab": "a\tb"}], ["note", "tab"], path)
    assert read_sheet(path) == [["note", "tab"], ["bellhere", "a\tb"]]


@pytest.mark.parametrize("text", ["=1+1", "=SUM(A1:A3)", "+1", "-2", "@me", "=HYPERLINK(\"http://x\")"])
def test_write_workbook_keeps_strings_as_text(tmp_path: Path, text: str) -> None:
    path = str(tmp_path / "x.xlsx")
    write_workbook([{"a": text}], ["a"], path)

    cell = openpyxl.load_workbook(path)["Data"]["A2"]
    assert cell.data_type == "s"
    assert cell.value == text


def test_formula_like_header_is_text(tmp_path: Path) -> None:
    path = str(tmp_path / "x.xlsx")
    write_workbook([{"=a": 1}], ["=a"], path)
    cell = openpyxl.load_workbook(path)["Data"]["A1"]
    assert (cell.value, cell.data_type) == ("=a", "s")


def test_export_without_dataset() -> None:
    with pytest.raises(NoDataError):
        export_dataset(None, ["a"])


def test_export_empty_array(write_json, settings) -> None:
    dataset = load_dataset(write_json([]), settings)
    with pytest.raises(NoDataError):
        export_dataset(dataset, [], settings)


def test_export_without_selection(write_json, settings) -> None:
    dataset = load_dataset(write_json([{"a": 1}]), settings)
    with pytest.raises(EmptySelectionError):
        export_dataset(dataset, [], settings)
    with pytest.raises(EmptySelectionError):
        export_dataset(dataset, ["not-a-field"], settings)


def test_export_columns_follow_field_order(write_json, settings) -> None:
    payload = [
        {"id": 1, "user": {"name": "ana", "tags": ["x", "y"]}},
        {"id": 2, "user": {"name": "bo"}, "note": "late"},
    ]
    dataset = load_dataset(write_json(payload, name="users.json"), settings)
    path = export_dataset(dataset, ["note", "id", "user.tags"], settings)

    assert Path(path) == Path(settings.output_dir) / "users.xlsx"
    assert read_sheet(path) == [
        ["id", "user.tags", "note"],
        [1, "x, y", None],
        [2, None, "late"],
    ]
