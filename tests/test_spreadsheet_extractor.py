from datetime import datetime

import pytest

from core.models import SourceFile
from core.exceptions import FileParseError
from stages.s1_reception.parsers import ExcelParser
from stages.s1_reception.parsers.spreadsheet import cell_text


def test_every_data_sheet_becomes_a_result(workbook_source):
    source = workbook_source("book.xlsx", {
        "First": [["id", "name"], [1, "a"]],
        "Empty": [],
        "Third": [["id", "score"], [2, 9.5], [3, 7]],
    })

    results = ExcelParser().extract(source)

    assert [r.sheet_name for r in results] == ["First", "Third"]
    assert results[0].fields == ["id", "name"]
    assert results[0].rows == [{"id": "1", "name": "a"}]
    assert results[1].rows == [{"id": "2", "score": "9.5"}, {"id": "3", "score": "7"}]
    assert all(r.source_name == "book.xlsx" for r in results)


def test_header_only_sheet_is_skipped(workbook_source):
    source = workbook_source("book.xlsx", {
        "Headers": [["a", "b"]],
        "Data": [["a", "b"], ["x", "y"]],
    })

    results = ExcelParser().extract(source)

    assert [r.sheet_name for r in results] == ["Data"]


def test_headers_are_trimmed_and_absent_cells_are_null(workbook_source):
    source = workbook_source("book.xlsx", {
        "Sheet1": [[" name ", "city  "], ["Ann", None], [None, "Oslo"]],
    })

    result = ExcelParser().extract(source)[0]

    assert result.fields == ["name", "city"]
    assert result.rows == [
        {"name": "Ann", "city": None},
        {"name": None, "city": "Oslo"},
    ]


def test_blank_rows_are_skipped(workbook_source):
    source = workbook_source("book.xlsx", {
        "Sheet1": [[None, None], ["a", "b"], [None, None], ["1", "2"]],
    })

    result = ExcelParser().extract(source)[0]

    assert result.fields == ["a", "b"]
    assert result.rows == [{"a": "1", "b": "2"}]


def test_whitespace_only_rows_are_blank(workbook_source):
    source = workbook_source("book.xlsx", {
        "Sheet1": [["  ", "  "], ["id", "name"], ["   ", None], [1, "x"]],
    })

    result = ExcelParser().extract(source)[0]

    assert result.fields == ["id", "name"]
    assert result.rows == [{"id": "1", "name": "x"}]


def test_all_sheets_empty_returns_no_results(workbook_source):
    source = workbook_source("empty.xlsx", {"A": [], "B": [["only", "header"]]})

    assert ExcelParser().extract(source) == []


def test_corrupt_workbook_raises_parse_error():
    source = SourceFile.from_bytes("broken.xlsx", b"this is not a zip archive")

    with pytest.raises(FileParseError) as excinfo:
        ExcelParser().extract(source)

    assert "broken.xlsx" in str(excinfo.value)
    assert excinfo.value.file_path == "broken.xlsx"


def test_cell_text_renders_display_values():
    assert cell_text(None) is None
    assert cell_text("") is None
    assert cell_text(float("nan")) is None
    assert cell_text(True) == "TRUE"
    assert cell_text(42.0) == "42"
    assert cell_text(3.25) == "3.25"
    assert cell_text(7) == "7"
    assert cell_text(datetime(2024, 1, 5)) == "2024-01-05"
    assert cell_text(datetime(2024, 1, 5, 13, 30)) == "2024-01-05T13:30:00"
    assert cell_text("  padded ") == "  padded "
