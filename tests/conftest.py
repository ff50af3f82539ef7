import io
from typing import Dict, List, Optional

import pytest
from openpyxl import Workbook

from core.models import SourceFile


def make_workbook(sheets: Dict[str, List[List[Optional[object]]]]) -> bytes:
    """Build an .xlsx in memory; an empty row list leaves the sheet blank"""
    workbook = Workbook()
    workbook.remove(workbook.active)
    for title, rows in sheets.items():
        sheet = workbook.create_sheet(title)
        for row in rows:
            sheet.append(row)
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def text_source():
    def _make(name: str, text: str, encoding: str = "utf-8") -> SourceFile:
        return SourceFile.from_bytes(name, text.encode(encoding))
    return _make


@pytest.fixture
def workbook_source():
    def _make(name: str, sheets: Dict[str, List[List[Optional[object]]]]) -> SourceFile:
        return SourceFile.from_bytes(name, make_workbook(sheets))
    return _make
