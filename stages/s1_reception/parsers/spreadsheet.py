"""Excel workbook parser"""

import io
import logging
from datetime import date, datetime, time
from typing import Any, List, Optional

import pandas as pd

from core.models import ParseResult, SourceFile
from core.enums import FileType
from core.exceptions import FileParseError
from .base import FileParser
from .delimited import dedupe_fields

logger = logging.getLogger(__name__)


def cell_text(value: Any) -> Optional[str]:
    """Render a cell as the text a spreadsheet would display, None when empty"""
    if value is None:
        return None
    if isinstance(value, str):
        return value if value != "" else None
    if pd.isna(value):
        return None
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime):
        if value.time() == time(0, 0):
            return value.date().isoformat()
        return value.isoformat()
    if isinstance(value, (date, time)):
        return value.isoformat()
    return str(value)


class ExcelParser(FileParser):
    """Parser for Excel files (.xlsx, .xls), one ParseResult per sheet"""

    @property
    def supported_extensions(self) -> List[str]:
        return [".xlsx", ".xls"]

    def parse(self, source: SourceFile) -> List[ParseResult]:
        """Extract every data-bearing sheet"""
        return self.extract(source)

    def extract(self, source: SourceFile) -> List[ParseResult]:
        """Extract every data-bearing sheet; empty sheets are skipped"""
        engine = "xlrd" if source.file_type == FileType.EXCEL_XLS else "openpyxl"

        try:
            results = []
            with pd.ExcelFile(io.BytesIO(source.content), engine=engine) as workbook:
                for sheet_name in workbook.sheet_names:
                    df = workbook.parse(
                        sheet_name,
                        header=None,
                        dtype=object,
                        keep_default_na=False
                    )
                    result = self._sheet_result(source.name, str(sheet_name), df)
                    if result is None:
                        logger.debug("Sheet %s in %s has no data rows", sheet_name, source.name)
                        continue
                    results.append(result)
        except Exception as e:
            raise FileParseError(
                f'Failed to parse "{source.name}". The file might be corrupted. Details: {e}',
                source.name
            ) from e

        logger.info("Extracted %d sheet(s) with data from %s", len(results), source.name)
        return results

    def _sheet_result(
        self, source_name: str, sheet_name: str, df: pd.DataFrame
    ) -> Optional[ParseResult]:
        """Turn one raw sheet into a ParseResult, or None when it has no rows"""
        records = [
            [cell_text(value) for value in row]
            for row in df.itertuples(index=False, name=None)
        ]
        records = [
            r for r in records
            if any(value is not None and value.strip() for value in r)
        ]
        if len(records) < 2:
            return None

        fields = dedupe_fields([(value or "").strip() for value in records[0]])
        rows = [dict(zip(fields, record)) for record in records[1:]]

        return ParseResult(
            source_name=source_name,
            sheet_name=sheet_name,
            fields=fields,
            rows=rows
        )
