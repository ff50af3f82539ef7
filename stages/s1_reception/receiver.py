"""Stage 1: Reception - Dispatch each file to its parser"""

import logging
from typing import List, Optional

from core.interfaces import Stage
from core.models import ParseResult, SourceFile
from core.enums import FileType
from core.exceptions import EmptyResultError, FileParseError
from .parsers import CSVParser, ExcelParser

logger = logging.getLogger(__name__)


class Receiver(Stage[SourceFile, List[ParseResult]]):
    """Stage 1: Reception - Parse one admitted file"""
    
    @property
    def name(self) -> str:
        return "Reception"
    
    @property
    def stage_number(self) -> int:
        return 1
    
    def __init__(
        self,
        text_parser: Optional[CSVParser] = None,
        workbook_parser: Optional[ExcelParser] = None
    ):
        text_parser = text_parser or CSVParser()
        workbook_parser = workbook_parser or ExcelParser()
        self.parsers = {
            FileType.CSV: text_parser,
            FileType.EXCEL_XLS: workbook_parser,
            FileType.EXCEL_XLSX: workbook_parser,
        }
    
    def validate_input(self, input_data: SourceFile) -> bool:
        """Validate source file"""
        return isinstance(input_data, SourceFile)
    
    async def execute(self, input_data: SourceFile) -> List[ParseResult]:
        """Execute reception stage"""
        return self.receive(input_data)

    def receive(self, source: SourceFile) -> List[ParseResult]:
        """
        Parse a source into its ParseResults

        A delimited text source whose only table has no rows is returned
        as-is when it carries row diagnostics, so they can still be reported.

        Raises:
            FileParseError: unsupported type, or the parser failed
            EmptyResultError: the source holds no data rows at all
        """
        parser = self.parsers.get(source.file_type)
        if parser is None:
            supported = ", ".join(f".{t.value}" for t in self.parsers)
            raise FileParseError(
                f"Unsupported file type: {source.extension}. Supported: {supported}",
                source.name
            )

        logger.debug("Parsing %s with %s", source.name, type(parser).__name__)
        try:
            results = parser.parse(source)
        except FileParseError:
            raise
        except Exception as e:
            raise FileParseError(
                f"Unexpected error parsing file: {e}",
                source.name
            ) from e

        if any(result.rows for result in results):
            return results
        if any(result.diagnostics for result in results):
            return results

        if source.file_type == FileType.CSV:
            reason = "File contains no data rows and was skipped."
        else:
            reason = "File contains no sheets with data rows and was skipped."
        raise EmptyResultError(reason, source.name)
