"""Core enumerations for Amalgam"""

from enum import Enum


class FileType(str, Enum):
    """Supported file types"""
    CSV = "csv"
    EXCEL_XLS = "xls"
    EXCEL_XLSX = "xlsx"


class ColumnType(str, Enum):
    """Lexical column type decided by type inference"""
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"


class NoticeKind(str, Enum):
    """Kind of non-fatal processing notice"""
    DISCARDED = "discarded"
    PARSE_FAILURE = "parse_failure"
    EMPTY_RESULT = "empty_result"
    ROW_DIAGNOSTIC = "row_diagnostic"


class FileOutcome(str, Enum):
    """Terminal state of one admitted file"""
    PARSED = "parsed"
    SKIPPED = "skipped"
    FAILED = "failed"
