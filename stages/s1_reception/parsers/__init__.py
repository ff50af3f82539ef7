"""File parsers"""

from .base import FileParser
from .delimited import CSVParser, select_best_attempt
from .spreadsheet import ExcelParser

__all__ = ["FileParser", "CSVParser", "ExcelParser", "select_best_attempt"]
