"""Base file parser"""

from abc import ABC, abstractmethod
from typing import List

from core.interfaces import FileParser as IFileParser
from core.models import ParseResult, SourceFile


class FileParser(IFileParser, ABC):
    """Abstract base class for file parsers"""
    
    @abstractmethod
    def parse(self, source: SourceFile) -> List[ParseResult]:
        """Parse source and return its ParseResults"""
        pass
