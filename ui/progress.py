"""Progress tracking"""

from abc import ABC, abstractmethod
from typing import Any, Callable

from core.models import ConsolidationResult, FileReport
from core.enums import FileOutcome


class ProgressTracker(ABC):
    """Abstract progress tracker"""
    
    @abstractmethod
    def start_file(self, file_name: str, position: int, total: int):
        """Called before a file is parsed; position is 1-based"""
        pass
    
    @abstractmethod
    def finish_file(self, report: FileReport):
        """Called once the file reached its terminal state"""
        pass
    
    @abstractmethod
    def complete(self, result: ConsolidationResult):
        """Mark run as complete"""
        pass


class CallbackProgress(ProgressTracker):
    """Adapts a plain (file_name, position, total) callable"""

    def __init__(self, callback: Callable[[str, int, int], Any]):
        self.callback = callback

    def start_file(self, file_name: str, position: int, total: int):
        return self.callback(file_name, position, total)

    def finish_file(self, report: FileReport):
        pass

    def complete(self, result: ConsolidationResult):
        pass


class ConsoleProgress(ProgressTracker):
    """Console-based progress tracker"""
    
    SYMBOLS = {
        FileOutcome.PARSED: "✓",
        FileOutcome.SKIPPED: "-",
        FileOutcome.FAILED: "✗",
    }

    def __init__(self):
        self.total = 0
    
    def start_file(self, file_name: str, position: int, total: int):
        """Start a file"""
        self.total = total
        print(f"[◉] ({position}/{total}) {file_name}...")
    
    def finish_file(self, report: FileReport):
        """Finish a file"""
        symbol = self.SYMBOLS.get(report.outcome, "?")
        print(f"[{symbol}] ({report.position}/{self.total}) {report.file_name}: {report.outcome.value}")
    
    def complete(self, result: ConsolidationResult):
        """Mark run as complete"""
        print(f"\n[✓] Processed {len(result.files)} file(s)")
