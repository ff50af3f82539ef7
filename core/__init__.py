"""Core abstractions for Amalgam pipeline"""

from .models import *
from .enums import *
from .exceptions import *
from .interfaces import *

__all__ = [
    # Models
    "SourceFile",
    "ProcessingNotice",
    "AdmissionResult",
    "ParseAttempt",
    "ParseResult",
    "UnifiedTable",
    "ColumnTypeProfile",
    "FileReport",
    "ConsolidationResult",
    "BatchOutcome",
    # Enums
    "FileType",
    "ColumnType",
    "NoticeKind",
    "FileOutcome",
    # Exceptions
    "AmalgamError",
    "PipelineError",
    "StageError",
    "EmptyBatchError",
    "AdmissionError",
    "FileParseError",
    "EmptyResultError",
    # Interfaces
    "Stage",
    "FileParser",
]
