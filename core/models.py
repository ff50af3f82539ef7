"""Core data models for Amalgam pipeline"""

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import ColumnType, FileOutcome, FileType, NoticeKind


# ─────────────────────────────────────────────────────────────
# Input
# ─────────────────────────────────────────────────────────────

class SourceFile(BaseModel):
    """One candidate file: name, byte size and raw content"""
    model_config = ConfigDict(frozen=True)

    name: str
    size: int = Field(ge=0)
    content: bytes = b""

    @classmethod
    def from_path(cls, path: Path) -> "SourceFile":
        path = Path(path)
        content = path.read_bytes()
        return cls(name=path.name, size=len(content), content=content)

    @classmethod
    def from_bytes(cls, name: str, content: bytes) -> "SourceFile":
        return cls(name=name, size=len(content), content=content)

    @property
    def extension(self) -> str:
        return Path(self.name).suffix.lower()

    @property
    def file_type(self) -> Optional[FileType]:
        try:
            return FileType(self.extension.lstrip("."))
        except ValueError:
            return None


# ─────────────────────────────────────────────────────────────
# Notices
# ─────────────────────────────────────────────────────────────

class ProcessingNotice(BaseModel):
    """Non-fatal record of a discarded, failed or empty source"""
    model_config = ConfigDict(populate_by_name=True)

    file_name: str = Field(alias="fileName")
    reason: str
    kind: NoticeKind = NoticeKind.PARSE_FAILURE


# ─────────────────────────────────────────────────────────────
# Stage 0: Admission
# ─────────────────────────────────────────────────────────────

class AdmissionResult(BaseModel):
    """Stage 0 output: admitted files and discards"""
    admitted: list[SourceFile] = []
    discarded: list[ProcessingNotice] = []


# ─────────────────────────────────────────────────────────────
# Stage 1: Reception
# ─────────────────────────────────────────────────────────────

class ParseAttempt(BaseModel):
    """One (encoding, delimiter) combination tried on a text source"""
    encoding: str
    delimiter: str
    fields: list[str] = []
    rows: list[dict[str, Optional[str]]] = []
    diagnostics: list[str] = []

    @property
    def column_count(self) -> int:
        return len(self.fields)


class ParseResult(BaseModel):
    """Tabular output of one text file or one workbook sheet"""
    source_name: str
    sheet_name: Optional[str] = None  # For workbooks
    encoding: Optional[str] = None  # For delimited text
    delimiter: Optional[str] = None
    fields: list[str] = []
    rows: list[dict[str, Any]] = []
    diagnostics: list[str] = []


# ─────────────────────────────────────────────────────────────
# Stages 2-3: Unification & Type Inference
# ─────────────────────────────────────────────────────────────

class UnifiedTable(BaseModel):
    """Stage 2 output: rows keyed by the unified schema"""
    headers: list[str] = []
    rows: list[dict[str, Any]] = []


class ColumnTypeProfile(BaseModel):
    """Per-column type decided once from a bounded sample"""
    types: dict[str, ColumnType] = {}
    sample_size: int = 0

    def type_of(self, header: str) -> ColumnType:
        return self.types.get(header, ColumnType.STRING)


# ─────────────────────────────────────────────────────────────
# Pipeline output
# ─────────────────────────────────────────────────────────────

class FileReport(BaseModel):
    """Terminal processing state of one admitted file"""
    file_name: str
    position: int
    outcome: FileOutcome
    result_count: int = 0


class ConsolidationResult(BaseModel):
    """Consolidated dataset plus processing notices"""
    headers: list[str] = []
    rows: list[dict[str, Any]] = []
    notices: list[ProcessingNotice] = []
    files: list[FileReport] = []
    profile: Optional[ColumnTypeProfile] = None

    @property
    def is_empty(self) -> bool:
        """True when no data could be consolidated"""
        return not self.rows


class BatchOutcome(BaseModel):
    """Admission discards and consolidation result, kept apart"""
    admission: AdmissionResult
    result: ConsolidationResult
