"""Stage 0: Admission - Cheap screening before any parsing"""

from typing import List, Optional, Sequence

from core.interfaces import Stage
from core.models import AdmissionResult, ProcessingNotice, SourceFile
from core.enums import NoticeKind
from core.exceptions import AdmissionError
from config import settings


class AdmissionFilter(Stage[Sequence[SourceFile], AdmissionResult]):
    """Stage 0: Admission - Discard unsupported or zero-byte files"""

    @property
    def name(self) -> str:
        return "Admission"

    @property
    def stage_number(self) -> int:
        return 0

    def __init__(self, supported_extensions: Optional[List[str]] = None):
        self.supported_extensions = [
            ext.lower() for ext in (supported_extensions or settings.SUPPORTED_EXTENSIONS)
        ]

    def validate_input(self, input_data: Sequence[SourceFile]) -> bool:
        return all(isinstance(f, SourceFile) for f in input_data)

    async def execute(self, input_data: Sequence[SourceFile]) -> AdmissionResult:
        """Execute admission stage"""
        return self.screen(input_data)

    def screen(self, files: Sequence[SourceFile]) -> AdmissionResult:
        """Split candidates into admitted files and discards, keeping order"""
        result = AdmissionResult()
        for source in files:
            try:
                self.check(source)
            except AdmissionError as e:
                result.discarded.append(ProcessingNotice(
                    file_name=source.name,
                    reason=str(e),
                    kind=NoticeKind.DISCARDED
                ))
                continue
            result.admitted.append(source)
        return result

    def check(self, source: SourceFile) -> None:
        """Raise AdmissionError if the file must not be parsed"""
        if source.extension not in self.supported_extensions:
            supported = ", ".join(self.supported_extensions)
            raise AdmissionError(
                f"File is not a supported type ({supported}).",
                source.name
            )
        if source.size == 0:
            raise AdmissionError(
                "File is empty (0 bytes) and was discarded.",
                source.name
            )
