"""Pipeline orchestrator"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence, Union

from core.models import (
    BatchOutcome, ConsolidationResult, FileReport, ParseResult,
    ProcessingNotice, SourceFile
)
from core.enums import FileOutcome, NoticeKind
from core.exceptions import EmptyBatchError, EmptyResultError, FileParseError, StageError
from stages import AdmissionFilter, Receiver, SchemaUnifier, TypeInferenceEngine
from ui.progress import CallbackProgress, ProgressTracker
from config import settings

logger = logging.getLogger(__name__)

ProgressArg = Union[ProgressTracker, Callable[[str, int, int], Any], None]


@dataclass
class IngestionContext:
    """Accumulators owned by a single run"""
    total: int
    results: List[ParseResult] = field(default_factory=list)
    notices: List[ProcessingNotice] = field(default_factory=list)
    files: List[FileReport] = field(default_factory=list)


class IngestionOrchestrator:
    """Pipeline coordinator: parse every file, then unify and type the rows"""

    def __init__(
        self,
        progress: ProgressArg = None,
        receiver: Optional[Receiver] = None,
        unifier: Optional[SchemaUnifier] = None,
        inference: Optional[TypeInferenceEngine] = None,
        yield_seconds: Optional[float] = None
    ):
        if progress is not None and not isinstance(progress, ProgressTracker):
            progress = CallbackProgress(progress)
        self.progress = progress
        self.yield_seconds = (
            settings.PROGRESS_YIELD_SECONDS if yield_seconds is None else yield_seconds
        )

        # Initialize stages
        self.stages = {
            1: receiver or Receiver(),
            2: unifier or SchemaUnifier(),
            3: inference or TypeInferenceEngine(),
        }

    async def run(self, files: Sequence[SourceFile]) -> ConsolidationResult:
        """
        Process every admitted file in order and consolidate the results

        Per-file failures become notices and never stop the batch. When no
        file produced data the result is empty but still carries every
        notice.

        Raises:
            EmptyBatchError: called without any file
        """
        files = list(files)
        if not files:
            raise EmptyBatchError()

        ctx = IngestionContext(total=len(files))

        for position, source in enumerate(files, start=1):
            if self.progress is not None:
                # Let the host breathe between files
                await asyncio.sleep(self.yield_seconds)
                await self._notify(self.progress.start_file, source.name, position, ctx.total)

            report = await self._process_file(ctx, source, position)
            ctx.files.append(report)

            if self.progress is not None:
                await self._notify(self.progress.finish_file, report)

        if not ctx.results:
            logger.warning("No data could be consolidated from %d file(s)", ctx.total)
            result = ConsolidationResult(notices=ctx.notices, files=ctx.files)
        else:
            table = await self._execute_stage(2, ctx.results)
            typed = await self._execute_stage(3, table)
            result = typed.model_copy(update={"notices": ctx.notices, "files": ctx.files})

        if self.progress is not None:
            await self._notify(self.progress.complete, result)

        return result

    async def _process_file(
        self, ctx: IngestionContext, source: SourceFile, position: int
    ) -> FileReport:
        """Drive one file to its terminal state"""
        try:
            results = await self._execute_stage(1, source)
        except EmptyResultError as e:
            ctx.notices.append(ProcessingNotice(
                file_name=source.name, reason=str(e), kind=NoticeKind.EMPTY_RESULT
            ))
            return FileReport(
                file_name=source.name, position=position, outcome=FileOutcome.SKIPPED
            )
        except (FileParseError, StageError) as e:
            logger.warning("File processing failed for %s: %s", source.name, e)
            ctx.notices.append(ProcessingNotice(
                file_name=source.name, reason=str(e), kind=NoticeKind.PARSE_FAILURE
            ))
            return FileReport(
                file_name=source.name, position=position, outcome=FileOutcome.FAILED
            )

        for result in results:
            for diagnostic in result.diagnostics:
                ctx.notices.append(ProcessingNotice(
                    file_name=source.name,
                    reason=diagnostic,
                    kind=NoticeKind.ROW_DIAGNOSTIC
                ))

        data_results = [result for result in results if result.rows]
        ctx.results.extend(data_results)

        outcome = FileOutcome.PARSED if data_results else FileOutcome.SKIPPED
        return FileReport(
            file_name=source.name,
            position=position,
            outcome=outcome,
            result_count=len(data_results)
        )

    async def _execute_stage(self, stage_num: int, input_data) -> Any:
        """Execute a single stage"""
        stage = self.stages[stage_num]

        if not stage.validate_input(input_data):
            raise StageError(stage_num, "Invalid input")

        return await stage.execute(input_data)

    async def _notify(self, method: Callable, *args) -> None:
        # Handle both sync and async progress trackers
        result = method(*args)
        if hasattr(result, '__await__'):
            await result


def consolidate(files: Sequence[SourceFile], progress: ProgressArg = None) -> ConsolidationResult:
    """Run the ingestion pipeline synchronously on admitted files"""
    return asyncio.run(IngestionOrchestrator(progress=progress).run(files))


def ingest(candidates: Sequence[SourceFile], progress: ProgressArg = None) -> BatchOutcome:
    """
    Screen candidates, then consolidate the admitted ones

    Raises:
        EmptyBatchError: no candidate survived admission
    """
    admission = AdmissionFilter().screen(candidates)
    if not admission.admitted:
        raise EmptyBatchError(
            f"None of the {len(candidates)} selected file(s) could be admitted."
        )
    return BatchOutcome(admission=admission, result=consolidate(admission.admitted, progress))
