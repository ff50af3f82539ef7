"""Delimited text (CSV) parser"""

import csv
import io
import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from core.models import ParseAttempt, ParseResult, SourceFile
from core.exceptions import FileParseError
from .base import FileParser
from utils.encoding import decode_text
from config import settings

logger = logging.getLogger(__name__)


def select_best_attempt(attempts: Iterable[ParseAttempt]) -> Optional[ParseAttempt]:
    """
    Pick the attempt with the strictly greatest column count

    Attempts without any header column are ignored. Ties keep the attempt
    seen first, so enumeration order decides.
    """
    best = None
    for attempt in attempts:
        if attempt.column_count == 0:
            continue
        if best is None or attempt.column_count > best.column_count:
            best = attempt
    return best


def dedupe_fields(fields: Sequence[str]) -> List[str]:
    """Suffix repeated non-blank header names with _1, _2, ..."""
    seen = {}
    out = []
    for field in fields:
        if not field.strip():
            out.append(field)
            continue
        if field in seen:
            seen[field] += 1
            out.append(f"{field}_{seen[field]}")
        else:
            seen[field] = 0
            out.append(field)
    return out


def _is_blank_record(record: Sequence[str]) -> bool:
    return all(not value.strip() for value in record)


class CSVParser(FileParser):
    """Parser for delimited text with unknown encoding and delimiter"""

    def __init__(
        self,
        encodings: Optional[Sequence[str]] = None,
        delimiters: Optional[Sequence[str]] = None,
    ):
        self.encodings = list(encodings or settings.ENCODING_CANDIDATES)
        self.delimiters = list(delimiters or settings.DELIMITER_CANDIDATES)

    @property
    def supported_extensions(self) -> List[str]:
        return [".csv"]

    def parse(self, source: SourceFile) -> List[ParseResult]:
        """Parse a text source into its single ParseResult"""
        return [self.parse_text(source)]

    def parse_text(self, source: SourceFile) -> ParseResult:
        """Try every (encoding, delimiter) pair and keep the widest table"""
        best = select_best_attempt(self.iter_attempts(source.content))

        if best is None:
            raise FileParseError(
                f'Could not parse "{source.name}" with common delimiters and encodings. '
                "The file may be valid, but its internal structure could not be "
                "determined or it might be in an unsupported format.",
                source.name
            )

        logger.info(
            "Best parse for %s found with delimiter %r and encoding %s. Columns found: %d",
            source.name, best.delimiter, best.encoding, best.column_count
        )
        if best.diagnostics:
            logger.warning(
                "Parsing notices for %s (delimiter %r, encoding %s): %s",
                source.name, best.delimiter, best.encoding, best.diagnostics
            )

        return ParseResult(
            source_name=source.name,
            encoding=best.encoding,
            delimiter=best.delimiter,
            fields=best.fields,
            rows=best.rows,
            diagnostics=best.diagnostics
        )

    def iter_attempts(self, raw: bytes) -> Iterator[ParseAttempt]:
        """Yield one attempt per combination, in enumeration order"""
        for encoding in self.encodings:
            try:
                text = decode_text(raw, encoding)
            except (UnicodeDecodeError, LookupError) as e:
                logger.debug("Encoding %s rejected: %s", encoding, e)
                continue

            for delimiter in self.delimiters:
                try:
                    yield self.attempt(text, encoding, delimiter)
                except (ValueError, csv.Error) as e:
                    logger.debug(
                        "Delimiter %r with encoding %s rejected: %s",
                        delimiter, encoding, e
                    )

    def attempt(self, text: str, encoding: str, delimiter: str) -> ParseAttempt:
        """Header-aware parse of decoded text with one delimiter"""
        records, quote_problem = self._read_records(text, delimiter)

        # Greedy skipping: records holding only blanks are not rows, and the
        # header is the first record that survives
        kept = [
            (position, record)
            for position, record in enumerate(records)
            if not _is_blank_record(record)
        ]
        if not kept:
            return ParseAttempt(encoding=encoding, delimiter=delimiter)

        fields = dedupe_fields(kept[0][1])
        width = len(fields)

        diagnostics = []
        rows = []
        for index, (position, record) in enumerate(kept[1:], start=1):
            if quote_problem and quote_problem[0] == position:
                diagnostics.append(
                    f"Row {index}: Malformed quoting ({quote_problem[1]}); "
                    "the row was kept as read."
                )
            if len(record) > width:
                diagnostics.append(
                    f"Row {index}: Too many fields: expected {width}, found {len(record)}; "
                    "extra values were dropped."
                )
            elif len(record) < width:
                diagnostics.append(
                    f"Row {index}: Too few fields: expected {width}, found {len(record)}."
                )
            rows.append(dict(zip(fields, record)))

        return ParseAttempt(
            encoding=encoding,
            delimiter=delimiter,
            fields=fields,
            rows=rows,
            diagnostics=diagnostics
        )

    def _read_records(
        self, text: str, delimiter: str
    ) -> Tuple[List[List[str]], Optional[Tuple[int, str]]]:
        """
        Split text into raw records, one list of values per record

        The second item locates the first record with broken quoting (its
        position among the records and the reader's message), or is None.
        A trailing unterminated quote keeps the rest of the text as the
        record's last value instead of losing the record.
        """
        quote_problem = None
        strict = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter, strict=True)
        seen = 0
        try:
            for _ in strict:
                seen += 1
        except csv.Error as e:
            quote_problem = (seen, str(e))

        records = list(csv.reader(io.StringIO(text, newline=""), delimiter=delimiter))
        return records, quote_problem
