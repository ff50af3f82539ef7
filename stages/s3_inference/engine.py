"""Stage 3: Type Inference"""

import logging
import math
import re
from typing import Any, Callable, Dict, List, Optional, Tuple

import pandas as pd

from core.interfaces import Stage
from core.models import ColumnTypeProfile, ConsolidationResult, UnifiedTable
from core.enums import ColumnType
from config import settings

logger = logging.getLogger(__name__)

BOOLEAN_TOKENS = {"true", "false", "yes", "no", "1", "0"}
TRUE_TOKENS = {"true", "yes", "1"}

INTEGER_PATTERN = re.compile(r"-?[0-9]+")
NUMBER_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def cell_text(value: Any) -> Optional[str]:
    """Trimmed text of a cell, None for null or blank"""
    if value is None:
        return None
    if not isinstance(value, str) and pd.isna(value):
        return None
    text = str(value).strip()
    return text or None


def is_boolean_text(text: str) -> bool:
    return text.lower() in BOOLEAN_TOKENS


def is_integer_text(text: str) -> bool:
    return INTEGER_PATTERN.fullmatch(text) is not None


def is_number_text(text: str) -> bool:
    if NUMBER_PATTERN.fullmatch(text) is None:
        return False
    return math.isfinite(float(text))


def to_boolean(text: str) -> bool:
    return text.lower() in TRUE_TOKENS


# Candidate types in preference order: (recognizer, converter)
CONVERTERS: Dict[ColumnType, Tuple[Callable[[str], bool], Callable[[str], Any]]] = {
    ColumnType.BOOLEAN: (is_boolean_text, to_boolean),
    ColumnType.INTEGER: (is_integer_text, int),
    ColumnType.NUMBER: (is_number_text, float),
}


class TypeInferenceEngine(Stage[UnifiedTable, ConsolidationResult]):
    """
    Stage 3: Classify every column from a bounded sample, then convert all rows

    Phase one (``profile``) looks at the first ``sample_size`` rows and
    eliminates candidate types column by column. Phase two (``convert``)
    applies the chosen type to every cell that individually fits it; cells
    that do not fit keep their original text.
    """

    @property
    def name(self) -> str:
        return "Type Inference"

    @property
    def stage_number(self) -> int:
        return 3

    def __init__(self, sample_size: Optional[int] = None):
        self.sample_size = (
            settings.TYPE_INFERENCE_SAMPLE_SIZE if sample_size is None else sample_size
        )

    def validate_input(self, input_data: UnifiedTable) -> bool:
        return isinstance(input_data, UnifiedTable)

    async def execute(self, input_data: UnifiedTable) -> ConsolidationResult:
        """Execute type inference"""
        rows, profile = self.infer_and_convert(input_data.headers, input_data.rows)
        return ConsolidationResult(
            headers=input_data.headers,
            rows=rows,
            profile=profile
        )

    def infer_and_convert(
        self, headers: List[str], rows: List[Dict[str, Any]]
    ) -> Tuple[List[Dict[str, Any]], ColumnTypeProfile]:
        profile = self.profile(headers, rows)
        return self.convert(rows, profile), profile

    def profile(self, headers: List[str], rows: List[Dict[str, Any]]) -> ColumnTypeProfile:
        """Decide each column's type from the leading sample of rows"""
        sample = pd.DataFrame(rows[:self.sample_size], columns=headers)

        types = {}
        for header in headers:
            values = sample[header].map(cell_text).dropna()
            types[header] = self.classify(values)
            logger.debug("Column %r inferred as %s", header, types[header].value)

        return ColumnTypeProfile(types=types, sample_size=len(sample))

    def classify(self, values: pd.Series) -> ColumnType:
        """
        Highest-preference candidate that no non-empty value eliminates

        Boolean needs at least one value so an all-empty column never
        becomes boolean.
        """
        for column_type, (recognizer, _) in CONVERTERS.items():
            if column_type == ColumnType.BOOLEAN and values.empty:
                continue
            if values.map(recognizer).all():
                return column_type
        return ColumnType.STRING

    def convert(
        self, rows: List[Dict[str, Any]], profile: ColumnTypeProfile
    ) -> List[Dict[str, Any]]:
        """Apply the profile to every row of the dataset"""
        return [
            {
                header: self.convert_value(value, profile.type_of(header))
                for header, value in row.items()
            }
            for row in rows
        ]

    def convert_value(self, value: Any, column_type: ColumnType) -> Any:
        """Convert one cell; values the type does not recognise stay as they are"""
        text = cell_text(value)
        if text is None:
            return None

        if column_type not in CONVERTERS:
            return value
        recognizer, converter = CONVERTERS[column_type]
        if not recognizer(text):
            return value
        return converter(text)
