"""Stage 2: Schema Unification"""

import logging
from typing import Any, Dict, List

import pandas as pd

from core.interfaces import Stage
from core.models import ParseResult, UnifiedTable

logger = logging.getLogger(__name__)


def _trim_keys(row: Dict[str, Any]) -> Dict[str, Any]:
    return {str(key).strip(): value for key, value in row.items() if key}


class SchemaUnifier(Stage[List[ParseResult], UnifiedTable]):
    """Stage 2: Stack independently shaped tables under the union of their headers"""
    
    @property
    def name(self) -> str:
        return "Schema Unification"
    
    @property
    def stage_number(self) -> int:
        return 2
    
    def validate_input(self, input_data: List[ParseResult]) -> bool:
        return bool(input_data) and all(isinstance(r, ParseResult) for r in input_data)
    
    async def execute(self, input_data: List[ParseResult]) -> UnifiedTable:
        """Execute unification"""
        return self.unify(input_data)

    def build_schema(self, results: List[ParseResult]) -> List[str]:
        """Union of all field names, first-seen order, blanks skipped"""
        headers: List[str] = []
        seen = set()
        for result in results:
            for field in result.fields:
                header = str(field).strip()
                if header and header not in seen:
                    seen.add(header)
                    headers.append(header)
        return headers

    def unify(self, results: List[ParseResult]) -> UnifiedTable:
        """Build the unified table; every row holds every header"""
        headers = self.build_schema(results)

        trimmed_rows = [
            _trim_keys(row)
            for result in results
            for row in result.rows
        ]
        if not trimmed_rows:
            return UnifiedTable(headers=headers, rows=[])

        # Missing columns come out as NaN, normalised to None below
        unified = pd.DataFrame(trimmed_rows, columns=headers)
        unified = unified.astype(object).where(unified.notna(), None)

        logger.info(
            "Unified %d table(s) into %d column(s), %d row(s)",
            len(results), len(headers), len(unified)
        )
        return UnifiedTable(
            headers=headers,
            rows=unified.to_dict(orient="records")
        )
