from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_doc_rubric.config import DocumentRubricColumnConfig
from data_designer_doc_rubric.core import get_rubric, validate

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


def join_row_text(values: Iterable[object]) -> str:
    return "\n\n".join(str(v) for v in values if v is not None)


class DocumentRubricColumnGenerator(ColumnGeneratorFullColumn[DocumentRubricColumnConfig]):
    """Column generator that scores document drafts against a rubric."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        rubric = get_rubric(self.config.rubric)
        logger.info(f"\U0001f4dd Scoring column {self.config.name!r} with the {rubric.name} rubric")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   min_score: {self.config.min_score}")

        results = []
        for _, row in data[self.config.target_columns].iterrows():
            result = validate(join_row_text(row.values), rubric)
            results.append(
                result.summary(
                    min_score=self.config.min_score,
                    include_issues=self.config.include_issues,
                    max_issues=self.config.max_issues,
                    include_dimensions=self.config.include_dimensions,
                )
            )

        data = data.copy()
        data[self.config.name] = results
        return data
