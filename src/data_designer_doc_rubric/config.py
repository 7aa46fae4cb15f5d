from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator

from data_designer.config.column_configs import SingleColumnConfig

from data_designer_doc_rubric.core import get_rubric, list_rubrics
from data_designer_doc_rubric.grading import READY_THRESHOLD


class DocumentRubricColumnConfig(SingleColumnConfig):
    """Score document drafts against a registered rubric (ADR, Power Statement, ...).

    Each row's target columns are joined into one draft, scored dimension by
    dimension, penalized for AI slop, and summarized as a 0-100 total with a
    letter grade and readiness label.

    Attributes:
        target_columns: Columns whose text content will be concatenated and scored.
        rubric: Registered rubric id, e.g. ``"adr"`` or ``"power-statement"``.
        min_score: Minimum total score (0-100) for ``is_valid=True``. Defaults to 70
            (the boundary of the "Ready" label).
        include_issues: Include the author-facing issue list in output.
        max_issues: Upper bound on reported issues per row.
        include_dimensions: Include per-dimension scores in output.
    """

    target_columns: list[str]
    rubric: str = Field(default="adr", description="Registered rubric id")
    min_score: int = Field(default=READY_THRESHOLD, ge=0, le=100, description="Minimum total score for is_valid=True")
    include_issues: bool = Field(default=True, description="Include issue strings in output")
    max_issues: int = Field(default=5, ge=0, description="Maximum number of issues reported per row")
    include_dimensions: bool = Field(default=False, description="Include per-dimension scores in output")
    column_type: Literal["doc-rubric"] = "doc-rubric"

    @field_validator("rubric")
    @classmethod
    def _known_rubric(cls, value: str) -> str:
        try:
            get_rubric(value)
        except KeyError:
            known = ", ".join(r.id for r in list_rubrics())
            raise ValueError(f"Unknown rubric {value!r}; expected one of: {known}") from None
        return value

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f4dd"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []
