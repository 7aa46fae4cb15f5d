# SPDX-License-Identifier: Apache-2.0
"""Document Rubric plugin for NeMo Data Designer.

Adds a ``doc-rubric`` column type that scores document drafts (Architecture
Decision Records, Power Statements) against multi-dimensional rubrics built
from compiled regex rules, with a shared penalty for AI slop. No LLM calls,
no API dependencies.

Usage::

    from data_designer_doc_rubric import DocumentRubricColumnConfig

    builder.add_column(DocumentRubricColumnConfig(
        name="adr_quality",
        target_columns=["adr"],
        rubric="adr",
        min_score=70,
    ))

The engine is usable on its own::

    from data_designer_doc_rubric import validate_document

    result = validate_document(text, "power-statement")
    result.total_score, result.grade, result.issues
"""

from data_designer_doc_rubric.config import DocumentRubricColumnConfig
from data_designer_doc_rubric.core import (
    Rubric,
    UnknownRubricError,
    ValidationResult,
    get_rubric,
    list_rubrics,
    register_rubric,
    validate,
    validate_document,
)
from data_designer_doc_rubric.grading import get_grade, get_score_color, get_score_label
from data_designer_doc_rubric.slop import Hyperparameters, calculate_slop_score, detect_slop

__all__ = [
    "DocumentRubricColumnConfig",
    "Hyperparameters",
    "Rubric",
    "UnknownRubricError",
    "ValidationResult",
    "calculate_slop_score",
    "detect_slop",
    "get_grade",
    "get_rubric",
    "get_score_color",
    "get_score_label",
    "list_rubrics",
    "register_rubric",
    "validate",
    "validate_document",
]
