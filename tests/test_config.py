import pytest
from pydantic import ValidationError

from data_designer_doc_rubric.config import DocumentRubricColumnConfig
from data_designer_doc_rubric.generator import join_row_text


class TestDocumentRubricColumnConfig:
    def test_defaults(self):
        config = DocumentRubricColumnConfig(name="quality", target_columns=["draft"])
        assert config.rubric == "adr"
        assert config.min_score == 70
        assert config.max_issues == 5
        assert config.column_type == "doc-rubric"
        assert config.required_columns == ["draft"]
        assert config.side_effect_columns == []

    def test_power_statement_rubric(self):
        config = DocumentRubricColumnConfig(name="q", target_columns=["draft"], rubric="power-statement")
        assert config.rubric == "power-statement"

    def test_unknown_rubric_rejected(self):
        with pytest.raises(ValidationError, match="Unknown rubric"):
            DocumentRubricColumnConfig(name="q", target_columns=["draft"], rubric="memo")

    def test_min_score_bounds(self):
        with pytest.raises(ValidationError):
            DocumentRubricColumnConfig(name="q", target_columns=["draft"], min_score=101)


class TestJoinRowText:
    def test_skips_missing_values_and_keeps_line_starts(self):
        assert join_row_text(["## Context\nWhy", None, "## Decision"]) == "## Context\nWhy\n\n## Decision"
