import pytest

from data_designer_doc_rubric.core import (
    NO_CONTENT_ISSUE,
    DimensionResult,
    DimensionSpec,
    Rubric,
    RubricBonus,
    UnknownRubricError,
    get_rubric,
    list_rubrics,
    register_rubric,
    validate,
    validate_document,
)
from data_designer_doc_rubric.slop import Hyperparameters

PLAIN_TEXT = "Plain words here"

SLOPPY_TEXT = (
    "Furthermore, this robust, seamless, comprehensive and innovative platform is truly "
    "groundbreaking. Moreover, it is a holistic, scalable and revolutionary ecosystem. "
    "Additionally, let's dive in to this cutting-edge, next-generation tapestry."
)


def _fixed(score, max_score, issues=(), strengths=()):
    return lambda text: DimensionResult.clamped(score, max_score, list(issues), list(strengths))


def _toy_rubric(a=60, b=40, bonus=None, rubric_id="toy"):
    return Rubric(
        id=rubric_id,
        name="Toy",
        dimensions=(
            DimensionSpec("alpha", "Alpha", 60, "first", _fixed(a, 60, issues=["a-issue"])),
            DimensionSpec("beta", "Beta", 40, "second", _fixed(b, 40)),
        ),
        bonus=bonus,
    )


class TestDimensionResult:
    def test_clamped_to_range(self):
        assert DimensionResult.clamped(30, 25, [], []).score == 25
        assert DimensionResult.clamped(-3, 25, [], []).score == 0

    def test_empty(self):
        result = DimensionResult.empty(25)
        assert result.score == 0
        assert result.issues == (NO_CONTENT_ISSUE,)


class TestRubric:
    def test_points_must_sum_to_total(self):
        with pytest.raises(ValueError, match="sum to 90"):
            Rubric(
                id="bad",
                name="Bad",
                dimensions=(DimensionSpec("a", "A", 90, "", _fixed(0, 90)),),
            )

    def test_id_must_be_slug(self):
        with pytest.raises(ValueError, match="lowercase slug"):
            _toy_rubric(rubric_id="Not A Slug")

    def test_dimension_keys_unique(self):
        with pytest.raises(ValueError, match="unique"):
            Rubric(
                id="dupe",
                name="Dupe",
                dimensions=(
                    DimensionSpec("a", "A", 50, "", _fixed(0, 50)),
                    DimensionSpec("a", "A again", 50, "", _fixed(0, 50)),
                ),
            )

    def test_needs_dimensions(self):
        with pytest.raises(ValueError, match="at least one dimension"):
            Rubric(id="empty", name="Empty", dimensions=())

    def test_dimension_lookup(self):
        rubric = _toy_rubric()
        assert rubric.dimension("beta").max_points == 40
        with pytest.raises(KeyError):
            rubric.dimension("gamma")


class TestValidate:
    @pytest.mark.parametrize("text", ["", "   \n\t", None, 42, ["not", "text"]])
    def test_no_content(self, text):
        result = validate(text, _toy_rubric())
        assert result.total_score == 0
        assert result.total_max == 100
        assert result.issues == (NO_CONTENT_ISSUE,)
        assert all(r.score == 0 and r.issues == (NO_CONTENT_ISSUE,) for r in result.dimensions.values())
        assert result["alpha"].max_score == 60

    def test_sums_dimensions(self):
        result = validate(PLAIN_TEXT, _toy_rubric(a=30, b=20))
        assert result.total_score == 50
        assert result.slop.amount == 0
        assert result.issues == ("a-issue",)

    def test_positional_aliases_follow_rubric_order(self):
        result = validate(PLAIN_TEXT, _toy_rubric(a=30, b=20))
        assert result.dimension(1) is result["alpha"]
        assert result.dimension(2) is result["beta"]
        with pytest.raises(IndexError):
            result.dimension(0)

    def test_bonus_is_clamped_to_total(self):
        rubric = _toy_rubric(a=60, b=40, bonus=lambda text: RubricBonus(10, strengths=("bonus",)))
        result = validate(PLAIN_TEXT, rubric)
        assert result.total_score == 100
        assert result.bonus.amount == 10

    def test_slop_never_drives_total_negative(self):
        result = validate(SLOPPY_TEXT, _toy_rubric(a=0, b=0))
        assert result.slop.amount > 0
        assert result.total_score == 0

    def test_issue_order_dimensions_bonus_slop(self):
        rubric = _toy_rubric(a=10, b=10, bonus=lambda text: RubricBonus(0, issues=("bonus-issue",)))
        result = validate(SLOPPY_TEXT, rubric)
        assert result.issues[:2] == ("a-issue", "bonus-issue")
        assert result.issues[2:] == result.slop.issues
        assert 0 < len(result.slop.issues) <= 2

    def test_slop_deduction_applied(self):
        result = validate(SLOPPY_TEXT, _toy_rubric(a=30, b=20))
        assert result.total_score == 50 - result.slop.amount
        assert 0 < result.slop.amount <= 5

    def test_hyperparameters_reach_slop(self):
        lenient = Hyperparameters(deduction_cap=0)
        result = validate(SLOPPY_TEXT, _toy_rubric(a=30, b=20), lenient)
        assert result.slop.amount == 0
        assert result.total_score == 50

    def test_deterministic(self):
        rubric = _toy_rubric(a=30, b=20)
        assert validate(SLOPPY_TEXT, rubric).to_payload() == validate(SLOPPY_TEXT, rubric).to_payload()

    def test_payload(self):
        payload = validate(PLAIN_TEXT, _toy_rubric(a=30, b=20)).to_payload()
        assert payload["rubric"] == "toy"
        assert payload["total_score"] == 50
        assert payload["grade"] == "F"
        assert payload["label"] == "Needs Work"
        assert payload["color"] == "yellow"
        assert payload["dimension1"] == payload["alpha"]
        assert payload["dimension2"] == payload["beta"]
        assert payload["slop_detection"]["deduction"] == 0
        assert "bonus" not in payload

    def test_summary(self):
        result = validate(PLAIN_TEXT, _toy_rubric(a=30, b=20))
        summary = result.summary(min_score=50, max_issues=0, include_dimensions=True)
        assert summary["is_valid"] is True
        assert summary["issues"] == []
        assert summary["dimensions"] == {"alpha": 30, "beta": 20}
        assert result.summary()["is_valid"] is False
        assert "dimensions" not in result.summary()


class TestRegistry:
    def test_builtin_rubrics_registered(self):
        ids = [r.id for r in list_rubrics()]
        assert "adr" in ids
        assert "power-statement" in ids

    def test_unknown_rubric(self):
        with pytest.raises(UnknownRubricError, match="no-such-rubric"):
            get_rubric("no-such-rubric")
        assert issubclass(UnknownRubricError, KeyError)

    def test_register_and_reject_duplicate(self):
        rubric = register_rubric(_toy_rubric(a=30, b=20, rubric_id="toy-registry"))
        assert get_rubric("toy-registry") is rubric
        assert validate_document(PLAIN_TEXT, "toy-registry").total_score == 50
        with pytest.raises(ValueError, match="already registered"):
            register_rubric(_toy_rubric(rubric_id="toy-registry"))


ADR_TEXT = """## Status
Accepted on 2026-02-14

## Context
Our business needs ACID compliance. We must handle 10000 transactions per hour.

## Decision
We will implement PostgreSQL because benchmark data shows 99.9% reliability.
We considered MySQL, MongoDB, Redis but chose PostgreSQL.

## Consequences
Benefits: faster queries, easier maintenance, better reliability.
Drawbacks: migration cost, risk during transition, slower adoption."""

POWER_TEXT = (
    "Led a team of 8 engineers at Acme to migrate billing in 6 months, "
    "cutting costs 35% and saving $1.2M annually."
)

RANGE_CORPUS = {
    "empty": "",
    "whitespace": "  \n\t ",
    "plain": PLAIN_TEXT,
    "slop-heavy": SLOPPY_TEXT * 20,
    "huge-adr": "\n\n".join([ADR_TEXT] * 200),
    "huge-power": "\n".join([POWER_TEXT] * 500),
    "vague-only": "A strategic approach to improve scalability adds complexity and overhead. " * 30,
}

ADVERSARIAL_HYPERPARAMETERS = Hyperparameters(
    deduction_scale=50.0,
    deduction_cap=1000,
    penalty_tiers=((0, 0, 999, "Adversarial penalty ({count} patterns)"),),
)


class TestScoreRange:
    @pytest.mark.parametrize("rubric_id", ["adr", "power-statement"])
    @pytest.mark.parametrize("text", RANGE_CORPUS.values(), ids=RANGE_CORPUS.keys())
    @pytest.mark.parametrize("hyperparameters", [None, ADVERSARIAL_HYPERPARAMETERS], ids=["default", "adversarial"])
    def test_scores_stay_in_range(self, rubric_id, text, hyperparameters):
        rubric = get_rubric(rubric_id)
        result = validate(text, rubric, hyperparameters)
        assert 0 <= result.total_score <= result.total_max == 100
        assert list(result.dimensions) == [d.key for d in rubric.dimensions]
        for d in rubric.dimensions:
            assert result[d.key].max_score == d.max_points
            assert 0 <= result[d.key].score <= d.max_points
