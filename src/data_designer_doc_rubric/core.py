"""Rubric model, result types, and the generic validator.

A rubric is an ordered list of dimensions, each wired to a pure scorer
``text -> DimensionResult``. ``validate`` runs every scorer, subtracts the
shared slop deduction, adds any rubric-level bonus, and clamps the total.
Adding a document type means building a new ``Rubric``; nothing here changes.
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
import re
from dataclasses import dataclass, field
from typing import Callable

from data_designer_doc_rubric import grading
from data_designer_doc_rubric.slop import (
    DEFAULT_HYPERPARAMETERS,
    Hyperparameters,
    Severity,
    detect_slop,
    slop_deduction,
)

logger = logging.getLogger(__name__)

NO_CONTENT_ISSUE = "No content to validate"

_RUBRIC_ID_RE = re.compile(r"^[a-z][a-z0-9-]*$")

# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Signal:
    """Base for detector outputs: immutable counts, flags, and matched strings.

    Derived flags are public properties and are serialized alongside the fields.
    """

    def to_payload(self) -> dict[str, object]:
        payload: dict[str, object] = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            payload[f.name] = list(value) if isinstance(value, tuple) else value
        for name, _ in inspect.getmembers(type(self), lambda member: isinstance(member, property)):
            if not name.startswith("_"):
                payload[name] = getattr(self, name)
        return payload


@dataclass(frozen=True)
class DimensionResult:
    score: int
    max_score: int
    issues: tuple[str, ...] = ()
    strengths: tuple[str, ...] = ()

    @classmethod
    def clamped(cls, score: int, max_score: int, issues: list[str], strengths: list[str]) -> DimensionResult:
        return cls(max(0, min(score, max_score)), max_score, tuple(issues), tuple(strengths))

    @classmethod
    def empty(cls, max_score: int) -> DimensionResult:
        return cls(0, max_score, (NO_CONTENT_ISSUE,), ())

    def to_payload(self) -> dict[str, object]:
        return {
            "score": self.score,
            "max_score": self.max_score,
            "issues": list(self.issues),
            "strengths": list(self.strengths),
        }


@dataclass(frozen=True)
class RubricBonus:
    """A rubric-specific adjustment outside the dimensions (e.g. dual-format)."""

    amount: int
    strengths: tuple[str, ...] = ()
    issues: tuple[str, ...] = ()

    def to_payload(self) -> dict[str, object]:
        return {"amount": self.amount, "strengths": list(self.strengths), "issues": list(self.issues)}


@dataclass(frozen=True)
class SlopDeduction:
    amount: int
    penalty: int
    severity: Severity
    issues: tuple[str, ...] = ()

    def to_payload(self) -> dict[str, object]:
        return {
            "deduction": self.amount,
            "penalty": self.penalty,
            "severity": self.severity.value,
            "issues": list(self.issues),
        }


NO_SLOP = SlopDeduction(amount=0, penalty=0, severity=Severity.CLEAN)

Scorer = Callable[[str], DimensionResult]
BonusRule = Callable[[str], RubricBonus]


@dataclass(frozen=True)
class DimensionSpec:
    key: str
    name: str
    max_points: int
    description: str
    scorer: Scorer = field(repr=False, compare=False)


@dataclass(frozen=True)
class Rubric:
    """Named, ordered dimensions for one document type. Immutable once built."""

    id: str
    name: str
    dimensions: tuple[DimensionSpec, ...]
    total_points: int = 100
    bonus: BonusRule | None = field(default=None, repr=False, compare=False)
    description: str = ""

    def __post_init__(self) -> None:
        errors: list[str] = []
        if not _RUBRIC_ID_RE.match(self.id):
            errors.append(f"Rubric id {self.id!r} must be a lowercase slug (e.g. 'power-statement')")
        if not self.dimensions:
            errors.append("Rubric must declare at least one dimension")
        keys = [d.key for d in self.dimensions]
        if len(set(keys)) != len(keys):
            errors.append(f"Dimension keys must be unique: {keys}")
        for d in self.dimensions:
            if d.max_points <= 0:
                errors.append(f"Dimension {d.name!r} must have positive max_points")
        points = sum(d.max_points for d in self.dimensions)
        if self.dimensions and points != self.total_points:
            errors.append(f"Dimension points sum to {points}, expected {self.total_points}")
        if errors:
            raise ValueError(f"Invalid rubric {self.id!r}: " + "; ".join(errors))

    def dimension(self, key: str) -> DimensionSpec:
        for d in self.dimensions:
            if d.key == key:
                return d
        raise KeyError(f"Rubric {self.id!r} has no dimension {key!r}")


@dataclass(frozen=True)
class ValidationResult:
    total_score: int
    total_max: int
    rubric_id: str
    dimensions: dict[str, DimensionResult]
    slop: SlopDeduction = NO_SLOP
    bonus: RubricBonus | None = None
    issues: tuple[str, ...] = ()

    def __getitem__(self, key: str) -> DimensionResult:
        return self.dimensions[key]

    def dimension(self, position: int) -> DimensionResult:
        """Dimension by 1-based rubric order, for callers that address ``dimension1..N``."""
        if position < 1:
            raise IndexError(f"Dimension positions start at 1, got {position}")
        return list(self.dimensions.values())[position - 1]

    @property
    def grade(self) -> str:
        return grading.get_grade(self.total_score)

    @property
    def label(self) -> str:
        return grading.get_score_label(self.total_score)

    @property
    def color(self) -> str:
        return grading.get_score_color(self.total_score)

    def to_payload(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "rubric": self.rubric_id,
            "total_score": self.total_score,
            "total_max": self.total_max,
            "grade": self.grade,
            "label": self.label,
            "color": self.color,
        }
        for key, result in self.dimensions.items():
            payload[key] = result.to_payload()
        for position, result in enumerate(self.dimensions.values(), start=1):
            payload[f"dimension{position}"] = result.to_payload()
        payload["slop_detection"] = self.slop.to_payload()
        if self.bonus is not None:
            payload["bonus"] = self.bonus.to_payload()
        payload["issues"] = list(self.issues)
        return payload

    def summary(
        self,
        min_score: int = grading.READY_THRESHOLD,
        include_issues: bool = True,
        max_issues: int = 5,
        include_dimensions: bool = False,
    ) -> dict[str, object]:
        """Compact per-row record: pass/fail against ``min_score`` plus display fields."""
        output: dict[str, object] = {
            "is_valid": self.total_score >= min_score,
            "total_score": self.total_score,
            "grade": self.grade,
            "label": self.label,
            "rubric": self.rubric_id,
        }
        if include_dimensions:
            output["dimensions"] = {key: r.score for key, r in self.dimensions.items()}
            output["slop_deduction"] = self.slop.amount
        if include_issues:
            output["issues"] = list(self.issues[:max_issues])
        return output


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def _has_content(text: object) -> bool:
    return isinstance(text, str) and text.strip() != ""


def empty_result(rubric: Rubric) -> ValidationResult:
    return ValidationResult(
        total_score=0,
        total_max=rubric.total_points,
        rubric_id=rubric.id,
        dimensions={d.key: DimensionResult.empty(d.max_points) for d in rubric.dimensions},
        issues=(NO_CONTENT_ISSUE,),
    )


def _slop(text: str, hp: Hyperparameters | None) -> SlopDeduction:
    hp = hp or DEFAULT_HYPERPARAMETERS
    penalty = detect_slop(text, hp)
    amount = slop_deduction(penalty, hp)
    return SlopDeduction(
        amount=amount,
        penalty=penalty.penalty,
        severity=penalty.severity,
        issues=penalty.issues[: hp.reported_issue_cap] if penalty.penalty > 0 else (),
    )


def validate(text: object, rubric: Rubric, hyperparameters: Hyperparameters | None = None) -> ValidationResult:
    """Score ``text`` against ``rubric``.

    Never raises for any ``text``: ``None``, non-strings, and blank strings
    yield a zero result whose only issue is ``"No content to validate"``.

    Args:
        text: The draft to score.
        rubric: Which document type's dimensions to apply.
        hyperparameters: Optional slop-detector overrides.

    Returns:
        A ``ValidationResult`` with ``total_score`` clamped to
        ``[0, rubric.total_points]``.
    """
    if not _has_content(text):
        logger.debug(f"{rubric.id}: no content, returning degenerate result")
        return empty_result(rubric)

    dimensions = {d.key: d.scorer(text) for d in rubric.dimensions}
    slop = _slop(text, hyperparameters)
    bonus = rubric.bonus(text) if rubric.bonus is not None else None

    raw = sum(r.score for r in dimensions.values()) - slop.amount
    if bonus is not None:
        raw += bonus.amount
    total = max(0, min(raw, rubric.total_points))

    issues = [issue for r in dimensions.values() for issue in r.issues]
    if bonus is not None:
        issues.extend(bonus.issues)
    issues.extend(slop.issues)

    logger.debug(f"{rubric.id}: total={total} (raw={raw}, slop=-{slop.amount})")
    return ValidationResult(
        total_score=total,
        total_max=rubric.total_points,
        rubric_id=rubric.id,
        dimensions=dimensions,
        slop=slop,
        bonus=bonus,
        issues=tuple(issues),
    )


# ---------------------------------------------------------------------------
# Rubric registry
# ---------------------------------------------------------------------------


class UnknownRubricError(KeyError):
    pass


_REGISTRY: dict[str, Rubric] = {}


def register_rubric(rubric: Rubric) -> Rubric:
    if rubric.id in _REGISTRY:
        raise ValueError(f"Rubric {rubric.id!r} is already registered")
    _REGISTRY[rubric.id] = rubric
    logger.debug(f"Registered rubric {rubric.id!r} with {len(rubric.dimensions)} dimensions")
    return rubric


def _load_builtin_rubrics() -> None:
    # rubric modules register themselves on import
    from data_designer_doc_rubric import adr, power_statement  # noqa: F401


def get_rubric(rubric_id: str) -> Rubric:
    _load_builtin_rubrics()
    try:
        return _REGISTRY[rubric_id]
    except KeyError:
        known = ", ".join(sorted(_REGISTRY)) or "none"
        raise UnknownRubricError(f"Unknown rubric {rubric_id!r} (registered: {known})") from None


def list_rubrics() -> list[Rubric]:
    _load_builtin_rubrics()
    return list(_REGISTRY.values())


def validate_document(text: object, rubric_id: str, hyperparameters: Hyperparameters | None = None) -> ValidationResult:
    return validate(text, get_rubric(rubric_id), hyperparameters)
