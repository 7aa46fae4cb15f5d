"""Architecture Decision Record rubric.

Dimensions (25 points each):

1. Context - problem framing, constraints, business stakes, MADR decision drivers
2. Decision - a clear "we will" statement, alternatives weighed, rationale
3. Consequences - balanced positive/negative effects, team impact, follow-ups
4. Status - lifecycle state, date, and coverage of the expected sections
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from data_designer_doc_rubric.core import (
    DimensionResult,
    DimensionSpec,
    Rubric,
    Signal,
    ValidationResult,
    register_rubric,
    validate,
)
from data_designer_doc_rubric.explain import register_indicators
from data_designer_doc_rubric.patterns import Pattern, PatternRegistry
from data_designer_doc_rubric.slop import Hyperparameters

_ML = re.IGNORECASE | re.MULTILINE

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

# (key, display name, weight, heading pattern)
REQUIRED_SECTIONS: tuple[tuple[str, str, float, str], ...] = (
    ("context", "Context", 2.0, r"^(#+\s*)?(context|background|problem|situation)"),
    ("drivers", "Decision Drivers", 1.5, r"^(#+\s*)?(decision\s+driver|driver)"),
    ("decision", "Decision", 2.0, r"^(#+\s*)?(decision|choice|selected|chosen)"),
    ("consequences", "Consequences", 2.0, r"^(#+\s*)?(consequence|impact|result|outcome|implication)"),
    ("status", "Status", 2.0, r"^(#+\s*)?(status|state)"),
    ("options", "Options Considered", 1.0, r"^(#+\s*)?(option|alternative|considered)"),
    ("rationale", "Rationale", 1.0, r"^(#+\s*)?(rationale|reason|justification|why)"),
    ("confirmation", "Confirmation", 1.0, r"^(#+\s*)?(confirmation|validation|verification)"),
)


def build_adr_patterns() -> PatternRegistry:
    patterns = [Pattern.compile(f"required.{key}", source, _ML) for key, _, _, source in REQUIRED_SECTIONS]
    patterns += [
        Pattern.compile("context.section", r"^(#+\s*)?(context|background|problem|situation|why)", _ML),
        Pattern.compile("context.language", r"\b(context|background|problem|situation|challenge|need|requirement|constraint|driver|force)\b"),
        Pattern.compile("context.constraints", r"\b(constraint|limitation|requirement|must|should|cannot|restriction|boundary)\b"),
        Pattern.compile("context.quantified", r"\d+\s*(%|million|thousand|hour|day|week|month|year|\$|dollar|user|customer|transaction)"),
        Pattern.compile("context.business", r"\b(business|customer|user|market|revenue|profit|competitive|strategic|value|stakeholder)\b"),

        Pattern.compile("decision.section", r"^(#+\s*)?(decision|choice|selected|chosen|we.will)", _ML),
        Pattern.compile("decision.language", r"\b(decide|decision|choose|chose|select|selected|adopt|use|implement|will)\b"),
        Pattern.compile("decision.clarity", r"\b(we.will|we.have.decided|the.decision.is|we.chose|we.selected)\b"),
        Pattern.compile("decision.specificity", r"\b(specifically|exactly|precisely|concretely|particular)\b"),
        Pattern.compile("decision.action_verbs", r"\b(use|adopt|implement|migrate|split|combine|establish|enforce)\b"),
        Pattern.compile(
            "decision.vague",
            r"\b(strategic\s+approach|architectural\s+intervention|improve\s+scalability|more\s+maintainable"
            r"|better\s+architecture|enhance\s+performance|optimize\s+the\s+system|modernize\s+the\s+platform"
            r"|transform\s+the\s+infrastructure)\b",
        ),
        Pattern.compile("decision.y_statement", r"\bchosen\s+option:?\s*.+?,?\s*because\b"),

        Pattern.compile("options.section", r"^(#+\s*)?(option|alternative|considered|candidate)", _ML),
        Pattern.compile("options.language", r"\b(option|alternative|candidate|possibility|approach|solution|choice)\b"),
        Pattern.compile("options.comparison", r"\b(compare|versus|vs|pro|con|advantage|disadvantage|trade.?off|benefit|drawback)\b"),
        Pattern.compile("options.rejected", r"\b(reject|not.chosen|ruled.out|dismissed|discarded|eliminated)\b"),
        Pattern.compile(
            "options.explicit_alternatives",
            # one line, at least one comma-separated alternative before "but chose"
            r"we considered [^,\n]+,[^\n]*?\bbut (?:chose|selected|decided|went with)",
        ),

        Pattern.compile("consequences.section", r"^(#+\s*)?(consequence|impact|result|outcome|implication)", _ML),
        Pattern.compile("consequences.language", r"\b(consequence|impact|result|outcome|implication|effect|affect)\b"),
        Pattern.compile(
            "consequences.positive",
            r"\b(benefit|advantage|improve|enable|allow|simplify|reduce|faster|easier|better|scalable|maintainable"
            r"|testable|decoupled|independent|automated)\b",
        ),
        Pattern.compile(
            "consequences.negative",
            r"\b(drawback|disadvantage|risk|cost|slower|harder|worse|trade.?off|latency|coupling|dependency"
            r"|bottleneck|single.point.of.failure|migration.effort)\b",
        ),
        Pattern.compile("consequences.neutral", r"\b(change|require|need|must|will.need|migration|update)\b"),
        Pattern.compile("consequences.vague", r"\b(complexity|overhead|difficult|challenging|problematic|issues?|concerns?)\b"),
        Pattern.compile(
            "consequences.team",
            r"training.*need|skill gap|hiring impact|team ramp|learning curve|expertise required|onboarding"
            r"|team structure|hiring|staffing",
        ),
        Pattern.compile(
            "consequences.subsequent",
            r"subsequent ADR|follow-on ADR|triggers ADR|future ADR|ADR-\d+"
            r"|triggers.*(?:decision|choice).*(?:on|for|about|regarding)\s+\w+",
        ),
        Pattern.compile(
            "consequences.review",
            r"\b\d+\s*(days?|weeks?|months?)\s*(review|reassess|revisit)|after-action|review.*timing"
            r"|recommended.*review|review in \d+|quarterly\s+review|annual\s+review",
        ),

        Pattern.compile("status.section", r"^(#+\s*)?(status|state)", _ML),
        Pattern.compile("status.values", r"\b(proposed|accepted|deprecated|superseded|rejected|draft|approved|implemented)\b"),
        Pattern.compile(
            "status.dates",
            r"\b(\d{4}-\d{2}-\d{2}|\d{1,2}/\d{1,2}/\d{2,4}|january|february|march|april|may|june|july|august"
            r"|september|october|november|december)\b",
        ),
        Pattern.compile("status.superseded_by", r"\b(superseded.by|replaced.by|see.also|successor)\b"),
        Pattern.compile("status.proposed", r"\bproposed\b"),
        Pattern.compile("status.accepted", r"\baccepted\b"),
        Pattern.compile("status.deprecated", r"\bdeprecated\b"),
        Pattern.compile("status.superseded", r"\bsuperseded\b"),

        Pattern.compile("rationale.section", r"^(#+\s*)?(rationale|reason|justification|why)", _ML),
        Pattern.compile("rationale.language", r"\b(because|reason|rationale|justification|why|due.to|since|therefore|thus)\b"),
        Pattern.compile("rationale.evidence", r"\b(evidence|data|research|study|benchmark|test|experiment|proof|demonstrate)\b"),

        Pattern.compile("drivers.section", r"^(#+\s*)?(decision\s+driver|driver|force|concern|quality)", _ML),
        Pattern.compile("drivers.header", r"^#+\s*decision\s+drivers?\b", _ML),
        Pattern.compile("drivers.block", r"^#+\s*decision\s+drivers?\b[\s\S]*?(?=^#+\s|\Z)", _ML),
        Pattern.compile("drivers.language", r"\b(driver|force|concern|quality|constraint|requirement|consideration)\b"),
        Pattern.compile("drivers.bullet", r"^[\s]*[-*•]\s+.+$", re.MULTILINE),
        Pattern.compile("drivers.numbered", r"^[\s]*\d+\.\s+.+$", re.MULTILINE),

        Pattern.compile("confirmation.section", r"^(#+\s*)?(confirmation|validation|verification|compliance)", _ML),
        Pattern.compile("confirmation.header", r"^#+\s*confirmation\b", _ML),
        Pattern.compile(
            "confirmation.validation",
            r"\b(confirm|validate|verify|review|test|audit|check|compliance|DCAR|architecture review|code review|load test)\b",
        ),
        Pattern.compile("confirmation.measurable", r"\b(metric|threshold|baseline|target|criteria|pass|fail)\b"),
    ]
    return PatternRegistry(patterns)


ADR_PATTERNS = build_adr_patterns()

MIN_DECISION_DRIVERS = 3

# ---------------------------------------------------------------------------
# Signals
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ContextSignal(Signal):
    has_context_section: bool = False
    has_context_language: bool = False
    has_constraints: bool = False
    constraint_count: int = 0
    is_quantified: bool = False
    quantified_count: int = 0
    has_business_focus: bool = False


@dataclass(frozen=True)
class DecisionSignal(Signal):
    has_decision_section: bool = False
    has_decision_language: bool = False
    has_clarity: bool = False
    clarity_count: int = 0
    has_specificity: bool = False
    has_action_verbs: bool = False
    action_verb_count: int = 0
    has_vague_decision: bool = False
    vague_decision_count: int = 0
    vague_phrases: tuple[str, ...] = ()
    has_y_statement: bool = False


@dataclass(frozen=True)
class OptionsSignal(Signal):
    has_options_section: bool = False
    has_options_language: bool = False
    options_count: int = 0
    has_comparison: bool = False
    comparison_count: int = 0
    has_rejected: bool = False
    has_explicit_alternatives: bool = False


@dataclass(frozen=True)
class ConsequencesSignal(Signal):
    has_consequences_section: bool = False
    has_consequences_language: bool = False
    positive_count: int = 0
    negative_count: int = 0
    has_neutral: bool = False
    vague_consequence_count: int = 0
    has_team_factors: bool = False
    has_subsequent_decisions: bool = False
    has_review_timing: bool = False

    @property
    def has_positive(self) -> bool:
        return self.positive_count > 0

    @property
    def has_negative(self) -> bool:
        return self.negative_count > 0

    @property
    def has_both_pos_neg(self) -> bool:
        return self.has_positive and self.has_negative

    @property
    def has_vague_consequences(self) -> bool:
        return self.vague_consequence_count > 0


@dataclass(frozen=True)
class StatusSignal(Signal):
    has_status_section: bool = False
    status_values: tuple[str, ...] = ()
    date_count: int = 0
    has_superseded_by: bool = False
    has_proposed: bool = False
    has_accepted: bool = False
    has_deprecated: bool = False
    has_superseded: bool = False

    @property
    def has_status_value(self) -> bool:
        return bool(self.status_values)

    @property
    def has_date(self) -> bool:
        return self.date_count > 0


@dataclass(frozen=True)
class RationaleSignal(Signal):
    has_rationale_section: bool = False
    has_rationale_language: bool = False
    rationale_count: int = 0
    has_evidence: bool = False
    evidence_count: int = 0


@dataclass(frozen=True)
class DecisionDriversSignal(Signal):
    has_section_header: bool = False
    has_section: bool = False
    has_driver_language: bool = False
    drivers_count: int = 0
    has_bullet_list: bool = False
    has_numbered_list: bool = False

    @property
    def has_minimum_drivers(self) -> bool:
        return self.drivers_count >= MIN_DECISION_DRIVERS


@dataclass(frozen=True)
class ConfirmationSignal(Signal):
    has_section_header: bool = False
    has_section: bool = False
    validation_count: int = 0
    measurable_count: int = 0


@dataclass(frozen=True)
class SectionsSignal(Signal):
    found: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()
    found_weight: float = 0.0
    total_weight: float = 0.0

    @property
    def coverage(self) -> float:
        return self.found_weight / self.total_weight if self.total_weight else 0.0


# ---------------------------------------------------------------------------
# Detectors
# ---------------------------------------------------------------------------


def detect_context(text: str, patterns: PatternRegistry = ADR_PATTERNS) -> ContextSignal:
    constraints = patterns["context.constraints"].count(text)
    quantified = patterns["context.quantified"].count(text)
    return ContextSignal(
        has_context_section=patterns["context.section"].occurs(text),
        has_context_language=patterns["context.language"].occurs(text),
        has_constraints=constraints > 0,
        constraint_count=constraints,
        is_quantified=quantified > 0,
        quantified_count=quantified,
        has_business_focus=patterns["context.business"].occurs(text),
    )


def detect_decision(text: str, patterns: PatternRegistry = ADR_PATTERNS) -> DecisionSignal:
    clarity = patterns["decision.clarity"].count(text)
    verbs = patterns["decision.action_verbs"].count(text)
    vague = patterns["decision.vague"].matches(text)
    return DecisionSignal(
        has_decision_section=patterns["decision.section"].occurs(text),
        has_decision_language=patterns["decision.language"].occurs(text),
        has_clarity=clarity > 0,
        clarity_count=clarity,
        has_specificity=patterns["decision.specificity"].occurs(text),
        has_action_verbs=verbs > 0,
        action_verb_count=verbs,
        has_vague_decision=bool(vague),
        vague_decision_count=len(vague),
        vague_phrases=tuple(vague),
        has_y_statement=patterns["decision.y_statement"].occurs(text),
    )


def detect_options(text: str, patterns: PatternRegistry = ADR_PATTERNS) -> OptionsSignal:
    options = patterns["options.language"].count(text)
    comparisons = patterns["options.comparison"].count(text)
    return OptionsSignal(
        has_options_section=patterns["options.section"].occurs(text),
        has_options_language=options > 0,
        options_count=options,
        has_comparison=comparisons > 0,
        comparison_count=comparisons,
        has_rejected=patterns["options.rejected"].occurs(text),
        has_explicit_alternatives=patterns["options.explicit_alternatives"].occurs(text),
    )


def detect_consequences(text: str, patterns: PatternRegistry = ADR_PATTERNS) -> ConsequencesSignal:
    return ConsequencesSignal(
        has_consequences_section=patterns["consequences.section"].occurs(text),
        has_consequences_language=patterns["consequences.language"].occurs(text),
        positive_count=patterns["consequences.positive"].count(text),
        negative_count=patterns["consequences.negative"].count(text),
        has_neutral=patterns["consequences.neutral"].occurs(text),
        vague_consequence_count=patterns["consequences.vague"].count(text),
        has_team_factors=patterns["consequences.team"].occurs(text),
        has_subsequent_decisions=patterns["consequences.subsequent"].occurs(text),
        has_review_timing=patterns["consequences.review"].occurs(text),
    )


def detect_status(text: str, patterns: PatternRegistry = ADR_PATTERNS) -> StatusSignal:
    return StatusSignal(
        has_status_section=patterns["status.section"].occurs(text),
        status_values=tuple(patterns["status.values"].matches(text)),
        date_count=patterns["status.dates"].count(text),
        has_superseded_by=patterns["status.superseded_by"].occurs(text),
        has_proposed=patterns["status.proposed"].occurs(text),
        has_accepted=patterns["status.accepted"].occurs(text),
        has_deprecated=patterns["status.deprecated"].occurs(text),
        has_superseded=patterns["status.superseded"].occurs(text),
    )


def detect_rationale(text: str, patterns: PatternRegistry = ADR_PATTERNS) -> RationaleSignal:
    rationale = patterns["rationale.language"].count(text)
    evidence = patterns["rationale.evidence"].count(text)
    return RationaleSignal(
        has_rationale_section=patterns["rationale.section"].occurs(text),
        has_rationale_language=rationale > 0,
        rationale_count=rationale,
        has_evidence=evidence > 0,
        evidence_count=evidence,
    )


def detect_decision_drivers(text: str, patterns: PatternRegistry = ADR_PATTERNS) -> DecisionDriversSignal:
    """MADR 3.0 "Decision Drivers": a dedicated section listing the forces at play."""
    has_header = patterns["drivers.header"].occurs(text)
    drivers = 0
    if has_header:
        block = patterns["drivers.block"].first(text) or ""
        drivers = patterns["drivers.bullet"].count(block) + patterns["drivers.numbered"].count(block)
    return DecisionDriversSignal(
        has_section_header=has_header,
        has_section=patterns["drivers.section"].occurs(text),
        has_driver_language=patterns["drivers.language"].occurs(text),
        drivers_count=drivers,
        has_bullet_list=patterns["drivers.bullet"].occurs(text),
        has_numbered_list=patterns["drivers.numbered"].occurs(text),
    )


def detect_confirmation(text: str, patterns: PatternRegistry = ADR_PATTERNS) -> ConfirmationSignal:
    return ConfirmationSignal(
        has_section_header=patterns["confirmation.header"].occurs(text),
        has_section=patterns["confirmation.section"].occurs(text),
        validation_count=patterns["confirmation.validation"].count(text),
        measurable_count=patterns["confirmation.measurable"].count(text),
    )


def detect_sections(text: str, patterns: PatternRegistry = ADR_PATTERNS) -> SectionsSignal:
    found: list[str] = []
    missing: list[str] = []
    found_weight = 0.0
    for key, name, weight, _ in REQUIRED_SECTIONS:
        if patterns[f"required.{key}"].occurs(text):
            found.append(name)
            found_weight += weight
        else:
            missing.append(name)
    return SectionsSignal(
        found=tuple(found),
        missing=tuple(missing),
        found_weight=found_weight,
        total_weight=sum(weight for _, _, weight, _ in REQUIRED_SECTIONS),
    )


# ---------------------------------------------------------------------------
# Scorers
# ---------------------------------------------------------------------------


def score_context(text: str) -> DimensionResult:
    """Context (25): framing 10, constraints 8, business focus 5, decision drivers 5."""
    issues: list[str] = []
    strengths: list[str] = []
    score = 0
    ctx = detect_context(text)

    if ctx.has_context_section and ctx.has_context_language:
        score += 10
        strengths.append("Clear context section with problem framing")
    elif ctx.has_context_language:
        score += 5
        issues.append("Context mentioned but lacks a dedicated section")
    else:
        issues.append("Context section missing - explain the situation and the problem")

    if ctx.constraint_count >= 2:
        score += 8
        strengths.append(f"{ctx.constraint_count} constraints/drivers identified")
    elif ctx.has_constraints:
        score += 4
        issues.append("Only one constraint mentioned - add specific requirements and limitations")
    else:
        issues.append("Constraints missing - list requirements, limitations, and forces")

    if ctx.has_business_focus:
        score += 5
        strengths.append("Context tied to business/stakeholder needs")
    else:
        issues.append("Add business context - explain why this matters to stakeholders")

    drivers = detect_decision_drivers(text)
    if drivers.has_section_header and drivers.has_minimum_drivers:
        score += 5
        strengths.append(f"Decision Drivers section with {drivers.drivers_count} drivers (MADR 3.0)")
    elif drivers.has_section_header:
        score += 2
        issues.append(
            f"Decision Drivers section lists only {drivers.drivers_count} drivers - "
            f"need {MIN_DECISION_DRIVERS}+ (MADR 3.0)"
        )
    elif drivers.has_driver_language:
        score += 1
        issues.append("Decision drivers mentioned but no dedicated section (MADR 3.0)")
    else:
        issues.append("Missing Decision Drivers section - list 3-5 forces/constraints (MADR 3.0)")

    return DimensionResult.clamped(score, 25, issues, strengths)


def score_decision(text: str) -> DimensionResult:
    """Decision (25): statement 10, alternatives 6, rationale 7, verbs +2, vague -5."""
    issues: list[str] = []
    strengths: list[str] = []
    score = 0
    decision = detect_decision(text)
    options = detect_options(text)
    rationale = detect_rationale(text)

    if decision.has_decision_section and decision.has_clarity:
        score += 10
        strengths.append("Decision clearly stated in a dedicated section")
    elif decision.has_decision_language:
        score += 5
        issues.append('Decision mentioned but could be clearer - use the "We will..." form')
    else:
        issues.append("Decision statement missing - state plainly what was decided")

    if decision.has_vague_decision:
        score -= 5
        issues.append(
            f"Vague decision detected ({decision.vague_decision_count} phrases) - "
            "name the specific technology or pattern chosen"
        )

    if decision.action_verb_count >= 2:
        score += 2
        strengths.append(f"Strong action verbs used ({decision.action_verb_count})")
    elif not decision.has_action_verbs:
        issues.append("Missing action verbs - use adopt, implement, migrate, split, combine, establish, enforce")

    if options.has_explicit_alternatives:
        score += 6
        strengths.append('Alternatives compared explicitly ("we considered X but chose Y")')
    elif options.has_options_section and options.has_comparison:
        score += 4
        strengths.append("Options compared with pros/cons")
        issues.append('Use the explicit form: "We considered X, Y, Z but chose..."')
    elif options.has_options_language:
        score += 2
        issues.append('Options mentioned but not compared - use "We considered X, Y, Z but chose..."')
    else:
        issues.append('Alternatives not documented - use "We considered X, Y, Z but chose..."')

    if rationale.has_rationale_section or rationale.has_evidence:
        score += 7
        strengths.append("Rationale explained with evidence")
    elif rationale.has_rationale_language:
        score += 3
        issues.append("Some rationale given - strengthen it with evidence or data")
    else:
        issues.append("Rationale missing - explain WHY this decision was made")

    return DimensionResult.clamped(score, 25, issues, strengths)


def score_consequences(text: str) -> DimensionResult:
    """Consequences (25): section 5, balance 10, team 5, follow-ups 3, review 2, vague -3."""
    issues: list[str] = []
    strengths: list[str] = []
    score = 0
    cons = detect_consequences(text)

    if cons.has_consequences_section:
        score += 5
        strengths.append("Dedicated consequences section")
    elif cons.has_consequences_language:
        score += 2
        issues.append("Consequences mentioned but lack a dedicated section")
    else:
        issues.append("Consequences section missing - document the impacts of this decision")

    pos, neg = cons.positive_count, cons.negative_count
    if pos >= 3 and neg >= 3:
        score += 10
        strengths.append(f"Balanced consequences: {pos} positive, {neg} negative")
    elif pos >= 2 and neg >= 2:
        score += 6
        issues.append(f"Need 3+ of each: currently {pos} positive, {neg} negative")
    elif pos >= 1 or neg >= 1:
        score += 3
        issues.append(f"Imbalanced: {pos} positive, {neg} negative - need 3+ of each")
    else:
        issues.append("Missing positive AND negative consequences - need 3+ of each")

    if cons.has_vague_consequences:
        score -= 3
        issues.append(
            f"Vague consequence terms detected ({cons.vague_consequence_count}) - "
            'replace "complexity"/"overhead" with concrete impacts'
        )

    if cons.has_team_factors:
        score += 5
        strengths.append("Team factors addressed (training/skills/hiring)")
    else:
        issues.append("Missing team factors - address training needs, skill gaps, hiring impact")

    if cons.has_subsequent_decisions:
        score += 3
        strengths.append("Follow-on ADRs/decisions identified")
    else:
        issues.append("Missing follow-on ADRs - which decisions does this one trigger?")

    if cons.has_review_timing:
        score += 2
        strengths.append("Review timing specified")
    else:
        issues.append("Missing review timing - when should this decision be reassessed?")

    return DimensionResult.clamped(score, 25, issues, strengths)


def score_status(text: str) -> DimensionResult:
    """Status (25): state 10, date 7, section coverage 8."""
    issues: list[str] = []
    strengths: list[str] = []
    score = 0
    status = detect_status(text)
    sections = detect_sections(text)

    if status.has_status_section and status.has_status_value:
        score += 10
        strengths.append(f"Status: {', '.join(status.status_values)}")
    elif status.has_status_value:
        score += 5
        issues.append("Status mentioned but lacks a dedicated section")
    else:
        issues.append("Status missing - add Proposed, Accepted, Deprecated, or Superseded")

    if status.has_date:
        score += 7
        strengths.append("Date information included")
    else:
        issues.append("Date missing - add when this decision was made")

    total_sections = len(REQUIRED_SECTIONS)
    if sections.coverage >= 0.85:
        score += 8
        strengths.append(f"{len(sections.found)}/{total_sections} required sections present")
    elif sections.coverage >= 0.60:
        score += 4
        issues.append(f"Missing sections: {', '.join(sections.missing)}")
    else:
        issues.append(f"Only {len(sections.found)} of {total_sections} sections present")

    return DimensionResult.clamped(score, 25, issues, strengths)


# ---------------------------------------------------------------------------
# Indicators
# ---------------------------------------------------------------------------

register_indicators(
    ContextSignal,
    (lambda s: s.has_context_section, "Dedicated context section"),
    (lambda s: s.has_context_language, "Context framing language"),
    (lambda s: s.has_constraints, lambda s: f"{s.constraint_count} constraints identified"),
    (lambda s: s.is_quantified, lambda s: f"{s.quantified_count} quantified metrics"),
    (lambda s: s.has_business_focus, "Business/stakeholder focus"),
)
register_indicators(
    DecisionSignal,
    (lambda s: s.has_decision_section, "Dedicated decision section"),
    (lambda s: s.has_decision_language, "Decision language present"),
    (lambda s: s.has_clarity, "Clear decision statement"),
    (lambda s: s.has_specificity, "Specific details provided"),
    (lambda s: s.has_action_verbs, lambda s: f"{s.action_verb_count} action verbs used"),
    (lambda s: s.has_y_statement, 'Y-statement ("Chosen option: X, because Y")'),
    (lambda s: s.has_vague_decision, lambda s: f"⚠️ {s.vague_decision_count} vague decision phrases detected"),
)
register_indicators(
    OptionsSignal,
    (lambda s: s.has_options_section, "Dedicated options section"),
    (lambda s: s.has_options_language, lambda s: f"{s.options_count} options mentioned"),
    (lambda s: s.has_comparison, "Options compared"),
    (lambda s: s.has_rejected, "Rejected options explained"),
    (lambda s: s.has_explicit_alternatives, "Explicit alternatives comparison"),
)
register_indicators(
    ConsequencesSignal,
    (lambda s: s.has_consequences_section, "Dedicated consequences section"),
    (lambda s: s.has_positive, lambda s: f"{s.positive_count} positive consequences"),
    (lambda s: s.has_negative, lambda s: f"{s.negative_count} negative consequences"),
    (lambda s: s.has_neutral, "Neutral impacts noted"),
    (lambda s: s.has_vague_consequences, lambda s: f"⚠️ {s.vague_consequence_count} vague terms (complexity/overhead)"),
)
register_indicators(
    StatusSignal,
    (lambda s: s.has_status_section, "Dedicated status section"),
    (lambda s: s.has_status_value, lambda s: f"Status: {', '.join(s.status_values)}"),
    (lambda s: s.has_date, "Date information present"),
    (lambda s: s.has_superseded_by, "Supersession reference"),
)
register_indicators(
    RationaleSignal,
    (lambda s: s.has_rationale_section, "Dedicated rationale section"),
    (lambda s: s.has_rationale_language, lambda s: f"{s.rationale_count} rationale statements"),
    (lambda s: s.has_evidence, "Evidence-based reasoning"),
)
register_indicators(
    DecisionDriversSignal,
    (lambda s: s.has_section_header, "Dedicated Decision Drivers section"),
    (lambda s: s.drivers_count > 0, lambda s: f"{s.drivers_count} drivers listed"),
    (lambda s: s.has_minimum_drivers, f"✓ Minimum {MIN_DECISION_DRIVERS} drivers (MADR 3.0)"),
    (
        lambda s: 0 < s.drivers_count < MIN_DECISION_DRIVERS,
        lambda s: f"⚠️ Only {s.drivers_count} drivers (need {MIN_DECISION_DRIVERS}+)",
    ),
)
register_indicators(
    ConfirmationSignal,
    (lambda s: s.has_section_header, "Dedicated Confirmation section"),
    (lambda s: s.validation_count > 0, lambda s: f"{s.validation_count} validation mechanisms"),
    (lambda s: s.measurable_count > 0, "Measurable criteria specified"),
)
register_indicators(
    SectionsSignal,
    (lambda s: bool(s.found), lambda s: f"Sections present: {', '.join(s.found)}"),
    (lambda s: bool(s.missing), lambda s: f"Sections missing: {', '.join(s.missing)}"),
)

# ---------------------------------------------------------------------------
# Rubric
# ---------------------------------------------------------------------------

ADR_RUBRIC = register_rubric(
    Rubric(
        id="adr",
        name="Architecture Decision Record",
        description="Architecture Decision Record for technical decisions",
        dimensions=(
            DimensionSpec("context", "Context", 25, "Clear problem context and constraints", score_context),
            DimensionSpec("decision", "Decision", 25, "Clear statement of the decision", score_decision),
            DimensionSpec("consequences", "Consequences", 25, "Positive and negative consequences", score_consequences),
            DimensionSpec(
                "status", "Status", 25, "Clear status (proposed/accepted/deprecated/superseded)", score_status
            ),
        ),
    )
)


def validate_adr(text: object, hyperparameters: Hyperparameters | None = None) -> ValidationResult:
    return validate(text, ADR_RUBRIC, hyperparameters)
