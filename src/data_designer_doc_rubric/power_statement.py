"""Power Statement rubric.

A power statement is a short sales/career narrative: an action, the context it
happened in, and a quantified result. Dimensions (25 points each):

1. Clarity - plain language, no filler or jargon, active voice, 50-150 words
2. Impact - business/customer outcomes, quantified, with scale
3. Action - opens with a strong past-tense verb, avoids weak verbs
4. Specificity - impact metrics (%, $), context, timeframes

Drafts that carry both a concise "Version A" and a structured "Version B" earn a
dual-format bonus of up to 5 points on top of the dimensions.
"""

from __future__ import annotations

import re
import string
from dataclasses import dataclass

from data_designer_doc_rubric.core import (
    DimensionResult,
    DimensionSpec,
    Rubric,
    RubricBonus,
    Signal,
    ValidationResult,
    register_rubric,
    validate,
)
from data_designer_doc_rubric.explain import register_indicators
from data_designer_doc_rubric.patterns import Pattern, PatternRegistry
from data_designer_doc_rubric.slop import Hyperparameters

# ---------------------------------------------------------------------------
# Word lists
# ---------------------------------------------------------------------------

STRONG_ACTION_VERBS: tuple[str, ...] = (
    "achieved", "accelerated", "accomplished", "acquired", "activated", "adapted",
    "administered", "advanced", "advised", "advocated", "allocated", "amplified",
    "analyzed", "anchored", "applied", "appointed", "appraised", "approved",
    "architected", "arranged", "assembled", "assessed", "assigned", "attained",
    "audited", "authored", "automated", "awarded", "balanced", "boosted",
    "bridged", "budgeted", "built", "calculated", "captured", "cataloged",
    "centralized", "chaired", "championed", "changed", "clarified", "coached",
    "collaborated", "combined", "commanded", "communicated", "compared", "compiled",
    "completed", "composed", "computed", "conceived", "conceptualized", "condensed",
    "conducted", "configured", "conserved", "consolidated", "constructed", "consulted",
    "contracted", "contributed", "controlled", "converted", "convinced", "coordinated",
    "corrected", "counseled", "created", "critiqued", "cultivated", "customized",
    "cut", "debugged", "decentralized", "decreased", "defined", "delegated",
    "delivered", "demonstrated", "deployed", "designed", "detected", "determined",
    "developed", "devised", "diagnosed", "directed", "discovered", "dispatched",
    "displayed", "dissected", "distributed", "diversified", "diverted", "documented",
    "doubled", "drafted", "drove", "earned", "edited", "educated", "effected",
    "elected", "elevated", "eliminated", "enabled", "encouraged", "endorsed",
    "enforced", "engaged", "engineered", "enhanced", "enlarged", "enlisted",
    "ensured", "established", "estimated", "evaluated", "examined", "exceeded",
    "executed", "expanded", "expedited", "experimented", "explained", "explored",
    "expressed", "extended", "extracted", "fabricated", "facilitated", "fashioned",
    "finalized", "fixed", "focused", "forecasted", "forged", "formalized",
    "formed", "formulated", "fortified", "fostered", "founded", "fulfilled",
    "gained", "gathered", "generated", "governed", "grew", "guided", "halved",
    "handled", "headed", "heightened", "hired", "hosted", "identified",
    "illustrated", "implemented", "improved", "improvised", "inaugurated", "increased",
    "incubated", "influenced", "informed", "initiated", "innovated", "inspected",
    "inspired", "installed", "instituted", "instructed", "integrated", "intensified",
    "interpreted", "interviewed", "introduced", "invented", "invested", "investigated",
    "launched", "led", "leveraged", "licensed", "lifted", "linked", "lobbied",
    "localized", "located", "logged", "lowered", "maintained", "managed", "mapped",
    "marketed", "mastered", "maximized", "measured", "mediated", "mentored", "merged",
    "minimized", "mobilized", "modeled", "moderated", "modernized", "modified",
    "monitored", "motivated", "multiplied", "navigated", "negotiated", "netted",
    "nurtured", "observed", "obtained", "opened", "operated", "optimized", "orchestrated",
    "ordered", "organized", "originated", "outlined", "outpaced", "outperformed",
    "overcame", "overhauled", "oversaw", "partnered", "passed", "performed", "persuaded",
    "piloted", "pioneered", "placed", "planned", "positioned", "predicted", "prepared",
    "presented", "preserved", "presided", "prevented", "prioritized", "processed",
    "procured", "produced", "profiled", "programmed", "projected", "promoted",
    "proposed", "protected", "proved", "provided", "publicized", "published",
    "purchased", "pursued", "qualified", "quantified", "questioned", "raised",
    "ranked", "rated", "reached", "realigned", "realized", "rearranged", "rebuilt",
    "recaptured", "received", "recognized", "recommended", "reconciled", "reconstructed",
    "recorded", "recovered", "recruited", "rectified", "redesigned", "reduced",
    "reengineered", "referred", "refined", "reformed", "refurbished", "regained",
    "registered", "regulated", "rehabilitated", "reinforced", "reinstated", "rejuvenated",
    "related", "released", "remodeled", "renegotiated", "renewed", "reorganized",
    "repaired", "replaced", "replicated", "reported", "repositioned", "represented",
    "reproduced", "requested", "researched", "reshaped", "resolved", "responded",
    "restored", "restructured", "retained", "retrieved", "revamped", "revealed",
    "reversed", "reviewed", "revised", "revitalized", "revolutionized", "rewarded",
    "routed", "safeguarded", "salvaged", "saved", "scheduled", "screened", "secured",
    "segmented", "selected", "separated", "served", "serviced", "set", "settled",
    "shaped", "shared", "sharpened", "shipped", "shortened", "showcased", "simplified",
    "simulated", "slashed", "sold", "solicited", "solved", "sorted", "sourced",
    "sparked", "spearheaded", "specialized", "specified", "sponsored", "stabilized",
    "staffed", "staged", "standardized", "started", "steered", "stimulated",
    "strategized", "streamlined", "strengthened", "stretched", "structured", "studied",
    "submitted", "succeeded", "summarized", "superseded", "supervised", "supplied",
    "supported", "surpassed", "surveyed", "sustained", "synchronized", "synthesized",
    "systematized", "tabulated", "tailored", "targeted", "taught", "terminated",
    "tested", "tightened", "traced", "tracked", "traded", "trained", "transcribed",
    "transferred", "transformed", "transitioned", "translated", "transmitted",
    "transported", "traveled", "treated", "trimmed", "tripled", "troubleshot",
    "turned", "tutored", "uncovered", "undertook", "unified", "united", "updated",
    "upgraded", "upheld", "utilized", "validated", "valued", "verified", "visualized",
    "volunteered", "widened", "won", "worked", "wrote",
)

WEAK_VERBS: tuple[str, ...] = (
    "was", "were", "been", "being", "am", "is", "are",
    "had", "has", "have", "having",
    "did", "does", "do", "doing",
    "helped", "assisted", "supported", "worked on", "was responsible for",
    "participated in", "was involved in", "contributed to",
)

FILLER_SOURCES: tuple[str, ...] = (
    r"\b(very|really|quite|somewhat|rather|fairly|pretty much)\b",
    r"\b(basically|essentially|actually|literally|virtually)\b",
    r"\b(in order to|due to the fact that|for the purpose of)\b",
    r"\b(a lot of|lots of|tons of|bunch of)\b",
    r"\b(thing|stuff|something|somehow)\b",
    r"it'?s worth noting( that)?",
    r"in today'?s (competitive )?landscape",
    r"let'?s talk about",
    r"the reality is",
)

JARGON_SOURCES: tuple[str, ...] = (
    r"\b(synergy|synergize|synergistic)\b",
    r"\b(leverage|leveraging|leveraged)\b",
    r"\b(paradigm|paradigm shift)\b",
    r"\b(best.in.class|world.class|cutting.edge|state.of.the.art)\b",
    r"\b(move the needle|low.hanging fruit|boil the ocean)\b",
    r"\b(circle back|touch base|take offline)\b",
    r"\b(bandwidth|bandwidth to)\b",
    r"\b(deep dive|drill down)\b",
)

CONCISE_WORDS = (50, 150)
TOO_SHORT_WORDS = 30
TOO_LONG_WORDS = 200

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------


def build_power_statement_patterns() -> PatternRegistry:
    patterns = [Pattern.words(f"strong_verb.{verb}", [verb], suffix="(?:d|ed)?") for verb in dict.fromkeys(STRONG_ACTION_VERBS)]
    patterns += [Pattern.words(f"weak_verb.{verb}", [verb]) for verb in WEAK_VERBS]
    patterns += [Pattern.compile(f"filler.{i}", source) for i, source in enumerate(FILLER_SOURCES)]
    patterns += [Pattern.compile(f"jargon.{i}", source) for i, source in enumerate(JARGON_SOURCES)]
    patterns += [
        Pattern.compile("action.weak_opening", r"^(was|were|had|have|helped|assisted|worked|participated|contributed)"),

        Pattern.compile("specificity.numbers", r"\d+(\.\d+)?"),
        Pattern.compile("specificity.percentages", r"\d+(\.\d+)?%"),
        Pattern.compile("specificity.dollars", r"\$[\d,]+(\.\d+)?[KMB]?|\d+(\.\d+)?\s*(million|billion|thousand)"),
        Pattern.compile("specificity.time", r"\d+\s*(hour|day|week|month|year|minute|second)s?"),
        Pattern.compile(
            "specificity.timeframes",
            r"\b(Q[1-4]\s*[-–]?\s*(Q[1-4]\s*)?\d{4}|\d+\s*(months?|quarters?|weeks?)\b|next\s+(quarter|month|year)"
            r"|by\s+\w+\s+\d{4}|within\s+\d+\s+\w+)",
        ),
        Pattern.compile(
            "specificity.quantity",
            r"\d+\s*(user|customer|client|team|member|employee|project|product|feature|system|application)s?",
        ),
        Pattern.compile(
            "specificity.comparisons",
            r"\b(increased|decreased|reduced|improved|grew|doubled|tripled|halved|cut)\s+by\s+\d+",
        ),
        Pattern.compile("specificity.context", r"\b(at|for|with|across|within)\s+[A-Z][a-zA-Z]*"),
        Pattern.compile("specificity.team_context", r"\b(team|department|organization|company|division|corp|inc|llc)\b"),

        Pattern.compile("impact.business", r"\b(revenue|profit|cost|savings|efficiency|productivity|growth|ROI|return)\b"),
        Pattern.compile(
            "impact.customer",
            r"\b(customer|user|client|satisfaction|experience|retention|acquisition|engagement|NPS)\b",
        ),
        Pattern.compile(
            "impact.scale",
            r"\b(company.wide|organization.wide|enterprise|global|national|regional|cross.functional)\b",
        ),
        Pattern.compile("impact.result", r"\b(resulting in|leading to|which|enabling|driving|achieving|delivering)\b"),
        Pattern.compile(
            "impact.improvement",
            r"\b(improved|increased|reduced|decreased|enhanced|accelerated|streamlined|optimized)\b",
        ),

        Pattern.compile(
            "clarity.passive",
            r"\b(am|are|is|was|were|been|being)\s+(\w+ed|achieved|led|built|won|made|done|given|taken|shown)\b",
        ),
        Pattern.compile("clarity.bullets", r"^\s*[-*+•◆✓✅→►▶|]\s+|^\s*\d+[.)]\s+", re.MULTILINE),
        Pattern.compile(
            "clarity.vague_improvement",
            r"\b(improve|improved|improving|enhance|enhanced|enhancing|optimize|optimized|optimizing"
            r"|better results?|significant|significantly)\b",
        ),

        Pattern.compile("version.a", r"##?\s*Version\s*A[:\s]"),
        Pattern.compile("version.b", r"##?\s*Version\s*B[:\s]"),
        Pattern.compile("section.challenge", r"###?\s*(The\s+)?Challenge"),
        Pattern.compile("section.solution", r"###?\s*(The\s+)?Solution"),
        Pattern.compile("section.results", r"###?\s*(Proven\s+)?Results"),
        Pattern.compile("section.why_it_works", r"###?\s*Why\s+It\s+Works"),
    ]
    return PatternRegistry(patterns)


POWER_STATEMENT_PATTERNS = build_power_statement_patterns()

# ---------------------------------------------------------------------------
# Signals
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ActionVerbSignal(Signal):
    starts_with_strong_verb: bool = False
    strong_verb_count: int = 0
    strong_verbs_found: tuple[str, ...] = ()
    weak_verbs_found: tuple[str, ...] = ()
    starts_with_weak_pattern: bool = False

    @property
    def weak_verb_count(self) -> int:
        return len(self.weak_verbs_found)

    @property
    def has_weak_verbs(self) -> bool:
        return bool(self.weak_verbs_found)


@dataclass(frozen=True)
class SpecificitySignal(Signal):
    number_count: int = 0
    percentage_count: int = 0
    dollar_count: int = 0
    time_count: int = 0
    timeframe_count: int = 0
    quantity_count: int = 0
    comparison_count: int = 0
    has_context: bool = False
    has_team_context: bool = False

    @property
    def has_numbers(self) -> bool:
        return self.number_count > 0

    @property
    def has_percentages(self) -> bool:
        return self.percentage_count > 0

    @property
    def has_dollar_amounts(self) -> bool:
        return self.dollar_count > 0

    @property
    def has_time_metrics(self) -> bool:
        return self.time_count > 0

    @property
    def has_comparisons(self) -> bool:
        return self.comparison_count > 0


@dataclass(frozen=True)
class ImpactSignal(Signal):
    business_impact_count: int = 0
    customer_impact_count: int = 0
    scale_count: int = 0
    result_count: int = 0
    improvement_count: int = 0

    @property
    def has_business_impact(self) -> bool:
        return self.business_impact_count > 0

    @property
    def has_customer_impact(self) -> bool:
        return self.customer_impact_count > 0

    @property
    def has_scale(self) -> bool:
        return self.scale_count > 0


@dataclass(frozen=True)
class ClaritySignal(Signal):
    filler_count: int = 0
    fillers_found: tuple[str, ...] = ()
    jargon_count: int = 0
    jargon_found: tuple[str, ...] = ()
    word_count: int = 0
    passive_count: int = 0
    bullet_count: int = 0
    vague_improvement_count: int = 0
    vague_improvement_found: tuple[str, ...] = ()

    @property
    def is_concise(self) -> bool:
        low, high = CONCISE_WORDS
        return low <= self.word_count <= high

    @property
    def is_too_short(self) -> bool:
        return self.word_count < TOO_SHORT_WORDS

    @property
    def is_too_long(self) -> bool:
        return self.word_count > TOO_LONG_WORDS

    @property
    def has_passive_voice(self) -> bool:
        return self.passive_count > 0

    @property
    def has_bullet_points(self) -> bool:
        return self.bullet_count > 2


@dataclass(frozen=True)
class VersionSignal(Signal):
    has_version_a: bool = False
    has_version_b: bool = False
    structured_section_count: int = 0

    @property
    def has_both_versions(self) -> bool:
        return self.has_version_a and self.has_version_b

    @property
    def has_structured_content(self) -> bool:
        return self.structured_section_count >= 3


# ---------------------------------------------------------------------------
# Detectors
# ---------------------------------------------------------------------------


def _unique(values: list[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(values))


def _first_word(text: str) -> str:
    words = text.lower().split()
    return words[0].strip(string.punctuation) if words else ""


def detect_action_verbs(text: str, patterns: PatternRegistry = POWER_STATEMENT_PATTERNS) -> ActionVerbSignal:
    first = _first_word(text)
    strong = [p.name.split(".", 1)[1] for p in patterns.group("strong_verb") if p.occurs(text)]
    weak = [p.name.split(".", 1)[1] for p in patterns.group("weak_verb") if p.occurs(text)]
    return ActionVerbSignal(
        starts_with_strong_verb=any(
            first in (verb, verb + "d", verb + "ed") for verb in STRONG_ACTION_VERBS
        ),
        strong_verb_count=len(strong),
        strong_verbs_found=tuple(strong[:5]),
        weak_verbs_found=tuple(weak),
        starts_with_weak_pattern=patterns["action.weak_opening"].occurs(text),
    )


def detect_specificity(text: str, patterns: PatternRegistry = POWER_STATEMENT_PATTERNS) -> SpecificitySignal:
    time = patterns["specificity.time"].count(text)
    timeframes = patterns["specificity.timeframes"].count(text)
    return SpecificitySignal(
        number_count=patterns["specificity.numbers"].count(text),
        percentage_count=patterns["specificity.percentages"].count(text),
        dollar_count=patterns["specificity.dollars"].count(text),
        time_count=time + timeframes,
        timeframe_count=timeframes,
        quantity_count=patterns["specificity.quantity"].count(text),
        comparison_count=patterns["specificity.comparisons"].count(text),
        has_context=patterns["specificity.context"].occurs(text),
        has_team_context=patterns["specificity.team_context"].occurs(text),
    )


def detect_impact(text: str, patterns: PatternRegistry = POWER_STATEMENT_PATTERNS) -> ImpactSignal:
    return ImpactSignal(
        business_impact_count=patterns["impact.business"].count(text),
        customer_impact_count=patterns["impact.customer"].count(text),
        scale_count=patterns["impact.scale"].count(text),
        result_count=patterns["impact.result"].count(text),
        improvement_count=patterns["impact.improvement"].count(text),
    )


def detect_clarity(text: str, patterns: PatternRegistry = POWER_STATEMENT_PATTERNS) -> ClaritySignal:
    fillers = [m for p in patterns.group("filler") for m in p.matches(text)]
    jargon = [m for p in patterns.group("jargon") for m in p.matches(text)]
    vague = patterns["clarity.vague_improvement"].matches(text)
    return ClaritySignal(
        filler_count=len(fillers),
        fillers_found=_unique(fillers),
        jargon_count=len(jargon),
        jargon_found=_unique(jargon),
        word_count=len(text.split()),
        passive_count=patterns["clarity.passive"].count(text),
        bullet_count=patterns["clarity.bullets"].count(text),
        vague_improvement_count=len(vague),
        vague_improvement_found=_unique(vague),
    )


def detect_versions(text: str, patterns: PatternRegistry = POWER_STATEMENT_PATTERNS) -> VersionSignal:
    return VersionSignal(
        has_version_a=patterns["version.a"].occurs(text),
        has_version_b=patterns["version.b"].occurs(text),
        structured_section_count=sum(1 for p in patterns.group("section") if p.occurs(text)),
    )


# ---------------------------------------------------------------------------
# Scorers
# ---------------------------------------------------------------------------


def score_clarity(text: str) -> DimensionResult:
    """Clarity (25): fillers 6, jargon 6, length 5, active voice 4, paragraphs 4, vague terms up to -9."""
    issues: list[str] = []
    strengths: list[str] = []
    score = 0
    clarity = detect_clarity(text)

    if not clarity.filler_count:
        score += 6
        strengths.append("No filler words - clean, direct language")
    else:
        score += max(0, 6 - clarity.filler_count * 2)
        issues.append(f"Remove filler words: {', '.join(clarity.fillers_found[:3])}")

    if not clarity.jargon_count:
        score += 6
        strengths.append("No jargon or buzzwords")
    else:
        score += max(0, 6 - clarity.jargon_count * 2)
        issues.append(f"Remove jargon: {', '.join(clarity.jargon_found[:3])}")

    low, high = CONCISE_WORDS
    if clarity.is_concise:
        score += 5
        strengths.append(f"Good length for sales messaging ({clarity.word_count} words)")
    elif clarity.is_too_long:
        score += 2
        issues.append(f"Too verbose ({clarity.word_count} words) - aim for {low}-{high} words")
    elif clarity.is_too_short:
        score += 2
        issues.append(f"Too brief ({clarity.word_count} words) - expand to {low}-{high} words")
    else:
        score += 3

    if not clarity.has_passive_voice:
        score += 4
        strengths.append("Uses active voice")
    else:
        score += 1
        issues.append('Rewrite in active voice - avoid "was/were + verb"')

    if not clarity.has_bullet_points:
        score += 4
        strengths.append("Uses flowing paragraphs (not bullet points)")
    else:
        issues.append("Use flowing paragraphs instead of bullet points for sales messaging")

    if clarity.vague_improvement_count:
        penalty = min(9, clarity.vague_improvement_count * 3)
        score -= penalty
        issues.append(
            f"Replace vague terms with specifics: {', '.join(clarity.vague_improvement_found[:3])} (-{penalty} pts)"
        )

    return DimensionResult.clamped(score, 25, issues, strengths)


def score_impact(text: str) -> DimensionResult:
    """Impact (25): outcome named 10, quantified 10, scale 5."""
    issues: list[str] = []
    strengths: list[str] = []
    score = 0
    impact = detect_impact(text)
    specificity = detect_specificity(text)

    if impact.has_business_impact or impact.has_customer_impact:
        score += 10
        if impact.has_business_impact:
            strengths.append("Business impact clearly stated")
        if impact.has_customer_impact:
            strengths.append("Customer impact mentioned")
    else:
        issues.append("Add business or customer impact - what was the result?")

    if specificity.has_comparisons:
        score += 10
        strengths.append("Impact is quantified with comparisons")
    elif specificity.has_percentages or specificity.has_dollar_amounts:
        score += 8
        strengths.append("Impact includes metrics")
    elif specificity.has_numbers:
        score += 5
        issues.append("Quantify the impact - add percentages or dollar amounts")
    else:
        issues.append("Add quantified impact - how much did you improve, save, or grow?")

    if impact.has_scale or specificity.has_team_context:
        score += 5
        strengths.append("Scale/scope of impact is clear")
    else:
        issues.append("Add context about scale - team size, company scope, etc.")

    return DimensionResult.clamped(score, 25, issues, strengths)


def score_action(text: str) -> DimensionResult:
    """Action (25): strong opening verb 15, strong verbs throughout 5, no weak verbs 5."""
    issues: list[str] = []
    strengths: list[str] = []
    score = 0
    action = detect_action_verbs(text)

    if action.starts_with_strong_verb:
        score += 15
        strengths.append("Starts with strong action verb")
    elif action.starts_with_weak_pattern:
        issues.append('Replace weak opening ("was responsible for", "helped") with a strong action verb')
    elif action.strong_verb_count > 0:
        score += 8
        issues.append("Move the action verb to the beginning of the statement")
    else:
        issues.append("Start with a strong action verb (Led, Developed, Achieved, etc.)")

    if action.strong_verb_count >= 2:
        score += 5
        strengths.append(f"Uses {action.strong_verb_count} strong action verbs")
    elif action.strong_verb_count == 1:
        score += 3

    if not action.has_weak_verbs:
        score += 5
        strengths.append("No weak verbs")
    else:
        score += max(0, 5 - action.weak_verb_count)
        issues.append(f"Replace weak verbs: {', '.join(action.weak_verbs_found[:3])}")

    return DimensionResult.clamped(score, 25, issues, strengths)


def score_specificity(text: str) -> DimensionResult:
    """Specificity (25): metrics 10, context 8, timeframe 7."""
    issues: list[str] = []
    strengths: list[str] = []
    score = 0
    detected = detect_specificity(text)

    impact_metrics = detected.percentage_count + detected.dollar_count
    total_metrics = impact_metrics + detected.time_count + detected.quantity_count

    if impact_metrics >= 1 and total_metrics >= 2:
        score += 10
        strengths.append(f"{total_metrics} specific metrics including impact metrics (%, $)")
    elif impact_metrics >= 1:
        score += 7
        issues.append("Add more metrics - aim for 2+ quantified results")
    elif total_metrics >= 2:
        score += 5
        issues.append("Include impact metrics (%, $), not just quantities")
    elif detected.has_numbers:
        score += 3
        issues.append("Convert numbers to impact metrics (%, $, time saved)")
    else:
        issues.append("Add specific impact metrics (%, $, time saved)")

    if detected.has_context and detected.has_team_context:
        score += 8
        strengths.append("Clear context provided")
    elif detected.has_context or detected.has_team_context:
        score += 5
        issues.append("Add more context - company, team size, or scope")
    else:
        issues.append("Add context - where did this happen? What was the scope?")

    if detected.has_time_metrics:
        score += 7
        strengths.append("Includes timeframe or time-based metrics")
    else:
        issues.append("Add a timeframe - when did this happen? How long did it take?")

    return DimensionResult.clamped(score, 25, issues, strengths)


def version_bonus(text: str) -> RubricBonus:
    """Dual-format bonus: a concise Version A alongside a structured Version B."""
    versions = detect_versions(text)
    if versions.has_both_versions and versions.has_structured_content:
        return RubricBonus(5, strengths=("Both Version A and Version B with structured sections (+5 bonus)",))
    if versions.has_both_versions:
        return RubricBonus(
            3, issues=(f"Version B needs structured sections ({versions.structured_section_count}/4 found)",)
        )
    if versions.has_version_a or versions.has_version_b:
        return RubricBonus(2, issues=("Include both Version A (concise) and Version B (structured)",))
    return RubricBonus(0, issues=("Format as Version A (paragraph) and Version B (structured sections)",))


# ---------------------------------------------------------------------------
# Indicators
# ---------------------------------------------------------------------------

register_indicators(
    ActionVerbSignal,
    (lambda s: s.starts_with_strong_verb, "Starts with strong action verb"),
    (lambda s: s.strong_verb_count > 0, lambda s: f"{s.strong_verb_count} strong action verbs"),
    (lambda s: s.has_weak_verbs, lambda s: f"{s.weak_verb_count} weak verbs detected"),
    (lambda s: s.starts_with_weak_pattern, "Starts with weak verb pattern"),
)
register_indicators(
    SpecificitySignal,
    (lambda s: s.has_numbers, lambda s: f"{s.number_count} numeric values"),
    (lambda s: s.has_percentages, lambda s: f"{s.percentage_count} percentages"),
    (lambda s: s.has_dollar_amounts, "Dollar amounts present"),
    (lambda s: s.time_count > s.timeframe_count, "Time-based metrics"),
    (lambda s: s.timeframe_count > 0, "Specific timeframes (Q1, by date, etc.)"),
    (lambda s: s.has_comparisons, "Quantified comparisons"),
    (lambda s: s.has_context, "Contextual details present"),
    (lambda s: s.has_team_context, "Team/org context provided"),
)
register_indicators(
    ImpactSignal,
    (lambda s: s.has_business_impact, "Business impact mentioned"),
    (lambda s: s.has_customer_impact, "Customer impact mentioned"),
    (lambda s: s.has_scale, "Scale/scope indicated"),
    (lambda s: s.result_count > 0, "Result language present"),
    (lambda s: s.improvement_count > 0, "Improvement language present"),
)
register_indicators(
    ClaritySignal,
    (lambda s: s.filler_count == 0, "No filler words"),
    (lambda s: s.jargon_count == 0, "No jargon/buzzwords"),
    (lambda s: s.is_concise, "Good length for sales messaging"),
    (lambda s: not s.has_passive_voice, "Active voice"),
    (lambda s: not s.has_bullet_points, "Uses flowing paragraphs"),
    (lambda s: s.vague_improvement_count == 0, "No vague improvement terms"),
    (lambda s: s.filler_count > 0, lambda s: f"{s.filler_count} filler words detected"),
    (lambda s: s.jargon_count > 0, lambda s: f"{s.jargon_count} jargon terms detected"),
    (lambda s: s.is_too_long, "Statement too verbose"),
    (lambda s: s.is_too_short, "Statement too brief for sales messaging"),
    (lambda s: s.has_passive_voice, "Passive voice detected"),
    (lambda s: s.has_bullet_points, "Uses bullet points instead of paragraphs"),
    (
        lambda s: s.vague_improvement_count > 0,
        lambda s: f"Vague terms: {', '.join(s.vague_improvement_found[:3])}",
    ),
)
register_indicators(
    VersionSignal,
    (lambda s: s.has_version_a, "Version A (concise) present"),
    (lambda s: s.has_version_b, "Version B (structured) present"),
    (lambda s: s.has_structured_content, lambda s: f"{s.structured_section_count}/4 structured sections"),
)

# ---------------------------------------------------------------------------
# Rubric
# ---------------------------------------------------------------------------

POWER_STATEMENT_RUBRIC = register_rubric(
    Rubric(
        id="power-statement",
        name="Power Statement",
        description="Concise, impactful statement of value delivered",
        dimensions=(
            DimensionSpec("clarity", "Clarity", 25, "Plain language, no filler or jargon", score_clarity),
            DimensionSpec("impact", "Impact", 25, "Customer and business outcomes, quantified", score_impact),
            DimensionSpec("action", "Action", 25, "Strong action verbs, active voice", score_action),
            DimensionSpec("specificity", "Specificity", 25, "Metrics, context, and timeframes", score_specificity),
        ),
        bonus=version_bonus,
    )
)


def validate_power_statement(text: object, hyperparameters: Hyperparameters | None = None) -> ValidationResult:
    return validate(text, POWER_STATEMENT_RUBRIC, hyperparameters)
