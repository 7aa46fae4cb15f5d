# Cross-cutting detector for generic, AI-sounding filler language.
#
# Scans the whole document (not one dimension) with ~180 lexical patterns plus
# structural and stylometric checks. Produces a 0-80 slop score, a penalty tier
# with advice, and the capped deduction every rubric subtracts from its total.

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

from data_designer_doc_rubric.patterns import Pattern, PatternRegistry

# ---------------------------------------------------------------------------
# Hyperparameters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Hyperparameters:
    """Tunable thresholds, caps, and penalties used by the slop detector."""

    lexical_pattern_points: int = 2
    lexical_cap: int = 40
    structural_pattern_points: int = 5
    structural_cap: int = 25
    stylometric_flag_points: int = 5
    stylometric_cap: int = 15

    min_sentences_for_variance: int = 3
    min_sentence_stdev: float = 8.0
    min_words_for_ttr: int = 50
    ttr_window_size: int = 100
    min_ttr: float = 0.45

    severity_clean_max: int = 10
    severity_light_max: int = 25
    severity_moderate_max: int = 45
    severity_heavy_max: int = 65

    # (min slop score, min pattern count, penalty, message); first match wins
    penalty_tiers: tuple[tuple[int, int, int, str], ...] = (
        (40, 10, 8, "Severe AI slop detected ({count} patterns): substantial rewrite needed"),
        (25, 6, 6, "Heavy AI slop detected ({count} patterns): significant editing needed"),
        (12, 3, 4, "Moderate AI slop detected ({count} patterns): editing recommended"),
        (4, 1, 2, "Light AI patterns detected ({count} patterns)"),
    )
    top_offender_cap: int = 10
    example_offender_count: int = 3

    deduction_scale: float = 0.6
    deduction_cap: int = 5
    reported_issue_cap: int = 2


DEFAULT_HYPERPARAMETERS = Hyperparameters()


class Severity(str, Enum):
    CLEAN = "clean"
    LIGHT = "light"
    MODERATE = "moderate"
    HEAVY = "heavy"
    SEVERE = "severe"


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

GENERIC_BOOSTERS = [
    "incredibly", "extremely", "highly", "very", "truly", "absolutely",
    "definitely", "really", "quite", "remarkably", "exceptionally",
    "particularly", "especially", "significantly", "substantially",
    "considerably", "dramatically", "tremendously", "immensely", "profoundly",
    "delve", "tapestry", "multifaceted", "myriad", "plethora",
]
BUZZWORDS = [
    "robust", "seamless", "comprehensive", "elegant", "powerful", "flexible",
    "intuitive", "user-friendly", "streamlined", "optimized", "efficient",
    "scalable", "reliable", "secure", "modern", "innovative", "sophisticated",
    "advanced", "state-of-the-art", "best-in-class", "world-class",
    "enterprise-ready", "production-grade", "battle-tested", "industry-leading",
    "game-changing", "revolutionary", "transformative", "disruptive",
    "cutting-edge", "next-generation", "bleeding-edge", "groundbreaking",
    "paradigm-shifting", "synergy", "holistic", "ecosystem", "leverage",
    "utilize", "facilitate", "enable", "empower", "optimize", "accelerate",
    "amplify", "unlock", "drive", "spearhead", "champion", "pivot", "actionable",
    "easy to use", "fast", "quick", "responsive", "good performance",
    "high quality", "optimal", "minimal", "sufficient", "reasonable",
    "appropriate", "adequate",
]
FILLER_PHRASES = [
    "it's important to note that", "it's worth mentioning that",
    "it should be noted that", "it goes without saying that", "needless to say",
    "as you may know", "as we all know", "in today's world",
    "in today's digital age", "in today's fast-paced environment",
    "in the modern era", "at the end of the day", "when all is said and done",
    "having said that", "that said", "that being said", "with that in mind",
    "with that being said", "let me explain", "let me walk you through",
    "let's dive in", "let's explore", "let's take a look at",
    "let's break this down", "here's the thing", "the thing is",
    "the fact of the matter is", "at this point in time", "in order to",
    "due to the fact that", "for the purpose of", "in the event that",
    "in light of", "with regard to", "in terms of", "on a daily basis",
    "first and foremost", "last but not least", "each and every",
    "one and only", "plain and simple", "pure and simple",
]
HEDGE_PHRASES = [
    "of course", "naturally", "obviously", "clearly", "certainly", "undoubtedly",
    "in many ways", "to some extent", "in some cases", "it depends", "it varies",
    "generally speaking", "for the most part", "more or less", "kind of",
    "sort of", "somewhat", "relatively", "arguably", "potentially", "possibly",
    "might", "may or may not", "could potentially", "tends to", "seems to",
    "appears to",
]
SYCOPHANTIC_PHRASES = [
    "great question", "excellent question", "that's a great point",
    "good thinking", "i love that idea", "what a fascinating topic",
    "happy to help", "i'd be happy to help", "i'm glad you asked",
    "thanks for asking", "absolutely!", "definitely!", "of course!",
    "sure thing", "no problem", "you're welcome", "my pleasure",
    "i appreciate you sharing", "that's an interesting perspective",
    "i understand your concern",
]
TRANSITIONAL_FILLER = [
    "furthermore", "moreover", "additionally", "in addition", "nevertheless",
    "nonetheless", "on the other hand", "conversely", "in contrast", "similarly",
    "likewise", "consequently", "therefore", "thus", "hence", "accordingly",
    "as a result", "for this reason", "to that end", "with this in mind",
    "given the above", "based on the above", "as mentioned earlier",
    "as previously stated", "as noted above", "moving forward", "going forward",
]
OVER_SIGNPOSTING = [
    "in this section, we will", "as mentioned earlier", "let's now turn to",
    "before we proceed", "as discussed above", "we will now explore",
]

LEXICAL_CATEGORIES = {
    "generic_booster": GENERIC_BOOSTERS,
    "buzzword": BUZZWORDS,
    "filler_phrase": FILLER_PHRASES,
    "hedge": HEDGE_PHRASES,
    "sycophantic": SYCOPHANTIC_PHRASES,
    "transitional_filler": TRANSITIONAL_FILLER,
}


def build_slop_patterns() -> PatternRegistry:
    patterns: list[Pattern] = []
    for category, phrases in LEXICAL_CATEGORIES.items():
        patterns.extend(Pattern.phrase(f"{category}.{p}", p) for p in phrases)
    patterns.extend(Pattern.phrase(f"signposting.{p}", p) for p in OVER_SIGNPOSTING)
    patterns += [
        Pattern.compile("structural.em_dash", "—", 0),
        Pattern.compile(
            "structural.formulaic_intro",
            r"^(in today's|in this (document|section|prd|spec)|this (document|prd|spec) (will|aims|seeks))",
            re.IGNORECASE | re.MULTILINE,
        ),
        Pattern.compile(
            "structural.template_sections",
            r"overview.{0,500}key points.{0,500}(best practices|conclusion)",
            re.IGNORECASE | re.DOTALL,
        ),
        Pattern.compile(
            "structural.symmetric_coverage",
            r"(on one hand|on the other hand|pros and cons|advantages and disadvantages|both.*have (merit|value))",
        ),
    ]
    return PatternRegistry(patterns)


SLOP_PATTERNS = build_slop_patterns()

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_NON_WORD_RE = re.compile(r"[^\w\s]")

# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Offender:
    pattern: str
    category: str

    def to_payload(self) -> dict[str, object]:
        return {"pattern": self.pattern, "category": self.category}


@dataclass(frozen=True)
class SentenceVariance:
    sentence_count: int
    mean_length: float | None
    stdev: float | None
    flag: bool
    reason: str | None


@dataclass(frozen=True)
class TypeTokenRatio:
    word_count: int
    ttr: float | None
    flag: bool
    reason: str | None


@dataclass(frozen=True)
class SlopFindings:
    """Distinct lexical hits per category plus structural markers."""

    generic_boosters: tuple[str, ...] = ()
    buzzwords: tuple[str, ...] = ()
    filler_phrases: tuple[str, ...] = ()
    hedges: tuple[str, ...] = ()
    sycophantic: tuple[str, ...] = ()
    transitional_filler: tuple[str, ...] = ()
    em_dashes: int = 0
    structural: tuple[str, ...] = ()

    @property
    def lexical_count(self) -> int:
        return (
            len(self.generic_boosters) + len(self.buzzwords) + len(self.filler_phrases)
            + len(self.hedges) + len(self.sycophantic) + len(self.transitional_filler)
        )

    @property
    def total_patterns(self) -> int:
        return self.lexical_count + self.em_dashes + len(self.structural)


@dataclass(frozen=True)
class SlopScore:
    score: int
    max_score: int
    severity: Severity
    lexical_score: int
    structural_score: int
    stylometric_score: int
    stylometric_issues: tuple[str, ...]
    sentence_variance: SentenceVariance
    type_token_ratio: TypeTokenRatio
    top_offenders: tuple[Offender, ...]
    findings: SlopFindings

    def to_payload(self) -> dict[str, object]:
        return {
            "score": self.score,
            "max_score": self.max_score,
            "severity": self.severity.value,
            "breakdown": {
                "lexical": {
                    "score": self.lexical_score,
                    "patterns": self.findings.lexical_count,
                    "em_dashes": self.findings.em_dashes,
                },
                "structural": {"score": self.structural_score, "patterns": list(self.findings.structural)},
                "stylometric": {
                    "score": self.stylometric_score,
                    "issues": list(self.stylometric_issues),
                    "sentence_variance": self.sentence_variance.stdev,
                    "ttr": self.type_token_ratio.ttr,
                },
            },
            "top_offenders": [o.to_payload() for o in self.top_offenders],
        }


@dataclass(frozen=True)
class SlopPenalty:
    penalty: int
    issues: tuple[str, ...]
    severity: Severity
    slop_score: int
    details: SlopScore

    def to_payload(self) -> dict[str, object]:
        return {
            "penalty": self.penalty,
            "issues": list(self.issues),
            "severity": self.severity.value,
            "slop_score": self.slop_score,
            "details": self.details.to_payload(),
        }


# ---------------------------------------------------------------------------
# Detection
# ---------------------------------------------------------------------------


def _found(text: str, patterns: list[Pattern], prefix: str) -> tuple[str, ...]:
    cut = len(prefix) + 1
    return tuple(p.name[cut:] for p in patterns if p.occurs(text))


def _structural_markers(text: str, patterns: PatternRegistry) -> tuple[str, ...]:
    found: list[str] = []
    if patterns["structural.formulaic_intro"].occurs(text):
        found.append("formulaic-introduction")
    for phrase in _found(text, patterns.group("signposting"), "signposting"):
        found.append(f'over-signposting: "{phrase}"')
        break
    if patterns["structural.template_sections"].occurs(text):
        found.append("template-section-progression")
    if patterns["structural.symmetric_coverage"].occurs(text):
        found.append("symmetric-coverage")
    return tuple(found)


def detect_slop_patterns(text: str, patterns: PatternRegistry = SLOP_PATTERNS) -> SlopFindings:
    """Collect distinct lexical and structural slop markers in ``text``."""
    return SlopFindings(
        generic_boosters=_found(text, patterns.group("generic_booster"), "generic_booster"),
        buzzwords=_found(text, patterns.group("buzzword"), "buzzword"),
        filler_phrases=_found(text, patterns.group("filler_phrase"), "filler_phrase"),
        hedges=_found(text, patterns.group("hedge"), "hedge"),
        sycophantic=_found(text, patterns.group("sycophantic"), "sycophantic"),
        transitional_filler=_found(text, patterns.group("transitional_filler"), "transitional_filler"),
        em_dashes=patterns["structural.em_dash"].count(text),
        structural=_structural_markers(text, patterns),
    )


def analyze_sentence_variance(text: str, hp: Hyperparameters = DEFAULT_HYPERPARAMETERS) -> SentenceVariance:
    sentences = [s for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]
    if len(sentences) < hp.min_sentences_for_variance:
        return SentenceVariance(len(sentences), None, None, False, None)

    lengths = [len(s.split()) for s in sentences]
    mean = sum(lengths) / len(lengths)
    stdev = math.sqrt(sum((n - mean) ** 2 for n in lengths) / len(lengths))
    flag = stdev < hp.min_sentence_stdev
    reason = f"Low sentence variance (σ={stdev:.1f}, target >{hp.min_sentence_stdev:g})" if flag else None
    return SentenceVariance(len(sentences), round(mean, 1), round(stdev, 1), flag, reason)


def analyze_type_token_ratio(text: str, hp: Hyperparameters = DEFAULT_HYPERPARAMETERS) -> TypeTokenRatio:
    words = _NON_WORD_RE.sub("", text.lower()).split()
    if len(words) < hp.min_words_for_ttr:
        return TypeTokenRatio(len(words), None, False, None)

    size = hp.ttr_window_size
    windows = [words[i : i + size] for i in range(0, len(words) - size + 1, size)]
    if windows:
        ttr = sum(len(set(w)) / size for w in windows) / len(windows)
    else:
        ttr = len(set(words)) / len(words)
    flag = ttr < hp.min_ttr
    reason = f"Low vocabulary diversity (TTR={ttr:.2f}, target >{hp.min_ttr:g})" if flag else None
    return TypeTokenRatio(len(words), round(ttr, 2), flag, reason)


def _severity(score: int, hp: Hyperparameters) -> Severity:
    if score <= hp.severity_clean_max:
        return Severity.CLEAN
    if score <= hp.severity_light_max:
        return Severity.LIGHT
    if score <= hp.severity_moderate_max:
        return Severity.MODERATE
    if score <= hp.severity_heavy_max:
        return Severity.HEAVY
    return Severity.SEVERE


def _top_offenders(findings: SlopFindings, hp: Hyperparameters) -> tuple[Offender, ...]:
    offenders = [Offender(p, "filler-phrase") for p in findings.filler_phrases[:3]]
    offenders += [Offender(p, "generic-booster") for p in findings.generic_boosters[:3]]
    offenders += [Offender(p, "buzzword") for p in findings.buzzwords[:3]]
    offenders += [Offender(p, "sycophantic") for p in findings.sycophantic[:2]]
    if findings.em_dashes:
        offenders.append(Offender(f"{findings.em_dashes} em-dash(es)", "em-dash"))
    offenders += [Offender(p, "structural") for p in findings.structural[:2]]
    return tuple(offenders[: hp.top_offender_cap])


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def calculate_slop_score(
    text: str,
    hyperparameters: Hyperparameters | None = None,
    patterns: PatternRegistry = SLOP_PATTERNS,
) -> SlopScore:
    """Score ``text`` for AI slop on a 0-80 scale (lexical + structural + stylometric)."""
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    if not isinstance(text, str):
        text = ""

    findings = detect_slop_patterns(text, patterns)
    variance = analyze_sentence_variance(text, hp)
    ttr = analyze_type_token_ratio(text, hp)

    lexical = min(hp.lexical_cap, findings.lexical_count * hp.lexical_pattern_points + findings.em_dashes)
    structural = min(hp.structural_cap, len(findings.structural) * hp.structural_pattern_points)
    stylometric_issues = tuple(a.reason for a in (variance, ttr) if a.flag and a.reason)
    stylometric = min(hp.stylometric_cap, len(stylometric_issues) * hp.stylometric_flag_points)
    score = lexical + structural + stylometric

    return SlopScore(
        score=score,
        max_score=hp.lexical_cap + hp.structural_cap + hp.stylometric_cap,
        severity=_severity(score, hp),
        lexical_score=lexical,
        structural_score=structural,
        stylometric_score=stylometric,
        stylometric_issues=stylometric_issues,
        sentence_variance=variance,
        type_token_ratio=ttr,
        top_offenders=_top_offenders(findings, hp),
        findings=findings,
    )


def detect_slop(
    text: str,
    hyperparameters: Hyperparameters | None = None,
    patterns: PatternRegistry = SLOP_PATTERNS,
) -> SlopPenalty:
    """Map the slop score to a penalty tier with advice for the author.

    The raw ``penalty`` is not yet scaled; see :func:`slop_deduction`.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    details = calculate_slop_score(text, hp, patterns)
    count = details.findings.total_patterns

    penalty = 0
    issues: list[str] = []
    for min_score, min_count, tier_penalty, message in hp.penalty_tiers:
        if details.score >= min_score or count >= min_count:
            penalty = tier_penalty
            issues.append(message.format(count=count))
            break

    if details.top_offenders:
        examples = ", ".join(f'"{o.pattern}"' for o in details.top_offenders[: hp.example_offender_count])
        issues.append(f"Examples: {examples}")

    return SlopPenalty(
        penalty=penalty,
        issues=tuple(issues),
        severity=details.severity,
        slop_score=details.score,
        details=details,
    )


def slop_deduction(penalty: SlopPenalty, hyperparameters: Hyperparameters | None = None) -> int:
    """Points to subtract from a rubric total: scaled, floored, and capped."""
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    if penalty.penalty <= 0:
        return 0
    return min(hp.deduction_cap, math.floor(penalty.penalty * hp.deduction_scale))
