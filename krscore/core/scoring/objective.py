"""Objective scoring - pure domain logic with zero I/O.

Objectives carry no numbers to parse, so each of the five dimensions is
judged from word choice alone and lands on the shared rubric scale
(0/25/50/75/100).

Five Dimensions:
1. Outcome orientation (30%)
2. Inspirational (20%)
3. Clarity (15%)
4. Strategic (15%)
5. Ambition (20%)

All matching is case-insensitive; word lists anchored with ``\\b`` match
whole words, the business and strategic vocabularies match substrings
("customers" counts as "customer").
"""

import logging
import re
from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType
from typing import Final

from krscore.contracts.objective_score import (
    ObjectiveBreakdown,
    ObjectiveDetails,
    ObjectiveScore,
    RubricExampleCheck,
    RubricValidation,
)
from krscore.contracts.tiers import RubricLevel
from krscore.core.scoring.grading import grade_for, round_half_up

logger = logging.getLogger(__name__)

OBJECTIVE_DIMENSIONS: Final[tuple[str, ...]] = (
    "outcome_orientation",
    "inspirational",
    "clarity",
    "strategic",
    "ambition",
)

OBJECTIVE_WEIGHTS: Final[Mapping[str, Decimal]] = MappingProxyType(
    {
        "outcome_orientation": Decimal("0.30"),
        "inspirational": Decimal("0.20"),
        "clarity": Decimal("0.15"),
        "strategic": Decimal("0.15"),
        "ambition": Decimal("0.20"),
    }
)

# Evaluated top to bottom against the unrounded weighted sum.
OBJECTIVE_GRADE_THRESHOLDS: Final[tuple[tuple[int, str], ...]] = (
    (95, "A+"),
    (90, "A"),
    (85, "A-"),
    (80, "B+"),
    (75, "B"),
    (70, "B-"),
    (65, "C+"),
    (60, "C"),
    (55, "C-"),
    (50, "D"),
    (0, "F"),
)


def _words(*words: str) -> re.Pattern[str]:
    return re.compile(r"\b(" + "|".join(words) + r")\b", re.IGNORECASE)


# =============================================================================
# Language signals
# =============================================================================

ACTIVITY_WORDS: Final = _words(
    "launch", "build", "create", "complete", "implement", "migrate",
    "deploy", "ship", "deliver", "finish", "execute",
)
OUTCOME_WORDS: Final = _words(
    "become", "achieve", "transform", "revolutionize", "dominate", "establish",
    "accelerate", "maximize", "increase", "improve", "reduce", "enhance", "strengthen",
)
POWER_WORDS: Final = _words(
    "revolutionize", "transform", "breakthrough", "dominate",
    "exceptional", "extraordinary", "delight",
)
MAINTENANCE_WORDS: Final = _words("maintain", "sustain", "keep", "preserve", "continue")
GROWTH_WORDS: Final = _words("grow", "increase", "accelerate", "maximize", "improve")
CORE_BUSINESS_TERMS: Final[tuple[str, ...]] = (
    "revenue", "customer", "market", "growth", "value",
)

# =============================================================================
# Outcome orientation
# =============================================================================

# "deliver" appears on both sides; "drive" only counts as an outcome here.
PURE_ACTIVITY_WORDS: Final = _words(
    "complete", "launch", "build", "implement", "create", "deploy",
    "migrate", "ship", "deliver", "finish", "execute",
)
PURE_OUTCOME_WORDS: Final = _words(
    "become", "achieve", "transform", "revolutionize", "dominate", "establish",
    "accelerate", "maximize", "drive", "strengthen", "increase", "improve",
    "reduce", "enhance", "deliver",
)

# =============================================================================
# Inspirational: first level whose vocabulary appears wins
# =============================================================================

INSPIRATIONAL_LEVELS: Final[tuple[tuple[RubricLevel, re.Pattern[str]], ...]] = (
    (
        RubricLevel.EXEMPLARY,
        _words(
            "revolutionize", "transform", "breakthrough", "extraordinary",
            "delight", "exceptional", "game-changing",
        ),
    ),
    (
        RubricLevel.STRONG,
        _words(
            "dramatically", "significantly", "dominate", "accelerate", "maximize",
            "strengthen", "best-in-class", "industry-leading", "world-class",
            "leading", "achieve",
        ),
    ),
    (RubricLevel.DEVELOPING, _words("increase", "improve", "enhance", "grow", "develop", "advance")),
    (RubricLevel.WEAK, _words("optimize", "implement", "configure", "integrate", "deploy", "execute")),
    (RubricLevel.POOR, _words("comply", "maintain", "meet requirements", "sustain", "preserve")),
)

# =============================================================================
# Clarity: maximum word count per level
# =============================================================================

CLARITY_WORD_LIMITS: Final[tuple[tuple[int, RubricLevel], ...]] = (
    (10, RubricLevel.EXEMPLARY),
    (15, RubricLevel.STRONG),
    (20, RubricLevel.DEVELOPING),
    (30, RubricLevel.WEAK),
)

# =============================================================================
# Strategic
# =============================================================================

BUSINESS_TERMS: Final[tuple[str, ...]] = (
    "revenue", "customer", "market", "growth", "value", "adoption", "engagement",
    "satisfaction", "retention", "acquisition", "conversion", "profit", "sales",
    "enterprise", "business",
)
STRATEGIC_TERMS: Final[tuple[str, ...]] = (
    "industry-leading", "best-in-class", "world-class", "leading", "competitive",
    "leadership", "excellence", "premier", "top-tier", "platform", "capabilities",
    "delivery", "operations", "performance", "quality", "reliability", "scale",
    "efficiency", "effectiveness",
)

# =============================================================================
# Ambition: maintenance language short-circuits to POOR before these
# =============================================================================

AMBITION_LEVELS: Final[tuple[tuple[RubricLevel, re.Pattern[str]], ...]] = (
    (
        RubricLevel.EXEMPLARY,
        _words(
            "revolutionize", "transform", "dominate", "breakthrough",
            "exceptional", "extraordinary",
        ),
    ),
    (RubricLevel.STRONG, _words("dramatically", "significantly", "accelerate", "maximize", "achieve")),
    (RubricLevel.DEVELOPING, _words("improve", "increase", "enhance", "grow", "strengthen")),
)


def analyze_objective(objective: str) -> ObjectiveDetails:
    """Detect the word-choice signals every dimension rule reads."""
    lower = objective.lower()
    return ObjectiveDetails(
        word_count=len(objective.split()),
        has_activity_words=bool(ACTIVITY_WORDS.search(lower)),
        has_outcome_words=bool(OUTCOME_WORDS.search(lower)),
        has_power_words=bool(POWER_WORDS.search(lower)),
        has_maintenance_words=bool(MAINTENANCE_WORDS.search(lower)),
        has_business_words=any(term in lower for term in CORE_BUSINESS_TERMS),
        has_growth_words=bool(GROWTH_WORDS.search(lower)),
    )


def score_outcome_orientation(objective: str, details: ObjectiveDetails) -> RubricLevel:
    """Score Outcome orientation (30%).

    - 0: activity verbs and no outcome verbs
    - 100: outcome verbs and no activity verbs
    - 75: both, with more outcome verbs than activity verbs
    - 50: both otherwise, or neither
    """
    lower = objective.lower()

    if PURE_ACTIVITY_WORDS.search(lower) and not details.has_outcome_words:
        return RubricLevel.POOR
    if PURE_OUTCOME_WORDS.search(lower) and not details.has_activity_words:
        return RubricLevel.EXEMPLARY

    if details.has_outcome_words and details.has_activity_words:
        activity_count = len(PURE_ACTIVITY_WORDS.findall(lower))
        outcome_count = len(PURE_OUTCOME_WORDS.findall(lower))
        if outcome_count > activity_count:
            return RubricLevel.STRONG
        return RubricLevel.DEVELOPING

    if details.has_activity_words:
        return RubricLevel.WEAK
    return RubricLevel.DEVELOPING


def score_inspirational(objective: str) -> RubricLevel:
    """Score Inspirational (20%): the most motivating vocabulary present."""
    lower = objective.lower()
    for level, pattern in INSPIRATIONAL_LEVELS:
        if pattern.search(lower):
            return level
    return RubricLevel.DEVELOPING


def score_clarity(details: ObjectiveDetails) -> RubricLevel:
    """Score Clarity (15%): 10 words or fewer is ideal, over 30 is unreadable."""
    for limit, level in CLARITY_WORD_LIMITS:
        if details.word_count <= limit:
            return level
    return RubricLevel.POOR


def score_strategic(objective: str, details: ObjectiveDetails) -> RubricLevel:
    """Score Strategic (15%).

    - 100: two or more business/strategic terms and an outcome verb
    - 75: one such term and an outcome verb
    - 50: any such term, or the objective mentions "team" or "improve"
    - 25: maintenance language
    - 0: nothing of business value
    """
    lower = objective.lower()
    indicators = sum(1 for term in BUSINESS_TERMS + STRATEGIC_TERMS if term in lower)

    if indicators >= 2 and details.has_outcome_words:
        return RubricLevel.EXEMPLARY
    if indicators >= 1 and details.has_outcome_words:
        return RubricLevel.STRONG
    if indicators >= 1 or "team" in lower or "improve" in lower:
        return RubricLevel.DEVELOPING
    if details.has_maintenance_words:
        return RubricLevel.WEAK
    return RubricLevel.POOR


def score_ambition(objective: str, details: ObjectiveDetails) -> RubricLevel:
    """Score Ambition (20%). Keeping things as they are is never a stretch."""
    if details.has_maintenance_words:
        return RubricLevel.POOR

    lower = objective.lower()
    for level, pattern in AMBITION_LEVELS:
        if pattern.search(lower):
            return level
    return RubricLevel.DEVELOPING


def objective_weighted_sum(scores: Mapping[str, int]) -> Decimal:
    return sum(
        (Decimal(int(scores[name])) * OBJECTIVE_WEIGHTS[name] for name in OBJECTIVE_DIMENSIONS),
        Decimal(0),
    )


class ObjectiveScorer:
    """Five-dimension Objective quality scorer.

    Example:
        >>> result = ObjectiveScorer().score("Dominate the enterprise market")
        >>> result.overall, result.grade.value
        (95, 'A+')
    """

    def score(self, objective: str | None) -> ObjectiveScore:
        text = objective or ""
        details = analyze_objective(text)

        breakdown = {
            "outcome_orientation": score_outcome_orientation(text, details),
            "inspirational": score_inspirational(text),
            "clarity": score_clarity(details),
            "strategic": score_strategic(text, details),
            "ambition": score_ambition(text, details),
        }

        weighted = objective_weighted_sum(breakdown)
        overall = round_half_up(weighted)
        grade = grade_for(weighted, OBJECTIVE_GRADE_THRESHOLDS)

        logger.debug(
            "Scored objective: overall=%d grade=%s breakdown=%s",
            overall,
            grade,
            {name: int(level) for name, level in breakdown.items()},
        )

        return ObjectiveScore(
            overall=overall,
            breakdown=ObjectiveBreakdown(**breakdown),
            weighted_score=float(weighted),
            grade=grade,
            details=details,
        )


_default_scorer = ObjectiveScorer()


def score_objective(objective: str | None) -> ObjectiveScore:
    """Module-level shortcut around a shared ``ObjectiveScorer``."""
    return _default_scorer.score(objective)


# (objective, expected overall, tolerance) calibration points
RUBRIC_EXAMPLES: Final[tuple[tuple[str, int, int], ...]] = (
    ("Launch the new mobile app", 35, 10),
    ("Dominate the enterprise market", 95, 10),
)


def validate_against_rubric_examples(
    examples: tuple[tuple[str, int, int], ...] = RUBRIC_EXAMPLES,
) -> RubricValidation:
    """Score each calibration objective and compare with its expected score."""
    checks = []
    for objective, expected, tolerance in examples:
        result = score_objective(objective)
        variance = abs(result.overall - expected)
        checks.append(
            RubricExampleCheck(
                objective=objective,
                expected=expected,
                actual=result.overall,
                variance=variance,
                passed=variance <= tolerance,
                breakdown=result.breakdown,
            )
        )

    validation = RubricValidation(
        passed=sum(1 for check in checks if check.passed), total=len(checks), details=checks
    )
    if not validation.all_passed:
        logger.warning(
            "Objective scorer drifted from rubric examples: %d/%d passed",
            validation.passed,
            validation.total,
        )
    return validation
