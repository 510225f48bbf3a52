"""Key Result scoring - pure domain logic with zero I/O.

CRITICAL: This module MUST NOT contain any:
- LLM or network calls
- Database operations
- File I/O
- Clock reads (the same input must always give the same result)

The scorer keeps no per-call state; every table it reads is a module
constant, so one instance can be shared across threads.
"""

import logging

from krscore.contracts.kr_score import KRScoreResult, ScoreBreakdown
from krscore.core.scoring.analyzers import (
    score_achievability,
    score_measurability,
    score_relevance,
    score_specificity,
    score_time_bound,
)
from krscore.core.scoring.feedback import generate_feedback, generate_improvements
from krscore.core.scoring.grading import GRADE_THRESHOLDS, grade_for, weighted_overall

logger = logging.getLogger(__name__)


class KRScorer:
    """Five-dimension Key Result quality scorer.

    Example:
        >>> scorer = KRScorer()
        >>> result = scorer.score(
        ...     "Increase NPS score from 40 to 65 by Q2 2024",
        ...     "Improve customer satisfaction and NPS score across all touchpoints",
        ... )
        >>> result.overall, result.grade.value
        (88, 'B+')
    """

    def score(self, key_result: str | None, objective: str | None = None) -> KRScoreResult:
        """Score a Key Result, optionally against its objective."""
        kr = key_result or ""

        breakdown = {
            "measurability": score_measurability(kr),
            "specificity": score_specificity(kr),
            "achievability": score_achievability(kr),
            "relevance": score_relevance(kr, objective),
            "time_bound": score_time_bound(kr),
        }

        overall = weighted_overall(breakdown)
        grade = grade_for(overall, GRADE_THRESHOLDS)

        logger.debug(
            "Scored key result: overall=%d grade=%s breakdown=%s",
            overall,
            grade,
            {name: int(tier) for name, tier in breakdown.items()},
        )

        return KRScoreResult(
            overall=overall,
            grade=grade,
            breakdown=ScoreBreakdown(**breakdown),
            feedback=generate_feedback(breakdown),
            improvements=generate_improvements(breakdown),
        )


_default_scorer = KRScorer()


def score_key_result(key_result: str | None, objective: str | None = None) -> KRScoreResult:
    """Module-level shortcut around a shared ``KRScorer``."""
    return _default_scorer.score(key_result, objective)
