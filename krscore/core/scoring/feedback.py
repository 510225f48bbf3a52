"""Feedback and improvement text keyed on exact dimension tiers.

Every tier below the feedback threshold has exactly one canonical message.
Tiers at or above 75 have no entry and never produce text.

Messages are grouped per dimension: tier enums are IntEnums, so members of
different dimensions with the same value compare (and hash) equal.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from krscore.contracts.tiers import (
    FEEDBACK_THRESHOLD,
    AchievabilityTier,
    MeasurabilityTier,
    RelevanceTier,
    SpecificityTier,
    TimeBoundTier,
)
from krscore.core.scoring.grading import DIMENSIONS

FEEDBACK_MESSAGES: Final[Mapping[str, Mapping[int, str]]] = MappingProxyType(
    {
        "measurability": MappingProxyType(
            {
                MeasurabilityTier.NO_METRIC: (
                    "Add a clear metric to measure progress (%, $, #, time, ratio)"
                ),
                MeasurabilityTier.VAGUE_METRIC: (
                    "Replace vague language with a specific, quantifiable metric"
                ),
                MeasurabilityTier.METRIC_ONLY: (
                    "Add baseline and target values to make this measurable"
                ),
            }
        ),
        "specificity": MappingProxyType(
            {
                SpecificityTier.NO_UNITS: (
                    "Specify the units of measurement (%, users, days, $, etc.)"
                ),
                SpecificityTier.UNITS: (
                    "Add frequency (monthly, quarterly) and/or measurement source"
                ),
            }
        ),
        "achievability": MappingProxyType(
            {
                AchievabilityTier.UNREALISTIC: (
                    "This target may be unrealistic (>5x improvement) or shows negative progress"
                ),
                AchievabilityTier.NOT_AMBITIOUS: (
                    "This target is not ambitious enough - aim for 1.5x-3x improvement"
                ),
                AchievabilityTier.VERY_AMBITIOUS: (
                    "This target is very ambitious (3x-5x) - ensure it's realistic"
                ),
            }
        ),
        "relevance": MappingProxyType(
            {
                RelevanceTier.UNRELATED: (
                    "This KR doesn't clearly support the objective - ensure alignment"
                ),
                RelevanceTier.QUESTIONABLE: (
                    "Strengthen the connection between this KR and the objective"
                ),
                RelevanceTier.WEAK: (
                    "Only a weak link to the objective - measure the outcome the objective names"
                ),
            }
        ),
        "time_bound": MappingProxyType(
            {
                TimeBoundTier.NO_TIMEFRAME: (
                    "Add a deadline (by Q2 2024) or cadence (monthly throughout Q1 2024)"
                ),
                TimeBoundTier.VAGUE_TIMEFRAME: (
                    "Replace vague timeframe with specific quarter/month and year"
                ),
            }
        ),
    }
)

FORMAT_TEMPLATE: Final = 'Try format: "[Verb] [Metric] from [Baseline] to [Target] by [Deadline]"'
FORMAT_EXAMPLE: Final = 'Example: "Increase NPS from 40 to 65 by Q2 2024"'

IMPROVEMENT_MESSAGES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "achievability": "Aim for 1.5x-3x improvement for optimal challenge level",
        "relevance": "Ensure this metric directly measures progress toward the objective",
        "time_bound": 'Add specific quarter/month: "by Q2 2024" or "by March 2024"',
    }
)


def needs_attention(tier: int) -> bool:
    return tier < FEEDBACK_THRESHOLD


def generate_feedback(breakdown: Mapping[str, int]) -> list[str]:
    """One message per dimension below 75, in fixed dimension order."""
    feedback: list[str] = []
    for name in DIMENSIONS:
        tier = breakdown[name]
        if needs_attention(tier):
            feedback.append(FEEDBACK_MESSAGES[name][tier])
    return feedback


def generate_improvements(breakdown: Mapping[str, int]) -> list[str]:
    """Rewrite guidance triggered by weak dimensions.

    The format template (plus example) is shared by Measurability and
    Specificity and is emitted once if either is weak.
    """
    improvements: list[str] = []

    if needs_attention(breakdown["measurability"]) or needs_attention(breakdown["specificity"]):
        improvements.append(FORMAT_TEMPLATE)
        improvements.append(FORMAT_EXAMPLE)

    for name in ("achievability", "relevance", "time_bound"):
        if needs_attention(breakdown[name]):
            improvements.append(IMPROVEMENT_MESSAGES[name])

    return improvements
