"""Discrete score tiers for every Key Result dimension, and the objective rubric scale.

Each dimension can only ever take one of the values enumerated here.
Feedback selection keys off these exact members, so a new tier always
needs a matching entry in ``krscore.core.scoring.feedback.FEEDBACK_MESSAGES``.
"""

from enum import IntEnum


class MeasurabilityTier(IntEnum):
    """Metric / baseline / target completeness."""

    NO_METRIC = 0
    VAGUE_METRIC = 25
    METRIC_ONLY = 50
    METRIC_WITH_TARGET = 75
    METRIC_BASELINE_TARGET = 100


class SpecificityTier(IntEnum):
    """Units, cadence and measurement source."""

    NO_UNITS = 0
    UNITS = 50
    UNITS_CADENCE = 75
    UNITS_SOURCE = 85
    UNITS_CADENCE_SOURCE = 100


class AchievabilityTier(IntEnum):
    """Position of the baseline→target ratio relative to the stretch band."""

    UNREALISTIC = 0  # >5x, or inverted/negative progress
    NOT_AMBITIOUS = 25
    VERY_AMBITIOUS = 50
    MODERATE = 75  # also the "cannot assess" default
    STRETCH = 100


class RelevanceTier(IntEnum):
    """Strength of the link between key result and objective."""

    UNRELATED = 0
    QUESTIONABLE = 25
    WEAK = 50
    INDIRECT = 75  # also the "no objective supplied" default
    DIRECT = 100


class TimeBoundTier(IntEnum):
    """Deadline / cadence clarity."""

    NO_TIMEFRAME = 0
    VAGUE_TIMEFRAME = 50
    QUARTER_ONLY = 75
    DEADLINE = 100


# Feedback and improvements are emitted strictly below this value.
FEEDBACK_THRESHOLD = 75


class RubricLevel(IntEnum):
    """Shared five-level scale for every objective dimension."""

    POOR = 0
    WEAK = 25
    DEVELOPING = 50  # also the "no signal either way" default
    STRONG = 75
    EXEMPLARY = 100
