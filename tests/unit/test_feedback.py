"""Unit tests for feedback and improvement generation."""

import pytest

from krscore.contracts.tiers import (
    FEEDBACK_THRESHOLD,
    AchievabilityTier,
    MeasurabilityTier,
    RelevanceTier,
    SpecificityTier,
    TimeBoundTier,
)
from krscore.core.scoring.feedback import (
    FEEDBACK_MESSAGES,
    FORMAT_EXAMPLE,
    FORMAT_TEMPLATE,
    IMPROVEMENT_MESSAGES,
    generate_feedback,
    generate_improvements,
)

TIER_ENUMS = {
    "measurability": MeasurabilityTier,
    "specificity": SpecificityTier,
    "achievability": AchievabilityTier,
    "relevance": RelevanceTier,
    "time_bound": TimeBoundTier,
}

PERFECT = dict.fromkeys(TIER_ENUMS, 100)


class TestMessageTable:
    @pytest.mark.parametrize("dimension,tiers", TIER_ENUMS.items())
    def test_every_weak_tier_has_exactly_one_message(self, dimension, tiers) -> None:
        weak = {tier for tier in tiers if tier < FEEDBACK_THRESHOLD}
        assert set(FEEDBACK_MESSAGES[dimension]) == weak

    def test_messages_are_distinct(self) -> None:
        messages = [m for table in FEEDBACK_MESSAGES.values() for m in table.values()]
        assert len(messages) == len(set(messages))


class TestGenerateFeedback:
    def test_perfect_breakdown_has_no_feedback(self) -> None:
        assert generate_feedback(PERFECT) == []
        assert generate_improvements(PERFECT) == []

    def test_threshold_itself_is_not_weak(self) -> None:
        """BOUNDARY: exactly 75 produces no feedback."""
        breakdown = {**PERFECT, "relevance": RelevanceTier.INDIRECT}
        assert generate_feedback(breakdown) == []

    def test_same_value_different_dimension(self) -> None:
        """Tier 0 of two dimensions must pick each dimension's own message."""
        breakdown = {**PERFECT, "measurability": 0, "time_bound": 0}
        assert generate_feedback(breakdown) == [
            FEEDBACK_MESSAGES["measurability"][MeasurabilityTier.NO_METRIC],
            FEEDBACK_MESSAGES["time_bound"][TimeBoundTier.NO_TIMEFRAME],
        ]

    def test_feedback_follows_dimension_order(self) -> None:
        breakdown = {
            "measurability": 50,
            "specificity": 0,
            "achievability": 25,
            "relevance": 50,
            "time_bound": 50,
        }
        assert len(generate_feedback(breakdown)) == 5
        assert generate_feedback(breakdown)[1] == FEEDBACK_MESSAGES["specificity"][0]


class TestGenerateImprovements:
    def test_format_template_emitted_once(self) -> None:
        breakdown = {**PERFECT, "measurability": 50, "specificity": 50}
        assert generate_improvements(breakdown) == [FORMAT_TEMPLATE, FORMAT_EXAMPLE]

    def test_specificity_alone_triggers_template(self) -> None:
        breakdown = {**PERFECT, "specificity": 0}
        assert generate_improvements(breakdown) == [FORMAT_TEMPLATE, FORMAT_EXAMPLE]

    def test_other_dimensions_append_their_guidance(self) -> None:
        breakdown = {**PERFECT, "achievability": 0, "relevance": 25, "time_bound": 50}
        assert generate_improvements(breakdown) == [
            IMPROVEMENT_MESSAGES["achievability"],
            IMPROVEMENT_MESSAGES["relevance"],
            IMPROVEMENT_MESSAGES["time_bound"],
        ]
