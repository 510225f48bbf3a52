"""Pydantic contracts for Key Result scoring output.

These models are the boundary between the scorer and its consumers (the
coaching agent, the suggestion subsystem, the CLI). Field aliases carry the
camelCase names the conversational front end expects.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from krscore.contracts.tiers import (
    AchievabilityTier,
    MeasurabilityTier,
    RelevanceTier,
    SpecificityTier,
    TimeBoundTier,
)


class Grade(str, Enum):
    """Letter grades, best first."""

    A_PLUS = "A+"
    A = "A"
    A_MINUS = "A-"
    B_PLUS = "B+"
    B = "B"
    B_MINUS = "B-"
    C_PLUS = "C+"
    C = "C"
    C_MINUS = "C-"
    D = "D"
    F = "F"


class ScoreBreakdown(BaseModel):
    """The five dimension tiers of one scored Key Result."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    measurability: MeasurabilityTier = Field(description="Metric, baseline, target (30%)")
    specificity: SpecificityTier = Field(description="Units, cadence, source (25%)")
    achievability: AchievabilityTier = Field(description="Improvement ratio band (20%)")
    relevance: RelevanceTier = Field(description="Link to the objective (15%)")
    time_bound: TimeBoundTier = Field(alias="timeBound", description="Deadline/cadence (10%)")

    def as_dict(self) -> dict[str, int]:
        """Plain {dimension: score} mapping keyed by python field names."""
        return {name: int(getattr(self, name)) for name in type(self).model_fields}


class KRScoreResult(BaseModel):
    """Output of one scoring call."""

    model_config = ConfigDict(frozen=True)

    overall: int = Field(ge=0, le=100, description="round_half_up of the weighted dimension sum")
    grade: Grade
    breakdown: ScoreBreakdown
    feedback: list[str] = Field(
        default_factory=list, description="One message per dimension scoring below 75"
    )
    improvements: list[str] = Field(
        default_factory=list, description="Rewrite guidance triggered by weak dimensions"
    )


# Example payload (model_dump(mode="json", by_alias=True))
EXAMPLE_KR_SCORE_RESULT = {
    "overall": 88,
    "grade": "B+",
    "breakdown": {
        "measurability": 100,
        "specificity": 50,
        "achievability": 100,
        "relevance": 100,
        "timeBound": 100,
    },
    "feedback": ["Add frequency (monthly, quarterly) and/or measurement source"],
    "improvements": [
        'Try format: "[Verb] [Metric] from [Baseline] to [Target] by [Deadline]"',
        'Example: "Increase NPS from 40 to 65 by Q2 2024"',
    ],
}
