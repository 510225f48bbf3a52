"""Pydantic contracts for Objective scoring output.

Objectives are qualitative, so every dimension sits on the same five-level
rubric scale instead of a dimension-specific tier enum.
"""

from pydantic import BaseModel, ConfigDict, Field

from krscore.contracts.kr_score import Grade
from krscore.contracts.tiers import RubricLevel


class ObjectiveBreakdown(BaseModel):
    """The five dimension levels of one scored Objective."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    outcome_orientation: RubricLevel = Field(
        alias="outcomeOrientation", description="Outcome over activity (30%)"
    )
    inspirational: RubricLevel = Field(description="Motivating language (20%)")
    clarity: RubricLevel = Field(description="Short enough to remember (15%)")
    strategic: RubricLevel = Field(description="Business or strategic value (15%)")
    ambition: RubricLevel = Field(description="Stretch rather than upkeep (20%)")

    def as_dict(self) -> dict[str, int]:
        return {name: int(getattr(self, name)) for name in type(self).model_fields}


class ObjectiveDetails(BaseModel):
    """Language signals the dimension rules were decided from."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    word_count: int = Field(alias="wordCount", ge=0)
    has_activity_words: bool = Field(alias="hasActivityWords")
    has_outcome_words: bool = Field(alias="hasOutcomeWords")
    has_power_words: bool = Field(alias="hasPowerWords")
    has_maintenance_words: bool = Field(alias="hasMaintenanceWords")
    has_business_words: bool = Field(alias="hasBusinessWords")
    has_growth_words: bool = Field(alias="hasGrowthWords")


class ObjectiveScore(BaseModel):
    """Output of one objective scoring call."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    overall: int = Field(ge=0, le=100, description="round_half_up of the weighted dimension sum")
    breakdown: ObjectiveBreakdown
    weighted_score: float = Field(
        alias="weightedScore", ge=0.0, le=100.0, description="Unrounded weighted sum"
    )
    grade: Grade = Field(description="Graded from the unrounded weighted sum")
    details: ObjectiveDetails


class RubricExampleCheck(BaseModel):
    """One calibration objective compared against its expected score."""

    model_config = ConfigDict(frozen=True)

    objective: str
    expected: int
    actual: int
    variance: int
    passed: bool
    breakdown: ObjectiveBreakdown


class RubricValidation(BaseModel):
    """Outcome of checking the scorer against every calibration objective."""

    model_config = ConfigDict(frozen=True)

    passed: int
    total: int
    details: list[RubricExampleCheck] = Field(default_factory=list)

    @property
    def all_passed(self) -> bool:
        return self.passed == self.total
