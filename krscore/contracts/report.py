"""Contracts for the aggregated agent quality report.

Serialized with ``by_alias=True`` so the written JSON keeps the camelCase
keys downstream dashboards already read.
"""

from pydantic import BaseModel, ConfigDict, Field


class TestSuite(BaseModel):
    """One evaluation suite feeding the quality report."""

    # Not a pytest test class despite the name
    __test__ = False

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    results_file: str = Field(alias="resultsFile")
    weight: float = Field(gt=0.0, le=1.0)
    description: str
    metric_based: bool = Field(default=False, alias="metricBased")


class SuiteScore(BaseModel):
    """Score of one suite that had results on disk."""

    model_config = ConfigDict(populate_by_name=True)

    dimension: str
    score: float
    max_score: float = Field(alias="maxScore")
    percentage: float = Field(ge=0.0, le=100.0)
    weight: float
    details: str
    metric_based: bool = Field(default=False, alias="metricBased")

    @property
    def pass_label(self) -> str:
        """Passed/total for pass/fail suites, a marker for metric-based ones."""
        if self.metric_based:
            return "N/A (metric-based)"
        return f"{int(self.score)}/{int(self.max_score)}"


class QualityReport(BaseModel):
    """Weighted roll-up of all loaded suites."""

    model_config = ConfigDict(populate_by_name=True)

    total_score: float = Field(alias="totalScore")
    max_score: float = Field(default=100.0, alias="maxScore")
    percentage: float = Field(ge=0.0, le=100.0)
    grade: str
    dimension_scores: list[SuiteScore] = Field(default_factory=list, alias="dimensionScores")
    strengths: list[str] = Field(default_factory=list)
    areas_for_improvement: list[str] = Field(default_factory=list, alias="areasForImprovement")
    recommendations: list[str] = Field(default_factory=list)
    missing_suites: list[str] = Field(default_factory=list, alias="missingSuites")
