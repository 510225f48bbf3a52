"""Contract models for data validation."""

from .kr_score import EXAMPLE_KR_SCORE_RESULT, Grade, KRScoreResult, ScoreBreakdown
from .objective_score import (
    ObjectiveBreakdown,
    ObjectiveDetails,
    ObjectiveScore,
    RubricExampleCheck,
    RubricValidation,
)
from .report import QualityReport, SuiteScore, TestSuite
from .suggestions import (
    ConversationPhase,
    DisplayTiming,
    IntegrationMode,
    Suggestion,
    SuggestionContext,
    SuggestionRequest,
    SuggestionRequestType,
    SuggestionResponse,
)
from .tiers import (
    FEEDBACK_THRESHOLD,
    AchievabilityTier,
    MeasurabilityTier,
    RelevanceTier,
    RubricLevel,
    SpecificityTier,
    TimeBoundTier,
)

__all__ = [
    "Grade",
    "ScoreBreakdown",
    "KRScoreResult",
    "EXAMPLE_KR_SCORE_RESULT",
    "ObjectiveBreakdown",
    "ObjectiveDetails",
    "ObjectiveScore",
    "RubricExampleCheck",
    "RubricValidation",
    "MeasurabilityTier",
    "SpecificityTier",
    "AchievabilityTier",
    "RelevanceTier",
    "TimeBoundTier",
    "RubricLevel",
    "FEEDBACK_THRESHOLD",
    "TestSuite",
    "SuiteScore",
    "QualityReport",
    "ConversationPhase",
    "SuggestionRequestType",
    "DisplayTiming",
    "IntegrationMode",
    "SuggestionContext",
    "SuggestionRequest",
    "Suggestion",
    "SuggestionResponse",
]
