"""
Test file to validate the Pydantic V2 data contracts.
"""

import pytest
from pydantic import ValidationError

from krscore.contracts import (
    EXAMPLE_KR_SCORE_RESULT,
    ConversationPhase,
    DisplayTiming,
    Grade,
    IntegrationMode,
    KRScoreResult,
    ScoreBreakdown,
    Suggestion,
    SuggestionContext,
    SuggestionRequest,
    SuggestionRequestType,
    SuggestionResponse,
)
from krscore.core.ports import ISuggestionProvider
from krscore.core.scoring import score_key_result


def test_example_payload_matches_scorer_output() -> None:
    """The documented example is exactly what the scorer returns."""
    result = score_key_result(
        "Increase NPS score from 40 to 65 by Q2 2024",
        "Improve customer satisfaction and NPS score across all touchpoints",
    )
    assert result.model_dump(mode="json", by_alias=True) == EXAMPLE_KR_SCORE_RESULT


def test_kr_score_result_round_trip() -> None:
    result = KRScoreResult.model_validate(EXAMPLE_KR_SCORE_RESULT)

    assert result.grade == Grade.B_PLUS
    assert result.breakdown.time_bound == 100
    assert result.breakdown.as_dict()["specificity"] == 50


def test_breakdown_rejects_off_tier_values() -> None:
    """Each dimension only accepts its enumerated tiers."""
    with pytest.raises(ValidationError):
        ScoreBreakdown(
            measurability=100, specificity=60, achievability=100, relevance=100, time_bound=100
        )
    # 85 is a Specificity tier but not a Time-Bound one
    with pytest.raises(ValidationError):
        ScoreBreakdown(
            measurability=100, specificity=85, achievability=100, relevance=100, time_bound=85
        )


def test_result_is_frozen() -> None:
    result = KRScoreResult.model_validate(EXAMPLE_KR_SCORE_RESULT)
    with pytest.raises(ValidationError):
        result.overall = 10  # type: ignore[misc]


def test_overall_range() -> None:
    payload = {**EXAMPLE_KR_SCORE_RESULT, "overall": 101}
    with pytest.raises(ValidationError):
        KRScoreResult.model_validate(payload)


def test_suggestion_request_minimal_context() -> None:
    """Only session and phase are required; user input defaults to empty."""
    request = SuggestionRequest.model_validate(
        {
            "context": {"sessionId": "s-1", "phase": "kr_discovery"},
            "requestType": "metrics",
        }
    )

    assert request.context.phase == ConversationPhase.KR_DISCOVERY
    assert request.context.industry is None
    assert request.context.team_size is None
    assert request.user_input == ""
    assert request.request_type == SuggestionRequestType.METRICS


def test_suggestion_confidence_bounds() -> None:
    with pytest.raises(ValidationError):
        SuggestionResponse(
            confidence=1.5,
            display_timing=DisplayTiming.IMMEDIATE,
            integration=IntegrationMode.INLINE,
        )
    with pytest.raises(ValidationError):
        Suggestion(id="x", type="metric", relevance_score=0.5, confidence=-0.1)


def test_suggestion_port_contract() -> None:
    with pytest.raises(TypeError):
        ISuggestionProvider()  # type: ignore[abstract]

    class _EmptyProvider(ISuggestionProvider):
        def get_suggestions(self, request: SuggestionRequest) -> SuggestionResponse:
            return SuggestionResponse(
                confidence=0.0,
                display_timing=DisplayTiming.ON_REQUEST,
                integration=IntegrationMode.SIDEBAR,
            )

    request = SuggestionRequest(
        context=SuggestionContext(session_id="s-1", phase=ConversationPhase.DISCOVERY),
        request_type=SuggestionRequestType.EXAMPLES,
    )
    response = _EmptyProvider().get_suggestions(request)

    assert response.suggestions == []
    assert response.context_analysis is None
