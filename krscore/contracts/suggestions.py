"""Pydantic contracts for the contextual-suggestion subsystem.

The suggestion subsystem lives outside this package; it consumes scorer
output and recommends examples, metrics and templates per conversation
phase. Only the request/response shapes are defined here so both sides
validate against the same schema.

Every context field except the session and phase is optional, and an empty
``user_input`` is valid: a provider must degrade, not fail.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ConversationPhase(str, Enum):
    """Coaching conversation phases."""

    DISCOVERY = "discovery"
    REFINEMENT = "refinement"
    KR_DISCOVERY = "kr_discovery"
    VALIDATION = "validation"
    COMPLETED = "completed"


class SuggestionRequestType(str, Enum):
    EXAMPLES = "examples"
    ANTI_PATTERNS = "anti_patterns"
    METRICS = "metrics"
    TEMPLATES = "templates"
    BEST_PRACTICES = "best_practices"


class DisplayTiming(str, Enum):
    IMMEDIATE = "immediate"
    AFTER_RESPONSE = "after_response"
    ON_REQUEST = "on_request"


class IntegrationMode(str, Enum):
    INLINE = "inline"
    SIDEBAR = "sidebar"
    MODAL = "modal"


class SuggestionContext(BaseModel):
    """What the provider knows about the conversation."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    session_id: str = Field(alias="sessionId", min_length=1)
    phase: ConversationPhase
    industry: str | None = None
    function: str | None = None
    team_size: int | None = Field(default=None, alias="teamSize", ge=1)
    timeframe: str | None = None


class SuggestionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    context: SuggestionContext
    user_input: str = Field(default="", alias="userInput")
    request_type: SuggestionRequestType = Field(alias="requestType")


class Suggestion(BaseModel):
    """One recommendation returned to the coaching UI."""

    id: str
    type: str = Field(description="example | anti_pattern | metric | template")
    content: Any = None
    relevance_score: float = Field(ge=0.0, le=1.0)
    confidence: float = Field(ge=0.0, le=1.0)
    explanation: str = ""


class SuggestionResponse(BaseModel):
    suggestions: list[Suggestion] = Field(default_factory=list)
    confidence: float = Field(ge=0.0, le=1.0)
    display_timing: DisplayTiming
    integration: IntegrationMode
    context_analysis: dict[str, Any] | None = None
