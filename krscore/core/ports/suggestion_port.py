"""Port interface for the contextual-suggestion subsystem.

The core scorer never calls a provider; the coaching layer owns that wiring.
The port exists so providers can be type-checked against one contract.
"""

from abc import ABC, abstractmethod

from krscore.contracts.suggestions import SuggestionRequest, SuggestionResponse


class ISuggestionProvider(ABC):
    """Port interface for phase-aware OKR suggestions."""

    @abstractmethod
    def get_suggestions(self, request: SuggestionRequest) -> SuggestionResponse:
        """Return suggestions for one conversational turn.

        Args:
            request: Conversation context, latest user input and the kind of
                suggestion wanted

        Returns:
            SuggestionResponse with ``confidence`` in [0, 1]. Missing optional
            context and empty input yield an empty, low-confidence response
            rather than an exception. Expected to return in well under a
            second.
        """
        pass
