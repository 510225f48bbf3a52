"""Port interfaces between the core domain and external adapters."""

from krscore.core.ports.suggestion_port import ISuggestionProvider

__all__ = ["ISuggestionProvider"]
