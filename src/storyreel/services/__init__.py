"""External service integrations."""

from .anthropic import AnthropicClient
from .locator import LocatorAllocator, LocatorEntry
from .suggestions import (
    CANNED_SUGGESTIONS,
    CannedSuggestions,
    SuggestionService,
    default_suggestion_service,
    request_suggestion,
)

__all__ = [
    "AnthropicClient",
    "LocatorAllocator",
    "LocatorEntry",
    "CANNED_SUGGESTIONS",
    "CannedSuggestions",
    "SuggestionService",
    "default_suggestion_service",
    "request_suggestion",
]
