"""Script suggestion services."""

import logging
import random
from typing import Optional, Protocol

from ..config import config

logger = logging.getLogger(__name__)

CANNED_SUGGESTIONS = (
    "Opening with a compelling hook to grab viewer attention.",
    "Consider adding a transition scene here to maintain flow.",
    "This section could benefit from supporting visuals or B-roll footage.",
    "End with a clear call-to-action for maximum engagement.",
)


class SuggestionService(Protocol):
    """Text in, one suggestion out. May raise."""

    def suggest(self, script: str) -> str:
        ...


class CannedSuggestions:
    """Offline suggester that picks one of a few stock tips."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    def suggest(self, script: str) -> str:
        return self._rng.choice(CANNED_SUGGESTIONS)


def default_suggestion_service() -> SuggestionService:
    """Use Claude when an API key is configured, stock tips otherwise."""
    if config.anthropic_api_key:
        from ..agents.script_assist import ScriptAssistAgent
        return ScriptAssistAgent()
    logger.info("ANTHROPIC_API_KEY not set, using canned suggestions")
    return CannedSuggestions()


def request_suggestion(service: SuggestionService, script: str) -> Optional[str]:
    """Ask ``service`` for a suggestion without letting a failure escape.

    Returns:
        The suggestion, or None if the service failed.
    """
    try:
        return service.suggest(script)
    except Exception as e:
        logger.error(f"Suggestion request failed: {e}")
        return None
