"""AI agents for script assistance."""

from .base import BaseAgent
from .script_assist import ScriptAssistAgent

__all__ = ["BaseAgent", "ScriptAssistAgent"]
