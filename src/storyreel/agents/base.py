"""Base agent abstraction."""

import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional

from ..services.anthropic import AnthropicClient
from ..config import config

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class BaseAgent(ABC, Generic[InputT, OutputT]):
    """Abstract base class for Claude-backed agents.

    Subclasses provide a name, a system prompt and ``run``; the base class
    owns the client and logging.
    """

    max_tokens = 512
    temperature = 0.7

    def __init__(
        self,
        client: Optional[AnthropicClient] = None,
        model: Optional[str] = None,
    ) -> None:
        """Initialize the agent.

        Args:
            client: AnthropicClient instance. Created if not provided.
            model: Model to use. Defaults to config.default_model.
        """
        self._client = client or AnthropicClient(model=model or config.default_model)
        self._logger = logging.getLogger(f"{__name__}.{self.name}")

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the agent's name."""
        ...

    @property
    @abstractmethod
    def system_prompt(self) -> str:
        """Return the system prompt for this agent."""
        ...

    @property
    def model(self) -> str:
        """Return the model being used."""
        return self._client.model

    @abstractmethod
    def run(self, input_data: InputT) -> OutputT:
        """Execute the agent's task."""
        ...

    def _create_message(self, prompt: str) -> str:
        """Send ``prompt`` with this agent's system prompt and settings."""
        self._logger.debug(f"Prompt length: {len(prompt)}")
        try:
            response = self._client.create_message(
                prompt=prompt,
                max_tokens=self.max_tokens,
                system=self.system_prompt,
                temperature=self.temperature,
            )
        except Exception as e:
            self._logger.error(f"Error creating message: {e}")
            raise
        self._logger.debug(f"Response length: {len(response)}")
        return response
