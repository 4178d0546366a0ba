"""In-process change notification for editor state containers."""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)


@dataclass
class ChangeEvent:
    """A state change published by a store."""

    source: str
    event_type: str
    payload: Dict[str, Any] = field(default_factory=dict)


Listener = Callable[[ChangeEvent], Any]


class Observable:
    """Mixin giving a state container subscribe/publish.

    Listeners run synchronously in subscription order. A failing listener
    is logged and does not stop delivery to the others or roll back the
    change that triggered it.
    """

    event_source = "observable"

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, event_type: str, **payload: Any) -> None:
        event = ChangeEvent(source=self.event_source, event_type=event_type, payload=payload)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as e:
                logger.error(f"Listener error on {self.event_source}.{event_type}: {e}")
