"""Single-slot confirmation protocol for destructive actions."""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .events import Observable

logger = logging.getLogger(__name__)


def _no_op() -> None:
    pass


@dataclass(frozen=True)
class PendingConfirmation:
    """The action waiting for the user to confirm or cancel."""

    title: str
    message: str
    on_confirm: Callable[[], None]


class ConfirmationGate(Observable):
    """Holds at most one pending destructive action.

    A new request replaces whatever is pending; the replaced action is
    dropped without running. There is no queue.
    """

    event_source = "confirmation"

    def __init__(self) -> None:
        super().__init__()
        self._pending: Optional[PendingConfirmation] = None

    @property
    def pending(self) -> Optional[PendingConfirmation]:
        return self._pending

    @property
    def is_pending(self) -> bool:
        return self._pending is not None

    def request(self, title: str, message: str, on_confirm: Callable[[], None]) -> PendingConfirmation:
        """Ask for confirmation before running ``on_confirm``."""
        if self._pending is not None:
            logger.debug(f"Dropping unconfirmed action '{self._pending.title}' for '{title}'")
        self._pending = PendingConfirmation(title=title, message=message, on_confirm=on_confirm)
        self._publish("requested", title=title, message=message)
        return self._pending

    def notice(self, title: str, message: str) -> PendingConfirmation:
        """Show a message whose confirmation does nothing."""
        return self.request(title, message, _no_op)

    def confirm(self) -> bool:
        """Run the pending action and return to idle.

        Returns:
            False if nothing was pending.
        """
        pending = self._pending
        if pending is None:
            return False
        try:
            pending.on_confirm()
        finally:
            # The action may have opened a follow-up request; keep that one.
            if self._pending is pending:
                self._pending = None
        self._publish("confirmed", title=pending.title)
        return True

    def cancel(self) -> bool:
        """Discard the pending action without running it."""
        pending = self._pending
        if pending is None:
            return False
        self._pending = None
        self._publish("cancelled", title=pending.title)
        return True
