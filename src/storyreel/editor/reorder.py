"""Live drag reordering of the scene timeline."""

import logging
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class Reorderable(Protocol):
    """Anything that can move one element of an ordered list."""

    def reorder(self, from_index: int, to_index: int) -> bool:
        ...


class ReorderEngine:
    """Reorders continuously while a card is dragged over other slots.

    Each time the pointer enters a different slot, the dragged scene is
    moved there immediately and the engine tracks its new position, so the
    next hover is measured from where the card is now. Dropping or
    cancelling just ends the gesture; the list is already in its final
    order.

    Only one drag is tracked at a time.
    """

    def __init__(self, target: Reorderable) -> None:
        self._target = target
        self._drag_index: Optional[int] = None

    @property
    def active(self) -> bool:
        return self._drag_index is not None

    @property
    def drag_index(self) -> Optional[int]:
        """Current position of the dragged item, or None when idle."""
        return self._drag_index

    def begin(self, index: int) -> None:
        """Start dragging the item at ``index``."""
        if self._drag_index is not None:
            logger.debug(f"New drag at {index} replaces drag at {self._drag_index}")
        self._drag_index = index

    def hover(self, hover_index: int) -> bool:
        """Handle the dragged item entering the slot at ``hover_index``.

        Returns:
            True if the list was reordered.
        """
        if self._drag_index is None:
            return False
        if hover_index == self._drag_index:
            return False
        if not self._target.reorder(self._drag_index, hover_index):
            return False
        self._drag_index = hover_index
        return True

    def drop(self) -> Optional[int]:
        """End the gesture and return the item's final index."""
        final_index = self._drag_index
        self._drag_index = None
        return final_index

    def cancel(self) -> None:
        """End the gesture; moves already applied are kept."""
        self._drag_index = None
