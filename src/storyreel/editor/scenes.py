"""Scene store: the ordered timeline and the current selection."""

import logging
import uuid
from typing import Any, Callable, Iterable, List, Optional

from ..config import config
from ..models import Scene
from .collection import OrderedCollection
from .confirmation import ConfirmationGate, PendingConfirmation
from .events import Observable

logger = logging.getLogger(__name__)

INITIAL_SCENE_ID = "1"

CANNOT_DELETE_TITLE = "Cannot Delete"
CANNOT_DELETE_MESSAGE = "You must have at least one scene in your project."
DELETE_SCENE_TITLE = "Delete Scene"
DELETE_SCENE_MESSAGE = "Are you sure you want to delete this scene? This action cannot be undone."

_IMMUTABLE_FIELDS = {"id"}


def _new_id() -> str:
    return uuid.uuid4().hex


class SceneStore(Observable):
    """Owns the ordered scene list.

    The list is never empty and ``selected_id`` always names one of its
    scenes. Mutations publish a change event to subscribers.
    """

    event_source = "scenes"

    def __init__(
        self,
        scenes: Optional[Iterable[Scene]] = None,
        id_factory: Callable[[], str] = _new_id,
    ) -> None:
        super().__init__()
        self._id_factory = id_factory
        self._scenes: OrderedCollection[Scene] = OrderedCollection(scenes)
        if not len(self._scenes):
            self._scenes.append(self._default_scene(INITIAL_SCENE_ID))
        self._selected_id = self._scenes[0].id

    def __len__(self) -> int:
        return len(self._scenes)

    def __iter__(self):
        return iter(self._scenes)

    @staticmethod
    def _default_scene(scene_id: str) -> Scene:
        return Scene(id=scene_id, duration=config.default_scene_duration)

    @property
    def selected_id(self) -> str:
        return self._selected_id

    @property
    def selected(self) -> Scene:
        return self.get(self._selected_id) or self._scenes[0]

    @property
    def total_duration(self) -> int:
        """Sum of all scene durations in seconds."""
        return sum(scene.duration for scene in self._scenes)

    def get(self, scene_id: str) -> Optional[Scene]:
        return self._scenes.find(lambda scene: scene.id == scene_id)

    def index_of(self, scene_id: str) -> int:
        return self._scenes.index_where(lambda scene: scene.id == scene_id)

    def snapshot(self) -> List[Scene]:
        """Return deep copies of the scenes in playback order."""
        return [scene.model_copy(deep=True) for scene in self._scenes]

    def select(self, scene_id: str) -> bool:
        if self.get(scene_id) is None:
            logger.debug(f"Ignoring selection of unknown scene {scene_id}")
            return False
        self._selected_id = scene_id
        self._publish("selected", scene_id=scene_id)
        return True

    def add(self) -> Scene:
        """Append a scene with default fields and select it."""
        scene = self._default_scene(self._id_factory())
        self._scenes.append(scene)
        self._selected_id = scene.id
        logger.debug(f"Added scene {scene.id} at position {len(self._scenes) - 1}")
        self._publish("added", scene_id=scene.id)
        return scene

    def update(self, scene_id: str, **fields: Any) -> bool:
        """Merge ``fields`` into a scene in place.

        Values are coerced to the field types (a ``{kind, url, name}`` dict
        becomes ``SceneMedia``, ``"slide"`` becomes ``Transition.SLIDE``).
        Range checks belong to whoever parsed the raw input (see
        ``parse_duration``). Nothing is changed if any value is invalid.

        Returns:
            False if no scene has ``scene_id``.

        Raises:
            ValueError: If a field does not exist on Scene or is ``id``.
            pydantic.ValidationError: If a value cannot be coerced.
        """
        unknown = set(fields) - set(Scene.model_fields)
        if unknown:
            raise ValueError(f"Unknown scene field(s): {', '.join(sorted(unknown))}")
        frozen = set(fields) & _IMMUTABLE_FIELDS
        if frozen:
            raise ValueError(f"Scene field(s) cannot be changed: {', '.join(sorted(frozen))}")

        scene = self.get(scene_id)
        if scene is None:
            logger.debug(f"Ignoring update of unknown scene {scene_id}")
            return False

        merged = Scene.model_validate({**scene.model_dump(), **fields})
        for name in fields:
            setattr(scene, name, getattr(merged, name))
        self._publish("updated", scene_id=scene_id, fields=sorted(fields))
        return True

    def delete(self, scene_id: str) -> bool:
        """Remove a scene immediately.

        The last remaining scene is never removed. If the removed scene was
        selected, the selection moves to the first scene in current order.
        """
        if len(self._scenes) <= 1:
            logger.warning("Refusing to delete the only scene")
            return False
        removed = self._scenes.remove_where(lambda scene: scene.id == scene_id)
        if not removed:
            return False
        if self._selected_id == scene_id:
            self._selected_id = self._scenes[0].id
        logger.debug(f"Deleted scene {scene_id}")
        self._publish("deleted", scene_id=scene_id)
        return True

    def request_delete(self, scene_id: str, gate: ConfirmationGate) -> PendingConfirmation:
        """Route a delete through the confirmation gate.

        With a single scene left the gate gets a notice instead, and
        confirming it changes nothing.
        """
        if len(self._scenes) == 1:
            return gate.notice(CANNOT_DELETE_TITLE, CANNOT_DELETE_MESSAGE)
        return gate.request(
            DELETE_SCENE_TITLE,
            DELETE_SCENE_MESSAGE,
            lambda: self.delete(scene_id),
        )

    def reorder(self, from_index: int, to_index: int) -> bool:
        """Move the scene at ``from_index`` to ``to_index``.

        Returns:
            False if either index is out of bounds; the order is unchanged.
        """
        size = len(self._scenes)
        in_bounds = 0 <= from_index < size and 0 <= to_index < size
        if in_bounds and from_index == to_index:
            return True
        if not in_bounds or not self._scenes.move(from_index, to_index):
            logger.warning(
                f"Rejected reorder {from_index} -> {to_index} "
                f"({len(self._scenes)} scenes)"
            )
            return False
        self._publish("reordered", from_index=from_index, to_index=to_index)
        return True

    def reset(self) -> None:
        """Replace the timeline with a single default scene."""
        self._scenes.replace([self._default_scene(INITIAL_SCENE_ID)])
        self._selected_id = INITIAL_SCENE_ID
        self._publish("reset")
