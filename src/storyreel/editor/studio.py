"""Studio: the editing session that wires the stores together."""

import logging
from typing import Any, Optional

from ..models import Asset, FileDescriptor, Scene, Storyboard, parse_duration
from ..services.locator import LocatorAllocator
from ..services.suggestions import (
    SuggestionService,
    default_suggestion_service,
    request_suggestion,
)
from .assets import AssetStore
from .binding import BindingResolver, DropZone
from .confirmation import ConfirmationGate, PendingConfirmation
from .export import ExportPipeline
from .reorder import ReorderEngine
from .scenes import SceneStore
from .ticker import Ticker

logger = logging.getLogger(__name__)

NEW_PROJECT_TITLE = "New Project"
NEW_PROJECT_MESSAGE = "Creating a new project will discard all current work. Continue?"


class Studio:
    """One in-memory editing session.

    Destructive intents (deleting scenes or assets, starting over) go
    through ``gate``; everything else mutates the stores directly.
    """

    def __init__(
        self,
        scenes: Optional[SceneStore] = None,
        assets: Optional[AssetStore] = None,
        suggestions: Optional[SuggestionService] = None,
        ticker: Optional[Ticker] = None,
    ) -> None:
        self.scenes = scenes if scenes is not None else SceneStore()
        self.assets = assets if assets is not None else AssetStore(LocatorAllocator())
        self.gate = ConfirmationGate()
        self.binder = BindingResolver(self.scenes, self.assets)
        self.reorder = ReorderEngine(self.scenes)
        self._suggestions = suggestions
        self._ticker = ticker
        self._export: Optional[ExportPipeline] = None

    @classmethod
    def from_storyboard(cls, storyboard: Storyboard, **kwargs: Any) -> "Studio":
        """Start a session seeded with a storyboard draft's scenes."""
        scenes = [
            Scene(
                id=str(index),
                script=draft.script,
                duration=draft.duration,
                transition=draft.transition,
            )
            for index, draft in enumerate(storyboard.scenes, start=1)
        ]
        return cls(scenes=SceneStore(scenes), **kwargs)

    @property
    def suggestions(self) -> SuggestionService:
        if self._suggestions is None:
            self._suggestions = default_suggestion_service()
        return self._suggestions

    @property
    def export(self) -> Optional[ExportPipeline]:
        """The open export flow, if any."""
        return self._export

    # Scenes

    def add_scene(self) -> Scene:
        return self.scenes.add()

    def update_scene(self, scene_id: str, **fields: Any) -> bool:
        return self.scenes.update(scene_id, **fields)

    def set_duration(self, scene_id: str, raw: Any) -> bool:
        """Set a scene's duration from raw input, falling back to the default."""
        return self.scenes.update(scene_id, duration=parse_duration(raw))

    def request_delete_scene(self, scene_id: str) -> PendingConfirmation:
        return self.scenes.request_delete(scene_id, self.gate)

    # Assets

    def upload(self, descriptor: FileDescriptor) -> Asset:
        return self.assets.add(descriptor)

    def request_delete_asset(self, asset_id: str) -> PendingConfirmation:
        return self.assets.request_delete(asset_id, self.gate)

    def drop_asset(self, asset_id: str, scene_id: str, zone: Optional[DropZone] = None) -> bool:
        return self.binder.drop(asset_id, scene_id, zone)

    # Project

    def request_new_project(self) -> PendingConfirmation:
        """Ask before discarding every scene and asset."""
        return self.gate.request(NEW_PROJECT_TITLE, NEW_PROJECT_MESSAGE, self._reset)

    def _reset(self) -> None:
        self.close_export()
        self.reorder.cancel()
        self.scenes.reset()
        self.assets.clear()
        logger.info("Started a new project")

    # Script assistance

    def suggest(self, scene_id: Optional[str] = None) -> Optional[str]:
        """Get a suggestion for a scene's script (the selected scene by default).

        Returns:
            None if the scene does not exist or the service failed.
        """
        scene = self.scenes.get(scene_id) if scene_id else self.scenes.selected
        if scene is None:
            return None
        return request_suggestion(self.suggestions, scene.script)

    # Export

    def open_export(self) -> ExportPipeline:
        """Open a fresh export flow over the current timeline."""
        self.close_export()
        self._export = ExportPipeline(
            self.scenes.snapshot(),
            ticker=self._ticker,
            locators=self.assets.locators,
        )
        return self._export

    def close_export(self) -> None:
        if self._export is not None:
            self._export.close()
            self._export = None
