"""Binding of library assets onto scene media and voiceover slots."""

import logging
from enum import Enum
from typing import Optional

from ..models import AssetKind, MediaKind, SceneMedia, Voiceover
from .assets import AssetStore
from .scenes import SceneStore

logger = logging.getLogger(__name__)


class DropZone(str, Enum):
    """Slot on a scene card that accepts dropped assets."""
    MEDIA = "media"
    VOICEOVER = "voiceover"


_ZONE_KINDS = {
    DropZone.MEDIA: {AssetKind.IMAGE, AssetKind.VIDEO},
    DropZone.VOICEOVER: {AssetKind.AUDIO},
}


class BindingResolver:
    """Resolves asset drops against scenes.

    A scene keeps a copy of the asset's locator and name, not a reference
    to the asset, so later library changes do not reach it.
    """

    def __init__(self, scenes: SceneStore, assets: AssetStore) -> None:
        self._scenes = scenes
        self._assets = assets

    def drop(self, asset_id: str, scene_id: str, zone: Optional[DropZone] = None) -> bool:
        """Bind the dropped asset to the scene.

        Images and videos replace the scene's media; audio replaces its
        voiceover. Unknown ids and kinds the zone does not accept are
        ignored.

        Args:
            asset_id: Id carried by the drag payload.
            scene_id: Scene whose card received the drop.
            zone: Slot that received the drop. None lets the asset kind
                pick the slot.

        Returns:
            True if the scene was changed.
        """
        asset = self._assets.get(asset_id)
        if asset is None:
            logger.debug(f"Dropped unknown asset {asset_id}, ignoring")
            return False
        if zone is not None and asset.kind not in _ZONE_KINDS[zone]:
            logger.debug(f"{asset.kind.value} asset cannot be dropped on {zone.value}")
            return False

        if asset.kind in (AssetKind.IMAGE, AssetKind.VIDEO):
            media = SceneMedia(kind=MediaKind(asset.kind.value), url=asset.url, name=asset.name)
            return self._scenes.update(scene_id, media=media)
        if asset.kind == AssetKind.AUDIO:
            voiceover = Voiceover(url=asset.url, name=asset.name)
            return self._scenes.update(scene_id, voiceover=voiceover)
        return False

    def clear_media(self, scene_id: str) -> bool:
        return self._scenes.update(scene_id, media=None)

    def clear_voiceover(self, scene_id: str) -> bool:
        return self._scenes.update(scene_id, voiceover=None)
