"""Asset store: the media library of uploaded files."""

import logging
import uuid
from typing import Callable, List, Optional

from ..config import config
from ..models import Asset, AssetKind, FileDescriptor
from ..services.locator import LocatorAllocator
from .collection import OrderedCollection
from .confirmation import ConfirmationGate, PendingConfirmation
from .events import Observable

logger = logging.getLogger(__name__)

DELETE_ASSET_TITLE = "Delete Asset"
DELETE_ASSET_MESSAGE = (
    "Are you sure you want to delete this asset? "
    "Scenes that already use it keep their copy until you replace it."
)


def _new_id() -> str:
    return uuid.uuid4().hex


class AssetStore(Observable):
    """Owns the uploaded assets, in upload order.

    Assets are independent of scenes. Deleting one never touches scenes
    that copied its locator and name when it was bound.
    """

    event_source = "assets"

    def __init__(
        self,
        locators: Optional[LocatorAllocator] = None,
        id_factory: Callable[[], str] = _new_id,
        release_on_delete: Optional[bool] = None,
    ) -> None:
        super().__init__()
        self._locators = locators if locators is not None else LocatorAllocator()
        self._id_factory = id_factory
        if release_on_delete is None:
            release_on_delete = config.release_locators_on_delete
        self._release_on_delete = release_on_delete
        self._assets: OrderedCollection[Asset] = OrderedCollection()

    def __len__(self) -> int:
        return len(self._assets)

    def __iter__(self):
        return iter(self._assets)

    @property
    def locators(self) -> LocatorAllocator:
        return self._locators

    def get(self, asset_id: str) -> Optional[Asset]:
        return self._assets.find(lambda asset: asset.id == asset_id)

    def by_kind(self, kind: AssetKind) -> List[Asset]:
        return [asset for asset in self._assets if asset.kind == kind]

    def add(self, descriptor: FileDescriptor) -> Asset:
        """Register an uploaded file and allocate a locator for its bytes."""
        kind = AssetKind.from_mime_type(descriptor.mime_type)
        url = self._locators.allocate(descriptor.data, descriptor.mime_type)
        asset = Asset(
            id=self._id_factory(),
            kind=kind,
            name=descriptor.name,
            url=url,
            size=descriptor.size,
            thumbnail=url if kind == AssetKind.IMAGE else None,
        )
        self._assets.append(asset)
        logger.info(f"Added {kind.value} asset '{asset.name}' ({asset.size_label})")
        self._publish("added", asset_id=asset.id)
        return asset

    def delete(self, asset_id: str) -> bool:
        """Remove an asset from the library.

        Scenes bound to it are left as they are.
        """
        removed = self._assets.remove_where(lambda asset: asset.id == asset_id)
        if not removed:
            logger.debug(f"Ignoring delete of unknown asset {asset_id}")
            return False
        if self._release_on_delete:
            for asset in removed:
                self._locators.revoke(asset.url)
        logger.info(f"Deleted asset {asset_id}")
        self._publish("deleted", asset_id=asset_id)
        return True

    def request_delete(self, asset_id: str, gate: ConfirmationGate) -> PendingConfirmation:
        """Route a delete through the confirmation gate."""
        return gate.request(
            DELETE_ASSET_TITLE,
            DELETE_ASSET_MESSAGE,
            lambda: self.delete(asset_id),
        )

    def clear(self) -> None:
        """Empty the library, e.g. when starting a new project."""
        removed = self._assets.snapshot()
        self._assets.replace([])
        if self._release_on_delete:
            for asset in removed:
                self._locators.revoke(asset.url)
        self._publish("cleared", count=len(removed))
