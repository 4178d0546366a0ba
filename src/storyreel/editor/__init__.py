"""Timeline editing engine."""

from .collection import OrderedCollection, move_element
from .events import ChangeEvent, Observable
from .confirmation import ConfirmationGate, PendingConfirmation
from .scenes import SceneStore
from .assets import AssetStore
from .reorder import ReorderEngine
from .binding import BindingResolver, DropZone
from .ticker import CancelHandle, ThreadTicker, Ticker
from .export import ExportPipeline
from .studio import Studio

__all__ = [
    # Collection
    "OrderedCollection",
    "move_element",
    # Events
    "ChangeEvent",
    "Observable",
    # Stores
    "SceneStore",
    "AssetStore",
    # Editing
    "ConfirmationGate",
    "PendingConfirmation",
    "ReorderEngine",
    "BindingResolver",
    "DropZone",
    # Export
    "CancelHandle",
    "ThreadTicker",
    "Ticker",
    "ExportPipeline",
    # Session
    "Studio",
]
