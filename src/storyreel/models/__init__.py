"""Data models for the timeline editor."""

from .scene import Scene, SceneMedia, Voiceover, Transition, MediaKind, parse_duration
from .asset import Asset, AssetKind, FileDescriptor
from .export import (
    ExportConfig,
    ExportFormat,
    ExportProgress,
    ExportState,
    Quality,
    Resolution,
    Watermark,
)
from .storyboard import Storyboard, StoryboardScene

__all__ = [
    "Scene",
    "SceneMedia",
    "Voiceover",
    "Transition",
    "MediaKind",
    "parse_duration",
    "Asset",
    "AssetKind",
    "FileDescriptor",
    "ExportConfig",
    "ExportFormat",
    "ExportProgress",
    "ExportState",
    "Quality",
    "Resolution",
    "Watermark",
    "Storyboard",
    "StoryboardScene",
]
