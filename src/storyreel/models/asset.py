"""Asset library data models."""

import mimetypes
from enum import Enum
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field


class AssetKind(str, Enum):
    """Asset kind, derived from the uploaded file's media type."""
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"

    @classmethod
    def from_mime_type(cls, mime_type: str) -> "AssetKind":
        """Map a media type to an asset kind.

        ``image/*`` and ``video/*`` map to their kind; everything else,
        including an empty type, is treated as audio.
        """
        mime_type = (mime_type or "").lower()
        if mime_type.startswith("image/"):
            return cls.IMAGE
        if mime_type.startswith("video/"):
            return cls.VIDEO
        return cls.AUDIO


class FileDescriptor(BaseModel):
    """A file handed over by the upload source."""

    name: str = Field(..., description="Original file name")
    mime_type: str = Field(default="", description="Declared media type")
    size: int = Field(..., description="Size in bytes", ge=0)
    data: bytes = Field(default=b"", description="Raw file contents")

    @classmethod
    def from_path(cls, path: Path) -> "FileDescriptor":
        """Read a local file into a descriptor."""
        path = Path(path)
        data = path.read_bytes()
        mime_type, _ = mimetypes.guess_type(path.name)
        return cls(
            name=path.name,
            mime_type=mime_type or "",
            size=len(data),
            data=data,
        )


class Asset(BaseModel):
    """An uploaded item in the media library."""

    id: str = Field(..., description="Unique asset identifier")
    kind: AssetKind = Field(..., description="Image, video or audio")
    name: str = Field(..., description="File name")
    url: str = Field(..., description="Opaque locator of the bytes")
    size: int = Field(..., description="Size in bytes", ge=0)
    thumbnail: Optional[str] = Field(None, description="Preview locator (images only)")

    class Config:
        """Pydantic config."""
        frozen = False

    @property
    def size_label(self) -> str:
        """Human readable size, e.g. ``512 B``, ``1.5 KB``, ``2.0 MB``."""
        if self.size < 1024:
            return f"{self.size} B"
        if self.size < 1024 * 1024:
            return f"{self.size / 1024:.1f} KB"
        return f"{self.size / (1024 * 1024):.1f} MB"
