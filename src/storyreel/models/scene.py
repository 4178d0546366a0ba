"""Scene data model."""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field

MIN_DURATION = 1
MAX_DURATION = 60
DEFAULT_DURATION = 5


class Transition(str, Enum):
    """Transition played into the next scene."""
    NONE = "none"
    FADE = "fade"
    SLIDE = "slide"


class MediaKind(str, Enum):
    """Kinds of media a scene can show."""
    IMAGE = "image"
    VIDEO = "video"


class SceneMedia(BaseModel):
    """Copy of an image/video asset taken when it was bound to a scene."""

    kind: MediaKind = Field(..., description="Image or video")
    url: str = Field(..., description="Locator of the asset bytes")
    name: str = Field(..., description="Asset file name")


class Voiceover(BaseModel):
    """Copy of an audio asset taken when it was bound to a scene."""

    url: str = Field(..., description="Locator of the audio bytes")
    name: str = Field(..., description="Asset file name")


class Scene(BaseModel):
    """Represents a single scene in the timeline."""

    id: str = Field(..., description="Unique scene identifier")
    script: str = Field(default="", description="Narration/script text")
    duration: int = Field(default=DEFAULT_DURATION, description="Scene duration in seconds")
    transition: Transition = Field(default=Transition.FADE, description="Transition effect")
    media: Optional[SceneMedia] = Field(None, description="Bound image or video")
    voiceover: Optional[Voiceover] = Field(None, description="Bound voiceover audio")

    class Config:
        """Pydantic config."""
        frozen = False
        validate_assignment = True


def parse_duration(raw: Any, default: int = DEFAULT_DURATION) -> int:
    """Turn raw user input into a scene duration.

    Anything that is not a whole number inside [1, 60] falls back to
    ``default``.

    >>> parse_duration("12")
    12
    >>> parse_duration("abc")
    5
    >>> parse_duration(90)
    5
    """
    if isinstance(raw, bool) or raw is None:
        return default
    try:
        number = float(str(raw).strip())
    except ValueError:
        return default
    if not number.is_integer():
        return default
    value = int(number)
    if value < MIN_DURATION or value > MAX_DURATION:
        return default
    return value
