"""Storyboard draft model used to seed a session from YAML."""

from typing import Any, List
from pathlib import Path
from pydantic import BaseModel, Field, field_validator
import yaml

from .scene import DEFAULT_DURATION, Transition, parse_duration


class StoryboardScene(BaseModel):
    """A scene as written in a storyboard draft."""

    script: str = Field(default="", description="Narration/script text")
    duration: int = Field(default=DEFAULT_DURATION, description="Scene duration in seconds")
    transition: Transition = Field(default=Transition.FADE, description="Transition effect")

    @field_validator("duration", mode="before")
    @classmethod
    def _coerce_duration(cls, value: Any) -> int:
        # Hand-written drafts get the same fallback as the editor input.
        return parse_duration(value)


class Storyboard(BaseModel):
    """Read-only storyboard draft.

    Only ever loaded; sessions are in-memory and nothing is written back.
    """

    title: str = Field(default="Untitled", description="Project title")
    scenes: List[StoryboardScene] = Field(default_factory=list, description="Ordered scenes")

    class Config:
        """Pydantic config."""
        frozen = False

    @classmethod
    def from_yaml(cls, path: Path) -> "Storyboard":
        """Load a storyboard from a YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)
