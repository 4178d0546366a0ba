"""Configuration management."""

import os
from pydantic import BaseModel, Field
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config(BaseModel):
    """Application configuration."""

    # API Keys
    anthropic_api_key: str = Field(
        default_factory=lambda: os.getenv("ANTHROPIC_API_KEY", ""),
        description="Anthropic API key (script suggestions)"
    )

    # Model settings
    default_model: str = Field(
        default_factory=lambda: os.getenv("STORYREEL_MODEL", "claude-sonnet-4-20250514"),
        description="Claude model used for script suggestions"
    )

    # Timeline defaults
    default_scene_duration: int = Field(
        default=5,
        description="Duration given to new scenes and to unparseable input (seconds)"
    )

    # Export simulation
    export_tick_interval: float = Field(
        default_factory=lambda: float(os.getenv("STORYREEL_EXPORT_TICK", "0.3")),
        description="Seconds between simulated export progress ticks",
        gt=0,
    )
    export_progress_step: int = Field(
        default=10,
        description="Percent added on each export tick",
        gt=0,
        le=100,
    )
    export_mb_per_second: float = Field(
        default=0.5,
        description="Simulated output bitrate used for the size estimate"
    )

    # Asset library
    release_locators_on_delete: bool = Field(
        default_factory=lambda: _env_bool("STORYREEL_RELEASE_LOCATORS"),
        description="Revoke an asset's locator when the asset is deleted"
    )

    class Config:
        """Pydantic config."""
        frozen = False

    def validate_required(self) -> None:
        """Validate that credentials for the suggestion agent are set."""
        if not self.anthropic_api_key:
            raise ValueError("ANTHROPIC_API_KEY not set")


# Global config instance
config = Config()
