"""Export configuration and progress models."""

from enum import Enum
from typing import Any, Dict, Tuple
from pydantic import BaseModel, Field


class Resolution(str, Enum):
    """Output resolution presets."""
    P1080 = "1080p"
    P720 = "720p"
    P480 = "480p"


class ExportFormat(str, Enum):
    """Output container formats."""
    MP4 = "mp4"
    MOV = "mov"


class Quality(str, Enum):
    """Output quality presets."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ExportState(str, Enum):
    """Export pipeline state."""
    IDLE = "idle"
    EXPORTING = "exporting"
    COMPLETE = "complete"


DIMENSIONS: Dict[Resolution, Tuple[int, int]] = {
    Resolution.P1080: (1920, 1080),
    Resolution.P720: (1280, 720),
    Resolution.P480: (854, 480),
}

BITRATES: Dict[Quality, str] = {
    Quality.HIGH: "8000k",
    Quality.MEDIUM: "5000k",
    Quality.LOW: "3000k",
}

CODECS: Dict[ExportFormat, Tuple[str, str]] = {
    ExportFormat.MP4: ("libx264", "aac"),
    ExportFormat.MOV: ("libx264", "aac"),
}


class Watermark(BaseModel):
    """Optional text watermark burned into the render."""

    enabled: bool = Field(default=False, description="Include the watermark")
    text: str = Field(default="", description="Watermark text")


class ExportConfig(BaseModel):
    """Render settings chosen in the export flow."""

    resolution: Resolution = Field(default=Resolution.P1080, description="Output resolution")
    format: ExportFormat = Field(default=ExportFormat.MP4, description="Container format")
    quality: Quality = Field(default=Quality.HIGH, description="Quality preset")
    watermark: Watermark = Field(default_factory=Watermark, description="Watermark settings")
    branding: bool = Field(default=False, description="Include the branding logo")

    class Config:
        """Pydantic config."""
        frozen = False

    @property
    def dimensions(self) -> Tuple[int, int]:
        """Return (width, height) in pixels."""
        return DIMENSIONS[self.resolution]

    def encoding_params(self, fps: int = 30) -> Dict[str, Any]:
        """Build the parameter set a render backend needs for this config."""
        video_codec, audio_codec = CODECS[self.format]
        width, height = self.dimensions
        params: Dict[str, Any] = {
            "fps": fps,
            "codec": video_codec,
            "audio_codec": audio_codec,
            "bitrate": BITRATES[self.quality],
            "size": (width, height),
            "preset": "medium" if self.quality == Quality.HIGH else "fast",
        }
        if self.watermark.enabled and self.watermark.text:
            params["watermark"] = self.watermark.text
        if self.branding:
            params["branding"] = True
        return params


class ExportProgress(BaseModel):
    """Observable progress of the simulated export."""

    state: ExportState = Field(default=ExportState.IDLE, description="Pipeline state")
    percent: int = Field(default=0, description="Completion percentage", ge=0, le=100)
