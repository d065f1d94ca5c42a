"""Validated options for one render request."""

from __future__ import annotations

import enum
from pathlib import Path

from pydantic import BaseModel, Field

from epicycles.config import settings


class OutputMode(str, enum.Enum):
    SVG = "svg"  # one animated SVG
    SVGS = "svgs"  # directory of static SVG frames
    PNGS = "pngs"  # directory of rasterized frames
    GIF = "gif"  # one animated GIF

    @property
    def is_directory(self) -> bool:
        return self in (OutputMode.SVGS, OutputMode.PNGS)


class AnimationOptions(BaseModel):
    depth: int = Field(default_factory=lambda: settings.default_depth, ge=0)
    frames: int = Field(default_factory=lambda: settings.default_frames, ge=1)
    duration: float = Field(default_factory=lambda: settings.default_duration, gt=0)
    stroke_width: float = Field(default_factory=lambda: settings.default_stroke_width, gt=0)
    background: str = Field(default_factory=lambda: settings.default_background)
    offset: tuple[float, float] = (0.0, 0.0)
    merge: bool = False
    mode: OutputMode = OutputMode.SVG
    output: Path | None = None

    def output_path(self, source: Path) -> Path:
        """Explicit output, else a name derived from the source file."""
        if self.output is not None:
            return self.output
        if self.mode.is_directory:
            return Path(f"{source}_frames")
        return Path(f"{source}_.{self.mode.value}")
