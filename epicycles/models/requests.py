"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from epicycles.config import settings


class TransformRequest(BaseModel):
    points: list[tuple[float, float]] = Field(..., min_length=2, description="Polyline vertices in order")
    depth: int = Field(default=10, ge=0, le=settings.max_depth, description="Highest frequency magnitude to extract")


class ReconstructRequest(TransformRequest):
    t: float = Field(default=0.0, description="Sample time; period is 1")


class AnimateRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    depth: int = Field(default_factory=lambda: settings.default_depth, ge=0, le=settings.max_depth)
    frames: int = Field(default_factory=lambda: settings.default_frames, ge=1, le=settings.max_frames)
    duration: float = Field(default_factory=lambda: settings.default_duration, gt=0)
    stroke_width: float = Field(default_factory=lambda: settings.default_stroke_width, gt=0)
    background: str = Field(default_factory=lambda: settings.default_background)
    offset: tuple[float, float] = (0.0, 0.0)
    merge: bool = Field(default=False, description="Concatenate every path in the document")
