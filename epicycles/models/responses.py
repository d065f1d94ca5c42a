"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    env: str = "development"


class Coefficient(BaseModel):
    frequency: int
    x: float
    y: float
    magnitude: float


class TransformResponse(BaseModel):
    depth: int
    coefficients: list[Coefficient] = Field(default_factory=list)
    processing_time_ms: float = 0.0


class ReconstructResponse(BaseModel):
    t: float
    position: tuple[float, float]
    arms: list[tuple[float, float]] = Field(default_factory=list)
