"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    epicycles_env: str = "development"
    epicycles_log_level: str = "info"

    # Transform / animation defaults
    default_depth: int = 100
    default_frames: int = 600
    default_duration: float = 10.0  # seconds per full period

    # SVG styling
    default_stroke_width: float = 1.5
    default_background: str = "none"

    # Max chord length when flattening curves, in SVG user units
    curve_step: float = 1.0

    # Frame directory modes
    render_workers: int = 4
    png_scale: float = 1.0

    # HTTP API
    max_depth: int = 10_000
    max_frames: int = 10_000
    cors_origins: list[str] = []

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
