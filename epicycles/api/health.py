"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from epicycles import __version__
from epicycles.config import Settings
from epicycles.dependencies import get_settings
from epicycles.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(cfg: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(status="ok", version=__version__, env=cfg.epicycles_env)
