"""POST /api/animate — animated SVG for an uploaded drawing."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response

from epicycles.errors import EpicycleError
from epicycles.models.options import AnimationOptions
from epicycles.models.requests import AnimateRequest
from epicycles.render import animate_to_string

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/animate")
async def animate(req: AnimateRequest) -> Response:
    options = AnimationOptions(**req.model_dump(exclude={"svg"}))
    try:
        svg = await run_in_threadpool(animate_to_string, req.svg, options)
    except EpicycleError as e:
        logger.warning("Animate failed: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e
    return Response(content=svg, media_type="image/svg+xml")
