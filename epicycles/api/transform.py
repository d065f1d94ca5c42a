"""POST /api/transform and /api/reconstruct: direct access to the numeric core."""

from __future__ import annotations

import time

from fastapi import APIRouter
from fastapi.concurrency import run_in_threadpool

from epicycles.core.reconstruct import arm_chain, reconstruct
from epicycles.core.transform import transform
from epicycles.models.requests import ReconstructRequest, TransformRequest
from epicycles.models.responses import Coefficient, ReconstructResponse, TransformResponse

router = APIRouter()


@router.post("/transform", response_model=TransformResponse)
async def transform_points(req: TransformRequest) -> TransformResponse:
    start = time.perf_counter()
    table = await run_in_threadpool(transform, req.points, req.depth)
    return TransformResponse(
        depth=table.depth,
        coefficients=[Coefficient(**c) for c in table.to_list()],
        processing_time_ms=(time.perf_counter() - start) * 1000,
    )


def _sample(req: ReconstructRequest) -> ReconstructResponse:
    table = transform(req.points, req.depth)
    return ReconstructResponse(
        t=req.t,
        position=reconstruct(table, req.t).as_tuple(),
        arms=[p.as_tuple() for p in arm_chain(table, req.t)],
    )


@router.post("/reconstruct", response_model=ReconstructResponse)
async def reconstruct_points(req: ReconstructRequest) -> ReconstructResponse:
    return await run_in_threadpool(_sample, req)
