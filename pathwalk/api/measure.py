"""POST /api/length, /api/point-at-length, /api/normal-angle-at-length, /api/sample."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from pathwalk.config import Settings
from pathwalk.dependencies import get_settings
from pathwalk.models.requests import AtLengthRequest, LengthRequest, SampleRequest
from pathwalk.models.responses import (
    LengthResponse,
    NormalAngleResponse,
    PointAtLengthResponse,
    SampleResponse,
)
from pathwalk.svg.parser import PathDataError, parse_path_data
from pathwalk.traversal import Path, TraversalAction, TraversalState, traverse

logger = logging.getLogger(__name__)

router = APIRouter()


def _parse(d: str) -> Path:
    try:
        return parse_path_data(d)
    except PathDataError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


def _tolerance(req: LengthRequest, settings: Settings) -> float:
    return req.tolerance if req.tolerance is not None else settings.pathwalk_tolerance


# Sync handlers: FastAPI runs them in its threadpool.


@router.post("/length", response_model=LengthResponse)
def length(req: LengthRequest, settings: Settings = Depends(get_settings)) -> LengthResponse:
    path = _parse(req.d)
    return LengthResponse(length=path.length(_tolerance(req, settings)), segment_count=len(path))


@router.post("/point-at-length", response_model=PointAtLengthResponse)
def point_at_length(req: AtLengthRequest, settings: Settings = Depends(get_settings)) -> PointAtLengthResponse:
    state = traverse(
        _parse(req.d),
        TraversalState(
            TraversalAction.POINT_AT_LENGTH,
            desired_length=req.distance,
            tolerance=_tolerance(req, settings),
        ),
    )
    x, y = state.current
    return PointAtLengthResponse(x=x, y=y, success=state.success, segment_index=state.segment_index)


@router.post("/normal-angle-at-length", response_model=NormalAngleResponse)
def normal_angle_at_length(req: AtLengthRequest, settings: Settings = Depends(get_settings)) -> NormalAngleResponse:
    state = traverse(
        _parse(req.d),
        TraversalState(
            TraversalAction.NORMAL_ANGLE_AT_LENGTH,
            desired_length=req.distance,
            tolerance=_tolerance(req, settings),
        ),
    )
    return NormalAngleResponse(angle=state.normal_angle, success=state.success, segment_index=state.segment_index)


@router.post("/sample", response_model=SampleResponse)
def sample(req: SampleRequest, settings: Settings = Depends(get_settings)) -> SampleResponse:
    if req.count > settings.max_samples:
        raise HTTPException(status_code=422, detail=f"count must be at most {settings.max_samples}")

    path = _parse(req.d)
    tolerance = _tolerance(req, settings)
    points = path.sample_points(req.count, tolerance)
    logger.info("Sampled %d points from a %d-element path", len(points), len(path))
    return SampleResponse(length=path.length(tolerance), points=points)
