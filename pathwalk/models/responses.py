"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class LengthResponse(BaseModel):
    length: float
    segment_count: int = 0


class PointAtLengthResponse(BaseModel):
    x: float
    y: float
    success: bool
    segment_index: int = 0


class NormalAngleResponse(BaseModel):
    angle: float = Field(..., description="Tangent direction in degrees, atan2 convention")
    success: bool
    segment_index: int = 0


class SampleResponse(BaseModel):
    length: float
    points: list[tuple[float, float]] = Field(default_factory=list)
