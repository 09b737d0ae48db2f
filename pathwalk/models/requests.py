"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LengthRequest(BaseModel):
    d: str = Field(..., description="SVG path data")
    tolerance: float | None = Field(
        default=None,
        gt=0,
        description="Flatness tolerance in path units (defaults to the server setting)",
    )


class AtLengthRequest(LengthRequest):
    distance: float = Field(..., ge=0, allow_inf_nan=False, description="Distance along the path")


class SampleRequest(LengthRequest):
    count: int = Field(..., ge=2, description="Number of evenly spaced points, ends included")
