"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from shapesight.engine.types import ShapeType
from shapesight.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        shape_types=[t.value for t in ShapeType],
    )
