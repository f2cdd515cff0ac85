"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from shapesight.engine.types import DetectionResult


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    shape_types: list[str] = Field(default_factory=list)


class BoundingBoxModel(BaseModel):
    x: int
    y: int
    width: int
    height: int


class PointModel(BaseModel):
    x: float
    y: float


class DetectedShapeModel(BaseModel):
    type: str
    confidence: float = Field(ge=0.0, le=1.0)
    bounding_box: BoundingBoxModel
    center: PointModel
    area: float


class DetectResponse(BaseModel):
    shapes: list[DetectedShapeModel] = Field(default_factory=list)
    processing_time_ms: float = 0.0
    image_width: int = 0
    image_height: int = 0
    shape_count: int = 0
    summary: str = ""

    @classmethod
    def from_result(cls, result: DetectionResult, summary: str = "") -> "DetectResponse":
        shapes = [
            DetectedShapeModel(
                type=s.type.value,
                confidence=s.confidence,
                bounding_box=BoundingBoxModel(
                    x=s.bounding_box.x,
                    y=s.bounding_box.y,
                    width=s.bounding_box.width,
                    height=s.bounding_box.height,
                ),
                center=PointModel(x=s.center[0], y=s.center[1]),
                area=s.area,
            )
            for s in result.shapes
        ]
        return cls(
            shapes=shapes,
            processing_time_ms=round(result.processing_time_ms, 1),
            image_width=result.image_width,
            image_height=result.image_height,
            shape_count=len(shapes),
            summary=summary,
        )
