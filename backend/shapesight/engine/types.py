"""Value types flowing through the detection pipeline.

Point / Contour are plain tuples and lists so the hot loops in extraction and
simplification stay cheap. Results are frozen dataclasses with a camelCase
``to_dict()`` wire form.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

# (x, y) in image coordinates
Point = tuple[int, int]
Contour = list[Point]


class ShapeType(str, enum.Enum):
    CIRCLE = "circle"
    TRIANGLE = "triangle"
    RECTANGLE = "rectangle"
    PENTAGON = "pentagon"
    STAR = "star"


@dataclass
class Component:
    """One 8-connected region of dark pixels, as found by the flood fill."""

    # Every pixel of the region, in flood-fill visit order
    pixels: list[Point] = field(default_factory=list)
    # Pixels with at least one light or out-of-bounds neighbor
    boundary: list[Point] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.pixels)


@dataclass(frozen=True)
class BoundingBox:
    x: int
    y: int
    width: int
    height: int

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px <= self.x + self.width and self.y <= py <= self.y + self.height

    def to_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class DetectedShape:
    type: ShapeType
    confidence: float                      # 0-1
    bounding_box: BoundingBox
    center: tuple[float, float]            # bbox midpoint (x, y)
    area: float                            # shoelace area of the contour

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "confidence": self.confidence,
            "boundingBox": self.bounding_box.to_dict(),
            "center": {"x": self.center[0], "y": self.center[1]},
            "area": self.area,
        }


@dataclass(frozen=True)
class DetectionResult:
    """Complete output of one detection call."""

    shapes: tuple[DetectedShape, ...]
    processing_time_ms: float
    image_width: int
    image_height: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "shapes": [s.to_dict() for s in self.shapes],
            "processingTime": self.processing_time_ms,
            "imageWidth": self.image_width,
            "imageHeight": self.image_height,
        }
