"""ShapeSight shape detection engine."""

from shapesight.engine.config import DetectorConfig
from shapesight.engine.detector import detect
from shapesight.engine.errors import ConfigError, ImageDecodeError, InvalidImageError, ShapeSightError
from shapesight.engine.types import BoundingBox, DetectedShape, DetectionResult, ShapeType

__all__ = [
    "detect",
    "DetectorConfig",
    "DetectionResult",
    "DetectedShape",
    "BoundingBox",
    "ShapeType",
    "ShapeSightError",
    "InvalidImageError",
    "ImageDecodeError",
    "ConfigError",
]
