"""Detection pipeline — binarize, extract, order, simplify, classify."""

from __future__ import annotations

import logging
import time
from typing import Any

from shapesight.engine.binarize import binarize
from shapesight.engine.classifier import classify_shape
from shapesight.engine.components import find_contours
from shapesight.engine.config import DetectorConfig
from shapesight.engine.types import DetectedShape, DetectionResult
from shapesight.utils.contour import rdp_simplify

logger = logging.getLogger(__name__)


def detect(
    pixels: Any,
    width: int,
    height: int,
    config: DetectorConfig | None = None,
) -> DetectionResult:
    """Detect shapes in an RGBA pixel buffer of ``width × height × 4`` samples.

    Raises InvalidImageError when the buffer does not match the dimensions.
    Contours that are too small or match no rule are left out of the result.
    """
    config = config or DetectorConfig()
    start = time.perf_counter()

    mask = binarize(pixels, width, height, config.threshold)
    contours = find_contours(mask, config.min_component_pixels, config.boundary_strategy)

    shapes: list[DetectedShape] = []
    degenerate = 0
    unclassified = 0
    for contour in contours:
        if len(contour) < 3:
            degenerate += 1
            continue

        simplified = rdp_simplify(contour, config.rdp_epsilon)
        if len(simplified) < 3:
            degenerate += 1
            continue

        shape = classify_shape(simplified, contour, config)
        if shape is None:
            unclassified += 1
            continue
        shapes.append(shape)

    elapsed = (time.perf_counter() - start) * 1000
    logger.debug(
        "Contours: %d total, %d degenerate, %d unclassified",
        len(contours),
        degenerate,
        unclassified,
    )
    logger.info("Detected %d shapes in %d×%d image in %.1fms", len(shapes), width, height, elapsed)

    return DetectionResult(
        shapes=tuple(shapes),
        processing_time_ms=elapsed,
        image_width=width,
        image_height=height,
    )
