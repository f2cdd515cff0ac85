"""Shape classifier — geometric descriptors and the labeling decision tree.

Rules are evaluated in fixed order, first match wins (n = vertex count of
the simplified polygon):

  1. circularity > 0.85 and n ≥ 8          → circle
  2. n == 3, or 3 ≤ n ≤ 5 and triangle test → triangle
  3. n == 4, or 4 ≤ n ≤ 6 and rectangle test → rectangle
  4. n == 5, or 5 ≤ n ≤ 7 and pentagon test  → pentagon
  5. 8 ≤ n ≤ 12 and star test               → star
  6. 6 ≤ n ≤ 8                              → pentagon (closest guess)
  7. otherwise                              → not classifiable

The vertex-count ranges overlap on purpose; reordering the rules changes
which label many contours receive.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from shapesight.engine.config import DetectorConfig
from shapesight.engine.types import BoundingBox, DetectedShape, Point, ShapeType
from shapesight.utils.geometry import bounds, edge_lengths, polygon_area, vertex_angles
from shapesight.utils.math_helpers import circularity, coefficient_of_variation

_DEFAULT_CONFIG = DetectorConfig()


@dataclass
class ShapeDescriptors:
    """Measurements of one contour and its simplified polygon."""

    vertex_count: int
    bounding_box: BoundingBox
    center: tuple[float, float]
    area: float                            # from the original contour
    perimeter: float                       # from the simplified polygon
    circularity: float
    angles: NDArray[np.float64]            # degrees, one per vertex
    edge_lengths: NDArray[np.float64]

    @property
    def edge_cv(self) -> float:
        return coefficient_of_variation(self.edge_lengths)


def describe_shape(simplified: Sequence[Point], contour: Sequence[Point]) -> ShapeDescriptors:
    """Compute descriptors; area and bounds come from the original contour."""
    x, y, width, height = bounds(contour)
    box = BoundingBox(x=x, y=y, width=width, height=height)
    center = (x + width / 2, y + height / 2)

    area = polygon_area(contour)
    edges = edge_lengths(simplified)
    perim = float(np.sum(edges))

    return ShapeDescriptors(
        vertex_count=len(simplified),
        bounding_box=box,
        center=center,
        area=area,
        perimeter=perim,
        circularity=circularity(area, perim),
        angles=vertex_angles(simplified),
        edge_lengths=edges,
    )


def is_triangle(d: ShapeDescriptors, config: DetectorConfig = _DEFAULT_CONFIG) -> bool:
    """Exactly three vertices, every angle strictly inside (20°, 160°)."""
    if d.vertex_count != 3:
        return False
    return bool(
        np.all(d.angles > config.triangle_min_angle)
        and np.all(d.angles < config.triangle_max_angle)
    )


def is_rectangle(d: ShapeDescriptors, config: DetectorConfig = _DEFAULT_CONFIG) -> bool:
    """At least two vertex angles within 30° of a right angle."""
    if d.vertex_count < 4:
        return False
    right_angles = int(np.sum(np.abs(d.angles - 90.0) < config.right_angle_tolerance))
    return right_angles >= config.min_right_angles


def is_pentagon(d: ShapeDescriptors, config: DetectorConfig = _DEFAULT_CONFIG) -> bool:
    """Near-regular: edge length std/mean below 0.3."""
    if d.vertex_count < 5:
        return False
    return d.edge_cv < config.pentagon_regularity


def is_star(d: ShapeDescriptors, config: DetectorConfig = _DEFAULT_CONFIG) -> bool:
    """Alternating tips and notches: many adjacent angle pairs differ by > 30°.

    Pairs are taken along the vertex list without wrapping around.
    """
    if d.vertex_count < 8:
        return False
    jumps = int(np.sum(np.abs(np.diff(d.angles)) > config.star_angle_jump))
    return jumps >= d.vertex_count / 2


def label_shape(
    d: ShapeDescriptors,
    config: DetectorConfig = _DEFAULT_CONFIG,
) -> tuple[ShapeType, float] | None:
    """Run the decision tree; returns (type, unclamped confidence) or None."""
    n = d.vertex_count

    if d.circularity > config.circularity_threshold and n >= config.circle_min_vertices:
        return ShapeType.CIRCLE, min(0.95, 0.7 + d.circularity * 0.25)
    if n == 3 or (3 <= n <= 5 and is_triangle(d, config)):
        return ShapeType.TRIANGLE, 0.85 + (0.1 if n == 3 else -0.1)
    if n == 4 or (4 <= n <= 6 and is_rectangle(d, config)):
        return ShapeType.RECTANGLE, 0.9 + (0.08 if n == 4 else -0.1)
    if n == 5 or (5 <= n <= 7 and is_pentagon(d, config)):
        return ShapeType.PENTAGON, 0.85 + (0.1 if n == 5 else -0.1)
    if 8 <= n <= 12 and is_star(d, config):
        return ShapeType.STAR, 0.8
    if 6 <= n <= 8:
        return ShapeType.PENTAGON, 0.75
    return None


def classify_shape(
    simplified: Sequence[Point],
    contour: Sequence[Point],
    config: DetectorConfig = _DEFAULT_CONFIG,
) -> DetectedShape | None:
    """Classify one simplified polygon; None means the contour is skipped."""
    if len(simplified) < 3:
        return None

    d = describe_shape(simplified, contour)
    labeled = label_shape(d, config)
    if labeled is None:
        return None

    shape_type, confidence = labeled
    return DetectedShape(
        type=shape_type,
        confidence=min(1.0, max(0.0, confidence)),
        bounding_box=d.bounding_box,
        center=d.center,
        area=d.area,
    )
