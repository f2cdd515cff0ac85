"""Leaf-node geometry helpers over closed polygons. No engine imports.

Every polygon here is cyclic: the last vertex connects back to the first.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

Point = tuple[int, int]


def _as_array(points: Sequence[Point] | NDArray) -> NDArray[np.float64]:
    return np.asarray(points, dtype=np.float64).reshape(-1, 2)


def signed_area(points: Sequence[Point] | NDArray) -> float:
    """Shoelace formula for signed area. Positive = CCW, Negative = CW (y up)."""
    arr = _as_array(points)
    if len(arr) < 3:
        return 0.0
    x = arr[:, 0]
    y = arr[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def polygon_area(points: Sequence[Point] | NDArray) -> float:
    """Absolute shoelace area."""
    return abs(signed_area(points))


def bounds(points: Sequence[Point] | NDArray) -> tuple[int, int, int, int]:
    """Inclusive pixel extents: (xmin, ymin, width, height), width/height ≥ 1."""
    arr = np.asarray(points).reshape(-1, 2)
    if len(arr) == 0:
        return (0, 0, 0, 0)
    xmin, ymin = (int(v) for v in arr.min(axis=0))
    xmax, ymax = (int(v) for v in arr.max(axis=0))
    return (xmin, ymin, xmax - xmin + 1, ymax - ymin + 1)


def edge_lengths(points: Sequence[Point] | NDArray) -> NDArray[np.float64]:
    """Length of each edge i → i+1, wrapping around."""
    arr = _as_array(points)
    if len(arr) == 0:
        return np.empty(0)
    diffs = np.roll(arr, -1, axis=0) - arr
    return np.sqrt(np.sum(diffs**2, axis=1))


def perimeter(points: Sequence[Point] | NDArray) -> float:
    return float(np.sum(edge_lengths(points)))


def vertex_angles(points: Sequence[Point] | NDArray) -> NDArray[np.float64]:
    """Angle in degrees at each vertex between the edges to its two neighbors.

    The cosine is clamped to [-1, 1] before arccos. A vertex with a
    zero-length adjacent edge has no defined angle and gets NaN.
    """
    arr = _as_array(points)
    if len(arr) == 0:
        return np.empty(0)

    v1 = np.roll(arr, 1, axis=0) - arr
    v2 = np.roll(arr, -1, axis=0) - arr
    dot = np.sum(v1 * v2, axis=1)
    mags = np.linalg.norm(v1, axis=1) * np.linalg.norm(v2, axis=1)

    cos = np.full(len(arr), np.nan)
    np.divide(dot, mags, out=cos, where=mags > 0)
    return np.degrees(np.arccos(np.clip(cos, -1.0, 1.0)))
