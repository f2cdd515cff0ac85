"""Contour simplification — Ramer-Douglas-Peucker with segment distance. No engine imports."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

Point = tuple[int, int]


def point_segment_distance(
    point: tuple[float, float],
    start: tuple[float, float],
    end: tuple[float, float],
) -> float:
    """Distance from point to the segment start-end.

    The projection parameter is clamped to [0, 1]; a zero-length segment
    measures distance to ``start``.
    """
    a = point[0] - start[0]
    b = point[1] - start[1]
    c = end[0] - start[0]
    d = end[1] - start[1]

    len_sq = c * c + d * d
    t = (a * c + b * d) / len_sq if len_sq != 0 else -1.0

    if t < 0:
        xx, yy = start
    elif t > 1:
        xx, yy = end
    else:
        xx, yy = start[0] + t * c, start[1] + t * d

    return math.hypot(point[0] - xx, point[1] - yy)


def segment_distances(
    points: NDArray[np.float64],
    start: NDArray[np.float64],
    end: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Vectorized point_segment_distance over an Nx2 array."""
    line_vec = end - start
    len_sq = float(np.dot(line_vec, line_vec))
    vecs = points - start

    if len_sq == 0:
        return np.linalg.norm(vecs, axis=1)

    t = np.clip(vecs @ line_vec / len_sq, 0.0, 1.0)
    closest = start + np.outer(t, line_vec)
    return np.linalg.norm(points - closest, axis=1)


def rdp_simplify(points: Sequence[Point], epsilon: float = 2.0) -> list[Point]:
    """Ramer-Douglas-Peucker simplification of an ordered point sequence.

    Sequences of two points or fewer come back unchanged. Runs on an explicit
    work-list of index ranges, so very long near-linear contours cannot hit
    the recursion limit; the kept vertices match the recursive formulation.
    """
    n = len(points)
    if n <= 2:
        return list(points)

    arr = np.asarray(points, dtype=np.float64)
    keep = np.zeros(n, dtype=bool)
    keep[0] = keep[-1] = True

    work = [(0, n - 1)]
    while work:
        first, last = work.pop()
        if last - first < 2:
            continue

        distances = segment_distances(arr[first + 1 : last], arr[first], arr[last])
        offset = int(np.argmax(distances))
        if distances[offset] > epsilon:
            split = first + 1 + offset
            keep[split] = True
            work.append((split, last))
            work.append((first, split))

    return [points[int(i)] for i in np.flatnonzero(keep)]
