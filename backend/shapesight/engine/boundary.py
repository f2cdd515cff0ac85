"""Boundary orderer — turn a component's boundary pixels into an ordered contour.

Two strategies share one contract (component in, ordered Point list out):

  trace    Moore-neighbor tracing of the outer boundary, Jacob's stopping
           criterion, revisits dropped. Walks in 8-connectivity order, O(n).
  nearest  Greedy nearest-neighbor chain over the boundary set: nearest
           remaining pixel within Manhattan distance 2, else the globally
           nearest by Euclidean distance. O(n²), no simplicity guarantee.
"""

from __future__ import annotations

import math

from shapesight.engine.errors import ConfigError
from shapesight.engine.types import Component, Contour, Point

# Moore neighborhood, clockwise on screen (y grows downward), starting West
_MOORE = [(-1, 0), (-1, -1), (0, -1), (1, -1), (1, 0), (1, 1), (0, 1), (-1, 1)]
_MOORE_INDEX = {offset: i for i, offset in enumerate(_MOORE)}

# Greedy chain: only pixels this close (Manhattan) count as "adjacent"
_NEAR_MANHATTAN = 2


def order_boundary(component: Component, strategy: str = "trace") -> Contour:
    """Order a component's boundary pixels into a contour."""
    if not component.boundary:
        return list(component.pixels)
    if strategy == "trace":
        return trace_boundary(component.pixels)
    if strategy == "nearest":
        return nearest_neighbor_chain(component.boundary)
    raise ConfigError(f"Unknown boundary strategy {strategy!r}")


def trace_boundary(pixels: list[Point]) -> Contour:
    """Moore-neighbor trace of the outer boundary of an 8-connected pixel set.

    Starts at the top-most, then left-most pixel, whose West neighbor is
    guaranteed to lie outside the set. Stops when the first move out of the
    start pixel is about to repeat. Revisited pixels are dropped, so the
    result lists every outer boundary pixel once, in first-visit order.
    """
    if not pixels:
        return []

    region = set(pixels)
    start = min(pixels, key=lambda p: (p[1], p[0]))
    contour: Contour = [start]

    current = start
    backtrack = 0  # index into _MOORE of the last outside neighbor
    first_move: tuple[Point, Point] | None = None
    # Each pixel is entered at most once per adjacent background side
    max_steps = 4 * len(region) + 8

    for _ in range(max_steps):
        nxt: Point | None = None
        for k in range(1, 9):
            d = (backtrack + k) % 8
            dx, dy = _MOORE[d]
            candidate = (current[0] + dx, current[1] + dy)
            if candidate in region:
                pdx, pdy = _MOORE[(d - 1) % 8]
                outside = (current[0] + pdx, current[1] + pdy)
                nxt = candidate
                backtrack = _MOORE_INDEX[(outside[0] - nxt[0], outside[1] - nxt[1])]
                break

        if nxt is None:
            # Isolated pixel
            break

        move = (current, nxt)
        if first_move is None:
            first_move = move
        elif move == first_move:
            break

        contour.append(nxt)
        current = nxt

    # One-pixel-wide strokes and spurs are walked out and back; keep each
    # pixel at its first visit so they collapse to a plain path
    return list(dict.fromkeys(contour))


def nearest_neighbor_chain(boundary: list[Point]) -> Contour:
    """Greedy chain through the boundary set starting at its first pixel."""
    if not boundary:
        return []

    ordered: Contour = [boundary[0]]
    # dict keeps insertion order, so ties resolve to the earliest pixel
    remaining = dict.fromkeys(boundary[1:])
    remaining.pop(boundary[0], None)
    current = boundary[0]

    while remaining:
        nearest: Point | None = None
        min_dist = math.inf

        for p in remaining:
            dist = abs(p[0] - current[0]) + abs(p[1] - current[1])
            if dist < min_dist and dist <= _NEAR_MANHATTAN:
                min_dist = dist
                nearest = p

        if nearest is None:
            for p in remaining:
                dist = math.hypot(p[0] - current[0], p[1] - current[1])
                if dist < min_dist:
                    min_dist = dist
                    nearest = p

        if nearest is None:
            break

        ordered.append(nearest)
        del remaining[nearest]
        current = nearest

    return ordered
