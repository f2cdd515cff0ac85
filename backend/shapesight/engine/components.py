"""Component extractor — 8-connected flood fill with boundary classification."""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from shapesight.engine.boundary import order_boundary
from shapesight.engine.types import Component, Contour

logger = logging.getLogger(__name__)

# 8-connectivity, row by row: (dx, dy)
_NEIGHBORS_8 = [(dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if dx or dy]


def extract_components(mask: NDArray[np.bool_], min_pixels: int = 10) -> list[Component]:
    """Raster-scan the mask and flood-fill every unvisited dark pixel.

    Components with ``min_pixels`` pixels or fewer are dropped as noise.
    Each pixel ends up in at most one component.
    """
    height, width = mask.shape
    visited = np.zeros((height, width), dtype=bool)
    components: list[Component] = []
    dropped = 0

    for y in range(height):
        for x in range(width):
            if mask[y, x] and not visited[y, x]:
                component = _flood_fill(mask, visited, x, y)
                if len(component) > min_pixels:
                    components.append(component)
                else:
                    dropped += 1

    logger.debug("Extracted %d components (%d dropped as noise)", len(components), dropped)
    return components


def _flood_fill(
    mask: NDArray[np.bool_],
    visited: NDArray[np.bool_],
    start_x: int,
    start_y: int,
) -> Component:
    """Explicit-stack flood fill collecting all pixels and the boundary subset."""
    height, width = mask.shape
    component = Component()
    stack = [(start_x, start_y)]

    while stack:
        x, y = stack.pop()
        if x < 0 or x >= width or y < 0 or y >= height:
            continue
        if visited[y, x] or not mask[y, x]:
            continue

        visited[y, x] = True
        component.pixels.append((x, y))
        if _is_boundary(mask, x, y):
            component.boundary.append((x, y))

        for dx, dy in _NEIGHBORS_8:
            stack.append((x + dx, y + dy))

    return component


def _is_boundary(mask: NDArray[np.bool_], x: int, y: int) -> bool:
    """A dark pixel touching a light pixel or the image edge (8-neighborhood)."""
    height, width = mask.shape
    for dx, dy in _NEIGHBORS_8:
        nx, ny = x + dx, y + dy
        if nx < 0 or nx >= width or ny < 0 or ny >= height:
            return True
        if not mask[ny, nx]:
            return True
    return False


def find_contours(
    mask: NDArray[np.bool_],
    min_pixels: int = 10,
    strategy: str = "trace",
) -> list[Contour]:
    """One ordered contour per surviving component, in raster-scan order.

    Falls back to the raw pixel list for a component without boundary pixels.
    """
    contours: list[Contour] = []
    for component in extract_components(mask, min_pixels):
        if component.boundary:
            contours.append(order_boundary(component, strategy))
        else:
            contours.append(list(component.pixels))
    return contours
