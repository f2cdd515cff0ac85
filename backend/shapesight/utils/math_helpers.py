"""Math helpers — CV, circularity. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def coefficient_of_variation(values: NDArray[np.float64]) -> float:
    """CV = std / mean (population std). Used for edge regularity."""
    if len(values) == 0:
        return float("inf")
    mean = float(np.mean(values))
    if abs(mean) < 1e-10:
        return float("inf")
    return float(np.std(values) / mean)


def circularity(area: float, perimeter: float) -> float:
    """C = 4π·area/perimeter². Circle = 1.0, 0 for a degenerate perimeter."""
    if perimeter < 1e-10:
        return 0.0
    return 4 * math.pi * area / (perimeter**2)
