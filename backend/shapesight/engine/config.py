"""Detector configuration — thresholds for every pipeline stage."""

from __future__ import annotations

from dataclasses import dataclass

from shapesight.engine.errors import ConfigError

BOUNDARY_STRATEGIES = ("trace", "nearest")


@dataclass
class DetectorConfig:
    """Controls binarization, noise filtering, simplification and classification."""

    # Binarization: gray = (R+G+B)/3, dark when gray < threshold
    threshold: int = 128

    # Components with this many pixels or fewer are noise
    min_component_pixels: int = 10

    # Boundary ordering: "trace" (Moore-neighbor) or "nearest" (greedy chain)
    boundary_strategy: str = "trace"

    # Douglas-Peucker tolerance in pixels
    rdp_epsilon: float = 2.0

    # Shape classification thresholds
    circularity_threshold: float = 0.85
    circle_min_vertices: int = 8
    triangle_min_angle: float = 20.0
    triangle_max_angle: float = 160.0
    right_angle_tolerance: float = 30.0
    min_right_angles: int = 2
    pentagon_regularity: float = 0.3  # edge std / mean
    star_angle_jump: float = 30.0

    def __post_init__(self) -> None:
        if self.boundary_strategy not in BOUNDARY_STRATEGIES:
            raise ConfigError(
                f"Unknown boundary strategy {self.boundary_strategy!r}; "
                f"expected one of {', '.join(BOUNDARY_STRATEGIES)}"
            )
        if self.rdp_epsilon < 0:
            raise ConfigError(f"rdp_epsilon must be non-negative, got {self.rdp_epsilon}")
        if self.min_component_pixels < 0:
            raise ConfigError(
                f"min_component_pixels must be non-negative, got {self.min_component_pixels}"
            )
