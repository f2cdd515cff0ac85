"""Tests for polygon geometry helpers."""

from __future__ import annotations

import math

import numpy as np
import pytest

from shapesight.utils.geometry import (
    bounds,
    edge_lengths,
    perimeter,
    polygon_area,
    signed_area,
    vertex_angles,
)
from shapesight.utils.math_helpers import circularity, coefficient_of_variation

SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10)]


def test_area_is_orientation_independent():
    assert polygon_area(SQUARE) == 100.0
    assert polygon_area(SQUARE[::-1]) == 100.0
    assert signed_area(SQUARE) == -signed_area(SQUARE[::-1])


def test_area_degenerate():
    assert polygon_area([]) == 0.0
    assert polygon_area([(0, 0), (5, 5)]) == 0.0
    assert polygon_area([(0, 0), (5, 5), (10, 10)]) == 0.0


def test_bounds_inclusive():
    assert bounds([(3, 4)]) == (3, 4, 1, 1)
    assert bounds(SQUARE) == (0, 0, 11, 11)


def test_edge_lengths_wrap():
    triangle = [(0, 0), (3, 0), (3, 4)]
    assert edge_lengths(triangle).tolist() == pytest.approx([3.0, 4.0, 5.0])
    assert perimeter(triangle) == pytest.approx(12.0)


def test_vertex_angles_right_triangle():
    triangle = [(0, 0), (3, 0), (3, 4)]
    angles = vertex_angles(triangle)
    assert angles[1] == pytest.approx(90.0)
    assert angles.sum() == pytest.approx(180.0)


def test_vertex_angles_collinear():
    angles = vertex_angles([(0, 0), (5, 0), (10, 0)])
    assert angles[1] == pytest.approx(180.0)
    assert angles[0] == pytest.approx(0.0)


def test_vertex_angles_square():
    assert vertex_angles(SQUARE).tolist() == pytest.approx([90.0] * 4)


def test_coefficient_of_variation():
    assert coefficient_of_variation(np.array([2.0, 2.0, 2.0])) == 0.0
    assert coefficient_of_variation(np.array([1.0, 3.0])) == pytest.approx(0.5)
    assert coefficient_of_variation(np.array([])) == float("inf")


def test_circularity():
    r = 10.0
    assert circularity(math.pi * r * r, 2 * math.pi * r) == pytest.approx(1.0)
    assert circularity(100.0, 40.0) == pytest.approx(math.pi / 4)
    assert circularity(100.0, 0.0) == 0.0
