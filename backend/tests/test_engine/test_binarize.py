"""Tests for the binarizer."""

from __future__ import annotations

import numpy as np
import pytest

from shapesight.engine.binarize import as_rgba_array, binarize
from shapesight.engine.errors import InvalidImageError
from tests.conftest import blank_image, draw_rect


def test_threshold_boundary():
    # gray 127 is dark, gray 128 is light
    pixels = bytes([127, 127, 127, 255, 128, 128, 128, 255])
    mask = binarize(pixels, 2, 1)
    assert mask.tolist() == [[True, False]]


def test_gray_is_channel_mean():
    # (255 + 0 + 120) / 3 = 125 → dark; (255 + 0 + 130) / 3 = 128.3 → light
    pixels = bytes([255, 0, 120, 255, 255, 0, 130, 255])
    assert binarize(pixels, 2, 1).tolist() == [[True, False]]


def test_alpha_ignored():
    pixels = bytes([0, 0, 0, 0, 255, 255, 255, 0])
    assert binarize(pixels, 2, 1).tolist() == [[True, False]]


def test_mask_shape_and_layout():
    img = draw_rect(blank_image(5, 3), 1, 2, 2, 1)
    mask = binarize(img, 5, 3)
    assert mask.shape == (3, 5)
    assert mask.dtype == bool
    assert np.argwhere(mask).tolist() == [[2, 1], [2, 2]]


def test_accepts_flat_sequences():
    pixels = [0, 0, 0, 255] * 4
    assert binarize(pixels, 2, 2).all()


def test_does_not_modify_input():
    img = blank_image(4, 4)
    before = img.copy()
    binarize(img, 4, 4)
    assert np.array_equal(img, before)


def test_wrong_length_rejected():
    with pytest.raises(InvalidImageError):
        binarize(bytes(10), 2, 2)


@pytest.mark.parametrize("width,height", [(0, 4), (4, 0), (-1, 4)])
def test_non_positive_dimensions_rejected(width, height):
    with pytest.raises(InvalidImageError):
        as_rgba_array(bytes(16), width, height)


def test_invalid_image_is_value_error():
    with pytest.raises(ValueError):
        binarize(bytes(3), 1, 1)
