"""Binarizer — RGBA pixel buffer to dark/light mask."""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from shapesight.engine.errors import InvalidImageError

# 8-bit RGBA: four samples per pixel
_CHANNELS = 4


def as_rgba_array(pixels: Any, width: int, height: int) -> NDArray[np.uint8]:
    """View a caller-owned RGBA buffer as a (height, width, 4) uint8 array.

    Accepts bytes-like objects, flat int sequences or numpy arrays. The
    caller's buffer is never written to.
    """
    if width <= 0 or height <= 0:
        raise InvalidImageError(f"Image dimensions must be positive, got {width}×{height}")

    if isinstance(pixels, (bytes, bytearray, memoryview)):
        flat = np.frombuffer(pixels, dtype=np.uint8)
    else:
        flat = np.asarray(pixels)
        if flat.dtype != np.uint8:
            flat = flat.astype(np.uint8)
        flat = flat.reshape(-1)

    expected = width * height * _CHANNELS
    if flat.size != expected:
        raise InvalidImageError(
            f"Pixel buffer has {flat.size} samples, expected {expected} "
            f"for a {width}×{height} RGBA image"
        )
    return flat.reshape(height, width, _CHANNELS)


def binarize(pixels: Any, width: int, height: int, threshold: int = 128) -> NDArray[np.bool_]:
    """Return a (height, width) mask, True where (R+G+B)/3 < threshold.

    Alpha is ignored. Compared as R+G+B < 3·threshold to stay in integers.
    """
    rgba = as_rgba_array(pixels, width, height)
    total = rgba[..., :3].astype(np.uint16).sum(axis=2)
    return total < 3 * threshold
