"""Shared test fixtures — synthetic RGBA images built with numpy."""

from __future__ import annotations

import io

import numpy as np
import pytest
from numpy.typing import NDArray
from PIL import Image

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


def blank_image(width: int, height: int) -> NDArray[np.uint8]:
    """White, fully opaque (height, width, 4) image."""
    img = np.empty((height, width, 4), dtype=np.uint8)
    img[...] = WHITE
    return img


def draw_rect(img: NDArray[np.uint8], x: int, y: int, w: int, h: int, color=BLACK) -> NDArray[np.uint8]:
    img[y : y + h, x : x + w] = color
    return img


def draw_disk(img: NDArray[np.uint8], cx: int, cy: int, r: int, color=BLACK) -> NDArray[np.uint8]:
    height, width = img.shape[:2]
    yy, xx = np.mgrid[0:height, 0:width]
    img[(xx - cx) ** 2 + (yy - cy) ** 2 <= r * r] = color
    return img


def square_image(size: int = 100, side: int = 30) -> NDArray[np.uint8]:
    """Solid black square of the given side centered in a white image."""
    offset = (size - side) // 2
    return draw_rect(blank_image(size, size), offset, offset, side, side)


def disk_image(size: int = 100, radius: int = 20) -> NDArray[np.uint8]:
    return draw_disk(blank_image(size, size), size // 2, size // 2, radius)


def to_png(img: NDArray[np.uint8]) -> bytes:
    buf = io.BytesIO()
    Image.fromarray(img).save(buf, format="PNG")
    return buf.getvalue()


def square_mask(size: int, x: int, y: int, side: int) -> NDArray[np.bool_]:
    mask = np.zeros((size, size), dtype=bool)
    mask[y : y + side, x : x + side] = True
    return mask


def regular_polygon(n: int, radius: float, cx: float = 0.0, cy: float = 0.0) -> list[tuple[int, int]]:
    angles = np.linspace(0, 2 * np.pi, n, endpoint=False)
    return [(int(round(cx + radius * np.cos(a))), int(round(cy + radius * np.sin(a)))) for a in angles]


SVG_SQUARE = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <rect x="30" y="30" width="40" height="40" fill="#000000"/>
</svg>'''


@pytest.fixture
def blank() -> NDArray[np.uint8]:
    return blank_image(64, 48)


@pytest.fixture
def square() -> NDArray[np.uint8]:
    return square_image()


@pytest.fixture
def disk() -> NDArray[np.uint8]:
    return disk_image()


@pytest.fixture
def two_squares() -> NDArray[np.uint8]:
    img = blank_image(160, 80)
    draw_rect(img, 10, 20, 30, 30)
    draw_rect(img, 100, 20, 40, 40)
    return img
