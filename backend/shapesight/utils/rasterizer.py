"""Rasterization utilities — encoded images and SVG to RGBA pixel buffers.

These sit outside the detection engine: they produce the pixel buffer the
engine consumes. Transparent areas are flattened onto white, since the
binarizer ignores alpha and fully transparent pixels decode as black.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass

import cairosvg
from PIL import Image, UnidentifiedImageError

from shapesight.engine.errors import ImageDecodeError

logger = logging.getLogger(__name__)

# 4096×4096
_DEFAULT_MAX_PIXELS = 16_777_216


@dataclass(frozen=True)
class RasterImage:
    """RGBA pixel buffer plus its dimensions."""

    pixels: bytes
    width: int
    height: int


def _flatten_rgba(image: Image.Image) -> RasterImage:
    rgba = image.convert("RGBA")
    background = Image.new("RGBA", rgba.size, (255, 255, 255, 255))
    flattened = Image.alpha_composite(background, rgba)
    return RasterImage(pixels=flattened.tobytes(), width=flattened.width, height=flattened.height)


def decode_image(data: bytes, max_pixels: int = _DEFAULT_MAX_PIXELS) -> RasterImage:
    """Decode PNG/JPEG/GIF/BMP/... bytes with Pillow."""
    try:
        image = Image.open(io.BytesIO(data))
        width, height = image.size
        if width * height > max_pixels:
            raise ImageDecodeError(
                f"Image is {width}×{height}, larger than the {max_pixels}-pixel limit"
            )
        image.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise ImageDecodeError(f"Could not decode image: {e}") from e

    logger.debug("Decoded %s image %d×%d", image.format, width, height)
    return _flatten_rgba(image)


def rasterize_svg(svg_code: str, size: int = 256, max_pixels: int = _DEFAULT_MAX_PIXELS) -> RasterImage:
    """Rasterize SVG to a size×size RGBA buffer using CairoSVG."""
    if size <= 0:
        raise ImageDecodeError(f"Raster size must be positive, got {size}")
    if size * size > max_pixels:
        raise ImageDecodeError(f"Raster size {size}×{size} exceeds the {max_pixels}-pixel limit")

    raw = svg_code.encode("utf-8") if isinstance(svg_code, str) else svg_code
    try:
        png_data = cairosvg.svg2png(bytestring=raw, output_width=size, output_height=size)
    except Exception as e:
        raise ImageDecodeError(f"Could not render SVG: {e}") from e

    return decode_image(png_data, max_pixels)
