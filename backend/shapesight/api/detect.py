"""POST /api/detect — shape detection on a raster image or SVG."""

from __future__ import annotations

import asyncio
import base64
import binascii
import functools
import logging

from fastapi import APIRouter, Depends, File, UploadFile

from shapesight.config import Settings
from shapesight.dependencies import get_settings
from shapesight.engine.config import DetectorConfig
from shapesight.engine.detector import detect
from shapesight.engine.errors import ImageDecodeError
from shapesight.engine.summary import summarize
from shapesight.models.requests import DetectRequest
from shapesight.models.responses import DetectResponse
from shapesight.utils.rasterizer import RasterImage, decode_image, rasterize_svg

logger = logging.getLogger(__name__)

router = APIRouter()


async def _run_detection(raster: RasterImage, config: DetectorConfig) -> DetectResponse:
    """Run the synchronous pipeline in a worker thread so the event loop stays free."""
    loop = asyncio.get_running_loop()
    result = await loop.run_in_executor(
        None,
        functools.partial(detect, raster.pixels, raster.width, raster.height, config),
    )
    return DetectResponse.from_result(result, summary=summarize(result))


def _decode_base64(data: str) -> bytes:
    # Accept data URLs as produced by canvas.toDataURL()
    if data.startswith("data:") and "," in data:
        data = data.split(",", 1)[1]
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ImageDecodeError(f"image_base64 is not valid base64: {e}") from e


@router.post("/detect", response_model=DetectResponse)
async def detect_shapes(
    req: DetectRequest,
    settings: Settings = Depends(get_settings),
) -> DetectResponse:
    if req.svg is not None:
        size = req.size or settings.default_svg_size
        raster = rasterize_svg(req.svg, size, settings.max_image_pixels)
    else:
        raster = decode_image(_decode_base64(req.image_base64 or ""), settings.max_image_pixels)

    config = DetectorConfig(boundary_strategy=req.boundary_strategy or settings.boundary_strategy)
    logger.info("Detecting shapes in %d×%d image", raster.width, raster.height)
    return await _run_detection(raster, config)


@router.post("/detect/upload", response_model=DetectResponse)
async def detect_upload(
    file: UploadFile = File(...),
    settings: Settings = Depends(get_settings),
) -> DetectResponse:
    data = await file.read()
    raster = decode_image(data, settings.max_image_pixels)
    logger.info("Detecting shapes in upload %s (%d×%d)", file.filename, raster.width, raster.height)
    return await _run_detection(raster, settings.detector_config())
