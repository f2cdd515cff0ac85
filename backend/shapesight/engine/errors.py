"""Exception hierarchy for the detection engine and its collaborators."""

from __future__ import annotations


class ShapeSightError(Exception):
    """Base class for all ShapeSight errors."""


class InvalidImageError(ShapeSightError, ValueError):
    """Pixel buffer does not match the declared dimensions."""


class ImageDecodeError(ShapeSightError, ValueError):
    """Encoded image or SVG could not be turned into a pixel buffer."""


class ConfigError(ShapeSightError, ValueError):
    """Detector configuration is not usable."""
