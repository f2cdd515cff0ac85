"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class DetectRequest(BaseModel):
    image_base64: str | None = Field(
        default=None,
        description="Base64-encoded raster image (PNG, JPEG, ...)",
    )
    svg: str | None = Field(default=None, description="Raw SVG code, rasterized before detection")
    size: int | None = Field(
        default=None,
        gt=0,
        description="Raster width/height for SVG input",
    )
    boundary_strategy: str | None = Field(
        default=None,
        description="Override boundary ordering: 'trace' or 'nearest'",
    )

    @model_validator(mode="after")
    def _exactly_one_source(self) -> "DetectRequest":
        if (self.image_base64 is None) == (self.svg is None):
            raise ValueError("Provide exactly one of image_base64 or svg")
        return self
