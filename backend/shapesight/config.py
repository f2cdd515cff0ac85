"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from shapesight.engine.config import DetectorConfig


class Settings(BaseSettings):
    shapesight_env: str = "development"
    shapesight_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Detection
    boundary_strategy: str = "trace"
    max_image_pixels: int = 16_777_216
    default_svg_size: int = 256

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def detector_config(self) -> DetectorConfig:
        return DetectorConfig(boundary_strategy=self.boundary_strategy)


settings = Settings()
