"""Library configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = "info"

    # Square raster size used when the caller gives none
    preview_size: int = 100

    # Intrinsic width/height when the document omits them
    default_intrinsic_size: float = 100.0

    model_config = {"env_prefix": "VECTORVIEW_"}


settings = Settings()
