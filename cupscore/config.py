"""Configuration helpers for the scoring server."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_DIR = Path("data/cupscore")


class _Settings(BaseSettings):
    data_dir: Path = Field(default=DEFAULT_DATA_DIR, alias="CUPSCORE_DATA_DIR")
    stroke_index_path: Optional[Path] = Field(
        default=None, alias="CUPSCORE_STROKE_INDEX_PATH"
    )
    min_hole_score: int = Field(default=1, alias="CUPSCORE_MIN_HOLE_SCORE")
    max_hole_score: int = Field(default=20, alias="CUPSCORE_MAX_HOLE_SCORE")
    cors_allow_origins: str = Field(
        default="http://localhost,http://127.0.0.1", alias="CORS_ALLOW_ORIGINS"
    )

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]


@lru_cache(maxsize=1)
def get_settings() -> _Settings:
    """Return cached application settings."""

    return _Settings()  # type: ignore[call-arg]


def reset_settings_cache() -> None:
    """Clear cached settings (primarily for tests)."""

    get_settings.cache_clear()


__all__ = ["DEFAULT_DATA_DIR", "get_settings", "reset_settings_cache"]
