"""
Application settings.

Values come from defaults, then a ``.env`` file, then ``WINTER_WEATHER_*``
environment variables (highest priority).
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the dashboard build."""

    model_config = SettingsConfigDict(
        env_prefix="WINTER_WEATHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "winter-weather"
    app_env: str = "development"
    debug: bool = False

    data_dir: Path = Path("data")

    # Location the sample fixtures describe
    location_name: str = "Porto"
    lat: float = Field(default=41.15, ge=-90, le=90)
    lon: float = Field(default=-8.61, ge=-180, le=180)

    smoothing_window: int = Field(default=7, ge=1)
    default_lang: str = "en"

    api_port: int = 8000

    @field_validator("smoothing_window")
    @classmethod
    def _odd_window(cls, value: int) -> int:
        if value % 2 == 0:
            msg = f"smoothing_window must be odd, got {value}"
            raise ValueError(msg)
        return value

    @property
    def site_dir(self) -> Path:
        """Directory the built static site is written to."""
        return self.data_dir / "derived" / "site"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
