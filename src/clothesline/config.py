"""
Application settings.

Values come from environment variables prefixed with ``CLOTHESLINE_`` or from
a ``.env`` file in the working directory::

    CLOTHESLINE_OPENWEATHER_API_KEY=...
    CLOTHESLINE_DEVICE_BASE_URL=http://192.168.1.40
    CLOTHESLINE_TIMEZONE=Europe/London
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Runtime configuration for the dashboard, device and CLI."""

    model_config = SettingsConfigDict(
        env_prefix="CLOTHESLINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "clothesline"
    app_env: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    # OpenWeatherMap
    openweather_api_key: str = ""
    openweather_base_url: str = "https://api.openweathermap.org/data/2.5"
    units: Literal["metric", "imperial", "standard"] = "metric"
    http_timeout: float = Field(default=10.0, gt=0)

    # Time labels
    timezone: str = "UTC"
    clock: Literal["24h", "12h"] = "24h"

    # Fixed position used instead of IP geolocation when both are set
    lat: float | None = Field(default=None, ge=-90, le=90)
    lon: float | None = Field(default=None, ge=-180, le=180)
    geolocation_timeout: float = Field(default=5.0, gt=0)

    # ESP32 drying-line controller
    device_base_url: str = "http://192.168.230.214"
    device_timeout: float = Field(default=5.0, gt=0)
    device_poll_interval: float = Field(default=10.0, gt=0)

    # Static page output
    site_dir: Path = Path("site")
    api_port: int = 8000


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()


def configure_logging(level: str | int = "INFO") -> None:
    """Configure root logging once for CLI and flow entry points."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # requests/urllib3 are chatty at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)
