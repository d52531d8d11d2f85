"""
Application settings.

Values come from environment variables prefixed ``WEATHER_GLANCE_`` or from
a ``.env`` file in the working directory, e.g.::

    WEATHER_GLANCE_OPENWEATHER_API_KEY=abc123
    WEATHER_GLANCE_WAQI_API_KEY=def456
    WEATHER_GLANCE_DEFAULT_CITY=Lisbon

Without an OpenWeatherMap key the dashboard runs in demo mode.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_GLANCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "weather-glance"
    app_env: str = "development"
    debug: bool = False

    openweather_api_key: str = ""
    waqi_api_key: str = ""
    units: str = "metric"

    default_city: str = "London"
    lat: float | None = Field(default=None, ge=-90, le=90)
    lon: float | None = Field(default=None, ge=-180, le=180)

    data_dir: Path = Path("data")
    api_port: int = 8000

    @property
    def demo_mode(self) -> bool:
        """True when no OpenWeatherMap key is configured."""
        return not self.openweather_api_key


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (read once)."""
    return Settings()
