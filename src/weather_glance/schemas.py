"""
Domain models for weather-glance.

Pydantic models for data from external APIs and internal processing.
These define the canonical schema - datasources normalize API responses to these.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, Field

# =============================================================================
# Location & preferences
# =============================================================================


class Location(BaseModel):
    """A named geographic point."""

    name: str
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)
    country: str | None = None


class Theme(StrEnum):
    """Dashboard color theme."""

    DARK = "dark"
    LIGHT = "light"


class Preferences(BaseModel):
    """User preferences persisted between runs."""

    theme: Theme = Theme.DARK
    location: Location | None = None


# =============================================================================
# Forecast
# =============================================================================


class ForecastSample(BaseModel):
    """One 3-hour forecast step from the OpenWeatherMap forecast endpoint."""

    model_config = {"frozen": True}

    timestamp: int = Field(..., description="Unix epoch seconds (UTC)")
    temperature: float
    feels_like: float
    weather_code: int
    precipitation_probability: float | None = Field(default=None, ge=0, le=1)
    wind_speed: float = 0.0
    wind_degrees: float = 0.0
    humidity: float | None = None
    description: str = ""
    icon: str = ""


class DailySummary(BaseModel):
    """Forecast samples of one calendar day collapsed into a single record."""

    date_key: str = Field(..., description="UTC calendar date, YYYY-MM-DD")
    representative_timestamp: int
    temperature_min: float
    temperature_max: float
    dominant_weather_code: int
    mean_precipitation_probability: float = Field(..., ge=0, le=1)
    dominant_description: str = ""
    dominant_icon: str = ""


# =============================================================================
# Current conditions
# =============================================================================


class CurrentConditions(BaseModel):
    """Current weather at a location, normalized from ``/data/2.5/weather``."""

    timestamp: int
    temperature: float
    feels_like: float
    temp_min: float
    temp_max: float
    humidity: float
    pressure: float
    visibility_m: float | None = None
    wind_speed: float = 0.0
    wind_degrees: float = 0.0
    weather_code: int
    description: str = ""
    icon: str = ""
    sunrise: int
    sunset: int
    timezone_offset: int = Field(default=0, description="Seconds east of UTC")


# =============================================================================
# Air quality
# =============================================================================


class AirQualityReading(BaseModel):
    """AQI and pollutant concentrations (µg/m³) for one refresh cycle."""

    index: int
    pollutants: dict[str, float] = Field(default_factory=dict)
    simulated: bool = False
    station: str | None = None


# =============================================================================
# Dashboard snapshot
# =============================================================================


class DashboardSnapshot(BaseModel):
    """Everything the renderers need for one dashboard refresh."""

    location: Location
    fetched_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    current: CurrentConditions
    samples: list[ForecastSample] = Field(default_factory=list)
    daily: list[DailySummary] = Field(default_factory=list)
    air_quality: AirQualityReading
    demo: bool = False

