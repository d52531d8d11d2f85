"""Band tables that turn measurements into labels and color tokens.

Every table is an ascending tuple of ``ClassificationBand`` records. A value
falls in the first band whose inclusive upper bound is >= the value; anything
past the last finite bound lands in the final (most severe) band. The
functions are total: negative or absurdly large inputs degrade to the nearest
end of the table instead of raising.

Color tokens are the CSS custom-property names used by the dashboard
stylesheet (``var(--aqi-good)`` etc.).

Pollutant breakpoints follow the US EPA AQI tables for PM2.5/PM10 (µg/m³);
the O3 and NO2 tables use the breakpoints the dashboard has always shown.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class ClassificationBand:
    """One row of a band table."""

    upper_bound: float
    label: str
    color: str


_INF = math.inf

AQI_BANDS: tuple[ClassificationBand, ...] = (
    ClassificationBand(50, "Good", "aqi-good"),
    ClassificationBand(100, "Moderate", "aqi-moderate"),
    ClassificationBand(150, "Unhealthy for Sensitive Groups", "aqi-unhealthy-sensitive"),
    ClassificationBand(200, "Unhealthy", "aqi-unhealthy"),
    ClassificationBand(300, "Very Unhealthy", "aqi-very-unhealthy"),
    ClassificationBand(_INF, "Hazardous", "aqi-hazardous"),
)

PM25_BANDS: tuple[ClassificationBand, ...] = (
    ClassificationBand(12, "Good", "aqi-good"),
    ClassificationBand(35.4, "Moderate", "aqi-moderate"),
    ClassificationBand(55.4, "Unhealthy for Sensitive Groups", "aqi-unhealthy-sensitive"),
    ClassificationBand(150.4, "Unhealthy", "aqi-unhealthy"),
    ClassificationBand(250.4, "Very Unhealthy", "aqi-very-unhealthy"),
    ClassificationBand(_INF, "Hazardous", "aqi-hazardous"),
)

PM10_BANDS: tuple[ClassificationBand, ...] = (
    ClassificationBand(54, "Good", "aqi-good"),
    ClassificationBand(154, "Moderate", "aqi-moderate"),
    ClassificationBand(254, "Unhealthy for Sensitive Groups", "aqi-unhealthy-sensitive"),
    ClassificationBand(354, "Unhealthy", "aqi-unhealthy"),
    ClassificationBand(424, "Very Unhealthy", "aqi-very-unhealthy"),
    ClassificationBand(_INF, "Hazardous", "aqi-hazardous"),
)

O3_BANDS: tuple[ClassificationBand, ...] = (
    ClassificationBand(54, "Good", "aqi-good"),
    ClassificationBand(70, "Moderate", "aqi-moderate"),
    ClassificationBand(85, "Unhealthy for Sensitive Groups", "aqi-unhealthy-sensitive"),
    ClassificationBand(105, "Unhealthy", "aqi-unhealthy"),
    ClassificationBand(200, "Very Unhealthy", "aqi-very-unhealthy"),
    ClassificationBand(_INF, "Hazardous", "aqi-hazardous"),
)

NO2_BANDS: tuple[ClassificationBand, ...] = (
    ClassificationBand(53, "Good", "aqi-good"),
    ClassificationBand(100, "Moderate", "aqi-moderate"),
    ClassificationBand(360, "Unhealthy for Sensitive Groups", "aqi-unhealthy-sensitive"),
    ClassificationBand(649, "Unhealthy", "aqi-unhealthy"),
    ClassificationBand(1249, "Very Unhealthy", "aqi-very-unhealthy"),
    ClassificationBand(_INF, "Hazardous", "aqi-hazardous"),
)

UV_BANDS: tuple[ClassificationBand, ...] = (
    ClassificationBand(2, "Low", "color-accent-green"),
    ClassificationBand(5, "Moderate", "color-accent-yellow"),
    ClassificationBand(7, "High", "color-accent-pink"),
    ClassificationBand(10, "Very High", "color-accent-red"),
    ClassificationBand(_INF, "Extreme", "aqi-hazardous"),
)

POLLUTANT_BANDS: dict[str, tuple[ClassificationBand, ...]] = {
    "pm25": PM25_BANDS,
    "pm10": PM10_BANDS,
    "o3": O3_BANDS,
    "no2": NO2_BANDS,
}

COMPASS_POINTS: tuple[str, ...] = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)  # fmt: skip

# Lower bound (m/s) of Beaufort forces 1..12; force 0 is anything below 0.5.
BEAUFORT_LIMITS: tuple[float, ...] = (
    0.5, 1.5, 3.3, 5.5, 7.9, 10.7, 13.8, 17.1, 20.7, 24.4, 28.4, 32.6,
)  # fmt: skip

BEAUFORT_NAMES: tuple[str, ...] = (
    "Calm",
    "Light air",
    "Light breeze",
    "Gentle breeze",
    "Moderate breeze",
    "Fresh breeze",
    "Strong breeze",
    "High wind",
    "Gale",
    "Strong gale",
    "Storm",
    "Violent storm",
    "Hurricane",
)


def band_index(value: float, bands: tuple[ClassificationBand, ...]) -> int:
    """Severity ordinal (0-based) of ``value`` within ``bands``."""
    for i, band in enumerate(bands):
        if value <= band.upper_bound:
            return i
    return len(bands) - 1


def classify(value: float, bands: tuple[ClassificationBand, ...]) -> ClassificationBand:
    """Return the band ``value`` falls in."""
    return bands[band_index(value, bands)]


def aqi_label(aqi: float) -> str:
    return classify(aqi, AQI_BANDS).label


def aqi_color(aqi: float) -> str:
    return classify(aqi, AQI_BANDS).color


def aqi_scale_level(aqi: float) -> int:
    """Number of cells (1-6) lit on the six-step AQI scale widget."""
    return band_index(aqi, AQI_BANDS) + 1


def pollutant_color(pollutant: str, value: float) -> str:
    """Color token for a pollutant concentration.

    Raises:
        KeyError: ``pollutant`` is not one of pm25, pm10, o3, no2.
    """
    return classify(value, POLLUTANT_BANDS[pollutant]).color


def uv_label(uv_index: float) -> str:
    return classify(uv_index, UV_BANDS).label


def uv_color(uv_index: float) -> str:
    return classify(uv_index, UV_BANDS).color


def uv_indicator_percent(uv_index: float) -> float:
    """Width of the UV bar as a percentage of a 0-12 scale."""
    return max(0.0, min(uv_index / 12, 1.0)) * 100


def wind_direction(degrees: float) -> str:
    """16-point compass label for a bearing in degrees.

    Bearings are rounded half-up to the nearest 22.5° sector; negative or
    >360° bearings wrap around. Non-finite input reads as north.
    """
    if not math.isfinite(degrees):
        return COMPASS_POINTS[0]
    sector = math.floor(degrees / 22.5 + 0.5)
    return COMPASS_POINTS[sector % len(COMPASS_POINTS)]


def beaufort_scale(speed: float) -> int:
    """Beaufort force (0-12) for a wind speed in m/s."""
    for force, limit in enumerate(BEAUFORT_LIMITS):
        if speed < limit:
            return force
    return len(BEAUFORT_LIMITS)


def beaufort_name(speed: float) -> str:
    """Descriptive name of the Beaufort force, e.g. ``"Gentle breeze"``."""
    return BEAUFORT_NAMES[beaufort_scale(speed)]
