"""OpenWeatherMap condition codes grouped into families.

Condition ids are three-digit codes whose hundreds digit names the group
(https://openweathermap.org/weather-conditions):

    2xx  thunderstorm      6xx  snow
    3xx  drizzle           7xx  atmosphere (mist, smoke, haze, fog, ...)
    5xx  rain              800  clear sky
                           80x  clouds (801 few ... 804 overcast)
"""

from __future__ import annotations

from enum import StrEnum


class ConditionFamily(StrEnum):
    """Broad weather condition group for an OpenWeatherMap code."""

    THUNDERSTORM = "thunderstorm"
    DRIZZLE = "drizzle"
    RAIN = "rain"
    SNOW = "snow"
    ATMOSPHERE = "atmosphere"
    CLEAR = "clear"
    CLOUDS = "clouds"
    UNKNOWN = "unknown"


def condition_family(code: int) -> ConditionFamily:
    """Map an OpenWeatherMap condition id to its family."""
    if 200 <= code < 300:
        return ConditionFamily.THUNDERSTORM
    if 300 <= code < 400:
        return ConditionFamily.DRIZZLE
    if 500 <= code < 600:
        return ConditionFamily.RAIN
    if 600 <= code < 700:
        return ConditionFamily.SNOW
    if 700 <= code < 800:
        return ConditionFamily.ATMOSPHERE
    if code == 800:
        return ConditionFamily.CLEAR
    if code > 800:
        return ConditionFamily.CLOUDS
    return ConditionFamily.UNKNOWN

