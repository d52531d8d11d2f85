"""Current conditions from the OpenWeatherMap ``/weather`` endpoint."""

from __future__ import annotations

from typing import Any

from weather_glance.datasources.openweather.client import (
    CURRENT_WEATHER_API,
    DEFAULT_UNITS,
    get_json,
)
from weather_glance.exceptions import MissingFieldError
from weather_glance.schemas import CurrentConditions


def parse_current(payload: dict[str, Any]) -> CurrentConditions:
    """Normalize a ``/weather`` response body.

    Raises:
        MissingFieldError: a field the dashboard cannot do without is absent.
    """
    main = payload.get("main") or {}
    weather = (payload.get("weather") or [{}])[0]
    wind = payload.get("wind") or {}
    sys = payload.get("sys") or {}

    for name, value in (
        ("dt", payload.get("dt")),
        ("main.temp", main.get("temp")),
        ("weather.id", weather.get("id")),
        ("sys.sunrise", sys.get("sunrise")),
        ("sys.sunset", sys.get("sunset")),
    ):
        if value is None:
            raise MissingFieldError(name)

    temp = main["temp"]
    return CurrentConditions(
        timestamp=payload["dt"],
        temperature=temp,
        feels_like=main.get("feels_like", temp),
        temp_min=main.get("temp_min", temp),
        temp_max=main.get("temp_max", temp),
        humidity=main.get("humidity", 0),
        pressure=main.get("pressure", 0),
        visibility_m=payload.get("visibility"),
        wind_speed=wind.get("speed", 0.0),
        wind_degrees=wind.get("deg", 0.0),
        weather_code=weather["id"],
        description=weather.get("description", ""),
        icon=weather.get("icon", ""),
        sunrise=sys["sunrise"],
        sunset=sys["sunset"],
        timezone_offset=payload.get("timezone", 0),
    )


def fetch_current_weather(
    lat: float,
    lon: float,
    api_key: str,
    *,
    units: str = DEFAULT_UNITS,
) -> CurrentConditions:
    """
    Fetch current conditions for a coordinate.

    Args:
        lat: Latitude.
        lon: Longitude.
        api_key: OpenWeatherMap ``appid``.
        units: ``metric`` (°C, m/s) or ``imperial``.

    Returns:
        Normalized ``CurrentConditions``.
    """
    params = {"lat": lat, "lon": lon, "units": units, "appid": api_key}
    return parse_current(get_json(CURRENT_WEATHER_API, params))
