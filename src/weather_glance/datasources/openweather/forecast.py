"""5-day / 3-hour forecast from the OpenWeatherMap ``/forecast`` endpoint."""

from __future__ import annotations

from typing import Any

from weather_glance.datasources.openweather.client import DEFAULT_UNITS, FORECAST_API, get_json
from weather_glance.exceptions import MissingFieldError
from weather_glance.schemas import ForecastSample


def parse_sample(item: dict[str, Any]) -> ForecastSample:
    """Normalize one entry of the forecast ``list`` array.

    ``pop`` is passed through as-is; a missing value is left as None and
    reported later by the daily aggregator.

    Raises:
        MissingFieldError: timestamp, temperature or condition id is absent.
    """
    main = item.get("main") or {}
    weather = (item.get("weather") or [{}])[0]
    wind = item.get("wind") or {}

    timestamp = item.get("dt")
    if timestamp is None:
        raise MissingFieldError("dt")
    if main.get("temp") is None:
        raise MissingFieldError("main.temp", timestamp)
    if weather.get("id") is None:
        raise MissingFieldError("weather.id", timestamp)

    return ForecastSample(
        timestamp=timestamp,
        temperature=main["temp"],
        feels_like=main.get("feels_like", main["temp"]),
        weather_code=weather["id"],
        precipitation_probability=item.get("pop"),
        wind_speed=wind.get("speed", 0.0),
        wind_degrees=wind.get("deg", 0.0),
        humidity=main.get("humidity"),
        description=weather.get("description", ""),
        icon=weather.get("icon", ""),
    )


def parse_forecast(payload: dict[str, Any]) -> list[ForecastSample]:
    """Normalize a ``/forecast`` response body into samples, in API order."""
    return [parse_sample(item) for item in payload.get("list") or []]


def fetch_forecast(
    lat: float,
    lon: float,
    api_key: str,
    *,
    units: str = DEFAULT_UNITS,
) -> list[ForecastSample]:
    """
    Fetch the 5-day forecast at 3-hour resolution (40 samples).

    Args:
        lat: Latitude.
        lon: Longitude.
        api_key: OpenWeatherMap ``appid``.
        units: ``metric`` (°C, m/s) or ``imperial``.

    Returns:
        Forecast samples in the order the API returned them.
    """
    params = {"lat": lat, "lon": lon, "units": units, "appid": api_key}
    return parse_forecast(get_json(FORECAST_API, params))
