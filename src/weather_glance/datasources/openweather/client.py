"""OpenWeatherMap API client constants and shared request helpers.

API docs:
  - Current weather: https://openweathermap.org/current
  - 5 day / 3 hour forecast: https://openweathermap.org/forecast5
  - Geocoding: https://openweathermap.org/api/geocoding-api
"""

from __future__ import annotations

from typing import Any

from weather_glance.services.http import session

WEATHER_API_BASE_URL = "https://api.openweathermap.org/data/2.5"
CURRENT_WEATHER_API = f"{WEATHER_API_BASE_URL}/weather"
FORECAST_API = f"{WEATHER_API_BASE_URL}/forecast"
GEO_API = "https://api.openweathermap.org/geo/1.0/direct"
REVERSE_GEO_API = "https://api.openweathermap.org/geo/1.0/reverse"

DEFAULT_UNITS = "metric"


def get_json(url: str, params: dict[str, Any]) -> Any:
    """GET ``url`` once and return the decoded JSON body.

    Raises:
        requests.HTTPError: non-2xx status.
        requests.RequestException: transport failure.
    """
    resp = session.get(url, params=params)
    resp.raise_for_status()
    return resp.json()
