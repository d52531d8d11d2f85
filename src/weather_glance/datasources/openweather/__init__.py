"""OpenWeatherMap data source.

Fetches current conditions, the 5-day/3-hour forecast, and geocoding
results (requires an API key).

Public API:
  - current: fetch_current_weather, parse_current
  - forecast: fetch_forecast, parse_forecast
  - geocoding: geocode_city, reverse_geocode
  - client: API URLs, shared constants
"""

from weather_glance.datasources.openweather.client import (
    CURRENT_WEATHER_API,
    FORECAST_API,
    GEO_API,
    REVERSE_GEO_API,
)
from weather_glance.datasources.openweather.current import fetch_current_weather, parse_current
from weather_glance.datasources.openweather.forecast import fetch_forecast, parse_forecast
from weather_glance.datasources.openweather.geocoding import geocode_city, reverse_geocode

__all__ = [
    "CURRENT_WEATHER_API",
    "FORECAST_API",
    "GEO_API",
    "REVERSE_GEO_API",
    "fetch_current_weather",
    "fetch_forecast",
    "geocode_city",
    "parse_current",
    "parse_forecast",
    "reverse_geocode",
]
