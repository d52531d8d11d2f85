"""City-name and coordinate lookups via the OpenWeatherMap Geocoding API."""

from __future__ import annotations

from weather_glance.datasources.openweather.client import GEO_API, REVERSE_GEO_API, get_json
from weather_glance.exceptions import LocationNotFoundError
from weather_glance.schemas import Location


def geocode_city(city: str, api_key: str) -> Location:
    """Resolve a city name to its best-matching location.

    Raises:
        LocationNotFoundError: no match for ``city``.
    """
    matches = get_json(GEO_API, {"q": city, "limit": 1, "appid": api_key})
    if not matches:
        msg = f"Location '{city}' not found"
        raise LocationNotFoundError(msg)
    top = matches[0]
    return Location(name=top["name"], lat=top["lat"], lon=top["lon"], country=top.get("country"))


def reverse_geocode(lat: float, lon: float, api_key: str) -> Location:
    """Name the place at a coordinate.

    Falls back to a ``"lat, lon"`` label when the API knows no place there.
    """
    matches = get_json(REVERSE_GEO_API, {"lat": lat, "lon": lon, "limit": 1, "appid": api_key})
    if not matches:
        return Location(name=f"{lat:.2f}, {lon:.2f}", lat=lat, lon=lon)
    top = matches[0]
    return Location(name=top["name"], lat=lat, lon=lon, country=top.get("country"))
