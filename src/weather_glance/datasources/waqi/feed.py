"""Air-quality readings from the WAQI city feed.

A coordinate query (``/feed/geo:{lat};{lon}/``) is tried first. When it
answers without a usable index, the place name is tried
(``/feed/{city}/``). WAQI reports "no data" inside a 200 response
(``status != "ok"`` or ``aqi == "-"``), so those are turned into
``AirQualityUnavailableError`` rather than returned.
"""

from __future__ import annotations

import math
from typing import Any
from urllib.parse import quote

from weather_glance.datasources.waqi.client import POLLUTANT_KEYS, WAQI_API_URL
from weather_glance.exceptions import AirQualityUnavailableError
from weather_glance.schemas import AirQualityReading
from weather_glance.services.http import session


def _get_feed(path: str, token: str) -> Any:
    resp = session.get(f"{WAQI_API_URL}/{path}/", params={"token": token})
    resp.raise_for_status()
    return resp.json()


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool) and math.isfinite(value)


def parse_feed(payload: Any) -> AirQualityReading | None:
    """Convert a WAQI feed body to a reading, or None if it has no index.

    Anything that does not look like a feed (a non-object body, a non-numeric
    ``aqi``) gives None. Pollutants whose value is not a number, such as the
    ``"-"`` placeholder, are left out.
    """
    if not isinstance(payload, dict) or payload.get("status") != "ok":
        return None
    data = payload.get("data")
    if not isinstance(data, dict):
        return None
    aqi = data.get("aqi")
    if not _is_number(aqi):
        return None

    iaqi = data.get("iaqi")
    if not isinstance(iaqi, dict):
        iaqi = {}
    pollutants: dict[str, float] = {}
    for key in POLLUTANT_KEYS:
        entry = iaqi.get(key)
        if isinstance(entry, dict) and _is_number(entry.get("v")):
            pollutants[key] = float(entry["v"])

    city = data.get("city")
    station = city.get("name") if isinstance(city, dict) else None
    if not isinstance(station, str):
        station = None
    return AirQualityReading(index=round(aqi), pollutants=pollutants, station=station)


def fetch_air_quality(
    lat: float,
    lon: float,
    token: str,
    city: str | None = None,
) -> AirQualityReading:
    """
    Fetch the nearest station's AQI and pollutant concentrations.

    Args:
        lat: Latitude.
        lon: Longitude.
        token: WAQI API token.
        city: Place name to try when the coordinate query has no data.

    Returns:
        ``AirQualityReading`` from the live feed.

    Raises:
        AirQualityUnavailableError: neither query produced an index.
        requests.RequestException: a request failed.
    """
    reading = parse_feed(_get_feed(f"geo:{lat};{lon}", token))
    if reading is not None:
        return reading

    if city:
        reading = parse_feed(_get_feed(quote(city, safe=""), token))
        if reading is not None:
            return reading

    msg = f"Air quality data not available for ({lat}, {lon})"
    raise AirQualityUnavailableError(msg)
