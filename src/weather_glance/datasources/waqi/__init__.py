"""WAQI air-quality data source.

Public API:
  - feed: fetch_air_quality, parse_feed
  - client: API URL, pollutant keys
"""

from weather_glance.datasources.waqi.client import POLLUTANT_KEYS, WAQI_API_URL
from weather_glance.datasources.waqi.feed import fetch_air_quality, parse_feed

__all__ = ["POLLUTANT_KEYS", "WAQI_API_URL", "fetch_air_quality", "parse_feed"]
