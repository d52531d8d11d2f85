"""World Air Quality Index (WAQI) API constants.

API docs: https://aqicn.org/json-api/doc/
"""

WAQI_API_URL = "https://api.waqi.info/feed"

# Pollutants read from ``data.iaqi``; keys match the classify tables
POLLUTANT_KEYS = ("pm25", "pm10", "o3", "no2")
