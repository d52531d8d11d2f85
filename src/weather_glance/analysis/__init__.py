"""Pure derivations over fetched weather data.

Everything the dashboard computes lives here; renderers only format it.

Dependency rule: analysis/ imports from schemas and conditions only.
It never fetches data or produces HTML, and keeps no state, so every
function is safe to call from concurrent tasks.

Modules:
  - classify: band tables (AQI, pollutants, UV), compass, Beaufort
  - daily: 3-hour samples -> per-day summaries
  - simulate: UV and air-quality fallbacks
  - sun: sunrise/sunset arc position
"""

from weather_glance.analysis.classify import (
    ClassificationBand,
    aqi_color,
    aqi_label,
    aqi_scale_level,
    beaufort_scale,
    classify,
    pollutant_color,
    uv_color,
    wind_direction,
)
from weather_glance.analysis.daily import aggregate_daily
from weather_glance.analysis.simulate import simulate_air_quality, simulate_uv_index
from weather_glance.analysis.sun import sun_arc_coordinates, sun_position_fraction

__all__ = [
    "ClassificationBand",
    "aggregate_daily",
    "aqi_color",
    "aqi_label",
    "aqi_scale_level",
    "beaufort_scale",
    "classify",
    "pollutant_color",
    "simulate_air_quality",
    "simulate_uv_index",
    "sun_arc_coordinates",
    "sun_position_fraction",
    "uv_color",
    "wind_direction",
]
