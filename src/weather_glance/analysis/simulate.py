"""Fallback values for data the free APIs do not provide.

The OpenWeatherMap free tier has no UV index, and WAQI has no station for
many places. Rather than leaving the dashboard blank, plausible values are
derived from the hour of day and the current weather condition.

UV index
--------
A downward parabola peaking at solar noon, zero outside 06:00-18:00::

    base = max(0, 8 * (1 - ((hour - 12) / 6) ** 2))

scaled by a clarity factor: 1.0 for clear/few clouds (800-801), 0.7 for
scattered to overcast clouds (802-804), 0.3 for everything else.

Air quality
-----------
A baseline AQI per condition family (rain and storms wash the air, fog and
mist trap pollutants), then per-band baseline pollutant concentrations with
bounded uniform jitter. ``jitter=0`` reproduces the baseline exactly; pass
``seed`` or ``rng`` for repeatable jitter.
"""

from __future__ import annotations

import math
import random

from weather_glance.analysis.classify import AQI_BANDS, band_index
from weather_glance.conditions import ConditionFamily, condition_family
from weather_glance.schemas import AirQualityReading

UV_PEAK = 8.0
SOLAR_NOON_HOUR = 12
DAYLIGHT_HALF_WIDTH_HOURS = 6

DEFAULT_JITTER = 0.2  # +/-20%

# Humidity above which a clear sky is assumed to trap pollutants
HUMID_CLEAR_SKY_PCT = 70

_FAMILY_AQI: dict[ConditionFamily, int] = {
    ConditionFamily.THUNDERSTORM: 30,
    ConditionFamily.DRIZZLE: 40,
    ConditionFamily.RAIN: 40,
    ConditionFamily.SNOW: 35,
    ConditionFamily.ATMOSPHERE: 120,
    ConditionFamily.CLOUDS: 80,
}
DEFAULT_AQI = 70

# Baseline (pm25, pm10, o3, no2) per AQI band, Good -> Hazardous
_BAND_POLLUTANTS: tuple[dict[str, float], ...] = (
    {"pm25": 8, "pm10": 20, "o3": 30, "no2": 20},
    {"pm25": 20, "pm10": 50, "o3": 60, "no2": 50},
    {"pm25": 40, "pm10": 100, "o3": 80, "no2": 150},
    {"pm25": 70, "pm10": 150, "o3": 95, "no2": 200},
    {"pm25": 120, "pm10": 250, "o3": 150, "no2": 400},
    {"pm25": 250, "pm10": 350, "o3": 200, "no2": 650},
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 away from zero for positives."""
    return math.floor(value + 0.5)


def uv_clarity_factor(weather_code: int) -> float:
    """Fraction of clear-sky UV that reaches the ground for a condition."""
    if 800 <= weather_code <= 801:
        return 1.0
    if 802 <= weather_code <= 804:
        return 0.7
    return 0.3


def simulate_uv_index(local_hour: int, weather_code: int) -> float:
    """Estimate the UV index from the local hour (0-23) and condition code.

    Returns a whole-number index as a float, e.g. ``8.0`` at noon under a
    clear sky and ``0.0`` at night.
    """
    offset = (local_hour - SOLAR_NOON_HOUR) / DAYLIGHT_HALF_WIDTH_HOURS
    base = max(0.0, UV_PEAK * (1 - offset**2))
    return float(round_half_up(base * uv_clarity_factor(weather_code)))


def baseline_aqi(weather_code: int, humidity_percent: float) -> int:
    """AQI typical of a weather condition, before any jitter."""
    family = condition_family(weather_code)
    if family is ConditionFamily.CLEAR:
        return 90 if humidity_percent > HUMID_CLEAR_SKY_PCT else 50
    return _FAMILY_AQI.get(family, DEFAULT_AQI)


def baseline_pollutants(aqi: float) -> dict[str, float]:
    """Representative pollutant concentrations (µg/m³) for an AQI band."""
    return dict(_BAND_POLLUTANTS[band_index(aqi, AQI_BANDS)])


def jittered(value: float, amplitude: float, rng: random.Random) -> float:
    """``value`` scaled by a uniform factor in ``[1 - amplitude, 1 + amplitude]``."""
    if amplitude == 0:
        return value
    return value * (1 + rng.uniform(-amplitude, amplitude))


def simulate_air_quality(
    weather_code: int,
    humidity_percent: float,
    *,
    jitter: float = DEFAULT_JITTER,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> AirQualityReading:
    """Synthesize an air-quality reading from the current weather.

    Args:
        weather_code: OpenWeatherMap condition id.
        humidity_percent: Relative humidity (0-100).
        jitter: Relative amplitude of pollutant variation (0 disables it).
        seed: Seed for a private random generator.
        rng: Explicit random generator; takes precedence over ``seed``.

    Returns:
        ``AirQualityReading`` flagged ``simulated=True``.
    """
    aqi = baseline_aqi(weather_code, humidity_percent)
    source = rng or random.Random(seed)
    pollutants = {
        name: jittered(value, jitter, source) for name, value in baseline_pollutants(aqi).items()
    }
    return AirQualityReading(index=aqi, pollutants=pollutants, simulated=True)
