"""Placeholder dashboard data for running without an API key.

Mimics the shape of a real OpenWeatherMap refresh: 40 three-hour samples
starting now, scattered clouds with a clear step once a day, a gentle
temperature wave, and a "Good" air-quality reading. The values are
deterministic so a demo build is reproducible.
"""

from __future__ import annotations

import math
import time

from weather_glance.analysis.daily import aggregate_daily
from weather_glance.schemas import (
    AirQualityReading,
    CurrentConditions,
    DashboardSnapshot,
    ForecastSample,
    Location,
)

DEMO_LOCATION = Location(name="Sample City", lat=40.7128, lon=-74.0060)
SAMPLE_COUNT = 40
STEP_SECONDS = 3 * 3600


def demo_samples(start: int) -> list[ForecastSample]:
    samples = []
    for i in range(SAMPLE_COUNT):
        clear = i % 8 == 0
        samples.append(
            ForecastSample(
                timestamp=start + i * STEP_SECONDS,
                temperature=round(22 + math.sin(i / 3) * 4, 1),
                feels_like=round(23 + math.sin(i / 3) * 3, 1),
                weather_code=800 if clear else 802,
                precipitation_probability=((i * 7) % 10) * 0.04,
                wind_speed=4.5 + (i % 3) * 0.5,
                wind_degrees=220 + ((i * 13) % 40) - 20,
                humidity=65,
                description="clear sky" if clear else "scattered clouds",
                icon="01d" if clear else "03d",
            )
        )
    return samples


def build_demo_snapshot(now: int | None = None) -> DashboardSnapshot:
    """Build a complete placeholder snapshot anchored at ``now`` (epoch seconds)."""
    now = int(time.time()) if now is None else now
    samples = demo_samples(now)
    current = CurrentConditions(
        timestamp=now,
        temperature=22,
        feels_like=23,
        temp_min=20,
        temp_max=24,
        humidity=65,
        pressure=1015,
        visibility_m=10000,
        wind_speed=4.5,
        wind_degrees=220,
        weather_code=802,
        description="scattered clouds",
        icon="03d",
        sunrise=now - 6 * 3600,
        sunset=now + 6 * 3600,
    )
    air_quality = AirQualityReading(
        index=45,
        pollutants={"pm25": 10, "pm10": 25, "o3": 35, "no2": 15},
        station="Demo station",
    )
    return DashboardSnapshot(
        location=DEMO_LOCATION,
        current=current,
        samples=samples,
        daily=aggregate_daily(samples),
        air_quality=air_quality,
        demo=True,
    )
