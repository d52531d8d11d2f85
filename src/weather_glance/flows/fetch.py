"""
Prefect flow for fetching dashboard data from OpenWeatherMap and WAQI.

Current weather, forecast and air quality are requested concurrently on
Prefect's task runner. A current-weather or forecast failure fails the
flow; an air-quality failure is absorbed and replaced by the simulator.

Run locally:
    python -m weather_glance.flows.fetch

Run with Prefect dashboard:
    prefect server start &
    python -m weather_glance.flows.fetch
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

import requests
from prefect import flow, task
from prefect.futures import wait

from weather_glance.analysis.daily import aggregate_daily
from weather_glance.analysis.simulate import simulate_air_quality
from weather_glance.config import get_settings
from weather_glance.datasources import openweather, waqi
from weather_glance.demo import build_demo_snapshot
from weather_glance.exceptions import AirQualityUnavailableError
from weather_glance.schemas import (
    AirQualityReading,
    CurrentConditions,
    DashboardSnapshot,
    ForecastSample,
    Location,
)
from weather_glance.store import DataStore

# Data store rooted at the configured data directory
store = DataStore(get_settings().data_dir)

DASHBOARD_PATH = Path("live/dashboard.json")
SNAPSHOT_TTL = timedelta(minutes=30)
SOURCE = "openweathermap.org, waqi.info"


# =============================================================================
# Location resolution
# =============================================================================


@task(name="resolve-location")
def resolve_location(
    city: str | None = None,
    lat: float | None = None,
    lon: float | None = None,
) -> Location:
    """Pick the location to show.

    Explicit coordinates win (named by reverse geocoding), then an explicit
    city (direct geocoding), then the saved location, then the configured
    coordinates, then the default city.
    """
    settings = get_settings()
    api_key = settings.openweather_api_key

    if lat is not None and lon is not None:
        return openweather.reverse_geocode(lat, lon, api_key)
    if city:
        return openweather.geocode_city(city, api_key)

    saved = store.load_preferences().location
    if saved is not None:
        return saved
    if settings.lat is not None and settings.lon is not None:
        return openweather.reverse_geocode(settings.lat, settings.lon, api_key)
    return openweather.geocode_city(settings.default_city, api_key)


# =============================================================================
# Fetch tasks (one attempt each, no retries)
# =============================================================================


@task(name="fetch-current-weather")
def fetch_current(lat: float, lon: float) -> CurrentConditions:
    """Fetch current conditions from OpenWeatherMap."""
    settings = get_settings()
    return openweather.fetch_current_weather(
        lat, lon, settings.openweather_api_key, units=settings.units
    )


@task(name="fetch-forecast")
def fetch_forecast(lat: float, lon: float) -> list[ForecastSample]:
    """Fetch the 5-day / 3-hour forecast from OpenWeatherMap."""
    settings = get_settings()
    return openweather.fetch_forecast(lat, lon, settings.openweather_api_key, units=settings.units)


@task(name="fetch-air-quality")
def fetch_air_quality(lat: float, lon: float, city: str | None = None) -> AirQualityReading | None:
    """Fetch live air quality from WAQI.

    Returns None instead of raising when the feed is unreachable or has no
    data, so the other two sources are still shown.
    """
    token = get_settings().waqi_api_key
    if not token:
        print("No WAQI token configured, air quality will be simulated.")
        return None
    try:
        return waqi.fetch_air_quality(lat, lon, token, city=city)
    except (requests.RequestException, AirQualityUnavailableError) as exc:
        print(f"Air quality unavailable ({exc}), falling back to simulation.")
        return None


# =============================================================================
# Merge + save
# =============================================================================


def merge_snapshot(
    location: Location,
    current: CurrentConditions,
    samples: list[ForecastSample],
    air_quality: AirQualityReading | None,
) -> DashboardSnapshot:
    """Combine fetched data into a snapshot, simulating missing air quality."""
    if air_quality is None:
        air_quality = simulate_air_quality(current.weather_code, current.humidity)
    return DashboardSnapshot(
        location=location,
        current=current,
        samples=samples,
        daily=aggregate_daily(samples),
        air_quality=air_quality,
    )


@task(name="save-dashboard")
def save_dashboard(snapshot: DashboardSnapshot) -> Path:
    """Save the snapshot via store."""
    valid_until = None if snapshot.demo else datetime.now(UTC) + SNAPSHOT_TTL
    return store.write(
        DASHBOARD_PATH,
        snapshot.model_dump(mode="json"),
        source="demo" if snapshot.demo else SOURCE,
        valid_until=valid_until,
        location=snapshot.location.model_dump(mode="json"),
    )


def remember_location(location: Location) -> None:
    """Persist ``location`` as the preferred location."""
    prefs = store.load_preferences()
    prefs.location = location
    store.save_preferences(prefs)


def cached_snapshot(location: Location) -> DashboardSnapshot | None:
    """The stored snapshot if it is fresh and for the same place."""
    if not store.is_fresh(DASHBOARD_PATH):
        return None
    data = store.read(DASHBOARD_PATH)
    if not data:
        return None
    snapshot = DashboardSnapshot.model_validate(data)
    same_place = (snapshot.location.lat, snapshot.location.lon) == (location.lat, location.lon)
    return snapshot if same_place else None


# =============================================================================
# Flows
# =============================================================================


@flow(name="fetch-dashboard", log_prints=True)
def fetch_dashboard(lat: float, lon: float, name: str) -> DashboardSnapshot:
    """
    Fetch current weather, forecast and air quality for one location.

    The three requests run concurrently; the flow waits for all of them to
    settle before merging.
    """
    location = Location(name=name, lat=lat, lon=lon)
    print(f"Fetching weather for {name} ({lat}, {lon})...")

    current_future = fetch_current.submit(lat, lon)
    forecast_future = fetch_forecast.submit(lat, lon)
    air_future = fetch_air_quality.submit(lat, lon, name)
    wait([current_future, forecast_future, air_future])

    snapshot = merge_snapshot(
        location,
        current_future.result(),
        forecast_future.result(),
        air_future.result(),
    )
    output_path = save_dashboard(snapshot)
    remember_location(location)

    source = "simulated" if snapshot.air_quality.simulated else "live"
    print(
        f"Saved {len(snapshot.samples)} forecast samples, {len(snapshot.daily)} days "
        f"and {source} air quality to {output_path}"
    )
    return snapshot


@flow(name="fetch-data", log_prints=True)
def fetch_all(
    city: str | None = None,
    lat: float | None = None,
    lon: float | None = None,
    force: bool = False,
) -> dict[str, Any]:
    """
    Fetch all dashboard data.

    Uses the placeholder snapshot when no OpenWeatherMap key is configured,
    and skips the network while the stored snapshot for the same place is
    still fresh (unless ``force``).
    """
    if get_settings().demo_mode:
        print("No OpenWeatherMap API key configured, using demo data.")
        snapshot = build_demo_snapshot()
        save_dashboard(snapshot)
    else:
        location = resolve_location(city, lat, lon)
        cached = None if force else cached_snapshot(location)
        if cached is not None:
            print(f"Dashboard data for {location.name} is fresh, skipping fetch.")
            snapshot = cached
        else:
            snapshot = fetch_dashboard(location.lat, location.lon, location.name)

    return {
        "location": snapshot.location.name,
        "forecast_samples": len(snapshot.samples),
        "days": len(snapshot.daily),
        "air_quality_simulated": snapshot.air_quality.simulated,
        "demo": snapshot.demo,
    }


if __name__ == "__main__":
    result = fetch_all()
    print(f"Flow complete: {result}")
