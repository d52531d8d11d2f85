"""
Prefect flow for building the dashboard page from the stored snapshot.

Run locally:
    python -m weather_glance.flows.build
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from prefect import flow, task

from weather_glance.config import get_settings
from weather_glance.renderers import render_template
from weather_glance.renderers.dashboard import (
    build_air_quality_html,
    build_current_html,
    build_details_html,
    build_hourly_html,
    build_sun_html,
    build_weekly_html,
)
from weather_glance.renderers.date_utils import local_datetime
from weather_glance.renderers.weather_utils import background_class
from weather_glance.schemas import DashboardSnapshot, Theme
from weather_glance.store import DataStore

# Store and output paths
store = DataStore(get_settings().data_dir)
SITE_DIR = store.derived / "site"

# Path matching what fetch.py writes
DASHBOARD_PATH = Path("live/dashboard.json")


@task(name="load-dashboard")
def load_dashboard() -> DashboardSnapshot | None:
    """Load the last fetched snapshot from store."""
    data = store.read(DASHBOARD_PATH)
    if data is None:
        return None
    return DashboardSnapshot.model_validate(data)


@task(name="build-html")
def build_html(snapshot: DashboardSnapshot, theme: Theme = Theme.DARK) -> str:
    """Build the full dashboard page."""
    current = snapshot.current
    offset = current.timezone_offset
    updated = local_datetime(int(snapshot.fetched_at.timestamp()), offset)

    return render_template(
        "base.html.j2",
        theme=theme.value,
        location=snapshot.location.name,
        demo=snapshot.demo,
        updated=updated.strftime("%Y-%m-%d %H:%M"),
        background=background_class(current.weather_code, current.icon),
        current_html=build_current_html(current, snapshot.daily),
        hourly_html=build_hourly_html(snapshot.samples, offset),
        weekly_html=build_weekly_html(snapshot.daily, offset),
        details_html=build_details_html(current),
        air_quality_html=build_air_quality_html(snapshot.air_quality),
        sun_html=build_sun_html(current),
    )


@task(name="write-site")
def write_site(html: str) -> Path:
    """Write HTML to site directory."""
    SITE_DIR.mkdir(parents=True, exist_ok=True)
    output_path = SITE_DIR / "index.html"
    with output_path.open("w") as f:
        f.write(html)
    return output_path


@flow(name="build-site", log_prints=True)
def build_all() -> dict[str, Any]:
    """
    Build the dashboard page from the stored snapshot.

    This is the main Prefect flow that generates the static site.
    """
    print("Loading dashboard data...")
    snapshot = load_dashboard()

    if snapshot is None:
        print("No dashboard data found. Run fetch flow first.")
        return {"error": "no data"}

    theme = store.load_preferences().theme

    print("Building HTML...")
    html = build_html(snapshot, theme)

    print("Writing site...")
    output_path = write_site(html)

    print(f"Site built: {output_path}")
    return {"pages": 1, "output": str(output_path)}


if __name__ == "__main__":
    result = build_all()
    print(f"Flow complete: {result}")
