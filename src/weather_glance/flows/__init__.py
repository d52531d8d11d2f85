"""
Prefect flows for the dashboard pipeline.

Flows:
- fetch: Download current weather, forecast and air quality (concurrently)
- build: Render the stored snapshot into a static dashboard page

Usage (local):
    python -m weather_glance.flows.fetch
    python -m weather_glance.flows.build

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m weather_glance.flows.fetch
"""
