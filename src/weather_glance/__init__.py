"""weather-glance - a single-location weather dashboard.

Architecture::

    datasources/   External APIs (OpenWeatherMap weather/forecast/geocoding, WAQI)
    analysis/      Pure derivations (daily aggregation, band tables, fallbacks, sun arc)
    store.py       JSON store with TTL (live snapshot, preferences, built site)
    renderers/     Pure data -> HTML (dashboard sections)
    flows/         Prefect orchestration (fetch runs sources concurrently, build renders)
    services/      Shared utilities (HTTP client)

Data flow: datasources -> analysis -> store -> renderers -> derived/site/

Extension points - see each package's docstring for step-by-step guides:
  - New data source:   datasources/__init__.py
  - New UI section:    renderers/__init__.py
"""

__version__ = "0.1.0"

from weather_glance.config import Settings

__all__ = ["Settings", "__version__"]
