"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants
    └── {feature}.py      # Fetch + parse functions (one per endpoint/concept)

Sources:
  - openweather/  current conditions, 5-day forecast, geocoding
  - waqi/         air-quality feed

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.
   See ``waqi/`` for a minimal example, ``openweather/`` for a richer one.

2. Write fetch functions that normalize the response into ``schemas`` models::

       from weather_glance.services.http import session

       def fetch_something(lat, lon) -> SomeModel:
           resp = session.get(API_URL, params={...})
           resp.raise_for_status()
           return parse_something(resp.json())

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Wire into the pipeline (see ``flows/fetch.py``):
   - Add a ``@task`` that calls your fetch function
   - Submit it alongside the other fetch tasks in ``fetch_dashboard()``
   - Add the result to ``DashboardSnapshot``

5. Add tests in ``tests/test_{name}.py``.
"""
