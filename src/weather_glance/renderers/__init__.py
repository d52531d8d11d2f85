"""Pure rendering functions: dashboard data -> HTML strings.

All renderers follow the same pattern:
  - Input: ``DashboardSnapshot`` pieces (from flows/fetch.py via the store)
  - Output: str (HTML fragment, not a full page)
  - No side effects, no I/O, no Prefect decorators

Used by flows/build.py which orchestrates the rendering pipeline.

Public API:
  - dashboard: build_current_html, build_hourly_html, build_weekly_html,
    build_details_html, build_air_quality_html, build_sun_html
  - weather_utils: weather_icon_class, background_class, title_case
  - date_utils: format_time, hour_label, day_name, short_date

Adding a dashboard section
--------------------------
1. Add a build function to ``renderers/dashboard.py``::

       def build_mysection_html(snapshot: DashboardSnapshot) -> str:
           rows = [...]
           return render_template("mysection.html.j2", rows=rows)

2. Create a Jinja2 template in ``templates/{name}.html.j2``.
   Templates produce HTML fragments (no <html>/<body> tags).
   CSS goes in ``templates/base.html.j2`` within the <style> block.

3. Wire into ``flows/build.py`` ``build_html()`` and add the
   ``{{ mysection_html }}`` placeholder in ``base.html.j2``.

4. Add tests asserting the returned HTML contains expected content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
