"""
Single HTTP session shared by the OpenWeatherMap and WAQI datasources.

The dashboard refresh makes one attempt per request. A slow or failing API
must not hold up the other sources for long, so:

  - the mounted ``Retry`` policy allows zero connect/read/status retries
    (only redirects are followed);
  - every request gets ``DEFAULT_TIMEOUT`` seconds unless the caller passes
    its own ``timeout=``;
  - HTTP error statuses come back as ordinary responses and the datasource
    decides with ``resp.raise_for_status()``.

Usage::

    from weather_glance.services.http import session

    resp = session.get(FORECAST_API, params={"lat": 51.5, "lon": -0.12, "appid": key})
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from weather_glance import __version__

DEFAULT_RETRY = Retry(
    total=0,
    connect=0,
    read=0,
    status=0,
    redirect=3,
    raise_on_status=False,
)

DEFAULT_TIMEOUT = 15  # seconds, per request

USER_AGENT = f"weather-glance/{__version__} (+https://openweathermap.org, +https://waqi.info)"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build the session used by the datasources.

    Args:
        retry: Adapter retry policy. Defaults to a single attempt.
        timeout: Seconds applied to any request sent without ``timeout=``.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    for scheme in ("https://", "http://"):
        s.mount(scheme, adapter)
    s.headers["User-Agent"] = USER_AGENT
    s.headers["Accept"] = "application/json"

    send = s.send

    def send_with_timeout(prepared: requests.PreparedRequest, **kwargs: object) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = send_with_timeout  # type: ignore[method-assign]
    return s


#: Session used by ``datasources.openweather.client`` and ``datasources.waqi.feed``.
session: requests.Session = create_session()
