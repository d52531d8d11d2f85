"""Tests for the shared single-attempt HTTP session."""

from __future__ import annotations

from unittest.mock import Mock, patch

import pytest
import requests
from requests.adapters import HTTPAdapter

from weather_glance.services.http import (
    DEFAULT_RETRY,
    DEFAULT_TIMEOUT,
    USER_AGENT,
    create_session,
    session,
)

OWM_URL = "https://api.openweathermap.org/data/2.5/weather"


def status_response(status: int, url: str = OWM_URL) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.url = url
    resp.reason = "test"
    return resp


class TestSingleAttemptPolicy:
    """One request per call, whatever the outcome."""

    def test_no_retries_of_any_kind(self) -> None:
        assert DEFAULT_RETRY.total == 0
        assert DEFAULT_RETRY.connect == 0
        assert DEFAULT_RETRY.read == 0
        assert DEFAULT_RETRY.status == 0

    @pytest.mark.parametrize("status", [429, 500, 502, 503, 504])
    def test_error_status_is_not_retried(self, status: int) -> None:
        assert not DEFAULT_RETRY.is_retry("GET", status, has_retry_after=True)

    def test_error_status_left_to_caller(self) -> None:
        assert DEFAULT_RETRY.raise_on_status is False

    def test_server_error_sent_once(self) -> None:
        s = create_session()
        with patch.object(HTTPAdapter, "send", return_value=status_response(503)) as mock_send:
            resp = s.get(OWM_URL, params={"appid": "key"})

        assert mock_send.call_count == 1
        assert resp.status_code == 503
        with pytest.raises(requests.HTTPError):
            resp.raise_for_status()

    def test_connection_error_surfaces_immediately(self) -> None:
        s = create_session()
        with (
            patch.object(HTTPAdapter, "send", side_effect=requests.ConnectionError("refused")) as mock_send,
            pytest.raises(requests.ConnectionError),
        ):
            s.get("https://api.waqi.info/feed/geo:51.5;-0.12/")
        assert mock_send.call_count == 1


class TestTimeout:
    """Every request carries a timeout."""

    def test_default_timeout(self) -> None:
        assert DEFAULT_TIMEOUT == 15

    def test_injected_when_missing(self) -> None:
        s = create_session(timeout=3)
        with patch.object(HTTPAdapter, "send", return_value=status_response(200)) as mock_send:
            s.get(OWM_URL)
        assert mock_send.call_args.kwargs["timeout"] == 3

    def test_caller_timeout_wins(self) -> None:
        s = create_session(timeout=3)
        with patch.object(HTTPAdapter, "send", return_value=status_response(200)) as mock_send:
            s.get(OWM_URL, timeout=60)
        assert mock_send.call_args.kwargs["timeout"] == 60


class TestSessionSetup:
    """Adapters and headers."""

    @pytest.mark.parametrize("url", ["https://api.waqi.info", "http://localhost:8000"])
    def test_both_schemes_use_single_attempt_adapter(self, url: str) -> None:
        adapter = create_session().get_adapter(url)
        assert isinstance(adapter, HTTPAdapter)
        assert adapter.max_retries.total == 0

    def test_custom_retry_passed_to_adapter(self) -> None:
        custom = Mock(spec=DEFAULT_RETRY)
        adapter = create_session(retry=custom).get_adapter("https://api.waqi.info")
        assert adapter.max_retries is custom

    def test_headers(self) -> None:
        s = create_session()
        assert s.headers["User-Agent"] == USER_AGENT
        assert USER_AGENT.startswith("weather-glance/")
        assert s.headers["Accept"] == "application/json"

    def test_module_session_is_single_attempt(self) -> None:
        assert session.get_adapter(OWM_URL).max_retries.total == 0
