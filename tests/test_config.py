"""Tests for application settings."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from weather_glance.config import Settings, get_settings

if TYPE_CHECKING:
    import pytest


class TestSettings:
    """Test environment-driven configuration."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)
        for name in ("OPENWEATHER_API_KEY", "WAQI_API_KEY", "DEFAULT_CITY", "LAT", "LON"):
            monkeypatch.delenv(f"WEATHER_GLANCE_{name}", raising=False)

        settings = Settings()

        assert settings.app_name == "weather-glance"
        assert settings.units == "metric"
        assert settings.default_city == "London"
        assert settings.lat is None
        assert settings.data_dir == Path("data")
        assert settings.demo_mode is True

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("WEATHER_GLANCE_OPENWEATHER_API_KEY", "abc123")
        monkeypatch.setenv("WEATHER_GLANCE_DEFAULT_CITY", "Lisbon")
        monkeypatch.setenv("WEATHER_GLANCE_LAT", "38.72")

        settings = Settings()

        assert settings.openweather_api_key == "abc123"
        assert settings.default_city == "Lisbon"
        assert settings.lat == 38.72
        assert settings.demo_mode is False

    def test_dotenv_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("WEATHER_GLANCE_WAQI_API_KEY", raising=False)
        (tmp_path / ".env").write_text("WEATHER_GLANCE_WAQI_API_KEY=token-from-file\n")

        assert Settings().waqi_api_key == "token-from-file"

    def test_get_settings_cached(self) -> None:
        assert get_settings() is get_settings()
