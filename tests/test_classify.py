"""Tests for the classification band tables."""

from __future__ import annotations

import pytest

from weather_glance.analysis.classify import (
    AQI_BANDS,
    NO2_BANDS,
    O3_BANDS,
    PM10_BANDS,
    PM25_BANDS,
    UV_BANDS,
    ClassificationBand,
    aqi_color,
    aqi_label,
    aqi_scale_level,
    band_index,
    beaufort_name,
    beaufort_scale,
    pollutant_color,
    uv_color,
    uv_indicator_percent,
    uv_label,
    wind_direction,
)

ALL_TABLES = [AQI_BANDS, PM25_BANDS, PM10_BANDS, O3_BANDS, NO2_BANDS, UV_BANDS]


class TestBandTables:
    """Structural checks shared by every table."""

    @pytest.mark.parametrize("bands", ALL_TABLES)
    def test_bounds_ascending(self, bands: tuple[ClassificationBand, ...]) -> None:
        bounds = [b.upper_bound for b in bands]
        assert bounds == sorted(bounds)

    @pytest.mark.parametrize("bands", ALL_TABLES)
    def test_monotonic_severity(self, bands: tuple[ClassificationBand, ...]) -> None:
        values = [v / 2 for v in range(-20, 3000)]
        severities = [band_index(v, bands) for v in values]
        assert severities == sorted(severities)

    @pytest.mark.parametrize("bands", ALL_TABLES)
    def test_extremes_degrade_to_ends(self, bands: tuple[ClassificationBand, ...]) -> None:
        assert band_index(-1e9, bands) == 0
        assert band_index(1e12, bands) == len(bands) - 1


class TestAqi:
    """AQI label, color and scale."""

    @pytest.mark.parametrize(
        ("aqi", "label"),
        [
            (0, "Good"),
            (50, "Good"),
            (51, "Moderate"),
            (100, "Moderate"),
            (150, "Unhealthy for Sensitive Groups"),
            (200, "Unhealthy"),
            (300, "Very Unhealthy"),
            (301, "Hazardous"),
            (999, "Hazardous"),
        ],
    )
    def test_labels(self, aqi: int, label: str) -> None:
        assert aqi_label(aqi) == label

    def test_upper_bound_is_inclusive(self) -> None:
        assert aqi_color(50) == "aqi-good"
        assert aqi_color(50.1) == "aqi-moderate"

    @pytest.mark.parametrize(("aqi", "level"), [(10, 1), (75, 2), (120, 3), (180, 4), (250, 5), (500, 6)])
    def test_scale_level(self, aqi: int, level: int) -> None:
        assert aqi_scale_level(aqi) == level


class TestPollutants:
    """Pollutant color lookup."""

    @pytest.mark.parametrize(
        ("pollutant", "value", "color"),
        [
            ("pm25", 12, "aqi-good"),
            ("pm25", 12.1, "aqi-moderate"),
            ("pm25", 300, "aqi-hazardous"),
            ("pm10", 154, "aqi-moderate"),
            ("o3", 85, "aqi-unhealthy-sensitive"),
            ("no2", 649, "aqi-unhealthy"),
            ("no2", 1249, "aqi-very-unhealthy"),
        ],
    )
    def test_colors(self, pollutant: str, value: float, color: str) -> None:
        assert pollutant_color(pollutant, value) == color

    def test_unknown_pollutant(self) -> None:
        with pytest.raises(KeyError):
            pollutant_color("so2", 10)


class TestUv:
    """UV label, color and indicator width."""

    @pytest.mark.parametrize(
        ("uv", "label", "color"),
        [
            (0, "Low", "color-accent-green"),
            (2, "Low", "color-accent-green"),
            (5, "Moderate", "color-accent-yellow"),
            (7, "High", "color-accent-pink"),
            (10, "Very High", "color-accent-red"),
            (11, "Extreme", "aqi-hazardous"),
        ],
    )
    def test_bands(self, uv: float, label: str, color: str) -> None:
        assert uv_label(uv) == label
        assert uv_color(uv) == color

    def test_indicator_percent(self) -> None:
        assert uv_indicator_percent(6) == 50.0
        assert uv_indicator_percent(15) == 100.0
        assert uv_indicator_percent(-3) == 0.0


class TestWindDirection:
    """16-point compass labels."""

    @pytest.mark.parametrize(
        ("degrees", "label"),
        [
            (0, "N"),
            (11.24, "N"),
            (11.25, "NNE"),
            (45, "NE"),
            (90, "E"),
            (180, "S"),
            (220, "SW"),
            (270, "W"),
            (348.75, "N"),
            (359, "N"),
            (360, "N"),
            (-90, "W"),
            (720 + 45, "NE"),
        ],
    )
    def test_labels(self, degrees: float, label: str) -> None:
        assert wind_direction(degrees) == label

    def test_non_finite_reads_north(self) -> None:
        assert wind_direction(float("nan")) == "N"


class TestBeaufort:
    """Beaufort force from wind speed."""

    @pytest.mark.parametrize(
        ("speed", "force"),
        [
            (0, 0),
            (0.49, 0),
            (0.5, 1),
            (3.3, 3),
            (4.5, 3),
            (10.6, 5),
            (17.1, 8),
            (32.5, 11),
            (32.6, 12),
            (80, 12),
            (-1, 0),
        ],
    )
    def test_force(self, speed: float, force: int) -> None:
        assert beaufort_scale(speed) == force

    def test_thirteen_forces(self) -> None:
        forces = {beaufort_scale(v / 10) for v in range(0, 500)}
        assert forces == set(range(13))

    def test_name(self) -> None:
        assert beaufort_name(4.5) == "Gentle breeze"
        assert beaufort_name(40) == "Hurricane"
