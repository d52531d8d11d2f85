"""Tests for the UV and air-quality fallback simulators."""

from __future__ import annotations

import random

import pytest

from weather_glance.analysis.simulate import (
    baseline_aqi,
    baseline_pollutants,
    round_half_up,
    simulate_air_quality,
    simulate_uv_index,
    uv_clarity_factor,
)


class TestSimulateUvIndex:
    """UV parabola and clarity factor."""

    def test_clear_noon_peak(self) -> None:
        assert simulate_uv_index(12, 800) == 8

    def test_midnight_is_zero(self) -> None:
        assert simulate_uv_index(0, 800) == 0

    def test_fog_band(self) -> None:
        assert simulate_uv_index(12, 701) == 2

    def test_cloudy_band(self) -> None:
        assert simulate_uv_index(12, 803) == 6  # 8 * 0.7 = 5.6

    @pytest.mark.parametrize("hour", [0, 3, 5, 6, 18, 19, 23])
    def test_zero_outside_daylight(self, hour: int) -> None:
        assert simulate_uv_index(hour, 800) == 0

    def test_shoulder_hours(self) -> None:
        assert simulate_uv_index(9, 800) == 6  # 8 * 0.75
        assert simulate_uv_index(15, 801) == 6

    def test_returns_float(self) -> None:
        assert isinstance(simulate_uv_index(12, 800), float)

    @pytest.mark.parametrize(
        ("code", "factor"), [(800, 1.0), (801, 1.0), (802, 0.7), (804, 0.7), (500, 0.3), (211, 0.3)]
    )
    def test_clarity_factor(self, code: int, factor: float) -> None:
        assert uv_clarity_factor(code) == factor


class TestRoundHalfUp:
    def test_half_rounds_up(self) -> None:
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(2.4) == 2


class TestBaselineAqi:
    """AQI per condition family."""

    @pytest.mark.parametrize(
        ("code", "humidity", "aqi"),
        [
            (211, 50, 30),
            (301, 50, 40),
            (501, 50, 40),
            (601, 50, 35),
            (741, 50, 120),
            (800, 50, 50),
            (800, 70, 50),
            (800, 71, 90),
            (803, 50, 80),
            (100, 50, 70),
        ],
    )
    def test_table(self, code: int, humidity: float, aqi: int) -> None:
        assert baseline_aqi(code, humidity) == aqi


class TestSimulateAirQuality:
    """Pollutant baselines and jitter."""

    def test_zero_jitter_reproduces_baseline(self) -> None:
        reading = simulate_air_quality(741, 50, jitter=0)

        assert reading.index == 120
        assert reading.simulated is True
        assert reading.pollutants == {"pm25": 40, "pm10": 100, "o3": 80, "no2": 150}

    def test_baseline_bands(self) -> None:
        assert baseline_pollutants(45) == {"pm25": 8, "pm10": 20, "o3": 30, "no2": 20}
        assert baseline_pollutants(350)["no2"] == 650

    def test_baseline_is_a_copy(self) -> None:
        baseline_pollutants(45)["pm25"] = 999
        assert baseline_pollutants(45)["pm25"] == 8

    def test_jitter_bounded(self) -> None:
        rng = random.Random(1)
        base = baseline_pollutants(80)
        for _ in range(50):
            reading = simulate_air_quality(803, 40, rng=rng)
            for name, value in reading.pollutants.items():
                assert base[name] * 0.8 <= value <= base[name] * 1.2

    def test_seed_is_repeatable(self) -> None:
        first = simulate_air_quality(500, 40, seed=42)
        second = simulate_air_quality(500, 40, seed=42)
        assert first == second

    def test_jitter_does_not_change_index(self) -> None:
        assert simulate_air_quality(800, 90, seed=3).index == 90
