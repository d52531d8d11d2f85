"""Tests for the placeholder dashboard data."""

from __future__ import annotations

from weather_glance.demo import DEMO_LOCATION, build_demo_snapshot, demo_samples

NOW = 1770206400


class TestDemoSnapshot:
    def test_deterministic(self) -> None:
        assert build_demo_snapshot(NOW).samples == build_demo_snapshot(NOW).samples

    def test_shape(self) -> None:
        snapshot = build_demo_snapshot(NOW)

        assert snapshot.demo is True
        assert snapshot.location == DEMO_LOCATION
        assert len(snapshot.samples) == 40
        assert 5 <= len(snapshot.daily) <= 6
        assert snapshot.current.sunrise < NOW < snapshot.current.sunset
        assert snapshot.air_quality.index == 45
        assert snapshot.air_quality.simulated is False

    def test_samples_three_hours_apart(self) -> None:
        samples = demo_samples(NOW)
        gaps = {b.timestamp - a.timestamp for a, b in zip(samples, samples[1:], strict=False)}
        assert gaps == {3 * 3600}

    def test_probabilities_in_range(self) -> None:
        assert all(0 <= s.precipitation_probability <= 1 for s in demo_samples(NOW))
