"""Tests for the sun-position calculator."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from weather_glance.analysis.sun import sun_arc_coordinates, sun_position_fraction
from weather_glance.exceptions import InvalidRangeError


def at(hour: int) -> int:
    return int(datetime(2026, 6, 21, hour, tzinfo=UTC).timestamp())


class TestSunPositionFraction:
    """Fraction of daylight elapsed."""

    def test_noon_is_half(self) -> None:
        assert sun_position_fraction(at(12), at(6), at(18)) == pytest.approx(0.5)

    def test_before_sunrise_clamps_to_zero(self) -> None:
        assert sun_position_fraction(at(3), at(6), at(18)) == 0.0

    def test_after_sunset_clamps_to_one(self) -> None:
        assert sun_position_fraction(at(22), at(6), at(18)) == 1.0

    def test_endpoints(self) -> None:
        assert sun_position_fraction(at(6), at(6), at(18)) == 0.0
        assert sun_position_fraction(at(18), at(6), at(18)) == 1.0

    def test_linear(self) -> None:
        assert sun_position_fraction(at(9), at(6), at(18)) == pytest.approx(0.25)

    @pytest.mark.parametrize(("sunrise", "sunset"), [(at(18), at(6)), (at(6), at(6))])
    def test_invalid_range(self, sunrise: int, sunset: int) -> None:
        with pytest.raises(InvalidRangeError):
            sun_position_fraction(at(12), sunrise, sunset)


class TestSunArcCoordinates:
    """Arc coordinates for the SVG marker."""

    def test_endpoints_and_vertex(self) -> None:
        assert sun_arc_coordinates(0) == pytest.approx((10, 91))
        assert sun_arc_coordinates(0.5) == pytest.approx((100, 10))
        assert sun_arc_coordinates(1) == pytest.approx((190, 91))

    def test_x_monotonic(self) -> None:
        xs = [sun_arc_coordinates(f / 20)[0] for f in range(21)]
        assert xs == sorted(xs)
