"""Where the sun sits on the dashboard's sunrise-to-sunset arc.

The arc is drawn in a 200-wide SVG viewBox: x runs from 10 (sunrise) to 190
(sunset) and y follows the parabola ``y = 0.01 * (x - 100)**2 + 10``, whose
vertex (100, 10) is the top of the arc at solar noon.
"""

from __future__ import annotations

from weather_glance.exceptions import InvalidRangeError

ARC_X_START = 10.0
ARC_X_SPAN = 180.0
ARC_VERTEX_X = 100.0
ARC_VERTEX_Y = 10.0
ARC_CURVATURE = 0.01


def sun_position_fraction(now: int, sunrise: int, sunset: int) -> float:
    """Fraction of daylight elapsed at ``now``, clamped to [0, 1].

    All arguments are Unix epoch seconds.

    Raises:
        InvalidRangeError: ``sunset`` is not after ``sunrise``.
    """
    if sunset <= sunrise:
        raise InvalidRangeError(sunrise, sunset)
    if now < sunrise:
        return 0.0
    if now > sunset:
        return 1.0
    return (now - sunrise) / (sunset - sunrise)


def sun_arc_coordinates(fraction: float) -> tuple[float, float]:
    """SVG ``(cx, cy)`` of the sun marker for a daylight fraction."""
    x = ARC_X_START + fraction * ARC_X_SPAN
    y = ARC_CURVATURE * (x - ARC_VERTEX_X) ** 2 + ARC_VERTEX_Y
    return x, y
