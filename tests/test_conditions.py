"""Tests for condition-code families."""

from __future__ import annotations

import pytest

from weather_glance.conditions import ConditionFamily, condition_family


@pytest.mark.parametrize(
    ("code", "family"),
    [
        (200, ConditionFamily.THUNDERSTORM),
        (232, ConditionFamily.THUNDERSTORM),
        (300, ConditionFamily.DRIZZLE),
        (500, ConditionFamily.RAIN),
        (531, ConditionFamily.RAIN),
        (600, ConditionFamily.SNOW),
        (701, ConditionFamily.ATMOSPHERE),
        (781, ConditionFamily.ATMOSPHERE),
        (800, ConditionFamily.CLEAR),
        (801, ConditionFamily.CLOUDS),
        (804, ConditionFamily.CLOUDS),
        (404, ConditionFamily.UNKNOWN),
        (0, ConditionFamily.UNKNOWN),
    ],
)
def test_condition_family(code: int, family: ConditionFamily) -> None:
    assert condition_family(code) is family
