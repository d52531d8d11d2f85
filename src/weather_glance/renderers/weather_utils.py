"""Weather presentation helpers for renderers.

Pure conversion functions with no external dependencies.
"""

from __future__ import annotations

import re

from weather_glance.conditions import ConditionFamily, condition_family

# Font Awesome icon per condition family (day variant)
_FAMILY_ICONS: dict[ConditionFamily, str] = {
    ConditionFamily.THUNDERSTORM: "fa-bolt",
    ConditionFamily.DRIZZLE: "fa-cloud-rain",
    ConditionFamily.RAIN: "fa-cloud-rain",
    ConditionFamily.SNOW: "fa-snowflake",
    ConditionFamily.ATMOSPHERE: "fa-smog",
}

# Page background class per condition family
_FAMILY_BACKGROUNDS: dict[ConditionFamily, str] = {
    ConditionFamily.THUNDERSTORM: "stormy",
    ConditionFamily.DRIZZLE: "rainy",
    ConditionFamily.RAIN: "rainy",
    ConditionFamily.SNOW: "snowy",
    ConditionFamily.ATMOSPHERE: "cloudy",
    ConditionFamily.CLOUDS: "cloudy",
}


def is_night_icon(icon: str) -> bool:
    """OpenWeatherMap icon codes end in ``n`` at night (e.g. ``01n``)."""
    return icon.endswith("n")


def weather_icon_class(code: int, icon: str = "") -> str:
    """Font Awesome class for a condition code, e.g. ``"fa-cloud-sun"``."""
    night = is_night_icon(icon)
    if code == 800:
        return "fa-moon" if night else "fa-sun"
    if code in (801, 802):
        return "fa-cloud-moon" if night else "fa-cloud-sun"
    if code > 802:
        return "fa-cloud"
    return _FAMILY_ICONS.get(condition_family(code), "fa-question")


def background_class(code: int, icon: str = "") -> str:
    """Background theme class for the current condition.

    Returns ``""`` for codes outside the known families.
    """
    family = condition_family(code)
    if family is ConditionFamily.CLEAR:
        return "clear-night" if is_night_icon(icon) else "clear-day"
    return _FAMILY_BACKGROUNDS.get(family, "")


def title_case(text: str) -> str:
    """Capitalize the first letter of each word: ``"light rain"`` -> ``"Light Rain"``."""
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), text)
