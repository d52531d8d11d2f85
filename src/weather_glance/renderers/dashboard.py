"""Dashboard section renderers.

Each ``build_*_html`` function takes parts of a ``DashboardSnapshot`` and
returns one HTML fragment. Times are shown in the location's own timezone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_glance.analysis.classify import (
    aqi_color,
    aqi_label,
    aqi_scale_level,
    beaufort_name,
    beaufort_scale,
    pollutant_color,
    uv_color,
    uv_indicator_percent,
    uv_label,
    wind_direction,
)
from weather_glance.analysis.simulate import round_half_up, simulate_uv_index
from weather_glance.analysis.sun import sun_arc_coordinates, sun_position_fraction
from weather_glance.datasources.waqi.client import POLLUTANT_KEYS
from weather_glance.exceptions import InvalidRangeError
from weather_glance.renderers import render_template
from weather_glance.renderers.date_utils import (
    day_name,
    format_time,
    hour_label,
    local_datetime,
    short_date,
)
from weather_glance.renderers.weather_utils import title_case, weather_icon_class

if TYPE_CHECKING:
    from weather_glance.schemas import (
        AirQualityReading,
        CurrentConditions,
        DailySummary,
        ForecastSample,
    )

HOURLY_STEPS = 8  # 24 hours of 3-hour samples
WEEKLY_DAYS = 5

POLLUTANT_NAMES = {"pm25": "PM2.5", "pm10": "PM10", "o3": "O₃", "no2": "NO₂"}


def temperature_trend_path(temps: list[float]) -> str:
    """SVG path data for the hourly temperature line.

    x spans 0-100 across the samples; y keeps the line inside 10-90% of the
    height with the warmest sample at the top. Fewer than two points give
    an empty path.
    """
    if len(temps) < 2:
        return ""
    low, high = min(temps), max(temps)
    spread = high - low
    commands = []
    for i, temp in enumerate(temps):
        x = i / (len(temps) - 1) * 100
        normalized = 0.5 if spread == 0 else (temp - low) / spread
        y = 100 - (normalized * 80 + 10)
        commands.append(f"{'M' if i == 0 else 'L'} {x:.2f},{y:.2f}")
    return " ".join(commands)


def build_current_html(current: CurrentConditions, daily: list[DailySummary]) -> str:
    """Headline temperature, condition, feels-like and today's high/low.

    Today's range comes from the first daily summary when there is one,
    otherwise from the current-weather min/max.
    """
    if daily:
        high, low = daily[0].temperature_max, daily[0].temperature_min
    else:
        high, low = current.temp_max, current.temp_min

    return render_template(
        "current.html.j2",
        temperature=round_half_up(current.temperature),
        condition=title_case(current.description),
        feels_like=round_half_up(current.feels_like),
        high=round_half_up(high),
        low=round_half_up(low),
        icon_class=weather_icon_class(current.weather_code, current.icon),
    )


def build_hourly_html(samples: list[ForecastSample], offset: int = 0) -> str:
    """Next 24 hours: time, temperature, icon, Beaufort force, simulated UV."""
    upcoming = samples[:HOURLY_STEPS]
    if not upcoming:
        return "<p>No forecast data available.</p>"

    hours = []
    for sample in upcoming:
        uv = simulate_uv_index(local_datetime(sample.timestamp, offset).hour, sample.weather_code)
        hours.append(
            {
                "time": hour_label(sample.timestamp, offset),
                "temp": round_half_up(sample.temperature),
                "icon_class": weather_icon_class(sample.weather_code, sample.icon),
                "wind_force": beaufort_scale(sample.wind_speed),
                "uv": int(uv),
                "uv_color": uv_color(uv),
                "uv_width": f"{uv_indicator_percent(uv):.0f}",
            }
        )

    return render_template(
        "hourly.html.j2",
        hours=hours,
        trend_path=temperature_trend_path([s.temperature for s in upcoming]),
    )


def build_weekly_html(daily: list[DailySummary], offset: int = 0) -> str:
    """The days after today (up to five) with range, icon and rain chance."""
    upcoming = daily[1 : WEEKLY_DAYS + 1]
    if not upcoming:
        return "<p>No daily forecast available.</p>"

    days = [
        {
            "name": day_name(day.representative_timestamp, offset),
            "date": short_date(day.representative_timestamp, offset),
            "high": round_half_up(day.temperature_max),
            "low": round_half_up(day.temperature_min),
            "icon_class": weather_icon_class(day.dominant_weather_code, day.dominant_icon),
            "rain_chance": round_half_up(day.mean_precipitation_probability * 100),
        }
        for day in upcoming
    ]
    return render_template("weekly.html.j2", days=days)


def build_details_html(current: CurrentConditions) -> str:
    """Feels-like, wind, humidity, UV, visibility and pressure tiles.

    Wind carries its Beaufort name and UV its band label.
    """
    local_hour = local_datetime(current.timestamp, current.timezone_offset).hour
    uv = simulate_uv_index(local_hour, current.weather_code)
    visibility = (
        f"{current.visibility_m / 1000:.1f} km" if current.visibility_m is not None else "N/A"
    )
    return render_template(
        "details.html.j2",
        feels_like=round_half_up(current.feels_like),
        wind=f"{wind_direction(current.wind_degrees)} {round_half_up(current.wind_speed)} m/s",
        wind_name=beaufort_name(current.wind_speed),
        humidity=round_half_up(current.humidity),
        uv=int(uv),
        uv_color=uv_color(uv),
        uv_label=uv_label(uv),
        visibility=visibility,
        pressure=round_half_up(current.pressure),
    )


def build_air_quality_html(reading: AirQualityReading) -> str:
    """AQI headline, six-step scale, and pollutant tiles (``N/A`` when missing)."""
    pollutants = []
    for key in POLLUTANT_KEYS:
        value = reading.pollutants.get(key)
        pollutants.append(
            {
                "name": POLLUTANT_NAMES[key],
                "value": "N/A" if value is None else round_half_up(value),
                "color": None if value is None else pollutant_color(key, value),
            }
        )

    return render_template(
        "air_quality.html.j2",
        aqi=reading.index,
        label=aqi_label(reading.index),
        color=aqi_color(reading.index),
        scale_level=aqi_scale_level(reading.index),
        pollutants=pollutants,
        simulated=reading.simulated,
        station=reading.station,
    )


def build_sun_html(current: CurrentConditions) -> str:
    """Sunrise/sunset times and the sun marker on the daylight arc.

    The marker is omitted when sunset is not after sunrise (polar day or
    night, where the API reports degenerate times).
    """
    offset = current.timezone_offset
    try:
        fraction = sun_position_fraction(current.timestamp, current.sunrise, current.sunset)
    except InvalidRangeError:
        position = None
    else:
        x, y = sun_arc_coordinates(fraction)
        position = {"cx": f"{x:.1f}", "cy": f"{y:.1f}"}

    return render_template(
        "sun.html.j2",
        sunrise=format_time(current.sunrise, offset),
        sunset=format_time(current.sunset, offset),
        position=position,
    )
