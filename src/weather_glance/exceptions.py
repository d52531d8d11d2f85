"""Error types raised by weather-glance.

Value-level failures are raised to the caller and never terminate the
process on their own. The CLI catches ``WeatherGlanceError`` and reports it.
"""

from __future__ import annotations


class WeatherGlanceError(Exception):
    """Base class for all weather-glance errors."""


class MissingFieldError(WeatherGlanceError):
    """A required field is absent from an API record or forecast sample."""

    def __init__(self, field: str, timestamp: int | None = None) -> None:
        self.field = field
        self.timestamp = timestamp
        where = f" (sample at {timestamp})" if timestamp is not None else ""
        super().__init__(f"Missing required field '{field}'{where}")


class EmptyGroupError(WeatherGlanceError):
    """A daily group contained no samples."""

    def __init__(self, date_key: str) -> None:
        self.date_key = date_key
        super().__init__(f"No forecast samples for {date_key}")


class InvalidRangeError(WeatherGlanceError):
    """Sunset is not after sunrise."""

    def __init__(self, sunrise: int, sunset: int) -> None:
        self.sunrise = sunrise
        self.sunset = sunset
        super().__init__(f"Sunset ({sunset}) must be after sunrise ({sunrise})")


class LocationNotFoundError(WeatherGlanceError):
    """Geocoding returned no match for the requested place."""


class AirQualityUnavailableError(WeatherGlanceError):
    """The air-quality feed answered but carried no usable index."""
