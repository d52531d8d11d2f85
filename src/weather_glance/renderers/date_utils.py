"""Shared time-formatting helpers for renderers.

Timestamps are Unix epoch seconds; ``offset`` is the location's UTC offset
in seconds as reported by OpenWeatherMap (``timezone`` field).
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone


def local_datetime(timestamp: int, offset: int = 0) -> datetime:
    """Aware datetime at the location for a Unix timestamp."""
    tz = timezone(timedelta(seconds=offset)) if offset else UTC
    return datetime.fromtimestamp(timestamp, tz=tz)


def format_time(timestamp: int, offset: int = 0) -> str:
    """12-hour clock time, e.g. ``6:05 AM``."""
    dt = local_datetime(timestamp, offset)
    hours = dt.hour % 12 or 12
    suffix = "PM" if dt.hour >= 12 else "AM"
    return f"{hours}:{dt.minute:02d} {suffix}"


def hour_label(timestamp: int, offset: int = 0) -> str:
    """Hour-only label, e.g. ``12 AM``, ``3 PM``."""
    hour = local_datetime(timestamp, offset).hour
    suffix = "PM" if hour >= 12 else "AM"
    return f"{hour % 12 or 12} {suffix}"


def day_name(timestamp: int, offset: int = 0) -> str:
    """Abbreviated weekday, e.g. ``Mon``."""
    return local_datetime(timestamp, offset).strftime("%a")


def short_date(timestamp: int, offset: int = 0) -> str:
    """Month and day, e.g. ``Feb 4``."""
    dt = local_datetime(timestamp, offset)
    return f"{dt.strftime('%b')} {dt.day}"
