"""Collapse 3-hour forecast samples into one summary per calendar day.

The OpenWeatherMap forecast endpoint returns 40 samples (5 days x 8 steps).
Samples are grouped by their UTC calendar date; each group becomes a
``DailySummary`` with the day's temperature range, its most frequent weather
code, and the mean probability of precipitation.

Grouping is by date key, so the result does not depend on the order samples
arrive in, with two exceptions:
  - the representative timestamp is the first sample seen for that day;
  - when two codes are equally frequent, the one seen first wins.
"""

from __future__ import annotations

import statistics
from collections import Counter
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from weather_glance.exceptions import EmptyGroupError, MissingFieldError
from weather_glance.schemas import DailySummary

if TYPE_CHECKING:
    from collections.abc import Iterable

    from weather_glance.schemas import ForecastSample


def date_key(timestamp: int) -> str:
    """UTC calendar date of a Unix timestamp as ``YYYY-MM-DD``."""
    return datetime.fromtimestamp(timestamp, tz=UTC).date().isoformat()


def group_by_day(samples: Iterable[ForecastSample]) -> dict[str, list[ForecastSample]]:
    """Partition samples by UTC date, keeping arrival order within each day."""
    groups: dict[str, list[ForecastSample]] = {}
    for sample in samples:
        groups.setdefault(date_key(sample.timestamp), []).append(sample)
    return groups


def dominant_code(codes: list[int]) -> int:
    """Most frequent code; ties go to the code that appeared first.

    ``Counter`` keeps first-insertion order and ``max`` returns the first
    maximal element, which together give the first-seen tie-break.
    """
    counts = Counter(codes)
    return max(counts, key=lambda code: counts[code])


def summarize_day(key: str, samples: list[ForecastSample]) -> DailySummary:
    """Build the summary for a single day's samples.

    Raises:
        EmptyGroupError: ``samples`` is empty.
        MissingFieldError: a sample has no precipitation probability.
    """
    if not samples:
        raise EmptyGroupError(key)

    probabilities: list[float] = []
    for sample in samples:
        if sample.precipitation_probability is None:
            raise MissingFieldError("precipitation_probability", sample.timestamp)
        probabilities.append(sample.precipitation_probability)

    temps = [s.temperature for s in samples]
    code = dominant_code([s.weather_code for s in samples])
    exemplar = next(s for s in samples if s.weather_code == code)

    return DailySummary(
        date_key=key,
        representative_timestamp=samples[0].timestamp,
        temperature_min=min(temps),
        temperature_max=max(temps),
        dominant_weather_code=code,
        mean_precipitation_probability=statistics.mean(probabilities),
        dominant_description=exemplar.description,
        dominant_icon=exemplar.icon,
    )


def aggregate_daily(samples: Iterable[ForecastSample]) -> list[DailySummary]:
    """Aggregate forecast samples into daily summaries, oldest day first.

    Args:
        samples: Forecast samples in any order.

    Returns:
        One ``DailySummary`` per distinct UTC date, sorted ascending by
        representative timestamp. Empty input gives an empty list.

    Raises:
        MissingFieldError: a sample has no precipitation probability.
    """
    summaries = [summarize_day(key, group) for key, group in group_by_day(samples).items()]
    return sorted(summaries, key=lambda s: s.representative_timestamp)
