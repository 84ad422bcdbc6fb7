"""
Calendar normalizer.

Turns a sparse date -> count mapping into a gap-free run of every day in a
calendar year, then lays those days out into Sunday-first weeks for the
grid compositor.

Dates are pure Y-M-D values (datetime.date); no timestamps or time zones
are involved anywhere.
"""

import logging
from datetime import date, timedelta
from typing import Mapping, Optional

from graphghan.config import DAYS_PER_WEEK, MAX_YEAR, MIN_YEAR, YEAR_SELECTION_WINDOW
from graphghan.engine.level_classifier import classify
from graphghan.errors import InvalidYearInput
from graphghan.models.contributions import ClassifiedDay, DailyCount, YearSeries

logger = logging.getLogger(__name__)


def validate_year(year: int) -> int:
    """Raise InvalidYearInput unless ``year`` is an int in the supported range."""
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidYearInput(f"Year must be an integer, got {year!r}.")
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidYearInput(
            f"Year {year} is outside the supported range {MIN_YEAR}-{MAX_YEAR}."
        )
    return year


def parse_daily_counts(raw: Mapping[str, int]) -> dict[date, int]:
    """Convert ``{"YYYY-MM-DD": count}`` into a date-keyed dict."""
    parsed: dict[date, int] = {}
    for key, count in raw.items():
        try:
            parsed[date.fromisoformat(key)] = int(count)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid daily count entry {key!r}: {count!r}") from e
    return parsed


def normalize(year: int, sparse_counts: Mapping[date, int]) -> list[DailyCount]:
    """
    Return one DailyCount per day of ``year``, Jan 1 to Dec 31 ascending.

    Dates missing from ``sparse_counts`` get a count of 0. Entries for
    other years are ignored.
    """
    validate_year(year)

    start = date(year, 1, 1)
    n_days = (date(year, 12, 31) - start).days + 1

    ignored = sum(1 for d in sparse_counts if d.year != year)
    if ignored:
        logger.debug("Ignoring %d supplied dates outside %d", ignored, year)

    days = []
    for offset in range(n_days):
        current = start + timedelta(days=offset)
        days.append(DailyCount(date=current, count=sparse_counts.get(current, 0)))
    return days


def build_year_series(year: int, sparse_counts: Mapping[date, int]) -> YearSeries:
    """Normalize and classify one year of counts."""
    daily = normalize(year, sparse_counts)
    days = tuple(
        ClassifiedDay(date=d.date, count=d.count, level=classify(d.count))
        for d in daily
    )
    return YearSeries(
        year=year,
        days=days,
        total_count=sum(d.count for d in days),
    )


def group_into_weeks(series: YearSeries) -> list[list[Optional[ClassifiedDay]]]:
    """
    Lay the year's days into Sunday-first weeks of seven slots.

    Slots before Jan 1 in the first week and after Dec 31 in the last week
    are None. A year spans 53 weeks, or 54 for a leap year that starts on
    a Saturday.
    """
    # isoweekday: Monday=1 .. Sunday=7, so % 7 puts Sunday at 0
    lead = series.days[0].date.isoweekday() % DAYS_PER_WEEK
    slots: list[Optional[ClassifiedDay]] = [None] * lead + list(series.days)
    trail = -len(slots) % DAYS_PER_WEEK
    slots.extend([None] * trail)
    return [slots[i:i + DAYS_PER_WEEK] for i in range(0, len(slots), DAYS_PER_WEEK)]


def available_years(current_year: int, window: int = YEAR_SELECTION_WINDOW) -> list[int]:
    """Years offered for selection, newest first."""
    validate_year(current_year)
    return [y for y in range(current_year, current_year - window, -1) if y >= MIN_YEAR]
