"""
Grid compositor.

Places one year's classified days into an 18 x 110 grid of squares:

  - every square starts at the border level
  - week w, weekday d fills the 2x2 block with its top-left corner at
    row 2 + 2*d, col 2 + 2*w (inside the 2-square border band)
  - only weeks 0-52 and weekdays 0-6 are placed; anything beyond is dropped

Week slots with no day (before Jan 1 / after Dec 31) are knitted in the
level-0 color without a source date. Weeks the caller does not supply at
all keep the border level.
"""

import logging
from datetime import date
from typing import Optional, Sequence

import numpy as np

from graphghan.config import (
    BORDER_LEVEL,
    BORDER_WIDTH,
    DAY_BLOCK_SIZE,
    DAYS_PER_WEEK,
    GRID_COLS,
    GRID_ROWS,
    WEEKS_PER_YEAR,
)
from graphghan.engine.calendar_normalizer import group_into_weeks
from graphghan.models.contributions import ClassifiedDay, YearSeries
from graphghan.models.pattern import NO_VALUE, YearGrid

logger = logging.getLogger(__name__)


def block_origin(week_index: int, day_index: int) -> tuple[int, int]:
    """Top-left (row, col) of the 2x2 block for a week/weekday pair."""
    return (
        BORDER_WIDTH + DAY_BLOCK_SIZE * day_index,
        BORDER_WIDTH + DAY_BLOCK_SIZE * week_index,
    )


def compose_weeks(
    year: int,
    weeks: Sequence[Sequence[Optional[ClassifiedDay]]],
    total_count: int,
) -> YearGrid:
    """Build a YearGrid from week-grouped days."""
    levels = np.full((GRID_ROWS, GRID_COLS), BORDER_LEVEL, dtype=np.int8)
    counts = np.full((GRID_ROWS, GRID_COLS), NO_VALUE, dtype=np.int64)
    day_offsets = np.full((GRID_ROWS, GRID_COLS), NO_VALUE, dtype=np.int16)

    jan1 = date(year, 1, 1)
    dropped = 0
    for week_index, week in enumerate(weeks):
        if week_index >= WEEKS_PER_YEAR:
            dropped += sum(1 for day in week if day is not None)
            continue
        for day_index, day in enumerate(week):
            if day_index >= DAYS_PER_WEEK:
                if day is not None:
                    dropped += 1
                continue
            r, c = block_origin(week_index, day_index)
            block = (slice(r, r + DAY_BLOCK_SIZE), slice(c, c + DAY_BLOCK_SIZE))
            if day is None:
                levels[block] = 0
                continue
            levels[block] = day.level
            counts[block] = day.count
            day_offsets[block] = (day.date - jan1).days

    if dropped:
        logger.debug("Dropped %d days of %d that do not fit in %d weeks", dropped, year, WEEKS_PER_YEAR)

    return YearGrid(
        year=year,
        total_count=total_count,
        levels=levels,
        counts=counts,
        day_offsets=day_offsets,
    )


def compose_year_grid(series: YearSeries) -> YearGrid:
    """Compose the grid for a normalized year."""
    return compose_weeks(series.year, group_into_weeks(series), series.total_count)
