"""
Multi-year stacker and the end-to-end pattern builder.

Each year keeps its own 18 x 110 frame; stacking only fixes the order
(newest first) and the combined total. Putting the frames on top of each
other is left to the renderers.
"""

import logging
from datetime import date
from typing import Iterable, Mapping

from graphghan.engine.calendar_normalizer import build_year_series, validate_year
from graphghan.engine.grid_compositor import compose_year_grid
from graphghan.errors import EmptyYearSetError
from graphghan.models.pattern import Pattern, YearGrid

logger = logging.getLogger(__name__)


def stack(years: Iterable[int], per_year_grids: Mapping[int, YearGrid]) -> Pattern:
    """Order the requested years' grids newest first and total their counts."""
    ordered = sorted(set(years), reverse=True)
    if not ordered:
        raise EmptyYearSetError("At least one year must be selected.")

    missing = [y for y in ordered if y not in per_year_grids]
    if missing:
        raise ValueError(f"No grid composed for year(s): {missing}")

    grids = tuple(per_year_grids[y] for y in ordered)
    return Pattern(
        years=tuple(ordered),
        year_grids=grids,
        total_count=sum(g.total_count for g in grids),
    )


def build_pattern(
    years: Iterable[int],
    counts_by_year: Mapping[int, Mapping[date, int]],
) -> Pattern:
    """
    Run the whole pipeline: normalize, classify and compose each year,
    then stack.

    Args:
        years: Requested years, any order, duplicates ignored.
        counts_by_year: Sparse daily counts per year. Years with no entry
            produce an all-zero grid.
    """
    requested = sorted(set(years), reverse=True)
    if not requested:
        raise EmptyYearSetError("At least one year must be selected.")
    for year in requested:
        validate_year(year)

    grids = {
        year: compose_year_grid(build_year_series(year, counts_by_year.get(year, {})))
        for year in requested
    }
    pattern = stack(requested, grids)
    logger.info("Composed pattern for years %s (%d total)", list(pattern.years), pattern.total_count)
    return pattern
