"""
Grid and pattern models.

A YearGrid stores its squares in three fixed-size numpy arrays indexed by
(row, col) instead of a nested list of objects. Square records are built
on demand when a caller wants to look at a single cell.
"""

from datetime import date, timedelta
from typing import Iterator, Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from graphghan.config import BORDER_LEVEL, GRID_COLS, GRID_ROWS, LEVEL_COUNT

NO_VALUE = -1


def _frozen_copy(name: str, arr: np.ndarray) -> np.ndarray:
    """Private read-only copy of a grid array; the caller keeps its own."""
    shape = (GRID_ROWS, GRID_COLS)
    if arr.shape != shape:
        raise ValueError(f"{name} must have shape {shape}, got {arr.shape}.")
    copied = np.array(arr, copy=True)
    copied.flags.writeable = False
    return copied


class Square(BaseModel):
    """One cell of the output grid."""

    model_config = ConfigDict(frozen=True)

    row: int
    col: int
    level: int = Field(..., ge=0, le=BORDER_LEVEL)
    is_border: bool
    source_date: Optional[date] = None
    source_count: Optional[int] = None


class YearGrid:
    """One year's 18 x 110 square grid, border included. Read-only."""

    __slots__ = ("year", "total_count", "levels", "counts", "day_offsets")

    def __init__(
        self,
        year: int,
        total_count: int,
        levels: np.ndarray,
        counts: np.ndarray,
        day_offsets: np.ndarray,
    ):
        self.year = year
        self.total_count = total_count
        self.levels = _frozen_copy("levels", levels)
        self.counts = _frozen_copy("counts", counts)
        self.day_offsets = _frozen_copy("day_offsets", day_offsets)

    @property
    def rows(self) -> int:
        return GRID_ROWS

    @property
    def cols(self) -> int:
        return GRID_COLS

    @property
    def square_count(self) -> int:
        return GRID_ROWS * GRID_COLS

    def level_at(self, row: int, col: int) -> int:
        return int(self.levels[row, col])

    def square(self, row: int, col: int) -> Square:
        level = int(self.levels[row, col])
        offset = int(self.day_offsets[row, col])
        count = int(self.counts[row, col])
        return Square(
            row=row,
            col=col,
            level=level,
            is_border=level == BORDER_LEVEL,
            source_date=None if offset == NO_VALUE else date(self.year, 1, 1) + timedelta(days=offset),
            source_count=None if count == NO_VALUE else count,
        )

    def squares(self) -> Iterator[Square]:
        """Yield every square in row-major order."""
        for row in range(GRID_ROWS):
            for col in range(GRID_COLS):
                yield self.square(row, col)

    def border_square_count(self) -> int:
        return int(np.count_nonzero(self.levels == BORDER_LEVEL))

    def data_square_count(self) -> int:
        return self.square_count - self.border_square_count()

    def level_histogram(self) -> dict[int, int]:
        """Number of squares per level, border included."""
        counts = np.bincount(self.levels.ravel(), minlength=LEVEL_COUNT + 1)
        return {level: int(n) for level, n in enumerate(counts)}

    def to_rows(self) -> list[list[int]]:
        return self.levels.tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, YearGrid):
            return NotImplemented
        return (
            self.year == other.year
            and self.total_count == other.total_count
            and np.array_equal(self.levels, other.levels)
            and np.array_equal(self.counts, other.counts)
            and np.array_equal(self.day_offsets, other.day_offsets)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"YearGrid(year={self.year}, total_count={self.total_count})"


class Pattern(BaseModel):
    """Stacked year grids, most recent year first."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    years: tuple[int, ...]
    year_grids: tuple[YearGrid, ...]
    total_count: int

    def grid_for(self, year: int) -> YearGrid:
        for grid in self.year_grids:
            if grid.year == year:
                return grid
        raise KeyError(year)


class PatternMeasurements(BaseModel):
    """Square counts and finished-size estimate for a stacked pattern."""

    year_count: int
    width_squares: int
    height_squares: int
    total_squares: int
    data_squares: int
    border_squares: int
    squares_per_level: dict[int, int]
    square_size_in: float
    finished_width_in: float
    finished_height_in: float
    finished_width_cm: float
    finished_height_cm: float


class PatternExport(BaseModel):
    """Downloadable instructions document."""

    filename: str
    content: str


# ── API input/output ──


class PatternRequest(BaseModel):
    """Input for generating a pattern from per-year daily counts."""

    username: str = Field(
        default="",
        description="Opaque account name, copied into titles and filenames",
    )
    years: list[int] = Field(
        ...,
        description="Years to include; output order is always newest first",
        examples=[[2023, 2022]],
    )
    contributions: dict[int, dict[str, int]] = Field(
        default_factory=dict,
        description="Per-year mapping of ISO date (YYYY-MM-DD) to daily count",
    )
    theme: str = Field(
        default="light",
        description="Theme key; unknown keys fall back to the default theme",
    )


class ExportRequest(PatternRequest):
    """Input for the text and PDF export routes."""

    username: str = Field(
        ...,
        min_length=1,
        description="Opaque account name; titles the document and names the file",
    )


class YearGridOutput(BaseModel):
    """One year's grid as plain level rows."""

    year: int
    total_count: int
    rows: int
    cols: int
    levels: list[list[int]]


class PatternResponse(BaseModel):
    """Composed pattern ready for rendering."""

    username: str
    years: list[int]
    total_count: int
    theme: str
    year_grids: list[YearGridOutput]
    measurements: PatternMeasurements
