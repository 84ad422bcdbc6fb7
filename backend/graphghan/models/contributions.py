"""
Pydantic models for daily activity counts and normalized year series.
"""

from datetime import date, timedelta

from pydantic import BaseModel, ConfigDict, Field, model_validator

from graphghan.config import MAX_DAILY_COUNT


class DailyCount(BaseModel):
    """Raw activity count for one calendar date."""

    model_config = ConfigDict(frozen=True)

    date: date
    count: int = Field(
        ..., le=MAX_DAILY_COUNT, description="Number of contributions on this date"
    )


class ClassifiedDay(BaseModel):
    """A daily count with its intensity level (0-4) attached."""

    model_config = ConfigDict(frozen=True)

    date: date
    count: int = Field(..., le=MAX_DAILY_COUNT)
    level: int = Field(..., ge=0, le=4)


class YearSeries(BaseModel):
    """Every day of one calendar year, Jan 1 through Dec 31, in order."""

    model_config = ConfigDict(frozen=True)

    year: int
    days: tuple[ClassifiedDay, ...]
    total_count: int

    @model_validator(mode="after")
    def _check_full_year(self) -> "YearSeries":
        if not self.days:
            raise ValueError(f"Year series for {self.year} has no days.")
        if self.days[0].date != date(self.year, 1, 1):
            raise ValueError(f"Year series for {self.year} must start on Jan 1.")
        if self.days[-1].date != date(self.year, 12, 31):
            raise ValueError(f"Year series for {self.year} must end on Dec 31.")
        one_day = timedelta(days=1)
        for prev, cur in zip(self.days, self.days[1:]):
            if cur.date - prev.date != one_day:
                raise ValueError(
                    f"Year series for {self.year} has a gap or duplicate at {cur.date}."
                )
        return self

    @property
    def day_count(self) -> int:
        return len(self.days)
