"""
Tests for the calendar normalizer: full-year coverage, zero fill, year
validation and Sunday-first week grouping.
"""

from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from graphghan.engine.calendar_normalizer import (
    available_years,
    build_year_series,
    group_into_weeks,
    normalize,
    parse_daily_counts,
    validate_year,
)
from graphghan.errors import InvalidYearInput
from graphghan.models.contributions import ClassifiedDay, YearSeries


class TestNormalize:
    @pytest.mark.parametrize("year,expected", [
        (2023, 365),
        (2024, 366),
        (1900, 365),  # divisible by 100, not a leap year
        (2000, 366),  # divisible by 400
        (1000, 365),
        (9999, 365),
    ])
    def test_empty_input_covers_whole_year(self, year, expected):
        days = normalize(year, {})
        assert len(days) == expected
        assert days[0].date == date(year, 1, 1)
        assert days[-1].date == date(year, 12, 31)
        assert all(d.count == 0 for d in days)

    def test_sorted_without_gaps(self):
        days = normalize(2024, {})
        for prev, cur in zip(days, days[1:]):
            assert cur.date - prev.date == timedelta(days=1)

    def test_feb_29_only_in_leap_years(self):
        assert date(2024, 2, 29) in {d.date for d in normalize(2024, {})}
        assert all(not (d.date.month == 2 and d.date.day == 29) for d in normalize(2023, {}))

    def test_counts_copied_and_gaps_zero_filled(self):
        sparse = {date(2023, 3, 1): 4, date(2023, 12, 31): 11}
        days = {d.date: d.count for d in normalize(2023, sparse)}
        assert days[date(2023, 3, 1)] == 4
        assert days[date(2023, 12, 31)] == 11
        assert days[date(2023, 3, 2)] == 0
        assert sum(days.values()) == 15

    def test_other_years_ignored(self):
        sparse = {date(2022, 12, 31): 9, date(2024, 1, 1): 9, date(2023, 6, 1): 2}
        days = normalize(2023, sparse)
        assert len(days) == 365
        assert sum(d.count for d in days) == 2


class TestValidateYear:
    @pytest.mark.parametrize("year", [0, -1, 999, 10000, 123456])
    def test_out_of_range_rejected(self, year):
        with pytest.raises(InvalidYearInput, match="outside the supported range"):
            normalize(year, {})

    @pytest.mark.parametrize("year", ["2024", 2024.0, None, True])
    def test_non_integer_rejected(self, year):
        with pytest.raises(InvalidYearInput, match="must be an integer"):
            validate_year(year)

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate_year(0)


class TestParseDailyCounts:
    def test_iso_keys(self):
        parsed = parse_daily_counts({"2024-07-04": 7, "2024-01-01": 0})
        assert parsed == {date(2024, 7, 4): 7, date(2024, 1, 1): 0}

    def test_bad_date_raises(self):
        with pytest.raises(ValueError, match="Invalid daily count entry"):
            parse_daily_counts({"07/04/2024": 7})

    def test_bad_count_raises(self):
        with pytest.raises(ValueError, match="Invalid daily count entry"):
            parse_daily_counts({"2024-07-04": "lots"})

    def test_parse_error_keeps_cause(self):
        with pytest.raises(ValueError) as exc_info:
            parse_daily_counts({"2024-02-30": 1})
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestYearSeries:
    def test_levels_and_total(self):
        series = build_year_series(2024, {date(2024, 7, 4): 7, date(2024, 1, 2): 1})
        assert series.year == 2024
        assert series.day_count == 366
        assert series.total_count == 8
        by_date = {d.date: d for d in series.days}
        assert by_date[date(2024, 7, 4)].level == 3
        assert by_date[date(2024, 1, 2)].level == 1
        assert by_date[date(2024, 1, 3)].level == 0

    def test_gap_rejected(self):
        days = build_year_series(2023, {}).days
        with pytest.raises(ValidationError, match="gap or duplicate"):
            YearSeries(year=2023, days=days[:10] + days[11:], total_count=0)

    def test_duplicate_rejected(self):
        days = build_year_series(2023, {}).days
        with pytest.raises(ValidationError, match="gap or duplicate"):
            YearSeries(year=2023, days=days[:10] + days[9:], total_count=0)

    def test_partial_year_rejected(self):
        days = build_year_series(2023, {}).days
        with pytest.raises(ValidationError, match="must end on Dec 31"):
            YearSeries(year=2023, days=days[:-1], total_count=0)

    def test_frozen(self):
        series = build_year_series(2023, {})
        with pytest.raises(ValidationError):
            series.total_count = 5


class TestGroupIntoWeeks:
    def test_2024_starts_monday(self):
        weeks = group_into_weeks(build_year_series(2024, {}))
        assert len(weeks) == 53
        assert all(len(w) == 7 for w in weeks)
        # Jan 1 2024 is a Monday: Sunday slot is padding
        assert weeks[0][0] is None
        assert weeks[0][1].date == date(2024, 1, 1)

    def test_sunday_start_has_no_lead_padding(self):
        # Jan 1 2023 is a Sunday
        weeks = group_into_weeks(build_year_series(2023, {}))
        assert weeks[0][0].date == date(2023, 1, 1)
        assert len(weeks) == 53

    def test_leap_year_starting_saturday_spills_into_54th_week(self):
        # Jan 1 2000 is a Saturday
        weeks = group_into_weeks(build_year_series(2000, {}))
        assert len(weeks) == 54
        assert weeks[53][0].date == date(2000, 12, 31)
        assert weeks[53][1:] == [None] * 6

    def test_every_day_appears_once_in_order(self):
        series = build_year_series(2022, {})
        flat = [d for w in group_into_weeks(series) for d in w if d is not None]
        assert [d.date for d in flat] == [d.date for d in series.days]

    def test_weekday_rows_are_sunday_first(self):
        for week in group_into_weeks(build_year_series(2024, {})):
            for day_index, day in enumerate(week):
                if isinstance(day, ClassifiedDay):
                    assert day.date.isoweekday() % 7 == day_index


class TestAvailableYears:
    def test_ten_years_newest_first(self):
        assert available_years(2026) == list(range(2026, 2016, -1))

    def test_custom_window(self):
        assert available_years(2024, window=3) == [2024, 2023, 2022]

    def test_clipped_at_minimum_year(self):
        assert available_years(1002) == [1002, 1001, 1000]

    def test_invalid_current_year(self):
        with pytest.raises(InvalidYearInput):
            available_years(0)
