"""Tests for the internal calendar arithmetic."""

from __future__ import annotations

import datetime

import pytest

from naivedate._internal.calendar import (
    days_before_month,
    days_in_month,
    days_in_year,
    doy_to_md,
    is_leap_year,
    iso_week_number,
    ordinal_to_weekday,
    ordinal_to_ymd,
    ymd_to_ordinal,
)
from naivedate._internal.constants import MAX_YEAR, MIN_YEAR


class TestLeapYear:
    """Tests for is_leap_year."""

    @pytest.mark.parametrize(
        "year, expected",
        [(2000, True), (1900, False), (2024, True), (2023, False), (2100, False), (1904, True)],
    )
    def test_known_years(self, year: int, expected: bool) -> None:
        """Test the century and quadrennial rules on known years."""
        assert is_leap_year(year) is expected

    def test_rule_over_supported_range(self) -> None:
        """Test the Gregorian rule for every supported year."""
        for year in range(MIN_YEAR, MAX_YEAR + 1):
            expected = year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)
            assert is_leap_year(year) is expected, year

    def test_days_in_year(self) -> None:
        """Test year lengths."""
        assert days_in_year(2024) == 366
        assert days_in_year(2023) == 365
        assert days_in_year(1900) == 365


class TestDaysInMonth:
    """Tests for days_in_month and days_before_month."""

    def test_fixed_lengths(self) -> None:
        """Test months whose length never changes."""
        assert days_in_month(2023, 1) == 31
        assert days_in_month(2023, 4) == 30
        assert days_in_month(2023, 12) == 31

    def test_february(self) -> None:
        """Test February in leap and common years."""
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2000, 2) == 29
        assert days_in_month(1900, 2) == 28

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_month_out_of_range(self, month: int) -> None:
        """Test that an impossible month is rejected."""
        with pytest.raises(ValueError, match="month must be 1-12"):
            days_in_month(2024, month)

    def test_days_before_month(self) -> None:
        """Test cumulative month offsets including the leap day."""
        assert days_before_month(2024, 1) == 0
        assert days_before_month(2024, 2) == 31
        assert days_before_month(2024, 3) == 60
        assert days_before_month(2023, 3) == 59
        assert days_before_month(2024, 12) == 335

    def test_doy_to_md(self) -> None:
        """Test day-of-year to month/day conversion."""
        assert doy_to_md(2024, 1) == (1, 1)
        assert doy_to_md(2024, 60) == (2, 29)
        assert doy_to_md(2023, 60) == (3, 1)
        assert doy_to_md(2024, 366) == (12, 31)

    def test_doy_past_end_of_year(self) -> None:
        """Test that a day of year beyond the year's length is rejected."""
        with pytest.raises(ValueError):
            doy_to_md(2023, 366)


class TestOrdinal:
    """Tests for ordinal conversion."""

    def test_epoch(self) -> None:
        """Test ordinal 1 is 0001-01-01."""
        assert ymd_to_ordinal(1, 1, 1) == 1
        assert ordinal_to_ymd(1) == (1, 1, 1)

    def test_matches_stdlib(self) -> None:
        """Test ordinals agree with datetime.date.toordinal."""
        for year, month, day in [(1900, 1, 1), (2000, 2, 29), (2024, 1, 15), (2100, 12, 31)]:
            expected = datetime.date(year, month, day).toordinal()
            assert ymd_to_ordinal(year, month, day) == expected

    def test_cycle_boundaries(self) -> None:
        """Test the last day of 4- and 400-year cycles."""
        assert ordinal_to_ymd(ymd_to_ordinal(2000, 12, 31)) == (2000, 12, 31)
        assert ordinal_to_ymd(ymd_to_ordinal(2004, 12, 31)) == (2004, 12, 31)
        assert ordinal_to_ymd(ymd_to_ordinal(2001, 1, 1)) == (2001, 1, 1)

    def test_roundtrip_supported_range(self) -> None:
        """Test every date from 1900 to 2100 survives a round trip."""
        first = ymd_to_ordinal(MIN_YEAR, 1, 1)
        last = ymd_to_ordinal(MAX_YEAR, 12, 31)
        expected = datetime.date(MIN_YEAR, 1, 1)
        for ordinal in range(first, last + 1):
            ymd = ordinal_to_ymd(ordinal)
            assert ymd == (expected.year, expected.month, expected.day)
            assert ymd_to_ordinal(*ymd) == ordinal
            expected += datetime.timedelta(days=1)

    def test_ordinal_must_be_positive(self) -> None:
        """Test ordinals before year 1 are rejected."""
        with pytest.raises(ValueError, match="ordinal must be >= 1"):
            ordinal_to_ymd(0)


class TestWeekdayAndIsoWeek:
    """Tests for ordinal_to_weekday and iso_week_number."""

    def test_known_weekdays(self) -> None:
        """Test weekdays of known dates (Monday=0)."""
        assert ordinal_to_weekday(ymd_to_ordinal(2024, 1, 1)) == 0
        assert ordinal_to_weekday(ymd_to_ordinal(2024, 1, 6)) == 5
        assert ordinal_to_weekday(ymd_to_ordinal(2024, 1, 7)) == 6
        assert ordinal_to_weekday(ymd_to_ordinal(1900, 1, 1)) == 0

    def test_weekday_matches_stdlib(self) -> None:
        """Test weekdays agree with datetime for a sample across the range."""
        for year in range(MIN_YEAR, MAX_YEAR + 1, 7):
            for month in (1, 2, 3, 7, 12):
                d = datetime.date(year, month, 28)
                assert ordinal_to_weekday(ymd_to_ordinal(year, month, 28)) == d.weekday()

    @pytest.mark.parametrize(
        "ymd, week",
        [
            ((2024, 1, 1), 1),
            ((2021, 1, 3), 53),
            ((2021, 1, 4), 1),
            ((2020, 12, 31), 53),
            ((2024, 12, 30), 1),
            ((2023, 1, 1), 52),
        ],
    )
    def test_iso_week_edges(self, ymd: tuple[int, int, int], week: int) -> None:
        """Test weeks that straddle a year boundary."""
        assert iso_week_number(*ymd) == week

    def test_iso_week_matches_stdlib(self) -> None:
        """Test ISO weeks agree with datetime.isocalendar."""
        for year in (1900, 1999, 2004, 2020, 2021, 2100):
            d = datetime.date(year, 1, 1)
            while d.year == year:
                assert iso_week_number(d.year, d.month, d.day) == d.isocalendar()[1]
                d += datetime.timedelta(days=1)
