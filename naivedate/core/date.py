"""CalendarDate class representing a naive calendar date.

This module provides the CalendarDate class for representing dates in
the proleptic Gregorian calendar between 1900-01-01 and 2100-12-31.
"""

from __future__ import annotations

from naivedate._internal.calendar import (
    days_before_month,
    days_in_month,
    is_leap_year,
    iso_week_number,
    ordinal_to_weekday,
    ordinal_to_ymd,
    ymd_to_ordinal,
)
from naivedate._internal.constants import MAX_YEAR, MIN_YEAR, MONTH_NAMES, WEEKDAY_NAMES
from naivedate._internal.validation import (
    validate_count,
    validate_day,
    validate_fields,
    validate_month,
    validate_year,
)
from naivedate.codec.canonical import format_ymd, parse_canonical
from naivedate.errors import OutOfRangeError

_MIN_ORDINAL = ymd_to_ordinal(MIN_YEAR, 1, 1)
_MAX_ORDINAL = ymd_to_ordinal(MAX_YEAR, 12, 31)


class CalendarDate:
    """A calendar date in the proleptic Gregorian calendar.

    CalendarDate is an immutable (year, month, day) value. Construction
    validates the month, the day against the month's length and the
    year against the supported range, so every instance names a real
    date. Operations return new instances.

    The day ordinal is computed once at construction and backs ordering,
    hashing and day arithmetic.

    Attributes:
        year: The year (1900-2100).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = CalendarDate(2024, 1, 15)
        >>> d.year, d.month, d.day
        (2024, 1, 15)

        >>> CalendarDate(2024, 2, 29)  # Valid leap year date
        CalendarDate(2024, 2, 29)
    """

    __slots__ = ("_year", "_month", "_day", "_ordinal")

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a CalendarDate from year, month, and day.

        Raises:
            OutOfRangeError: If year is outside 1900-2100.
            CalendarError: If a field is not an int, or month or day is not
                a real calendar value.

        Examples:
            >>> CalendarDate(2024, 2, 30)
            Traceback (most recent call last):
            ...
            CalendarError: day must be between 1 and 29 for 2024-02, got 30
        """
        validate_fields(year, month, day)
        validate_month(month)
        validate_day(year, month, day)
        validate_year(year)

        self._year = year
        self._month = month
        self._day = day
        self._ordinal = ymd_to_ordinal(year, month, day)

    @classmethod
    def parse(cls, s: str) -> CalendarDate:
        """Parse a canonical YYYY-MM-DD string.

        Raises:
            MalformedDateError: If the string is not canonical.
            CalendarError: If it names an impossible date.
            OutOfRangeError: If the year is outside 1900-2100.

        Examples:
            >>> CalendarDate.parse("2024-01-15")
            CalendarDate(2024, 1, 15)
        """
        year, month, day = parse_canonical(s)
        return cls(year, month, day)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> CalendarDate:
        """Create a CalendarDate from a day ordinal.

        Raises:
            ArgumentError: If ordinal is not an int.
            OutOfRangeError: If the ordinal falls outside
                1900-01-01 .. 2100-12-31.
        """
        validate_count(ordinal, "ordinal")
        if ordinal < _MIN_ORDINAL or ordinal > _MAX_ORDINAL:
            raise OutOfRangeError(
                f"ordinal {ordinal} is outside {MIN_YEAR}-01-01..{MAX_YEAR}-12-31"
            )
        year, month, day = ordinal_to_ymd(ordinal)
        return cls(year, month, day)

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def weekday(self) -> int:
        """Return the day of the week, Monday as 0 through Sunday as 6.

        Examples:
            >>> CalendarDate(2024, 1, 1).weekday  # Monday
            0
            >>> CalendarDate(2024, 1, 7).weekday  # Sunday
            6
        """
        return ordinal_to_weekday(self._ordinal)

    @property
    def weekday_name(self) -> str:
        """Return the English weekday name, e.g. 'Monday'."""
        return WEEKDAY_NAMES[self.weekday]

    @property
    def is_weekend(self) -> bool:
        """Return True for Saturday and Sunday."""
        return self.weekday >= 5

    @property
    def month_name(self) -> str:
        """Return the English month name, e.g. 'January'."""
        return MONTH_NAMES[self._month]

    @property
    def quarter(self) -> int:
        """Return the calendar quarter (1-4)."""
        return (self._month - 1) // 3 + 1

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366).

        Examples:
            >>> CalendarDate(2024, 12, 31).day_of_year  # Leap year
            366
            >>> CalendarDate(2023, 12, 31).day_of_year
            365
        """
        return days_before_month(self._year, self._month) + self._day

    @property
    def iso_week(self) -> int:
        """Return the ISO 8601 week number (1-53)."""
        return iso_week_number(self._year, self._month, self._day)

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self._year)

    def start_of_month(self) -> CalendarDate:
        """Return the first day of this date's month."""
        return CalendarDate(self._year, self._month, 1)

    def end_of_month(self) -> CalendarDate:
        """Return the last day of this date's month.

        Examples:
            >>> CalendarDate(2024, 2, 15).end_of_month()
            CalendarDate(2024, 2, 29)
        """
        return CalendarDate(self._year, self._month, days_in_month(self._year, self._month))

    def add_days(self, days: int) -> CalendarDate:
        """Return a new CalendarDate offset by the given number of days.

        Args:
            days: Number of days to add (can be negative).

        Raises:
            ArgumentError: If days is not an int.
            OutOfRangeError: If the result is outside the supported range.

        Examples:
            >>> CalendarDate(2024, 1, 31).add_days(1)
            CalendarDate(2024, 2, 1)
        """
        validate_count(days, "days")
        return CalendarDate.from_ordinal(self._ordinal + days)

    def add_months(self, months: int) -> CalendarDate:
        """Return a new CalendarDate offset by the given number of months.

        If the day does not exist in the target month, it is clamped to
        the last day of that month; it never rolls into the next month.

        Args:
            months: Number of months to add (can be negative).

        Raises:
            ArgumentError: If months is not an int.
            OutOfRangeError: If the result is outside the supported range.

        Examples:
            >>> CalendarDate(2024, 1, 31).add_months(1)  # Clamps to Feb 29
            CalendarDate(2024, 2, 29)

            >>> CalendarDate(2024, 3, 31).add_months(1)
            CalendarDate(2024, 4, 30)
        """
        validate_count(months, "months")
        total_months = self._year * 12 + (self._month - 1) + months
        new_year = total_months // 12
        new_month = total_months % 12 + 1

        validate_year(new_year)
        new_day = min(self._day, days_in_month(new_year, new_month))
        return CalendarDate(new_year, new_month, new_day)

    def add_years(self, years: int) -> CalendarDate:
        """Return a new CalendarDate offset by the given number of years.

        February 29 becomes February 28 when the target year is not a
        leap year; every other date keeps its month and day.

        Raises:
            ArgumentError: If years is not an int.
            OutOfRangeError: If the result is outside the supported range.

        Examples:
            >>> CalendarDate(2024, 2, 29).add_years(1)
            CalendarDate(2025, 2, 28)
        """
        validate_count(years, "years")
        new_year = self._year + years

        validate_year(new_year)
        new_day = min(self._day, days_in_month(new_year, self._month))
        return CalendarDate(new_year, self._month, new_day)

    def to_ordinal(self) -> int:
        """Return the day ordinal for this date (ordinal 1 = 0001-01-01).

        Examples:
            >>> CalendarDate(2024, 1, 1).to_ordinal()
            738886
        """
        return self._ordinal

    def to_tuple(self) -> tuple[int, int, int]:
        """Return (year, month, day)."""
        return (self._year, self._month, self._day)

    def to_iso_format(self) -> str:
        """Return the canonical YYYY-MM-DD string.

        Examples:
            >>> CalendarDate(2024, 1, 5).to_iso_format()
            '2024-01-05'
        """
        return format_ymd(self._year, self._month, self._day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._ordinal == other._ordinal

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._ordinal < other._ordinal

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._ordinal <= other._ordinal

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._ordinal > other._ordinal

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._ordinal >= other._ordinal

    def __hash__(self) -> int:
        return hash(self._ordinal)

    def __repr__(self) -> str:
        return f"CalendarDate({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["CalendarDate"]
