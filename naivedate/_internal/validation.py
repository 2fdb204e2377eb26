"""Validation utilities for naivedate.

The ``validate_*`` functions raise on bad input and are used when
constructing a CalendarDate. ``is_valid_ymd`` is the boolean form used
by the codec, which deliberately does not bound the year.

This module is not part of the public API.
"""

from __future__ import annotations

from naivedate._internal.calendar import days_in_month
from naivedate._internal.constants import MAX_YEAR, MIN_YEAR
from naivedate.errors import ArgumentError, CalendarError, OutOfRangeError


def _is_int(value: object) -> bool:
    # bool is an int subclass but never a meaningful count or field
    return isinstance(value, int) and not isinstance(value, bool)


def validate_count(value: object, name: str) -> None:
    """Validate that an offset or ordinal argument is a plain int.

    Raises:
        ArgumentError: If value is not an int, or is a bool.
    """
    if not _is_int(value):
        raise ArgumentError(f"{name} must be an int, got {value!r}")


def validate_fields(year: object, month: object, day: object) -> None:
    """Validate that year, month and day are plain ints.

    Raises:
        CalendarError: If any field is not an int, or is a bool.
    """
    for name, value in (("year", year), ("month", month), ("day", day)):
        if not _is_int(value):
            raise CalendarError(f"{name} must be an int, got {value!r}")


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Args:
        year: The year to validate.

    Raises:
        OutOfRangeError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise OutOfRangeError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        CalendarError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise CalendarError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12), already validated.
        day: The day to validate.

    Raises:
        CalendarError: If day is invalid for the month.
    """
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise CalendarError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def is_valid_ymd(year: int, month: int, day: int) -> bool:
    """Return True if month and day form a real calendar date in year.

    The year itself is not range-checked. Non-int fields are never valid.

    Examples:
        >>> is_valid_ymd(2024, 2, 29)
        True
        >>> is_valid_ymd(2023, 2, 29)
        False
        >>> is_valid_ymd(2024, 13, 1)
        False
    """
    if not (_is_int(year) and _is_int(month) and _is_int(day)):
        return False
    if month < 1 or month > 12 or day < 1:
        return False
    return day <= days_in_month(year, month)


__all__ = [
    "validate_count",
    "validate_fields",
    "validate_year",
    "validate_month",
    "validate_day",
    "is_valid_ymd",
]
