"""Calendar utilities for naivedate.

This module provides internal functions for calendar calculations:
leap year logic, month lengths and the conversion between
(year, month, day) triples and day ordinals.

Ordinal 1 = 0001-01-01 in the proleptic Gregorian calendar, which was
a Monday. Everything here is integer arithmetic; no clock or timestamp
API is consulted, so results do not depend on the host timezone.

This module is not part of the public API.
"""

from __future__ import annotations

from naivedate._internal.constants import DAYS_BEFORE_MONTH, DAYS_IN_MONTH

# Days in the 400-, 100- and 4-year Gregorian cycles
_DAYS_IN_400_YEARS = 146097
_DAYS_IN_100_YEARS = 36524
_DAYS_IN_4_YEARS = 1461


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
        >>> is_leap_year(2023)
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12. Callers validate months
            before asking for a month length.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month.

    Args:
        year: The year (for leap year calculation).
        month: The month (1-12).

    Returns:
        Number of days before the month in that year.
    """
    result = DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to a day ordinal.

    The difference of two ordinals is the exact number of days between
    the two dates.

    Args:
        year: The year (>= 1).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number.

    Examples:
        >>> ymd_to_ordinal(1, 1, 1)
        1
        >>> ymd_to_ordinal(2024, 1, 15)
        738900
    """
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert a day ordinal to year, month, day.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).

    Raises:
        ValueError: If ordinal is less than 1.
    """
    if ordinal < 1:
        raise ValueError(f"ordinal must be >= 1, got {ordinal}")

    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1

    n400, n = divmod(n, _DAYS_IN_400_YEARS)
    n100, n = divmod(n, _DAYS_IN_100_YEARS)
    n4, n = divmod(n, _DAYS_IN_4_YEARS)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap year closing a 4- or 400-year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = doy_to_md(year, n + 1)
    return (year, month, day)


def doy_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert a 1-indexed day of year to (month, day).

    Raises:
        ValueError: If doy is outside the year.
    """
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year for {year}")


def ordinal_to_weekday(ordinal: int) -> int:
    """Return the day of week for an ordinal (Monday=0, Sunday=6).

    Ordinal 1 (0001-01-01) was a Monday, so the weekday is the ordinal
    offset modulo 7.
    """
    return (ordinal - 1) % 7


def iso_week_number(year: int, month: int, day: int) -> int:
    """Return the ISO 8601 week number (1-53) of a date.

    ISO weeks start on Monday and week 1 is the week holding the year's
    first Thursday, so a date early in January can belong to the last
    week of the previous year and a date late in December to week 1.

    Examples:
        >>> iso_week_number(2024, 1, 1)
        1
        >>> iso_week_number(2021, 1, 3)  # Sunday of 2020-W53
        53
    """
    ordinal = ymd_to_ordinal(year, month, day)
    thursday = ordinal - ordinal_to_weekday(ordinal) + 3
    week_year, _, _ = ordinal_to_ymd(thursday)
    return (thursday - ymd_to_ordinal(week_year, 1, 1)) // 7 + 1


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "doy_to_md",
    "ordinal_to_weekday",
    "iso_week_number",
]
