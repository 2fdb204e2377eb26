"""Day, month and year arithmetic for calendar dates.

Clamping behavior:
    When a month or year step lands on a day the target month does not
    have (e.g., Jan 31 + 1 month), the day is clamped to the last valid
    day of the target month. Day steps never clamp.

Examples:
    shift(CalendarDate(2024, 1, 31), months=1) -> CalendarDate(2024, 2, 29)
    shift(CalendarDate(2024, 3, 31), months=1) -> CalendarDate(2024, 4, 30)
    shift(CalendarDate(2024, 2, 29), years=1)  -> CalendarDate(2025, 2, 28)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from naivedate._internal.validation import validate_count

if TYPE_CHECKING:
    from naivedate.core.date import CalendarDate


def shift(
    date: CalendarDate,
    *,
    years: int = 0,
    months: int = 0,
    days: int = 0,
) -> CalendarDate:
    """Offset a date by years, months and days, clamping the day if needed.

    The components are applied in order:
    1. Years
    2. Months
    3. Days

    Args:
        date: The date to offset.
        years: Number of years to add (can be negative).
        months: Number of months to add (can be negative).
        days: Number of days to add (can be negative).

    Returns:
        A new CalendarDate.

    Raises:
        ArgumentError: If any component is not an int.
        OutOfRangeError: If any step leaves the supported range.

    Examples:
        >>> shift(CalendarDate(2024, 1, 31), months=1, days=1)
        CalendarDate(2024, 3, 1)
    """
    validate_count(years, "years")
    validate_count(months, "months")
    validate_count(days, "days")

    result = date
    if years:
        result = result.add_years(years)
    if months:
        result = result.add_months(months)
    if days:
        result = result.add_days(days)
    return result


def diff_days(start: CalendarDate, end: CalendarDate) -> int:
    """Return the number of days from start to end.

    Positive when end is after start, negative when before.

    Examples:
        >>> diff_days(CalendarDate(2024, 1, 1), CalendarDate(2024, 12, 31))
        365
    """
    return end.to_ordinal() - start.to_ordinal()


__all__ = [
    "shift",
    "diff_days",
]
