"""Comparison operations for calendar dates.

These are explicit function forms of CalendarDate ordering, all based
on the day ordinal.

Supported Operations:
    - compare: Return -1, 0, or 1
    - is_before: Test strict precedence
    - is_after: Test strict succession
    - is_same: Test equality
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from naivedate.arithmetic.ops import diff_days

if TYPE_CHECKING:
    from naivedate.core.date import CalendarDate


def compare(left: CalendarDate, right: CalendarDate) -> int:
    """Compare two dates chronologically.

    Returns:
        -1 if left precedes right, 0 if equal, 1 if left follows right.

    Examples:
        >>> compare(CalendarDate(2024, 1, 1), CalendarDate(2024, 1, 2))
        -1
        >>> compare(CalendarDate(2024, 1, 2), CalendarDate(2024, 1, 1))
        1
    """
    delta = diff_days(left, right)
    if delta > 0:
        return -1
    if delta < 0:
        return 1
    return 0


def is_before(left: CalendarDate, right: CalendarDate) -> bool:
    """Return True if left is strictly earlier than right."""
    return compare(left, right) < 0


def is_after(left: CalendarDate, right: CalendarDate) -> bool:
    """Return True if left is strictly later than right."""
    return compare(left, right) > 0


def is_same(left: CalendarDate, right: CalendarDate) -> bool:
    """Return True if both name the same day."""
    return compare(left, right) == 0


__all__ = [
    "compare",
    "is_before",
    "is_after",
    "is_same",
]
