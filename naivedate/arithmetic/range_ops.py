"""Date range helpers.

This module provides inclusive, ascending day-by-day ranges:
    - iter_range: Lazily yield every date from start to end
    - date_range: The same range as a list of canonical strings
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from naivedate._internal.calendar import ordinal_to_ymd
from naivedate.codec.canonical import format_ymd
from naivedate.errors import InvertedRangeError

if TYPE_CHECKING:
    from naivedate.core.date import CalendarDate


def iter_range(start: CalendarDate, end: CalendarDate) -> Iterator[CalendarDate]:
    """Yield every date from start to end, both included, in order.

    Raises:
        InvertedRangeError: If end precedes start. The check happens
            when the first item is requested.

    Examples:
        >>> list(iter_range(CalendarDate(2024, 1, 31), CalendarDate(2024, 2, 1)))
        [CalendarDate(2024, 1, 31), CalendarDate(2024, 2, 1)]
    """
    from naivedate.core.date import CalendarDate

    first, last = start.to_ordinal(), end.to_ordinal()
    if last < first:
        raise InvertedRangeError(f"range end {end} precedes start {start}")

    for ordinal in range(first, last + 1):
        yield CalendarDate.from_ordinal(ordinal)


def date_range(start: CalendarDate, end: CalendarDate) -> list[str]:
    """Return canonical strings for every date from start to end, inclusive.

    The result has end - start + 1 items, starts with start and ends
    with end.

    Raises:
        InvertedRangeError: If end precedes start.

    Examples:
        >>> date_range(CalendarDate(2024, 1, 1), CalendarDate(2024, 1, 3))
        ['2024-01-01', '2024-01-02', '2024-01-03']
    """
    first, last = start.to_ordinal(), end.to_ordinal()
    if last < first:
        raise InvertedRangeError(f"range end {end} precedes start {start}")

    return [format_ymd(*ordinal_to_ymd(ordinal)) for ordinal in range(first, last + 1)]


__all__ = [
    "iter_range",
    "date_range",
]
