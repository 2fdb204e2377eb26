"""Current-date helpers.

These are the only functions in naivedate that read the system clock.
The clock is read once per call as a local calendar date; no time of
day or timezone is carried any further.
"""

from __future__ import annotations

import datetime

from naivedate._internal.calendar import ordinal_to_ymd, ymd_to_ordinal
from naivedate.codec.canonical import format_ymd


def local_today() -> tuple[int, int, int]:
    """Return today's (year, month, day) in the local timezone."""
    now = datetime.date.today()
    return (now.year, now.month, now.day)


def _offset_from_today(days: int) -> str:
    ordinal = ymd_to_ordinal(*local_today()) + days
    return format_ymd(*ordinal_to_ymd(ordinal))


def today() -> str:
    """Return today's date as a canonical string.

    Examples:
        >>> len(today())
        10
    """
    return _offset_from_today(0)


def yesterday() -> str:
    """Return yesterday's date as a canonical string."""
    return _offset_from_today(-1)


def tomorrow() -> str:
    """Return tomorrow's date as a canonical string."""
    return _offset_from_today(1)


__all__ = [
    "local_today",
    "today",
    "yesterday",
    "tomorrow",
]
