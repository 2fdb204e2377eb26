"""String-level public API.

Every function here takes canonical ``YYYY-MM-DD`` strings (a
CalendarDate or a ``(year, month, day)`` tuple is accepted as well) and
returns canonical strings or plain values.

Failure convention:
    Expected bad input (a malformed string, an impossible date, a result
    outside 1900-2100, an inverted range, an unknown format token) never
    raises. Functions return ``None`` instead; ``is_before``,
    ``is_after`` and ``is_same`` return ``False``; ``complete`` returns
    an empty list. A malformed argument, such as a day count that is
    not an int, is bad input too and gets the same treatment.

Examples:
    >>> add_months("2024-01-31", 1)
    '2024-02-29'
    >>> weekday("2024-01-01")
    'Monday'
    >>> add_days("invalid", 1) is None
    True
"""

from __future__ import annotations

from typing import Tuple, Union

from naivedate._internal.decorators import deprecated, failsafe
from naivedate._internal.validation import validate_count
from naivedate.arithmetic import comparisons, ops, range_ops
from naivedate.clock import today, tomorrow, yesterday
from naivedate.codec.canonical import is_valid, is_valid_string
from naivedate.codec.pattern import format_pattern
from naivedate.completion.cache import CompletionCache
from naivedate.completion.enumerator import DateEnumerator
from naivedate.core.date import CalendarDate
from naivedate.errors import MalformedDateError

DateLike = Union[str, CalendarDate, Tuple[int, int, int]]

_default_enumerator = DateEnumerator(CompletionCache())


def _coerce(value: DateLike) -> CalendarDate:
    if isinstance(value, CalendarDate):
        return value
    if isinstance(value, tuple):
        if len(value) != 3 or not all(isinstance(part, int) for part in value):
            raise MalformedDateError(f"expected (year, month, day), got {value!r}")
        return CalendarDate(*value)
    return CalendarDate.parse(value)


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------


@failsafe(None)
def add_days(date: DateLike, n: int) -> str | None:
    """Add n days (negative n subtracts).

    Examples:
        >>> add_days("2023-02-28", 1)
        '2023-03-01'
    """
    return ops.shift(_coerce(date), days=n).to_iso_format()


@failsafe(None)
def subtract_days(date: DateLike, n: int) -> str | None:
    """Subtract n days."""
    validate_count(n, "n")
    return ops.shift(_coerce(date), days=-n).to_iso_format()


@failsafe(None)
def add_months(date: DateLike, n: int) -> str | None:
    """Add n months, clamping the day to the target month's length.

    Examples:
        >>> add_months("2024-03-31", 1)
        '2024-04-30'
        >>> add_months("2024-02-15", -1)
        '2024-01-15'
    """
    return ops.shift(_coerce(date), months=n).to_iso_format()


@failsafe(None)
def subtract_months(date: DateLike, n: int) -> str | None:
    """Subtract n months, clamping the day to the target month's length."""
    validate_count(n, "n")
    return ops.shift(_coerce(date), months=-n).to_iso_format()


@failsafe(None)
def add_years(date: DateLike, n: int) -> str | None:
    """Add n years; February 29 becomes February 28 in non-leap years.

    Examples:
        >>> add_years("2024-02-29", 1)
        '2025-02-28'
    """
    return ops.shift(_coerce(date), years=n).to_iso_format()


@failsafe(None)
def subtract_years(date: DateLike, n: int) -> str | None:
    """Subtract n years; February 29 becomes February 28 in non-leap years."""
    validate_count(n, "n")
    return ops.shift(_coerce(date), years=-n).to_iso_format()


@failsafe(None)
def diff_days(d1: DateLike, d2: DateLike) -> int | None:
    """Return the number of days from d1 to d2 (positive if d2 is later).

    Examples:
        >>> diff_days("2024-01-01", "2024-12-31")
        365
    """
    return ops.diff_days(_coerce(d1), _coerce(d2))


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------


@failsafe(None)
def compare(d1: DateLike, d2: DateLike) -> int | None:
    """Return -1 if d1 precedes d2, 0 if equal, 1 if d1 follows d2."""
    return comparisons.compare(_coerce(d1), _coerce(d2))


@failsafe(False)
def is_before(d1: DateLike, d2: DateLike) -> bool:
    """Return True if d1 is strictly earlier than d2."""
    return comparisons.is_before(_coerce(d1), _coerce(d2))


@failsafe(False)
def is_after(d1: DateLike, d2: DateLike) -> bool:
    """Return True if d1 is strictly later than d2."""
    return comparisons.is_after(_coerce(d1), _coerce(d2))


@failsafe(False)
def is_same(d1: DateLike, d2: DateLike) -> bool:
    """Return True if d1 and d2 name the same day."""
    return comparisons.is_same(_coerce(d1), _coerce(d2))


@failsafe(None)
def range(d_from: DateLike, d_to: DateLike) -> list[str] | None:  # noqa: A001
    """Return every date from d_from to d_to, both included, ascending.

    Returns None when d_to precedes d_from.

    Examples:
        >>> range("2024-01-31", "2024-02-02")
        ['2024-01-31', '2024-02-01', '2024-02-02']
    """
    return range_ops.date_range(_coerce(d_from), _coerce(d_to))


# ---------------------------------------------------------------------------
# Derived fields
# ---------------------------------------------------------------------------


@failsafe(None)
def weekday(date: DateLike) -> str | None:
    """Return the English weekday name.

    Examples:
        >>> weekday("2024-01-06")
        'Saturday'
    """
    return _coerce(date).weekday_name


@failsafe(None)
def is_weekend(date: DateLike) -> bool | None:
    """Return True for Saturday and Sunday, None for invalid input."""
    return _coerce(date).is_weekend


@failsafe(None)
def quarter(date: DateLike) -> int | None:
    """Return the calendar quarter (1-4)."""
    return _coerce(date).quarter


@failsafe(None)
def month_name(date: DateLike) -> str | None:
    """Return the English month name."""
    return _coerce(date).month_name


@failsafe(None)
def day_of_year(date: DateLike) -> int | None:
    """Return the day of the year (1-366)."""
    return _coerce(date).day_of_year


@failsafe(None)
def iso_week(date: DateLike) -> int | None:
    """Return the ISO 8601 week number (1-53)."""
    return _coerce(date).iso_week


@failsafe(None)
def start_of_month(date: DateLike) -> str | None:
    """Return the first day of the date's month."""
    return _coerce(date).start_of_month().to_iso_format()


@failsafe(None)
def end_of_month(date: DateLike) -> str | None:
    """Return the last day of the date's month."""
    return _coerce(date).end_of_month().to_iso_format()


@failsafe(None)
def format(date: DateLike, pattern: str) -> str | None:  # noqa: A001
    """Render a date through a %-token pattern.

    See naivedate.codec.pattern for the token table.

    Examples:
        >>> format("2024-01-15", "%B %d, %Y")
        'January 15, 2024'
        >>> format("2024-01-15", "%Q") is None
        True
    """
    return format_pattern(_coerce(date), pattern)


# ---------------------------------------------------------------------------
# Completion
# ---------------------------------------------------------------------------


def complete(prefix: str) -> list[str]:
    """Return every canonical date starting with prefix, ascending.

    Uses a process-wide enumerator with its own cache. Build a
    DateEnumerator directly for an isolated cache.

    Examples:
        >>> len(complete("2024"))
        366
        >>> complete("abcd")
        []
    """
    return _default_enumerator.complete(prefix)


def clear_cache() -> None:
    """Clear the completion cache behind complete()."""
    _default_enumerator.clear_cache()


def cache_stats() -> dict[str, object]:
    """Return entries, total_dates_cached and keys for complete()'s cache."""
    return _default_enumerator.cache_stats()


# ---------------------------------------------------------------------------
# Legacy names
# ---------------------------------------------------------------------------


@deprecated("Use complete() instead")
def get(prefix: str) -> list[str]:
    return complete(prefix)


@deprecated("Use range() instead")
def from_to(date_from: DateLike, date_to: DateLike) -> list[str]:
    # Callers of the old name expect a list, never None
    return range(date_from, date_to) or []


@deprecated("Use weekday() instead")
def get_weekday(date: DateLike) -> str | None:
    return weekday(date)


__all__ = [
    "DateLike",
    "is_valid",
    "is_valid_string",
    "add_days",
    "subtract_days",
    "add_months",
    "subtract_months",
    "add_years",
    "subtract_years",
    "diff_days",
    "compare",
    "is_before",
    "is_after",
    "is_same",
    "range",
    "weekday",
    "is_weekend",
    "quarter",
    "month_name",
    "day_of_year",
    "iso_week",
    "start_of_month",
    "end_of_month",
    "format",
    "today",
    "yesterday",
    "tomorrow",
    "complete",
    "clear_cache",
    "cache_stats",
    "get",
    "from_to",
    "get_weekday",
]
