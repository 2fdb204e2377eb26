"""naivedate: naive calendar-date arithmetic over YYYY-MM-DD strings.

naivedate provides timezone-free date math, lookups and prefix
completion for canonical ISO 8601 date strings between 1900-01-01 and
2100-12-31, in the proleptic Gregorian calendar.

Core Types:
    CalendarDate: Immutable (year, month, day) value
    DateEnumerator: Prefix completion of canonical date strings
    CompletionCache: Bounded memo table for DateEnumerator

String Functions:
    add_days, add_months, add_years (and subtract_*): Arithmetic
    diff_days, compare, is_before, is_after, is_same: Comparison
    range: Inclusive list of dates
    weekday, is_weekend, quarter, month_name, day_of_year, iso_week,
    start_of_month, end_of_month, format: Derived fields
    today, yesterday, tomorrow: Clock-based dates
    complete: Prefix completion

Exceptions:
    NaiveDateError: Base exception
    ParseError, MalformedDateError, UnsupportedPrefixError: Bad strings
    ArgumentError: Wrong argument types
    CalendarError: Impossible dates
    RangeError, InvertedRangeError, OutOfRangeError: Range violations
    FormatError, UnknownTokenError: Bad format patterns

Example:
    >>> import naivedate
    >>> naivedate.add_months("2024-01-31", 1)
    '2024-02-29'
    >>> naivedate.complete("2024-01-1")[0]
    '2024-01-10'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Core types
from naivedate.completion import CompletionCache, DateEnumerator
from naivedate.core.date import CalendarDate

# Exceptions
from naivedate.errors import (
    ArgumentError,
    CalendarError,
    FormatError,
    InvertedRangeError,
    MalformedDateError,
    NaiveDateError,
    OutOfRangeError,
    ParseError,
    RangeError,
    UnknownTokenError,
    UnsupportedPrefixError,
)

# String functions
from naivedate.api import (
    add_days,
    add_months,
    add_years,
    cache_stats,
    clear_cache,
    compare,
    complete,
    day_of_year,
    diff_days,
    end_of_month,
    format,
    from_to,
    get,
    get_weekday,
    is_after,
    is_before,
    is_same,
    is_valid,
    is_valid_string,
    is_weekend,
    iso_week,
    month_name,
    quarter,
    range,
    start_of_month,
    subtract_days,
    subtract_months,
    subtract_years,
    today,
    tomorrow,
    weekday,
    yesterday,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "CalendarDate",
    "DateEnumerator",
    "CompletionCache",
    # Exceptions
    "NaiveDateError",
    "ParseError",
    "MalformedDateError",
    "UnsupportedPrefixError",
    "ArgumentError",
    "CalendarError",
    "RangeError",
    "InvertedRangeError",
    "OutOfRangeError",
    "FormatError",
    "UnknownTokenError",
    # Validation
    "is_valid",
    "is_valid_string",
    # Arithmetic
    "add_days",
    "subtract_days",
    "add_months",
    "subtract_months",
    "add_years",
    "subtract_years",
    "diff_days",
    # Comparison
    "compare",
    "is_before",
    "is_after",
    "is_same",
    "range",
    # Derived fields
    "weekday",
    "is_weekend",
    "quarter",
    "month_name",
    "day_of_year",
    "iso_week",
    "start_of_month",
    "end_of_month",
    "format",
    # Clock
    "today",
    "yesterday",
    "tomorrow",
    # Completion
    "complete",
    "clear_cache",
    "cache_stats",
    # Legacy names
    "get",
    "from_to",
    "get_weekday",
]
