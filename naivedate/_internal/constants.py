"""Internal constants for naivedate.

These constants define the supported range, the completion cache size
and the fixed English name tables. This module is not part of the
public API.
"""

from __future__ import annotations

# Supported year range (inclusive)
MIN_YEAR: int = 1900
MAX_YEAR: int = 2100

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Days before each month (cumulative, non-leap year), 1-indexed
DAYS_BEFORE_MONTH: tuple[int, ...] = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

# Length of a canonical YYYY-MM-DD string
CANONICAL_LENGTH: int = 10

# Maximum number of scopes held by a CompletionCache before it is cleared
DEFAULT_CACHE_SIZE: int = 50

MONTH_NAMES: tuple[str, ...] = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Monday is index 0, matching datetime.date.weekday()
WEEKDAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


__all__ = [
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "DAYS_BEFORE_MONTH",
    "CANONICAL_LENGTH",
    "DEFAULT_CACHE_SIZE",
    "MONTH_NAMES",
    "WEEKDAY_NAMES",
]
