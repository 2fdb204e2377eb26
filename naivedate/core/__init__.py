"""Core date type.

This module provides:
    - CalendarDate: Naive calendar date in the proleptic Gregorian calendar
"""

from __future__ import annotations

from naivedate.core.date import CalendarDate

__all__: list[str] = [
    "CalendarDate",
]
