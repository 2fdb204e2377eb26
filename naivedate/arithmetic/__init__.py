"""Calendar date arithmetic.

This module provides function-based arithmetic that complements the
methods on CalendarDate.

Arithmetic Operations (from naivedate.arithmetic.ops):
    - shift: Offset a date by years, months and days with clamping
    - diff_days: Signed number of days between two dates

Comparison Operations (from naivedate.arithmetic.comparisons):
    - compare: Return -1, 0, or 1 for comparison
    - is_before, is_after, is_same: Boolean comparisons

Range Operations (from naivedate.arithmetic.range_ops):
    - iter_range: Lazy inclusive range of dates
    - date_range: Inclusive range as canonical strings
"""

from __future__ import annotations

from naivedate.arithmetic.comparisons import compare, is_after, is_before, is_same
from naivedate.arithmetic.ops import diff_days, shift
from naivedate.arithmetic.range_ops import date_range, iter_range

__all__ = [
    # Arithmetic operations
    "shift",
    "diff_days",
    # Comparison operations
    "compare",
    "is_before",
    "is_after",
    "is_same",
    # Range operations
    "iter_range",
    "date_range",
]
