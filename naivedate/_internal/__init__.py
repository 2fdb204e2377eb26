"""Internal utilities for naivedate.

This module contains private implementation details:
    - Calendar arithmetic and day ordinals
    - Validation helpers
    - Constants and name tables
    - Custom decorators (@deprecated, @failsafe)

Note: This module is not part of the public API.
"""

from __future__ import annotations

from naivedate._internal.decorators import deprecated, failsafe
from naivedate._internal.validation import (
    is_valid_ymd,
    validate_count,
    validate_day,
    validate_fields,
    validate_month,
    validate_year,
)

__all__: list[str] = [
    "deprecated",
    "failsafe",
    "is_valid_ymd",
    "validate_count",
    "validate_day",
    "validate_fields",
    "validate_month",
    "validate_year",
]
