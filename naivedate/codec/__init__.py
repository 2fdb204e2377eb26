"""Date string parsing and formatting.

This module provides the conversions between CalendarDate values and
their string forms:
    - Canonical YYYY-MM-DD parsing and formatting
    - strftime-style pattern formatting

Functions:
    parse_canonical: Split a canonical string into (year, month, day).
    format_canonical: Render a CalendarDate as YYYY-MM-DD.
    format_ymd: Render a (year, month, day) triple as YYYY-MM-DD.
    format_pattern: Render a CalendarDate through a %-token pattern.
    is_valid: Check a (year, month, day) triple.
    is_valid_string: Check a canonical string.
"""

from __future__ import annotations

from naivedate.codec.canonical import (
    format_canonical,
    format_ymd,
    is_valid,
    is_valid_string,
    parse_canonical,
)
from naivedate.codec.pattern import SUPPORTED_TOKENS, format_pattern

__all__: list[str] = [
    "parse_canonical",
    "format_canonical",
    "format_ymd",
    "format_pattern",
    "is_valid",
    "is_valid_string",
    "SUPPORTED_TOKENS",
]
