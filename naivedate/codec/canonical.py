"""Canonical YYYY-MM-DD parsing and formatting.

The canonical form is exactly ten characters: a four-digit year, a
hyphen, a zero-padded two-digit month, a hyphen and a zero-padded
two-digit day. It is the only string form naivedate parses.

Functions:
    parse_canonical: Split a canonical string into (year, month, day).
    format_ymd: Render a (year, month, day) triple canonically.
    format_canonical: Render a CalendarDate canonically.
    is_valid: Check a (year, month, day) triple against the calendar.
    is_valid_string: Check that a string is a canonical, real date.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from naivedate._internal.constants import CANONICAL_LENGTH
from naivedate._internal.validation import is_valid_ymd
from naivedate.errors import MalformedDateError

if TYPE_CHECKING:
    from naivedate.core.date import CalendarDate

# ASCII digits only; \d would also accept other Unicode digits
_CANONICAL_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def parse_canonical(s: str) -> tuple[int, int, int]:
    """Parse a canonical date string into its integer components.

    Only the shape is checked. "2024-02-30" parses to (2024, 2, 30);
    calendar validity is the job of is_valid or CalendarDate.

    Args:
        s: The string to parse.

    Returns:
        Tuple of (year, month, day).

    Raises:
        MalformedDateError: If s is not a ten-character YYYY-MM-DD string.

    Examples:
        >>> parse_canonical("2024-01-15")
        (2024, 1, 15)

        >>> parse_canonical("2024-1-15")
        Traceback (most recent call last):
        ...
        MalformedDateError: expected YYYY-MM-DD, got '2024-1-15'
    """
    if not isinstance(s, str) or len(s) != CANONICAL_LENGTH:
        raise MalformedDateError(f"expected YYYY-MM-DD, got {s!r}")

    match = _CANONICAL_RE.fullmatch(s)
    if not match:
        raise MalformedDateError(f"expected YYYY-MM-DD, got {s!r}")

    return (int(match.group(1)), int(match.group(2)), int(match.group(3)))


def format_ymd(year: int, month: int, day: int) -> str:
    """Return the canonical string for a (year, month, day) triple.

    Examples:
        >>> format_ymd(2024, 1, 5)
        '2024-01-05'
    """
    return f"{year:04d}-{month:02d}-{day:02d}"


def format_canonical(date: CalendarDate) -> str:
    """Return the canonical string for a CalendarDate."""
    return format_ymd(date.year, date.month, date.day)


def is_valid(year: int, month: int, day: int) -> bool:
    """Return True if (year, month, day) is a real calendar date.

    The year is not bounded here. CalendarDate and completion enforce
    the supported range.

    Examples:
        >>> is_valid(2024, 2, 29)
        True
        >>> is_valid(2100, 2, 29)
        False
    """
    return is_valid_ymd(year, month, day)


def is_valid_string(s: str) -> bool:
    """Return True if s is a canonical string naming a real calendar date.

    Examples:
        >>> is_valid_string("2024-02-29")
        True
        >>> is_valid_string("2024-02-30")
        False
        >>> is_valid_string("24-01-01")
        False
    """
    try:
        year, month, day = parse_canonical(s)
    except MalformedDateError:
        return False
    return is_valid_ymd(year, month, day)


__all__ = [
    "parse_canonical",
    "format_ymd",
    "format_canonical",
    "is_valid",
    "is_valid_string",
]
