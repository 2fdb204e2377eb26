"""naivedate exception hierarchy.

All naivedate-specific exceptions inherit from NaiveDateError. They are
raised by the internal layers and turned into a ``None`` result at the
public string boundary (see naivedate.api).
"""

from __future__ import annotations


class NaiveDateError(Exception):
    """Base exception for all naivedate errors."""

    pass


class ParseError(NaiveDateError):
    """Failed to interpret a string.

    Raised when a string does not have the shape an operation expects.
    """

    pass


class MalformedDateError(ParseError):
    """String is not a canonical YYYY-MM-DD date.

    Examples:
        - Wrong length ("2024-1-1")
        - Non-digit characters ("2024-0a-01")
        - Misplaced separators ("2024/01/01")
    """

    pass


class UnsupportedPrefixError(ParseError):
    """Completion prefix has a shape the enumerator does not accept.

    Examples:
        - Partial year ("202")
        - Dangling separator ("2024-")
        - Single-digit month ("2024-1")
    """

    pass


class ArgumentError(NaiveDateError):
    """An argument has the wrong type for an operation.

    Examples:
        - A day count given as "1" or 1.5
        - A bool where an int is expected
        - A format pattern that is not a string
    """

    pass


class CalendarError(NaiveDateError):
    """Well-formed but impossible calendar date.

    Examples:
        - Month value outside 1-12
        - February 30
        - February 29 in a non-leap year
    """

    pass


class RangeError(NaiveDateError):
    """A date or date span falls outside what an operation allows."""

    pass


class InvertedRangeError(RangeError):
    """The end of a range precedes its start."""

    pass


class OutOfRangeError(RangeError):
    """A date lies outside the supported years.

    Examples:
        - Parsing "1899-12-31"
        - Adding a day to 2100-12-31
    """

    pass


class FormatError(NaiveDateError):
    """Failed to render a date with a format pattern."""

    pass


class UnknownTokenError(FormatError):
    """Format pattern contains an unsupported %-token."""

    pass


__all__ = [
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
]
