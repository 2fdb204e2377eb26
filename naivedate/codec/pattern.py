"""strftime-style formatting for calendar dates.

This module renders a CalendarDate through a pattern of %-tokens. The
token set is fixed and English-only; there is no locale lookup.

Supported Tokens:
    %d - Zero-padded day (01-31)
    %e - Day without padding (1-31)
    %m - Zero-padded month (01-12)
    %n - Month without padding (1-12)
    %B - Full month name (January)
    %b - Abbreviated month name (Jan)
    %Y - Zero-padded 4-digit year (2024)
    %y - 2-digit year (24)
    %A - Full weekday name (Monday)
    %a - Abbreviated weekday name (Mon)
    %j - Zero-padded day of year (001-366)
    %V - Zero-padded ISO week number (01-53)
    %% - Literal %

Any other token, including a trailing lone %, raises UnknownTokenError.

Examples:
    >>> from naivedate import CalendarDate
    >>> format_pattern(CalendarDate(2024, 1, 15), "%d/%m/%Y")
    '15/01/2024'

    >>> format_pattern(CalendarDate(2024, 1, 15), "%B %d, %Y")
    'January 15, 2024'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from naivedate.errors import ArgumentError, UnknownTokenError

if TYPE_CHECKING:
    from naivedate.core.date import CalendarDate


_TOKENS: dict[str, Callable[[CalendarDate], str]] = {
    "d": lambda d: f"{d.day:02d}",
    "e": lambda d: str(d.day),
    "m": lambda d: f"{d.month:02d}",
    "n": lambda d: str(d.month),
    "B": lambda d: d.month_name,
    "b": lambda d: d.month_name[:3],
    "Y": lambda d: f"{d.year:04d}",
    "y": lambda d: f"{d.year % 100:02d}",
    "A": lambda d: d.weekday_name,
    "a": lambda d: d.weekday_name[:3],
    "j": lambda d: f"{d.day_of_year:03d}",
    "V": lambda d: f"{d.iso_week:02d}",
    "%": lambda d: "%",
}

SUPPORTED_TOKENS: tuple[str, ...] = tuple(f"%{key}" for key in _TOKENS)


def format_pattern(date: CalendarDate, pattern: str) -> str:
    """Format a CalendarDate using a %-token pattern.

    Characters outside tokens are copied unchanged.

    Args:
        date: The date to format.
        pattern: Format string with %-tokens.

    Returns:
        Formatted string.

    Raises:
        ArgumentError: If pattern is not a string.
        UnknownTokenError: If pattern contains an unsupported token.

    Examples:
        >>> format_pattern(CalendarDate(2024, 1, 5), "%a %e %b")
        'Fri 5 Jan'
    """
    if not isinstance(pattern, str):
        raise ArgumentError(f"pattern must be a str, got {pattern!r}")

    result = []
    i = 0
    while i < len(pattern):
        if pattern[i] != "%":
            result.append(pattern[i])
            i += 1
            continue

        key = pattern[i + 1 : i + 2]
        render = _TOKENS.get(key)
        if render is None:
            raise UnknownTokenError(
                f"unsupported format token: %{key}. "
                f"Supported: {', '.join(SUPPORTED_TOKENS)}"
            )
        result.append(render(date))
        i += 2

    return "".join(result)


__all__ = ["format_pattern", "SUPPORTED_TOKENS"]
