"""Prefix-driven date enumeration for autocomplete.

Given the text a user has typed so far, DateEnumerator lists every
canonical date string that starts with it, in chronological order.

Accepted prefix shapes:
    YYYY        - every day of the year
    YYYY-MM     - every day of the month
    YYYY-MM-D   - days of the month whose two digits start with D
    YYYY-MM-DD  - that single day, if it exists

Anything else, and any year outside 1900-2100, yields no candidates.
Matching is a literal string-prefix test on the canonical form, so
"2024-01-1" matches 2024-01-10 through 2024-01-19 and nothing else.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from naivedate._internal.calendar import days_in_month
from naivedate._internal.validation import validate_month, validate_year
from naivedate.codec.canonical import format_ymd
from naivedate.completion.cache import CompletionCache
from naivedate.errors import NaiveDateError, UnsupportedPrefixError

logger = logging.getLogger(__name__)

_PREFIX_RE = re.compile(r"([0-9]{4})(?:-([0-9]{2})(?:-([0-9]{1,2}))?)?")


@dataclass(frozen=True)
class PrefixScope:
    """The year, and optionally month, a completion prefix pins down."""

    year: int
    month: int | None = None

    @property
    def key(self) -> str:
        """Cache key for this scope, e.g. '2024' or '2024-01'."""
        if self.month is None:
            return f"{self.year:04d}"
        return f"{self.year:04d}-{self.month:02d}"


def parse_prefix(prefix: str) -> PrefixScope:
    """Resolve a completion prefix to the scope it enumerates.

    Raises:
        UnsupportedPrefixError: If the prefix has an unsupported shape.
        OutOfRangeError: If the year is outside 1900-2100.
        CalendarError: If a full month is outside 01-12.

    Examples:
        >>> parse_prefix("2024-01-1")
        PrefixScope(year=2024, month=1)
        >>> parse_prefix("2024").key
        '2024'
    """
    match = _PREFIX_RE.fullmatch(prefix) if isinstance(prefix, str) else None
    if match is None:
        raise UnsupportedPrefixError(f"unsupported completion prefix: {prefix!r}")

    year = int(match.group(1))
    validate_year(year)

    if match.group(2) is None:
        return PrefixScope(year)

    month = int(match.group(2))
    validate_month(month)
    return PrefixScope(year, month)


def generate_scope(scope: PrefixScope) -> tuple[str, ...]:
    """Return every canonical date in the scope, in ascending order."""
    months = range(1, 13) if scope.month is None else (scope.month,)
    return tuple(
        format_ymd(scope.year, month, day)
        for month in months
        for day in range(1, days_in_month(scope.year, month) + 1)
    )


class DateEnumerator:
    """Lists canonical dates matching a typed prefix.

    Generated scopes are memoized in ``cache`` when one is given. The
    cache is keyed by scope, so successive keystrokes within the same
    year or month reuse one generated sequence.

    Examples:
        >>> enumerator = DateEnumerator(CompletionCache())
        >>> len(enumerator.complete("2024"))
        366
        >>> enumerator.complete("2024-01-1")[:2]
        ['2024-01-10', '2024-01-11']
        >>> enumerator.complete("2024-13")
        []
    """

    def __init__(self, cache: CompletionCache | None = None) -> None:
        self.cache = cache

    def complete(self, prefix: str) -> list[str]:
        """Return every canonical date starting with prefix.

        Never raises for bad input; an unsupported prefix simply has no
        completions.
        """
        try:
            scope = parse_prefix(prefix)
        except NaiveDateError as exc:
            logger.debug("no completions for %r: %s", prefix, exc)
            return []

        candidates = self._candidates(scope)
        if len(prefix) == len(scope.key):
            return list(candidates)
        return [candidate for candidate in candidates if candidate.startswith(prefix)]

    def clear_cache(self) -> None:
        if self.cache is not None:
            self.cache.clear()

    def cache_stats(self) -> dict[str, object]:
        if self.cache is None:
            return {"entries": 0, "total_dates_cached": 0, "keys": []}
        return self.cache.stats()

    def _candidates(self, scope: PrefixScope) -> tuple[str, ...]:
        if self.cache is None:
            return generate_scope(scope)

        key = scope.key
        candidates = self.cache.get(key)
        if candidates is None:
            logger.debug("completion cache miss for %s", key)
            candidates = generate_scope(scope)
            self.cache.put(key, candidates)
        return candidates


__all__ = [
    "PrefixScope",
    "parse_prefix",
    "generate_scope",
    "DateEnumerator",
]
