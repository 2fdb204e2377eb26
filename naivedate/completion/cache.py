"""Bounded memo table for completion candidates.

The cache maps a resolved scope key ("2024" or "2024-01") to the tuple
of canonical date strings generated for it. It is pure memoization:
every entry can be regenerated, so overflow simply clears the whole
table instead of tracking recency.
"""

from __future__ import annotations

import logging
import threading

from naivedate._internal.constants import DEFAULT_CACHE_SIZE

logger = logging.getLogger(__name__)


class CompletionCache:
    """Size-bounded, lock-guarded cache of generated date sequences.

    When an insertion would push the cache past ``max_entries`` the
    whole table is cleared first.

    Examples:
        >>> cache = CompletionCache(max_entries=2)
        >>> cache.put("2024", ("2024-01-01",))
        >>> cache.get("2024")
        ('2024-01-01',)
        >>> cache.get("2025") is None
        True
    """

    def __init__(self, max_entries: int = DEFAULT_CACHE_SIZE) -> None:
        if max_entries < 1:
            raise ValueError(f"max_entries must be >= 1, got {max_entries}")
        self.max_entries = max_entries
        self.hits = 0
        self.misses = 0
        self.evictions = 0
        self._entries: dict[str, tuple[str, ...]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> tuple[str, ...] | None:
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self.misses += 1
            else:
                self.hits += 1
            return value

    def put(self, key: str, value: tuple[str, ...]) -> None:
        with self._lock:
            if key not in self._entries and len(self._entries) >= self.max_entries:
                logger.debug(
                    "completion cache full (%d entries), clearing", len(self._entries)
                )
                self._entries.clear()
                self.evictions += 1
            self._entries[key] = value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def stats(self) -> dict[str, object]:
        """Return a snapshot of the cache contents.

        Returns:
            Dictionary with ``entries`` (number of keys),
            ``total_dates_cached`` (sum of all cached sequence lengths)
            and ``keys`` (sorted list of cached keys).
        """
        with self._lock:
            return {
                "entries": len(self._entries),
                "total_dates_cached": sum(len(v) for v in self._entries.values()),
                "keys": sorted(self._entries),
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries


__all__ = ["CompletionCache"]
