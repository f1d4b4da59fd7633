"""Time-to-live cache with an injected clock.

Entries remember when they were fetched; an entry older than the TTL
is dropped on read. In-memory only, one instance per call site.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class CacheEntry[V]:
    """Cached value and the clock reading when it was stored."""

    value: V
    fetched_at: float


@dataclass
class TTLCache[V]:
    """Key -> value cache expiring entries after ttl seconds.

    Not thread-safe.

    Attributes:
        ttl: Entry lifetime in seconds (must be > 0)
        clock: Returns current time in seconds (default time.monotonic)
        _entries: Key -> CacheEntry mapping
    """

    ttl: float
    clock: Callable[[], float] = time.monotonic
    _entries: dict[str, CacheEntry[V]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.ttl <= 0:
            raise ValueError(f"ttl must be > 0, got {self.ttl}")

    def get(self, key: str) -> V | None:
        """Return a fresh cached value.

        Args:
            key: Cache key

        Returns:
            Cached value, or None on miss or expiry (expired entry is dropped)
        """
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self.clock() - entry.fetched_at >= self.ttl:
            del self._entries[key]
            return None
        return entry.value

    def put(self, key: str, value: V) -> None:
        """Store value stamped with the current clock reading."""
        self._entries[key] = CacheEntry(value=value, fetched_at=self.clock())

    def clear(self) -> None:
        """Drop all entries."""
        self._entries.clear()

    @property
    def size(self) -> int:
        """Number of stored entries, fresh or not."""
        return len(self._entries)
