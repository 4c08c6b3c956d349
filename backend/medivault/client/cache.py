"""
In-memory query cache keyed by (endpoint, params).
"""

import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, Optional, Tuple

CacheKey = Tuple[str, Tuple[Tuple[str, Hashable], ...]]


def make_key(endpoint: str, params: Optional[Dict[str, Any]] = None) -> CacheKey:
    """Build a cache key; parameters set to None are left out."""
    items = tuple(
        sorted((name, value) for name, value in (params or {}).items() if value is not None)
    )
    return (endpoint, items)


@dataclass
class _Entry:
    value: Any
    fetched_at: float
    stale_time: float


class QueryCache:
    """
    Cache for GET results.

    An entry is served until ``stale_time`` seconds have passed since it was
    fetched, or until ``invalidate`` drops it. A stale time of 0 means the
    entry is always refetched.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: Dict[CacheKey, _Entry] = {}

    def __contains__(self, key: CacheKey) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def is_fresh(self, key: CacheKey) -> bool:
        entry = self._entries.get(key)
        if entry is None:
            return False
        return self._clock() - entry.fetched_at < entry.stale_time

    def get(self, key: CacheKey) -> Any:
        """Fresh cached value, or None."""
        if not self.is_fresh(key):
            return None
        return self._entries[key].value

    def set(self, key: CacheKey, value: Any, stale_time: float = 0) -> None:
        self._entries[key] = _Entry(value=value, fetched_at=self._clock(), stale_time=stale_time)

    def get_or_fetch(self, key: CacheKey, fetch: Callable[[], Any], stale_time: float = 0) -> Any:
        """Return the fresh cached value or call ``fetch`` and store its result."""
        if self.is_fresh(key):
            return self._entries[key].value
        value = fetch()
        self.set(key, value, stale_time)
        return value

    def invalidate(self, endpoint: str) -> int:
        """
        Drop every entry for ``endpoint`` and for endpoints nested under it.

        ``invalidate("/api/documents")`` also drops ``/api/documents/search``
        and ``/api/documents/7``. Returns the number of entries removed.
        """
        prefix = endpoint.rstrip("/") + "/"
        doomed = [
            key for key in self._entries if key[0] == endpoint or key[0].startswith(prefix)
        ]
        for key in doomed:
            del self._entries[key]
        return len(doomed)

    def clear(self) -> None:
        self._entries.clear()
