# src/storage/query_cache.py

"""In-memory read cache with stale-time expiry and explicit invalidation."""

import logging
import time
from dataclasses import dataclass
from typing import Any

from src.config.settings import Settings

logger = logging.getLogger("catalog.cache")

QueryKey = tuple[str, ...]


@dataclass
class CacheEntry:
    """The last successful result of one query."""

    key: QueryKey
    data: Any
    timestamp: float
    invalidated: bool = False


class QueryCache:
    """Holds read results until they go stale or a write invalidates them.

    An entry is *fresh* while it is younger than ``stale_time`` and has
    not been invalidated.  Only fresh entries are served; anything else
    is a miss and the caller refetches.
    """

    def __init__(self, stale_time: float | None = None) -> None:
        self._entries: dict[QueryKey, CacheEntry] = {}
        self._stale_time: float = (
            Settings.LIST_STALE_TIME
            if stale_time is None
            else stale_time
        )

    def get(self, key: QueryKey) -> Any | None:
        """Return the cached data for *key* if fresh, else ``None``."""
        self._evict_expired(time.time())
        entry = self._entries.get(key)
        if entry is None or entry.invalidated:
            return None
        logger.debug("Cache hit for %s", key)
        return entry.data

    def store(self, key: QueryKey, data: Any) -> None:
        """Record a fresh result for *key*."""
        self._entries[key] = CacheEntry(
            key=key, data=data, timestamp=time.time()
        )
        logger.debug("Cached result for %s", key)

    def invalidate(self, key: QueryKey) -> bool:
        """Mark *key* stale so the next read refetches.

        Returns ``True`` when there was an entry to invalidate.
        """
        entry = self._entries.get(key)
        if entry is None:
            return False
        entry.invalidated = True
        logger.info("Invalidated cached query %s", key)
        return True

    def clear(self) -> int:
        """Purge all cached entries.

        Returns the number of entries that were removed.
        """
        count = len(self._entries)
        self._entries.clear()
        logger.info("Cache manually purged (%d entries removed)", count)
        return count

    def _evict_expired(self, now: float) -> None:
        """Drop entries older than the stale time."""
        expired = [
            key
            for key, entry in self._entries.items()
            if now - entry.timestamp >= self._stale_time
        ]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug("Evicted %d stale cache entries", len(expired))
