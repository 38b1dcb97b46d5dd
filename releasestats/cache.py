"""
Cache stores with per-entry TTL.

All stores share one async interface so the in-process store and the Redis
store are interchangeable. A miss is reported as None, never as an exception;
backend failures raise CacheBackendError and are left to propagate.
"""

import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from releasestats.logging import log_cache_event

if TYPE_CHECKING:
    from releasestats.config import StatsConfig


class CacheStore(ABC):
    """Abstract base class for cache backends."""

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Return the cached value, or None on a miss or expired entry."""
        pass

    @abstractmethod
    async def set(self, key: str, value: Any, ttl: int) -> None:
        """Store a JSON-compatible value for ``ttl`` seconds, replacing any previous entry."""
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove an entry if present."""
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Remove every entry owned by this store."""
        pass

    async def close(self) -> None:
        """Release backend resources."""
        pass


@dataclass
class CacheEntry:
    """A cached value and the monotonic time at which it expires."""

    key: str
    value: Any
    expiry: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expiry


class MemoryCacheStore(CacheStore):
    """
    Process-local cache store.

    Expired entries are dropped lazily when read; there is no sweeper.

    Args:
        clock: Monotonic clock returning seconds (default: time.monotonic)
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    async def get(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            log_cache_event("miss", key)
            return None
        if entry.is_expired(self._clock()):
            del self._entries[key]
            log_cache_event("expired", key)
            return None
        log_cache_event("hit", key)
        return entry.value

    async def set(self, key: str, value: Any, ttl: int) -> None:
        if value is None:
            raise ValueError("None cannot be cached; it is reserved for misses")
        self._entries[key] = CacheEntry(key=key, value=value, expiry=self._clock() + ttl)
        log_cache_event("store", key, ttl)

    async def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    async def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


def create_cache_store(config: "StatsConfig") -> CacheStore:
    """
    Build the process-wide cache store for a configuration.

    Uses Redis when ``config.redis_url`` is set, otherwise process memory.
    """
    if config.redis_url:
        from releasestats.cache_redis import RedisCacheStore

        return RedisCacheStore.from_url(config.redis_url, prefix=config.cache_prefix)
    return MemoryCacheStore()
