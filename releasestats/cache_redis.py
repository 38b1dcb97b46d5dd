"""Redis-backed cache store."""

import json
from typing import Any

import redis.asyncio as redis
from redis.exceptions import RedisError

from releasestats.cache import CacheStore
from releasestats.exceptions import CacheBackendError
from releasestats.logging import log_cache_event, mask_sensitive_data


class RedisCacheStore(CacheStore):
    """
    Cache store shared across processes through Redis.

    Values are stored as JSON with a native Redis expiry (``SET ... EX``), so
    expired entries disappear without any client-side bookkeeping.

    Args:
        client: A ``redis.asyncio.Redis`` connection (or compatible object)
        prefix: Namespace prepended to every key
    """

    def __init__(self, client: Any, prefix: str = "releasestats:") -> None:
        self._client = client
        self.prefix = prefix

    @classmethod
    def from_url(cls, url: str, prefix: str = "releasestats:") -> "RedisCacheStore":
        return cls(redis.Redis.from_url(url), prefix=prefix)

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    async def get(self, key: str) -> Any | None:
        try:
            raw = await self._client.get(self._key(key))
        except RedisError as e:
            raise CacheBackendError(f"Redis GET failed: {mask_sensitive_data(str(e))}") from e

        if raw is None:
            log_cache_event("miss", key)
            return None

        log_cache_event("hit", key)
        try:
            return json.loads(raw)
        except ValueError as e:
            raise CacheBackendError(f"Corrupt cache entry for {key}") from e

    async def set(self, key: str, value: Any, ttl: int) -> None:
        if value is None:
            raise ValueError("None cannot be cached; it is reserved for misses")
        payload = json.dumps(value, separators=(",", ":"))
        try:
            await self._client.set(self._key(key), payload, ex=ttl)
        except RedisError as e:
            raise CacheBackendError(f"Redis SET failed: {mask_sensitive_data(str(e))}") from e
        log_cache_event("store", key, ttl)

    async def delete(self, key: str) -> None:
        try:
            await self._client.delete(self._key(key))
        except RedisError as e:
            raise CacheBackendError(f"Redis DEL failed: {mask_sensitive_data(str(e))}") from e

    async def clear(self) -> None:
        try:
            keys = [key async for key in self._client.scan_iter(match=f"{self.prefix}*")]
            if keys:
                await self._client.delete(*keys)
        except RedisError as e:
            raise CacheBackendError(f"Redis clear failed: {mask_sensitive_data(str(e))}") from e

    async def close(self) -> None:
        await self._client.aclose()
