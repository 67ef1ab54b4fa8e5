"""Query cache for per-post read views.

Use cases cache the raw records behind a post's comment and vote views and
invalidate them once a mutation has committed, so the next read recomputes
the tree or tally from fresh store state. Domain services never touch the
cache.
"""

import json
import time
from abc import ABC, abstractmethod
from typing import Any, Callable, Literal, Optional

import logfire
import redis.asyncio as redis

from agora.domain.value import PostId

CacheKey = tuple[Literal["comments", "votes"], PostId]


def comments_key(post_id: PostId) -> CacheKey:
    """Cache key for a post's comments."""
    return ("comments", post_id)


def votes_key(post_id: PostId) -> CacheKey:
    """Cache key for a post's votes."""
    return ("votes", post_id)


class QueryCache(ABC):
    """Cache of JSON-compatible values keyed by view and post."""

    @abstractmethod
    async def get(self, key: CacheKey) -> Optional[Any]:
        """Return the cached value, or None on a miss."""
        pass

    @abstractmethod
    async def set(self, key: CacheKey, value: Any) -> None:
        """Store a value."""
        pass

    @abstractmethod
    async def invalidate(self, key: CacheKey) -> None:
        """Mark a view as stale so the next read goes to the store."""
        pass


class InMemoryQueryCache(QueryCache):
    """Process-local cache with the same expiry as the Redis cache."""

    def __init__(
        self,
        ttl_seconds: int = 300,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize in-memory cache.

        Args:
            ttl_seconds: Expiry for cached entries
            clock: Source of monotonic time in seconds
        """
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        # key -> (expires_at, value)
        self._entries: dict[CacheKey, tuple[float, Any]] = {}

    async def get(self, key: CacheKey) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    async def set(self, key: CacheKey, value: Any) -> None:
        self._entries[key] = (self._clock() + self.ttl_seconds, value)

    async def invalidate(self, key: CacheKey) -> None:
        self._entries.pop(key, None)


class RedisQueryCache(QueryCache):
    """Redis-backed cache shared between API workers.

    Cache failures are logged and treated as misses; the store stays the
    source of truth.
    """

    def __init__(
        self, client: redis.Redis, key_prefix: str = "agora:", ttl_seconds: int = 300
    ) -> None:
        """Initialize Redis cache.

        Args:
            client: Async Redis client (decode_responses=True)
            key_prefix: Prefix for every key
            ttl_seconds: Expiry for cached entries
        """
        self.client = client
        self.key_prefix = key_prefix
        self.ttl_seconds = ttl_seconds

    def _redis_key(self, key: CacheKey) -> str:
        kind, post_id = key
        return f"{self.key_prefix}{kind}:{post_id}"

    async def get(self, key: CacheKey) -> Optional[Any]:
        try:
            raw = await self.client.get(self._redis_key(key))
        except redis.RedisError as e:
            logfire.warn("Cache get failed", key=self._redis_key(key), error=str(e))
            return None
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            logfire.warn(
                "Cache entry is not valid JSON", key=self._redis_key(key), error=str(e)
            )
            return None

    async def set(self, key: CacheKey, value: Any) -> None:
        try:
            await self.client.set(
                self._redis_key(key), json.dumps(value), ex=self.ttl_seconds
            )
        except redis.RedisError as e:
            logfire.warn("Cache set failed", key=self._redis_key(key), error=str(e))

    async def invalidate(self, key: CacheKey) -> None:
        # A failed invalidation would serve stale views until the TTL expires
        try:
            await self.client.delete(self._redis_key(key))
        except redis.RedisError as e:
            logfire.error(
                "Cache invalidation failed", key=self._redis_key(key), error=str(e)
            )
