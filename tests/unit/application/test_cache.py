"""Unit tests for the query cache."""

import json

import pytest
import redis.asyncio as redis

from agora.application.cache import (
    InMemoryQueryCache,
    RedisQueryCache,
    comments_key,
    votes_key,
)
from agora.domain.value import PostId


class FakeRedis:
    """Minimal stand-in for an async Redis client."""

    def __init__(self, fail: bool = False) -> None:
        self.data: dict[str, str] = {}
        self.expiry: dict[str, int] = {}
        self.fail = fail

    async def get(self, key):
        if self.fail:
            raise redis.ConnectionError("down")
        return self.data.get(key)

    async def set(self, key, value, ex=None):
        if self.fail:
            raise redis.ConnectionError("down")
        self.data[key] = value
        self.expiry[key] = ex

    async def delete(self, key):
        if self.fail:
            raise redis.ConnectionError("down")
        self.data.pop(key, None)


class TestCacheKeys:
    """Tests for cache key helpers."""

    def test_keys_are_distinct_per_view_and_post(self):
        """Comment and vote views never share a key."""
        assert comments_key(PostId(1)) == ("comments", 1)
        assert votes_key(PostId(1)) == ("votes", 1)
        assert comments_key(PostId(1)) != comments_key(PostId(2))


class TestInMemoryQueryCache:
    """Tests for InMemoryQueryCache."""

    @pytest.mark.asyncio
    async def test_get_set_invalidate(self):
        """Stored values are returned until invalidated."""
        # Arrange
        cache = InMemoryQueryCache()
        key = comments_key(PostId(1))

        # Act & Assert
        assert await cache.get(key) is None
        await cache.set(key, [{"id": 1}])
        assert await cache.get(key) == [{"id": 1}]
        await cache.invalidate(key)
        assert await cache.get(key) is None

    @pytest.mark.asyncio
    async def test_invalidate_missing_key_is_noop(self):
        """Invalidating an uncached view does nothing."""
        cache = InMemoryQueryCache()
        await cache.invalidate(votes_key(PostId(9)))
        assert await cache.get(votes_key(PostId(9))) is None

    @pytest.mark.asyncio
    async def test_entries_expire_after_ttl(self):
        """A stale entry is dropped once its TTL passes."""
        # Arrange
        now = [1000.0]
        cache = InMemoryQueryCache(ttl_seconds=60, clock=lambda: now[0])
        key = comments_key(PostId(1))
        await cache.set(key, [{"id": 1}])

        # Act & Assert
        now[0] += 59
        assert await cache.get(key) == [{"id": 1}]
        now[0] += 1
        assert await cache.get(key) is None


class TestRedisQueryCache:
    """Tests for RedisQueryCache."""

    @pytest.mark.asyncio
    async def test_values_are_json_under_prefixed_key(self):
        """Values are JSON-encoded with the configured prefix and TTL."""
        # Arrange
        client = FakeRedis()
        cache = RedisQueryCache(client, key_prefix="test:", ttl_seconds=60)

        # Act
        await cache.set(votes_key(PostId(7)), [{"user_id": "u", "value": 1}])

        # Assert
        assert json.loads(client.data["test:votes:7"]) == [{"user_id": "u", "value": 1}]
        assert client.expiry["test:votes:7"] == 60
        assert await cache.get(votes_key(PostId(7))) == [{"user_id": "u", "value": 1}]

    @pytest.mark.asyncio
    async def test_invalidate_deletes_key(self):
        """Invalidation removes the stored view."""
        # Arrange
        client = FakeRedis()
        cache = RedisQueryCache(client)
        await cache.set(comments_key(PostId(1)), [])

        # Act
        await cache.invalidate(comments_key(PostId(1)))

        # Assert
        assert await cache.get(comments_key(PostId(1))) is None

    @pytest.mark.asyncio
    async def test_redis_failure_is_a_miss(self):
        """An unreachable Redis behaves like an empty cache."""
        # Arrange
        cache = RedisQueryCache(FakeRedis(fail=True))
        key = comments_key(PostId(1))

        # Act & Assert
        await cache.set(key, [])
        assert await cache.get(key) is None
        await cache.invalidate(key)

    @pytest.mark.asyncio
    async def test_corrupt_entry_is_a_miss(self):
        """A value that is not JSON is treated as a miss."""
        # Arrange
        client = FakeRedis()
        client.data["agora:comments:1"] = "{not json"
        cache = RedisQueryCache(client)

        # Act & Assert
        assert await cache.get(comments_key(PostId(1))) is None
