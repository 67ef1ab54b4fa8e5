"""Query cache infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
import redis.asyncio as redis

from agora.application.cache import InMemoryQueryCache, QueryCache, RedisQueryCache
from agora.config import CacheSettings
from agora.util.di.base import ProviderBase


class CacheProvider(ProviderBase):
    """Query cache component base."""

    __mock_component__ = "cache"


class ProdCacheProvider(CacheProvider):
    """Production cache provider.

    Uses Redis when CACHE__REDIS_URL is set so API workers share one cache,
    otherwise falls back to a process-local cache.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_query_cache(
        self, cache_settings: CacheSettings
    ) -> AsyncIterator[QueryCache]:
        """Provide query cache, closing the Redis client on shutdown."""
        if not cache_settings.redis_url:
            logfire.info("Using in-memory query cache")
            yield InMemoryQueryCache(ttl_seconds=cache_settings.ttl_seconds)
            return

        client = redis.from_url(cache_settings.redis_url, decode_responses=True)
        logfire.info("Using Redis query cache", key_prefix=cache_settings.key_prefix)
        try:
            yield RedisQueryCache(
                client,
                key_prefix=cache_settings.key_prefix,
                ttl_seconds=cache_settings.ttl_seconds,
            )
        finally:
            await client.aclose()
