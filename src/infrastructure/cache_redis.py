"""Async Redis client for problem metadata hashes."""

from typing import Optional

from loguru import logger
from redis import asyncio as aioredis
from redis.exceptions import RedisError

from domain.exceptions import StoreUnavailableError


class AsyncRedisCache:
    """Thin async wrapper over a Redis connection pool."""

    def __init__(self, url: str, socket_timeout: float = 5.0):
        """
        Initialize Redis cache client.

        Args:
            url: Redis URL (``redis://`` or ``rediss://``)
            socket_timeout: Seconds before a Redis command times out
        """
        self.url = url
        self.socket_timeout = socket_timeout
        self._client: Optional[aioredis.Redis] = None

    async def connect(self) -> None:
        """Open the connection pool and verify the server answers."""
        self._client = aioredis.from_url(
            self.url,
            decode_responses=True,
            socket_timeout=self.socket_timeout,
            socket_connect_timeout=self.socket_timeout,
        )
        try:
            await self._client.ping()
        except RedisError as e:
            await self.close()
            raise StoreUnavailableError(f"Redis is not reachable: {e}") from e
        logger.debug("Connected to Redis")

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.debug("Redis connection closed")

    @property
    def client(self) -> aioredis.Redis:
        if self._client is None:
            raise StoreUnavailableError("Redis client is not connected")
        return self._client

    async def hgetall(self, key: str) -> dict[str, str]:
        try:
            return await self.client.hgetall(key)
        except RedisError as e:
            raise StoreUnavailableError(f"Failed to read {key}: {e}") from e

    async def replace_hash(self, key: str, mapping: dict[str, str]) -> None:
        """Overwrite the whole hash atomically so fields of two writes never mix."""
        try:
            async with self.client.pipeline(transaction=True) as pipe:
                pipe.delete(key)
                pipe.hset(key, mapping=mapping)
                await pipe.execute()
        except RedisError as e:
            raise StoreUnavailableError(f"Failed to write {key}: {e}") from e


async def connect_cache(url: Optional[str]) -> Optional[AsyncRedisCache]:
    """Connect to Redis, or return None (caching disabled) when it is unavailable."""
    if not url:
        logger.info("REDIS_URL not set, caching disabled")
        return None

    client = AsyncRedisCache(url)
    try:
        await client.connect()
    except StoreUnavailableError as e:
        logger.warning(f"Failed to connect to Redis, caching disabled: {e}")
        return None
    return client
