"""Infrastructure adapters: Redis cache, browser sessions, page scraping."""

from .cache_redis import AsyncRedisCache, connect_cache

__all__ = [
    "AsyncRedisCache",
    "connect_cache",
]
