"""Cache-aside store for problem metadata records."""

from typing import Optional

from loguru import logger

from domain.models import ProblemRecord, normalize_identifier
from infrastructure.interfaces import CacheClientProtocol


class MetadataStore:
    """
    Reads and writes ProblemRecords in a hash store.

    Store failures are treated as cache misses on read and as no-ops on write,
    so a broken cache never fails a request.
    """

    def __init__(self, cache_client: Optional[CacheClientProtocol] = None, key_prefix: str = ""):
        self.cache_client = cache_client
        self.key_prefix = key_prefix

    def cache_key(self, identifier: str) -> str:
        return f"{self.key_prefix}{identifier}"

    async def get(self, identifier: Optional[str]) -> Optional[ProblemRecord]:
        """Get the cached record for identifier, or None on miss or store failure."""
        key = normalize_identifier(identifier)
        if not key or not self.cache_client:
            return None

        try:
            mapping = await self.cache_client.hgetall(self.cache_key(key))
        except Exception as e:
            logger.warning(f"Failed to get from cache: {e}")
            return None

        if not mapping:
            logger.info(f"Cache MISS for: {key}")
            return None

        logger.info(f"Cache HIT for: {key}")
        return ProblemRecord.from_mapping(key, mapping)

    async def put(self, identifier: Optional[str], record: ProblemRecord) -> None:
        """Overwrite the cached record for identifier; failures are logged and dropped."""
        key = normalize_identifier(identifier)
        if not key or not self.cache_client:
            return

        try:
            await self.cache_client.replace_hash(self.cache_key(key), record.to_mapping())
            logger.info(f"Cached data for: {key}")
        except Exception as e:
            logger.warning(f"Failed to save to cache: {e}")
