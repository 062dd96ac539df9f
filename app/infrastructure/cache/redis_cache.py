"""Redis cache adapter."""

from typing import Any, Dict, List, Optional

import redis
import structlog
from infrastructure.cache.codec import decode_value, encode_value
from infrastructure.cache.port import CachePort

logger = structlog.get_logger()

# Keys deleted per DEL call during pattern invalidation
DELETE_BATCH_SIZE = 500


class RedisCache(CachePort):
    """Redis-backed cache.

    Uses SETEX for per-key expiry and SCAN MATCH for pattern deletes, so a
    bulk invalidation never blocks the server the way KEYS would.

    All operations are fail-soft: connection and serialization errors are
    logged and swallowed. ``get`` returns None on error, forcing the caller
    back to its store.
    """

    def __init__(self, client: redis.Redis, scan_count: int = 500):
        """Initialize Redis cache.

        Args:
            client: Redis client (created with ``decode_responses=True``).
            scan_count: COUNT hint passed to SCAN during pattern deletes.
        """
        self._client = client
        self.scan_count = scan_count

    def get(self, key: str) -> Optional[Any]:
        try:
            raw = self._client.get(key)
        except redis.exceptions.RedisError as e:
            logger.error("cache_get_error", key=key, error=str(e))
            return None

        if raw is None:
            logger.debug("cache_miss", key=key)
            return None

        try:
            value = decode_value(raw)
        except ValueError as e:
            logger.error("cache_deserialization_error", key=key, error=str(e))
            return None

        logger.debug("cache_hit", key=key)
        return value

    def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        try:
            serialized = encode_value(value)
        except (TypeError, ValueError) as e:
            logger.error("cache_serialization_error", key=key, error=str(e))
            return

        try:
            self._client.setex(key, ttl_seconds, serialized)
        except redis.exceptions.RedisError as e:
            logger.error("cache_set_error", key=key, error=str(e))
            return

        logger.debug("cache_set_success", key=key, ttl_seconds=ttl_seconds)

    def delete(self, key: str) -> None:
        try:
            self._client.delete(key)
        except redis.exceptions.RedisError as e:
            logger.error("cache_delete_error", key=key, error=str(e))
            return

        logger.debug("cache_entry_deleted", key=key)

    def delete_by_prefix(self, pattern: str) -> None:
        try:
            keys: List[str] = list(
                self._client.scan_iter(match=pattern, count=self.scan_count)
            )
            if not keys:
                logger.debug("cache_pattern_no_match", pattern=pattern)
                return

            for start in range(0, len(keys), DELETE_BATCH_SIZE):
                self._client.delete(*keys[start : start + DELETE_BATCH_SIZE])
        except redis.exceptions.RedisError as e:
            logger.error("cache_delete_pattern_error", pattern=pattern, error=str(e))
            return

        logger.debug("cache_pattern_deleted", pattern=pattern, count=len(keys))

    def ping(self) -> bool:
        """Check connectivity to the Redis server.

        Returns:
            True if the server answered PING, False otherwise.
        """
        try:
            return bool(self._client.ping())
        except redis.exceptions.RedisError as e:
            logger.warning("cache_ping_failed", error=str(e))
            return False

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dict with Redis backend information.
        """
        connection_kwargs = getattr(
            getattr(self._client, "connection_pool", None), "connection_kwargs", {}
        )
        return {
            "backend": "redis",
            "host": connection_kwargs.get("host"),
            "port": connection_kwargs.get("port"),
            "db": connection_kwargs.get("db"),
        }
