"""Cache backend selection.

The cache backend is chosen once at startup. The outcome is an explicit
capability flag: multilingual reads are enabled only when a cache backend is
actually available.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

import redis
from infrastructure.cache.memory import InMemoryCache, NullCache
from infrastructure.cache.port import CachePort
from infrastructure.cache.redis_cache import RedisCache
from infrastructure.logging import get_module_logger

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = get_module_logger()


class CacheCapability(str, Enum):
    """Whether a working cache backend was found at startup."""

    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class CacheBackend:
    """Cache instance plus the capability flag resolved at startup.

    Attributes:
        cache: CachePort to inject into services (NullCache when unavailable).
        capability: AVAILABLE or UNAVAILABLE.
    """

    cache: CachePort
    capability: CacheCapability

    @property
    def is_available(self) -> bool:
        return self.capability is CacheCapability.AVAILABLE


def create_redis_client(settings: "Settings") -> redis.Redis:
    """Create a Redis client from cache settings.

    Args:
        settings: Settings instance.

    Returns:
        redis.Redis client with string responses.
    """
    cache_settings = settings.cache
    return redis.Redis(
        host=cache_settings.REDIS_HOST,
        port=cache_settings.REDIS_PORT,
        db=cache_settings.REDIS_DB,
        password=cache_settings.REDIS_PASSWORD,
        socket_timeout=cache_settings.REDIS_SOCKET_TIMEOUT,
        socket_connect_timeout=cache_settings.REDIS_SOCKET_TIMEOUT,
        decode_responses=True,
    )


def resolve_cache_backend(
    settings: "Settings", client: Optional[redis.Redis] = None
) -> CacheBackend:
    """Select the cache backend and resolve the capability flag.

    - ``redis``: ping once; on failure degrade to NullCache / UNAVAILABLE.
    - ``memory``: InMemoryCache / AVAILABLE.
    - ``none``: NullCache / UNAVAILABLE.

    Args:
        settings: Settings instance.
        client: Optional pre-built Redis client (tests).

    Returns:
        CacheBackend with the chosen cache and capability.
    """
    backend = settings.cache.CACHE_BACKEND

    if backend == "memory":
        logger.info("cache_backend_resolved", backend="memory", capability="available")
        return CacheBackend(InMemoryCache(), CacheCapability.AVAILABLE)

    if backend == "none":
        logger.info("cache_backend_resolved", backend="none", capability="unavailable")
        return CacheBackend(NullCache(), CacheCapability.UNAVAILABLE)

    redis_cache = RedisCache(client or create_redis_client(settings))
    if redis_cache.ping():
        logger.info(
            "cache_backend_resolved",
            backend="redis",
            capability="available",
            host=settings.cache.REDIS_HOST,
            port=settings.cache.REDIS_PORT,
        )
        return CacheBackend(redis_cache, CacheCapability.AVAILABLE)

    logger.warning(
        "cache_backend_unavailable",
        backend="redis",
        host=settings.cache.REDIS_HOST,
        port=settings.cache.REDIS_PORT,
    )
    return CacheBackend(NullCache(), CacheCapability.UNAVAILABLE)
