"""Infrastructure cache.

Backend-agnostic cache port plus a Redis adapter, in-process backends and
startup backend selection.

Usage:

    from infrastructure.cache import resolve_cache_backend

    backend = resolve_cache_backend(settings)
    cache = backend.cache

    cached = cache.get("config:1:lang:en-us")
    if cached is None:
        value = load_from_store(...)
        cache.set("config:1:lang:en-us", value, ttl_seconds=3600)
"""

from infrastructure.cache.factory import (
    CacheBackend,
    CacheCapability,
    create_redis_client,
    resolve_cache_backend,
)
from infrastructure.cache.memory import InMemoryCache, NullCache
from infrastructure.cache.port import CachePort
from infrastructure.cache.redis_cache import RedisCache

__all__ = [
    "CachePort",
    "RedisCache",
    "InMemoryCache",
    "NullCache",
    "CacheBackend",
    "CacheCapability",
    "create_redis_client",
    "resolve_cache_backend",
]
