"""In-process cache backends.

``InMemoryCache`` honours TTLs and glob patterns the way Redis does and is
meant for single-instance development and tests. ``NullCache`` stores
nothing; it stands in when no cache backend is available, so every read
goes to the store.
"""

import fnmatch
import threading
import time
from typing import Any, Dict, Optional, Tuple

import structlog
from infrastructure.cache.codec import decode_value, encode_value
from infrastructure.cache.port import CachePort

logger = structlog.get_logger()


class InMemoryCache(CachePort):
    """Thread-safe in-memory cache with per-key expiry.

    Values are stored in their encoded text form so the serialization
    behaviour matches the Redis adapter.
    """

    def __init__(self, clock=time.monotonic):
        """Initialize the in-memory cache.

        Args:
            clock: Callable returning seconds; injectable for expiry tests.
        """
        self._entries: Dict[str, Tuple[str, float]] = {}
        self._lock = threading.Lock()
        self._clock = clock

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            text, expires_at = entry
            if expires_at <= self._clock():
                del self._entries[key]
                return None
        return decode_value(text)

    def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        try:
            text = encode_value(value)
        except (TypeError, ValueError) as e:
            logger.error("cache_serialization_error", key=key, error=str(e))
            return
        with self._lock:
            self._entries[key] = (text, self._clock() + ttl_seconds)

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def delete_by_prefix(self, pattern: str) -> None:
        with self._lock:
            matching = [k for k in self._entries if fnmatch.fnmatchcase(k, pattern)]
            for key in matching:
                del self._entries[key]
        logger.debug("cache_pattern_deleted", pattern=pattern, count=len(matching))

    def keys(self) -> list[str]:
        """Return the live (unexpired) keys."""
        now = self._clock()
        with self._lock:
            return [k for k, (_, expires_at) in self._entries.items() if expires_at > now]

    def get_stats(self) -> Dict[str, Any]:
        with self._lock:
            size = len(self._entries)
        return {"backend": "memory", "entries": size}


class NullCache(CachePort):
    """Cache that never stores anything."""

    def get(self, key: str) -> Optional[Any]:
        return None

    def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        pass

    def delete(self, key: str) -> None:
        pass

    def delete_by_prefix(self, pattern: str) -> None:
        pass

    def get_stats(self) -> Dict[str, Any]:
        return {"backend": "none"}
