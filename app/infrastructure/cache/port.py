"""Cache port abstract base class."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class CachePort(ABC):
    """Backend-agnostic key-value cache contract.

    Implementations store structured values (JSON-compatible records) under
    string keys with a per-entry TTL. Every operation must be fail-soft: a
    backend or serialization problem is logged and absorbed, never raised to
    the caller. ``get`` then reports a miss so the caller reads its store.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Get the cached value for a key.

        Args:
            key: Cache key.

        Returns:
            Cached value, or None if absent, expired or unreadable.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        """Store a value for a key.

        Args:
            key: Cache key.
            value: JSON-compatible value to cache.
            ttl_seconds: Time-to-live in seconds, measured from this write.
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Delete a single cache entry.

        Args:
            key: Cache key to delete.
        """
        pass

    @abstractmethod
    def delete_by_prefix(self, pattern: str) -> None:
        """Delete every entry whose key matches a glob-style pattern.

        Args:
            pattern: Glob pattern (e.g. "config:123:lang:*").
        """
        pass

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dict with backend information (implementation-specific).
        """
        return {"backend": type(self).__name__}
