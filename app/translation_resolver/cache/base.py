"""Translation cache abstract base class."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class TranslationCache(ABC):
    """Abstract base class for translation cache implementations.

    The cache is advisory: it only ever shortens lookups and is never the
    source of truth. Entries are written once and expire after their TTL;
    an existing entry is never overwritten.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[Dict[str, Any]]:
        """Get the cached value for a key.

        Args:
            key: Cache key.

        Returns:
            Cached value or None if missing, expired or unavailable.
        """

    @abstractmethod
    def has(self, key: str) -> bool:
        """Check whether a live entry exists for a key.

        Args:
            key: Cache key.

        Returns:
            True if an unexpired entry exists, False otherwise.
        """

    @abstractmethod
    def put_if_absent(
        self, key: str, value: Dict[str, Any], ttl_seconds: int
    ) -> bool:
        """Store a value unless the key already holds one.

        Args:
            key: Cache key.
            value: JSON-serializable value to cache.
            ttl_seconds: Time-to-live in seconds.

        Returns:
            True if the value was written, False if the key already existed
            or the cache was unavailable.
        """

    @abstractmethod
    def clear(self) -> None:
        """Clear all cached entries (for testing)."""

    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dict with cache statistics (implementation-specific).
        """
