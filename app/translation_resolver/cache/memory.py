"""In-memory translation cache."""

import threading
import time
from typing import Any, Callable, Dict, Optional, Tuple

from translation_resolver.cache.base import TranslationCache
from translation_resolver.logging import get_module_logger

logger = get_module_logger()


class InMemoryCache(TranslationCache):
    """Process-local cache with per-entry expiry.

    Suitable for single-process deployments, development and tests.

    Attributes:
        clock: Monotonic time source in seconds (injectable for tests).
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._entries: Dict[str, Tuple[Dict[str, Any], float]] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def _live_entry(self, key: str) -> Optional[Dict[str, Any]]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self.clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            value = self._live_entry(key)
            if value is None:
                self._misses += 1
                return None
            self._hits += 1
            return dict(value)

    def has(self, key: str) -> bool:
        with self._lock:
            return self._live_entry(key) is not None

    def put_if_absent(
        self, key: str, value: Dict[str, Any], ttl_seconds: int
    ) -> bool:
        with self._lock:
            if self._live_entry(key) is not None:
                logger.debug("cache_put_skipped_existing", key=key)
                return False
            self._entries[key] = (dict(value), self.clock() + ttl_seconds)
            logger.debug("cache_put", key=key, ttl_seconds=ttl_seconds)
            return True

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def get_stats(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "backend": "memory",
                "entries": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
            }
