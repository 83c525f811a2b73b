"""Translation cache.

Provides a write-once, expiring key-value cache for locales and
translations, with in-memory and Redis backends.

Usage:

    from translation_resolver.services import get_translation_cache

    cache = get_translation_cache()

    cached = cache.get(key)
    if cached is None:
        value = load(...)
        cache.put_if_absent(key, value, ttl_seconds=1800)
"""

from translation_resolver.cache.base import TranslationCache
from translation_resolver.cache.memory import InMemoryCache
from translation_resolver.cache.redis_cache import RedisCache, create_redis_client

__all__ = [
    "TranslationCache",
    "InMemoryCache",
    "RedisCache",
    "create_redis_client",
]
