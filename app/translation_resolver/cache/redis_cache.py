"""Redis-backed translation cache.

Shares cached locales and translations between processes through a Redis
(or ElastiCache Redis/Valkey) server. Values are stored as JSON strings.

Any Redis failure is logged and degrades to a miss (reads) or to an
unwritten entry (writes); the cache is never fatal to a lookup.
"""

import json
from typing import Any, Dict, Optional

from redis import ConnectionPool, Redis, RedisError  # type: ignore

from translation_resolver.cache.base import TranslationCache
from translation_resolver.configuration import CacheSettings
from translation_resolver.logging import get_module_logger

logger = get_module_logger()


def create_redis_client(cache_settings: CacheSettings) -> Redis:
    """Create a pooled Redis client from cache settings.

    The connection is established lazily on the first command.

    Args:
        cache_settings: CacheSettings with host, port, db and timeouts

    Returns:
        Redis client instance with connection pooling
    """
    pool = ConnectionPool(
        host=cache_settings.redis_host,
        port=cache_settings.redis_port,
        db=cache_settings.redis_db,
        decode_responses=True,
        max_connections=10,
        socket_timeout=cache_settings.redis_socket_timeout,
        socket_connect_timeout=cache_settings.redis_socket_timeout,
        retry_on_timeout=True,
        health_check_interval=30,
    )
    logger.info(
        "redis_connection_pool_created",
        host=cache_settings.redis_host,
        port=cache_settings.redis_port,
        db=cache_settings.redis_db,
    )
    return Redis(connection_pool=pool)


class RedisCache(TranslationCache):
    """Redis implementation of TranslationCache.

    put_if_absent maps onto ``SET key value NX EX ttl``, so concurrent writers
    cannot overwrite each other.
    """

    def __init__(self, client: Redis, key_prefix: str = ""):
        """Initialize Redis cache.

        Args:
            client: Redis client (decode_responses=True expected).
            key_prefix: Prefix prepended to every key.
        """
        self._client = client
        self.key_prefix = key_prefix

    def _key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        try:
            raw = self._client.get(self._key(key))
        except RedisError as e:
            logger.warning("redis_cache_get_error", key=key, error=str(e))
            return None

        if raw is None:
            logger.debug("redis_cache_miss", key=key)
            return None

        try:
            value = json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.warning("redis_cache_corrupt_entry", key=key, error=str(e))
            return None

        if not isinstance(value, dict):
            logger.warning("redis_cache_unexpected_value", key=key)
            return None

        logger.debug("redis_cache_hit", key=key)
        return value

    def has(self, key: str) -> bool:
        try:
            return bool(self._client.exists(self._key(key)))
        except RedisError as e:
            logger.warning("redis_cache_exists_error", key=key, error=str(e))
            return False

    def put_if_absent(
        self, key: str, value: Dict[str, Any], ttl_seconds: int
    ) -> bool:
        try:
            written = self._client.set(
                self._key(key), json.dumps(value), nx=True, ex=ttl_seconds
            )
        except (TypeError, ValueError) as e:
            logger.error("redis_cache_serialization_error", key=key, error=str(e))
            return False
        except RedisError as e:
            logger.warning("redis_cache_set_error", key=key, error=str(e))
            return False

        if written:
            logger.debug("redis_cache_set", key=key, ttl_seconds=ttl_seconds)
        else:
            logger.debug("redis_cache_set_skipped_existing", key=key)
        return bool(written)

    def clear(self) -> None:
        """Delete every key under the configured prefix.

        Note: scans the keyspace; should only be used in testing.

        Raises:
            ValueError: If no key prefix is configured, since the scan would
                match every key in the database.
        """
        if not self.key_prefix:
            logger.error("redis_cache_clear_refused_without_prefix")
            raise ValueError("RedisCache.clear() requires a non-empty key_prefix")

        logger.warning("redis_cache_clear_called", key_prefix=self.key_prefix)
        try:
            keys = list(self._client.scan_iter(match=f"{self.key_prefix}*"))
            if keys:
                self._client.delete(*keys)
            logger.info("redis_cache_cleared", keys_deleted=len(keys))
        except RedisError as e:
            logger.error("redis_cache_clear_error", error=str(e), exc_info=True)

    def get_stats(self) -> Dict[str, Any]:
        return {
            "backend": "redis",
            "key_prefix": self.key_prefix,
        }
