"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for the translation
resolver's collaborators. Backends are chosen from settings.
"""

from functools import lru_cache

import boto3  # type: ignore

from translation_resolver.cache import (
    InMemoryCache,
    RedisCache,
    TranslationCache,
    create_redis_client,
)
from translation_resolver.configuration import Settings
from translation_resolver.integrations import GoogleTranslateClient, MachineTranslator
from translation_resolver.logging import get_module_logger
from translation_resolver.persistence import (
    DynamoDBLocaleStore,
    DynamoDBTranslationStore,
    InMemoryLocaleStore,
    InMemoryTranslationStore,
    LocaleStore,
    TranslationStore,
)

logger = get_module_logger()


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translation_cache() -> TranslationCache:
    """
    Get application-scoped translation cache.

    Returns:
        RedisCache when CACHE_BACKEND is "redis", InMemoryCache otherwise.

    Raises:
        ValueError: If CACHE_BACKEND names an unknown backend.
    """
    cache_settings = get_settings().cache
    backend = cache_settings.backend.lower()

    if backend == "memory":
        cache: TranslationCache = InMemoryCache()
    elif backend == "redis":
        cache = RedisCache(
            create_redis_client(cache_settings),
            key_prefix=cache_settings.redis_key_prefix,
        )
    else:
        raise ValueError(f"Unknown cache backend: {cache_settings.backend}")

    logger.info("initialized_translation_cache", backend=backend)
    return cache


@lru_cache
def get_dynamodb_client():
    """
    Get application-scoped boto3 DynamoDB client.

    Returns:
        boto3 DynamoDB client configured from persistence settings.
    """
    persistence = get_settings().persistence
    return boto3.client(
        "dynamodb",
        region_name=persistence.aws_region,
        endpoint_url=persistence.dynamodb_endpoint_url,
    )


def _store_backend() -> str:
    backend = get_settings().persistence.backend.lower()
    if backend not in ("memory", "dynamodb"):
        raise ValueError(f"Unknown store backend: {backend}")
    return backend


@lru_cache
def get_locale_store() -> LocaleStore:
    """
    Get application-scoped locale store.

    Returns:
        DynamoDBLocaleStore when STORE_BACKEND is "dynamodb",
        InMemoryLocaleStore otherwise.
    """
    if _store_backend() == "dynamodb":
        return DynamoDBLocaleStore(
            get_dynamodb_client(), get_settings().persistence.locales_table
        )
    return InMemoryLocaleStore()


@lru_cache
def get_translation_store() -> TranslationStore:
    """
    Get application-scoped translation store.

    Returns:
        DynamoDBTranslationStore when STORE_BACKEND is "dynamodb",
        InMemoryTranslationStore otherwise.
    """
    if _store_backend() == "dynamodb":
        return DynamoDBTranslationStore(
            get_dynamodb_client(), get_settings().persistence.translations_table
        )
    return InMemoryTranslationStore()


@lru_cache
def get_machine_translator() -> MachineTranslator:
    """
    Get application-scoped machine translator.

    Returns:
        GoogleTranslateClient configured from machine translation settings.
    """
    return GoogleTranslateClient.from_settings(get_settings().machine_translation)


def reset_providers() -> None:
    """Clear every cached provider (for testing only)."""
    for provider in (
        get_settings,
        get_translation_cache,
        get_dynamodb_client,
        get_locale_store,
        get_translation_store,
        get_machine_translator,
    ):
        provider.cache_clear()
