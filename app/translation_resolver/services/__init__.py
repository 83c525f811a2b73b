"""Application-scoped providers and the request-scoped resolver factory."""

from translation_resolver.services.factory import create_resolver
from translation_resolver.services.providers import (
    get_dynamodb_client,
    get_locale_store,
    get_machine_translator,
    get_settings,
    get_translation_cache,
    get_translation_store,
    reset_providers,
)

__all__ = [
    "create_resolver",
    "get_settings",
    "get_translation_cache",
    "get_dynamodb_client",
    "get_locale_store",
    "get_translation_store",
    "get_machine_translator",
    "reset_providers",
]
