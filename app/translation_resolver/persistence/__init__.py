"""Locale and translation persistence.

Stores are the source of truth for locales and translations and the only
consistency boundary for concurrent creation.
"""

from translation_resolver.persistence.base import LocaleStore, TranslationStore
from translation_resolver.persistence.dynamodb import (
    DynamoDBLocaleStore,
    DynamoDBTranslationStore,
)
from translation_resolver.persistence.memory import (
    InMemoryLocaleStore,
    InMemoryTranslationStore,
)

__all__ = [
    "LocaleStore",
    "TranslationStore",
    "InMemoryLocaleStore",
    "InMemoryTranslationStore",
    "DynamoDBLocaleStore",
    "DynamoDBTranslationStore",
]
