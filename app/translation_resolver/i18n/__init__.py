"""i18n - runtime translation lookup.

Main components:
- models: Locale, Translation
- resolver: TranslationResolver with cascading cache/store/machine translation lookup
- keys: TranslationCacheKeyBuilder
- session: SessionLocale, InMemorySessionLocale, MappingSessionLocale
- exceptions: TranslationError and its subclasses
"""

from translation_resolver.i18n.exceptions import (
    InvalidLocaleCode,
    MachineTranslationError,
    TranslationError,
    TranslationStoreError,
)
from translation_resolver.i18n.keys import TranslationCacheKeyBuilder
from translation_resolver.i18n.models import Locale, Translation
from translation_resolver.i18n.resolver import TranslationResolver, ucfirst
from translation_resolver.i18n.session import (
    InMemorySessionLocale,
    MappingSessionLocale,
    SessionLocale,
)

__all__ = [
    "Locale",
    "Translation",
    "TranslationResolver",
    "TranslationCacheKeyBuilder",
    "SessionLocale",
    "InMemorySessionLocale",
    "MappingSessionLocale",
    "TranslationError",
    "InvalidLocaleCode",
    "MachineTranslationError",
    "TranslationStoreError",
    "ucfirst",
]
