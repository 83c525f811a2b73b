"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    TranslationSettings, CacheSettings, PersistenceSettings,
    MachineTranslationSettings: Section classes
"""

from translation_resolver.configuration.infrastructure import (
    CacheSettings,
    MachineTranslationSettings,
    PersistenceSettings,
)
from translation_resolver.configuration.settings import Settings
from translation_resolver.configuration.translation import (
    DEFAULT_LOCALES,
    TranslationSettings,
)

__all__ = [
    "Settings",
    "TranslationSettings",
    "CacheSettings",
    "PersistenceSettings",
    "MachineTranslationSettings",
    "DEFAULT_LOCALES",
]
