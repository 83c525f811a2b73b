"""Translation resolver configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from translation_resolver.configuration.infrastructure import (
    CacheSettings,
    MachineTranslationSettings,
    PersistenceSettings,
)
from translation_resolver.configuration.translation import TranslationSettings


class Settings(BaseSettings):
    """Translation resolver configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object:

    - **Features**: translation lookup behaviour (locales, auto-translate, TTL)
    - **Infrastructure**: cache, persistent store and machine translation API

    Environment Variables:
        PREFIX: Environment prefix for non-production deployments
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from translation_resolver.configuration.settings import settings

        default_locale = settings.translation.default_locale
        if settings.cache.backend == "redis":
            # Configure shared cache...
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    translation: TranslationSettings
    cache: CacheSettings
    persistence: PersistenceSettings
    machine_translation: MachineTranslationSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "translation": TranslationSettings,
            "cache": CacheSettings,
            "persistence": PersistenceSettings,
            "machine_translation": MachineTranslationSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
