"""Translation feature settings."""

from typing import Dict

from pydantic import Field

from translation_resolver.configuration.base import FeatureSettings

DEFAULT_LOCALES: Dict[str, str] = {
    "ar": "Arabic",
    "bg": "Bulgarian",
    "cs": "Czech",
    "da": "Danish",
    "de": "German",
    "el": "Greek",
    "en": "English",
    "es": "Spanish",
    "et": "Estonian",
    "fa": "Persian",
    "fi": "Finnish",
    "fr": "French",
    "he": "Hebrew",
    "hi": "Hindi",
    "hr": "Croatian",
    "hu": "Hungarian",
    "id": "Indonesian",
    "it": "Italian",
    "ja": "Japanese",
    "ko": "Korean",
    "lt": "Lithuanian",
    "lv": "Latvian",
    "nl": "Dutch",
    "no": "Norwegian",
    "pl": "Polish",
    "pt": "Portuguese",
    "ro": "Romanian",
    "ru": "Russian",
    "sk": "Slovak",
    "sl": "Slovenian",
    "sr": "Serbian",
    "sv": "Swedish",
    "th": "Thai",
    "tr": "Turkish",
    "uk": "Ukrainian",
    "vi": "Vietnamese",
    "zh": "Chinese",
}


class TranslationSettings(FeatureSettings):
    """Translation lookup configuration.

    Environment Variables:
        TRANSLATION_DEFAULT_LOCALE: Locale code the application text is written in (default: en)
        TRANSLATION_LOCALES: JSON object mapping supported locale codes to display names
        TRANSLATION_AUTO_TRANSLATE: Machine translate new translations (default: False)
        TRANSLATION_AUTO_TRANSLATE_UCFIRST: Upper-case the first character of
            machine translated text (default: True)
        TRANSLATION_CACHE_TTL_MINUTES: Lifetime of cached locales and translations (default: 30)
        TRANSLATION_FALLBACK_ON_TRANSLATOR_ERROR: Serve the untranslated default text
            when the machine translator fails instead of failing the lookup (default: False)

    Example:
        ```python
        from translation_resolver.services import get_settings

        settings = get_settings()

        if settings.translation.auto_translate:
            # Configure machine translator...
        ```
    """

    default_locale: str = Field(
        default="en",
        alias="TRANSLATION_DEFAULT_LOCALE",
        description="Locale code of the application's source text",
    )
    locales: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_LOCALES),
        alias="TRANSLATION_LOCALES",
        description="Supported locale codes mapped to their display names",
    )
    auto_translate: bool = Field(
        default=False,
        alias="TRANSLATION_AUTO_TRANSLATE",
        description="Run new translations through the machine translator",
    )
    auto_translate_ucfirst: bool = Field(
        default=True,
        alias="TRANSLATION_AUTO_TRANSLATE_UCFIRST",
        description="Upper-case the first character of machine translated text",
    )
    cache_ttl_minutes: int = Field(
        default=30,
        alias="TRANSLATION_CACHE_TTL_MINUTES",
        description="Time-to-live for cached locales and translations (minutes)",
    )
    fallback_on_translator_error: bool = Field(
        default=False,
        alias="TRANSLATION_FALLBACK_ON_TRANSLATOR_ERROR",
        description="Return the default text when machine translation fails",
    )

    @property
    def cache_ttl_seconds(self) -> int:
        """Cache time-to-live expressed in seconds.

        Returns:
            cache_ttl_minutes converted to seconds.
        """
        return self.cache_ttl_minutes * 60
