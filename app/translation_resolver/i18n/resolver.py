"""Translation resolver: cascading cache, store and machine translation lookup.

Given text written in the default locale, the resolver returns its rendering
in the session's current locale:

1. The root translation of the text is found (or created) in the default locale.
2. The target locale is resolved from the session, defaulting it on first use.
3. The derived translation of the root in the target locale is looked up in
   the cache, then in the store. If missing, it is created, optionally through
   the machine translator, and cached.

Cache entries are written once and never overwritten. They are advisory: an
entry is only used when it matches what the lookup asked for.
"""

from typing import TYPE_CHECKING, Any, Dict, Optional

from translation_resolver.configuration import TranslationSettings
from translation_resolver.i18n.exceptions import (
    InvalidLocaleCode,
    MachineTranslationError,
)
from translation_resolver.i18n.keys import TranslationCacheKeyBuilder
from translation_resolver.i18n.models import Locale, Translation
from translation_resolver.i18n.session import SessionLocale
from translation_resolver.logging import get_module_logger

if TYPE_CHECKING:
    from translation_resolver.cache import TranslationCache
    from translation_resolver.integrations import MachineTranslator
    from translation_resolver.persistence import LocaleStore, TranslationStore

logger = get_module_logger()


def ucfirst(text: str) -> str:
    """Upper-case the first character of text, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


class TranslationResolver:
    """Resolves translations for one request.

    All collaborators are passed in explicitly; the session makes an instance
    request-scoped. Use ``translation_resolver.services.create_resolver`` to
    build one from the application-scoped providers.

    Attributes:
        default_locale: Code of the locale the application text is written in.
    """

    def __init__(
        self,
        settings: TranslationSettings,
        locale_store: "LocaleStore",
        translation_store: "TranslationStore",
        cache: "TranslationCache",
        session: SessionLocale,
        translator: Optional["MachineTranslator"] = None,
        key_builder: Optional[TranslationCacheKeyBuilder] = None,
    ):
        """Initialize the resolver.

        Args:
            settings: Translation settings (locales, auto-translate, TTL).
            locale_store: Store owning Locale records.
            translation_store: Store owning Translation records.
            cache: Write-once expiring cache.
            session: Holder of the session's current locale.
            translator: Machine translator, required when auto-translate is on.
            key_builder: Cache key builder (default: "translation" namespace).

        Raises:
            ValueError: If auto-translate is enabled without a translator.
        """
        if settings.auto_translate and translator is None:
            raise ValueError("auto_translate is enabled but no translator was given")

        self._settings = settings
        self._locale_store = locale_store
        self._translation_store = translation_store
        self._cache = cache
        self._session = session
        self._translator = translator
        self._keys = key_builder or TranslationCacheKeyBuilder()

        self.default_locale = ""
        self.set_default_locale(self.get_app_locale())

    def translate(self, text: str = "", data: Optional[Dict[str, Any]] = None) -> str:
        """Return the translation of text for the session's current locale.

        Args:
            text: Text in the default locale.
            data: Substitution variables; accepted for callers' convenience,
                interpolation happens in the presentation layer.

        Returns:
            Translated text, or the default text when the current locale is
            the default locale.

        Raises:
            InvalidLocaleCode: If the default or current locale is not configured.
            MachineTranslationError: If auto-translation fails and falling back
                is disabled.
        """
        default_translation = self.get_default_translation(text)
        to_locale = self.first_or_create_locale(self.get_locale())

        translation = self._find_translation(to_locale, default_translation)
        if translation is not None:
            return translation.text

        if default_translation.locale_id == to_locale.id:
            return default_translation.text

        try:
            translation = self.first_or_create_translation(
                to_locale, default_translation.text, default_translation
            )
        except MachineTranslationError as e:
            if not self._settings.fallback_on_translator_error:
                raise
            logger.warning(
                "machine_translation_fallback",
                locale=to_locale.code,
                parent_id=default_translation.id,
                error_code=e.error_code,
                transient=e.is_transient,
                retry_after=e.retry_after,
                error=str(e),
            )
            return default_translation.text

        return translation.text

    def get_default_translation(self, text: str) -> Translation:
        """Return the root translation of text in the default locale.

        Args:
            text: Text in the default locale.

        Returns:
            Root Translation, created on first use.
        """
        locale = self.first_or_create_locale(self.get_default_locale())
        return self.first_or_create_translation(locale, text)

    def get_app_locale(self) -> str:
        """Return the default locale code from configuration."""
        return self._settings.default_locale

    def get_default_locale(self) -> str:
        return self.default_locale

    def set_default_locale(self, code: str = "") -> None:
        self.default_locale = code

    def get_locale(self) -> str:
        """Return the session's current locale code.

        On a session's first lookup no locale is set yet; the default locale
        is stored in the session and used.

        Returns:
            Current locale code.
        """
        code = self._session.get()
        if code:
            return code

        code = self.get_default_locale()
        self.set_locale(code)
        logger.debug("session_locale_initialized", locale=code)
        return code

    def set_locale(self, code: str = "") -> None:
        """Store a locale code in the session."""
        self._session.set(code)

    def first_or_create_locale(self, code: str) -> Locale:
        """Return the Locale for a code, creating it on first use.

        Args:
            code: Locale code.

        Returns:
            Cached or stored Locale.

        Raises:
            InvalidLocaleCode: If code is not in the configured locales.
        """
        key = self._keys.locale_key(code)
        cached = self._cached_locale(key, code)
        if cached is not None:
            return cached

        name = self._config_locale_name(code)
        locale = self._locale_store.get_or_create(code, name)
        self._cache.put_if_absent(
            key, locale.to_dict(), self._settings.cache_ttl_seconds
        )
        return locale

    def first_or_create_translation(
        self,
        locale: Locale,
        text: str,
        parent_translation: Optional[Translation] = None,
    ) -> Translation:
        """Return the translation of text in a locale, creating it on first use.

        Without a parent, the root translation (locale, text) is returned.
        With a parent, the derived translation of the parent in locale is
        returned; when created it holds the machine translated text if
        auto-translate is on, the parent's text otherwise.

        Args:
            locale: Locale of the translation.
            text: Source text; the parent's text when a parent is given.
            parent_translation: Root translation being translated, if any.

        Returns:
            Cached or stored Translation.

        Raises:
            MachineTranslationError: If auto-translation fails.
        """
        parent_id = parent_translation.id if parent_translation else None
        key = self._keys.translation_key(locale.code, text)

        cached = self._cached_translation(key, locale, parent_id)
        if cached is not None:
            return cached

        translated_text = text
        if parent_translation is not None and self._settings.auto_translate:
            translated_text = self._translator.translate(
                text, parent_translation.locale_code, locale.code
            )
            if self._settings.auto_translate_ucfirst:
                translated_text = ucfirst(translated_text)
            logger.info(
                "auto_translated",
                source=parent_translation.locale_code,
                target=locale.code,
                parent_id=parent_id,
            )

        translation = self._translation_store.get_or_create(
            locale, translated_text, parent_id
        )
        self._cache.put_if_absent(
            key, translation.to_dict(), self._settings.cache_ttl_seconds
        )
        return translation

    def _find_translation(
        self, locale: Locale, parent_translation: Translation
    ) -> Optional[Translation]:
        key = self._keys.translation_key(locale.code, parent_translation.text)
        cached = self._cached_translation(key, locale, parent_translation.id)
        if cached is not None:
            return cached

        translation = self._translation_store.find_by_locale_and_parent(
            locale.id, parent_translation.id
        )
        if translation is not None:
            self._cache.put_if_absent(
                key, translation.to_dict(), self._settings.cache_ttl_seconds
            )
        return translation

    def _cached_locale(self, key: str, code: str) -> Optional[Locale]:
        cached = self._cache.get(key)
        if cached is None:
            return None

        try:
            locale = Locale.from_dict(cached)
        except (KeyError, TypeError) as e:
            logger.warning("locale_cache_invalid_entry", key=key, error=str(e))
            return None

        if locale.code != code:
            logger.debug("locale_cache_mismatch", key=key, locale=code)
            return None

        logger.debug("locale_cache_hit", locale=code)
        return locale

    def _cached_translation(
        self, key: str, locale: Locale, parent_id: Optional[str]
    ) -> Optional[Translation]:
        cached = self._cache.get(key)
        if cached is None:
            return None

        try:
            translation = Translation.from_dict(cached)
        except (KeyError, TypeError) as e:
            logger.warning("translation_cache_invalid_entry", key=key, error=str(e))
            return None

        if translation.locale_id != locale.id or translation.parent_id != parent_id:
            logger.debug("translation_cache_mismatch", key=key, locale=locale.code)
            return None

        logger.debug("translation_cache_hit", locale=locale.code, parent_id=parent_id)
        return translation

    def _config_locale_name(self, code: str) -> str:
        try:
            return self._settings.locales[code]
        except KeyError:
            logger.warning("invalid_locale_code", locale=code)
            raise InvalidLocaleCode(code) from None
