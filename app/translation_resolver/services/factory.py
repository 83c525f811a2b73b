"""Factory for request-scoped translation resolvers."""

from typing import Optional

from translation_resolver.cache import TranslationCache
from translation_resolver.configuration import TranslationSettings
from translation_resolver.i18n import SessionLocale, TranslationResolver
from translation_resolver.integrations import MachineTranslator
from translation_resolver.persistence import LocaleStore, TranslationStore
from translation_resolver.services.providers import (
    get_locale_store,
    get_machine_translator,
    get_settings,
    get_translation_cache,
    get_translation_store,
)


def create_resolver(
    session: SessionLocale,
    settings: Optional[TranslationSettings] = None,
    locale_store: Optional[LocaleStore] = None,
    translation_store: Optional[TranslationStore] = None,
    cache: Optional[TranslationCache] = None,
    translator: Optional[MachineTranslator] = None,
) -> TranslationResolver:
    """Create a TranslationResolver for one request.

    Collaborators that are not given come from the application-scoped
    providers. The machine translator is only built when auto-translate is
    enabled.

    Args:
        session: The request's session locale holder
        settings: Translation settings (default: from get_settings())
        locale_store: Locale store override
        translation_store: Translation store override
        cache: Translation cache override
        translator: Machine translator override

    Returns:
        TranslationResolver: Resolver bound to the session

    Usage:
        # In a request handler
        resolver = create_resolver(MappingSessionLocale(request.session))
        title = resolver.translate("Welcome back")
    """
    if settings is None:
        settings = get_settings().translation
    if locale_store is None:
        locale_store = get_locale_store()
    if translation_store is None:
        translation_store = get_translation_store()
    if cache is None:
        cache = get_translation_cache()
    if translator is None and settings.auto_translate:
        translator = get_machine_translator()

    return TranslationResolver(
        settings=settings,
        locale_store=locale_store,
        translation_store=translation_store,
        cache=cache,
        session=session,
        translator=translator,
    )
