"""Shared fixtures for translation resolver tests."""

import pytest

from tests.factories import FakeClock, StubTranslator, make_translation_settings
from translation_resolver.cache import InMemoryCache
from translation_resolver.i18n import InMemorySessionLocale, TranslationResolver
from translation_resolver.persistence import (
    InMemoryLocaleStore,
    InMemoryTranslationStore,
)
from translation_resolver.services import reset_providers


@pytest.fixture(autouse=True)
def reset_provider_singletons():
    """Reset the lru_cache providers before and after each test."""
    reset_providers()
    yield
    reset_providers()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return InMemoryCache(clock=clock)


@pytest.fixture
def locale_store():
    return InMemoryLocaleStore()


@pytest.fixture
def translation_store():
    return InMemoryTranslationStore()


@pytest.fixture
def session():
    return InMemorySessionLocale()


@pytest.fixture
def translator():
    return StubTranslator({("Hello", "fr"): "bonjour", ("Hello", "de"): "hallo"})


@pytest.fixture
def make_resolver(locale_store, translation_store, cache, session, translator):
    """Build a TranslationResolver over the in-memory fixtures.

    Keyword arguments are passed to make_translation_settings().
    """

    def _make(**settings_overrides) -> TranslationResolver:
        return TranslationResolver(
            settings=make_translation_settings(**settings_overrides),
            locale_store=locale_store,
            translation_store=translation_store,
            cache=cache,
            session=session,
            translator=translator,
        )

    return _make
