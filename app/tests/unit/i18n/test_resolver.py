"""Tests for translation_resolver.i18n.resolver module."""

# pylint: disable=protected-access

import pytest

from tests.factories import StubTranslator, make_translation_settings
from translation_resolver.i18n import (
    InvalidLocaleCode,
    MachineTranslationError,
    TranslationCacheKeyBuilder,
    TranslationResolver,
    ucfirst,
)

pytestmark = pytest.mark.unit


class TestUcfirst:
    """Tests for the ucfirst helper."""

    def test_uppercases_first_character_only(self):
        assert ucfirst("bonjour le monde") == "Bonjour le monde"

    def test_leaves_rest_untouched(self):
        assert ucfirst("hELLO") == "HELLO"

    def test_empty_string(self):
        assert ucfirst("") == ""


class TestResolverInitialization:
    """Tests for TranslationResolver construction."""

    def test_default_locale_comes_from_settings(self, make_resolver):
        resolver = make_resolver(default_locale="fr")
        assert resolver.get_default_locale() == "fr"
        assert resolver.get_app_locale() == "fr"

    def test_auto_translate_requires_translator(
        self, locale_store, translation_store, cache, session
    ):
        with pytest.raises(ValueError):
            TranslationResolver(
                settings=make_translation_settings(auto_translate=True),
                locale_store=locale_store,
                translation_store=translation_store,
                cache=cache,
                session=session,
            )

    def test_translator_optional_without_auto_translate(
        self, locale_store, translation_store, cache, session
    ):
        resolver = TranslationResolver(
            settings=make_translation_settings(auto_translate=False),
            locale_store=locale_store,
            translation_store=translation_store,
            cache=cache,
            session=session,
        )
        assert resolver.translate("Hello") == "Hello"

    def test_set_default_locale(self, make_resolver):
        resolver = make_resolver()
        resolver.set_default_locale("de")
        assert resolver.get_default_locale() == "de"
        # The configured app locale is unchanged
        assert resolver.get_app_locale() == "en"


class TestSessionLocale:
    """Tests for get_locale()/set_locale()."""

    def test_get_locale_initializes_session_with_default(self, make_resolver, session):
        resolver = make_resolver()
        assert session.get() is None

        assert resolver.get_locale() == "en"
        assert session.get() == "en"

    def test_get_locale_returns_session_value(self, make_resolver, session):
        session.set("fr")
        resolver = make_resolver()
        assert resolver.get_locale() == "fr"

    def test_set_locale_writes_through_to_session(self, make_resolver, session):
        resolver = make_resolver()
        resolver.set_locale("de")
        assert session.get() == "de"
        assert resolver.get_locale() == "de"


class TestFirstOrCreateLocale:
    """Tests for locale resolution."""

    def test_creates_locale_with_configured_name(self, make_resolver, locale_store):
        resolver = make_resolver()
        locale = resolver.first_or_create_locale("fr")

        assert locale.code == "fr"
        assert locale.name == "French"
        assert locale_store.created_count == 1

    def test_is_idempotent(self, make_resolver, locale_store):
        resolver = make_resolver()
        first = resolver.first_or_create_locale("fr")
        second = resolver.first_or_create_locale("fr")

        assert first.id == second.id
        assert locale_store.created_count == 1

    def test_second_call_is_served_from_cache(self, make_resolver, locale_store):
        resolver = make_resolver()
        resolver.first_or_create_locale("fr")

        calls = []
        original = locale_store.get_or_create

        def _spy(code, name):
            calls.append(code)
            return original(code, name)

        locale_store.get_or_create = _spy
        resolver.first_or_create_locale("fr")

        assert calls == []

    def test_populates_cache(self, make_resolver, cache):
        resolver = make_resolver()
        locale = resolver.first_or_create_locale("fr")

        cached = cache.get(TranslationCacheKeyBuilder().locale_key("fr"))
        assert cached == locale.to_dict()

    def test_invalid_code_raises_and_creates_nothing(self, make_resolver, locale_store):
        resolver = make_resolver()

        with pytest.raises(InvalidLocaleCode) as exc_info:
            resolver.first_or_create_locale("xx")

        assert exc_info.value.code == "xx"
        assert "xx" in str(exc_info.value)
        assert locale_store.created_count == 0

    def test_cache_expiry_falls_back_to_store(
        self, make_resolver, locale_store, cache, clock
    ):
        resolver = make_resolver(cache_ttl_minutes=30)
        first = resolver.first_or_create_locale("fr")

        clock.advance(30 * 60 + 1)
        assert not cache.has(TranslationCacheKeyBuilder().locale_key("fr"))

        second = resolver.first_or_create_locale("fr")
        assert second.id == first.id
        assert locale_store.created_count == 1


class TestFirstOrCreateTranslation:
    """Tests for translation resolution."""

    def test_root_translation_is_idempotent(self, make_resolver, translation_store):
        resolver = make_resolver()
        locale = resolver.first_or_create_locale("en")

        first = resolver.first_or_create_translation(locale, "Hello")
        second = resolver.first_or_create_translation(locale, "Hello")

        assert first.id == second.id
        assert first.is_root
        assert translation_store.created_count == 1

    def test_derived_without_auto_translate_copies_parent_text(
        self, make_resolver, translator
    ):
        resolver = make_resolver(auto_translate=False)
        en = resolver.first_or_create_locale("en")
        fr = resolver.first_or_create_locale("fr")
        parent = resolver.first_or_create_translation(en, "Hello")

        derived = resolver.first_or_create_translation(fr, "Hello", parent)

        assert derived.text == "Hello"
        assert derived.parent_id == parent.id
        assert derived.locale_id == fr.id
        assert translator.calls == []

    def test_derived_with_auto_translate_uses_translator_output(
        self, make_resolver, translator
    ):
        resolver = make_resolver(auto_translate=True, auto_translate_ucfirst=False)
        en = resolver.first_or_create_locale("en")
        fr = resolver.first_or_create_locale("fr")
        parent = resolver.first_or_create_translation(en, "Hello")

        derived = resolver.first_or_create_translation(fr, "Hello", parent)

        assert derived.text == "bonjour"
        assert translator.calls == [("Hello", "en", "fr")]

    def test_auto_translate_ucfirst(self, make_resolver):
        resolver = make_resolver(auto_translate=True, auto_translate_ucfirst=True)
        en = resolver.first_or_create_locale("en")
        fr = resolver.first_or_create_locale("fr")
        parent = resolver.first_or_create_translation(en, "Hello")

        derived = resolver.first_or_create_translation(fr, "Hello", parent)

        assert derived.text == "Bonjour"

    def test_root_translation_never_auto_translated(self, make_resolver, translator):
        resolver = make_resolver(auto_translate=True)
        en = resolver.first_or_create_locale("en")

        resolver.first_or_create_translation(en, "Hello")

        assert translator.calls == []

    def test_cached_derived_translation_skips_translator(
        self, make_resolver, translator, translation_store
    ):
        resolver = make_resolver(auto_translate=True)
        en = resolver.first_or_create_locale("en")
        fr = resolver.first_or_create_locale("fr")
        parent = resolver.first_or_create_translation(en, "Hello")

        first = resolver.first_or_create_translation(fr, "Hello", parent)
        second = resolver.first_or_create_translation(fr, "Hello", parent)

        assert first == second
        assert len(translator.calls) == 1
        assert translation_store.created_count == 2

    def test_cached_entry_with_other_parent_is_ignored(
        self, make_resolver, cache, translation_store
    ):
        resolver = make_resolver()
        en = resolver.first_or_create_locale("en")
        fr = resolver.first_or_create_locale("fr")
        # A root translation in fr with the same text occupies the cache key
        fr_root = resolver.first_or_create_translation(fr, "Hello")
        parent = resolver.first_or_create_translation(en, "Hello")

        derived = resolver.first_or_create_translation(fr, "Hello", parent)

        assert derived.id != fr_root.id
        assert derived.parent_id == parent.id


class TestCacheWriteOnce:
    """Cache entries are never overwritten."""

    def test_existing_cache_entry_is_not_overwritten(self, make_resolver, cache):
        resolver = make_resolver()
        key = TranslationCacheKeyBuilder().locale_key("fr")
        sentinel = {"id": "cached-id", "code": "fr", "name": "Cached French"}
        cache.put_if_absent(key, sentinel, 60)

        locale = resolver.first_or_create_locale("fr")

        assert locale.id == "cached-id"
        assert cache.get(key) == sentinel

    def test_stale_locale_entry_for_other_code_is_not_replaced(
        self, make_resolver, cache, locale_store
    ):
        resolver = make_resolver()
        key = TranslationCacheKeyBuilder().locale_key("fr")
        stale = {"id": "other", "code": "de", "name": "German"}
        cache.put_if_absent(key, stale, 60)

        locale = resolver.first_or_create_locale("fr")

        assert locale.code == "fr"
        assert locale_store.created_count == 1
        assert cache.get(key) == stale

    def test_malformed_locale_entry_falls_through_to_store(
        self, make_resolver, cache, locale_store
    ):
        resolver = make_resolver()
        key = TranslationCacheKeyBuilder().locale_key("fr")
        malformed = {"code": "fr"}
        cache.put_if_absent(key, malformed, 60)

        locale = resolver.first_or_create_locale("fr")

        assert locale.code == "fr"
        assert locale.name == "French"
        assert locale_store.created_count == 1
        assert cache.get(key) == malformed

    def test_malformed_locale_entry_does_not_break_translate(
        self, make_resolver, cache, session
    ):
        session.set("fr")
        resolver = make_resolver(auto_translate=True)
        cache.put_if_absent(
            TranslationCacheKeyBuilder().locale_key("fr"), {"code": "fr"}, 60
        )

        assert resolver.translate("Hello") == "Bonjour"


class TestTranslate:
    """Tests for translate()."""

    def test_default_locale_returns_text_without_new_row(
        self, make_resolver, translation_store
    ):
        resolver = make_resolver()

        assert resolver.translate("Hello") == "Hello"
        assert resolver.translate("Hello") == "Hello"
        # Only the root translation exists
        assert translation_store.created_count == 1

    def test_first_translation_scenario(
        self, make_resolver, session, translation_store, locale_store
    ):
        """en → fr with auto-translate and ucfirst yields "Bonjour"."""
        session.set("fr")
        resolver = make_resolver(auto_translate=True, auto_translate_ucfirst=True)

        result = resolver.translate("Hello")

        assert result == "Bonjour"
        en = locale_store.get_or_create("en", "English")
        fr = locale_store.get_or_create("fr", "French")
        root = resolver.get_default_translation("Hello")
        assert root.locale_id == en.id
        derived = translation_store.find_by_locale_and_parent(fr.id, root.id)
        assert derived is not None
        assert derived.text == "Bonjour"
        assert derived.parent_id == root.id

    def test_derived_translation_is_cached(self, make_resolver, session, cache):
        session.set("fr")
        resolver = make_resolver(auto_translate=True)

        resolver.translate("Hello")

        key = TranslationCacheKeyBuilder().translation_key("fr", "Hello")
        cached = cache.get(key)
        assert cached is not None
        assert cached["text"] == "Bonjour"

    def test_repeated_translate_creates_one_derived_row(
        self, make_resolver, session, translation_store, translator
    ):
        session.set("fr")
        resolver = make_resolver(auto_translate=True)

        assert resolver.translate("Hello") == "Bonjour"
        assert resolver.translate("Hello") == "Bonjour"

        assert translation_store.created_count == 2
        assert len(translator.calls) == 1

    def test_existing_translation_found_in_store_after_cache_clear(
        self, make_resolver, session, cache, translator
    ):
        session.set("fr")
        resolver = make_resolver(auto_translate=True)
        resolver.translate("Hello")

        cache.clear()

        assert resolver.translate("Hello") == "Bonjour"
        assert len(translator.calls) == 1

    def test_placeholder_translation_without_auto_translate(
        self, make_resolver, session, translator
    ):
        session.set("de")
        resolver = make_resolver(auto_translate=False)

        assert resolver.translate("Hello") == "Hello"
        assert translator.calls == []

    def test_data_argument_is_accepted(self, make_resolver):
        resolver = make_resolver()
        assert resolver.translate("Hello :name", {"name": "Ada"}) == "Hello :name"

    def test_first_call_initializes_session(self, make_resolver, session):
        resolver = make_resolver()
        resolver.translate("Hello")
        assert session.get() == "en"

    def test_invalid_session_locale_raises(self, make_resolver, session):
        session.set("xx")
        resolver = make_resolver()

        with pytest.raises(InvalidLocaleCode):
            resolver.translate("Hello")

    def test_invalid_default_locale_raises(self, make_resolver, locale_store):
        resolver = make_resolver(default_locale="xx")

        with pytest.raises(InvalidLocaleCode):
            resolver.translate("Hello")
        assert locale_store.created_count == 0


class TestTranslatorFailure:
    """Machine translation failures propagate or degrade per configuration."""

    @pytest.fixture
    def failing_translator(self):
        return StubTranslator(
            error=MachineTranslationError("API down", error_code="SERVER_ERROR")
        )

    def _resolver(
        self,
        failing_translator,
        locale_store,
        translation_store,
        cache,
        session,
        **overrides,
    ):
        return TranslationResolver(
            settings=make_translation_settings(auto_translate=True, **overrides),
            locale_store=locale_store,
            translation_store=translation_store,
            cache=cache,
            session=session,
            translator=failing_translator,
        )

    def test_error_propagates_by_default(
        self, failing_translator, locale_store, translation_store, cache, session
    ):
        session.set("fr")
        resolver = self._resolver(
            failing_translator, locale_store, translation_store, cache, session
        )

        with pytest.raises(MachineTranslationError):
            resolver.translate("Hello")

        # Only the root translation was persisted
        assert translation_store.created_count == 1

    def test_fallback_returns_default_text(
        self, failing_translator, locale_store, translation_store, cache, session
    ):
        session.set("fr")
        resolver = self._resolver(
            failing_translator,
            locale_store,
            translation_store,
            cache,
            session,
            fallback_on_translator_error=True,
        )

        assert resolver.translate("Hello") == "Hello"
        assert translation_store.created_count == 1
        key = TranslationCacheKeyBuilder().translation_key("fr", "Hello")
        assert cache.get(key) is None

    def test_fallback_retries_on_next_request(
        self, failing_translator, locale_store, translation_store, cache, session
    ):
        session.set("fr")
        resolver = self._resolver(
            failing_translator,
            locale_store,
            translation_store,
            cache,
            session,
            fallback_on_translator_error=True,
        )
        resolver.translate("Hello")

        failing_translator.error = None
        failing_translator.translations = {("Hello", "fr"): "salut"}

        assert resolver.translate("Hello") == "Salut"
        assert len(failing_translator.calls) == 2
