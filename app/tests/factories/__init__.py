"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    FakeClock,
    StubTranslator,
    make_locale,
    make_translation,
    make_translation_settings,
)

__all__ = [
    "FakeClock",
    "StubTranslator",
    "make_locale",
    "make_translation",
    "make_translation_settings",
]
