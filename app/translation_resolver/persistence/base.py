"""Locale and translation store interfaces.

Stores own the records. Their get-or-create operations must be atomic:
concurrent callers creating the same record have to end up with a single
row, because the resolver takes no locks of its own.
"""

from abc import ABC, abstractmethod
from typing import Optional

from translation_resolver.i18n.models import Locale, Translation


class LocaleStore(ABC):
    """Persists locales keyed by code."""

    @abstractmethod
    def get_or_create(self, code: str, name: str) -> Locale:
        """Return the locale for a code, creating it if missing.

        Args:
            code: Locale code (unique).
            name: Display name used when the locale is created.

        Returns:
            The stored Locale.
        """


class TranslationStore(ABC):
    """Persists translations.

    Uniqueness:
        - root translations: one per (locale_id, text)
        - derived translations: one per (locale_id, parent_id)
    """

    @abstractmethod
    def get_or_create(
        self, locale: Locale, text: str, parent_id: Optional[str] = None
    ) -> Translation:
        """Return the matching translation, creating it if missing.

        For a derived translation the existing row for (locale, parent) is
        returned unchanged even if its text differs from ``text``.

        Args:
            locale: Locale the translation belongs to.
            text: Text to persist when creating.
            parent_id: Parent root translation id, or None for a root.

        Returns:
            The stored Translation.
        """

    @abstractmethod
    def find_by_locale_and_parent(
        self, locale_id: str, parent_id: str
    ) -> Optional[Translation]:
        """Find the derived translation of a parent in a locale.

        Args:
            locale_id: Locale identifier.
            parent_id: Parent translation identifier.

        Returns:
            The Translation, or None if not found.
        """
