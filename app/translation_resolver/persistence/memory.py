"""In-memory locale and translation stores (development, testing)."""

import threading
import uuid
from typing import Dict, Optional, Tuple

from translation_resolver.i18n.models import Locale, Translation
from translation_resolver.logging import get_module_logger
from translation_resolver.persistence.base import LocaleStore, TranslationStore

logger = get_module_logger()


class InMemoryLocaleStore(LocaleStore):
    """Lock-guarded locale store.

    Attributes:
        created_count: Number of locales created so far.
    """

    def __init__(self):
        self._by_code: Dict[str, Locale] = {}
        self._lock = threading.Lock()
        self.created_count = 0

    def get_or_create(self, code: str, name: str) -> Locale:
        with self._lock:
            locale = self._by_code.get(code)
            if locale is not None:
                return locale
            locale = Locale(id=uuid.uuid4().hex, code=code, name=name)
            self._by_code[code] = locale
            self.created_count += 1
        logger.info("locale_created", code=code, locale_id=locale.id)
        return locale

    def __len__(self) -> int:
        return len(self._by_code)


class InMemoryTranslationStore(TranslationStore):
    """Lock-guarded translation store.

    Attributes:
        created_count: Number of translations created so far.
    """

    def __init__(self):
        self._rows: Dict[Tuple[str, str, str], Translation] = {}
        self._lock = threading.Lock()
        self.created_count = 0

    @staticmethod
    def _unique_key(
        locale_id: str, text: str, parent_id: Optional[str]
    ) -> Tuple[str, str, str]:
        if parent_id is None:
            return ("root", locale_id, text)
        return ("derived", locale_id, parent_id)

    def get_or_create(
        self, locale: Locale, text: str, parent_id: Optional[str] = None
    ) -> Translation:
        key = self._unique_key(locale.id, text, parent_id)
        with self._lock:
            translation = self._rows.get(key)
            if translation is not None:
                return translation
            translation = Translation(
                id=uuid.uuid4().hex,
                locale_id=locale.id,
                locale_code=locale.code,
                text=text,
                parent_id=parent_id,
            )
            self._rows[key] = translation
            self.created_count += 1
        logger.info(
            "translation_created",
            locale=locale.code,
            translation_id=translation.id,
            parent_id=parent_id,
        )
        return translation

    def find_by_locale_and_parent(
        self, locale_id: str, parent_id: str
    ) -> Optional[Translation]:
        with self._lock:
            return self._rows.get(("derived", locale_id, parent_id))

    def __len__(self) -> int:
        return len(self._rows)
