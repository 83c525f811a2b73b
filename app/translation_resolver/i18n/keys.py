"""Cache key builder for locales and translations."""

import hashlib


class TranslationCacheKeyBuilder:
    """Build deterministic cache keys.

    Translation keys embed a SHA-256 digest of the source text, which keeps
    keys short for long strings without letting two texts share an entry.

    Example:
        >>> builder = TranslationCacheKeyBuilder()
        >>> builder.locale_key("fr")
        'translation:locale:fr'
        >>> builder.translation_key("fr", "Hello")  # doctest: +ELLIPSIS
        'translation:text:fr:185f8db3...'
    """

    def __init__(self, namespace: str = "translation"):
        """Initialize key builder.

        Args:
            namespace: Namespace for key isolation (default: "translation")
        """
        self.namespace = namespace

    def locale_key(self, code: str) -> str:
        """Build the cache key of a locale.

        Args:
            code: Locale code (e.g., "fr")

        Returns:
            Cache key string
        """
        return f"{self.namespace}:locale:{code}"

    def translation_key(self, code: str, text: str) -> str:
        """Build the cache key of a translation looked up by source text.

        Args:
            code: Code of the locale the translation belongs to
            text: Source text used for the lookup

        Returns:
            Cache key string
        """
        digest = hashlib.sha256(text.encode("utf-8")).hexdigest()
        return f"{self.namespace}:text:{code}:{digest}"
