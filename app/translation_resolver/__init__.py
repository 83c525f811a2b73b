"""Runtime translation lookup layer.

Resolves text written in the application's default locale into the
session's current locale using a cache, a persistent store and an optional
machine translation service.

Main components:
- i18n: TranslationResolver, Locale/Translation models, session adapters
- cache: TranslationCache with in-memory and Redis backends
- persistence: LocaleStore/TranslationStore with in-memory and DynamoDB backends
- integrations: MachineTranslator and the Google Translate client
- services: application-scoped providers and the resolver factory
"""

__version__ = "1.0.0"
