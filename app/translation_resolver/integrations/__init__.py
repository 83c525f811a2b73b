"""External machine translation services."""

from translation_resolver.integrations.base import MachineTranslator
from translation_resolver.integrations.google_translate import GoogleTranslateClient

__all__ = ["MachineTranslator", "GoogleTranslateClient"]
