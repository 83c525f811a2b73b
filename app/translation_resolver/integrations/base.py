"""Machine translation service interface."""

from abc import ABC, abstractmethod


class MachineTranslator(ABC):
    """Translates text between two locale codes."""

    @abstractmethod
    def translate(self, text: str, source: str, target: str) -> str:
        """Translate text.

        Args:
            text: Text to translate.
            source: Locale code of the text (e.g., "en").
            target: Locale code to translate to (e.g., "fr").

        Returns:
            Translated text.

        Raises:
            MachineTranslationError: If the service fails or its response
                cannot be used.
        """
