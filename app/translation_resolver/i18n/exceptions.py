"""Translation lookup errors."""

from typing import Optional

from translation_resolver.operations import OperationStatus


class TranslationError(Exception):
    """Base class for translation lookup errors."""


class InvalidLocaleCode(TranslationError):
    """Raised when a locale code has no entry in the configured locales."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(
            f"Locale Code: {code} is invalid, please make sure it is available "
            "in the configuration"
        )


class MachineTranslationError(TranslationError):
    """Raised when the machine translation service fails or returns garbage.

    Attributes:
        error_code: Machine-readable failure code (e.g. "RATE_LIMITED").
        status: Outcome category of the failed call.
        retry_after: Seconds the service asked to wait before retrying.
    """

    def __init__(
        self,
        message: str,
        error_code: str = "UNKNOWN_ERROR",
        status: OperationStatus = OperationStatus.PERMANENT_ERROR,
        retry_after: Optional[int] = None,
    ):
        self.error_code = error_code
        self.status = status
        self.retry_after = retry_after
        super().__init__(message)

    @property
    def is_transient(self) -> bool:
        """True if the same request may succeed later."""
        return self.status == OperationStatus.TRANSIENT_ERROR


class TranslationStoreError(TranslationError):
    """Raised when the locale or translation store cannot complete a call."""

    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR"):
        self.error_code = error_code
        super().__init__(message)
