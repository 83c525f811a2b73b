"""Result of a call to an external service.

Integration clients return an OperationResult from their request helpers
and turn failures into domain errors at their public boundary, keeping the
status and retry hint so callers can decide whether to retry.
"""

from dataclasses import dataclass
from typing import Any, Optional

from translation_resolver.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Outcome of one external call.

    Attributes:
        status: Outcome category
        message: Description for logs and error messages
        data: Decoded payload on success
        error_code: Machine-readable failure code (e.g. "RATE_LIMITED")
        retry_after: Seconds to wait before retrying, when the service said so
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None
    retry_after: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    @property
    def is_transient(self) -> bool:
        """True if the failure may go away on a later attempt."""
        return self.status == OperationStatus.TRANSIENT_ERROR

    @classmethod
    def success(cls, data: Optional[Any] = None) -> "OperationResult":
        return cls(status=OperationStatus.SUCCESS, message="ok", data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        retry_after: Optional[int] = None,
    ) -> "OperationResult":
        return cls(
            status=status,
            message=message,
            error_code=error_code,
            retry_after=retry_after,
        )

    @classmethod
    def transient_error(
        cls,
        message: str,
        error_code: Optional[str] = None,
        retry_after: Optional[int] = None,
    ) -> "OperationResult":
        """Failure worth retrying: timeouts, throttling, 5xx responses."""
        return cls.error(
            OperationStatus.TRANSIENT_ERROR, message, error_code, retry_after
        )

    @classmethod
    def permanent_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Failure that will repeat: bad input, malformed responses."""
        return cls.error(OperationStatus.PERMANENT_ERROR, message, error_code)
