"""Outcome categories for calls to external services."""

from enum import Enum


class OperationStatus(Enum):
    """How a call to the translation API or the store ended.

    Transient failures may succeed when retried later; callers can use
    ``retry_after`` on the result or error to schedule that retry.
    Unauthorized usually means a missing or revoked API key.
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
