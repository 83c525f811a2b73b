"""Google Cloud Translation (v2 REST) client.

Usage:
    client = GoogleTranslateClient(api_key="...")
    client.translate("Hello", source="en", target="fr")  # "bonjour"

Every request carries a timeout; a slow or failing API raises
MachineTranslationError instead of blocking the lookup indefinitely.
"""

from typing import Any, Dict, Optional

import requests
import structlog

from translation_resolver.configuration import MachineTranslationSettings
from translation_resolver.i18n.exceptions import MachineTranslationError
from translation_resolver.integrations.base import MachineTranslator
from translation_resolver.operations import OperationResult, classify_http_status

logger = structlog.get_logger(__name__)

DEFAULT_ENDPOINT = "https://translation.googleapis.com/language/translate/v2"


class GoogleTranslateClient(MachineTranslator):
    """MachineTranslator backed by the Google Cloud Translation API.

    Attributes:
        endpoint: REST endpoint URL
        timeout: Request timeout in seconds
        session: Requests session with connection pooling
    """

    def __init__(
        self,
        api_key: str,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: int = 10,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self._api_key = api_key
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "application/json"})
        self._logger = logger.bind(component="google_translate_client")

    @classmethod
    def from_settings(
        cls, machine_translation: MachineTranslationSettings
    ) -> "GoogleTranslateClient":
        """Build a client from MachineTranslationSettings."""
        return cls(
            api_key=machine_translation.api_key,
            endpoint=machine_translation.endpoint,
            timeout=machine_translation.timeout_seconds,
        )

    def translate(self, text: str, source: str, target: str) -> str:
        log = self._logger.bind(source=source, target=target)

        result = self._request(
            {
                "q": text,
                "source": source,
                "target": target,
                "format": "text",
                "key": self._api_key,
            }
        )
        if not result.is_success:
            log.error(
                "machine_translation_failed",
                error_code=result.error_code,
                status=result.status.value,
                retry_after=result.retry_after,
                error=result.message,
            )
            raise MachineTranslationError(
                result.message,
                error_code=result.error_code or "UNKNOWN_ERROR",
                status=result.status,
                retry_after=result.retry_after,
            )

        translated = self._extract_translation(result.data)
        if translated is None:
            log.error("machine_translation_malformed_response")
            raise MachineTranslationError(
                "Malformed machine translation response",
                error_code="MALFORMED_RESPONSE",
            )

        log.info("machine_translation_succeeded", length=len(translated))
        return translated

    def _request(self, payload: Dict[str, Any]) -> OperationResult:
        """POST a translation request.

        Args:
            payload: Form fields for the v2 endpoint

        Returns:
            OperationResult with the decoded JSON body or the categorized error
        """
        try:
            response = self._session.post(
                self.endpoint, data=payload, timeout=self.timeout
            )
        except requests.Timeout:
            return OperationResult.transient_error(
                f"Request timed out after {self.timeout}s",
                error_code="TIMEOUT",
            )
        except requests.RequestException as e:
            return OperationResult.transient_error(
                f"Connection error: {type(e).__name__}: {str(e)}",
                error_code="CONNECTION_ERROR",
            )

        if not 200 <= response.status_code < 300:
            return classify_http_status(
                response.status_code,
                body=response.text,
                retry_after=response.headers.get("Retry-After"),
            )

        try:
            body = response.json()
        except ValueError:
            return OperationResult.permanent_error(
                "Non-JSON machine translation response",
                error_code="MALFORMED_RESPONSE",
            )
        return OperationResult.success(data=body)

    @staticmethod
    def _extract_translation(body: Any) -> Optional[str]:
        # {"data": {"translations": [{"translatedText": "..."}]}}
        try:
            translated = body["data"]["translations"][0]["translatedText"]
        except (KeyError, IndexError, TypeError):
            return None
        return translated if isinstance(translated, str) else None
