"""Error classifiers for external service failures.

Converts HTTP responses and AWS SDK exceptions into standardized
OperationResult objects.

Usage:
    from translation_resolver.operations.classifiers import classify_aws_error

    try:
        client.put_item(TableName=table, Item=item)
    except ClientError as e:
        result = classify_aws_error(e)
"""

from typing import Optional

from botocore.exceptions import ClientError

from translation_resolver.operations.result import OperationResult
from translation_resolver.operations.status import OperationStatus


def classify_http_status(
    status_code: int, body: str = "", retry_after: Optional[str] = None
) -> OperationResult:
    """Classify a non-2xx HTTP response into an OperationResult.

    Status Code Mapping:
    - 429: Rate limiting → TRANSIENT_ERROR with retry_after
    - 401/403: Bad or unauthorized API key → UNAUTHORIZED
    - 404: Not found → NOT_FOUND
    - 5xx: Server error → TRANSIENT_ERROR
    - Other: Client error → PERMANENT_ERROR

    Args:
        status_code: HTTP status code of the response
        body: Response text, truncated into the message
        retry_after: Raw Retry-After header value, if any

    Returns:
        OperationResult describing the failure
    """
    detail = body[:200]

    if status_code == 429:
        seconds = 60
        if retry_after:
            try:
                seconds = int(retry_after)
            except (ValueError, TypeError):
                pass
        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            "Rate limited",
            error_code="RATE_LIMITED",
            retry_after=seconds,
        )

    if status_code in (401, 403):
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            f"Request not authorized ({status_code}): {detail}",
            error_code="UNAUTHORIZED",
        )

    if status_code == 404:
        return OperationResult.error(
            OperationStatus.NOT_FOUND,
            f"Resource not found: {detail}",
            error_code="NOT_FOUND",
        )

    if 500 <= status_code < 600:
        return OperationResult.transient_error(
            f"Server error ({status_code})",
            error_code="SERVER_ERROR",
        )

    return OperationResult.permanent_error(
        f"Client error ({status_code}): {detail}",
        error_code="HTTP_ERROR",
    )


def classify_aws_error(exc: Exception) -> OperationResult:
    """Classify AWS SDK errors into OperationResult.

    Unknown AWS errors are treated as transient, following the AWS SDK
    convention of retrying by default.

    Args:
        exc: Exception raised by boto3/botocore

    Returns:
        OperationResult with appropriate status and error_code
    """
    if not isinstance(exc, ClientError):
        return OperationResult.transient_error(
            f"AWS connection error: {type(exc).__name__}: {str(exc)}",
            error_code="CONNECTION_ERROR",
        )

    error_code = exc.response.get("Error", {}).get("Code", "Unknown")

    if error_code in (
        "ThrottlingException",
        "ProvisionedThroughputExceededException",
        "RequestLimitExceeded",
    ):
        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            "AWS API throttled",
            error_code="RATE_LIMITED",
            retry_after=60,
        )

    if error_code == "AccessDeniedException":
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            "AWS access denied",
            error_code=error_code,
        )

    if error_code == "ResourceNotFoundException":
        return OperationResult.error(
            OperationStatus.NOT_FOUND,
            "AWS resource not found",
            error_code=error_code,
        )

    if error_code == "ValidationException":
        return OperationResult.permanent_error(
            f"AWS validation error: {str(exc)}",
            error_code=error_code,
        )

    return OperationResult.transient_error(
        f"AWS error ({error_code}): {str(exc)}",
        error_code=error_code,
    )
