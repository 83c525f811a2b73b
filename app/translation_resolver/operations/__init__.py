"""Operation result types, status enums and error classifiers."""

from translation_resolver.operations.classifiers import (
    classify_aws_error,
    classify_http_status,
)
from translation_resolver.operations.result import OperationResult
from translation_resolver.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_http_status",
    "classify_aws_error",
]
