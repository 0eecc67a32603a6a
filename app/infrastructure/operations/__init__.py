"""Operation result types, status enums and transport error classifiers."""

from infrastructure.operations.classifiers import (
    classify_http_error,
    classify_http_status,
    classify_smtp_error,
)
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_http_error",
    "classify_http_status",
    "classify_smtp_error",
]
