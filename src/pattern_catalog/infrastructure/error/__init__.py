"""Error handling infrastructure package."""

from pattern_catalog.infrastructure.error.error_middleware import (
    ErrorMiddleware,
    with_error_handling,
)
from pattern_catalog.infrastructure.error.exception_handler import (
    ErrorCategory,
    ErrorCode,
    ErrorResponse,
    ExceptionHandler,
    get_exception_handler,
)

__all__: list = [
    "ExceptionHandler",
    "ErrorResponse",
    "ErrorCategory",
    "ErrorCode",
    "ErrorMiddleware",
    "with_error_handling",
    "get_exception_handler",
]
