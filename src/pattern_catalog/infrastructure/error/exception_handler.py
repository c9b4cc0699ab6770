"""Maps exceptions to structured error responses and exit statuses."""
import threading
from enum import Enum
from typing import Any, Callable, Dict, Optional, Type

from pydantic import BaseModel, Field

from pattern_catalog.domain.exceptions import (
    ConfigurationError,
    DemoAssertionError,
    DomainException,
    DuplicatePatternError,
    InvalidSelectorError,
    PatternNotFoundError,
    ValidationError,
)
from pattern_catalog.infrastructure.logging.logger import get_logger


class ErrorCategory(str, Enum):
    """Broad error categories."""
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    DEMO = "demo"
    INTERNAL = "internal"


class ErrorCode(str, Enum):
    """Machine-readable error codes."""
    PATTERN_NOT_FOUND = "PATTERN_NOT_FOUND"
    DUPLICATE_PATTERN = "DUPLICATE_PATTERN"
    INVALID_SELECTOR = "INVALID_SELECTOR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    DEMO_ASSERTION_FAILED = "DEMO_ASSERTION_FAILED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorResponse(BaseModel):
    """Structured description of a failed operation."""

    error_code: ErrorCode
    message: str
    category: ErrorCategory
    details: Dict[str, Any] = Field(default_factory=dict)
    exit_code: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.error_code.value,
            "message": self.message,
            "category": self.category.value,
            "details": self.details,
        }


class ExceptionHandler:
    """
    Translates exceptions into ``ErrorResponse`` objects.

    Domain exceptions are expected and logged at warning level; anything else
    is logged with its traceback.
    """

    def __init__(self):
        self._logger = get_logger(__name__)
        self._handlers: Dict[Type[Exception], Callable[[Exception], ErrorResponse]] = {
            PatternNotFoundError: self._handle_not_found,
            DuplicatePatternError: self._handle_duplicate,
            InvalidSelectorError: self._handle_invalid_selector,
            ValidationError: self._handle_validation,
            ConfigurationError: self._handle_configuration,
            DemoAssertionError: self._handle_demo_assertion,
        }

    def handle_error(self, exception: Exception) -> ErrorResponse:
        """Build the error response for an exception."""
        for exc_type in type(exception).__mro__:
            handler = self._handlers.get(exc_type)
            if handler is not None:
                response = handler(exception)
                self._logger.info(f"{response.error_code.value}: {response.message}")
                return response

        if isinstance(exception, DomainException):
            self._logger.info(f"Domain error: {exception}")
            return ErrorResponse(
                error_code=ErrorCode.VALIDATION_ERROR,
                message=str(exception),
                category=ErrorCategory.VALIDATION,
            )

        self._logger.error(f"Unexpected error: {exception}", exc_info=exception)
        return ErrorResponse(
            error_code=ErrorCode.INTERNAL_ERROR,
            message=str(exception) or type(exception).__name__,
            category=ErrorCategory.INTERNAL,
            details={"type": type(exception).__name__},
        )

    def register_handler(self, exc_type: Type[Exception], handler: Callable[[Exception], ErrorResponse]) -> None:
        """Register a custom handler for an exception type."""
        self._handlers[exc_type] = handler

    def _handle_not_found(self, e: PatternNotFoundError) -> ErrorResponse:
        details: Dict[str, Any] = {"pattern": e.pattern_name}
        if e.available:
            details["available"] = e.available
        return ErrorResponse(
            error_code=ErrorCode.PATTERN_NOT_FOUND,
            message=str(e),
            category=ErrorCategory.NOT_FOUND,
            details=details,
        )

    def _handle_duplicate(self, e: DuplicatePatternError) -> ErrorResponse:
        return ErrorResponse(
            error_code=ErrorCode.DUPLICATE_PATTERN,
            message=str(e),
            category=ErrorCategory.CONFLICT,
            details={"pattern": e.pattern_name},
        )

    def _handle_invalid_selector(self, e: InvalidSelectorError) -> ErrorResponse:
        return ErrorResponse(
            error_code=ErrorCode.INVALID_SELECTOR,
            message=str(e),
            category=ErrorCategory.VALIDATION,
            details={"selector": e.selector, "valid_selectors": e.valid_selectors},
        )

    def _handle_validation(self, e: ValidationError) -> ErrorResponse:
        details = e.details if isinstance(e.details, dict) else ({"details": e.details} if e.details else {})
        return ErrorResponse(
            error_code=ErrorCode.VALIDATION_ERROR,
            message=str(e),
            category=ErrorCategory.VALIDATION,
            details=details,
        )

    def _handle_configuration(self, e: ConfigurationError) -> ErrorResponse:
        return ErrorResponse(
            error_code=ErrorCode.CONFIGURATION_ERROR,
            message=str(e),
            category=ErrorCategory.CONFIGURATION,
            details={"fields": e.missing_fields} if e.missing_fields else {},
        )

    def _handle_demo_assertion(self, e: DemoAssertionError) -> ErrorResponse:
        return ErrorResponse(
            error_code=ErrorCode.DEMO_ASSERTION_FAILED,
            message=str(e),
            category=ErrorCategory.DEMO,
            details={"pattern": e.pattern_name},
        )


_exception_handler: Optional[ExceptionHandler] = None
_exception_handler_lock = threading.Lock()


def get_exception_handler() -> ExceptionHandler:
    """Get the process-wide exception handler."""
    global _exception_handler
    if _exception_handler is None:
        with _exception_handler_lock:
            if _exception_handler is None:
                _exception_handler = ExceptionHandler()
    return _exception_handler
