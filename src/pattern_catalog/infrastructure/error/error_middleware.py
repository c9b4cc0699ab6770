"""Error handling middleware for command execution."""
import functools
from typing import Callable, Optional

from pattern_catalog.infrastructure.error.exception_handler import (
    ExceptionHandler,
    get_exception_handler,
)


class ErrorMiddleware:
    """Middleware for consistent error handling."""

    def __init__(self, error_handler: Optional[ExceptionHandler] = None):
        self._error_handler = error_handler or get_exception_handler()

    def wrap_handler(self, handler_func: Callable) -> Callable:
        """
        Wrap a handler function with error handling.

        The wrapped function returns the handler's result, or an
        ``ErrorResponse`` when the handler raises.
        """

        @functools.wraps(handler_func)
        def wrapped_handler(*args, **kwargs):
            try:
                return handler_func(*args, **kwargs)
            except Exception as e:
                return self._error_handler.handle_error(e)

        return wrapped_handler


def with_error_handling(error_handler: Optional[ExceptionHandler] = None):
    """
    Decorator for adding error handling to functions.

    Args:
        error_handler: Optional error handler instance

    Returns:
        Decorator function
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            middleware = ErrorMiddleware(error_handler)
            return middleware.wrap_handler(func)(*args, **kwargs)

        return wrapper

    return decorator
