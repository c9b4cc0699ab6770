"""Domain exceptions for the pattern catalog."""
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class PatternNotFoundError(DomainException):
    """Raised when a requested pattern is not registered."""
    def __init__(self, pattern_name: str, available: Optional[List[str]] = None):
        super().__init__(f"Pattern '{pattern_name}' not found")
        self.pattern_name = pattern_name
        self.available = available or []


class DuplicatePatternError(DomainException):
    """Raised when a pattern name collides with an existing registration."""
    def __init__(self, pattern_name: str):
        super().__init__(f"Pattern '{pattern_name}' is already registered")
        self.pattern_name = pattern_name


class InvalidSelectorError(DomainException):
    """Raised when a factory is asked for a product it does not know."""
    def __init__(self, selector: str, valid_selectors: Optional[List[str]] = None):
        super().__init__(f"Invalid product selector '{selector}'")
        self.selector = selector
        self.valid_selectors = valid_selectors or []


class DemoAssertionError(DomainException):
    """Raised by a demo when the pattern's contract does not hold."""
    def __init__(self, pattern_name: str, message: str):
        super().__init__(f"{pattern_name}: {message}")
        self.pattern_name = pattern_name


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
