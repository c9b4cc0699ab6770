"""Domain layer - pattern descriptors, results, events and exceptions."""

from .events import (
    DemoCompletedEvent,
    DemoEvent,
    DemoFailedEvent,
    DemoStartedEvent,
    EventPublisher,
)
from .exceptions import (
    ConfigurationError,
    DemoAssertionError,
    DomainException,
    DuplicatePatternError,
    InvalidSelectorError,
    PatternNotFoundError,
    ValidationError,
)
from .models import (
    DemoResult,
    PatternCategory,
    PatternDescriptor,
    RunReport,
    normalize_pattern_name,
)

__all__ = [
    # Models
    "PatternCategory",
    "PatternDescriptor",
    "DemoResult",
    "RunReport",
    "normalize_pattern_name",
    # Events
    "DemoEvent",
    "DemoStartedEvent",
    "DemoCompletedEvent",
    "DemoFailedEvent",
    "EventPublisher",
    # Exceptions
    "DomainException",
    "ValidationError",
    "PatternNotFoundError",
    "DuplicatePatternError",
    "InvalidSelectorError",
    "DemoAssertionError",
    "ConfigurationError",
]
