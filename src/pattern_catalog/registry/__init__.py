"""Pattern registry."""

from .pattern_registry import (
    PatternRegistration,
    PatternRegistry,
    create_pattern_registry,
    get_pattern_registry,
)

__all__ = [
    "PatternRegistration",
    "PatternRegistry",
    "create_pattern_registry",
    "get_pattern_registry",
]
