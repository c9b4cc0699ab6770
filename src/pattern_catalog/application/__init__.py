"""Application layer - running demos."""

from .runner import ALL_PATTERNS, DemoRunner

__all__ = ["ALL_PATTERNS", "DemoRunner"]
