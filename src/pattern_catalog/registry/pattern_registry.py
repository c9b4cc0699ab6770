"""Pattern Registry - maps pattern names to their demo entry points.

New demos are added by registering a descriptor and an entry point; nothing
that looks patterns up needs to change.
"""
import threading
import time
from typing import Dict, List, Optional

from pattern_catalog.demos.base import DemoFunction
from pattern_catalog.domain.exceptions import (
    DuplicatePatternError,
    PatternNotFoundError,
    ValidationError,
)
from pattern_catalog.domain.models import (
    DemoResult,
    PatternCategory,
    PatternDescriptor,
    normalize_pattern_name,
)
from pattern_catalog.infrastructure.logging.logger import get_logger

# Run-everything keyword; no pattern may use it as a name or alias
ALL_PATTERNS = "all"


class PatternRegistration:
    """Container for pattern registration information."""

    def __init__(self, descriptor: PatternDescriptor, demo: DemoFunction):
        """
        Initialize pattern registration.

        Args:
            descriptor: Static metadata for the pattern
            demo: Entry point called with an output writer
        """
        self.descriptor = descriptor
        self.demo = demo

    @property
    def name(self) -> str:
        return self.descriptor.name


class PatternRegistry:
    """
    Registry of pattern demos.

    Registrations keep their insertion order. Names and aliases are matched
    after normalization, so ``Factory_Method`` finds ``factory-method``.
    Once sealed, the registry rejects further registrations.
    """

    def __init__(self):
        """Initialize pattern registry."""
        self._registrations: Dict[str, PatternRegistration] = {}
        self._lookup: Dict[str, str] = {}
        self._sealed = False
        self._logger = get_logger(__name__)
        self._registration_lock = threading.RLock()

    def register(self, descriptor: PatternDescriptor, demo: DemoFunction) -> None:
        """
        Register a pattern with its demo entry point.

        Raises:
            DuplicatePatternError: If the name or an alias is already registered
            ValidationError: If the registry is sealed, a name is reserved or the
                demo is not callable
        """
        if not callable(demo):
            raise ValidationError(f"Demo for pattern '{descriptor.name}' is not callable")

        with self._registration_lock:
            if self._sealed:
                raise ValidationError(
                    f"Cannot register '{descriptor.name}': registry is sealed"
                )

            keys = descriptor.lookup_keys
            if ALL_PATTERNS in keys:
                raise ValidationError(
                    f"Cannot register '{descriptor.name}': '{ALL_PATTERNS}' is a reserved name"
                )

            for key in keys:
                if key in self._lookup:
                    raise DuplicatePatternError(descriptor.name)

            canonical = keys[0]
            self._registrations[canonical] = PatternRegistration(descriptor, demo)
            for key in keys:
                self._lookup[key] = canonical

            self._logger.info(f"Registered pattern: {descriptor.name} ({descriptor.category.value})")

    def seal(self) -> None:
        """Make the registry read-only."""
        with self._registration_lock:
            self._sealed = True

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    def is_registered(self, name: str) -> bool:
        return normalize_pattern_name(name) in self._lookup

    def get_registration(self, name: str) -> PatternRegistration:
        """
        Look up a registration by name or alias.

        Raises:
            PatternNotFoundError: If nothing is registered under the name
        """
        canonical = self._lookup.get(normalize_pattern_name(name))
        if canonical is None:
            raise PatternNotFoundError(name, available=self.get_registered_names())
        return self._registrations[canonical]

    def get(self, name: str) -> PatternDescriptor:
        """Get the descriptor registered under a name or alias."""
        return self.get_registration(name).descriptor

    def get_registered_names(self) -> List[str]:
        """Registered pattern names in registration order."""
        return [registration.name for registration in self._registrations.values()]

    def list_descriptors(self, category: Optional[PatternCategory] = None) -> List[PatternDescriptor]:
        """List descriptors in registration order, optionally by category."""
        return [
            registration.descriptor
            for registration in self._registrations.values()
            if category is None or registration.descriptor.category == category
        ]

    def run(self, name: str) -> DemoResult:
        """
        Run one demo and capture its output.

        A demo that raises produces a failed result; the exception does not
        propagate.

        Raises:
            PatternNotFoundError: If nothing is registered under the name
        """
        registration = self.get_registration(name)
        lines: List[str] = []
        error: Optional[str] = None
        error_type: Optional[str] = None

        self._logger.debug(f"Running demo: {registration.name}")
        start = time.perf_counter()
        try:
            registration.demo(lines.append)
        except Exception as e:
            error = str(e) or type(e).__name__
            error_type = type(e).__name__
            self._logger.info(f"Demo '{registration.name}' failed: {error}")
        duration_ms = (time.perf_counter() - start) * 1000

        return DemoResult(
            pattern_name=registration.name,
            output_lines=lines,
            succeeded=error is None,
            error=error,
            error_type=error_type,
            duration_ms=duration_ms,
        )

    def clear_registrations(self) -> None:
        """Remove every registration and unseal (used by tests)."""
        with self._registration_lock:
            self._registrations.clear()
            self._lookup.clear()
            self._sealed = False

    def __len__(self) -> int:
        return len(self._registrations)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_registered(name)


# Global registry instance
_global_registry: Optional[PatternRegistry] = None
_global_registry_lock = threading.Lock()


def get_pattern_registry() -> PatternRegistry:
    """Get or create the global pattern registry, populated with the built-in demos."""
    global _global_registry
    if _global_registry is None:
        with _global_registry_lock:
            if _global_registry is None:
                from pattern_catalog.demos.catalog import register_all_patterns

                registry = PatternRegistry()
                register_all_patterns(registry)
                registry.seal()
                _global_registry = registry
    return _global_registry


def create_pattern_registry(include_defaults: bool = True) -> PatternRegistry:
    """Create a fresh, unsealed registry."""
    registry = PatternRegistry()
    if include_defaults:
        from pattern_catalog.demos.catalog import register_all_patterns

        register_all_patterns(registry)
    return registry
