"""
Pattern Catalog - the built-in pattern demonstrations.

Registration order here is the order ``run all`` and ``list`` use.
"""
from typing import TYPE_CHECKING, List, Tuple

from pattern_catalog.demos import adapter, factory_method, observer, singleton
from pattern_catalog.demos.base import DemoFunction
from pattern_catalog.domain.models import PatternCategory, PatternDescriptor

if TYPE_CHECKING:
    from pattern_catalog.registry.pattern_registry import PatternRegistry


# ============================================================
# CREATIONAL PATTERNS
# ============================================================

SINGLETON_PATTERN = PatternDescriptor(
    name=singleton.PATTERN_NAME,
    category=PatternCategory.CREATIONAL,
    description="Ensure a class has only one instance and provide a global point of access to it.",
)

FACTORY_METHOD_PATTERN = PatternDescriptor(
    name=factory_method.PATTERN_NAME,
    category=PatternCategory.CREATIONAL,
    description="Define an interface for creating an object, but let subclasses decide which class to instantiate.",
    aliases=("factory",),
)


# ============================================================
# STRUCTURAL PATTERNS
# ============================================================

ADAPTER_PATTERN = PatternDescriptor(
    name=adapter.PATTERN_NAME,
    category=PatternCategory.STRUCTURAL,
    description="Convert the interface of a class into another interface clients expect.",
    aliases=("wrapper",),
)


# ============================================================
# BEHAVIORAL PATTERNS
# ============================================================

OBSERVER_PATTERN = PatternDescriptor(
    name=observer.PATTERN_NAME,
    category=PatternCategory.BEHAVIORAL,
    description="Define a one-to-many dependency so that when one object changes state, all its dependents are notified.",
    aliases=("publish-subscribe",),
)


PATTERN_CATALOG: List[Tuple[PatternDescriptor, DemoFunction]] = [
    (SINGLETON_PATTERN, singleton.run_demo),
    (FACTORY_METHOD_PATTERN, factory_method.run_demo),
    (ADAPTER_PATTERN, adapter.run_demo),
    (OBSERVER_PATTERN, observer.run_demo),
]


def register_all_patterns(registry: "PatternRegistry") -> None:
    """Register every built-in demo with the registry."""
    for descriptor, demo in PATTERN_CATALOG:
        registry.register(descriptor, demo)
