"""Tests for the pattern registry."""
from unittest.mock import Mock

import pytest

from pattern_catalog.domain.exceptions import (
    DuplicatePatternError,
    PatternNotFoundError,
    ValidationError,
)
from pattern_catalog.domain.models import PatternCategory, PatternDescriptor
from pattern_catalog.registry.pattern_registry import (
    PatternRegistry,
    create_pattern_registry,
    get_pattern_registry,
)

BUILT_IN_PATTERNS = ["singleton", "factory-method", "adapter", "observer"]


class TestPatternRegistry:
    """Test registration, lookup and running."""

    def setup_method(self):
        self.registry = PatternRegistry()
        self.demo = Mock(side_effect=lambda write: write("hello"))
        self.descriptor = PatternDescriptor(
            name="sample",
            category=PatternCategory.BEHAVIORAL,
            description="Sample",
            aliases=("example",),
        )

    def test_register_and_get(self):
        self.registry.register(self.descriptor, self.demo)

        assert self.registry.is_registered("sample")
        assert "sample" in self.registry
        assert self.registry.get("sample") is self.descriptor
        assert self.registry.get("EXAMPLE") is self.descriptor
        assert len(self.registry) == 1

    def test_duplicate_name_is_rejected(self):
        self.registry.register(self.descriptor, self.demo)

        with pytest.raises(DuplicatePatternError, match="already registered"):
            self.registry.register(
                PatternDescriptor(name="Sample", category=PatternCategory.CREATIONAL), self.demo
            )

    def test_alias_collision_is_rejected(self):
        self.registry.register(self.descriptor, self.demo)

        with pytest.raises(DuplicatePatternError):
            self.registry.register(
                PatternDescriptor(name="other", category=PatternCategory.CREATIONAL, aliases=("example",)),
                self.demo,
            )
        assert not self.registry.is_registered("other")

    def test_non_callable_demo_is_rejected(self):
        with pytest.raises(ValidationError, match="not callable"):
            self.registry.register(self.descriptor, "not a function")

    def test_sealed_registry_rejects_registration(self):
        self.registry.seal()

        assert self.registry.is_sealed
        with pytest.raises(ValidationError, match="sealed"):
            self.registry.register(self.descriptor, self.demo)

    @pytest.mark.parametrize("name, aliases", [("All", ()), ("everything", ("ALL",))])
    def test_reserved_name_is_rejected(self, name, aliases):
        with pytest.raises(ValidationError, match="reserved"):
            self.registry.register(
                PatternDescriptor(name=name, category=PatternCategory.CREATIONAL, aliases=aliases),
                self.demo,
            )
        assert len(self.registry) == 0

    def test_get_unknown_pattern_raises_not_found(self):
        self.registry.register(self.descriptor, self.demo)

        with pytest.raises(PatternNotFoundError) as exc_info:
            self.registry.get("nonexistent")

        assert exc_info.value.pattern_name == "nonexistent"
        assert exc_info.value.available == ["sample"]

    def test_run_unknown_pattern_raises_not_found(self):
        with pytest.raises(PatternNotFoundError):
            self.registry.run("nonexistent")

    def test_run_captures_output(self):
        self.registry.register(self.descriptor, self.demo)

        result = self.registry.run("example")

        assert result.pattern_name == "sample"
        assert result.succeeded
        assert result.output_lines == ["hello"]
        assert result.error is None
        assert result.duration_ms >= 0
        self.demo.assert_called_once()

    def test_run_reports_demo_failure(self, failing_demo):
        self.registry.register(self.descriptor, failing_demo)

        result = self.registry.run("sample")

        assert not result.succeeded
        assert result.output_lines == ["about to fail"]
        assert result.error == "boom"
        assert result.error_type == "RuntimeError"

    def test_listing_preserves_registration_order(self):
        names = ["zeta", "alpha", "mu"]
        categories = [PatternCategory.STRUCTURAL, PatternCategory.CREATIONAL, PatternCategory.STRUCTURAL]
        for name, category in zip(names, categories):
            self.registry.register(PatternDescriptor(name=name, category=category), self.demo)

        assert self.registry.get_registered_names() == names
        assert [d.name for d in self.registry.list_descriptors(PatternCategory.STRUCTURAL)] == ["zeta", "mu"]
        assert self.registry.list_descriptors(PatternCategory.BEHAVIORAL) == []

    def test_clear_registrations(self):
        self.registry.register(self.descriptor, self.demo)
        self.registry.seal()

        self.registry.clear_registrations()

        assert len(self.registry) == 0
        assert not self.registry.is_sealed


class TestBuiltInRegistry:
    """Test the registry populated with the built-in demos."""

    def test_default_registration_order(self, default_registry):
        assert default_registry.get_registered_names() == BUILT_IN_PATTERNS

    @pytest.mark.parametrize("name", BUILT_IN_PATTERNS)
    def test_every_built_in_demo_succeeds(self, default_registry, name):
        result = default_registry.run(name)

        assert result.succeeded, result.error
        assert result.output_lines

    def test_categories(self, default_registry):
        categories = {d.name: d.category for d in default_registry.list_descriptors()}

        assert categories == {
            "singleton": PatternCategory.CREATIONAL,
            "factory-method": PatternCategory.CREATIONAL,
            "adapter": PatternCategory.STRUCTURAL,
            "observer": PatternCategory.BEHAVIORAL,
        }

    def test_lookup_by_alias(self, default_registry):
        assert default_registry.get("factory_method").name == "factory-method"
        assert default_registry.get("publish-subscribe").name == "observer"

    def test_global_registry_is_shared_and_sealed(self):
        registry = get_pattern_registry()

        assert registry is get_pattern_registry()
        assert registry.is_sealed
        assert registry.get_registered_names() == BUILT_IN_PATTERNS

    def test_create_pattern_registry_without_defaults(self):
        assert len(create_pattern_registry(include_defaults=False)) == 0
