"""Tests for the demo runner."""
from unittest.mock import Mock

import pytest

from pattern_catalog.application.runner import DemoRunner
from pattern_catalog.config.schemas import RunnerConfig
from pattern_catalog.domain.events import DemoCompletedEvent, DemoFailedEvent, DemoStartedEvent
from pattern_catalog.domain.exceptions import PatternNotFoundError
from pattern_catalog.domain.models import PatternCategory, PatternDescriptor


class TestDemoRunner:
    """Test name resolution, aggregation and event publishing."""

    def setup_method(self):
        self.publisher = Mock()

    def _register(self, registry, name, demo):
        registry.register(PatternDescriptor(name=name, category=PatternCategory.CREATIONAL), demo)

    def test_run_all_in_registration_order(self, default_registry):
        report = DemoRunner(default_registry).run(["all"])

        assert [r.pattern_name for r in report.results] == [
            "singleton",
            "factory-method",
            "adapter",
            "observer",
        ]
        assert report.succeeded

    def test_no_names_means_all(self, default_registry):
        report = DemoRunner(default_registry).run()
        assert len(report.results) == 4

    def test_run_selected_names_in_requested_order(self, default_registry):
        report = DemoRunner(default_registry).run(["observer", "Singleton", "observer"])

        assert [r.pattern_name for r in report.results] == ["observer", "singleton"]

    def test_unknown_name_fails_before_running(self, empty_registry):
        demo = Mock()
        self._register(empty_registry, "one", demo)

        with pytest.raises(PatternNotFoundError):
            DemoRunner(empty_registry).run(["one", "nonexistent"])
        demo.assert_not_called()

    def test_unknown_name_alongside_all_fails_before_running(self, empty_registry):
        demo = Mock()
        self._register(empty_registry, "one", demo)

        with pytest.raises(PatternNotFoundError):
            DemoRunner(empty_registry).run(["all", "nonexistent"])
        demo.assert_not_called()

    def test_failed_demo_fails_report(self, empty_registry, failing_demo):
        self._register(empty_registry, "good", lambda write: write("ok"))
        self._register(empty_registry, "bad", failing_demo)
        self._register(empty_registry, "after", lambda write: write("still runs"))

        report = DemoRunner(empty_registry).run(["all"])

        assert not report.succeeded
        assert report.failed == ["bad"]
        assert len(report.results) == 3

    def test_fail_fast_stops_after_first_failure(self, empty_registry, failing_demo):
        after = Mock()
        self._register(empty_registry, "bad", failing_demo)
        self._register(empty_registry, "after", after)

        report = DemoRunner(empty_registry, config=RunnerConfig(fail_fast=True)).run(["all"])

        assert report.failed == ["bad"]
        assert len(report.results) == 1
        after.assert_not_called()

    def test_disabled_patterns_are_skipped_by_all(self, default_registry):
        runner = DemoRunner(default_registry, config=RunnerConfig(disabled=["Factory_Method"]))

        assert runner.resolve(["all"]) == ["singleton", "adapter", "observer"]
        assert runner.resolve(["factory-method"]) == ["factory-method"]

    def test_events_published_around_each_demo(self, empty_registry, failing_demo):
        self._register(empty_registry, "good", lambda write: write("ok"))
        self._register(empty_registry, "bad", failing_demo)

        DemoRunner(empty_registry, event_publisher=self.publisher).run(["all"])

        events = [call.args[0] for call in self.publisher.publish.call_args_list]
        assert [type(e) for e in events] == [
            DemoStartedEvent,
            DemoCompletedEvent,
            DemoStartedEvent,
            DemoFailedEvent,
        ]
        assert events[1].line_count == 1
        assert events[3].pattern_name == "bad"
        assert events[3].error_message == "boom"
        assert events[3].error_type == "RuntimeError"
