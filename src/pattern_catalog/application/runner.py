"""Demo runner - resolves requested patterns and aggregates their results."""
from typing import Iterable, List, Optional

from pattern_catalog.config.schemas import RunnerConfig
from pattern_catalog.domain.events import (
    DemoCompletedEvent,
    DemoFailedEvent,
    DemoStartedEvent,
    EventPublisher,
)
from pattern_catalog.domain.models import RunReport, normalize_pattern_name
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.registry.pattern_registry import ALL_PATTERNS, PatternRegistry


class DemoRunner:
    """
    Runs demos through a registry.

    ``run(["all"])`` (or no names) runs every registered demo in registration
    order, minus the ones disabled in configuration. Unknown names fail the
    whole run before any demo executes.
    """

    def __init__(
        self,
        registry: PatternRegistry,
        config: Optional[RunnerConfig] = None,
        event_publisher: Optional[EventPublisher] = None,
    ):
        self._registry = registry
        self._config = config or RunnerConfig()
        self._publisher = event_publisher
        self._logger = get_logger(__name__)

    def resolve(self, names: Optional[Iterable[str]] = None) -> List[str]:
        """
        Turn requested names into canonical registered names.

        Raises:
            PatternNotFoundError: If any requested name is not registered
        """
        requested = [name for name in (names or []) if name and name.strip()]
        named = [name for name in requested if normalize_pattern_name(name) != ALL_PATTERNS]

        # Unknown names fail the run even when "all" is also requested
        for name in named:
            self._registry.get(name)

        if len(named) < len(requested) or not requested:
            disabled = {normalize_pattern_name(name) for name in self._config.disabled}
            return [
                name
                for name in self._registry.get_registered_names()
                if normalize_pattern_name(name) not in disabled
            ]

        resolved: List[str] = []
        for name in requested:
            canonical = self._registry.get(name).name
            if canonical not in resolved:
                resolved.append(canonical)
        return resolved

    def run(self, names: Optional[Iterable[str]] = None) -> RunReport:
        """Run the requested demos and return their results in order."""
        report = RunReport()

        for name in self.resolve(names):
            self._publish(DemoStartedEvent(pattern_name=name))
            result = self._registry.run(name)
            report.results.append(result)

            if result.succeeded:
                self._publish(
                    DemoCompletedEvent(
                        pattern_name=name,
                        duration_ms=result.duration_ms,
                        line_count=len(result.output_lines),
                    )
                )
            else:
                self._publish(
                    DemoFailedEvent(
                        pattern_name=name,
                        duration_ms=result.duration_ms,
                        error_message=result.error or "",
                        error_type=result.error_type,
                    )
                )
                if self._config.fail_fast:
                    self._logger.info(f"Stopping after failed demo '{name}' (fail_fast)")
                    break

        self._logger.info(
            f"Ran {len(report.results)} demo(s); {len(report.failed)} failed"
        )
        return report

    def _publish(self, event) -> None:
        if self._publisher is not None:
            self._publisher.publish(event)
