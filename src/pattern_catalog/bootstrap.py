"""Application bootstrap - wires configuration, logging, registry and runner."""
from typing import Optional

from pattern_catalog.application.runner import DemoRunner
from pattern_catalog.config.manager import ConfigurationManager
from pattern_catalog.config.schemas import AppConfig, LoggingConfig, LogLevel
from pattern_catalog.infrastructure.events.publisher import (
    ConfigurableEventPublisher,
    create_event_publisher,
)
from pattern_catalog.infrastructure.logging.logger import get_logger, setup_logging
from pattern_catalog.registry.pattern_registry import PatternRegistry, get_pattern_registry


class Application:
    """Holds the components one CLI invocation needs."""

    def __init__(
        self,
        config_manager: Optional[ConfigurationManager] = None,
        registry: Optional[PatternRegistry] = None,
    ):
        self._config_manager = config_manager or ConfigurationManager()
        self._registry = registry
        self._event_publisher: Optional[ConfigurableEventPublisher] = None
        self._runner: Optional[DemoRunner] = None
        self._initialized = False
        self._logger = get_logger(__name__)

    @property
    def config(self) -> AppConfig:
        return self._config_manager.app_config

    @property
    def registry(self) -> PatternRegistry:
        if self._registry is None:
            self._registry = get_pattern_registry()
        return self._registry

    @property
    def event_publisher(self) -> Optional[ConfigurableEventPublisher]:
        if self._event_publisher is None and self.config.events.enabled:
            self._event_publisher = create_event_publisher(self.config.events.mode)
        return self._event_publisher

    @property
    def runner(self) -> DemoRunner:
        if self._runner is None:
            self._runner = DemoRunner(
                self.registry,
                config=self.config.runner,
                event_publisher=self.event_publisher,
            )
        return self._runner

    def initialize(self, log_level: Optional[str] = None, verbose: bool = False) -> None:
        """Configure logging; command line overrides win over configuration."""
        if self._initialized:
            return

        logging_config: LoggingConfig = self.config.logging
        if log_level:
            logging_config = logging_config.model_copy(update={"level": LogLevel(log_level.upper())})
        elif verbose or self.config.debug:
            logging_config = logging_config.model_copy(update={"level": LogLevel.DEBUG})

        setup_logging(logging_config)
        self._initialized = True
        self._logger.debug(f"Application initialized with {len(self.registry)} patterns")


def create_application(config_file: Optional[str] = None) -> Application:
    """Create the application for a configuration file (or default sources)."""
    return Application(config_manager=ConfigurationManager(config_file))
