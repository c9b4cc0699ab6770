"""Configurable Event Publisher - Simple, mode-based event publishing."""
from typing import Callable, Dict, List

from pattern_catalog.domain.events import DemoEvent, DemoFailedEvent, EventPublisher
from pattern_catalog.infrastructure.logging.logger import get_logger, get_structured_logger


class ConfigurableEventPublisher(EventPublisher):
    """
    Simple, configurable event publisher.

    Modes:
    - "logging": Just log events as structured records
    - "sync": Call registered handlers synchronously, in registration order
    """

    VALID_MODES = ["logging", "sync"]

    def __init__(self, mode: str = "logging"):
        """Initialize with publishing mode."""
        if mode not in self.VALID_MODES:
            raise ValueError(f"Invalid mode '{mode}'. Must be one of: {self.VALID_MODES}")
        self.mode = mode
        self._handlers: Dict[str, List[Callable[[DemoEvent], None]]] = {}
        self._logger = get_logger(__name__)
        self._event_logger = get_structured_logger(__name__)

    def publish(self, event: DemoEvent) -> None:
        """Publish event based on configured mode."""
        try:
            if self.mode == "logging":
                self._log_event(event)
            elif self.mode == "sync":
                self._call_handlers_sync(event)
        except Exception as e:
            # Publishing failures never fail the demo run
            self._logger.error(f"Failed to publish event {event.event_type}: {e}")

    def register_handler(self, event_type: str, handler: Callable[[DemoEvent], None]) -> None:
        """Register event handler for specific event type."""
        self._handlers.setdefault(event_type, []).append(handler)
        self._logger.debug(f"Registered handler for {event_type}")

    def _log_event(self, event: DemoEvent) -> None:
        fields = event.model_dump(exclude={"event_id", "occurred_at", "event_type", "pattern_name", "metadata"})
        log = self._event_logger.warning if isinstance(event, DemoFailedEvent) else self._event_logger.info
        log(event.event_type, pattern=event.pattern_name, **fields)

    def _call_handlers_sync(self, event: DemoEvent) -> None:
        handlers = self._handlers.get(event.event_type, [])

        if not handlers:
            self._logger.debug(f"No handlers registered for {event.event_type}")
            return

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                self._logger.error(f"Event handler failed for {event.event_type}: {e}")

    def get_registered_handlers(self) -> Dict[str, int]:
        """Get count of registered handlers by event type (for debugging)."""
        return {event_type: len(handlers) for event_type, handlers in self._handlers.items()}


def create_event_publisher(mode: str = "logging") -> ConfigurableEventPublisher:
    """Create event publisher with specified mode."""
    return ConfigurableEventPublisher(mode=mode)
