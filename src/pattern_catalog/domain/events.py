"""Demo lifecycle events - published by the runner around every demo."""
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Protocol
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class DemoEvent(BaseModel):
    """Base class for all demo lifecycle events."""
    model_config = ConfigDict(frozen=True)

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    event_type: str = ""
    pattern_name: str
    metadata: Dict[str, Any] = Field(default_factory=dict)

    def __init__(self, **data):
        # Set event_type based on class name if not provided
        if not data.get("event_type"):
            data["event_type"] = self.__class__.__name__
        super().__init__(**data)


class DemoStartedEvent(DemoEvent):
    """A demo is about to run."""


class DemoCompletedEvent(DemoEvent):
    """A demo ran and its contract held."""
    duration_ms: float
    line_count: int = 0


class DemoFailedEvent(DemoEvent):
    """A demo raised or its contract check failed."""
    duration_ms: float
    error_message: str
    error_type: Optional[str] = None


class EventPublisher(Protocol):
    """Protocol for event publishing."""

    def publish(self, event: DemoEvent) -> None:
        """Publish a single event."""
        ...

    def register_handler(self, event_type: str, handler) -> None:
        """Register a handler for an event type."""
        ...
