"""
Observer demo.

The subject keeps observers in attach order and notifies them synchronously
whenever its state changes. Attaching an observer that is already attached
is rejected.
"""
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple

from pattern_catalog.demos.base import DemoWriter, check

PATTERN_NAME = "observer"


class Observer(ABC):
    """Receives state updates from a subject."""

    @abstractmethod
    def update(self, subject: "Subject", state: Any) -> None:
        pass


class Subject:
    """Holds state and an ordered collection of observers."""

    def __init__(self, state: Any = None):
        self._state = state
        self._observers: List[Observer] = []

    @property
    def observers(self) -> Tuple[Observer, ...]:
        return tuple(self._observers)

    def attach(self, observer: Observer) -> None:
        """Append an observer; attaching the same observer twice raises ValueError."""
        if any(existing is observer for existing in self._observers):
            raise ValueError("Observer is already attached")
        self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        """Remove an observer by identity."""
        for index, existing in enumerate(self._observers):
            if existing is observer:
                del self._observers[index]
                return
        raise ValueError("Observer is not attached")

    def notify(self) -> None:
        # Iterate over a snapshot so observers may detach themselves.
        for observer in list(self._observers):
            observer.update(self, self._state)

    @property
    def state(self) -> Any:
        return self._state

    @state.setter
    def state(self, value: Any) -> None:
        self._state = value
        self.notify()


class RecordingObserver(Observer):
    """Observer that remembers every state it receives."""

    def __init__(self, name: str, write: Optional[DemoWriter] = None, log: Optional[List[Tuple[str, Any]]] = None):
        self.name = name
        self.received: List[Any] = []
        self._write = write
        self._log = log

    def update(self, subject: Subject, state: Any) -> None:
        self.received.append(state)
        if self._log is not None:
            self._log.append((self.name, state))
        if self._write is not None:
            self._write(f"{self.name} received {state!r}")

    def __repr__(self) -> str:
        return f"RecordingObserver({self.name!r})"


def run_demo(write: DemoWriter) -> None:
    """Attach two observers, change state, detach one, change state again."""
    deliveries: List[Tuple[str, Any]] = []
    subject = Subject()
    o1 = RecordingObserver("O1", write, deliveries)
    o2 = RecordingObserver("O2", write, deliveries)

    subject.attach(o1)
    subject.attach(o2)
    write("Setting state to 'X'")
    subject.state = "X"
    check(deliveries == [("O1", "X"), ("O2", "X")], PATTERN_NAME, f"unexpected deliveries {deliveries}")

    subject.detach(o1)
    write("Detached O1; setting state to 'Y'")
    subject.state = "Y"
    check(o1.received == ["X"], PATTERN_NAME, "detached observer was still notified")
    check(o2.received == ["X", "Y"], PATTERN_NAME, "attached observer missed a notification")
