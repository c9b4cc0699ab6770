"""Adapter demo."""
from pattern_catalog.demos.base import DemoWriter, check

PATTERN_NAME = "adapter"


class Target:
    """The interface clients expect."""

    def request(self) -> str:
        return "Target: the default target's behavior."


class Adaptee:
    """Useful behavior behind an incompatible interface."""

    def specific_request(self) -> str:
        return "Adaptee specific request."


class Adapter(Target):
    """Makes an Adaptee usable wherever a Target is expected."""

    def __init__(self, adaptee: Adaptee):
        self._adaptee = adaptee

    def request(self) -> str:
        return self._adaptee.specific_request()


def client_code(target: Target) -> str:
    return target.request()


def run_demo(write: DemoWriter) -> None:
    """Route a client call through the adapter to the adaptee."""
    write(f"Client with Target: {client_code(Target())}")

    adaptee = Adaptee()
    raw = adaptee.specific_request()
    write(f"Adaptee called directly: {raw}")

    adapted = client_code(Adapter(adaptee))
    write(f"Client with Adapter: {adapted}")
    check(adapted == raw, PATTERN_NAME, "adapter changed the adaptee's output")
