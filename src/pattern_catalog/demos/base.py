"""Shared pieces for demo entry points."""
from typing import Callable

from pattern_catalog.domain.exceptions import DemoAssertionError

# A demo receives a writer and reports every output line through it.
DemoWriter = Callable[[str], None]
DemoFunction = Callable[[DemoWriter], None]


def check(condition: bool, pattern_name: str, message: str) -> None:
    """Raise DemoAssertionError when a demo's contract check fails."""
    if not condition:
        raise DemoAssertionError(pattern_name, message)
