"""
Pattern demonstrations.

One module per pattern; each exposes ``run_demo(write)`` which reports its
output through ``write`` and raises ``DemoAssertionError`` when the
pattern's contract does not hold.
"""

from pattern_catalog.demos.base import DemoFunction, DemoWriter, check

__all__ = ["DemoFunction", "DemoWriter", "check"]
