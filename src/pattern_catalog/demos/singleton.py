"""
Singleton demo.

The shared instance lives in an explicitly owned holder instead of a module
global. The holder builds the instance on first access and guards the
check-and-create step with a lock, so concurrent first accesses still
construct exactly one instance.
"""
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Generic, List, Optional, TypeVar

from pattern_catalog.demos.base import DemoWriter, check

T = TypeVar("T")

PATTERN_NAME = "singleton"


class SingletonHolder(Generic[T]):
    """Lazily initialized single-instance holder."""

    def __init__(self, factory: Callable[[], T]):
        self._factory = factory
        self._instance: Optional[T] = None
        self._lock = threading.Lock()
        self._construction_count = 0

    def get(self) -> T:
        """Return the shared instance, constructing it on first call."""
        if self._instance is None:
            with self._lock:
                if self._instance is None:
                    self._instance = self._factory()
                    self._construction_count += 1
        return self._instance

    @property
    def is_initialized(self) -> bool:
        return self._instance is not None

    @property
    def construction_count(self) -> int:
        return self._construction_count


class SharedResource:
    """The object there should only ever be one of."""

    def __init__(self, label: str = "SharedResource"):
        self.label = label

    def describe(self) -> str:
        return f"{self.label} instance"


def _concurrent_access(holder: SingletonHolder, workers: int) -> List[object]:
    # All workers wait on the barrier so their first accesses overlap.
    barrier = threading.Barrier(workers)

    def access() -> object:
        barrier.wait()
        return holder.get()

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(access) for _ in range(workers)]
        return [future.result() for future in futures]


def run_demo(write: DemoWriter, workers: int = 8) -> None:
    """Show that every access returns the same instance."""
    holder = SingletonHolder(SharedResource)

    first = holder.get()
    second = holder.get()
    write(f"First access: {first.describe()}")
    write(f"Second access returns the same instance: {first is second}")
    check(first is second, PATTERN_NAME, "sequential accesses returned different instances")

    concurrent_holder = SingletonHolder(SharedResource)
    instances = _concurrent_access(concurrent_holder, workers)
    distinct = len({id(instance) for instance in instances})
    write(
        f"Concurrent first access from {workers} threads: "
        f"{concurrent_holder.construction_count} instance constructed"
    )
    check(concurrent_holder.construction_count == 1, PATTERN_NAME, "concurrent accesses constructed more than one instance")
    check(distinct == 1, PATTERN_NAME, "concurrent accesses observed different instances")
