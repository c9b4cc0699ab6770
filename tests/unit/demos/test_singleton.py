"""Tests for the singleton holder and demo."""
import threading
import time
from concurrent.futures import ThreadPoolExecutor

from pattern_catalog.demos.singleton import SharedResource, SingletonHolder, run_demo


class TestSingletonHolder:
    """Test lazy single-instance construction."""

    def test_sequential_accesses_return_same_instance(self):
        holder = SingletonHolder(SharedResource)

        first = holder.get()
        second = holder.get()

        assert first is second
        assert holder.construction_count == 1

    def test_instance_is_created_lazily(self):
        calls = []
        holder = SingletonHolder(lambda: calls.append(1) or SharedResource())

        assert not holder.is_initialized
        assert calls == []

        holder.get()
        assert holder.is_initialized
        assert calls == [1]

    def test_concurrent_first_access_constructs_once(self):
        constructed = []

        def slow_factory():
            # Widen the race window between check and create
            time.sleep(0.01)
            instance = SharedResource()
            constructed.append(instance)
            return instance

        holder = SingletonHolder(slow_factory)
        workers = 16
        barrier = threading.Barrier(workers)

        def access():
            barrier.wait()
            return holder.get()

        with ThreadPoolExecutor(max_workers=workers) as executor:
            instances = list(executor.map(lambda _: access(), range(workers)))

        assert len(constructed) == 1
        assert all(instance is constructed[0] for instance in instances)

    def test_separate_holders_own_separate_instances(self):
        assert SingletonHolder(SharedResource).get() is not SingletonHolder(SharedResource).get()


class TestSingletonDemo:
    def test_demo_output(self):
        lines = []
        run_demo(lines.append, workers=4)

        assert lines == [
            "First access: SharedResource instance",
            "Second access returns the same instance: True",
            "Concurrent first access from 4 threads: 1 instance constructed",
        ]
