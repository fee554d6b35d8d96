"""Tests for the write-once static cache."""

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from dockhand.utils.cache import StaticCache

class TestStaticCache:
    """Single-threaded behaviour."""

    def test_computes_on_first_use(self, cache):
        """Test that the factory runs on first access and the value is stored."""
        assert "signals" not in cache

        value = cache.get_or_compute("signals", lambda: ["KILL", "TERM"])

        assert value == ["KILL", "TERM"]
        assert "signals" in cache
        assert cache.computations["signals"] == 1

    def test_second_read_returns_identical_list(self, cache):
        """Test that later reads return the same object without recomputing."""
        calls = []

        def factory():
            calls.append(1)
            return ["a", "b"]

        first = cache.get_or_compute("k", factory)
        second = cache.get_or_compute("k", factory)

        assert first is second
        assert len(calls) == 1
        assert cache.computations["k"] == 1

    def test_keys_are_independent(self, cache):
        cache.get_or_compute("a", lambda: ["1"])
        cache.get_or_compute("b", lambda: ["2"])

        assert cache.get_or_compute("a", lambda: []) == ["1"]
        assert cache.get_or_compute("b", lambda: []) == ["2"]

    def test_factory_error_is_not_cached(self, cache):
        """Test that a failing factory stores nothing and the next call retries."""

        def broken():
            raise RuntimeError("enumeration failed")

        with pytest.raises(RuntimeError):
            cache.get_or_compute("caps", broken)

        assert "caps" not in cache
        assert cache.get_or_compute("caps", lambda: ["ALL"]) == ["ALL"]

    def test_generator_factories_are_materialized(self, cache):
        value = cache.get_or_compute("gen", lambda: (n for n in ["x", "y"]))
        assert value == ["x", "y"]
        assert cache.get_or_compute("gen", lambda: []) == ["x", "y"]


class TestStaticCacheConcurrency:
    """Concurrent first access."""

    def test_concurrent_first_access_computes_once(self, cache):
        """Test that N racing first callers trigger exactly one computation."""
        workers = 16
        barrier = threading.Barrier(workers)
        calls = []

        def slow_factory():
            calls.append(threading.get_ident())
            time.sleep(0.05)
            return ["CAP_CHOWN", "CAP_KILL"]

        def worker(_):
            barrier.wait()
            return cache.get_or_compute("capabilities", slow_factory)

        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(worker, range(workers)))

        assert len(calls) == 1
        assert len(results) == workers
        assert all(r is results[0] for r in results)
        assert results[0] == ["CAP_CHOWN", "CAP_KILL"]

    def test_slow_key_does_not_block_other_keys(self, cache):
        started = threading.Event()
        release = threading.Event()

        def blocking():
            started.set()
            release.wait(timeout=5)
            return ["slow"]

        with ThreadPoolExecutor(max_workers=1) as pool:
            future = pool.submit(cache.get_or_compute, "slow", blocking)
            assert started.wait(timeout=5)

            assert cache.get_or_compute("fast", lambda: ["fast"]) == ["fast"]

            release.set()
            assert future.result(timeout=5) == ["slow"]
