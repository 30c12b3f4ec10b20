#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_lazy_module.py
"""Unit tests for LazyModule handles."""

import threading
from unittest.mock import patch

import pytest

from blockrender.exceptions import DependencyError
from blockrender.utils.lazy import LazyModule


@pytest.mark.unit
class TestLazyModule:
    """Tests for lazy, write-once module loading."""

    def test_loads_on_first_get(self):
        """Test that nothing is imported until get is called."""
        handle = LazyModule("json")
        assert not handle.is_loaded
        module = handle.get()
        assert module.__name__ == "json"
        assert handle.is_loaded

    def test_import_happens_once(self):
        """Test that later calls reuse the loaded module."""
        handle = LazyModule("json")
        with patch("blockrender.utils.lazy.check_dependencies") as check:
            first = handle.get()
            assert handle.get() is first
            assert handle.get() is first
        assert check.call_count == 1

    def test_missing_module_raises_dependency_error(self):
        """Test that a missing package surfaces as DependencyError."""
        handle = LazyModule("blockrender_no_such_module", "no-such-dist", feature_name="testing")
        with pytest.raises(DependencyError) as exc_info:
            handle.get()
        assert "no-such-dist" in str(exc_info.value)
        assert not handle.is_loaded

    def test_failure_is_not_cached(self):
        """Test that a failed import is retried on the next call."""
        handle = LazyModule("json")
        with patch("blockrender.utils.lazy.check_dependencies", side_effect=DependencyError("x", [("json", "")])):
            with pytest.raises(DependencyError):
                handle.get()
        assert handle.get().__name__ == "json"

    def test_reset(self):
        """Test that reset forgets the module."""
        handle = LazyModule("json")
        handle.get()
        handle.reset()
        assert not handle.is_loaded

    def test_concurrent_callers_share_one_module(self):
        """Test that threads racing on get all receive the same module object."""
        handle = LazyModule("json")
        results = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            results.append(handle.get())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 8
        assert all(module is results[0] for module in results)
