"""Tests for DepthGuard recursion limiting.

Python 3.13+.
"""

import logging
import sys

import pytest

from icureport.constants import MAX_DEPTH
from icureport.core import DepthGuard, DepthLimitExceededError
from icureport.core.depth_guard import depth_clamp
from icureport.diagnostics import DiagnosticCode


class TestDepthGuard:
    """Context manager depth tracking."""

    def test_default_max_depth(self) -> None:
        assert DepthGuard().max_depth == min(MAX_DEPTH, sys.getrecursionlimit() - 50)

    def test_nested_entry_tracks_depth(self) -> None:
        guard = DepthGuard(max_depth=3)
        with guard:
            assert guard.depth == 1
            with guard:
                assert guard.current_depth == 2
        assert guard.depth == 0

    def test_limit_exceeded(self) -> None:
        guard = DepthGuard(max_depth=2)
        with guard, guard:
            assert guard.is_exceeded()
            with pytest.raises(DepthLimitExceededError) as exc_info, guard:
                pass
        assert exc_info.value.diagnostic.code == DiagnosticCode.MAX_DEPTH_EXCEEDED

    def test_depth_restored_after_failure(self) -> None:
        guard = DepthGuard(max_depth=1)
        with guard:
            with pytest.raises(DepthLimitExceededError), guard:
                pass
            assert guard.depth == 1
        assert guard.depth == 0

    def test_depth_restored_after_body_error(self) -> None:
        guard = DepthGuard(max_depth=5)
        with pytest.raises(KeyError), guard:
            raise KeyError("x")
        assert guard.depth == 0


class TestDepthClamp:
    """Clamping against the interpreter recursion limit."""

    def test_within_limit(self) -> None:
        assert depth_clamp(10) == 10

    def test_clamped(self, caplog: pytest.LogCaptureFixture) -> None:
        limit = sys.getrecursionlimit()
        with caplog.at_level(logging.WARNING, logger="icureport.core.depth_guard"):
            assert depth_clamp(limit * 2) == limit - 50
        assert "Clamping" in caplog.text
