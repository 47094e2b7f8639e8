"""Tests for hoststats.engine.result_cache."""

from __future__ import annotations

import pytest

from hoststats.engine.result_cache import MAX_RESULT_CACHE, ResultCache
from hoststats.models import CpuStats, Snapshot


def _snapshot(n: int) -> Snapshot:
    return Snapshot(
        cpu=CpuStats(
            used_percentage=n, user_percentage=n, system_percentage=0, idle_percentage=0
        )
    )


class TestResultCache:
    def test_default_capacity(self):
        assert ResultCache().capacity == MAX_RESULT_CACHE == 100

    def test_records_in_order(self):
        cache = ResultCache()
        snaps = [_snapshot(i) for i in range(3)]
        for s in snaps:
            cache.record(s)
        assert cache.history() == tuple(snaps)
        assert len(cache) == 3

    def test_bounded_to_most_recent_100(self):
        cache = ResultCache()
        snaps = [_snapshot(i) for i in range(150)]
        for s in snaps:
            cache.record(s)
        history = cache.history()
        assert len(history) == 100
        assert list(history) == snaps[50:]
        assert history[0].cpu.used_percentage == 50

    def test_history_is_immutable_view(self):
        cache = ResultCache()
        cache.record(_snapshot(1))
        history = cache.history()
        assert isinstance(history, tuple)
        with pytest.raises(AttributeError):
            history.append(_snapshot(2))  # type: ignore[attr-defined]
        assert len(cache) == 1

    def test_latest(self):
        cache = ResultCache()
        assert cache.latest is None
        cache.record(_snapshot(1))
        cache.record(_snapshot(2))
        assert cache.latest.cpu.used_percentage == 2

    def test_clear(self):
        cache = ResultCache(capacity=5)
        cache.record(_snapshot(1))
        cache.clear()
        assert len(cache) == 0
        assert cache.history() == ()

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            ResultCache(capacity=0)
