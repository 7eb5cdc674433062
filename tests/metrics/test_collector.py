"""Tests for MetricsCollector and NullMetrics."""
from __future__ import annotations

import time

from taskgraph_lite.metrics import Metrics, MetricsCollector, NullMetrics, ensure_metrics


class TestMetricsCollector:
    def test_counters_start_at_zero(self) -> None:
        m = MetricsCollector()
        assert m.counter("anything") == 0
        assert m.counter_names() == set()

    def test_increment(self) -> None:
        m = MetricsCollector()
        m.increment_counter("dfs_visits")
        m.increment_counter("dfs_visits")
        m.increment_counter("edges_explored", 5)
        assert m.counter("dfs_visits") == 2
        assert m.counter("edges_explored") == 5
        assert m.counter_names() == {"dfs_visits", "edges_explored"}

    def test_timer_measures_interval(self) -> None:
        m = MetricsCollector()
        m.start_timer()
        time.sleep(0.01)
        ns = m.stop_timer()
        assert ns >= 5_000_000
        assert m.elapsed_ms() >= 5.0
        assert m.elapsed_ms() == ns / 1_000_000.0

    def test_elapsed_frozen_after_stop(self) -> None:
        m = MetricsCollector()
        m.start_timer()
        m.stop_timer()
        first = m.elapsed_ms()
        time.sleep(0.005)
        assert m.elapsed_ms() == first

    def test_stop_without_start(self) -> None:
        m = MetricsCollector()
        assert m.stop_timer() == 0
        assert m.elapsed_ms() == 0.0

    def test_reset(self) -> None:
        m = MetricsCollector()
        m.start_timer()
        m.increment_counter("x", 3)
        m.stop_timer()
        m.reset()
        assert m.counter("x") == 0
        assert m.counter_names() == set()
        assert m.elapsed_ms() == 0.0

    def test_summary_sorted(self) -> None:
        m = MetricsCollector()
        m.increment_counter("zeta", 2)
        m.increment_counter("alpha", 1)
        lines = m.summary().splitlines()
        assert lines[0] == "Metrics Summary:"
        assert lines[1].startswith("  Elapsed Time: ")
        assert lines[1].endswith(" ms")
        assert lines[2:] == ["  alpha: 1", "  zeta: 2"]


class TestNullMetrics:
    def test_records_nothing(self) -> None:
        m = NullMetrics()
        m.start_timer()
        m.increment_counter("dfs_visits", 10)
        assert m.stop_timer() == 0
        assert m.counter("dfs_visits") == 0
        assert m.counter_names() == set()
        assert m.elapsed_ms() == 0.0

    def test_summary(self) -> None:
        assert NullMetrics().summary() == "Metrics Summary: (disabled)"


class TestProtocol:
    def test_both_satisfy_protocol(self) -> None:
        assert isinstance(MetricsCollector(), Metrics)
        assert isinstance(NullMetrics(), Metrics)

    def test_ensure_metrics(self) -> None:
        null = NullMetrics()
        assert ensure_metrics(null) is null
        assert isinstance(ensure_metrics(None), MetricsCollector)
        assert ensure_metrics(None) is not ensure_metrics(None)
