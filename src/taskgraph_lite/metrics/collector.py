"""Operation counters and a wall-clock timer for the graph algorithms.

Every algorithm in taskgraph_lite accepts a Metrics sink and reports
into it: one timer around the core work plus named counters for the
interesting operations (DFS visits, edges explored, relaxations, ...).
The numbers are there for benchmarking and for the reports; nothing an
algorithm returns ever depends on them, so NullMetrics can be dropped
in wherever the bookkeeping is unwanted.
"""
from __future__ import annotations

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class Metrics(Protocol):
    """What an algorithm needs from its metrics sink."""

    def start_timer(self) -> None: ...

    def stop_timer(self) -> int: ...

    def elapsed_ms(self) -> float: ...

    def increment_counter(self, name: str, amount: int = 1) -> None: ...

    def counter(self, name: str) -> int: ...

    def counter_names(self) -> set[str]: ...

    def reset(self) -> None: ...

    def summary(self) -> str: ...


class MetricsCollector:
    """In-memory counters plus a single perf_counter_ns timer.

    The timer measures one interval at a time.  elapsed_ms() reads the
    running interval while the timer is on, and the last completed one
    after stop_timer().
    """

    __slots__ = ("_counters", "_start_ns", "_end_ns", "_running")

    def __init__(self) -> None:
        self._counters: dict[str, int] = {}
        self._start_ns = 0
        self._end_ns = 0
        self._running = False

    def start_timer(self) -> None:
        self._start_ns = time.perf_counter_ns()
        self._running = True

    def stop_timer(self) -> int:
        """Stop the timer and return the interval in nanoseconds (0 if idle)."""
        if not self._running:
            return 0
        self._end_ns = time.perf_counter_ns()
        self._running = False
        return self._end_ns - self._start_ns

    def elapsed_ms(self) -> float:
        end = time.perf_counter_ns() if self._running else self._end_ns
        return (end - self._start_ns) / 1_000_000.0

    def increment_counter(self, name: str, amount: int = 1) -> None:
        self._counters[name] = self._counters.get(name, 0) + amount

    def counter(self, name: str) -> int:
        return self._counters.get(name, 0)

    def counter_names(self) -> set[str]:
        return set(self._counters)

    def reset(self) -> None:
        self._counters.clear()
        self._start_ns = 0
        self._end_ns = 0
        self._running = False

    def summary(self) -> str:
        lines = [
            "Metrics Summary:",
            f"  Elapsed Time: {self.elapsed_ms():.3f} ms",
        ]
        for name in sorted(self._counters):
            lines.append(f"  {name}: {self._counters[name]}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"MetricsCollector(counters={len(self._counters)})"


class NullMetrics:
    """Metrics sink that records nothing."""

    __slots__ = ()

    def start_timer(self) -> None:
        pass

    def stop_timer(self) -> int:
        return 0

    def elapsed_ms(self) -> float:
        return 0.0

    def increment_counter(self, name: str, amount: int = 1) -> None:
        pass

    def counter(self, name: str) -> int:
        return 0

    def counter_names(self) -> set[str]:
        return set()

    def reset(self) -> None:
        pass

    def summary(self) -> str:
        return "Metrics Summary: (disabled)"


def ensure_metrics(metrics: Metrics | None) -> Metrics:
    """Return *metrics*, or a fresh MetricsCollector when it is None."""
    return MetricsCollector() if metrics is None else metrics
