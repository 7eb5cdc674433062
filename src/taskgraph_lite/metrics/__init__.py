"""Metrics sinks consumed by the graph algorithms."""

from taskgraph_lite.metrics.collector import (
    Metrics,
    MetricsCollector,
    NullMetrics,
    ensure_metrics,
)

__all__ = [
    "Metrics",
    "MetricsCollector",
    "NullMetrics",
    "ensure_metrics",
]
