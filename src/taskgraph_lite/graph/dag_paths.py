"""Single-source shortest and longest paths on a weighted DAG.

Algorithm (both directions):
  1.  Topologically sort the graph (Kahn).  A cycle aborts the call
      with CyclicDependencyError -- there is no best-effort result.
  2.  Every vertex starts UNREACHABLE except the source at Finite(0).
  3.  Walk vertices in topological order.  Skip unreachable ones.  For
      each outgoing edge u -> v, the candidate is dist[u] plus the
      edge's contribution (its weight under WeightModel.EDGE, the node
      weight of v under WeightModel.NODE).  Keep it if it is strictly
      better than dist[v]: smaller for shortest paths, larger for
      longest paths.  An UNREACHABLE dist[v] always loses.
  4.  Record u as v's parent whenever dist[v] improves.

Because u is final before any of its out-edges are relaxed, one pass
over the edges is enough: O(V + E).  Longest path on a DAG is the
critical path of the schedule, which is what the scheduling pipeline
cares about.

Distances are an explicit two-variant type (Finite or UNREACHABLE)
rather than a +/- infinity sentinel, so an unreachable vertex can never
leak into arithmetic.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from taskgraph_lite.graph.adjacency import (
    Graph,
    InvalidVertexError,
    WeightModel,
    require_directed,
)
from taskgraph_lite.graph.topological import CyclicDependencyError, kahn_sort
from taskgraph_lite.metrics.collector import Metrics, MetricsCollector, ensure_metrics

log = logging.getLogger(__name__)


class Unreachable(Enum):
    """No path from the source."""
    UNREACHABLE = "unreachable"

    def __repr__(self) -> str:
        return "UNREACHABLE"

    def __str__(self) -> str:
        return "unreachable"


UNREACHABLE = Unreachable.UNREACHABLE


@dataclass(frozen=True, slots=True, order=True)
class Finite:
    """A reachable distance."""
    value: float

    def __add__(self, amount: float) -> Finite:
        return Finite(self.value + amount)

    def __str__(self) -> str:
        return str(self.value)


Distance: TypeAlias = "Finite | Unreachable"


@dataclass(frozen=True, slots=True)
class PathResult:
    """Distances and parent pointers from one source."""
    distances: tuple[Distance, ...]
    parents: tuple[int | None, ...]
    source: int
    longest: bool
    metrics: Metrics

    def distance(self, vertex: int) -> Distance:
        self._check(vertex)
        return self.distances[vertex]

    def value(self, vertex: int) -> float | None:
        """Plain distance value, or None when *vertex* is unreachable."""
        d = self.distance(vertex)
        return d.value if isinstance(d, Finite) else None

    def is_reachable(self, vertex: int) -> bool:
        return isinstance(self.distance(vertex), Finite)

    def path_to(self, destination: int) -> list[int]:
        """Vertices from the source to *destination*, or [] if there is no path."""
        self._check(destination)
        if destination == self.source:
            return [self.source]
        path = [destination]
        cur: int | None = destination
        # a chain longer than n vertices can't end at the source
        for _ in range(len(self.parents)):
            cur = self.parents[cur]
            if cur is None:
                return []
            path.append(cur)
            if cur == self.source:
                path.reverse()
                return path
        return []

    def critical_length(self) -> float | None:
        """Largest finite distance (longest mode) or smallest (shortest mode)."""
        dest = self.critical_destination()
        return None if dest is None else self.value(dest)

    def critical_destination(self) -> int | None:
        """Earliest vertex holding critical_length(), None if nothing is reachable."""
        best: int | None = None
        best_value = 0.0
        for v, d in enumerate(self.distances):
            if not isinstance(d, Finite):
                continue
            if (
                best is None
                or (self.longest and d.value > best_value)
                or (not self.longest and d.value < best_value)
            ):
                best, best_value = v, d.value
        return best

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self.distances):
            raise InvalidVertexError(vertex)


def _contribution(graph: Graph, edge_weight: float, dest: int) -> float:
    if graph.weight_model is WeightModel.EDGE:
        return edge_weight
    return graph.node_weight(dest)


def _single_source(
    graph: Graph, source: int, metrics: Metrics | None, longest: bool
) -> PathResult:
    require_directed(graph, "DAG path algorithms")
    m = ensure_metrics(metrics)
    m.start_timer()

    # fresh, private sort so the caller's counters only see the DP
    topo = kahn_sort(graph, MetricsCollector())
    if not topo.is_dag:
        m.stop_timer()
        raise CyclicDependencyError(topo.unordered(graph.vertex_count))
    if source not in graph:
        m.stop_timer()
        raise InvalidVertexError(source)

    n = graph.vertex_count
    dist: list[Distance] = [UNREACHABLE] * n
    parent: list[int | None] = [None] * n
    dist[source] = Finite(0)

    for u in topo.order:
        du = dist[u]
        if not isinstance(du, Finite):
            continue
        m.increment_counter("vertices_processed")
        for edge in graph.edges(u):
            v = edge.to
            m.increment_counter("relaxations")
            candidate = du + _contribution(graph, edge.weight, v)
            current = dist[v]
            if isinstance(current, Finite):
                improves = candidate > current if longest else candidate < current
            else:
                improves = True
            if improves:
                dist[v] = candidate
                parent[v] = u
                m.increment_counter("successful_relaxations")

    m.stop_timer()
    return PathResult(
        distances=tuple(dist),
        parents=tuple(parent),
        source=source,
        longest=longest,
        metrics=m,
    )


def shortest_paths(
    graph: Graph, source: int, metrics: Metrics | None = None
) -> PathResult:
    """Minimum-cost distance from *source* to every vertex of a DAG.

    Raises NotDirectedError if the graph is undirected, then
    CyclicDependencyError if it has a cycle, then InvalidVertexError
    for a bad source.  The cycle check runs before the source is looked
    at, so a cyclic graph always reports the cycle.
    """
    return _single_source(graph, source, metrics, longest=False)


def longest_paths(
    graph: Graph, source: int, metrics: Metrics | None = None
) -> PathResult:
    """Maximum-cost (critical path) distance from *source* to every vertex."""
    return _single_source(graph, source, metrics, longest=True)


def critical_path(graph: Graph, metrics: Metrics | None = None) -> PathResult:
    """Best longest-path result over every possible source.

    Tries each vertex as the source and keeps the result whose largest
    finite distance is strictly greater than any earlier one, so ties go
    to the lowest source index.  O(V * (V + E)); meant for condensation
    graphs, which are small.

    Raises ValueError for an empty graph and CyclicDependencyError (from
    the first trial) for a cyclic one.
    """
    if graph.vertex_count == 0:
        raise ValueError("Cannot compute critical path of an empty graph")
    m = ensure_metrics(metrics)
    m.start_timer()

    best: PathResult | None = None
    best_length: float | None = None
    try:
        for source in graph.vertices():
            m.increment_counter("sources_tried")
            trial = longest_paths(graph, source, MetricsCollector())
            length = trial.critical_length()
            if length is not None and (best_length is None or length > best_length):
                best, best_length = trial, length
    finally:
        m.stop_timer()

    if best is None:
        raise ValueError("No vertex reachable from any source")
    log.debug(
        "critical path: source=%d length=%s", best.source, best_length,
    )
    return best
