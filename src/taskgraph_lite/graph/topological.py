"""Topological sort: Kahn's algorithm and DFS finish order.

Both variants take a directed Graph and return a TopoResult.  They
never raise on a cycle; instead the result carries is_dag=False plus
whatever partial order the algorithm produced.  The flag is the
authoritative answer -- callers should not infer acyclicity from the
length of the order.

Kahn (BFS with in-degree tracking):
  1.  Compute in-degree for every vertex.
  2.  Seed a FIFO queue with all zero in-degree vertices, ascending.
  3.  Pop a vertex, append it, decrement the in-degree of each
      successor.  Successors that drop to 0 enter the queue.
  4.  The graph is a DAG iff every vertex made it into the order.

DFS (reverse post-order):
  Depth-first from every unvisited vertex, tracking which vertices are
  on the active path.  An edge back into the active path is a cycle and
  stops the traversal immediately.  Otherwise each vertex is pushed once
  all its descendants are closed; reading the pushes backwards gives a
  valid order.  The traversal uses an explicit frame stack so deep
  graphs don't hit the interpreter's recursion limit.
"""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterator

from taskgraph_lite.graph.adjacency import Edge, Graph, require_directed
from taskgraph_lite.metrics.collector import Metrics, ensure_metrics

log = logging.getLogger(__name__)


class CyclicDependencyError(Exception):
    """Raised when a graph that must be acyclic contains a cycle."""

    def __init__(self, remaining_nodes: list) -> None:
        self.remaining_nodes = remaining_nodes
        super().__init__(
            f"Graph contains cycles - not a DAG: {len(remaining_nodes)} "
            f"vertex(es) involved in circular dependencies"
        )


@dataclass(frozen=True, slots=True)
class TopoResult:
    """Order produced by one topological sort run."""
    order: tuple[int, ...]
    is_dag: bool
    algorithm: str
    metrics: Metrics

    def unordered(self, vertex_count: int) -> list[int]:
        """Vertices in 0..vertex_count-1 that are missing from the order."""
        placed = set(self.order)
        return [v for v in range(vertex_count) if v not in placed]


def kahn_sort(graph: Graph, metrics: Metrics | None = None) -> TopoResult:
    """Kahn's algorithm.  Ties resolve by ascending vertex index."""
    require_directed(graph, "Topological sort")
    m = ensure_metrics(metrics)
    m.start_timer()

    in_deg = graph.in_degrees()
    q: deque[int] = deque()
    for v in graph.vertices():
        if in_deg[v] == 0:
            q.append(v)
            m.increment_counter("queue_pushes")

    order: list[int] = []
    while q:
        u = q.popleft()
        order.append(u)
        m.increment_counter("queue_pops")
        m.increment_counter("vertices_processed")
        for edge in graph.edges(u):
            in_deg[edge.to] -= 1
            m.increment_counter("edges_relaxed")
            if in_deg[edge.to] == 0:
                q.append(edge.to)
                m.increment_counter("queue_pushes")

    m.stop_timer()
    is_dag = len(order) == graph.vertex_count
    if not is_dag:
        log.debug(
            "kahn: %d of %d vertices ordered, graph is cyclic",
            len(order), graph.vertex_count,
        )
    return TopoResult(order=tuple(order), is_dag=is_dag, algorithm="kahn", metrics=m)


def dfs_sort(graph: Graph, metrics: Metrics | None = None) -> TopoResult:
    """DFS reverse post-order.  Aborts at the first back edge."""
    require_directed(graph, "Topological sort")
    m = ensure_metrics(metrics)
    m.start_timer()

    n = graph.vertex_count
    visited = [False] * n
    active = [False] * n
    finished: list[int] = []
    has_cycle = False

    for root in graph.vertices():
        if visited[root]:
            continue
        visited[root] = True
        active[root] = True
        m.increment_counter("dfs_visits")
        stack: list[tuple[int, Iterator[Edge]]] = [(root, iter(graph.edges(root)))]

        while stack:
            v, pending = stack[-1]
            for edge in pending:
                m.increment_counter("edges_explored")
                w = edge.to
                if not visited[w]:
                    visited[w] = True
                    active[w] = True
                    m.increment_counter("dfs_visits")
                    stack.append((w, iter(graph.edges(w))))
                    break
                if active[w]:
                    has_cycle = True
                    break
            else:
                # all edges of v explored
                stack.pop()
                active[v] = False
                finished.append(v)
                continue
            if has_cycle:
                break

        if has_cycle:
            log.debug("dfs: back edge found while exploring from %d", root)
            break

    m.stop_timer()
    finished.reverse()
    return TopoResult(
        order=tuple(finished), is_dag=not has_cycle, algorithm="dfs", metrics=m,
    )


_ALGORITHMS: dict[str, Callable[[Graph, Metrics | None], TopoResult]] = {
    "kahn": kahn_sort,
    "dfs": dfs_sort,
}


def topological_sort(
    graph: Graph,
    metrics: Metrics | None = None,
    algorithm: str = "kahn",
) -> TopoResult:
    """Run the named topological sort variant ("kahn" or "dfs")."""
    try:
        fn = _ALGORITHMS[algorithm]
    except KeyError:
        raise ValueError(
            f"Unknown topological sort algorithm {algorithm!r}; "
            f"expected one of {sorted(_ALGORITHMS)}"
        ) from None
    return fn(graph, metrics)
