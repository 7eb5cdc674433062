"""Strongly connected components and the condensation graph.

Two interchangeable algorithms, same input and output contract:

Tarjan (single pass):
  DFS assigns every vertex a discovery index and a low-link (the
  smallest discovery index reachable through the current traversal,
  including one back edge to a vertex still on the SCC stack).  When a
  vertex finishes with low-link == discovery index it roots a component:
  pop the SCC stack down to it.  Components close in reverse
  topological order of the condensation.

Kosaraju (two passes):
  Pass 1 records DFS finish order on the original graph.  Pass 2 walks
  the transposed graph, starting from the vertex that finished last;
  every tree reached from one start is exactly one component.

Both traversals run on explicit frame stacks instead of recursion, so a
50k-vertex chain is fine.  The two algorithms list components in
different orders, but the partitions are always identical; compare them
with ComponentResult.partition().

The condensation collapses each component to one vertex.  Edges between
components are deduplicated (first weight seen wins) and each
condensation vertex weighs the sum of its members' node weights.  It is
acyclic by construction.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, Sequence

from taskgraph_lite.graph.adjacency import (
    Edge,
    Graph,
    InvalidVertexError,
    require_directed,
)
from taskgraph_lite.metrics.collector import Metrics, ensure_metrics

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ComponentResult:
    """Components in algorithm order, each sorted, plus their condensation."""
    components: tuple[tuple[int, ...], ...]
    condensation: Graph
    algorithm: str
    metrics: Metrics

    @property
    def component_count(self) -> int:
        return len(self.components)

    def component_sizes(self) -> list[int]:
        return [len(c) for c in self.components]

    def largest_component_size(self) -> int:
        return max(self.component_sizes(), default=0)

    def component_of(self, vertex: int) -> int:
        """Index of the component containing *vertex*."""
        for idx, comp in enumerate(self.components):
            if vertex in comp:
                return idx
        raise InvalidVertexError(vertex)

    def partition(self) -> frozenset[frozenset[int]]:
        """Order-free view of the components."""
        return frozenset(frozenset(c) for c in self.components)


def build_condensation(graph: Graph, components: Sequence[Sequence[int]]) -> Graph:
    """Collapse each component of *graph* into one vertex."""
    owner = [0] * graph.vertex_count
    for idx, comp in enumerate(components):
        for v in comp:
            owner[v] = idx

    dag = Graph(len(components), directed=True, weight_model=graph.weight_model)
    seen: set[tuple[int, int]] = set()
    for u, edge in graph.all_edges():
        cu, cv = owner[u], owner[edge.to]
        if cu != cv and (cu, cv) not in seen:
            seen.add((cu, cv))
            dag.add_edge(cu, cv, edge.weight)

    for idx, comp in enumerate(components):
        dag.set_node_weight(idx, sum(graph.node_weight(v) for v in comp))
    return dag


def tarjan_scc(graph: Graph, metrics: Metrics | None = None) -> ComponentResult:
    """Tarjan's algorithm.  Components come out in closing order."""
    require_directed(graph, "Tarjan's algorithm")
    m = ensure_metrics(metrics)
    m.start_timer()

    n = graph.vertex_count
    index = [-1] * n
    low = [0] * n
    on_stack = [False] * n
    scc_stack: list[int] = []
    components: list[tuple[int, ...]] = []
    next_index = 0

    for root in graph.vertices():
        if index[root] != -1:
            continue
        index[root] = low[root] = next_index
        next_index += 1
        scc_stack.append(root)
        on_stack[root] = True
        m.increment_counter("dfs_visits")
        work: list[tuple[int, Iterator[Edge]]] = [(root, iter(graph.edges(root)))]

        while work:
            v, pending = work[-1]
            for edge in pending:
                m.increment_counter("edges_explored")
                w = edge.to
                if index[w] == -1:
                    # tree edge: descend
                    index[w] = low[w] = next_index
                    next_index += 1
                    scc_stack.append(w)
                    on_stack[w] = True
                    m.increment_counter("dfs_visits")
                    work.append((w, iter(graph.edges(w))))
                    break
                if on_stack[w]:
                    low[v] = min(low[v], index[w])
            else:
                work.pop()
                if work:
                    parent = work[-1][0]
                    low[parent] = min(low[parent], low[v])
                if low[v] == index[v]:
                    comp: list[int] = []
                    while True:
                        w = scc_stack.pop()
                        on_stack[w] = False
                        comp.append(w)
                        m.increment_counter("nodes_in_sccs")
                        if w == v:
                            break
                    comp.sort()
                    components.append(tuple(comp))
                    m.increment_counter("sccs_found")

    m.stop_timer()
    log.debug("tarjan: %d components over %d vertices", len(components), n)
    return ComponentResult(
        components=tuple(components),
        condensation=build_condensation(graph, components),
        algorithm="tarjan",
        metrics=m,
    )


def kosaraju_scc(graph: Graph, metrics: Metrics | None = None) -> ComponentResult:
    """Kosaraju's two-pass algorithm."""
    require_directed(graph, "Kosaraju's algorithm")
    m = ensure_metrics(metrics)
    m.start_timer()

    n = graph.vertex_count
    visited = [False] * n
    finish_order: list[int] = []

    # pass 1: post-order finish times on the original graph
    for root in graph.vertices():
        if visited[root]:
            continue
        visited[root] = True
        m.increment_counter("dfs_visits")
        work: list[tuple[int, Iterator[Edge]]] = [(root, iter(graph.edges(root)))]
        while work:
            v, pending = work[-1]
            for edge in pending:
                m.increment_counter("edges_explored")
                if not visited[edge.to]:
                    visited[edge.to] = True
                    m.increment_counter("dfs_visits")
                    work.append((edge.to, iter(graph.edges(edge.to))))
                    break
            else:
                work.pop()
                finish_order.append(v)

    # pass 2: transposed graph, latest finisher first
    transposed = graph.reverse()
    visited = [False] * n
    components: list[tuple[int, ...]] = []
    while finish_order:
        start = finish_order.pop()
        if visited[start]:
            continue
        visited[start] = True
        comp: list[int] = []
        frontier = [start]
        while frontier:
            v = frontier.pop()
            comp.append(v)
            m.increment_counter("dfs_visits")
            m.increment_counter("nodes_in_sccs")
            for edge in transposed.edges(v):
                m.increment_counter("edges_explored")
                if not visited[edge.to]:
                    visited[edge.to] = True
                    frontier.append(edge.to)
        comp.sort()
        components.append(tuple(comp))
        m.increment_counter("sccs_found")

    m.stop_timer()
    log.debug("kosaraju: %d components over %d vertices", len(components), n)
    return ComponentResult(
        components=tuple(components),
        condensation=build_condensation(graph, components),
        algorithm="kosaraju",
        metrics=m,
    )


_ALGORITHMS: dict[str, Callable[[Graph, Metrics | None], ComponentResult]] = {
    "tarjan": tarjan_scc,
    "kosaraju": kosaraju_scc,
}


def find_components(
    graph: Graph,
    metrics: Metrics | None = None,
    algorithm: str = "tarjan",
) -> ComponentResult:
    """Run the named SCC algorithm ("tarjan" or "kosaraju")."""
    try:
        fn = _ALGORITHMS[algorithm]
    except KeyError:
        raise ValueError(
            f"Unknown SCC algorithm {algorithm!r}; "
            f"expected one of {sorted(_ALGORITHMS)}"
        ) from None
    return fn(graph, metrics)
