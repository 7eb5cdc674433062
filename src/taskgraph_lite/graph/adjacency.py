"""Integer-indexed weighted graph using adjacency lists.

Vertices are the integers 0..n-1, fixed at construction time.  Each
vertex owns a list of outgoing Edge(to, weight) records kept in
insertion order.  The order matters: every traversal in this package
walks the lists front to back, so insertion order decides tie-breaking
(which parent wins an equal-cost relaxation, which component closes
first, and so on).

Two weight models are supported:
  EDGE  -- a path costs the sum of the weights on its edges
  NODE  -- a path costs the sum of the node weights of every vertex it
           enters (the source itself is free)

Undirected graphs are supported for completeness, but every algorithm
in the package requires a directed one.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class InvalidVertexError(ValueError):
    """Raised when an operation references a vertex outside [0, n)."""

    def __init__(self, *vertices: int) -> None:
        self.vertices = vertices
        shown = " or ".join(str(v) for v in vertices)
        super().__init__(f"Invalid vertex: {shown}")


class NotDirectedError(ValueError):
    """Raised when an algorithm that needs a directed graph gets an undirected one."""


class WeightModel(str, Enum):
    """Where a path's cost comes from."""
    EDGE = "edge"
    NODE = "node"


@dataclass(frozen=True, slots=True)
class Edge:
    """Outgoing edge: destination vertex and weight."""
    to: int
    weight: float = 1


class Graph:
    """Fixed-size graph with ordered adjacency lists and optional node weights."""

    __slots__ = ("_n", "_directed", "_weight_model", "_adj", "_node_weights")

    def __init__(
        self,
        vertex_count: int,
        directed: bool = True,
        weight_model: WeightModel | str = WeightModel.EDGE,
    ) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex_count must be >= 0, got {vertex_count}")
        self._n = vertex_count
        self._directed = directed
        self._weight_model = WeightModel(weight_model)
        self._adj: list[list[Edge]] = [[] for _ in range(vertex_count)]
        self._node_weights: dict[int, float] = {}

    # ---- mutation --------------------------------------------------------

    def add_edge(self, u: int, v: int, weight: float = 1) -> None:
        """Append edge u -> v.  Undirected graphs also get v -> u."""
        if not (0 <= u < self._n and 0 <= v < self._n):
            raise InvalidVertexError(u, v)
        self._adj[u].append(Edge(v, weight))
        if not self._directed:
            self._adj[v].append(Edge(u, weight))

    def set_node_weight(self, vertex: int, weight: float) -> None:
        self._check(vertex)
        self._node_weights[vertex] = weight

    # ---- queries ---------------------------------------------------------

    def node_weight(self, vertex: int) -> float:
        """Node weight of *vertex*, 1 when never set."""
        return self._node_weights.get(vertex, 1)

    def edges(self, u: int) -> list[Edge]:
        """Outgoing edges of *u* in insertion order.

        Out-of-range vertices have no edges; this never raises.
        """
        if not 0 <= u < self._n:
            return []
        return list(self._adj[u])

    def all_edges(self) -> Iterator[tuple[int, Edge]]:
        for u, out in enumerate(self._adj):
            for edge in out:
                yield u, edge

    def has_edge(self, u: int, v: int) -> bool:
        return 0 <= u < self._n and any(e.to == v for e in self._adj[u])

    def in_degrees(self) -> list[int]:
        deg = [0] * self._n
        for out in self._adj:
            for edge in out:
                deg[edge.to] += 1
        return deg

    def vertices(self) -> range:
        return range(self._n)

    def reverse(self) -> Graph:
        """Transpose: every edge flipped, node weights copied.

        The result is always directed.
        """
        rev = Graph(self._n, directed=True, weight_model=self._weight_model)
        for u, out in enumerate(self._adj):
            for edge in out:
                rev._adj[edge.to].append(Edge(u, edge.weight))
        rev._node_weights = dict(self._node_weights)
        return rev

    @property
    def vertex_count(self) -> int:
        return self._n

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def weight_model(self) -> WeightModel:
        return self._weight_model

    @property
    def edge_count(self) -> int:
        total = sum(len(out) for out in self._adj)
        # undirected inserts store each edge twice
        return total if self._directed else total // 2

    def describe(self) -> str:
        """Multi-line listing: header plus one line per vertex with edges."""
        lines = [repr(self)]
        for u, out in enumerate(self._adj):
            if out:
                targets = " ".join(f"{e.to}({e.weight})" for e in out)
                lines.append(f"{u} -> {targets}")
        return "\n".join(lines)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self._n:
            raise InvalidVertexError(vertex)

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, vertex: object) -> bool:
        return isinstance(vertex, int) and 0 <= vertex < self._n

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        return (
            f"Graph(vertices={self._n}, directed={self._directed}, "
            f"weight_model={self._weight_model.value}, edges={self.edge_count})"
        )


def require_directed(graph: Graph, what: str) -> None:
    """Raise NotDirectedError unless *graph* is directed."""
    if not graph.directed:
        raise NotDirectedError(f"{what} requires a directed graph")
