"""Seeded synthetic task graphs for benchmarking and demos.

Two shapes:
  - pure DAGs: shuffle the vertices into a hidden topological order,
    add random edges that only point forward in that order, then chain
    consecutive vertices so the order is fully connected
  - cyclic graphs: split the shuffled vertices into 1..n/4 groups, close
    each group into a ring (one SCC per group), then sprinkle random
    extra edges, which may merge groups or add more cycles

Edge weights are uniform integers in 1..10, duplicates and self loops
are never generated.  The same seed always yields the same suite.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from pathlib import Path

from taskgraph_lite.scheduling.loader import GraphData, save_graph

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DatasetSpec:
    """One named dataset in the standard suite."""
    name: str
    n: int
    target_edges: int
    cyclic: bool
    description: str


STANDARD_SUITE: tuple[DatasetSpec, ...] = (
    DatasetSpec("small_dag", 8, 10, False, "Small pure DAG"),
    DatasetSpec("small_cycle", 7, 12, True, "Small with 1-2 cycles"),
    DatasetSpec("small_sparse", 10, 9, False, "Small sparse graph"),
    DatasetSpec("medium_mixed", 15, 25, True, "Medium mixed structure"),
    DatasetSpec("medium_multiple_sccs", 12, 20, True, "Medium with multiple SCCs"),
    DatasetSpec("medium_dense", 18, 60, True, "Medium dense graph"),
    DatasetSpec("large_sparse", 30, 35, False, "Large sparse DAG"),
    DatasetSpec("large_complex", 40, 80, True, "Large complex with SCCs"),
    DatasetSpec("large_dense", 25, 100, True, "Large dense graph"),
)


class DatasetGenerator:
    """Generate random task graphs from a fixed seed."""

    __slots__ = ("_rng",)

    def __init__(self, seed: int = 42) -> None:
        self._rng = random.Random(seed)

    def _weight(self) -> int:
        return self._rng.randint(1, 10)

    def generate_dag(self, n: int, target_edges: int) -> GraphData:
        """Random acyclic graph with about *target_edges* edges (plus a chain)."""
        if n <= 0:
            raise ValueError(f"n must be positive, got {n}")
        order = list(range(n))
        self._rng.shuffle(order)
        position = {v: i for i, v in enumerate(order)}

        edges: list[tuple[int, int, float]] = []
        seen: set[tuple[int, int]] = set()
        attempts = 0
        while len(edges) < target_edges and attempts < target_edges * 10:
            attempts += 1
            u = self._rng.randrange(n)
            v = self._rng.randrange(n)
            if u == v:
                continue
            if position[u] > position[v]:
                u, v = v, u
            if (u, v) not in seen:
                seen.add((u, v))
                edges.append((u, v, self._weight()))

        # chain along the hidden order so every vertex is connected
        for u, v in zip(order, order[1:]):
            if (u, v) not in seen:
                seen.add((u, v))
                edges.append((u, v, self._weight()))

        return GraphData(n=n, edges=edges, source=self._rng.randrange(n))

    def generate_cyclic(self, n: int, target_edges: int) -> GraphData:
        """Random graph seeded with ring-shaped SCCs."""
        if n <= 0:
            raise ValueError(f"n must be positive, got {n}")
        groups_wanted = 1 + self._rng.randrange(max(1, n // 4))
        vertices = list(range(n))
        self._rng.shuffle(vertices)

        per_group = n // groups_wanted
        groups = []
        for i in range(groups_wanted):
            end = n if i == groups_wanted - 1 else (i + 1) * per_group
            group = vertices[i * per_group:end]
            if group:
                groups.append(group)

        edges: list[tuple[int, int, float]] = []
        seen: set[tuple[int, int]] = set()
        for group in groups:
            if len(group) < 2:
                continue
            for i, u in enumerate(group):
                v = group[(i + 1) % len(group)]
                if (u, v) not in seen:
                    seen.add((u, v))
                    edges.append((u, v, self._weight()))

        attempts = 0
        while len(edges) < target_edges and attempts < target_edges * 10:
            attempts += 1
            u = self._rng.randrange(n)
            v = self._rng.randrange(n)
            if u != v and (u, v) not in seen:
                seen.add((u, v))
                edges.append((u, v, self._weight()))

        return GraphData(n=n, edges=edges, source=self._rng.randrange(n))

    def generate(self, spec: DatasetSpec) -> GraphData:
        if spec.cyclic:
            return self.generate_cyclic(spec.n, spec.target_edges)
        return self.generate_dag(spec.n, spec.target_edges)

    def standard_suite(self) -> list[tuple[DatasetSpec, GraphData]]:
        """All nine standard datasets, generated in order."""
        return [(spec, self.generate(spec)) for spec in STANDARD_SUITE]


def write_suite(directory: str | Path, seed: int = 42) -> list[Path]:
    """Write the standard suite as <name>.json files into *directory*."""
    out_dir = Path(directory)
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for spec, data in DatasetGenerator(seed).standard_suite():
        path = out_dir / f"{spec.name}.json"
        save_graph(data, path)
        log.info(
            "wrote %s (%s): %d vertices, %d edges, source %d",
            path.name, spec.description, data.n, len(data.edges), data.source,
        )
        written.append(path)
    return written
