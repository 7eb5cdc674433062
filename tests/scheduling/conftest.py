"""Shared fixtures for the scheduling tests."""
from __future__ import annotations

from pathlib import Path

import pytest

from taskgraph_lite.graph.adjacency import Graph, WeightModel
from taskgraph_lite.scheduling.loader import GraphData, save_graph


@pytest.fixture
def two_rings() -> Graph:
    """Ring 0->1->2->0 feeding ring 3->4->5->3 through 2->3."""
    g = Graph(6)
    for u, v in [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 5), (5, 3)]:
        g.add_edge(u, v, 1)
    return g


@pytest.fixture
def node_weighted_cycle() -> Graph:
    """0 <-> 1 then 1 -> 2, node weights 2, 3, 4."""
    g = Graph(3, weight_model=WeightModel.NODE)
    g.add_edge(0, 1)
    g.add_edge(1, 0)
    g.add_edge(1, 2)
    for v, w in enumerate([2, 3, 4]):
        g.set_node_weight(v, w)
    return g


@pytest.fixture
def graph_file(tmp_path: Path) -> Path:
    """Two rings on disk plus a tail task 6 hanging off task 5."""
    edges = [(0, 1, 2), (1, 2, 3), (2, 0, 1), (2, 3, 4), (3, 4, 1), (4, 5, 2), (5, 3, 1), (5, 6, 7)]
    path = tmp_path / "graph.json"
    save_graph(GraphData(n=7, edges=edges, source=0), path)
    return path
