"""Shared fixtures for the graph algorithm tests."""
from __future__ import annotations

import pytest

from taskgraph_lite.graph.adjacency import Graph, WeightModel


@pytest.fixture
def empty_graph() -> Graph:
    return Graph(0)


@pytest.fixture
def chain_graph() -> Graph:
    """0 -(3)-> 1 -(2)-> 2 -(4)-> 3"""
    g = Graph(4)
    for u, v, w in [(0, 1, 3), (1, 2, 2), (2, 3, 4)]:
        g.add_edge(u, v, w)
    return g


@pytest.fixture
def diamond_graph() -> Graph:
    """
    0 -(2)-> 1 -(4)-> 3
    0 -(3)-> 2 -(1)-> 3
    """
    g = Graph(4)
    for u, v, w in [(0, 1, 2), (0, 2, 3), (1, 3, 4), (2, 3, 1)]:
        g.add_edge(u, v, w)
    return g


@pytest.fixture
def two_cycles_graph() -> Graph:
    """Ring 0->1->2->0 feeding ring 3->4->5->3 through 2->3."""
    g = Graph(6)
    for u, v in [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 5), (5, 3)]:
        g.add_edge(u, v, 1)
    return g


@pytest.fixture
def triangle_cycle() -> Graph:
    """0 -> 1 -> 2 -> 0"""
    g = Graph(3)
    for u, v in [(0, 1), (1, 2), (2, 0)]:
        g.add_edge(u, v, 1)
    return g


@pytest.fixture
def node_weighted_chain() -> Graph:
    """0 -> 1 -> 2 with node weights 0, 5, 3 (edge weights ignored)."""
    g = Graph(3, weight_model=WeightModel.NODE)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 1)
    g.set_node_weight(0, 0)
    g.set_node_weight(1, 5)
    g.set_node_weight(2, 3)
    return g
