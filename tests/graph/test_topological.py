"""Tests for topological sort (Kahn and DFS variants)."""
from __future__ import annotations

import random

import pytest

from taskgraph_lite.graph.adjacency import Graph, NotDirectedError
from taskgraph_lite.graph.topological import (
    CyclicDependencyError,
    TopoResult,
    dfs_sort,
    kahn_sort,
    topological_sort,
)
from taskgraph_lite.metrics.collector import MetricsCollector, NullMetrics

SEED = 42


def _assert_linear_extension(graph: Graph, order: tuple[int, ...]) -> None:
    assert sorted(order) == list(graph.vertices())
    pos = {v: i for i, v in enumerate(order)}
    for u, edge in graph.all_edges():
        assert pos[u] < pos[edge.to], f"Edge {u}->{edge.to} violated"


def _random_dag(rng: random.Random, n: int, edge_prob: float) -> Graph:
    """Forward edges over a shuffled labelling, so index order isn't a valid answer."""
    labels = list(range(n))
    rng.shuffle(labels)
    g = Graph(n)
    for i in range(n):
        for j in range(i + 1, n):
            if rng.random() < edge_prob:
                g.add_edge(labels[i], labels[j])
    return g


@pytest.mark.parametrize("sort", [kahn_sort, dfs_sort], ids=["kahn", "dfs"])
class TestBothVariants:
    def test_empty_graph(self, sort, empty_graph: Graph) -> None:
        result = sort(empty_graph)
        assert result.is_dag
        assert result.order == ()

    def test_single_vertex(self, sort) -> None:
        result = sort(Graph(1))
        assert result.is_dag
        assert result.order == (0,)

    def test_chain(self, sort, chain_graph: Graph) -> None:
        result = sort(chain_graph)
        assert result.is_dag
        assert result.order == (0, 1, 2, 3)

    def test_diamond(self, sort, diamond_graph: Graph) -> None:
        result = sort(diamond_graph)
        assert result.is_dag
        assert result.order[0] == 0
        assert result.order[-1] == 3
        _assert_linear_extension(diamond_graph, result.order)

    def test_cycle_detected(self, sort, triangle_cycle: Graph) -> None:
        assert not sort(triangle_cycle).is_dag

    def test_self_loop_detected(self, sort) -> None:
        g = Graph(2)
        g.add_edge(0, 1)
        g.add_edge(1, 1)
        assert not sort(g).is_dag

    def test_cycle_in_one_component_only(self, sort) -> None:
        g = Graph(4)
        g.add_edge(0, 1)
        g.add_edge(2, 3)
        g.add_edge(3, 2)
        assert not sort(g).is_dag

    def test_undirected_rejected(self, sort) -> None:
        g = Graph(2, directed=False)
        g.add_edge(0, 1)
        with pytest.raises(NotDirectedError):
            sort(g)

    def test_disconnected_dag(self, sort) -> None:
        g = Graph(5)
        g.add_edge(3, 1)
        g.add_edge(4, 0)
        result = sort(g)
        assert result.is_dag
        _assert_linear_extension(g, result.order)

    def test_null_metrics(self, sort, diamond_graph: Graph) -> None:
        assert sort(diamond_graph, NullMetrics()).order == sort(diamond_graph).order

    def test_deep_chain(self, sort) -> None:
        n = 50_000
        g = Graph(n)
        for i in range(n - 1):
            g.add_edge(i, i + 1)
        result = sort(g, NullMetrics())
        assert result.is_dag
        assert result.order == tuple(range(n))


class TestKahn:
    def test_ties_break_by_vertex_index(self, diamond_graph: Graph) -> None:
        assert kahn_sort(diamond_graph).order == (0, 1, 2, 3)

    def test_zero_in_degree_seeded_ascending(self) -> None:
        g = Graph(4)
        g.add_edge(3, 0)
        g.add_edge(1, 0)
        assert kahn_sort(g).order == (1, 2, 3, 0)

    def test_partial_order_on_cycle(self) -> None:
        g = Graph(4)
        for u, v in [(0, 1), (1, 2), (2, 0), (3, 0)]:
            g.add_edge(u, v)
        result = kahn_sort(g)
        assert not result.is_dag
        assert result.order == (3,)
        assert result.unordered(4) == [0, 1, 2]

    def test_counters(self, diamond_graph: Graph) -> None:
        m = MetricsCollector()
        kahn_sort(diamond_graph, m)
        assert m.counter("queue_pops") == 4
        assert m.counter("queue_pushes") == 4
        assert m.counter("vertices_processed") == 4
        assert m.counter("edges_relaxed") == 4


class TestDfs:
    def test_reverse_post_order(self, diamond_graph: Graph) -> None:
        assert dfs_sort(diamond_graph).order == (0, 2, 1, 3)

    def test_aborts_at_first_back_edge(self, triangle_cycle: Graph) -> None:
        m = MetricsCollector()
        result = dfs_sort(triangle_cycle, m)
        assert not result.is_dag
        # nothing had finished when the back edge 2 -> 0 was found
        assert result.order == ()
        assert m.counter("edges_explored") == 3

    def test_cross_edge_is_not_a_cycle(self) -> None:
        # 2 -> 1 reaches a finished vertex, not one on the active path
        g = Graph(3)
        g.add_edge(0, 1)
        g.add_edge(0, 2)
        g.add_edge(2, 1)
        result = dfs_sort(g)
        assert result.is_dag
        _assert_linear_extension(g, result.order)


class TestAgreement:
    def test_agree_on_random_dags(self) -> None:
        rng = random.Random(SEED)
        for _ in range(50):
            g = _random_dag(rng, rng.randint(1, 30), 0.2)
            kahn = kahn_sort(g)
            dfs = dfs_sort(g)
            assert kahn.is_dag and dfs.is_dag
            _assert_linear_extension(g, kahn.order)
            _assert_linear_extension(g, dfs.order)

    def test_agree_on_random_digraphs(self) -> None:
        rng = random.Random(SEED + 1)
        for _ in range(100):
            n = rng.randint(1, 20)
            g = Graph(n)
            for u in range(n):
                for v in range(n):
                    if u != v and rng.random() < 0.08:
                        g.add_edge(u, v)
            kahn = kahn_sort(g)
            dfs = dfs_sort(g)
            assert kahn.is_dag == dfs.is_dag
            assert kahn.is_dag == (len(kahn.order) == n)
            if kahn.is_dag:
                _assert_linear_extension(g, kahn.order)
                _assert_linear_extension(g, dfs.order)

    def test_back_edge_on_chain_breaks_both(self) -> None:
        rng = random.Random(SEED + 2)
        for _ in range(30):
            n = rng.randint(3, 20)
            g = Graph(n)
            for i in range(n - 1):
                g.add_edge(i, i + 1)
            src = rng.randint(1, n - 1)
            g.add_edge(src, rng.randint(0, src - 1))
            assert not kahn_sort(g).is_dag
            assert not dfs_sort(g).is_dag


class TestTopologicalSort:
    def test_default_is_kahn(self, diamond_graph: Graph) -> None:
        result = topological_sort(diamond_graph)
        assert isinstance(result, TopoResult)
        assert result.algorithm == "kahn"

    def test_select_dfs(self, diamond_graph: Graph) -> None:
        assert topological_sort(diamond_graph, algorithm="dfs").algorithm == "dfs"

    def test_unknown_algorithm(self, diamond_graph: Graph) -> None:
        with pytest.raises(ValueError, match="Unknown topological sort"):
            topological_sort(diamond_graph, algorithm="tarjan")


class TestCyclicDependencyError:
    def test_carries_remaining_nodes(self) -> None:
        err = CyclicDependencyError([0, 1, 2])
        assert err.remaining_nodes == [0, 1, 2]
        assert "3 vertex(es)" in str(err)
