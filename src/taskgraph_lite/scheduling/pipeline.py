"""End-to-end scheduling: cycles -> condensation -> order -> paths.

build_schedule() runs the whole chain on a task graph:

  1.  Find SCCs with the chosen algorithm, and with the other one as a
      cross-check.  Each SCC is a group of tasks that depend on each
      other and must be scheduled as a unit.
  2.  Order the condensation with both topological sort variants.
  3.  Expand the component order back into a task order.
  4.  Pick a source component: the one holding the requested source
      task, or the first component nothing depends on.
  5.  Shortest and longest (critical) paths over the condensation from
      that component.

Every stage gets its own MetricsCollector so the report can show
per-stage timings.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from taskgraph_lite.graph.adjacency import Graph
from taskgraph_lite.graph.components import ComponentResult, find_components
from taskgraph_lite.graph.dag_paths import PathResult, longest_paths, shortest_paths
from taskgraph_lite.graph.topological import TopoResult, topological_sort
from taskgraph_lite.metrics.collector import MetricsCollector

log = logging.getLogger(__name__)

_OTHER_SCC = {"tarjan": "kosaraju", "kosaraju": "tarjan"}
_OTHER_TOPO = {"kahn": "dfs", "dfs": "kahn"}


@dataclass(frozen=True, slots=True)
class Schedule:
    """Everything the pipeline computed for one task graph."""
    graph: Graph
    components: ComponentResult
    cross_check: ComponentResult
    order: TopoResult
    alternate_order: TopoResult
    task_order: tuple[int, ...]
    source_component: int | None
    shortest: PathResult | None
    longest: PathResult | None

    @property
    def condensation(self) -> Graph:
        return self.components.condensation

    @property
    def partitions_agree(self) -> bool:
        return self.components.partition() == self.cross_check.partition()

    @property
    def orders_agree(self) -> bool:
        return self.order.is_dag == self.alternate_order.is_dag

    def critical_tasks(self) -> list[int]:
        """Original tasks along the critical path, component by component."""
        if self.longest is None:
            return []
        dest = self.longest.critical_destination()
        if dest is None:
            return []
        tasks: list[int] = []
        for comp_idx in self.longest.path_to(dest):
            tasks.extend(self.components.components[comp_idx])
        return tasks


def best_source(graph: Graph) -> int:
    """First vertex with no incoming edges, or 0 if every vertex has one."""
    for v, deg in enumerate(graph.in_degrees()):
        if deg == 0:
            return v
    return 0


def build_schedule(
    graph: Graph,
    source: int | None = None,
    scc_algorithm: str = "tarjan",
    topo_algorithm: str = "kahn",
) -> Schedule:
    """Run the full pipeline on *graph*.

    *source* is a task (original vertex).  When it is None or out of
    range, the first root of the condensation is used instead.
    """
    if scc_algorithm not in _OTHER_SCC:
        raise ValueError(f"Unknown SCC algorithm {scc_algorithm!r}")
    if topo_algorithm not in _OTHER_TOPO:
        raise ValueError(f"Unknown topological sort algorithm {topo_algorithm!r}")

    comps = find_components(graph, MetricsCollector(), scc_algorithm)
    check = find_components(graph, MetricsCollector(), _OTHER_SCC[scc_algorithm])
    if comps.partition() != check.partition():
        log.warning(
            "%s and %s disagree on the component partition",
            comps.algorithm, check.algorithm,
        )

    dag = comps.condensation
    order = topological_sort(dag, MetricsCollector(), topo_algorithm)
    alternate = topological_sort(dag, MetricsCollector(), _OTHER_TOPO[topo_algorithm])
    if not order.is_dag:
        # only possible if the condensation is broken
        log.error("condensation graph is cyclic; task order is partial")

    task_order: list[int] = []
    for comp_idx in order.order:
        task_order.extend(comps.components[comp_idx])

    source_component: int | None = None
    shortest = longest = None
    if dag.vertex_count > 0:
        if source is not None and source in graph:
            source_component = comps.component_of(source)
        else:
            source_component = best_source(dag)
        shortest = shortest_paths(dag, source_component, MetricsCollector())
        longest = longest_paths(dag, source_component, MetricsCollector())

    log.info(
        "scheduled %d tasks into %d components (source component %s)",
        graph.vertex_count, comps.component_count, source_component,
    )
    return Schedule(
        graph=graph,
        components=comps,
        cross_check=check,
        order=order,
        alternate_order=alternate,
        task_order=tuple(task_order),
        source_component=source_component,
        shortest=shortest,
        longest=longest,
    )
