"""Plain-text reports for pipeline results.

Formats ComponentResult, TopoResult, PathResult and Schedule data into
readable blocks for terminal output.
"""
from __future__ import annotations

from taskgraph_lite.graph.components import ComponentResult
from taskgraph_lite.graph.dag_paths import PathResult
from taskgraph_lite.graph.topological import TopoResult
from taskgraph_lite.scheduling.pipeline import Schedule


def format_components(result: ComponentResult, label: str | None = None) -> str:
    lines = [
        f"=== {label or 'SCC Results'} ({result.algorithm}) ===",
        f"Number of SCCs:    {result.component_count}",
        f"Component sizes:   {result.component_sizes()}",
        "",
    ]
    for idx, comp in enumerate(result.components):
        lines.append(f"SCC {idx}: {list(comp)}")
    lines += ["", result.metrics.summary()]
    return "\n".join(lines)


def format_topo(result: TopoResult) -> str:
    lines = [
        f"=== Topological Sort ({result.algorithm}) ===",
        f"Is DAG:            {result.is_dag}",
    ]
    if result.is_dag:
        lines.append(f"Order:             {list(result.order)}")
    else:
        lines.append("Graph contains cycles - no valid topological order")
        if result.order:
            lines.append(f"Partial order:     {list(result.order)}")
    lines += ["", result.metrics.summary()]
    return "\n".join(lines)


def format_paths(result: PathResult) -> str:
    kind = "Longest" if result.longest else "Shortest"
    lines = [f"=== {kind} Paths ===", f"Source: {result.source}", "", "Distances:"]
    for v, dist in enumerate(result.distances):
        if result.is_reachable(v):
            lines.append(f"  Vertex {v}: {dist} (path: {result.path_to(v)})")
        else:
            lines.append(f"  Vertex {v}: unreachable")
    if result.longest:
        dest = result.critical_destination()
        if dest is not None:
            lines += [
                "",
                f"Critical path:        {result.path_to(dest)}",
                f"Critical path length: {result.critical_length()}",
            ]
    lines += ["", result.metrics.summary()]
    return "\n".join(lines)


def format_summary(schedule: Schedule) -> str:
    """Short overview: graph stats, SCCs, order, critical path, timings."""
    g = schedule.graph
    comps = schedule.components
    lines = [
        "=== Summary ===",
        f"Vertices:              {g.vertex_count}",
        f"Edges:                 {g.edge_count}",
        f"Weight model:          {g.weight_model.value}",
        f"SCCs:                  {comps.component_count}",
        f"Largest SCC:           {comps.largest_component_size()}",
        f"Condensation edges:    {schedule.condensation.edge_count}",
        f"Partitions agree:      {schedule.partitions_agree}",
        f"Valid DAG:             {schedule.order.is_dag}",
        f"Orders agree:          {schedule.orders_agree}",
        f"Task order:            {list(schedule.task_order)}",
    ]
    if schedule.longest is not None:
        dest = schedule.longest.critical_destination()
        if dest is not None:
            lines += [
                f"Critical path:         {schedule.longest.path_to(dest)}",
                f"Critical path length:  {schedule.longest.critical_length()}",
                f"Critical tasks:        {schedule.critical_tasks()}",
            ]

    lines += ["", "Timings:"]
    stages = [
        (f"SCC ({comps.algorithm})", comps.metrics),
        (f"Topological sort ({schedule.order.algorithm})", schedule.order.metrics),
    ]
    if schedule.shortest is not None:
        stages.append(("Shortest paths", schedule.shortest.metrics))
    if schedule.longest is not None:
        stages.append(("Longest paths", schedule.longest.metrics))
    for name, metrics in stages:
        lines.append(f"  {name:<28} {metrics.elapsed_ms():>10.3f} ms")
    return "\n".join(lines)


def format_schedule(schedule: Schedule) -> str:
    """Full report: every stage followed by the summary."""
    blocks = [
        "Original graph:",
        schedule.graph.describe(),
        format_components(schedule.components),
        format_components(schedule.cross_check, label="Cross-check"),
        "Condensation graph:",
        schedule.condensation.describe(),
        format_topo(schedule.order),
        format_topo(schedule.alternate_order),
    ]
    if schedule.shortest is not None:
        blocks.append(format_paths(schedule.shortest))
    if schedule.longest is not None:
        blocks.append(format_paths(schedule.longest))
    blocks.append(format_summary(schedule))
    return "\n\n".join(blocks)
