"""Scheduling pipeline, graph I/O, dataset generation and reports."""

from taskgraph_lite.scheduling.generator import (
    STANDARD_SUITE,
    DatasetGenerator,
    DatasetSpec,
    write_suite,
)
from taskgraph_lite.scheduling.loader import (
    GraphData,
    GraphFormatError,
    load_graph,
    parse_graph,
    save_graph,
)
from taskgraph_lite.scheduling.pipeline import Schedule, best_source, build_schedule
from taskgraph_lite.scheduling.report import (
    format_components,
    format_paths,
    format_schedule,
    format_summary,
    format_topo,
)

__all__ = [
    "DatasetGenerator",
    "DatasetSpec",
    "GraphData",
    "GraphFormatError",
    "STANDARD_SUITE",
    "Schedule",
    "best_source",
    "build_schedule",
    "format_components",
    "format_paths",
    "format_schedule",
    "format_summary",
    "format_topo",
    "load_graph",
    "parse_graph",
    "save_graph",
    "write_suite",
]
