"""Graph model and the core scheduling algorithms."""

from taskgraph_lite.graph.adjacency import (
    Edge,
    Graph,
    InvalidVertexError,
    NotDirectedError,
    WeightModel,
)
from taskgraph_lite.graph.components import (
    ComponentResult,
    build_condensation,
    find_components,
    kosaraju_scc,
    tarjan_scc,
)
from taskgraph_lite.graph.dag_paths import (
    UNREACHABLE,
    Distance,
    Finite,
    PathResult,
    Unreachable,
    critical_path,
    longest_paths,
    shortest_paths,
)
from taskgraph_lite.graph.topological import (
    CyclicDependencyError,
    TopoResult,
    dfs_sort,
    kahn_sort,
    topological_sort,
)

__all__ = [
    "ComponentResult",
    "CyclicDependencyError",
    "Distance",
    "Edge",
    "Finite",
    "Graph",
    "InvalidVertexError",
    "NotDirectedError",
    "PathResult",
    "TopoResult",
    "UNREACHABLE",
    "Unreachable",
    "WeightModel",
    "build_condensation",
    "critical_path",
    "dfs_sort",
    "find_components",
    "kahn_sort",
    "kosaraju_scc",
    "longest_paths",
    "shortest_paths",
    "tarjan_scc",
    "topological_sort",
]
