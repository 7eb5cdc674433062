"""Read and write task graphs as JSON documents.

Document shape:

    {
      "directed": true,
      "n": 8,
      "edges": [{"u": 0, "v": 1, "w": 3}, ...],
      "source": 4,
      "weight_model": "edge",
      "node_weights": {"2": 5}
    }

Only "n" is required.  Defaults: directed, edge weight model, source 0,
no edges, no node weights.  A missing "w" on an edge means weight 1.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from taskgraph_lite.graph.adjacency import Graph, WeightModel

log = logging.getLogger(__name__)


class GraphFormatError(ValueError):
    """Raised when a graph document is malformed."""


@dataclass(slots=True)
class GraphData:
    """Parsed graph document, not yet turned into a Graph."""
    n: int
    directed: bool = True
    weight_model: WeightModel = WeightModel.EDGE
    source: int = 0
    edges: list[tuple[int, int, float]] = field(default_factory=list)
    node_weights: dict[int, float] = field(default_factory=dict)

    def build(self) -> Graph:
        """Construct the Graph.  Bad endpoints raise InvalidVertexError."""
        g = Graph(self.n, directed=self.directed, weight_model=self.weight_model)
        for u, v, w in self.edges:
            g.add_edge(u, v, w)
        for vertex, weight in self.node_weights.items():
            g.set_node_weight(vertex, weight)
        return g

    def to_json(self) -> str:
        doc: dict[str, Any] = {
            "directed": self.directed,
            "n": self.n,
            "edges": [{"u": u, "v": v, "w": w} for u, v, w in self.edges],
            "source": self.source,
            "weight_model": self.weight_model.value,
        }
        if self.node_weights:
            doc["node_weights"] = {str(k): w for k, w in sorted(self.node_weights.items())}
        return json.dumps(doc, indent=2)


def _int_field(doc: dict, key: str, default: int | None = None) -> int:
    value = doc.get(key, default)
    if value is None:
        raise GraphFormatError(f"missing required field {key!r}")
    if isinstance(value, bool) or not isinstance(value, int):
        raise GraphFormatError(f"field {key!r} must be an integer, got {value!r}")
    return value


def _number(value: Any, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise GraphFormatError(f"{where} must be a number, got {value!r}")
    return value


def parse_graph(text: str) -> GraphData:
    """Parse a JSON graph document."""
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as exc:
        raise GraphFormatError(f"invalid JSON: {exc}") from None
    if not isinstance(doc, dict):
        raise GraphFormatError("graph document must be a JSON object")

    n = _int_field(doc, "n")
    if n < 0:
        raise GraphFormatError(f"'n' must be >= 0, got {n}")
    try:
        model = WeightModel(doc.get("weight_model", "edge"))
    except ValueError:
        raise GraphFormatError(
            f"unknown weight_model {doc.get('weight_model')!r}"
        ) from None

    raw_edges = doc.get("edges", [])
    if not isinstance(raw_edges, list):
        raise GraphFormatError(f"'edges' must be a list, got {raw_edges!r}")
    edges: list[tuple[int, int, float]] = []
    for i, raw in enumerate(raw_edges):
        if not isinstance(raw, dict):
            raise GraphFormatError(f"edge #{i} must be an object")
        edges.append((
            _int_field(raw, "u"),
            _int_field(raw, "v"),
            _number(raw.get("w", 1), f"edge #{i} weight"),
        ))

    raw_weights = doc.get("node_weights", {})
    if not isinstance(raw_weights, dict):
        raise GraphFormatError(f"'node_weights' must be an object, got {raw_weights!r}")
    node_weights: dict[int, float] = {}
    for key, weight in raw_weights.items():
        try:
            vertex = int(key)
        except ValueError:
            raise GraphFormatError(f"node_weights key {key!r} is not a vertex") from None
        node_weights[vertex] = _number(weight, f"node weight of {vertex}")

    directed = doc.get("directed", True)
    if not isinstance(directed, bool):
        raise GraphFormatError(f"'directed' must be true or false, got {directed!r}")

    return GraphData(
        n=n,
        directed=directed,
        weight_model=model,
        source=_int_field(doc, "source", 0),
        edges=edges,
        node_weights=node_weights,
    )


def load_graph(path: str | Path) -> GraphData:
    """Read and parse the graph document at *path*."""
    path = Path(path)
    log.debug("loading graph from %s", path)
    data = parse_graph(path.read_text(encoding="utf-8"))
    log.info(
        "loaded %s: %d vertices, %d edges, weight_model=%s",
        path.name, data.n, len(data.edges), data.weight_model.value,
    )
    return data


def save_graph(data: GraphData, path: str | Path) -> None:
    Path(path).write_text(data.to_json() + "\n", encoding="utf-8")
