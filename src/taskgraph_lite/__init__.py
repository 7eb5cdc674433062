"""taskgraph-lite: turn a weighted task graph into an executable schedule."""

__version__ = "0.1.0"
