"""permgraph — a minimal directed/undirected graph over indexed vertices."""

from permgraph.domain.edges import DirectedEdge, Edge, EdgeKind, UndirectedEdge
from permgraph.domain.errors import (
    EdgeArgumentError,
    ErrorCode,
    GraphError,
    InvalidEdgeType,
    InvalidIndexError,
)
from permgraph.domain.graph import Graph, build_graph

__version__ = "0.1.0"

__all__ = [
    "DirectedEdge",
    "Edge",
    "EdgeArgumentError",
    "EdgeKind",
    "ErrorCode",
    "Graph",
    "GraphError",
    "InvalidEdgeType",
    "InvalidIndexError",
    "UndirectedEdge",
    "__version__",
    "build_graph",
]
