"""Graph error taxonomy.

Every failure the graph can raise carries a stable :class:`ErrorCode` so the
service layer can report it without inspecting messages.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar


class ErrorCode(StrEnum):
    """Closed set of graph failure conditions."""

    INVALID_INDEX = "INVALID_INDEX"
    INVALID_EDGE_TYPE = "INVALID_EDGE_TYPE"
    INVALID_ARGUMENTS = "INVALID_ARGUMENTS"


class Endpoint(StrEnum):
    """Which end of an edge an index belongs to."""

    ORIGIN = "origin"
    DESTINATION = "destination"


class GraphError(Exception):
    """Base class for all graph failures."""

    code: ClassVar[ErrorCode]

    def detail(self) -> dict[str, object]:
        """Structured context for error payloads."""
        return {}


class InvalidIndexError(GraphError, IndexError):
    """An edge endpoint lies outside ``[0, vertex_count)``."""

    code = ErrorCode.INVALID_INDEX

    def __init__(self, endpoint: Endpoint, index: int, vertex_count: int) -> None:
        self.endpoint = endpoint
        self.index = index
        self.vertex_count = vertex_count
        super().__init__(
            f"{endpoint} index {index} is out of range for a graph of {vertex_count} vertices"
        )

    def detail(self) -> dict[str, object]:
        return {
            "endpoint": str(self.endpoint),
            "index": self.index,
            "vertex_count": self.vertex_count,
        }


class InvalidEdgeType(GraphError, TypeError):
    """An edge's kind disagrees with the graph's directedness."""

    code = ErrorCode.INVALID_EDGE_TYPE

    def __init__(self, edge_kind: str, graph_directed: bool) -> None:
        self.edge_kind = edge_kind
        self.graph_directed = graph_directed
        graph_kind = "directed" if graph_directed else "undirected"
        super().__init__(f"{edge_kind} edge does not match {graph_kind} graph")

    def detail(self) -> dict[str, object]:
        return {"edge_kind": str(self.edge_kind), "graph_directed": self.graph_directed}


class EdgeArgumentError(GraphError, TypeError):
    """An edge operation was called with an unsupported argument shape."""

    code = ErrorCode.INVALID_ARGUMENTS
