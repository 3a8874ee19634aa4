"""GraphService — build a graph from plain inputs and answer one query.

Each call constructs a fresh :class:`~permgraph.domain.graph.Graph` from a
vertex list and ``(origin, destination)`` pairs, then runs a single
operation. Domain failures become ``ok=False`` results carrying the
error's :class:`~permgraph.domain.errors.ErrorCode`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from permgraph.domain.edges import render_edge
from permgraph.domain.errors import GraphError
from permgraph.domain.graph import Graph, build_graph
from permgraph.services.result import ServiceResult

logger = logging.getLogger(__name__)

type EdgePair = tuple[int, int]


def _graph_payload(graph: Graph[str]) -> dict[str, Any]:
    return {
        "directed": graph.directed,
        "vertices": list(graph.entries),
        "edges": [
            {"origin": e.origin, "destination": e.destination, "rendered": render_edge(e)}
            for e in graph.edges
        ],
        "rendered": graph.to_s(),
    }


class GraphService:
    """Runs graph queries and reports them as ServiceResults."""

    def _run(
        self,
        op: str,
        vertices: Sequence[str],
        edges: Sequence[EdgePair],
        directed: bool,
        query: Callable[[Graph[str]], dict[str, Any]],
    ) -> ServiceResult:
        try:
            graph = build_graph(vertices, edges, directed=directed)
            data = query(graph)
        except GraphError as exc:
            logger.debug("%s failed: %s", op, exc)
            return ServiceResult.failure(op, exc)
        return ServiceResult.success(
            op, data, vertex_count=graph.vertex_count, edge_count=len(graph)
        )

    def render(
        self,
        vertices: Sequence[str],
        edges: Sequence[EdgePair],
        *,
        directed: bool,
    ) -> ServiceResult:
        """Build the graph and return its rendering."""
        return self._run("render", vertices, edges, directed, _graph_payload)

    def reverse(
        self,
        vertices: Sequence[str],
        edges: Sequence[EdgePair],
        *,
        directed: bool,
    ) -> ServiceResult:
        """Build the graph and return its reversed counterpart.

        ``data["original"]`` keeps the input rendering so callers can
        compare the two.
        """

        def query(graph: Graph[str]) -> dict[str, Any]:
            data = _graph_payload(graph.reverse())
            data["original"] = graph.to_s()
            return data

        return self._run("reverse", vertices, edges, directed, query)

    def adjacent(
        self,
        vertices: Sequence[str],
        edges: Sequence[EdgePair],
        *,
        vertex: int,
        directed: bool,
    ) -> ServiceResult:
        """List the vertices one edge away from *vertex*."""

        def query(graph: Graph[str]) -> dict[str, Any]:
            indices = graph.adjacent_vertices(vertex)
            # Out-of-range indices are not an error here; they have no neighbours.
            label = graph.entries[vertex] if 0 <= vertex < graph.vertex_count else None
            return {
                "vertex": vertex,
                "label": label,
                "count": len(indices),
                "items": [{"index": i, "label": graph.entries[i]} for i in indices],
            }

        return self._run("adjacent", vertices, edges, directed, query)

    def connected(
        self,
        vertices: Sequence[str],
        edges: Sequence[EdgePair],
        *,
        origin: int,
        destination: int,
        directed: bool,
    ) -> ServiceResult:
        """Report whether an edge links *origin* to *destination*."""

        def query(graph: Graph[str]) -> dict[str, Any]:
            return {
                "origin": origin,
                "destination": destination,
                "connected": graph.connected(origin, destination),
            }

        return self._run("connected", vertices, edges, directed, query)
