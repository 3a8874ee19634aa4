"""Graph — a fixed vertex sequence with an ordered list of typed edges.

Vertices are opaque and addressed by position only. Directedness is chosen
once at construction; every stored edge must be of the matching kind.

INVARIANT: every stored edge has ``0 <= endpoint < vertex_count`` for both
endpoints, and its kind matches :attr:`Graph.directed`. A failed
``add_edge`` leaves the edge list untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from permgraph.domain.edges import (
    Edge,
    EdgeKind,
    connects,
    edge_kind,
    is_edge,
    make_edge,
    opposite,
    render_edge,
    reverse_edge,
)
from permgraph.domain.errors import (
    EdgeArgumentError,
    Endpoint,
    InvalidEdgeType,
    InvalidIndexError,
)

logger = logging.getLogger(__name__)


def _is_index(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Graph[V]:
    """Directed or undirected graph over a fixed sequence of vertices.

    Usage::

        graph = Graph(["a", "b", "c"], directed=True)
        graph.add_edge(0, 1)
        graph.add_edge(DirectedEdge(1, 2))
        graph.connected(0, 1)        # True
        graph.adjacent_vertices(1)   # [2]
        str(graph)                   # "(0 -> 1)(1 -> 2)"
    """

    def __init__(self, vertices: Iterable[V], directed: bool = False) -> None:
        self._vertices: tuple[V, ...] = tuple(vertices)
        self._directed = bool(directed)
        self._edges: list[Edge] = []

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def entries(self) -> tuple[V, ...]:
        """The vertices, in construction order."""
        return self._vertices

    @property
    def directed(self) -> bool:
        return self._directed

    def is_directed(self) -> bool:
        return self._directed

    @property
    def edges(self) -> tuple[Edge, ...]:
        """Snapshot of the stored edges, in insertion order."""
        return tuple(self._edges)

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    def __len__(self) -> int:
        return len(self._edges)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_edge(self, *args: Any, **kwargs: Any) -> None:
        """Add an edge, given either two endpoint indices or an edge variant.

        ``add_edge(origin, destination)`` builds an edge of this graph's own
        kind. ``add_edge(edge)`` accepts a pre-built :class:`DirectedEdge` or
        :class:`UndirectedEdge`.

        Raises:
            InvalidEdgeType: The edge kind does not match :attr:`directed`.
            InvalidIndexError: An endpoint is outside ``[0, vertex_count)``.
            EdgeArgumentError: Any other call shape.
        """
        edge = self._coerce_edge("add_edge", args, kwargs)
        self._validate(edge)
        self._edges.append(edge)
        logger.debug("Added edge %s (%d edges)", render_edge(edge), len(self._edges))

    def _coerce_edge(self, op: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Edge:
        if kwargs:
            names = ", ".join(sorted(kwargs))
            raise EdgeArgumentError(f"{op}() takes positional arguments only (got {names})")
        match args:
            case (edge,) if is_edge(edge):
                if not (_is_index(edge.origin) and _is_index(edge.destination)):
                    raise EdgeArgumentError(f"{op}() expects an edge with integer endpoints")
                return edge
            case (origin, destination) if _is_index(origin) and _is_index(destination):
                return make_edge(origin, destination, directed=self._directed)
            case (_,):
                raise EdgeArgumentError(
                    f"{op}() expects an edge, got {type(args[0]).__name__}"
                )
            case (_, _):
                raise EdgeArgumentError(f"{op}() expects two integer vertex indices")
            case _:
                raise EdgeArgumentError(
                    f"{op}() takes 1 or 2 positional arguments but {len(args)} were given"
                )

    def _validate(self, edge: Edge) -> None:
        expected = EdgeKind.DIRECTED if self._directed else EdgeKind.UNDIRECTED
        kind = edge_kind(edge)
        if kind != expected:
            raise InvalidEdgeType(kind, self._directed)
        count = len(self._vertices)
        if not 0 <= edge.origin < count:
            raise InvalidIndexError(Endpoint.ORIGIN, edge.origin, count)
        if not 0 <= edge.destination < count:
            raise InvalidIndexError(Endpoint.DESTINATION, edge.destination, count)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def connected(self, *args: Any, **kwargs: Any) -> bool:
        """Return True if a stored edge links the given pair.

        Accepts ``(origin, destination)`` or a single edge, whose endpoints
        are used as the pair regardless of its kind. Indices are not bounds
        checked; an unknown index simply never matches.
        """
        query = self._coerce_edge("connected", args, kwargs)
        return any(connects(edge, query.origin, query.destination) for edge in self._edges)

    def adjacent_vertices(self, vertex_index: int) -> list[int]:
        """Indices reachable from *vertex_index* across a single edge.

        Directed graphs follow outbound edges only. Results keep edge
        insertion order and may repeat when duplicate edges exist.
        """
        adjacent: list[int] = []
        for edge in self._edges:
            other = opposite(edge, vertex_index)
            if other is not None:
                adjacent.append(other)
        return adjacent

    def reverse(self) -> Graph[V]:
        """Return a new graph with every edge's endpoints swapped.

        The receiver is left unchanged. Both graphs share the (immutable)
        vertex tuple.
        """
        reversed_graph: Graph[V] = Graph(self._vertices, directed=self._directed)
        reversed_graph._edges = [reverse_edge(edge) for edge in self._edges]
        logger.debug("Reversed graph with %d edges", len(reversed_graph._edges))
        return reversed_graph

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_s(self) -> str:
        """Concatenate every edge's rendering, in insertion order."""
        return "".join(render_edge(edge) for edge in self._edges)

    def __str__(self) -> str:
        return self.to_s()

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"<Graph {kind} vertices={len(self._vertices)} edges={len(self._edges)}>"


def build_graph[V](
    vertices: Sequence[V],
    edges: Iterable[tuple[int, int]],
    *,
    directed: bool = False,
) -> Graph[V]:
    """Construct a graph and add each ``(origin, destination)`` pair in order."""
    graph: Graph[V] = Graph(vertices, directed=directed)
    for origin, destination in edges:
        graph.add_edge(origin, destination)
    return graph
