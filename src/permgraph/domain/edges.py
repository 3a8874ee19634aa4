"""Edge variants — directed and undirected connections between vertex indices.

The two variants form a closed union (:data:`Edge`). Behaviour that differs
between them lives in the module functions below and is selected by matching
on the variant, so adding a third kind means touching every ``match`` here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar


class EdgeKind(StrEnum):
    """The two kinds of edge a graph can hold."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"


@dataclass(frozen=True)
class DirectedEdge:
    """An ordered connection from *origin* to *destination*."""

    origin: int
    destination: int

    kind: ClassVar[EdgeKind] = EdgeKind.DIRECTED

    def __str__(self) -> str:
        return render_edge(self)


@dataclass(frozen=True)
class UndirectedEdge:
    """A symmetric connection; stored order is kept for rendering only."""

    origin: int
    destination: int

    kind: ClassVar[EdgeKind] = EdgeKind.UNDIRECTED

    def __str__(self) -> str:
        return render_edge(self)


type Edge = DirectedEdge | UndirectedEdge

EDGE_TYPES: tuple[type, ...] = (DirectedEdge, UndirectedEdge)

# Connector tokens used by render_edge.
DIRECTED_CONNECTOR = "->"
UNDIRECTED_CONNECTOR = "--"


def is_edge(value: object) -> bool:
    """Return True if *value* is one of the edge variants."""
    return isinstance(value, EDGE_TYPES)


def make_edge(origin: int, destination: int, *, directed: bool) -> Edge:
    """Build the variant matching *directed*."""
    if directed:
        return DirectedEdge(origin, destination)
    return UndirectedEdge(origin, destination)


def edge_kind(edge: Edge) -> EdgeKind:
    match edge:
        case DirectedEdge():
            return EdgeKind.DIRECTED
        case UndirectedEdge():
            return EdgeKind.UNDIRECTED


def connects(edge: Edge, origin: int, destination: int) -> bool:
    """Check whether *edge* links *origin* to *destination*.

    Directed edges only match the exact orientation. Undirected edges match
    the pair in either order.
    """
    match edge:
        case DirectedEdge(origin=o, destination=d):
            return o == origin and d == destination
        case UndirectedEdge(origin=o, destination=d):
            return (o, d) == (origin, destination) or (o, d) == (destination, origin)


def opposite(edge: Edge, vertex: int) -> int | None:
    """Return the endpoint reached from *vertex* across *edge*, if any.

    Directed edges are only followed outbound. An undirected edge is followed
    from either end; a self-loop yields the vertex itself.
    """
    match edge:
        case DirectedEdge(origin=o, destination=d):
            return d if o == vertex else None
        case UndirectedEdge(origin=o, destination=d):
            if o == vertex:
                return d
            if d == vertex:
                return o
            return None


def reverse_edge(edge: Edge) -> Edge:
    """Return the same variant with its endpoints swapped."""
    match edge:
        case DirectedEdge(origin=o, destination=d):
            return DirectedEdge(d, o)
        case UndirectedEdge(origin=o, destination=d):
            return UndirectedEdge(d, o)


def render_edge(edge: Edge) -> str:
    """Render *edge* as ``(O -> D)`` or ``(O -- D)``."""
    match edge:
        case DirectedEdge(origin=o, destination=d):
            connector = DIRECTED_CONNECTOR
        case UndirectedEdge(origin=o, destination=d):
            connector = UNDIRECTED_CONNECTOR
    return f"({o} {connector} {d})"
