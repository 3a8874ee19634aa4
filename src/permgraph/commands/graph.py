"""Command group: build a graph from arguments and query it."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import click

from permgraph.commands._base import PgGroup
from permgraph.services.graph import GraphService

if TYPE_CHECKING:
    from permgraph.commands._context import AppContext

_GRAPH_EXAMPLES = """\
  permgraph graph render admin editor viewer -e 0:1 -e 1:2 --directed
  permgraph graph reverse admin editor viewer -e 0:1 -e 1:2 --directed
  permgraph graph adjacent a b c d e -e 0:2 -e 4:2 --vertex 2
  permgraph graph connected a b c -e 0:2 --origin 2 --destination 0
  permgraph --json graph render a b -e 0:1"""


class EdgePairType(click.ParamType):
    """Parse ``ORIGIN:DESTINATION`` into a pair of ints."""

    name = "origin:destination"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> tuple[int, int]:
        if isinstance(value, tuple):
            return value
        origin, sep, destination = str(value).partition(":")
        if not sep:
            self.fail(f"{value!r} is not of the form ORIGIN:DESTINATION", param, ctx)
        try:
            return int(origin), int(destination)
        except ValueError:
            self.fail(f"{value!r} must use integer vertex indices", param, ctx)


EDGE_PAIR = EdgePairType()


def graph_inputs[F: Callable[..., Any]](func: F) -> F:
    """Attach the vertex/edge/directedness inputs shared by every graph command."""
    func = click.option(
        "--directed/--undirected",
        default=None,
        help="Graph kind (default from [graph] directed in permgraph.toml).",
    )(func)
    func = click.option(
        "-e",
        "--edge",
        "edges",
        multiple=True,
        type=EDGE_PAIR,
        help="Edge as ORIGIN:DESTINATION vertex indices. Repeatable.",
    )(func)
    return click.argument("vertices", nargs=-1, required=True)(func)


@click.group(cls=PgGroup, examples=_GRAPH_EXAMPLES)
def graph() -> None:
    """Build a graph from VERTICES and edges, then query it."""


@graph.command(
    examples="""\
  permgraph graph render a b c -e 0:1 -e 0:2 --directed
  permgraph -q graph render a b c -e 0:1"""
)
@graph_inputs
@click.pass_obj
def render(
    app: AppContext,
    vertices: tuple[str, ...],
    edges: tuple[tuple[int, int], ...],
    directed: bool | None,
) -> None:
    """Render every edge in insertion order."""
    app.emit(GraphService().render(vertices, edges, directed=app.resolve_directed(directed)))


@graph.command(
    examples="""\
  permgraph graph reverse a b c -e 2:0 -e 2:1 --directed"""
)
@graph_inputs
@click.pass_obj
def reverse(
    app: AppContext,
    vertices: tuple[str, ...],
    edges: tuple[tuple[int, int], ...],
    directed: bool | None,
) -> None:
    """Render the graph with every edge's endpoints swapped."""
    app.emit(GraphService().reverse(vertices, edges, directed=app.resolve_directed(directed)))


@graph.command(
    examples="""\
  permgraph graph adjacent a b c -e 0:1 -e 2:1 --vertex 1
  permgraph -q graph adjacent a b c -e 0:1 --vertex 0 --directed"""
)
@graph_inputs
@click.option("--vertex", required=True, type=int, help="Vertex index to inspect.")
@click.pass_obj
def adjacent(
    app: AppContext,
    vertices: tuple[str, ...],
    edges: tuple[tuple[int, int], ...],
    directed: bool | None,
    vertex: int,
) -> None:
    """List vertices one edge away (outbound only on directed graphs)."""
    app.emit(
        GraphService().adjacent(
            vertices, edges, vertex=vertex, directed=app.resolve_directed(directed)
        )
    )


@graph.command(
    examples="""\
  permgraph graph connected a b c -e 0:1 --origin 0 --destination 1 --directed"""
)
@graph_inputs
@click.option("--origin", required=True, type=int, help="Origin vertex index.")
@click.option("--destination", required=True, type=int, help="Destination vertex index.")
@click.pass_obj
def connected(
    app: AppContext,
    vertices: tuple[str, ...],
    edges: tuple[tuple[int, int], ...],
    directed: bool | None,
    origin: int,
    destination: int,
) -> None:
    """Check whether a single edge links ORIGIN to DESTINATION."""
    app.emit(
        GraphService().connected(
            vertices,
            edges,
            origin=origin,
            destination=destination,
            directed=app.resolve_directed(directed),
        )
    )
