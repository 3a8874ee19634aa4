"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from permgraph.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from permgraph.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    color: bool = True,
    width: int | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(no_color=not color, width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render only the primary value of a result, for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if "rendered" in data:
        return str(data["rendered"])
    if "connected" in data:
        return "true" if data["connected"] else "false"
    items = data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["index"]) for item in items)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="pg.ok")
    op = Text(f"  {result.op}", style="pg.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="pg.key")
    console.print(k, Text(str(value), style=style), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


def _edge_table(edges: list[dict[str, Any]], vertices: list[str]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Edge", style="pg.edge", no_wrap=True)
    table.add_column("Origin")
    table.add_column("Destination")
    for edge in edges:
        table.add_row(
            edge["rendered"],
            f"{edge['origin']} ({vertices[edge['origin']]})",
            f"{edge['destination']} ({vertices[edge['destination']]})",
        )
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="pg.error")
    op = Text(f"  {result.op}", style="pg.op")
    console.print(label, op, Text(" — "), Text(msg), sep="")

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        if err.detail:
            console.print(Text("  detail:", style="dim"))
            for k, v in err.detail.items():
                console.print(f"    {k}: {v}")


# ── Graph renderers ───────────────────────────────────────────────────


def _render_graph(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render render/reverse results: the edge string, then an edge table."""
    d = result.data
    _status_line(console, result)
    _field(console, "directed", d.get("directed"))
    if "original" in d:
        _field(console, "original", d["original"] or "(no edges)", style="pg.edge")
    _field(console, "rendered", d.get("rendered") or "(no edges)", style="pg.edge")

    edges = d.get("edges", [])
    if verbose and edges:
        console.print()
        console.print(_edge_table(edges, d.get("vertices", [])))
    if verbose:
        _render_meta(console, result)


def _render_adjacent(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    vertex = d.get("vertex")
    label = d.get("label")
    _field(console, "vertex", vertex if label is None else f"{vertex} ({label})", style="pg.index")
    _field(console, "count", d.get("count", 0))
    for item in d.get("items", []):
        console.print(
            Text("    "),
            Text(str(item["index"]), style="pg.index"),
            Text(f"  {item['label']}", style="pg.label"),
            sep="",
        )
    if verbose:
        _render_meta(console, result)


def _render_connected(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "origin", d.get("origin"), style="pg.index")
    _field(console, "destination", d.get("destination"), style="pg.index")
    yes = bool(d.get("connected"))
    _field(console, "connected", "yes" if yes else "no", style="pg.yes" if yes else "pg.no")
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "render": _render_graph,
    "reverse": _render_graph,
    "adjacent": _render_adjacent,
    "connected": _render_connected,
}
