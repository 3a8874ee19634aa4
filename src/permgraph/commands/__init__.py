"""Subcommand modules for permgraph.

Provides register_commands() which uses deferred imports to keep
``permgraph --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups on the root CLI group."""
    from permgraph.commands.graph import graph

    cli.add_command(graph)
