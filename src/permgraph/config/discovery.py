"""Locating and reading ``permgraph.toml``.

``PERMGRAPH_CONFIG`` names a file explicitly; otherwise the nearest
``permgraph.toml`` at or above the starting directory is used.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from permgraph.config.models import PermgraphConfig

CONFIG_FILENAME = "permgraph.toml"
CONFIG_ENV_VAR = "PERMGRAPH_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd), or None.

    A set ``PERMGRAPH_CONFIG`` disables the walk-up search, even when the
    file it names does not exist.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        explicit = Path(override)
        return explicit if explicit.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML, reporting syntax errors as a CLI error."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc


def load_config(path: Path | None = None, cwd: Path | None = None) -> PermgraphConfig:
    """Load the ``[graph]`` and ``[output]`` sections as a PermgraphConfig.

    With no *path*, the file is discovered from *cwd*; if none exists the
    defaults are returned. Unknown values for known keys (``width = 10``,
    ``directed = "maybe"``) are rejected with a ClickException.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return PermgraphConfig()

    data = read_toml(path)
    try:
        return PermgraphConfig.model_validate(data)
    except ValidationError as exc:
        raise click.ClickException(f"Invalid config in {path}: {exc}") from exc
