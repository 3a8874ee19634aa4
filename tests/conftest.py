"""Shared pytest fixtures and test helpers for permgraph tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from permgraph.domain.graph import Graph

VERTICES = [1, 2, 3, 4, 5]


@pytest.fixture(autouse=True)
def _restore_logging_state() -> Iterator[None]:
    """Undo configure_logging() calls made by CLI invocations."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    pkg_level = logging.getLogger("permgraph").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("permgraph").setLevel(pkg_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def directed_graph() -> Graph[int]:
    """Empty directed graph over five vertices."""
    return Graph(VERTICES, directed=True)


@pytest.fixture
def undirected_graph() -> Graph[int]:
    """Empty undirected graph over five vertices."""
    return Graph(VERTICES)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Run from an empty temp directory with no config discovery leaking in.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on CLI test classes.
    """
    monkeypatch.delenv("PERMGRAPH_CONFIG", raising=False)
    monkeypatch.delenv("PERMGRAPH_GRAPH__DIRECTED", raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path
