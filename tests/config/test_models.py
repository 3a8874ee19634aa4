"""Tests for config models — defaults and sparse overrides."""

import pytest
from pydantic import ValidationError

from permgraph.config.models import GraphConfig, OutputConfig, PermgraphConfig


class TestPermgraphConfig:
    def test_defaults(self) -> None:
        cfg = PermgraphConfig()
        assert cfg.graph.directed is False
        assert cfg.output.color is True
        assert cfg.output.width == 100

    def test_sparse_override(self) -> None:
        cfg = PermgraphConfig.model_validate({"graph": {"directed": True}})
        assert cfg.graph.directed is True
        assert cfg.output == OutputConfig()

    def test_frozen(self) -> None:
        cfg = GraphConfig()
        with pytest.raises(ValidationError):
            cfg.directed = True  # type: ignore[misc]


class TestOutputConfig:
    def test_width_floor(self) -> None:
        with pytest.raises(ValidationError):
            OutputConfig(width=10)
