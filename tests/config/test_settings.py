"""Tests for PermgraphSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from permgraph.config.settings import PermgraphSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PERMGRAPH_CONFIG", "PERMGRAPH_ROOT", "PERMGRAPH_GRAPH__DIRECTED"):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = PermgraphSettings.from_cli(root=tmp_path)
        assert settings.root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.graph.directed is False

    def test_frozen(self, tmp_path: Path) -> None:
        settings = PermgraphSettings.from_cli(root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "permgraph.toml").write_text("[graph]\ndirected = true\n")
        settings = PermgraphSettings.from_cli(root=tmp_path)
        assert settings.graph.directed is True
        assert settings.output.width == 100  # default preserved
        assert settings.config_path == tmp_path / "permgraph.toml"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[output]\ncolor = false\n")
        settings = PermgraphSettings.from_cli(config_path=str(custom), root=tmp_path)
        assert settings.output.color is False
        assert settings.config_path == custom

    def test_missing_explicit_config_uses_defaults(self, tmp_path: Path) -> None:
        settings = PermgraphSettings.from_cli(
            config_path=str(tmp_path / "absent.toml"), root=tmp_path
        )
        assert settings.config_path is None
        assert settings.graph.directed is False

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "permgraph.toml").write_text("[graph\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            PermgraphSettings.from_cli(root=tmp_path)


class TestPriority:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = PermgraphSettings.from_cli(root=tmp_path, json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "permgraph.toml").write_text("quiet = true\n")
        settings = PermgraphSettings.from_cli(root=tmp_path, quiet=False)
        assert settings.quiet is False

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "permgraph.toml").write_text("[graph]\ndirected = false\n")
        monkeypatch.setenv("PERMGRAPH_GRAPH__DIRECTED", "true")
        settings = PermgraphSettings.from_cli(root=tmp_path)
        assert settings.graph.directed is True
