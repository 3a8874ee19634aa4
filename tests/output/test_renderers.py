"""Tests for operation-specific Rich renderers."""

from permgraph.output.renderers import render_quiet, render_result
from permgraph.services.result import ServiceError, ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data), meta={"edge_count": 1})


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


_EDGE = {"origin": 0, "destination": 1, "rendered": "(0 -> 1)"}


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("render", "INVALID_INDEX", "origin index 5 is out of range"))
        assert "ERROR" in output
        assert "render" in output
        assert "origin index 5 is out of range" in output

    def test_verbose_shows_code_and_detail(self) -> None:
        result = _err("render", "INVALID_INDEX", "Bad", endpoint="origin")
        output = render_result(result, verbose=True)
        assert "INVALID_INDEX" in output
        assert "detail" in output
        assert "endpoint: origin" in output

    def test_no_error_object(self) -> None:
        output = render_result(ServiceResult(ok=False, op="render"))
        assert "Unknown error" in output


# ── Graph renderers ──────────────────────────────────────────────────


class TestGraphRenderer:
    def test_render(self) -> None:
        result = _ok("render", directed=True, vertices=["a", "b"], edges=[_EDGE], rendered="(0 -> 1)")
        output = render_result(result, color=False)
        assert "OK" in output
        assert "rendered: (0 -> 1)" in output
        assert "directed: True" in output

    def test_empty_graph(self) -> None:
        result = _ok("render", directed=False, vertices=["a"], edges=[], rendered="")
        assert "(no edges)" in render_result(result, color=False)

    def test_verbose_edge_table(self) -> None:
        result = _ok("render", directed=True, vertices=["a", "b"], edges=[_EDGE], rendered="(0 -> 1)")
        output = render_result(result, verbose=True, color=False)
        assert "Origin" in output
        assert "0 (a)" in output
        assert "1 (b)" in output
        assert "edge_count: 1" in output

    def test_reverse_shows_original(self) -> None:
        result = _ok(
            "reverse",
            directed=True,
            vertices=["a", "b"],
            edges=[{"origin": 1, "destination": 0, "rendered": "(1 -> 0)"}],
            rendered="(1 -> 0)",
            original="(0 -> 1)",
        )
        output = render_result(result, color=False)
        assert "original: (0 -> 1)" in output
        assert "rendered: (1 -> 0)" in output


class TestAdjacentRenderer:
    def test_lists_items(self) -> None:
        result = _ok(
            "adjacent",
            vertex=2,
            label="c",
            count=2,
            items=[{"index": 0, "label": "a"}, {"index": 4, "label": "e"}],
        )
        output = render_result(result, color=False)
        assert "vertex: 2 (c)" in output
        assert "count: 2" in output
        assert "0  a" in output
        assert "4  e" in output

    def test_unknown_vertex(self) -> None:
        result = _ok("adjacent", vertex=9, label=None, count=0, items=[])
        assert "vertex: 9" in render_result(result, color=False)


class TestConnectedRenderer:
    def test_yes(self) -> None:
        result = _ok("connected", origin=0, destination=4, connected=True)
        assert "connected: yes" in render_result(result, color=False)

    def test_no(self) -> None:
        result = _ok("connected", origin=4, destination=0, connected=False)
        assert "connected: no" in render_result(result, color=False)


class TestGenericRenderer:
    def test_unknown_op(self) -> None:
        output = render_result(_ok("other", key="val", nested={"a": 1}), color=False)
        assert "key: val" in output
        assert 'nested: {"a":1}' in output


# ── Quiet mode ───────────────────────────────────────────────────────


class TestRenderQuiet:
    def test_rendered_string(self) -> None:
        assert render_quiet(_ok("render", rendered="(2 -> 3)(2 -> 4)")) == "(2 -> 3)(2 -> 4)"

    def test_connected(self) -> None:
        assert render_quiet(_ok("connected", connected=True)) == "true"
        assert render_quiet(_ok("connected", connected=False)) == "false"

    def test_adjacent_indices(self) -> None:
        items = [{"index": 0, "label": "a"}, {"index": 4, "label": "e"}]
        assert render_quiet(_ok("adjacent", items=items)) == "0\n4"

    def test_error(self) -> None:
        assert render_quiet(_err("render", "INVALID_INDEX", "bad")).startswith("ERROR: render")

    def test_fallback(self) -> None:
        assert render_quiet(_ok("other")) == "OK: other"
