"""Result envelopes returned by every GraphService operation.

The output layer only ever sees a :class:`ServiceResult`: a graph query
either succeeded with an operation-specific ``data`` payload, or failed
with a :class:`ServiceError` carrying a stable :class:`ErrorCode` value.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from permgraph.domain.errors import GraphError


class ServiceError(BaseModel):
    """Why an operation failed: ``code`` is an ErrorCode value, ``detail``
    the error's structured fields (endpoint, index, edge kind...)."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_graph_error(cls, exc: GraphError) -> ServiceError:
        return cls(code=str(exc.code), message=str(exc), detail=exc.detail())


class ServiceResult(BaseModel):
    """Outcome of one graph operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: ``render``, ``reverse``, ``adjacent`` or ``connected``.
        data: Operation payload; empty on failure.
        warnings: Non-fatal notes, printed to stderr by the CLI.
        error: Set exactly when ``ok`` is False.
        meta: Vertex and edge counts of the graph that was built.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(
        cls, op: str, data: dict[str, Any], *, vertex_count: int, edge_count: int
    ) -> ServiceResult:
        return cls(
            ok=True,
            op=op,
            data=data,
            meta={"vertex_count": vertex_count, "edge_count": edge_count},
        )

    @classmethod
    def failure(cls, op: str, exc: GraphError) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError.from_graph_error(exc))
