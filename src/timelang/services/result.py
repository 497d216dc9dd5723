"""Service results: what ExpressionService hands to the CLI.

A failed parse is an ordinary outcome here, carried as ``ok=False``
with a :class:`ServiceError`; only programming errors raise.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

from timelang.grammar.errors import ParseError


class ErrorCode(StrEnum):
    PARSE_FAILED = "PARSE_FAILED"
    UNKNOWN_NODE = "UNKNOWN_NODE"
    INPUT_TOO_LONG = "INPUT_TOO_LONG"


class ServiceError(BaseModel):
    """Why an operation failed; ``detail`` is JSON-ready."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_parse_error(cls, error: ParseError) -> ServiceError:
        """Position, construct and expectations of a grammar failure."""
        return cls(code=ErrorCode.PARSE_FAILED, message=str(error), detail=error.to_dict())


class ServiceResult(BaseModel):
    """Outcome of ``parse`` or ``normalize``.

    Attributes:
        ok: Whether the text was accepted.
        op: ``"parse"`` or ``"normalize"``.
        data: ``input``, ``canonical`` and, for ``parse``, the AST.
        warnings: Accepted but suspicious input (an all-zero duration).
        error: Set when ``ok`` is False.
        meta: Span tree when telemetry is enabled.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        error = ServiceError(code=code, message=message, detail=detail or {})
        return cls(ok=False, op=op, error=error)

    @property
    def canonical(self) -> str | None:
        return self.data.get("canonical")
