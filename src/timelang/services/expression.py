"""ExpressionService — parse and normalize time expressions.

Wraps the grammar for interface layers: bad input becomes a failed
ServiceResult with a structured error, never an exception.
"""

from __future__ import annotations

from typing import Any

from timelang.config.logging import get_logger
from timelang.config.settings import TimelangSettings
from timelang.domain import nodes
from timelang.domain.render import RenderOptions, render
from timelang.grammar import NODE_NAMES, resolve_node, try_parse
from timelang.grammar.errors import ParseError
from timelang.services.result import ErrorCode, ServiceError, ServiceResult
from timelang.services.telemetry import trace_span, traced

log = get_logger(__name__)


class ExpressionService:
    """Grammar-backed operations configured by :class:`TimelangSettings`."""

    def __init__(self, settings: TimelangSettings | None = None) -> None:
        self._settings = settings or TimelangSettings()

    @property
    def render_options(self) -> RenderOptions:
        return self._settings.render.to_options()

    @traced
    def parse(self, text: str, node: str | None = None) -> ServiceResult:
        """Parse *text* as *node* (a name from ``NODE_NAMES``).

        Defaults to ``[parse] default_node``. On success ``data`` holds the
        canonical form and a JSON-ready AST.
        """
        return self._run("parse", text, node, self.render_options)

    @traced
    def normalize(
        self,
        text: str,
        *,
        node: str | None = None,
        clock: str | None = None,
        oxford_comma: bool | None = None,
    ) -> ServiceResult:
        """Parse *text* and return only its canonical rendering.

        *clock* and *oxford_comma* override the ``[render]`` settings.
        """
        base = self._settings.render
        options = RenderOptions(
            clock=clock or base.clock,  # type: ignore[arg-type]
            oxford_comma=base.oxford_comma if oxford_comma is None else oxford_comma,
        )
        result = self._run("normalize", text, node, options)
        if not result.ok:
            return result
        data = {"input": text, "canonical": result.data["canonical"]}
        return result.model_copy(update={"data": data})

    def _run(self, op: str, text: str, node: str | None, options: RenderOptions) -> ServiceResult:
        name = node or self._settings.parse.default_node
        try:
            target = resolve_node(name)
        except KeyError:
            return ServiceResult.failure(
                op,
                ErrorCode.UNKNOWN_NODE,
                f"Unknown node type: {name!r}",
                {"node": name, "known": sorted(NODE_NAMES)},
            )

        limit = self._settings.parse.max_length
        if len(text) > limit:
            return ServiceResult.failure(
                op,
                ErrorCode.INPUT_TOO_LONG,
                f"Input is {len(text)} characters; the limit is {limit}",
                {"length": len(text), "max_length": limit},
            )

        log.debug("parse.start", op=op, node=name, text=text)
        with trace_span("grammar", node=name, length=len(text)):
            result = try_parse(text, target)
        if not result:
            error = ParseError(text, result)
            log.debug("parse.failed", node=name, position=error.position, construct=error.construct)
            return ServiceResult(ok=False, op=op, error=ServiceError.from_parse_error(error))

        value = result.value
        with trace_span("render"):
            canonical = render(value, options)
        log.debug("parse.ok", node=name, canonical=canonical)

        warnings: list[str] = []
        if isinstance(value, nodes.Duration) and value.is_empty:
            warnings.append("Duration has no non-zero component")

        kind = None
        if isinstance(value, nodes.TimeExpression):
            kind = nodes.expression_kind(value)
        data: dict[str, Any] = {
            "input": text,
            "node": type(value).__name__,
            "kind": kind,
            "canonical": canonical,
            "ast": nodes.to_data(value),
        }
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
