"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text
from rich.tree import Tree

from timelang.output.console import create_console, get_output, style_for_kind
from timelang.services.result import ErrorCode

if TYPE_CHECKING:
    from rich.console import Console

    from timelang.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS[result.op]
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: just the canonical text."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    canonical = result.canonical
    return canonical if canonical is not None else f"OK: {result.op}"


def ast_tree(ast: Any, label: str | None = None) -> Tree:
    """Build a Rich Tree from the tagged data produced by ``to_data``."""
    tree = Tree(_label(label, ast))
    if isinstance(ast, dict) and not _is_leaf(ast):
        _add_fields(tree, ast)
    return tree


# ── Helpers ───────────────────────────────────────────────────────────


def _is_leaf(data: dict[str, Any]) -> bool:
    """Scalars and enums: a tagged value with no child nodes."""
    return set(data) <= {"node", "value", "name"} and not isinstance(data.get("value"), dict)


def _label(field: str | None, value: Any) -> Text:
    text = Text()
    if field:
        text.append(f"{field}: ", style="tl.field")
    if not isinstance(value, dict):
        text.append(str(value), style="tl.value")
        return text
    node = value.get("node", "?")
    if "name" in value:
        text.append(f"{value['name']} ", style="tl.value")
        text.append(f"({node} {value['value']})", style="dim")
    elif "value" in value and _is_leaf(value):
        text.append(f"{value['value']} ", style="tl.value")
        text.append(f"({node})", style="dim")
    else:
        text.append(node, style="tl.node")
    return text


def _add_fields(tree: Tree, data: dict[str, Any]) -> None:
    for key, value in data.items():
        if key == "node" or value is None:
            continue
        branch = tree.add(_label(key, value))
        if isinstance(value, dict) and not _is_leaf(value):
            _add_fields(branch, value)


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="tl.ok")
    op = Text(f"  {result.op}", style="tl.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="tl.key")
    console.print(k, Text(str(value), style=style), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_telemetry_tree(console: Console, span_data: dict[str, Any], indent: int = 4) -> None:
    """Render a hierarchical span tree with timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)
    style = "yellow" if duration > 10 else "dim"

    line = Text(prefix)
    line.append(f"{duration:>8.3f}ms", style=style)
    line.append(f"  {name}")
    annotations = span_data.get("annotations") or {}
    if annotations:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="tl.error")
    op = Text(f"  {result.op}", style="tl.op")
    console.print(label, op, Text(" — "), Text(msg))

    if err and err.code == ErrorCode.PARSE_FAILED:
        _render_caret(console, err.detail)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


def _render_caret(console: Console, detail: dict[str, Any]) -> None:
    """Echo the input with a caret under the failure position."""
    text = detail.get("text")
    position = detail.get("position")
    if text is None or position is None:
        return
    console.print(Text(f"    {text}"))
    console.print(Text("    " + " " * position + "^", style="tl.caret"))


# ── Success renderers ─────────────────────────────────────────────────


def _render_parse(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a parse result: kind, canonical form, and the AST as a tree."""
    data = result.data
    _status_line(console, result)
    _field(console, "input", data.get("input", ""))
    if data.get("kind"):
        _field(console, "kind", data["kind"], style_for_kind(data["kind"]))
    _field(console, "canonical", data.get("canonical", ""), "tl.canonical")
    if "ast" in data:
        console.print()
        console.print(ast_tree(data["ast"]))
    if verbose:
        _render_meta(console, result)


def _render_normalize(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a normalize result: the canonical form on its own line."""
    console.print(Text(result.canonical or "", style="tl.canonical"))
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

# One entry per ExpressionService operation; a missing op is a bug.
_OP_RENDERERS: dict[str, Any] = {
    "parse": _render_parse,
    "normalize": _render_normalize,
}
