"""Output mode selection for ServiceResult.

The CLI renders ServiceResult for humans (Rich) or machines (--json).
This module picks the mode; :mod:`timelang.output.renderers` draws it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from timelang.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from timelang.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Global output flags, resolved once per invocation."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet; quiet wins over the rich view.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
