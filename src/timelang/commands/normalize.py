"""Command: print the canonical form of an expression."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timelang.commands._base import TimelangCommand

if TYPE_CHECKING:
    from timelang.commands._context import AppContext


@click.command(
    cls=TimelangCommand,
    examples="""\
  timelang normalize "3 Days,and 2 HOURS ago"
  timelang normalize --clock 24h "2 days after 15/4/2025 at 9:27 pm"
  timelang normalize --oxford-comma 1 year, 2 months, 3 days from now
  timelang -q normalize "day after tomorrow\"""",
)
@click.argument("text", nargs=-1, required=True)
@click.option(
    "--clock",
    type=click.Choice(["preserve", "12h", "24h"]),
    default=None,
    help="Clock style for times (default: [render] clock).",
)
@click.option(
    "--oxford-comma/--no-oxford-comma",
    default=None,
    help="Serial comma in durations of three or more units.",
)
@click.pass_obj
def normalize(
    app: AppContext,
    text: tuple[str, ...],
    clock: str | None,
    oxford_comma: bool | None,
) -> None:
    """Print the canonical form of TEXT."""
    app.emit(app.service.normalize(" ".join(text), clock=clock, oxford_comma=oxford_comma))
