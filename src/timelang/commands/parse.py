"""Command: parse an expression and show its structure."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timelang.commands._base import TimelangCommand
from timelang.grammar import NODE_NAMES

if TYPE_CHECKING:
    from timelang.commands._context import AppContext


@click.command(
    cls=TimelangCommand,
    examples="""\
  timelang parse "3 days ago"
  timelang parse 2 hours and 30 minutes from now
  timelang parse "from 1/1/2024 to 31/12/2024"
  timelang parse --as date 29/2/2024
  timelang --json parse "next Tuesday\"""",
)
@click.argument("text", nargs=-1, required=True)
@click.option(
    "--as",
    "node",
    type=click.Choice(sorted(NODE_NAMES)),
    default=None,
    help="Node type to parse as (default: [parse] default_node).",
)
@click.pass_obj
def parse(app: AppContext, text: tuple[str, ...], node: str | None) -> None:
    """Parse TEXT and print its kind, canonical form and syntax tree.

    Multiple arguments are joined with single spaces, so quoting is optional.
    """
    app.emit(app.service.parse(" ".join(text), node))
