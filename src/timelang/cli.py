"""Root CLI group for timelang with global flags and command registration."""

from __future__ import annotations

import click

from timelang import __version__
from timelang.commands import register_commands
from timelang.commands._base import TimelangGroup
from timelang.commands._context import AppContext
from timelang.config.settings import TimelangSettings


@click.group(
    cls=TimelangGroup,
    invoke_without_command=True,
    examples="""\
  timelang parse "5 days, 3 weeks after 15/4/2025 at 9:27 AM"
  timelang normalize "the day before yesterday"
  timelang --json parse "from now to next Friday"
  timelang -c ./timelang.toml normalize "9:05 PM\"""",
)
@click.version_option(version=__version__, prog_name="timelang")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output (canonical text only).")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """timelang — parse and normalize human-readable time expressions."""
    settings = TimelangSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
