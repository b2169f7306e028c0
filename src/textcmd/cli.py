"""Root CLI group for textcmd with global flags and command registration."""

from __future__ import annotations

import contextlib
import locale

import click

from textcmd import __version__
from textcmd.commands import register_commands
from textcmd.commands._context import AppContext
from textcmd.config.settings import TextcmdSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="textcmd")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
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
    """textcmd — line-oriented editing commands for files and pipes."""
    # Culture-aware sorting collates with the user's locale.
    with contextlib.suppress(locale.Error):
        locale.setlocale(locale.LC_COLLATE, "")
    ctx.ensure_object(dict)
    settings = TextcmdSettings.from_cli(
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
