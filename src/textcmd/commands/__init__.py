"""Subcommand modules for textcmd.

Provides register_commands() which uses deferred imports to keep
``textcmd --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from textcmd.commands.execute import execute
    from textcmd.commands.region import region

    cli.add_command(region)
    cli.add_command(execute)

    # --- Standalone commands ---
    from textcmd.commands.available import available
    from textcmd.commands.comment import comment, todo, uncomment
    from textcmd.commands.guid import guid
    from textcmd.commands.sort import sort
    from textcmd.commands.stats import stats
    from textcmd.commands.trim import trim

    cli.add_command(sort)
    cli.add_command(trim)
    cli.add_command(stats)
    cli.add_command(comment)
    cli.add_command(uncomment)
    cli.add_command(todo)
    cli.add_command(guid)
    cli.add_command(available)
