"""Command: trim whitespace from the selected lines."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from textcmd.commands._base import TextCommand, selection_options

if TYPE_CHECKING:
    from textcmd.commands._context import AppContext


@click.command(
    "trim",
    cls=TextCommand,
    examples="""\
  textcmd trim notes.md
  textcmd trim notes.md --start --no-end
  textcmd trim src/app.py --lines 1:20 --start
  git diff | textcmd trim""",
)
@selection_options()
@click.option("--start/--no-start", default=None, help="Trim leading whitespace (or keep it).")
@click.option("--end/--no-end", default=None, help="Trim trailing whitespace (or keep it).")
@click.pass_obj
def trim(
    app: AppContext,
    file: Path | None,
    line_range: str | None,
    language: str | None,
    start: bool | None,
    end: bool | None,
) -> None:
    """Trim whitespace from each selected line. Terminators are kept.

    Options left unset fall back to the [trim] config section.
    """
    from textcmd.domain.commands import Command

    policy = app.settings.trim.to_policy(trim_start=start, trim_end=end)
    document = app.open_document(file, line_range=line_range, language=language)
    app.run(Command.TRIM, document, trim=policy)
