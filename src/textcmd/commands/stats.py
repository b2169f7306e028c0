"""Command: statistics for the selected text."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from textcmd.commands._base import TextCommand, selection_options

if TYPE_CHECKING:
    from textcmd.commands._context import AppContext


@click.command(
    "stats",
    cls=TextCommand,
    examples="""\
  textcmd stats README.md
  textcmd stats README.md --lines 1:50
  textcmd --json stats < report.txt""",
)
@selection_options()
@click.pass_obj
def stats(app: AppContext, file: Path | None, line_range: str | None, language: str | None) -> None:
    """Count lines, words and characters in the selection."""
    from textcmd.domain.commands import Command

    app.run(Command.STATISTICS, app.open_document(file, line_range=line_range, language=language))
