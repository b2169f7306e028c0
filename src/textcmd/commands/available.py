"""Command: which commands may run against a document right now."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from textcmd.commands._base import TextCommand

if TYPE_CHECKING:
    from textcmd.commands._context import AppContext


@click.command(
    "available",
    cls=TextCommand,
    examples="""\
  textcmd available
  textcmd available src/Widget.cs --lines 3:9
  textcmd --json available notes.txt -L python""",
)
@click.argument("file", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.option("--lines", "line_range", default=None, metavar="N[:M]", help="Select lines N through M.")
@click.option("--language", "-L", default=None, help="Language id (default: inferred from the file extension).")
@click.pass_obj
def available(app: AppContext, file: Path | None, line_range: str | None, language: str | None) -> None:
    """Report command availability. Without FILE there is no document."""
    from textcmd.services.availability import availability_report

    document = app.open_document(file, line_range=line_range, language=language) if file else None
    if document is None and line_range is not None:
        raise click.UsageError("--lines requires FILE.")
    app.emit(availability_report(app.editor_context(document)))
