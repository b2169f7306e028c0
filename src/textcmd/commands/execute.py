"""Command group: hand the selection or the file to the system's default handler."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from textcmd.commands._base import TextCommand, TextGroup, selection_options

if TYPE_CHECKING:
    from textcmd.commands._context import AppContext


@click.group(
    cls=TextGroup,
    examples="""\
  textcmd execute text links.md --lines 7
  echo https://example.org | textcmd execute text
  textcmd execute file report.html""",
)
def execute() -> None:
    """Open selected text or a file with its default application."""


@execute.command(
    "text",
    cls=TextCommand,
    examples="""\
  textcmd execute text links.md --lines 7
  echo https://example.org | textcmd execute text --wait""",
)
@selection_options()
@click.option("--wait", is_flag=True, help="Wait for the launched application to exit.")
@click.pass_obj
def text(
    app: AppContext,
    file: Path | None,
    line_range: str | None,
    language: str | None,
    wait: bool,
) -> None:
    """Launch the selected text (a URL or path), trimmed of surrounding whitespace."""
    from textcmd.domain.commands import Command
    from textcmd.infrastructure.launcher import ClickLauncher

    document = app.open_document(file, line_range=line_range, language=language)
    app.run(Command.EXECUTE_TEXT, document, launcher=ClickLauncher(wait=wait))


@execute.command(
    "file",
    cls=TextCommand,
    examples="""\
  textcmd execute file report.html
  textcmd execute file build/output.log --locate""",
)
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--wait", is_flag=True, help="Wait for the launched application to exit.")
@click.option("--locate", is_flag=True, help="Open the containing folder instead.")
@click.pass_obj
def file_cmd(app: AppContext, file: Path, wait: bool, locate: bool) -> None:
    """Launch FILE itself with its default application."""
    from textcmd.domain.commands import Command
    from textcmd.infrastructure.launcher import ClickLauncher

    document = app.open_document(file)
    app.run(Command.EXECUTE_FILE, document, launcher=ClickLauncher(wait=wait, locate=locate))
