"""Commands: comment, uncomment and TODO comments."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from textcmd.commands._base import TextCommand, selection_options

if TYPE_CHECKING:
    from textcmd.commands._context import AppContext


@click.command(
    "comment",
    cls=TextCommand,
    examples="""\
  textcmd comment src/app.py --lines 10:14
  textcmd comment -L csharp < Program.cs""",
)
@selection_options()
@click.pass_obj
def comment(app: AppContext, file: Path | None, line_range: str | None, language: str | None) -> None:
    """Comment out the selected lines using the language's comment syntax."""
    from textcmd.domain.commands import Command

    app.run(Command.COMMENT_SELECTION, app.open_document(file, line_range=line_range, language=language))


@click.command(
    "uncomment",
    cls=TextCommand,
    examples="""\
  textcmd uncomment src/app.py --lines 10:14
  textcmd uncomment -L shell < deploy.sh""",
)
@selection_options()
@click.pass_obj
def uncomment(app: AppContext, file: Path | None, line_range: str | None, language: str | None) -> None:
    """Remove one level of comment markers from the selected lines."""
    from textcmd.domain.commands import Command

    app.run(Command.UNCOMMENT_SELECTION, app.open_document(file, line_range=line_range, language=language))


@click.command(
    "todo",
    cls=TextCommand,
    examples="""\
  textcmd todo src/app.py --lines 42
  textcmd todo src/app.py --lines 42 --message "FIXME: " """,
)
@selection_options()
@click.option("--message", "-m", default=None, help="Comment text (default from [todo] config).")
@click.pass_obj
def todo(
    app: AppContext,
    file: Path | None,
    line_range: str | None,
    language: str | None,
    message: str | None,
) -> None:
    """Insert a TODO comment above the selected lines."""
    from textcmd.domain.commands import Command

    document = app.open_document(file, line_range=line_range, language=language)
    app.run(Command.ADD_TODO_COMMENT, document, todo_message=message)
