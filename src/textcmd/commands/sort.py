"""Command: sort the selected lines."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from textcmd.commands._base import TextCommand, selection_options

if TYPE_CHECKING:
    from textcmd.commands._context import AppContext


@click.command(
    "sort",
    cls=TextCommand,
    examples="""\
  textcmd sort names.txt
  textcmd sort names.txt --lines 10:40 --descending
  textcmd sort --unique --ignore-whitespace < list.txt > sorted.txt
  textcmd sort data.csv --case-sensitive --ordinal""",
)
@selection_options()
@click.option(
    "--case-sensitive/--ignore-case",
    default=None,
    help="Compare case-sensitively, or fold case first.",
)
@click.option(
    "--ordinal/--culture",
    default=None,
    help="Compare code points, or use the current locale's collation.",
)
@click.option("--ascending/--descending", default=None, help="Sort direction.")
@click.option(
    "--ignore-whitespace",
    "ignore_leading_whitespace",
    is_flag=True,
    help="Ignore leading whitespace when comparing.",
)
@click.option("--ignore-punctuation", is_flag=True, help="Ignore punctuation characters when comparing.")
@click.option(
    "--unique",
    "eliminate_duplicates",
    is_flag=True,
    help="Drop adjacent lines that compare equal after sorting.",
)
@click.pass_obj
def sort(
    app: AppContext,
    file: Path | None,
    line_range: str | None,
    language: str | None,
    case_sensitive: bool | None,
    ordinal: bool | None,
    ascending: bool | None,
    ignore_leading_whitespace: bool,
    ignore_punctuation: bool,
    eliminate_duplicates: bool,
) -> None:
    """Sort the selected lines (FILE, or stdin to stdout).

    Options left unset fall back to the [sort] config section.
    """
    from textcmd.domain.commands import Command

    policy = app.settings.sort.to_policy(
        case_sensitive=case_sensitive,
        ordinal=ordinal,
        ascending=ascending,
        ignore_leading_whitespace=ignore_leading_whitespace or None,
        ignore_punctuation=ignore_punctuation or None,
        eliminate_duplicates=eliminate_duplicates or None,
    )
    document = app.open_document(file, line_range=line_range, language=language)
    app.run(Command.SORT_LINES, document, sort=policy)
