"""Command group: code regions (add, collapse, expand)."""

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
  textcmd region add src/Widget.cs --lines 12:30 --name "Public Methods"
  textcmd region collapse src/Widget.cs
  textcmd region expand src/Widget.cs
  textcmd region names""",
)
def region() -> None:
    """Add and list named code regions."""


@region.command(
    "add",
    cls=TextCommand,
    examples="""\
  textcmd region add src/Widget.cs --lines 12:30
  textcmd region add src/widget.py --lines 5:9 --name Helpers""",
)
@selection_options(file_required=True)
@click.option("--name", "-n", default=None, help="Region name (default: first [regions] predefined name).")
@click.pass_obj
def add(
    app: AppContext,
    file: Path,
    line_range: str | None,
    language: str | None,
    name: str | None,
) -> None:
    """Wrap the selected lines in a named region."""
    from textcmd.domain.commands import Command

    document = app.open_document(file, line_range=line_range, language=language)
    app.run(Command.ADD_REGION, document, region_name=name)


@region.command(
    "collapse",
    cls=TextCommand,
    examples="""\
  textcmd region collapse src/Widget.cs""",
)
@selection_options(file_required=True)
@click.pass_obj
def collapse(app: AppContext, file: Path, line_range: str | None, language: str | None) -> None:
    """Collapse every region and list the spans found."""
    from textcmd.domain.commands import Command

    app.run(Command.COLLAPSE_ALL_REGIONS, app.open_document(file, line_range=line_range, language=language))


@region.command(
    "expand",
    cls=TextCommand,
    examples="""\
  textcmd region expand src/Widget.cs""",
)
@selection_options(file_required=True)
@click.pass_obj
def expand(app: AppContext, file: Path, line_range: str | None, language: str | None) -> None:
    """Expand every region and list the spans found."""
    from textcmd.domain.commands import Command

    app.run(Command.EXPAND_ALL_REGIONS, app.open_document(file, line_range=line_range, language=language))


@region.command("names", cls=TextCommand)
@click.pass_obj
def names(app: AppContext) -> None:
    """List the predefined region names from config."""
    from textcmd.services.result import ServiceResult

    predefined = list(app.settings.regions.predefined)
    app.emit(
        ServiceResult(
            ok=True,
            op="region-names",
            data={"default": app.settings.regions.default_name, "names": predefined},
        )
    )
