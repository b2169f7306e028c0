"""Command: generate a GUID, optionally replacing the selection with it."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from textcmd.commands._base import TextCommand, selection_options
from textcmd.domain.guids import GuidFormat

if TYPE_CHECKING:
    from textcmd.commands._context import AppContext


@click.command(
    "guid",
    cls=TextCommand,
    examples="""\
  textcmd guid
  textcmd -q guid --format braces --upper
  textcmd guid src/Ids.cs --lines 14 --format structure""",
)
@selection_options()
@click.option(
    "--format",
    "-f",
    "guid_format",
    type=click.Choice([f.value for f in GuidFormat]),
    default=None,
    help="GUID layout (default from [guid] config).",
)
@click.option("--upper/--lower", default=None, help="Hex digit case (default from [guid] config).")
@click.pass_obj
def guid(
    app: AppContext,
    file: Path | None,
    line_range: str | None,
    language: str | None,
    guid_format: str | None,
    upper: bool | None,
) -> None:
    """Print a new GUID, or replace the selected lines of FILE with one."""
    from textcmd.domain.commands import Command

    fmt = GuidFormat(guid_format) if guid_format else app.settings.guid.format
    uppercase = app.settings.guid.uppercase if upper is None else upper

    if file is None:
        if line_range is not None:
            raise click.UsageError("--lines requires FILE.")
        from textcmd.domain.guids import new_guid
        from textcmd.services.result import ServiceResult

        value = new_guid(fmt, uppercase=uppercase)
        app.emit(ServiceResult(ok=True, op=str(Command.GENERATE_GUID), data={"executed": True, "guid": value}))
        return

    document = app.open_document(file, line_range=line_range, language=language)
    app.run(Command.GENERATE_GUID, document, guid_format=fmt, uppercase_guids=uppercase)
