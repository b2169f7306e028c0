"""CommandAvailability — may a command run in the current editor context?

Stateless and uncached: the host may change the selection or document at
any time, so every call re-reads the context. Unknown commands and absent
collaborators yield False (fail closed) instead of raising.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from textcmd.domain.commands import (
    PRECONDITIONS,
    Command,
    Precondition,
    parse_command,
    precondition_for,
)
from textcmd.domain.lines import LineSequence
from textcmd.domain.syntax import has_commented_line
from textcmd.services.host import EditorContext
from textcmd.services.result import ServiceResult

logger = logging.getLogger(__name__)


def _has_selection(ctx: EditorContext) -> bool:
    return ctx.selection is not None and ctx.selection.has_non_empty_selection()


def _supports_comments(ctx: EditorContext) -> bool:
    language = ctx.active_language()
    return language is not None and ctx.catalog.supports_comments(language)


def _can_comment(ctx: EditorContext) -> bool:
    return _supports_comments(ctx) and _has_selection(ctx)


def _can_uncomment(ctx: EditorContext) -> bool:
    if not _can_comment(ctx):
        return False
    syntax = ctx.active_syntax()
    assert ctx.selection is not None
    if syntax is None:
        return False
    return has_commented_line(LineSequence.parse(ctx.selection.get_selected_text()), syntax)


def _supports_regions(ctx: EditorContext) -> bool:
    language = ctx.active_language()
    return language is not None and ctx.catalog.supports_regions(language)


def _has_backing_file(ctx: EditorContext) -> bool:
    if ctx.document is None:
        return False
    path = ctx.document.active_file_path()
    return path is not None and path.is_file()


def _can_add_todo(ctx: EditorContext) -> bool:
    return ctx.selection is not None and _supports_comments(ctx)


_PREDICATES: dict[Precondition, Callable[[EditorContext], bool]] = {
    Precondition.SELECTION: _has_selection,
    Precondition.COMMENT: _can_comment,
    Precondition.UNCOMMENT: _can_uncomment,
    Precondition.REGIONS: _supports_regions,
    Precondition.FILE: _has_backing_file,
    Precondition.TODO: _can_add_todo,
}


def is_available(command: Command | str, ctx: EditorContext | None) -> bool:
    """Return whether *command* may run against *ctx*.

    Collaborator failures are logged and re-raised; everything else that
    makes a command inapplicable returns False.
    """
    resolved = command if isinstance(command, Command) else parse_command(command)
    if resolved is None or ctx is None:
        return False
    precondition = precondition_for(resolved)
    if precondition is None:
        return False
    try:
        return _PREDICATES[precondition](ctx)
    except Exception:
        logger.exception("Availability check failed for %s", resolved)
        raise


def available_commands(ctx: EditorContext | None) -> dict[Command, bool]:
    """Availability of every known command, in declaration order."""
    return {command: is_available(command, ctx) for command in Command}


def availability_report(ctx: EditorContext | None) -> ServiceResult:
    """Every command with its precondition class and current availability."""
    rows = [
        {"command": str(command), "precondition": str(PRECONDITIONS[command]), "available": ok}
        for command, ok in available_commands(ctx).items()
    ]
    return ServiceResult(
        ok=True,
        op="available",
        data={
            "language": ctx.active_language() if ctx is not None else None,
            "available_count": sum(1 for row in rows if row["available"]),
            "commands": rows,
        },
    )
