"""CommandDispatcher — run an accepted command against the current selection.

Pipeline for rewrite commands: GATE → CAPTURE → TRANSFORM → GUARD → WRITE

The guard re-reads the live selection right before writing. If it no
longer matches what was captured, the result is discarded: optimistic
concurrency with abort-don't-merge semantics and no retry.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog

from textcmd.config.logging import command_context
from textcmd.domain.commands import Command, edit_label, parse_command
from textcmd.domain.guids import new_guid
from textcmd.domain.lines import LineSequence
from textcmd.domain.sorting import sort_lines
from textcmd.domain.statistics import compute_statistics
from textcmd.domain.syntax import (
    LanguageSyntax,
    UnsupportedLanguageError,
    add_region,
    comment_lines,
    find_regions,
    todo_comment,
    uncomment_lines,
)
from textcmd.domain.trimming import trim_lines
from textcmd.services.availability import is_available
from textcmd.services.host import EditorContext, SelectionAccessor
from textcmd.services.result import ServiceResult

log = structlog.get_logger(__name__)

Transform = Callable[[str], str]


class CommandDispatcher:
    """Maps each :class:`Command` to its handler via a fixed table."""

    def execute(self, command: Command | str, ctx: EditorContext) -> ServiceResult:
        """Run *command* against *ctx*.

        Unavailable commands are a no-op. Exceptions from transforms or
        collaborators are logged here and re-raised to the host.
        """
        resolved = command if isinstance(command, Command) else parse_command(command)
        op = str(command)
        if resolved is None or not is_available(resolved, ctx):
            log.debug("command.unavailable", command=op)
            return ServiceResult.skipped(op, "unavailable")

        handler = _HANDLERS[resolved]
        with command_context(op, language=ctx.active_language()):
            try:
                result = handler(self, resolved, ctx)
            except Exception:
                log.exception("command.failed")
                raise
            log.debug("command.executed", **_log_fields(result))
        return result

    # ------------------------------------------------------------------
    # Rewrite pipeline
    # ------------------------------------------------------------------

    def _rewrite(self, command: Command, ctx: EditorContext, transform: Transform) -> ServiceResult:
        selection = _require_selection(ctx)
        captured = selection.get_selected_text()
        new_text = transform(captured)

        if selection.get_selected_text() != captured:
            log.info("command.selection_changed", command=str(command))
            return ServiceResult.skipped(str(command), "selection_changed", executed=True)

        label = edit_label(command)
        written = selection.set_selected_text_if_unchanged(new_text, label)
        return ServiceResult(
            ok=True,
            op=str(command),
            data={
                "executed": True,
                "written": written,
                "changed": new_text != captured,
                "lines_before": len(LineSequence.parse(captured)),
                "lines_after": len(LineSequence.parse(new_text)),
            },
            meta={"edit_label": label},
        )

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _sort_lines(self, command: Command, ctx: EditorContext) -> ServiceResult:
        policy = ctx.sort
        return self._rewrite(
            command,
            ctx,
            lambda text: sort_lines(LineSequence.parse(text), policy).serialize(),
        )

    def _trim(self, command: Command, ctx: EditorContext) -> ServiceResult:
        policy = ctx.trim
        if policy.is_noop:
            return ServiceResult.skipped(str(command), "nothing_to_trim")
        return self._rewrite(
            command,
            ctx,
            lambda text: trim_lines(LineSequence.parse(text), policy).serialize(),
        )

    def _comment(self, command: Command, ctx: EditorContext) -> ServiceResult:
        syntax = _require_syntax(ctx)
        fn = comment_lines if command is Command.COMMENT_SELECTION else uncomment_lines
        return self._rewrite(command, ctx, lambda text: fn(LineSequence.parse(text), syntax).serialize())

    def _add_region(self, command: Command, ctx: EditorContext) -> ServiceResult:
        syntax = _require_syntax(ctx)
        name = ctx.region_name
        result = self._rewrite(
            command,
            ctx,
            lambda text: add_region(LineSequence.parse(text), syntax, name).serialize(),
        )
        return _with_data(result, name=name)

    def _add_todo(self, command: Command, ctx: EditorContext) -> ServiceResult:
        syntax = _require_syntax(ctx)
        message = ctx.todo_message
        return self._rewrite(
            command,
            ctx,
            lambda text: todo_comment(LineSequence.parse(text), syntax, message).serialize(),
        )

    def _generate_guid(self, command: Command, ctx: EditorContext) -> ServiceResult:
        guid = new_guid(ctx.guid_format, uppercase=ctx.uppercase_guids)

        def replace(text: str) -> str:
            # Whole selected lines stay whole lines.
            seq = LineSequence.parse(text)
            return guid + (seq[-1].terminator if len(seq) else "")

        result = self._rewrite(command, ctx, replace)
        return _with_data(result, guid=guid)

    def _statistics(self, command: Command, ctx: EditorContext) -> ServiceResult:
        text = _require_selection(ctx).get_selected_text()
        stats = compute_statistics(text)
        return ServiceResult(ok=True, op=str(command), data={"executed": True, **stats.model_dump()})

    def _execute_text(self, command: Command, ctx: EditorContext) -> ServiceResult:
        target = _require_selection(ctx).get_selected_text().strip()
        return self._launch(command, ctx, target)

    def _execute_file(self, command: Command, ctx: EditorContext) -> ServiceResult:
        assert ctx.document is not None
        path = ctx.document.active_file_path()
        if path is None:
            return ServiceResult.skipped(str(command), "no_file")
        return self._launch(command, ctx, str(path))

    def _launch(self, command: Command, ctx: EditorContext, target: str) -> ServiceResult:
        if ctx.launcher is None:
            return ServiceResult.skipped(str(command), "no_launcher", target=target)
        exit_code = ctx.launcher.launch(target)
        return ServiceResult(
            ok=True,
            op=str(command),
            data={"executed": True, "target": target, "exit_code": exit_code},
        )

    def _toggle_regions(self, command: Command, ctx: EditorContext) -> ServiceResult:
        syntax = _require_syntax(ctx)
        expanded = command is Command.EXPAND_ALL_REGIONS
        text = ctx.selection.get_selected_text() if ctx.selection is not None else ""
        regions = find_regions(LineSequence.parse(text), syntax)
        if ctx.outliner is not None:
            ctx.outliner.set_regions_expanded(regions, expanded)
        return ServiceResult(
            ok=True,
            op=str(command),
            data={
                "executed": True,
                "expanded": expanded,
                "count": len(regions),
                "regions": [r.to_dict() for r in regions],
            },
        )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _require_selection(ctx: EditorContext) -> SelectionAccessor:
    if ctx.selection is None:
        msg = "No selection accessor in the editor context"
        raise RuntimeError(msg)
    return ctx.selection


def _require_syntax(ctx: EditorContext) -> LanguageSyntax:
    syntax = ctx.active_syntax()
    if syntax is None:
        msg = f"No syntax registered for language {ctx.active_language()!r}"
        raise UnsupportedLanguageError(msg)
    return syntax


def _with_data(result: ServiceResult, **extra: Any) -> ServiceResult:
    return result.model_copy(update={"data": {**result.data, **extra}})


def _log_fields(result: ServiceResult) -> dict[str, Any]:
    keys = ("executed", "written", "changed", "reason")
    return {k: result.data[k] for k in keys if k in result.data}


_HANDLERS: dict[Command, Callable[[CommandDispatcher, Command, EditorContext], ServiceResult]] = {
    Command.SORT_LINES: CommandDispatcher._sort_lines,
    Command.TRIM: CommandDispatcher._trim,
    Command.STATISTICS: CommandDispatcher._statistics,
    Command.EXECUTE_TEXT: CommandDispatcher._execute_text,
    Command.EXECUTE_FILE: CommandDispatcher._execute_file,
    Command.COMMENT_SELECTION: CommandDispatcher._comment,
    Command.UNCOMMENT_SELECTION: CommandDispatcher._comment,
    Command.ADD_REGION: CommandDispatcher._add_region,
    Command.COLLAPSE_ALL_REGIONS: CommandDispatcher._toggle_regions,
    Command.EXPAND_ALL_REGIONS: CommandDispatcher._toggle_regions,
    Command.GENERATE_GUID: CommandDispatcher._generate_guid,
    Command.ADD_TODO_COMMENT: CommandDispatcher._add_todo,
}
