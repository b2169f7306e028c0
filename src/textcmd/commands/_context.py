"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. It opens documents, assembles the EditorContext,
runs the dispatcher, and is the outer error boundary: any exception the
dispatcher re-raises becomes a ``COMMAND_FAILED`` result and exit code 1.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
import structlog

from textcmd.domain.commands import EDIT_LABELS, Command
from textcmd.infrastructure.documents import (
    BufferDocument,
    FileDocument,
    InvalidSelectionError,
    LineRange,
)
from textcmd.output.formatters import OutputSettings, format_result
from textcmd.services.host import EditorContext
from textcmd.services.result import ServiceResult

if TYPE_CHECKING:
    from textcmd.config.settings import TextcmdSettings
    from textcmd.plugins.catalog import SyntaxCatalog
    from textcmd.services.dispatcher import CommandDispatcher

Document = BufferDocument | FileDocument

log = structlog.get_logger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The syntax catalog is built lazily so ``--help`` and ``--version``
    never trigger plugin discovery.
    """

    def __init__(self, settings: TextcmdSettings) -> None:
        self.settings = settings
        self._catalog: SyntaxCatalog | None = None
        self._dispatcher: CommandDispatcher | None = None

        from textcmd.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def catalog(self) -> SyntaxCatalog:
        """Language syntax from plugins and ``[languages]`` config."""
        if self._catalog is None:
            from textcmd.plugins.manager import PluginManager

            pm = PluginManager()
            if self.settings.plugins.enabled:
                pm.discover_and_load(local_dir=self.settings.local_plugin_dir)
            self._catalog = pm.build_catalog(self.settings.language_syntaxes())
        return self._catalog

    @property
    def dispatcher(self) -> CommandDispatcher:
        if self._dispatcher is None:
            from textcmd.services.dispatcher import CommandDispatcher

            self._dispatcher = CommandDispatcher()
        return self._dispatcher

    # ------------------------------------------------------------------
    # Documents
    # ------------------------------------------------------------------

    def open_document(
        self,
        file: Path | None,
        *,
        line_range: str | None = None,
        language: str | None = None,
    ) -> Document:
        """Open FILE with an optional line-range selection, or read stdin.

        Stdin is read as bytes so CRLF and lone CR terminators survive.
        Bytes that are not UTF-8 fail like any other command error.
        """
        if file is None:
            if line_range is not None:
                raise click.UsageError("--lines requires FILE.")
            raw = sys.stdin.buffer.read()
            try:
                text = raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                log.warning("stdin.decode_failed", reason=exc.reason, position=exc.start)
                self.emit(_failure("read-stdin", exc))
                raise SystemExit(1) from exc
            return BufferDocument(text, language=language)

        try:
            selection = LineRange.parse(line_range) if line_range else None
        except InvalidSelectionError as exc:
            raise click.BadParameter(str(exc), param_hint="--lines") from exc
        resolved = language or self.catalog.language_for_path(file)
        return FileDocument(file, selection=selection, language=resolved)

    def editor_context(self, document: Document | None, **overrides: Any) -> EditorContext:
        """Assemble the EditorContext, config values first, *overrides* on top."""
        from textcmd.infrastructure.launcher import ClickLauncher

        s = self.settings
        values: dict[str, Any] = {
            "sort": s.sort.to_policy(),
            "trim": s.trim.to_policy(),
            "guid_format": s.guid.format,
            "uppercase_guids": s.guid.uppercase,
            "region_name": s.regions.default_name,
            "todo_message": s.todo.message,
            "launcher": ClickLauncher(),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return EditorContext(catalog=self.catalog, selection=document, document=document, **values)

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def run(self, command: Command, document: Document, **overrides: Any) -> None:
        """Dispatch *command* and emit the outcome.

        In stdin filter mode a rewrite command prints the resulting text,
        never a summary, so pipelines see only the text.
        """
        result = self.execute(command, self.editor_context(document, **overrides))
        if isinstance(document, BufferDocument) and command in EDIT_LABELS and result.ok:
            sys.stdout.buffer.write(document.text.encode("utf-8"))
            sys.stdout.buffer.flush()
            return
        self.emit(result)

    def execute(self, command: Command, ctx: EditorContext) -> ServiceResult:
        try:
            return self.dispatcher.execute(command, ctx)
        except Exception as exc:
            return _failure(str(command), exc)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout; warnings to stderr so piped output stays clean.
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)


def _failure(op: str, exc: Exception) -> ServiceResult:
    return ServiceResult.failure(
        op,
        "COMMAND_FAILED",
        str(exc) or exc.__class__.__name__,
        exception=exc.__class__.__name__,
    )
