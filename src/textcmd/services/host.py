"""Collaborator protocols — the engine's only view of the host editor.

The engine never reaches for an ambient "active document". Everything it
may consult arrives in an :class:`EditorContext` passed into each call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from textcmd.domain.guids import GuidFormat
from textcmd.domain.sorting import SortPolicy
from textcmd.domain.trimming import TrimPolicy

if TYPE_CHECKING:
    from textcmd.domain.syntax import LanguageSyntax, Region


@runtime_checkable
class SelectionAccessor(Protocol):
    """Reads and conditionally replaces the current selection."""

    def has_non_empty_selection(self) -> bool: ...

    def get_selected_text(self) -> str: ...

    def set_selected_text_if_unchanged(self, new_text: str, edit_label: str) -> bool:
        """Replace the selection unless it already equals *new_text*.

        Returns whether a write happened. *edit_label* names the edit for
        the host's undo history.
        """
        ...


@runtime_checkable
class DocumentContext(Protocol):
    """Facts about the document that owns the selection."""

    def active_language(self) -> str | None: ...

    def active_file_path(self) -> Path | None: ...


@runtime_checkable
class LanguageSyntaxCatalog(Protocol):
    """Language comment/region syntax lookups."""

    def supports_regions(self, language: str) -> bool: ...

    def supports_comments(self, language: str) -> bool: ...

    def get_syntax(self, language: str) -> LanguageSyntax | None: ...

    def language_for_path(self, path: Path) -> str | None: ...


class Launcher(Protocol):
    """Opens a file, URL, or command line with the system's default handler."""

    def launch(self, target: str) -> int: ...


class Outliner(Protocol):
    """Folds or unfolds region spans in the host view."""

    def set_regions_expanded(self, regions: list[Region], expanded: bool) -> None: ...


@dataclass(frozen=True)
class EditorContext:
    """Everything one command invocation may consult.

    Collaborators are optional: a missing document or selection makes the
    commands that need it unavailable rather than failing.
    """

    catalog: LanguageSyntaxCatalog
    selection: SelectionAccessor | None = None
    document: DocumentContext | None = None
    launcher: Launcher | None = None
    outliner: Outliner | None = None
    sort: SortPolicy = field(default_factory=SortPolicy)
    trim: TrimPolicy = field(default_factory=TrimPolicy)
    guid_format: GuidFormat = GuidFormat.DASHES
    uppercase_guids: bool = False
    region_name: str = "Region"
    todo_message: str = "TODO: "

    def active_language(self) -> str | None:
        if self.document is None:
            return None
        return self.document.active_language()

    def active_syntax(self) -> LanguageSyntax | None:
        language = self.active_language()
        if language is None:
            return None
        return self.catalog.get_syntax(language)
