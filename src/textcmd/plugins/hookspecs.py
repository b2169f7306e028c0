"""Pluggy hook specifications for textcmd."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from textcmd.domain.syntax import LanguageSyntax

hookspec = pluggy.HookspecMarker("textcmd")
hookimpl = pluggy.HookimplMarker("textcmd")


class TextcmdHookSpec:
    """Hook specifications for the textcmd plugin system."""

    @hookspec
    def register_language_syntax(self) -> list[LanguageSyntax] | None:
        """Return comment/region syntax definitions to add to the catalog."""
