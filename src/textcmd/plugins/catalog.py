"""SyntaxCatalog — the LanguageSyntaxCatalog the hosts hand to the engine."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from textcmd.domain.syntax import LanguageSyntax


class SyntaxCatalog:
    """Language id → :class:`LanguageSyntax`, with an extension index.

    Language ids are case-insensitive. Registering a language again
    replaces the earlier definition.
    """

    def __init__(self, syntaxes: Iterable[LanguageSyntax] = ()) -> None:
        self._by_language: dict[str, LanguageSyntax] = {}
        self._by_extension: dict[str, str] = {}
        for syntax in syntaxes:
            self.register(syntax)

    def register(self, syntax: LanguageSyntax) -> None:
        key = syntax.language.lower()
        previous = self._by_language.get(key)
        if previous is not None:
            for ext in previous.extensions:
                if self._by_extension.get(_norm_ext(ext)) == key:
                    del self._by_extension[_norm_ext(ext)]
        self._by_language[key] = syntax
        for ext in syntax.extensions:
            self._by_extension[_norm_ext(ext)] = key

    def get_syntax(self, language: str) -> LanguageSyntax | None:
        return self._by_language.get(language.lower())

    def supports_comments(self, language: str) -> bool:
        syntax = self.get_syntax(language)
        return syntax is not None and syntax.supports_comments

    def supports_regions(self, language: str) -> bool:
        syntax = self.get_syntax(language)
        return syntax is not None and syntax.supports_regions

    def language_for_path(self, path: Path) -> str | None:
        return self._by_extension.get(path.suffix.lower())

    def languages(self) -> list[str]:
        return sorted(self._by_language)

    def __contains__(self, language: object) -> bool:
        return isinstance(language, str) and language.lower() in self._by_language

    def __len__(self) -> int:
        return len(self._by_language)


def _norm_ext(ext: str) -> str:
    ext = ext.lower()
    return ext if ext.startswith(".") else f".{ext}"
