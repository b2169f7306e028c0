"""Shared pytest fixtures and test helpers for textcmd tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from textcmd.infrastructure.documents import BufferDocument
from textcmd.plugins.builtins.languages import BUILTIN_SYNTAXES
from textcmd.plugins.catalog import SyntaxCatalog
from textcmd.services.host import EditorContext


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def catalog() -> SyntaxCatalog:
    """Catalog holding only the built-in language syntax."""
    return SyntaxCatalog(BUILTIN_SYNTAXES)


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to an empty temp project so no stray textcmd.toml is found.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command test
    classes. Tests that need the path can also request ``tmp_path`` directly.
    """
    monkeypatch.delenv("TEXTCMD_CONFIG", raising=False)
    (tmp_path / "textcmd.toml").write_text("")
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def buffer_context(catalog: SyntaxCatalog) -> Callable[..., tuple[EditorContext, BufferDocument]]:
    """Factory: an EditorContext over an in-memory buffer, plus the buffer itself."""

    def make(
        text: str,
        *,
        language: str | None = None,
        **overrides: Any,
    ) -> tuple[EditorContext, BufferDocument]:
        doc = BufferDocument(text, language=language)
        return EditorContext(catalog=catalog, selection=doc, document=doc, **overrides), doc

    return make
