"""Tests for PluginManager — registration and syntax catalog assembly."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pluggy

from textcmd.domain.syntax import LanguageSyntax
from textcmd.plugins.manager import BUILTIN_PLUGIN_NAME, PluginManager

hookimpl = pluggy.HookimplMarker("textcmd")


class _FortranPlugin:
    @hookimpl
    def register_language_syntax(self) -> list[Any]:
        return [
            LanguageSyntax(language="fortran", extensions=(".f90",), line_comment="!"),
            {"language": "ini", "extensions": [".ini"], "line_comment": ";"},
        ]


class _PythonOverridePlugin:
    @hookimpl
    def register_language_syntax(self) -> list[LanguageSyntax]:
        return [LanguageSyntax(language="python", extensions=(".py",), line_comment="##")]


class _FailingPlugin:
    @hookimpl
    def register_language_syntax(self) -> list[LanguageSyntax]:
        raise RuntimeError("boom")


class _BadItemsPlugin:
    @hookimpl
    def register_language_syntax(self) -> list[Any]:
        return [42, {"extensions": [".x"]}, LanguageSyntax(language="ok")]


class _NoneSyntaxPlugin:
    @hookimpl
    def register_language_syntax(self) -> None:
        return None


class TestPluginManager:
    def test_builtins_registered_first(self) -> None:
        pm = PluginManager()
        assert pm.list_plugin_names() == [BUILTIN_PLUGIN_NAME]

    def test_without_builtins(self) -> None:
        pm = PluginManager(builtins=False)
        assert pm.list_plugin_names() == []
        assert len(pm.build_catalog()) == 0

    def test_register_plugin_appends_name(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_FortranPlugin(), name="fortran")
        assert pm.list_plugin_names() == [BUILTIN_PLUGIN_NAME, "fortran"]

    def test_discover_returns_plugin_names(self, tmp_path: Path) -> None:
        names = PluginManager().discover_and_load(local_dir=tmp_path)
        assert BUILTIN_PLUGIN_NAME in names


class TestBuildCatalog:
    def test_builtin_languages(self) -> None:
        catalog = PluginManager().build_catalog()
        assert catalog.supports_regions("csharp")
        assert catalog.supports_comments("python")
        assert not catalog.supports_comments("plaintext")

    def test_plugin_languages_and_dicts(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_FortranPlugin())
        catalog = pm.build_catalog()
        assert "fortran" in catalog
        syntax = catalog.get_syntax("ini")
        assert syntax is not None
        assert syntax.line_comment == ";"

    def test_later_plugin_overrides(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_PythonOverridePlugin())
        syntax = pm.build_catalog().get_syntax("python")
        assert syntax is not None
        assert syntax.line_comment == "##"

    def test_extra_overrides_plugins(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_PythonOverridePlugin())
        extra = [LanguageSyntax(language="python", line_comment="#!")]
        syntax = pm.build_catalog(extra).get_syntax("python")
        assert syntax is not None
        assert syntax.line_comment == "#!"

    def test_failing_plugin_is_skipped(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_FailingPlugin())
        catalog = pm.build_catalog()
        assert catalog.supports_comments("csharp")

    def test_invalid_items_are_skipped(self) -> None:
        pm = PluginManager(builtins=False)
        pm.register_plugin(_BadItemsPlugin())
        assert pm.build_catalog().languages() == ["ok"]

    def test_none_result(self) -> None:
        pm = PluginManager(builtins=False)
        pm.register_plugin(_NoneSyntaxPlugin())
        assert len(pm.build_catalog()) == 0
