"""Tests for TextcmdSettings — unified settings with TOML source."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from textcmd.config.settings import TextcmdSettings
from textcmd.domain.guids import GuidFormat


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TEXTCMD_CONFIG", "TEXTCMD_QUIET", "TEXTCMD_SORT__ORDINAL"):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = TextcmdSettings.from_cli(project_root=tmp_path)
        assert settings.project_root == tmp_path
        assert settings.json_output is False
        assert settings.sort.ordinal is False
        assert settings.trim.trim_end is True
        assert settings.guid.format is GuidFormat.DASHES
        assert settings.plugins.enabled is True

    def test_frozen(self, tmp_path: Path) -> None:
        settings = TextcmdSettings.from_cli(project_root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "textcmd.toml").write_text('[sort]\nordinal = true\n[todo]\nmessage = "FIXME: "\n')
        settings = TextcmdSettings.from_cli(project_root=tmp_path)
        assert settings.sort.ordinal is True
        assert settings.sort.ascending is True
        assert settings.todo.message == "FIXME: "

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[guid]\nformat = "numbers"\nuppercase = true\n')
        settings = TextcmdSettings.from_cli(config_path=str(custom), project_root=tmp_path)
        assert settings.guid.format is GuidFormat.NUMBERS
        assert settings.guid.uppercase is True
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "textcmd.toml").write_text("[sort\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            TextcmdSettings.from_cli(project_root=tmp_path)

    def test_languages_table(self, tmp_path: Path) -> None:
        (tmp_path / "textcmd.toml").write_text(
            '[languages.fortran]\nextensions = [".f90"]\nline_comment = "!"\n'
        )
        settings = TextcmdSettings.from_cli(project_root=tmp_path)
        syntaxes = settings.language_syntaxes()
        assert [s.language for s in syntaxes] == ["fortran"]
        assert syntaxes[0].line_comment == "!"

    def test_project_root_from_toml_location(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "textcmd.toml").write_text("")
        deep = tmp_path / "sub" / "deep"
        deep.mkdir(parents=True)
        monkeypatch.chdir(deep)
        settings = TextcmdSettings.from_cli()
        assert settings.project_root == tmp_path.resolve()
        assert settings.local_plugin_dir == tmp_path.resolve() / ".textcmd" / "plugins"


class TestPriority:
    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "textcmd.toml").write_text("quiet = true\n")
        settings = TextcmdSettings.from_cli(project_root=tmp_path, quiet=False)
        assert settings.quiet is False

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEXTCMD_QUIET", "true")
        settings = TextcmdSettings.from_cli(project_root=tmp_path)
        assert settings.quiet is True

    def test_nested_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "textcmd.toml").write_text("[sort]\nordinal = false\n")
        monkeypatch.setenv("TEXTCMD_SORT__ORDINAL", "true")
        settings = TextcmdSettings.from_cli(project_root=tmp_path)
        assert settings.sort.ordinal is True
