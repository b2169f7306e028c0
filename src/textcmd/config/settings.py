"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``TEXTCMD_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``textcmd.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from textcmd.config.discovery import find_config
from textcmd.config.models import (
    GuidConfig,
    LanguageConfig,
    PluginsConfig,
    RegionsConfig,
    SortConfig,
    TodoConfig,
    TrimConfig,
)
from textcmd.domain.syntax import LanguageSyntax


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``textcmd.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for the TOML path during construction.
_tls = threading.local()


class TextcmdSettings(BaseSettings):
    """Unified, frozen settings for the textcmd CLI.

    Attributes:
        project_root: Directory the config was found in (or CWD), used to
            resolve the local plugin directory.
        config_path: The TOML file in effect, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TEXTCMD_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    sort: SortConfig = Field(default_factory=SortConfig)
    trim: TrimConfig = Field(default_factory=TrimConfig)
    guid: GuidConfig = Field(default_factory=GuidConfig)
    regions: RegionsConfig = Field(default_factory=RegionsConfig)
    todo: TodoConfig = Field(default_factory=TodoConfig)
    languages: dict[str, LanguageConfig] = Field(default_factory=dict)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> TextcmdSettings:
        """Construct settings from a CLI invocation.

        Discovers ``textcmd.toml`` via walk-up from *project_root* (or uses
        the explicit *config_path*) and merges CLI flags on top.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(project_root)

        resolved_root = project_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(project_root=resolved_root, config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None

    def language_syntaxes(self) -> list[LanguageSyntax]:
        """User-defined languages from the ``[languages]`` tables."""
        return [cfg.to_syntax(name) for name, cfg in self.languages.items()]

    @property
    def local_plugin_dir(self) -> Path:
        return self.project_root / self.plugins.local_dir
