"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, textcmd.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from textcmd.domain.guids import GuidFormat
from textcmd.domain.sorting import SortPolicy
from textcmd.domain.syntax import LanguageSyntax
from textcmd.domain.trimming import TrimPolicy

# --- textcmd.toml sections ---


class SortConfig(BaseModel):
    """[sort] section."""

    model_config = {"frozen": True}

    case_sensitive: bool = False
    ordinal: bool = False
    ascending: bool = True
    ignore_leading_whitespace: bool = False
    ignore_punctuation: bool = False
    eliminate_duplicates: bool = False

    def to_policy(self, **overrides: bool | None) -> SortPolicy:
        """Build a SortPolicy, letting non-None *overrides* win."""
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return SortPolicy(**values)


class TrimConfig(BaseModel):
    """[trim] section."""

    model_config = {"frozen": True}

    trim_start: bool = False
    trim_end: bool = True

    def to_policy(self, **overrides: bool | None) -> TrimPolicy:
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return TrimPolicy(**values)


class GuidConfig(BaseModel):
    """[guid] section."""

    model_config = {"frozen": True}

    format: GuidFormat = GuidFormat.DASHES
    uppercase: bool = False


class RegionsConfig(BaseModel):
    """[regions] section. The first predefined name is the default."""

    model_config = {"frozen": True}

    predefined: list[str] = Field(
        default_factory=lambda: [
            "Private Data Members",
            "Constructors",
            "Public Properties",
            "Public Methods",
            "Private Methods",
        ]
    )

    @property
    def default_name(self) -> str:
        return self.predefined[0] if self.predefined else "Region"


class TodoConfig(BaseModel):
    """[todo] section."""

    model_config = {"frozen": True}

    message: str = "TODO: "


class LanguageConfig(BaseModel):
    """[languages.<id>] section — a user-defined language syntax."""

    model_config = {"frozen": True}

    extensions: list[str] = Field(default_factory=list)
    line_comment: str | None = None
    block_comment: tuple[str, str] | None = None
    region_begin: str | None = None
    region_end: str | None = None

    def to_syntax(self, language: str) -> LanguageSyntax:
        return LanguageSyntax(
            language=language,
            extensions=tuple(self.extensions),
            line_comment=self.line_comment,
            block_comment=self.block_comment,
            region_begin=self.region_begin,
            region_end=self.region_end,
        )


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    local_dir: str = ".textcmd/plugins"
    enabled: bool = True
