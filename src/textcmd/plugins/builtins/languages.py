"""Built-in plugin: comment and region syntax for common languages."""

from __future__ import annotations

from textcmd.domain.syntax import LanguageSyntax
from textcmd.plugins.hookspecs import hookimpl

_C_BLOCK = ("/*", "*/")
_XML_BLOCK = ("<!--", "-->")

BUILTIN_SYNTAXES: tuple[LanguageSyntax, ...] = (
    LanguageSyntax(
        language="csharp",
        extensions=(".cs", ".csx"),
        line_comment="//",
        block_comment=_C_BLOCK,
        region_begin="#region {name}",
        region_end="#endregion",
    ),
    LanguageSyntax(
        language="vb",
        extensions=(".vb",),
        line_comment="'",
        region_begin='#Region "{name}"',
        region_end="#End Region",
    ),
    LanguageSyntax(
        language="cpp",
        extensions=(".c", ".cc", ".cpp", ".cxx", ".h", ".hpp"),
        line_comment="//",
        block_comment=_C_BLOCK,
        region_begin="#pragma region {name}",
        region_end="#pragma endregion",
    ),
    LanguageSyntax(
        language="javascript",
        extensions=(".js", ".mjs", ".cjs", ".jsx"),
        line_comment="//",
        block_comment=_C_BLOCK,
        region_begin="//#region {name}",
        region_end="//#endregion",
    ),
    LanguageSyntax(
        language="typescript",
        extensions=(".ts", ".tsx"),
        line_comment="//",
        block_comment=_C_BLOCK,
        region_begin="//#region {name}",
        region_end="//#endregion",
    ),
    LanguageSyntax(
        language="java",
        extensions=(".java",),
        line_comment="//",
        block_comment=_C_BLOCK,
        region_begin="// region {name}",
        region_end="// endregion",
    ),
    LanguageSyntax(
        language="go",
        extensions=(".go",),
        line_comment="//",
        block_comment=_C_BLOCK,
    ),
    LanguageSyntax(
        language="rust",
        extensions=(".rs",),
        line_comment="//",
        block_comment=_C_BLOCK,
    ),
    LanguageSyntax(
        language="python",
        extensions=(".py", ".pyi"),
        line_comment="#",
        region_begin="# region {name}",
        region_end="# endregion",
    ),
    LanguageSyntax(
        language="powershell",
        extensions=(".ps1", ".psm1"),
        line_comment="#",
        block_comment=("<#", "#>"),
        region_begin="#region {name}",
        region_end="#endregion",
    ),
    LanguageSyntax(
        language="shell",
        extensions=(".sh", ".bash", ".zsh"),
        line_comment="#",
    ),
    LanguageSyntax(
        language="ruby",
        extensions=(".rb",),
        line_comment="#",
    ),
    LanguageSyntax(
        language="toml",
        extensions=(".toml",),
        line_comment="#",
    ),
    LanguageSyntax(
        language="yaml",
        extensions=(".yml", ".yaml"),
        line_comment="#",
    ),
    LanguageSyntax(
        language="sql",
        extensions=(".sql",),
        line_comment="--",
        block_comment=_C_BLOCK,
    ),
    LanguageSyntax(
        language="css",
        extensions=(".css",),
        block_comment=_C_BLOCK,
    ),
    LanguageSyntax(
        language="xml",
        extensions=(".xml", ".xaml", ".csproj", ".props", ".targets", ".config"),
        block_comment=_XML_BLOCK,
    ),
    LanguageSyntax(
        language="html",
        extensions=(".html", ".htm"),
        block_comment=_XML_BLOCK,
    ),
    LanguageSyntax(
        language="plaintext",
        extensions=(".txt",),
    ),
)


class BuiltinLanguagesPlugin:
    """Registers :data:`BUILTIN_SYNTAXES`."""

    @hookimpl
    def register_language_syntax(self) -> list[LanguageSyntax]:
        return list(BUILTIN_SYNTAXES)
