"""Language comment/region syntax and the transforms built on it.

The engine is not syntax-aware beyond these token tables: a line is
"commented" when its stripped content starts with the language's line
comment token (or sits inside a block comment pair), and a region is the
span between a begin marker and its matching end marker.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel

from textcmd.domain.lines import Line, LineSequence, Terminator

NAME_PLACEHOLDER = "{name}"


class UnsupportedLanguageError(ValueError):
    """Raised when a transform needs syntax the language does not define."""


class LanguageSyntax(BaseModel):
    """Comment and region tokens for one language.

    ``region_begin`` is a template containing ``{name}``; ``region_end``
    is literal.
    """

    model_config = {"frozen": True}

    language: str
    extensions: tuple[str, ...] = ()
    line_comment: str | None = None
    block_comment: tuple[str, str] | None = None
    region_begin: str | None = None
    region_end: str | None = None

    @property
    def supports_comments(self) -> bool:
        return bool(self.line_comment or self.block_comment)

    @property
    def supports_regions(self) -> bool:
        return bool(self.region_begin and self.region_end)

    @property
    def region_prefix(self) -> str:
        """Literal text a region begin line starts with."""
        if not self.region_begin:
            return ""
        return self.region_begin.split(NAME_PLACEHOLDER, 1)[0].rstrip(" \"'")


@dataclass(frozen=True)
class Region:
    """A matched region span, 1-based and inclusive of its marker lines."""

    name: str
    start_line: int
    end_line: int
    depth: int = 0

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "start_line": self.start_line,
            "end_line": self.end_line,
            "depth": self.depth,
        }


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _indent_of(content: str) -> str:
    return content[: len(content) - len(content.lstrip())]


def _common_indent(seq: LineSequence) -> int:
    widths = [len(_indent_of(c)) for c in seq.contents() if c.strip()]
    return min(widths, default=0)


def _nonblank_indexes(seq: LineSequence) -> list[int]:
    return [i for i, line in enumerate(seq) if line.content.strip()]


def _new_line_terminator(seq: LineSequence) -> Terminator:
    """Terminator used for lines the engine inserts into *seq*."""
    for line in seq:
        if line.terminator is not Terminator.NONE:
            return line.terminator
    return Terminator.LF


def _require_comments(syntax: LanguageSyntax) -> None:
    if not syntax.supports_comments:
        msg = f"Language {syntax.language!r} has no comment syntax"
        raise UnsupportedLanguageError(msg)


def _require_regions(syntax: LanguageSyntax) -> None:
    if not syntax.supports_regions:
        msg = f"Language {syntax.language!r} has no region syntax"
        raise UnsupportedLanguageError(msg)


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


def is_commented_line(content: str, syntax: LanguageSyntax) -> bool:
    stripped = content.strip()
    if not stripped:
        return False
    if syntax.line_comment and stripped.startswith(syntax.line_comment):
        return True
    if syntax.block_comment:
        opener, closer = syntax.block_comment
        return stripped.startswith(opener) or stripped.endswith(closer)
    return False


def has_commented_line(seq: LineSequence, syntax: LanguageSyntax) -> bool:
    """Whether at least one line of *seq* is already commented."""
    return any(is_commented_line(line.content, syntax) for line in seq)


def comment_lines(seq: LineSequence, syntax: LanguageSyntax) -> LineSequence:
    """Comment out every non-blank line.

    Line comments are inserted at the block's common indentation so the
    relative indentation of the lines survives. Languages with only block
    comments get the opener on the first non-blank line and the closer on
    the last one.
    """
    _require_comments(syntax)
    if syntax.line_comment:
        token = syntax.line_comment
        column = _common_indent(seq)

        def comment(content: str) -> str:
            if not content.strip():
                return content
            return f"{content[:column]}{token} {content[column:]}"

        return seq.map_content(comment)

    assert syntax.block_comment is not None
    opener, closer = syntax.block_comment
    indexes = _nonblank_indexes(seq)
    if not indexes:
        return seq.map_content(lambda c: c)
    first, last = indexes[0], indexes[-1]
    lines = list(seq)
    head = lines[first].content
    indent = _indent_of(head)
    lines[first] = lines[first].with_content(f"{indent}{opener} {head[len(indent) :]}")
    lines[last] = lines[last].with_content(f"{lines[last].content.rstrip()} {closer}")
    return LineSequence(tuple(lines))


def _strip_token(content: str, token: str) -> str:
    indent = _indent_of(content)
    rest = content[len(indent) :]
    if not rest.startswith(token):
        return content
    rest = rest[len(token) :]
    if rest.startswith(" "):
        rest = rest[1:]
    return indent + rest


def uncomment_lines(seq: LineSequence, syntax: LanguageSyntax) -> LineSequence:
    """Remove one level of commenting from the lines that carry it."""
    _require_comments(syntax)
    token = syntax.line_comment
    if token and any(line.content.lstrip().startswith(token) for line in seq):
        return seq.map_content(lambda c: _strip_token(c, token))

    if syntax.block_comment is None:
        return seq.map_content(lambda c: c)

    opener, closer = syntax.block_comment
    lines = list(seq)
    indexes = _nonblank_indexes(seq)
    if indexes:
        first, last = indexes[0], indexes[-1]
        lines[first] = lines[first].with_content(_strip_token(lines[first].content, opener))
        tail = lines[last].content.rstrip()
        if tail.endswith(closer):
            tail = tail[: -len(closer)].rstrip()
            lines[last] = lines[last].with_content(tail)
    return LineSequence(tuple(lines))


def todo_comment(seq: LineSequence, syntax: LanguageSyntax, message: str) -> LineSequence:
    """Insert a TODO comment line above the block, indented like its first line."""
    _require_comments(syntax)
    indent = _indent_of(seq[0].content) if len(seq) else ""
    if syntax.line_comment:
        comment = f"{indent}{syntax.line_comment} {message}"
    else:
        assert syntax.block_comment is not None
        opener, closer = syntax.block_comment
        comment = f"{indent}{opener} {message.rstrip()} {closer}"

    if not len(seq):
        return LineSequence((Line(comment),))
    return LineSequence((Line(comment, _new_line_terminator(seq)), *seq))


# ---------------------------------------------------------------------------
# Regions
# ---------------------------------------------------------------------------


def add_region(seq: LineSequence, syntax: LanguageSyntax, name: str) -> LineSequence:
    """Wrap the block in a named region, markers indented like its first line."""
    _require_regions(syntax)
    assert syntax.region_begin is not None and syntax.region_end is not None
    terminator = _new_line_terminator(seq)
    nonblank = _nonblank_indexes(seq)
    indent = _indent_of(seq[nonblank[0]].content) if nonblank else ""

    begin = Line(indent + syntax.region_begin.replace(NAME_PLACEHOLDER, name), terminator)
    body = list(seq)
    if body and body[-1].terminator is Terminator.NONE:
        body[-1] = Line(body[-1].content, terminator)
        end = Line(indent + syntax.region_end)
    else:
        end = Line(indent + syntax.region_end, terminator if body else Terminator.NONE)
    return LineSequence((begin, *body, end))


def _region_name(stripped: str, prefix: str) -> str:
    return stripped[len(prefix) :].strip().strip("\"'")


def find_regions(seq: LineSequence, syntax: LanguageSyntax) -> list[Region]:
    """Locate matched region spans, ordered by start line.

    Unbalanced end markers are ignored; unterminated begin markers are
    dropped.
    """
    _require_regions(syntax)
    assert syntax.region_end is not None
    prefix = syntax.region_prefix
    end_marker = syntax.region_end.strip()

    stack: list[tuple[str, int]] = []
    regions: list[Region] = []
    for number, line in enumerate(seq, start=1):
        stripped = line.content.strip()
        if stripped.startswith(end_marker):
            if stack:
                name, start = stack.pop()
                regions.append(Region(name, start, number, depth=len(stack)))
        elif prefix and stripped.startswith(prefix):
            stack.append((_region_name(stripped, prefix), number))
    return sorted(regions, key=lambda r: r.start_line)
