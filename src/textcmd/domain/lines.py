"""LineSequence — a text block modelled as ordered (content, terminator) pairs.

INVARIANT: ``LineSequence.parse(text).serialize() == text`` for every text.
Only the final line may lack a terminator.

Every transform in the engine takes a LineSequence and returns a new one;
nothing here mutates in place.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, replace
from enum import StrEnum

# Longest alternative first so CRLF is never split into CR + LF.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class Terminator(StrEnum):
    """Line terminator variants, recorded exactly as found."""

    NONE = ""
    LF = "\n"
    CR = "\r"
    CRLF = "\r\n"


@dataclass(frozen=True)
class Line:
    """One line of a block: its content and the terminator that followed it."""

    content: str
    terminator: Terminator = Terminator.NONE

    def __str__(self) -> str:
        return self.content + self.terminator

    def with_content(self, content: str) -> Line:
        return replace(self, content=content)


@dataclass(frozen=True)
class LineSequence:
    """Immutable ordered sequence of :class:`Line` values."""

    lines: tuple[Line, ...] = ()

    @classmethod
    def parse(cls, text: str) -> LineSequence:
        """Split *text* at CR, LF, or CRLF boundaries in a single scan.

        A trailing terminator does not produce an extra empty line, so
        ``"a\\n"`` is one line and ``""`` is zero lines.

        Examples:
            >>> [str(x) for x in LineSequence.parse("a\\r\\nb")]
            ['a\\r\\n', 'b']
        """
        lines: list[Line] = []
        pos = 0
        for match in _LINE_BREAK.finditer(text):
            lines.append(Line(text[pos : match.start()], Terminator(match.group())))
            pos = match.end()
        if pos < len(text):
            lines.append(Line(text[pos:]))
        return cls(tuple(lines))

    def serialize(self) -> str:
        """Concatenate every line with its recorded terminator."""
        return "".join(str(line) for line in self.lines)

    @property
    def ends_with_terminator(self) -> bool:
        return not self.lines or self.lines[-1].terminator is not Terminator.NONE

    def replace_lines(self, new_order: Iterable[Line]) -> LineSequence:
        """Return a sequence holding *new_order*, terminators attached to their lines.

        When this block ended without a terminator the result does too: the
        unterminated line swaps terminators with whichever line now sits
        last, or the new last line drops its terminator if the unterminated
        one is gone.
        """
        lines = list(new_order)
        if not lines or self.ends_with_terminator:
            return LineSequence(tuple(lines))

        last = len(lines) - 1
        open_index = next(
            (i for i, line in enumerate(lines) if line.terminator is Terminator.NONE),
            None,
        )
        if open_index is None:
            lines[last] = replace(lines[last], terminator=Terminator.NONE)
        elif open_index != last:
            moved, tail = lines[open_index], lines[last]
            lines[open_index] = replace(moved, terminator=tail.terminator)
            lines[last] = replace(tail, terminator=Terminator.NONE)
        return LineSequence(tuple(lines))

    def map_content(self, fn: Callable[[str], str]) -> LineSequence:
        """Apply *fn* to every line's content; terminators never move."""
        return LineSequence(tuple(line.with_content(fn(line.content)) for line in self.lines))

    def contents(self) -> list[str]:
        return [line.content for line in self.lines]

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __getitem__(self, index: int) -> Line:
        return self.lines[index]
