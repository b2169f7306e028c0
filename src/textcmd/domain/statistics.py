"""Selection statistics."""

from __future__ import annotations

from pydantic import BaseModel

from textcmd.domain.lines import LineSequence


class TextStatistics(BaseModel):
    """Counts describing a block of text."""

    model_config = {"frozen": True}

    lines: int
    blank_lines: int
    words: int
    characters: int
    non_whitespace_characters: int
    longest_line: int


def compute_statistics(text: str) -> TextStatistics:
    """Count lines, words, and characters of *text*.

    ``characters`` counts the raw text including terminators; the per-line
    figures ignore terminators.
    """
    seq = LineSequence.parse(text)
    contents = seq.contents()
    return TextStatistics(
        lines=len(contents),
        blank_lines=sum(1 for c in contents if not c.strip()),
        words=len(text.split()),
        characters=len(text),
        non_whitespace_characters=sum(1 for ch in text if not ch.isspace()),
        longest_line=max((len(c) for c in contents), default=0),
    )
