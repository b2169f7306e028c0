"""Per-line whitespace trimming."""

from __future__ import annotations

from pydantic import BaseModel

from textcmd.domain.lines import LineSequence


class TrimPolicy(BaseModel):
    """Which ends of each line to trim."""

    model_config = {"frozen": True}

    trim_start: bool = False
    trim_end: bool = True

    @property
    def is_noop(self) -> bool:
        return not (self.trim_start or self.trim_end)


def trim_lines(seq: LineSequence, policy: TrimPolicy) -> LineSequence:
    """Strip leading and/or trailing whitespace from every line's content.

    Terminators are untouched and whitespace-only lines become empty lines.
    Always returns a new sequence, even when both flags are off.
    """

    def trim(content: str) -> str:
        if policy.trim_start:
            content = content.lstrip()
        if policy.trim_end:
            content = content.rstrip()
        return content

    return seq.map_content(trim)
