"""Concrete hosts: an in-memory buffer and a file with a line-range selection.

Both implement :class:`~textcmd.services.host.SelectionAccessor` and
:class:`~textcmd.services.host.DocumentContext`.

INVARIANT: Files are read and written as raw text with newline translation
disabled, so every line keeps the terminator it has on disk.
"""

from __future__ import annotations

import logging
import os
import re
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path

from textcmd.domain.lines import LineSequence

logger = logging.getLogger(__name__)

_RANGE = re.compile(r"^\s*(\d+)\s*(?::\s*(\d*)\s*)?$")


class InvalidSelectionError(ValueError):
    """Raised for a malformed or out-of-order line range."""


@dataclass(frozen=True)
class LineRange:
    """1-based inclusive line range; ``end=None`` runs to the end of the text.

    ``end == start - 1`` is the empty range just before line *start*.
    """

    start: int = 1
    end: int | None = None

    def __post_init__(self) -> None:
        if self.start < 1:
            msg = f"Line numbers start at 1, got {self.start}"
            raise InvalidSelectionError(msg)
        if self.end is not None and self.end < self.start - 1:
            msg = f"Range end {self.end} is before start {self.start}"
            raise InvalidSelectionError(msg)

    @classmethod
    def parse(cls, spec: str) -> LineRange:
        """Parse ``"N"``, ``"N:M"`` or ``"N:"``.

        Examples:
            >>> LineRange.parse("3:7")
            LineRange(start=3, end=7)
            >>> LineRange.parse("4")
            LineRange(start=4, end=4)
            >>> LineRange.parse("2:")
            LineRange(start=2, end=None)
        """
        match = _RANGE.match(spec)
        if match is None:
            msg = f"Invalid line range: {spec!r} (expected N, N:M or N:)"
            raise InvalidSelectionError(msg)
        start = int(match.group(1))
        if ":" not in spec:
            return cls(start, start)
        end = match.group(2)
        if end and int(end) < start:
            msg = f"Range end {end} is before start {start}"
            raise InvalidSelectionError(msg)
        return cls(start, int(end) if end else None)

    def split(self, text: str) -> tuple[str, str, str]:
        """Return ``(before, selected, after)`` for *text*."""
        lines = LineSequence.parse(text).lines
        first = self.start - 1
        last = len(lines) if self.end is None else self.end
        before = "".join(str(x) for x in lines[:first])
        selected = "".join(str(x) for x in lines[first:last])
        after = "".join(str(x) for x in lines[last:])
        return before, selected, after


class BufferDocument:
    """An in-memory document whose whole text is the selection.

    Backs stdin/stdout filter mode. ``edits`` records the label of every
    write, newest last.
    """

    def __init__(
        self,
        text: str = "",
        *,
        language: str | None = None,
        path: Path | None = None,
    ) -> None:
        self.text = text
        self.language = language
        self.path = path
        self.edits: list[str] = []

    def has_non_empty_selection(self) -> bool:
        return bool(self.text)

    def get_selected_text(self) -> str:
        return self.text

    def set_selected_text_if_unchanged(self, new_text: str, edit_label: str) -> bool:
        if new_text == self.text:
            return False
        self.text = new_text
        self.edits.append(edit_label)
        return True

    def active_language(self) -> str | None:
        return self.language

    def active_file_path(self) -> Path | None:
        return self.path


class FileDocument:
    """A file on disk with a line-range selection.

    Every read goes back to disk, so a concurrent edit of the selected lines
    is visible to the dispatcher's guard. Writes replace the file
    atomically and move the selection to cover the replacement text.
    """

    def __init__(
        self,
        path: Path,
        *,
        selection: LineRange | None = None,
        language: str | None = None,
        encoding: str = "utf-8",
    ) -> None:
        self.path = path
        self.selection = selection or LineRange()
        self.language = language
        self.encoding = encoding

    def read_text(self) -> str:
        with self.path.open(encoding=self.encoding, newline="") as fh:
            return fh.read()

    def has_non_empty_selection(self) -> bool:
        return bool(self.get_selected_text())

    def get_selected_text(self) -> str:
        if not self.path.is_file():
            return ""
        return self.selection.split(self.read_text())[1]

    def set_selected_text_if_unchanged(self, new_text: str, edit_label: str) -> bool:
        before, current, after = self.selection.split(self.read_text())
        if new_text == current:
            return False

        _atomic_write(self.path, before + new_text + after, self.encoding)
        if self.selection.end is not None:
            count = len(LineSequence.parse(new_text))
            self.selection = LineRange(self.selection.start, self.selection.start + count - 1)
        logger.debug("Applied %r to %s", edit_label, self.path)
        return True

    def active_language(self) -> str | None:
        return self.language

    def active_file_path(self) -> Path | None:
        return self.path


def _atomic_write(path: Path, text: str, encoding: str) -> None:
    """Write *text* to a sibling temp file, then replace *path* with it."""
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as fh:
            fh.write(text)
        if path.exists():
            shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
