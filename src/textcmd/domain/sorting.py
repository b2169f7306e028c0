"""Line sorting under a configurable comparison policy.

Sorting permutes whole :class:`~textcmd.domain.lines.Line` values, so each
line keeps the terminator it was parsed with. Only the derived sort key is
filtered; line content is never altered.
"""

from __future__ import annotations

import locale
import unicodedata
from collections.abc import Callable

from pydantic import BaseModel

from textcmd.domain.lines import Line, LineSequence


class SortPolicy(BaseModel):
    """Comparison options for one sort, frozen for its duration."""

    model_config = {"frozen": True}

    case_sensitive: bool = False
    ordinal: bool = False
    ascending: bool = True
    ignore_leading_whitespace: bool = False
    ignore_punctuation: bool = False
    eliminate_duplicates: bool = False


def _is_punctuation(char: str) -> bool:
    return unicodedata.category(char).startswith("P")


def sort_key(content: str, policy: SortPolicy) -> str:
    """Derive the filtered key a line is compared by.

    Examples:
        >>> sort_key("  b-c", SortPolicy(ignore_leading_whitespace=True, ignore_punctuation=True))
        'bc'
    """
    key = content
    if policy.ignore_leading_whitespace:
        key = key.lstrip()
    if policy.ignore_punctuation:
        key = "".join(ch for ch in key if not _is_punctuation(ch))
    return key


def comparer_for(policy: SortPolicy) -> Callable[[str], str]:
    """Return the key transform matching the policy's ordinal/case flags.

    Ordinal comparison orders by code point; otherwise the current locale's
    collation applies via :func:`locale.strxfrm`. Case folding happens
    before either.
    """
    fold: Callable[[str], str] = (lambda s: s) if policy.case_sensitive else str.casefold
    if policy.ordinal:
        return fold
    return lambda s: locale.strxfrm(fold(s))


def sort_lines(seq: LineSequence, policy: SortPolicy) -> LineSequence:
    """Return *seq* reordered under *policy*.

    The sort is stable in both directions: lines with equal keys keep their
    original relative order whether ascending or descending. With
    ``eliminate_duplicates`` only the first line of each run of equal keys
    survives, with its own content and terminator.
    """
    compare = comparer_for(policy)
    keyed = [(compare(sort_key(line.content, policy)), line) for line in seq]
    keyed.sort(key=lambda pair: pair[0], reverse=not policy.ascending)

    ordered: list[Line] = []
    previous: str | None = None
    for key, line in keyed:
        if policy.eliminate_duplicates and ordered and key == previous:
            continue
        ordered.append(line)
        previous = key

    return seq.replace_lines(ordered)
