"""GUID text formats."""

from __future__ import annotations

import uuid
from enum import StrEnum


class GuidFormat(StrEnum):
    """Textual GUID layouts, named after their punctuation."""

    DASHES = "dashes"
    NUMBERS = "numbers"
    BRACES = "braces"
    PARENTHESES = "parentheses"
    STRUCTURE = "structure"


def _structure(value: uuid.UUID) -> str:
    h = value.hex
    tail = ",".join(f"0x{h[i : i + 2]}" for i in range(16, 32, 2))
    return f"{{0x{h[0:8]},0x{h[8:12]},0x{h[12:16]},{{{tail}}}}}"


def format_guid(value: uuid.UUID, fmt: GuidFormat = GuidFormat.DASHES, *, uppercase: bool = False) -> str:
    """Render *value* in the requested layout.

    Examples:
        >>> u = uuid.UUID("12345678-9abc-def0-1234-56789abcdef0")
        >>> format_guid(u, GuidFormat.BRACES)
        '{12345678-9abc-def0-1234-56789abcdef0}'
        >>> format_guid(u, GuidFormat.NUMBERS, uppercase=True)
        '123456789ABCDEF0123456789ABCDEF0'
    """
    if fmt == GuidFormat.NUMBERS:
        text = value.hex
    elif fmt == GuidFormat.BRACES:
        text = f"{{{value}}}"
    elif fmt == GuidFormat.PARENTHESES:
        text = f"({value})"
    elif fmt == GuidFormat.STRUCTURE:
        text = _structure(value)
    else:
        text = str(value)
    return text.upper() if uppercase else text


def new_guid(fmt: GuidFormat = GuidFormat.DASHES, *, uppercase: bool = False) -> str:
    return format_guid(uuid.uuid4(), fmt, uppercase=uppercase)
