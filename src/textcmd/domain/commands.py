"""Command enumeration, precondition classes, and edit labels.

The command set is closed: anything not in :class:`Command` is never
available. Every command belongs to exactly one precondition class.
"""

from __future__ import annotations

from enum import StrEnum


class Command(StrEnum):
    """Supported selection commands."""

    SORT_LINES = "sort-lines"
    TRIM = "trim"
    STATISTICS = "statistics"
    EXECUTE_TEXT = "execute-text"
    EXECUTE_FILE = "execute-file"
    COMMENT_SELECTION = "comment-selection"
    UNCOMMENT_SELECTION = "uncomment-selection"
    ADD_REGION = "add-region"
    COLLAPSE_ALL_REGIONS = "collapse-all-regions"
    EXPAND_ALL_REGIONS = "expand-all-regions"
    GENERATE_GUID = "generate-guid"
    ADD_TODO_COMMENT = "add-todo-comment"


class Precondition(StrEnum):
    """What the editor context must provide for a command to run."""

    SELECTION = "selection"
    COMMENT = "comment"
    UNCOMMENT = "uncomment"
    REGIONS = "regions"
    FILE = "file"
    TODO = "todo"


PRECONDITIONS: dict[Command, Precondition] = {
    Command.SORT_LINES: Precondition.SELECTION,
    Command.TRIM: Precondition.SELECTION,
    Command.STATISTICS: Precondition.SELECTION,
    Command.EXECUTE_TEXT: Precondition.SELECTION,
    Command.GENERATE_GUID: Precondition.SELECTION,
    Command.COMMENT_SELECTION: Precondition.COMMENT,
    Command.UNCOMMENT_SELECTION: Precondition.UNCOMMENT,
    Command.ADD_REGION: Precondition.REGIONS,
    Command.COLLAPSE_ALL_REGIONS: Precondition.REGIONS,
    Command.EXPAND_ALL_REGIONS: Precondition.REGIONS,
    Command.EXECUTE_FILE: Precondition.FILE,
    Command.ADD_TODO_COMMENT: Precondition.TODO,
}

# Undo labels handed to the host with each write-back.
EDIT_LABELS: dict[Command, str] = {
    Command.SORT_LINES: "Sort Lines",
    Command.TRIM: "Trim",
    Command.COMMENT_SELECTION: "Comment Selection",
    Command.UNCOMMENT_SELECTION: "Uncomment Selection",
    Command.ADD_REGION: "Add Region",
    Command.GENERATE_GUID: "Generate GUID",
    Command.ADD_TODO_COMMENT: "Add TODO Comment",
}


def parse_command(value: str) -> Command | None:
    """Resolve a command identifier, or None if it is not a known command."""
    try:
        return Command(value)
    except ValueError:
        return None


def precondition_for(command: Command) -> Precondition | None:
    return PRECONDITIONS.get(command)


def edit_label(command: Command) -> str:
    """Human-readable undo label; falls back to a title-cased identifier."""
    return EDIT_LABELS.get(command, command.value.replace("-", " ").title())
