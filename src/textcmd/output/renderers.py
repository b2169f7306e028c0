"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from textcmd.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from textcmd.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if not result.ok:
        _render_error(result, console, verbose=verbose)
    elif result.data.get("executed") is False:
        _render_skipped(result, console)
    else:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if "guid" in result.data:
        return str(result.data["guid"])
    reason = result.data.get("reason")
    if reason:
        return f"SKIPPED: {result.op} ({reason})"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="tc.ok")
    op = Text(f"  {result.op}", style="tc.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="tc.key")
    if isinstance(value, bool):
        v = Text("yes" if value else "no", style="tc.yes" if value else "tc.no")
    elif isinstance(value, int):
        v = Text(str(value), style="tc.count")
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Error / skip ──────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="tc.error")
    op = Text(f"  {result.op}", style="tc.op")
    console.print(label, op, Text(" — "), msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


def _render_skipped(result: ServiceResult, console: Console) -> None:
    label = Text("SKIPPED", style="tc.skip")
    op = Text(f"  {result.op}", style="tc.op")
    reason = result.data.get("reason", "unavailable")
    console.print(label, op, Text(f" — {reason}"))


# ── Rewrite commands ──────────────────────────────────────────────────


def _render_rewrite(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Sort, trim, comment, region, TODO and GUID results."""
    d = result.data
    _status_line(console, result)
    if d.get("reason") == "selection_changed":
        console.print(Text("  selection changed during the command; nothing written", style="tc.warning"))
        return
    for key in ("name", "guid"):
        if key in d:
            _field(console, key, d[key])
    if "written" in d:
        _field(console, "written", d["written"])
    if not d.get("changed", True):
        console.print(Text("  already in the requested form", style="dim"))
    if "lines_before" in d:
        _field(console, "lines", f"{d['lines_before']} → {d.get('lines_after', d['lines_before'])}")
    if verbose:
        _render_meta(console, result)


# ── Statistics ────────────────────────────────────────────────────────

_STAT_LABELS: tuple[tuple[str, str], ...] = (
    ("lines", "Lines"),
    ("blank_lines", "Blank lines"),
    ("words", "Words"),
    ("characters", "Characters"),
    ("non_whitespace_characters", "Non-whitespace characters"),
    ("longest_line", "Longest line"),
)


def _render_statistics(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    table = Table(show_header=False, pad_edge=False, box=None)
    table.add_column("Statistic", style="tc.key")
    table.add_column("Value", style="tc.count", justify="right")
    for key, label in _STAT_LABELS:
        if key in result.data:
            table.add_row(label, str(result.data[key]))
    console.print(table)


# ── Launch ────────────────────────────────────────────────────────────


def _render_launch(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "target", result.data.get("target", ""))
    if verbose:
        _field(console, "exit_code", result.data.get("exit_code", 0))


# ── Regions ───────────────────────────────────────────────────────────


def _render_regions(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "expanded", result.data.get("expanded", False))
    regions: list[dict[str, Any]] = result.data.get("regions", [])
    if not regions:
        console.print(Text("  no regions found", style="dim"))
        return
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Region", style="tc.name")
    table.add_column("Lines", justify="right")
    table.add_column("Depth", justify="right", style="dim")
    for region in regions:
        indent = "  " * int(region.get("depth", 0))
        table.add_row(
            f"{indent}{region.get('name', '')}",
            f"{region.get('start_line')}-{region.get('end_line')}",
            str(region.get("depth", 0)),
        )
    console.print(table)


# ── Availability ──────────────────────────────────────────────────────


def _render_available(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    commands: list[dict[str, Any]] = result.data.get("commands", [])
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Command", style="tc.op")
    table.add_column("Requires")
    table.add_column("Available")
    for row in commands:
        ok = bool(row.get("available"))
        table.add_row(
            str(row.get("command", "")),
            str(row.get("precondition", "")),
            Text("yes" if ok else "no", style="tc.yes" if ok else "tc.no"),
        )
    console.print(table)
    if result.data.get("language"):
        _field(console, "language", result.data["language"])


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    "sort-lines": _render_rewrite,
    "trim": _render_rewrite,
    "comment-selection": _render_rewrite,
    "uncomment-selection": _render_rewrite,
    "add-region": _render_rewrite,
    "add-todo-comment": _render_rewrite,
    "generate-guid": _render_rewrite,
    "statistics": _render_statistics,
    "execute-text": _render_launch,
    "execute-file": _render_launch,
    "collapse-all-regions": _render_regions,
    "expand-all-regions": _render_regions,
    "available": _render_available,
}
