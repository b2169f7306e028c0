"""Tests for operation-specific Rich renderers."""

from __future__ import annotations

from textcmd.output.renderers import render_quiet, render_result
from textcmd.services.result import ServiceError, ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


# ── Error / skip ─────────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("trim", "COMMAND_FAILED", "disk full"))
        assert "ERROR" in output
        assert "trim" in output
        assert "disk full" in output

    def test_verbose_shows_detail(self) -> None:
        output = render_result(_err("trim", "COMMAND_FAILED", "Bad", exception="OSError"), verbose=True)
        assert "detail" in output
        assert "OSError" in output

    def test_no_error_object(self) -> None:
        assert "Unknown error" in render_result(ServiceResult(ok=False, op="trim"))


class TestSkippedRenderer:
    def test_unavailable(self) -> None:
        output = render_result(ServiceResult.skipped("sort-lines", "unavailable"))
        assert "SKIPPED" in output
        assert "sort-lines" in output
        assert "unavailable" in output

    def test_selection_changed(self) -> None:
        output = render_result(ServiceResult.skipped("sort-lines", "selection_changed", executed=True))
        assert "OK" in output
        assert "selection changed" in output


# ── Rewrite ──────────────────────────────────────────────────────────


class TestRewriteRenderer:
    def test_written(self) -> None:
        result = _ok("sort-lines", executed=True, written=True, changed=True, lines_before=3, lines_after=2)
        output = render_result(result)
        assert "OK" in output
        assert "written: yes" in output
        assert "3 → 2" in output

    def test_unchanged(self) -> None:
        result = _ok("trim", executed=True, written=False, changed=False, lines_before=1, lines_after=1)
        output = render_result(result)
        assert "written: no" in output
        assert "already in the requested form" in output

    def test_guid_and_name(self) -> None:
        assert "guid: abc" in render_result(_ok("generate-guid", executed=True, guid="abc"))
        assert "name: Fields" in render_result(_ok("add-region", executed=True, name="Fields", written=True))

    def test_verbose_meta(self) -> None:
        result = ServiceResult(ok=True, op="trim", data={"executed": True}, meta={"edit_label": "Trim"})
        assert "edit_label: Trim" in render_result(result, verbose=True)


# ── Other ops ────────────────────────────────────────────────────────


class TestStatisticsRenderer:
    def test_table(self) -> None:
        result = _ok("statistics", executed=True, lines=3, words=7, longest_line=12)
        output = render_result(result)
        assert "Lines" in output
        assert "Words" in output
        assert "12" in output


class TestRegionsRenderer:
    def test_lists_regions(self) -> None:
        regions = [{"name": "Outer", "start_line": 1, "end_line": 9, "depth": 0}]
        output = render_result(_ok("collapse-all-regions", executed=True, expanded=False, regions=regions))
        assert "Outer" in output
        assert "1-9" in output

    def test_no_regions(self) -> None:
        output = render_result(_ok("expand-all-regions", executed=True, expanded=True, regions=[]))
        assert "no regions found" in output


class TestAvailableRenderer:
    def test_table(self) -> None:
        rows = [
            {"command": "sort-lines", "precondition": "selection", "available": True},
            {"command": "add-region", "precondition": "regions", "available": False},
        ]
        output = render_result(_ok("available", commands=rows, language="csharp"))
        assert "sort-lines" in output
        assert "add-region" in output
        assert "yes" in output
        assert "csharp" in output


class TestLaunchRenderer:
    def test_target(self) -> None:
        output = render_result(_ok("execute-text", executed=True, target="https://example.org", exit_code=0))
        assert "https://example.org" in output


class TestGenericRenderer:
    def test_fallback(self) -> None:
        output = render_result(_ok("region-names", default="A", names=["A", "B"]))
        assert "region-names" in output
        assert "default: A" in output


# ── Quiet ────────────────────────────────────────────────────────────


class TestQuiet:
    def test_ok(self) -> None:
        assert render_quiet(_ok("trim", executed=True, written=True)) == "OK: trim"

    def test_guid_prints_value(self) -> None:
        assert render_quiet(_ok("generate-guid", executed=True, guid="abc")) == "abc"

    def test_skipped(self) -> None:
        assert render_quiet(ServiceResult.skipped("trim", "unavailable")) == "SKIPPED: trim (unavailable)"

    def test_error(self) -> None:
        assert render_quiet(_err("trim", "X", "nope")) == "ERROR: trim — nope"
