"""Tests for the execute command group."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click
import pytest
from click.testing import CliRunner

from textcmd.cli import cli


@pytest.fixture
def launched(monkeypatch: pytest.MonkeyPatch) -> list[tuple[str, dict[str, Any]]]:
    calls: list[tuple[str, dict[str, Any]]] = []

    def fake_launch(url: str, **kwargs: Any) -> int:
        calls.append((url, kwargs))
        return 0

    monkeypatch.setattr(click, "launch", fake_launch)
    return calls


@pytest.mark.usefixtures("_isolated_project")
class TestExecuteCommands:
    def test_execute_text_from_stdin(self, cli_runner: CliRunner, launched: list[Any]) -> None:
        result = cli_runner.invoke(cli, ["--json", "execute", "text"], input="  https://example.org \n")
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["target"] == "https://example.org"
        assert launched == [("https://example.org", {"wait": False, "locate": False})]

    def test_execute_text_line_range(self, cli_runner: CliRunner, launched: list[Any], tmp_path: Path) -> None:
        (tmp_path / "links.md").write_text("# Links\nhttps://example.org/a\n")
        cli_runner.invoke(cli, ["execute", "text", "links.md", "--lines", "2", "--wait"])
        assert launched == [("https://example.org/a", {"wait": True, "locate": False})]

    def test_execute_file(self, cli_runner: CliRunner, launched: list[Any], tmp_path: Path) -> None:
        (tmp_path / "report.html").write_text("<p/>")
        result = cli_runner.invoke(cli, ["execute", "file", "report.html", "--locate"])
        assert result.exit_code == 0
        assert launched == [("report.html", {"wait": False, "locate": True})]

    def test_execute_missing_file_is_unavailable(self, cli_runner: CliRunner, launched: list[Any]) -> None:
        result = cli_runner.invoke(cli, ["--json", "execute", "file", "nope.html"])
        assert json.loads(result.output)["data"]["reason"] == "unavailable"
        assert launched == []

    def test_launch_failure_exits_nonzero(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(click, "launch", lambda url, **kwargs: 1)
        result = cli_runner.invoke(cli, ["--json", "execute", "text"], input="bogus-target\n")
        assert result.exit_code == 1
        assert "COMMAND_FAILED" in result.output
