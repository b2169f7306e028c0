"""Tests for BufferDocument, FileDocument, and LineRange."""

from __future__ import annotations

from pathlib import Path

import pytest

from textcmd.infrastructure.documents import (
    BufferDocument,
    FileDocument,
    InvalidSelectionError,
    LineRange,
)


class TestLineRange:
    @pytest.mark.parametrize(
        ("spec", "expected"),
        [("3:7", LineRange(3, 7)), ("4", LineRange(4, 4)), ("2:", LineRange(2, None)), (" 1 : 2 ", LineRange(1, 2))],
    )
    def test_parse(self, spec: str, expected: LineRange) -> None:
        assert LineRange.parse(spec) == expected

    @pytest.mark.parametrize("spec", ["", "a", "0", "5:2", "1:2:3", "-1"])
    def test_parse_invalid(self, spec: str) -> None:
        with pytest.raises(InvalidSelectionError):
            LineRange.parse(spec)

    def test_split(self) -> None:
        assert LineRange(2, 3).split("a\nb\r\nc\nd") == ("a\n", "b\r\nc\n", "d")

    def test_split_past_end(self) -> None:
        assert LineRange(5, 9).split("a\nb\n") == ("a\nb\n", "", "")

    def test_default_covers_everything(self) -> None:
        assert LineRange().split("a\nb") == ("", "a\nb", "")

    def test_empty_range_splits_before_start(self) -> None:
        assert LineRange(2, 1).split("a\nb\n") == ("a\n", "", "b\n")

    def test_end_before_empty_range_rejected(self) -> None:
        with pytest.raises(InvalidSelectionError):
            LineRange(3, 1)


class TestBufferDocument:
    def test_write_only_when_different(self) -> None:
        doc = BufferDocument("a\n")
        assert doc.set_selected_text_if_unchanged("a\n", "Trim") is False
        assert doc.set_selected_text_if_unchanged("b\n", "Trim") is True
        assert doc.text == "b\n"
        assert doc.edits == ["Trim"]

    def test_context(self, tmp_path: Path) -> None:
        doc = BufferDocument("", language="python", path=tmp_path / "x.py")
        assert doc.active_language() == "python"
        assert doc.active_file_path() == tmp_path / "x.py"
        assert not doc.has_non_empty_selection()


class TestFileDocument:
    def test_reads_selected_lines(self, tmp_path: Path) -> None:
        path = tmp_path / "f.txt"
        path.write_bytes(b"one\r\ntwo\nthree\n")
        doc = FileDocument(path, selection=LineRange(2, 3))
        assert doc.get_selected_text() == "two\nthree\n"

    def test_write_preserves_surrounding_bytes(self, tmp_path: Path) -> None:
        path = tmp_path / "f.txt"
        path.write_bytes(b"head\r\nb\na\ntail")
        doc = FileDocument(path, selection=LineRange(2, 3))
        assert doc.set_selected_text_if_unchanged("a\nb\n", "Sort Lines") is True
        assert path.read_bytes() == b"head\r\na\nb\ntail"

    def test_unchanged_text_leaves_file_alone(self, tmp_path: Path) -> None:
        path = tmp_path / "f.txt"
        path.write_text("a\n")
        before = path.stat().st_mtime_ns
        doc = FileDocument(path)
        assert doc.set_selected_text_if_unchanged("a\n", "Trim") is False
        assert path.stat().st_mtime_ns == before

    def test_selection_follows_replacement(self, tmp_path: Path) -> None:
        path = tmp_path / "f.cs"
        path.write_text("x\ny\nz\n")
        doc = FileDocument(path, selection=LineRange(2, 2))
        doc.set_selected_text_if_unchanged("#region R\ny\n#endregion\n", "Add Region")
        assert doc.selection == LineRange(2, 4)
        assert doc.get_selected_text() == "#region R\ny\n#endregion\n"

    def test_empty_replacement_collapses_selection(self, tmp_path: Path) -> None:
        path = tmp_path / "f.txt"
        path.write_text("a\nb\nc\n")
        doc = FileDocument(path, selection=LineRange(1, 2))
        assert doc.set_selected_text_if_unchanged("", "Trim") is True
        assert path.read_text() == "c\n"
        assert doc.selection == LineRange(1, 0)
        assert doc.get_selected_text() == ""
        assert not doc.has_non_empty_selection()

    def test_missing_file_has_no_selection(self, tmp_path: Path) -> None:
        doc = FileDocument(tmp_path / "missing.txt")
        assert doc.get_selected_text() == ""
        assert not doc.has_non_empty_selection()

    def test_no_temp_files_left_behind(self, tmp_path: Path) -> None:
        path = tmp_path / "f.txt"
        path.write_text("b\na\n")
        FileDocument(path).set_selected_text_if_unchanged("a\nb\n", "Sort Lines")
        assert sorted(p.name for p in tmp_path.iterdir()) == ["f.txt"]
