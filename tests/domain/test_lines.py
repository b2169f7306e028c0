"""Tests for LineSequence parsing, serialization, and reordering."""

from __future__ import annotations

import pytest

from textcmd.domain.lines import Line, LineSequence, Terminator


class TestParse:
    @pytest.mark.parametrize(
        "text",
        ["", "a", "a\n", "a\r\nb\rc\nd", "\n\n", "\r\n", "x\r\r\n", "no terminator"],
    )
    def test_serialize_reproduces_input(self, text: str) -> None:
        assert LineSequence.parse(text).serialize() == text

    def test_empty_text_has_no_lines(self) -> None:
        assert len(LineSequence.parse("")) == 0

    def test_trailing_terminator_adds_no_empty_line(self) -> None:
        seq = LineSequence.parse("a\nb\n")
        assert seq.contents() == ["a", "b"]

    def test_mixed_terminators_recorded_per_line(self) -> None:
        seq = LineSequence.parse("a\r\nb\rc\nd")
        assert [line.terminator for line in seq] == [
            Terminator.CRLF,
            Terminator.CR,
            Terminator.LF,
            Terminator.NONE,
        ]

    def test_crlf_is_one_terminator(self) -> None:
        seq = LineSequence.parse("a\r\n")
        assert len(seq) == 1
        assert seq[0].terminator is Terminator.CRLF

    def test_cr_before_crlf(self) -> None:
        seq = LineSequence.parse("x\r\r\n")
        assert seq.contents() == ["x", ""]
        assert [line.terminator for line in seq] == [Terminator.CR, Terminator.CRLF]

    def test_blank_lines_are_kept(self) -> None:
        assert LineSequence.parse("\n\n").contents() == ["", ""]

    def test_only_last_line_may_be_unterminated(self) -> None:
        seq = LineSequence.parse("a\nb\nc")
        assert all(line.terminator is not Terminator.NONE for line in seq.lines[:-1])
        assert not seq.ends_with_terminator


class TestReplaceLines:
    def test_terminated_block_keeps_order_as_given(self) -> None:
        seq = LineSequence.parse("a\nb\r\n")
        reordered = seq.replace_lines(reversed(seq.lines))
        assert reordered.serialize() == "b\r\na\n"

    def test_unterminated_tail_stays_at_end(self) -> None:
        seq = LineSequence.parse("a\r\nb\nc")
        reordered = seq.replace_lines(reversed(seq.lines))
        assert reordered.serialize() == "c\r\nb\na"

    def test_dropped_unterminated_line_leaves_new_tail_bare(self) -> None:
        seq = LineSequence.parse("a\nb")
        reordered = seq.replace_lines([seq[0]])
        assert reordered.serialize() == "a"

    def test_empty_order(self) -> None:
        assert LineSequence.parse("a").replace_lines([]).serialize() == ""

    def test_original_is_not_mutated(self) -> None:
        seq = LineSequence.parse("b\na")
        seq.replace_lines(reversed(seq.lines))
        assert seq.serialize() == "b\na"


class TestMapContent:
    def test_terminators_never_move(self) -> None:
        seq = LineSequence.parse("a\r\nb\n")
        assert seq.map_content(str.upper).serialize() == "A\r\nB\n"

    def test_line_str_and_with_content(self) -> None:
        line = Line("x", Terminator.CR)
        assert str(line) == "x\r"
        assert str(line.with_content("y")) == "y\r"
