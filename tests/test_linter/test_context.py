"""Tests for context extraction and KO rendering."""

from __future__ import annotations

import pytest

from yaml_lint.file_io.output import STYLE_ERROR, BufferedOutput
from yaml_lint.linter.context import CONTEXT_RADIUS, get_context, render_failure
from yaml_lint.models import ParseFailure

TEN_LINES = "\n".join(f"line{i}" for i in range(1, 11))


class TestGetContext:
    @pytest.mark.parametrize("total_lines", [1, 2, 3, 5, 7, 12])
    @pytest.mark.parametrize("line_number", [1, 2, 3, 4, 6, 7, 12])
    def test_row_count_and_numbering(self, total_lines: int, line_number: int) -> None:
        content = "\n".join(f"row {i}" for i in range(1, total_lines + 1))
        rows = get_context(content, line_number)

        expected = max(0, min(total_lines, line_number - 1 + 3) - max(0, line_number - 3))
        assert len(rows) == expected
        numbers = [number for number, _ in rows]
        if numbers:
            assert numbers == list(range(numbers[0], numbers[0] + len(numbers)))
        for number, text in rows:
            assert text == f"row {number}"

    def test_window_is_centered_on_failing_line(self) -> None:
        rows = get_context(TEN_LINES, 5)
        assert [n for n, _ in rows] == [3, 4, 5, 6, 7]

    def test_window_clipped_at_start(self) -> None:
        rows = get_context(TEN_LINES, 1)
        assert [n for n, _ in rows] == [1, 2, 3]

    def test_window_clipped_at_end(self) -> None:
        rows = get_context(TEN_LINES, 10)
        assert [n for n, _ in rows] == [8, 9, 10]

    def test_trailing_newline_counts_as_empty_line(self) -> None:
        rows = get_context("a: 1\nb: [1,2\n", 3)
        assert rows == [(1, "a: 1"), (2, "b: [1,2"), (3, "")]

    def test_carriage_returns_are_kept(self) -> None:
        rows = get_context("a: 1\r\nb: 2\r\n", 1)
        assert rows[0] == (1, "a: 1\r")

    def test_bytes_are_decoded(self) -> None:
        rows = get_context("name: café\n".encode("utf-8"), 1)
        assert rows[0] == (1, "name: café")

    def test_zero_line_number(self) -> None:
        rows = get_context(TEN_LINES, 0)
        assert [n for n, _ in rows] == [1, 2]

    def test_negative_line_number_gives_empty_window(self) -> None:
        assert get_context(TEN_LINES, -1) == []

    def test_line_number_past_end(self) -> None:
        assert [n for n, _ in get_context(TEN_LINES, 12)] == [10]
        assert get_context(TEN_LINES, 20) == []

    def test_custom_radius(self) -> None:
        rows = get_context(TEN_LINES, 5, radius=1)
        assert [n for n, _ in rows] == [5]

    def test_default_radius(self) -> None:
        assert CONTEXT_RADIUS == 3


class TestRenderFailure:
    def test_block_with_source_label(self, output: BufferedOutput) -> None:
        render_failure(output, TEN_LINES, ParseFailure(5, "bad thing"), "conf/app.yml")

        assert output.lines == [
            "KO in conf/app.yml (line 5)",
            "   3      line3",
            "   4      line4",
            ">> 5      line5",
            ">> bad thing ",
            "   6      line6",
            "   7      line7",
        ]

    def test_header_without_label(self, output: BufferedOutput) -> None:
        render_failure(output, TEN_LINES, ParseFailure(2, "oops"))
        assert output.lines[0] == "KO (line 2)"

    def test_styles(self, output: BufferedOutput) -> None:
        render_failure(output, "a: [\n", ParseFailure(1, "boom"), "x.yml")

        header, failing_row, message = output.styled_lines[:3]
        assert header == [("KO", STYLE_ERROR), (" in x.yml (line 1)", None)]
        assert failing_row[0] == (">>", STYLE_ERROR)
        assert message == [(">> boom", STYLE_ERROR), (" ", None)]

    def test_other_rows_are_unstyled(self, output: BufferedOutput) -> None:
        render_failure(output, TEN_LINES, ParseFailure(5, "msg"))
        row = output.styled_lines[1]
        assert all(style is None for _, style in row)
        assert output.lines[1].startswith("   ")

    def test_wide_line_numbers_are_not_truncated(self, output: BufferedOutput) -> None:
        content = "\n".join("x" for _ in range(1234567))
        render_failure(output, content, ParseFailure(1234567, "m"))
        assert ">> 1234567 x" in output.lines

    def test_message_follows_failing_row(self, output: BufferedOutput) -> None:
        render_failure(output, TEN_LINES, ParseFailure(1, "first"))
        index = output.lines.index(">> 1      line1")
        assert output.lines[index + 1] == ">> first "

    # The message line is tied to the failing row: when that row is outside
    # the window the message is not printed.
    @pytest.mark.parametrize("line_number", [0, -4, 11, 40])
    def test_message_dropped_when_line_outside_window(
        self, output: BufferedOutput, line_number: int
    ) -> None:
        render_failure(output, TEN_LINES, ParseFailure(line_number, "lost"))

        assert output.lines[0] == f"KO (line {line_number})"
        assert not any("lost" in line for line in output.lines)
        assert not any(line.startswith(">>") for line in output.lines)

    def test_rendering_is_deterministic(self) -> None:
        first, second = BufferedOutput(), BufferedOutput()
        for out in (first, second):
            render_failure(out, TEN_LINES, ParseFailure(4, "again"), "f.yml")
        assert first.getvalue() == second.getvalue()
