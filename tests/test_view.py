"""Tests for viewport arithmetic and rendering."""

from unittest.mock import Mock

from red.buffer import Buffer, Cursor
from red.document import Document
from red.view import (
    TerminalView,
    cursor_screen_position,
    highlight,
    status_line,
    visible_lines,
    window_start,
)


def create_buffer(lines, row=0, col=0, path="f.py"):
    buffer = Buffer(path, Document(lines))
    buffer.cursor = Cursor(row, col)
    return buffer


def test_window_starts_half_a_screen_above_cursor():
    assert window_start(10, 6) == 7
    assert window_start(0, 5) == -2


def test_visible_lines_wrap_around_document():
    """Rows above the top wrap to the end of the document."""
    buffer = create_buffer(["a", "b", "c"], row=0)
    rows = visible_lines(buffer, height=6, width=3)
    # start = 0 - 3 = -3 -> rows -3..1
    assert rows == ["a  ", "b  ", "c  ", "a  ", "b  "]


def test_visible_lines_renders_height_minus_one_rows():
    buffer = create_buffer(["x"] * 50, row=25)
    assert len(visible_lines(buffer, height=20, width=10)) == 19


def test_long_lines_are_not_truncated():
    buffer = create_buffer(["0123456789"], row=0)
    rows = visible_lines(buffer, height=2, width=4)
    assert rows == ["0123456789"]


def test_cursor_stays_on_middle_row():
    buffer = create_buffer(["a"], row=40, col=7)
    assert cursor_screen_position(buffer, 24) == (12, 7)


def test_status_line_is_padded_to_width():
    status = status_line("normal", ["a(0,0)", " b(1,2)(+) "], "w", "written", 60)
    assert len(status) == 60
    assert status.startswith("NORMAL a(0,0)─ b(1,2)(+)  w written")


def test_status_line_is_truncated_to_width():
    status = status_line("insert", ["a-very-long-path.py(0,0)"], "", "", 10)
    assert status == "INSERT a-v"


def test_highlight_strips_trailing_newline():
    rendered = highlight("x = 1   ", "python")
    assert not rendered.endswith("\n")
    assert "x" in rendered


def test_highlight_unknown_language_falls_back_to_text():
    assert highlight("plain", "no-such-language").rstrip("\n") == "plain"


def test_carriage_returns_stay_on_one_row():
    """Lines from CRLF files keep their \\r but render it as ^M."""
    buffer = create_buffer(["a = 1\r", "b\r"], row=0)
    rows = visible_lines(buffer, height=5, width=20)
    assert rows[2] == "a = 1^M".ljust(20)

    for row in rows:
        rendered = highlight(row, "python")
        assert "\n" not in rendered
        assert "\r" not in rendered


def test_highlight_spells_out_carriage_return():
    rendered = highlight("x\r", "no-such-language")
    assert rendered == "x^M"


def test_draw_never_sends_newlines_to_terminal():
    terminal = Mock()
    terminal.geometry.return_value = (4, 20)
    view = TerminalView(terminal)
    view.draw(create_buffer(["a = 1\r", "b\r"], row=1), "normal", [], "", "")
    for call in terminal.draw_line.call_args_list:
        assert "\n" not in call[0][1]


def test_draw_writes_rows_status_and_cursor():
    terminal = Mock()
    terminal.geometry.return_value = (4, 5)
    view = TerminalView(terminal, highlight_enabled=False)
    buffer = create_buffer(["one", "two", "three"], row=1, col=2)

    view.draw(buffer, "normal", [" f.py(1,2) "], "", "")

    # start row = 1 - 2 = -1 -> rows -1, 0, 1
    terminal.draw_line.assert_any_call(0, "three")
    terminal.draw_line.assert_any_call(1, "one  ")
    terminal.draw_line.assert_any_call(2, "two  ")
    assert terminal.draw_line.call_count == 3
    terminal.draw_status.assert_called_once_with(3, "NORMA", "normal")
    terminal.move_cursor.assert_called_once_with(2, 2)


def test_draw_highlights_with_buffer_language():
    terminal = Mock()
    terminal.geometry.return_value = (2, 8)
    view = TerminalView(terminal)
    view.render_line = Mock(side_effect=lambda text, language: f"[{language}]{text}")

    view.draw(create_buffer(["package main"], path="m.go"), "normal", [], "", "")

    terminal.draw_line.assert_called_once_with(0, "[go]package main")
