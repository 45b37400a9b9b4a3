"""Tests for the terminal interface with blessed and curtsies mocked out."""

from unittest.mock import MagicMock, patch

import pytest
from red.terminal import TerminalInterface


@pytest.fixture
def term():
    term = MagicMock()
    term.height, term.width = 24, 80
    term.move.side_effect = lambda y, x: f"<{y},{x}>"
    term.on_color.side_effect = lambda c: f"<bg{c}>"
    term.bold, term.black, term.normal = "<b>", "<k>", "<n>"
    return term


def test_geometry(term):
    assert TerminalInterface(term).geometry() == (24, 80)


@pytest.mark.parametrize("mode,color", [
    ("normal", 4), ("insert", 2), ("command", 1), ("search", 5), ("NORMAL", 4), (None, 5),
])
def test_mode_style_colours(term, mode, color):
    assert TerminalInterface(term).mode_style(mode) == f"<b><k><bg{color}>"


def test_draw_status_uses_mode_colour(term, capsys):
    TerminalInterface(term).draw_status(23, "INSERT f.py(0,0)", "insert")
    assert capsys.readouterr().out == "<23,0><b><k><bg2>INSERT f.py(0,0)<n>"


def test_get_key_without_setup_returns_none(term):
    assert TerminalInterface(term).get_key(0) is None


def test_get_key_reads_curtsies_events(term):
    with patch("red.terminal.Input") as input_cls:
        input_cls.return_value.send.side_effect = ['<UP>', None]
        interface = TerminalInterface(term)
        interface.setup(fullscreen=False)

        assert interface.get_key(0) == '<UP>'
        assert interface.get_key(0) is None
        input_cls.return_value.send.assert_called_with(0)

        interface.cleanup()
        input_cls.return_value.__exit__.assert_called_once()
        assert interface.get_key(0) is None
