"""Tests for the command-line entry point."""

import sys
from unittest.mock import patch

import pytest
from red import __main__ as cli
from red.settings import EditorSettings


def test_version_flag(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["red", "--version"])
    cli.main()
    out = capsys.readouterr().out
    assert out.strip()
    assert len(out.splitlines()) == 1


def test_unreadable_file_exits_with_error(monkeypatch, capsys, tmp_path):
    monkeypatch.setattr(sys, "argv", ["red", str(tmp_path)])
    with patch("red.settings.load_settings", return_value=EditorSettings()), \
         patch("red.logs.configure_logging"), \
         patch("red.editor.TerminalInterface"), \
         pytest.raises(SystemExit) as excinfo:
        cli.main()
    assert excinfo.value.code == 1
    assert "Error loading file" in capsys.readouterr().err


def test_escape_bytes():
    assert cli._escape_bytes("\x1b[A") == "\\x1b[A"
