"""Viewport arithmetic and syntax highlighting."""

from functools import lru_cache

from pygments import highlight as pygments_highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from .buffer import Buffer
from .constants import EditorConstants


@lru_cache(maxsize=16)
def _lexer_for(language: str):
    try:
        return get_lexer_by_name(language, stripnl=False)
    except ClassNotFound:
        return get_lexer_by_name("text", stripnl=False)


@lru_cache(maxsize=4)
def _formatter_for(background: str) -> TerminalFormatter:
    return TerminalFormatter(bg=background)


def displayable(line: str) -> str:
    """Spell out carriage returns so each line stays on one screen row."""
    return line.replace("\r", EditorConstants.CARRIAGE_RETURN_DISPLAY)


def highlight(text: str, language: str, background: str = "dark") -> str:
    """Colorize one padded line for the terminal."""
    # Lexers turn a lone \r into \n
    rendered = pygments_highlight(displayable(text), _lexer_for(language), _formatter_for(background))
    # pygments always terminates its output with a newline
    if rendered.endswith("\n"):
        rendered = rendered[:-1]
    return rendered


def window_start(cursor_row: int, height: int) -> int:
    """First logical row shown when the cursor sits mid-screen."""
    return cursor_row - height // 2


def cursor_screen_position(buffer: Buffer, height: int) -> tuple[int, int]:
    """The terminal cursor never leaves the middle row."""
    return height // 2, buffer.cursor.col


def visible_lines(buffer: Buffer, height: int, width: int) -> list[str]:
    """Return the ``height - 1`` wrapped rows around the cursor.

    Each row is right-padded with spaces to ``width``; longer rows are
    left whole.
    """
    start = window_start(buffer.cursor.row, height)
    rows = []
    for offset in range(height - 1):
        _, line = buffer.contents(start + offset)
        rows.append(displayable(line).ljust(width))
    return rows


def status_line(mode_name: str, statuses: list[str], pending: str,
                result: str, width: int) -> str:
    """Compose the bottom line, padded or cut to exactly ``width``."""
    text = mode_name.upper() + " "
    text += EditorConstants.STATUS_SEPARATOR.join(statuses) + " "
    text += pending + " " + result + " " * width
    return text[:width]


class TerminalView:
    """Renders the active buffer through a terminal interface."""

    def __init__(self, terminal, highlight_enabled: bool = True, background: str = "dark"):
        self.terminal = terminal
        self.highlight_enabled = highlight_enabled
        self.background = background

    def render_line(self, text: str, language: str) -> str:
        if not self.highlight_enabled:
            return text
        return highlight(text, language, self.background)

    def draw(self, buffer: Buffer, mode_name: str, statuses: list[str],
             pending: str, result: str):
        height, width = self.terminal.geometry()
        for screen_row, text in enumerate(visible_lines(buffer, height, width)):
            self.terminal.draw_line(screen_row, self.render_line(text, buffer.language))
        status = status_line(mode_name, statuses, pending, result, width)
        self.terminal.draw_status(height - 1, status, mode_name)
        row, col = cursor_screen_position(buffer, height)
        self.terminal.move_cursor(row, col)
