"""Terminal interface using Blessed for display and Curtsies for input."""

from typing import Optional

import blessed
from curtsies import Input

from .constants import EditorConstants


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._input: Optional[Input] = None

    def setup(self, fullscreen: bool = True):
        """Enter fullscreen mode and put stdin in raw mode."""
        if fullscreen:
            print(self.term.enter_fullscreen, end='')
            print(self.term.clear, end='', flush=True)
            self.is_fullscreen = True
        if self._input is None:
            self._input = Input(keynames='curtsies')
            self._input.__enter__()

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self._input is not None:
            try:
                self._input.__exit__(None, None, None)
            finally:
                self._input = None
        if self.is_fullscreen:
            print(self.term.normal + self.term.exit_fullscreen, end='')
            print(self.term.normal_cursor, end='', flush=True)
            self.is_fullscreen = False

    def geometry(self) -> tuple[int, int]:
        """Current terminal size as ``(height, width)``."""
        return self.term.height, self.term.width

    def draw_line(self, y: int, text: str):
        """Write an already rendered line at row ``y``, column 0."""
        print(self.term.move(y, 0) + text + self.term.normal, end='')

    def mode_style(self, mode_name: Optional[str]) -> str:
        color = EditorConstants.MODE_COLORS.get((mode_name or "").lower(), 5)
        return self.term.bold + self.term.black + self.term.on_color(color)

    def draw_status(self, y: int, text: str, mode_name: Optional[str] = None):
        """Draw the status line in the colour of the current mode."""
        print(self.term.move(y, 0) + self.mode_style(mode_name) + text + self.term.normal, end='')

    def move_cursor(self, y: int, x: int):
        """Place the visible cursor and flush the frame."""
        print(self.term.move(y, x) + self.term.normal_cursor, end='', flush=True)

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies token as a string, or None on timeout
        """
        if self._input is None:
            return None
        # send() also returns keys curtsies has already read but not yet delivered
        event = self._input.send(timeout)
        if event is None:
            return None
        return str(event)
