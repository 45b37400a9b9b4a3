"""Main editor controller: terminal loop around the dispatcher."""

import logging
import os
import select
import signal
from typing import Iterable, Optional

from .constants import EditorConstants
from .dispatcher import Dispatcher
from .keyboard import KeyboardHandler, KeyEvent
from .registry import BufferRegistry
from .settings import EditorSettings
from .state import DispatcherState
from .terminal import TerminalInterface
from .view import TerminalView

logger = logging.getLogger(__name__)


class Editor:
    """Main editor application controller."""

    def __init__(self, paths: Iterable[str] = (), settings: Optional[EditorSettings] = None,
                 terminal: Optional[TerminalInterface] = None):
        """Open every path as a buffer; the first one is active."""
        self.settings = settings or EditorSettings()
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.view = TerminalView(
            self.terminal,
            highlight_enabled=self.settings.highlight,
            background=self.settings.background,
        )
        self.registry = BufferRegistry.from_paths(list(paths))
        if self.registry.empty:
            self.registry.open(EditorConstants.SCRATCH_PATH)
        self.dispatcher = Dispatcher(self.registry, self.settings)
        self.state = DispatcherState()
        self._resize_pipe_r: Optional[int] = None
        self._resize_pipe_w: Optional[int] = None

    @property
    def running(self) -> bool:
        return self.state.running

    def _handle_resize(self, signum, frame):
        """Handle terminal resize signal."""
        del signum, frame  # Unused
        # Write to pipe to wake up select()
        os.write(self._resize_pipe_w, EditorConstants.RESIZE_PIPE_MARKER)

    def handle_key_event(self, key_event: KeyEvent):
        """Advance the dispatcher state by one key."""
        self.state = self.dispatcher.handle(self.state, key_event)

    def draw(self):
        """Draw the active buffer and the status line."""
        if self.registry.empty:
            return
        self.view.draw(
            self.registry.active,
            self.state.mode.value,
            self.registry.statuses(),
            self.state.pending,
            self.state.result,
        )

    def _drain_input(self):
        """Handle every key that is ready without blocking."""
        while self.running:
            key_event = self.keyboard.get_key_event(timeout=0)
            if key_event is None:
                return
            self.handle_key_event(key_event)

    def run(self):
        """Run the main editor loop until a quit command."""
        self.terminal.setup()
        self._resize_pipe_r, self._resize_pipe_w = os.pipe()
        original_winch_handler = signal.signal(signal.SIGWINCH, self._handle_resize)
        logger.info("editing %d buffers", len(self.registry))
        try:
            while self.running:
                self.draw()
                # Wait for input on stdin or resize pipe
                ready, _, _ = select.select([0, self._resize_pipe_r], [], [])
                if self._resize_pipe_r in ready:
                    os.read(self._resize_pipe_r, 1024)
                if 0 in ready:
                    self._drain_input()
        finally:
            signal.signal(signal.SIGWINCH, original_winch_handler)
            os.close(self._resize_pipe_r)
            os.close(self._resize_pipe_w)
            self._resize_pipe_r = self._resize_pipe_w = None
            self.terminal.cleanup()
