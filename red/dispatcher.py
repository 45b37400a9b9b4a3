"""Modal key dispatch: one key in, next state out."""

import logging
import re
from dataclasses import replace
from typing import Optional

from .buffer import Buffer
from .commands import CommandRegistry
from .constants import EditorConstants
from .interpreter import run_command
from .keyboard import KeyEvent
from .registry import BufferRegistry
from .settings import EditorSettings
from .state import DispatcherState, Mode

logger = logging.getLogger(__name__)

OPEN_PATTERN = re.compile(r"tn (.+)")


class Dispatcher:
    """Routes keys to buffer, registry and interpreter operations.

    The dispatcher holds no session state of its own; every call to
    ``handle`` receives the current ``DispatcherState`` and returns the
    next one.
    """

    def __init__(self, registry: BufferRegistry, settings: Optional[EditorSettings] = None,
                 commands: Optional[CommandRegistry] = None):
        self.registry = registry
        self.settings = settings or EditorSettings()
        self.commands = commands or CommandRegistry()

    @property
    def buffer(self) -> Buffer:
        return self.registry.active

    def handle(self, state: DispatcherState, key_event: KeyEvent) -> DispatcherState:
        if state.mode is Mode.NORMAL:
            return self._handle_normal(state, key_event)
        elif state.mode is Mode.INSERT:
            return self._handle_insert(state, key_event)
        elif state.mode is Mode.COMMAND or state.mode is Mode.SEARCH:
            return self._handle_prompt(state, key_event)
        raise ValueError(f"unhandled mode {state.mode!r}")

    # --- Normal ---

    def _handle_normal(self, state: DispatcherState, key_event: KeyEvent) -> DispatcherState:
        state = replace(state, result="")
        if state.pending_operator is not None:
            operator = state.pending_operator
            state = replace(state, pending_operator=None)
            if operator == 'd' and key_event.is_printable and key_event.value == 'd':
                self.buffer.delete()
            return state
        return self.commands.execute(self, state, key_event)

    # --- Insert ---

    def _handle_insert(self, state: DispatcherState, key_event: KeyEvent) -> DispatcherState:
        state = replace(state, result="")
        buffer = self.buffer
        delimiter = self.settings.escape_delimiter
        if state.awaiting_escape:
            state = replace(state, awaiting_escape=False)
            if key_event.is_printable and key_event.value == delimiter:
                buffer.remove_previous()
                return replace(state, mode=Mode.NORMAL)

        if key_event.is_special('tab'):
            buffer.insert(self.settings.tab)
        elif key_event.is_special('enter'):
            buffer.new_line()
        elif key_event.is_special('escape'):
            return replace(state, mode=Mode.NORMAL)
        elif key_event.is_special('backspace'):
            buffer.remove_previous()
        elif key_event.is_special('left'):
            buffer.left()
        elif key_event.is_special('right'):
            buffer.right()
        elif key_event.is_special('up'):
            buffer.up()
        elif key_event.is_special('down'):
            buffer.down()
        elif key_event.is_printable:
            buffer.insert(key_event.value)
            if key_event.value == delimiter:
                return replace(state, awaiting_escape=True)
        return state

    # --- Command / Search ---

    def _handle_prompt(self, state: DispatcherState, key_event: KeyEvent) -> DispatcherState:
        if key_event.is_special('enter'):
            return self._submit(state)
        if key_event.is_special('escape'):
            return replace(state, mode=Mode.NORMAL, pending="")
        if key_event.is_special('backspace'):
            return replace(state, pending=state.pending[:-1])
        if key_event.is_printable:
            return replace(state, pending=state.pending + key_event.value)
        return state

    def _submit(self, state: DispatcherState) -> DispatcherState:
        text, mode = state.pending, state.mode
        state = replace(state, mode=Mode.NORMAL, pending="")
        if mode is Mode.COMMAND:
            next_state = self.run_editor_command(state, text)
            if next_state is not None:
                return next_state
            return replace(state, result=run_command(self.buffer, text))
        elif mode is Mode.SEARCH:
            return replace(state, result=self.search(text))
        raise ValueError(f"nothing to submit in mode {mode!r}")

    def search(self, needle: str) -> str:
        if self.buffer.search(needle):
            return ""
        return EditorConstants.NOT_FOUND_MESSAGE.format(needle)

    def run_editor_command(self, state: DispatcherState, text: str) -> Optional[DispatcherState]:
        """Try ``tn``, ``q`` and ``qa``.

        Returns:
            The next state, or None if ``text`` is not an editor command
        """
        match = OPEN_PATTERN.match(text)
        if match:
            path = match.group(1)
            try:
                self.registry.open(path)
            except OSError as e:
                logger.error("could not open %s: %s", path, e)
                return replace(state, result=f"{path}: {e.strerror or e}")
            except UnicodeDecodeError as e:
                logger.error("could not decode %s: %s", path, e)
                return replace(state, result=f"{path}: {e.reason}")
            return replace(state, result=EditorConstants.RESULT_OK)
        if text == "q":
            return self.close_buffer(replace(state, result=EditorConstants.RESULT_OK))
        if text == "qa":
            logger.info("quitting with %d buffers open", len(self.registry))
            return replace(state, running=False)
        return None

    def close_buffer(self, state: DispatcherState) -> DispatcherState:
        """Close the active buffer; closing the last one ends the session."""
        if not self.registry.close_active():
            return replace(state, running=False)
        return state
