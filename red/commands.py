"""Command pattern implementation for Normal mode keys."""

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Dict, Tuple, Optional, TYPE_CHECKING

from .keyboard import KeyType
from .state import Mode

if TYPE_CHECKING:
    from .buffer import Buffer
    from .dispatcher import Dispatcher
    from .state import DispatcherState
    from .keyboard import KeyEvent


class NormalCommand(ABC):
    """Base class for Normal mode commands."""

    @abstractmethod
    def execute(self, dispatcher: 'Dispatcher', state: 'DispatcherState',
                key_event: 'KeyEvent') -> 'DispatcherState':
        """Execute the command.

        Args:
            dispatcher: Dispatcher owning the buffers
            state: Dispatcher state before the key
            key_event: The key event that triggered this command

        Returns:
            Dispatcher state after the key
        """
        pass


class BufferCommand(NormalCommand):
    """Base class for commands that act on the active buffer only."""

    def execute(self, dispatcher, state, key_event):
        self._apply(dispatcher.buffer)
        return state

    @abstractmethod
    def _apply(self, buffer: 'Buffer'):
        """Perform the action."""
        pass


class LeftCommand(BufferCommand):
    def _apply(self, buffer):
        buffer.left()


class RightCommand(BufferCommand):
    def _apply(self, buffer):
        buffer.right()


class UpCommand(BufferCommand):
    def _apply(self, buffer):
        buffer.up()


class DownCommand(BufferCommand):
    def _apply(self, buffer):
        buffer.down()


class FirstColumnCommand(BufferCommand):
    def _apply(self, buffer):
        buffer.first()


class LastColumnCommand(BufferCommand):
    def _apply(self, buffer):
        buffer.last()


class FirstLineCommand(BufferCommand):
    def _apply(self, buffer):
        buffer.first_line()


class LastLineCommand(BufferCommand):
    def _apply(self, buffer):
        buffer.last_line()


class WordCommand(BufferCommand):
    def _apply(self, buffer):
        buffer.word()


class BackWordCommand(BufferCommand):
    def _apply(self, buffer):
        buffer.bword()


class UndoCommand(BufferCommand):
    def _apply(self, buffer):
        buffer.undo()


class PasteCommand(BufferCommand):
    def _apply(self, buffer):
        buffer.paste()


class RemoveNextCommand(BufferCommand):
    def _apply(self, buffer):
        buffer.remove_next()


class DeleteOperatorCommand(NormalCommand):
    """First half of ``dd``; the next key decides."""

    def execute(self, dispatcher, state, key_event):
        return replace(state, pending_operator=key_event.value)


class EnterModeCommand(NormalCommand):
    """Switch mode, clearing the pending command string."""

    def __init__(self, mode):
        self.mode = mode

    def execute(self, dispatcher, state, key_event):
        return replace(state, mode=self.mode, pending="")


class OpenLineCommand(EnterModeCommand):
    """Insert a blank line below (or above) the cursor, then Insert mode."""

    def __init__(self, mode, above: bool = False):
        super().__init__(mode)
        self.above = above

    def execute(self, dispatcher, state, key_event):
        if self.above:
            dispatcher.buffer.new_line_above()
        else:
            dispatcher.buffer.new_line()
        return super().execute(dispatcher, state, key_event)


class CycleBufferCommand(NormalCommand):
    def __init__(self, step: int):
        self.step = step

    def execute(self, dispatcher, state, key_event):
        dispatcher.registry.cycle(self.step)
        return state


class CloseBufferCommand(NormalCommand):
    def execute(self, dispatcher, state, key_event):
        return dispatcher.close_buffer(state)


class CommandRegistry:
    """Registry for mapping Normal mode keys to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], NormalCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Movement commands
        for value, command in (
            ('left', LeftCommand()), ('right', RightCommand()),
            ('up', UpCommand()), ('down', DownCommand()),
        ):
            self.register((KeyType.SPECIAL, value), command)
        self.register((KeyType.REGULAR, 'h'), LeftCommand())
        self.register((KeyType.REGULAR, 'l'), RightCommand())
        self.register((KeyType.REGULAR, 'k'), UpCommand())
        self.register((KeyType.REGULAR, 'j'), DownCommand())
        self.register((KeyType.REGULAR, '^'), FirstColumnCommand())
        self.register((KeyType.REGULAR, '$'), LastColumnCommand())
        self.register((KeyType.REGULAR, 'w'), WordCommand())
        self.register((KeyType.REGULAR, 'b'), BackWordCommand())
        self.register((KeyType.REGULAR, 'g'), FirstLineCommand())
        self.register((KeyType.REGULAR, 'G'), LastLineCommand())

        # Editing commands
        self.register((KeyType.REGULAR, 'u'), UndoCommand())
        self.register((KeyType.REGULAR, 'p'), PasteCommand())
        self.register((KeyType.REGULAR, 'x'), RemoveNextCommand())
        self.register((KeyType.REGULAR, 'd'), DeleteOperatorCommand())

        # Mode changes
        self.register((KeyType.REGULAR, ':'), EnterModeCommand(Mode.COMMAND))
        self.register((KeyType.REGULAR, '/'), EnterModeCommand(Mode.SEARCH))
        self.register((KeyType.REGULAR, 'i'), EnterModeCommand(Mode.INSERT))
        self.register((KeyType.REGULAR, 'o'), OpenLineCommand(Mode.INSERT))
        self.register((KeyType.REGULAR, 'O'), OpenLineCommand(Mode.INSERT, above=True))

        # Buffers
        self.register((KeyType.REGULAR, 'L'), CycleBufferCommand(1))
        self.register((KeyType.REGULAR, 'H'), CycleBufferCommand(-1))
        self.register((KeyType.REGULAR, 'Q'), CloseBufferCommand())

    def register(self, key: Tuple[KeyType, str], command: NormalCommand):
        """Register a command for a key."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[NormalCommand]:
        """Get the command for a key."""
        return self._commands.get((key_type, value))

    def execute(self, dispatcher: 'Dispatcher', state: 'DispatcherState',
                key_event: 'KeyEvent') -> 'DispatcherState':
        """Execute the command bound to ``key_event``; unbound keys do nothing."""
        command = self.get_command(key_event.key_type, key_event.value)
        if command is None:
            return state
        return command.execute(dispatcher, state, key_event)
