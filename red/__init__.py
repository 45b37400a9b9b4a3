"""red - a modal, multi-buffer terminal text editor."""

from .buffer import Buffer, Cursor, language_for
from .document import Document
from .dispatcher import Dispatcher
from .registry import BufferRegistry
from .state import DispatcherState, Mode
from .undo import ActionLog, Delete, InsertBlank, PasteRepeat

__all__ = [
    'ActionLog',
    'Buffer',
    'BufferRegistry',
    'Cursor',
    'Delete',
    'Dispatcher',
    'DispatcherState',
    'Document',
    'InsertBlank',
    'Mode',
    'PasteRepeat',
    'language_for',
]
