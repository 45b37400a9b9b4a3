"""Keyboard input handling using curtsies-style tokens."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass(frozen=True)
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The character, or the special key name (e.g. 'left', 'enter')
    raw: str = ""  # The token as reported by curtsies
    is_ctrl: bool = False

    @property
    def is_printable(self) -> bool:
        return self.key_type == KeyType.REGULAR and self.value.isprintable()

    def is_special(self, name: str) -> bool:
        return self.key_type == KeyType.SPECIAL and self.value == name


def regular(char: str) -> KeyEvent:
    return KeyEvent(key_type=KeyType.REGULAR, value=char, raw=char)


def special(name: str) -> KeyEvent:
    return KeyEvent(key_type=KeyType.SPECIAL, value=name, raw=f"<{name.upper()}>")


# Token base names that mean the same special key
ALIASES = {
    'esc': 'escape',
    'return': 'enter',
}


class KeyboardHandler:
    """Turns terminal key tokens into KeyEvents."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        """Get next key event and map curtsies-style names to KeyEvent."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies token (or any object with ``__str__``) into a KeyEvent."""
        key_str = str(key)

        # Named tokens like '<UP>', '<Ctrl-j>', '<ESC>'
        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            name = key_str[1:-1].lower().replace('+', '-')
            parts = name.split('-')
            base = parts[-1] or '-'
            mods = set(parts[:-1])
            base = ALIASES.get(base, base)

            if base in ('space', 'spacebar', 'spc') and not mods:
                return KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=key_str)
            if 'ctrl' in mods and len(base) == 1:
                # Ctrl-J / Ctrl-M are Enter, Ctrl-I is Tab, Ctrl-H is Backspace
                if base in ('j', 'm'):
                    return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
                if base == 'i':
                    return KeyEvent(key_type=KeyType.SPECIAL, value='tab', raw=key_str)
                if base == 'h':
                    return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str)
                return KeyEvent(key_type=KeyType.CTRL, value=base, raw=key_str, is_ctrl=True)
            # Named keys; ones nothing is bound to are ignored downstream
            return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str)

        if len(key_str) == 1:
            o = ord(key_str)
            if key_str == '\t':
                return KeyEvent(key_type=KeyType.SPECIAL, value='tab', raw=key_str)
            if key_str in ('\n', '\r'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
            if key_str in ('\x7f', '\x08'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str)
            if key_str == '\x1b':
                return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)
            if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z
                ch = chr(ord('a') + o - 1)
                return KeyEvent(key_type=KeyType.CTRL, value=ch, raw=key_str, is_ctrl=True)

        return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)

