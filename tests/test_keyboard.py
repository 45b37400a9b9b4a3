"""Test keyboard input handling."""

import pytest
from unittest.mock import Mock
from red.keyboard import KeyboardHandler, KeyEvent, KeyType, regular, special


class MockTerminal:
    """Mock terminal interface for testing."""

    def __init__(self):
        self._key_queue = []

    def get_key(self, timeout=None):
        """Mock get_key that returns from queue."""
        if self._key_queue:
            return self._key_queue.pop(0)
        return None

    def add_key(self, key_str):
        """Add a key to the queue."""
        key = Mock()
        key.__str__ = lambda self: key_str
        self._key_queue.append(key)


@pytest.fixture
def handler():
    return KeyboardHandler(MockTerminal())


@pytest.mark.parametrize("token,value", [
    ('<UP>', 'up'),
    ('<DOWN>', 'down'),
    ('<LEFT>', 'left'),
    ('<RIGHT>', 'right'),
    ('<ESC>', 'escape'),
    ('<BACKSPACE>', 'backspace'),
    ('<TAB>', 'tab'),
    ('<Ctrl-j>', 'enter'),
    ('<Ctrl-m>', 'enter'),
    ('<Ctrl-i>', 'tab'),
    ('<RETURN>', 'enter'),
])
def test_curtsies_tokens_map_to_special_keys(handler, token, value):
    event = handler.parse_key(token)
    assert event.key_type == KeyType.SPECIAL
    assert event.value == value
    assert event.raw == token


def test_unbound_named_keys_are_special(handler):
    event = handler.parse_key('<PAGEUP>')
    assert event == KeyEvent(key_type=KeyType.SPECIAL, value='pageup', raw='<PAGEUP>')
    assert not event.is_printable


@pytest.mark.parametrize("raw,value", [
    ('\x1b', 'escape'),
    ('\x7f', 'backspace'),
    ('\t', 'tab'),
    ('\n', 'enter'),
    ('\r', 'enter'),
])
def test_raw_control_characters(handler, raw, value):
    event = handler.parse_key(raw)
    assert event.key_type == KeyType.SPECIAL
    assert event.value == value


def test_regular_characters(handler):
    for ch in ('a', ',', ':', '/', '$', '^', '<', '>', 'é'):
        event = handler.parse_key(ch)
        assert event.key_type == KeyType.REGULAR
        assert event.value == ch
        assert event.is_printable


def test_space_token_is_regular_space(handler):
    event = handler.parse_key('<SPACE>')
    assert event == KeyEvent(key_type=KeyType.REGULAR, value=' ', raw='<SPACE>')


def test_ctrl_letters(handler):
    event = handler.parse_key('<Ctrl-x>')
    assert event.key_type == KeyType.CTRL
    assert event.value == 'x'
    assert event.is_ctrl

    event = handler.parse_key('\x01')
    assert event.key_type == KeyType.CTRL
    assert event.value == 'a'
    assert not event.is_printable


def test_get_key_event_reads_from_terminal():
    terminal = MockTerminal()
    handler = KeyboardHandler(terminal)
    terminal.add_key('<UP>')
    terminal.add_key('k')

    assert handler.get_key_event().value == 'up'
    assert handler.get_key_event() == regular('k')
    assert handler.get_key_event() is None


def test_helpers_build_matching_events():
    assert special('enter').is_special('enter')
    assert not regular('x').is_special('x')
    assert regular('x').is_printable
    assert not special('tab').is_printable
