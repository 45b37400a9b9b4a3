"""red CLI entry point.

Allows running via `python -m red` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import sys

from .version import get_version_string


def _escape_bytes(s: str) -> str:
    """Return a printable representation of raw key string."""
    return s.encode('unicode_escape').decode('ascii')


def run_keyboard_test() -> None:
    """Print parsed key events until ESC, using the editor's input stack."""
    from .terminal import TerminalInterface
    from .keyboard import KeyboardHandler, KeyEvent

    print("Keyboard test mode: press keys to see parsed events.")
    print("Quit with ESC.")

    term = TerminalInterface()
    term.setup(fullscreen=False)
    kb = KeyboardHandler(term)
    try:
        while True:
            ev: KeyEvent | None = kb.get_key_event(timeout=None)
            if not ev:
                continue
            if ev.is_special('escape'):
                break
            parts = [f"type={ev.key_type.value}", f"value={ev.value}", f"raw='{_escape_bytes(ev.raw)}'"]
            if ev.is_ctrl:
                parts.append("flags=ctrl")
            # stdin is in raw mode, so spell out the carriage return
            print(' '.join(parts), end='\r\n', flush=True)
    finally:
        term.cleanup()


def main() -> None:
    # Very small arg parsing: version, keyboard test mode, or paths to open
    args = sys.argv[1:]
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return
    if args and args[0] in ('--keytest', '--keyboard-test'):
        run_keyboard_test()
        return

    # Lazy import to avoid importing UI deps for --version
    from .editor import Editor
    from .logs import configure_logging
    from .settings import load_settings

    settings = load_settings()
    configure_logging(settings.log_level)
    try:
        editor = Editor(args, settings=settings)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error loading file: {e}", file=sys.stderr)
        sys.exit(1)
    editor.run()


if __name__ == "__main__":  # pragma: no cover
    main()
