"""Line store with an undo action log."""

from typing import Callable, Iterator, Optional

from .undo import ActionLog, ActionRecord, Delete, InsertBlank, PasteRepeat


class Document:
    """Ordered sequence of lines, never fewer than one.

    Only three mutations are undo-tracked: deleting a line, inserting a
    blank line and pasting. Character-level edits go through
    ``replace_line`` and leave the log alone.
    """

    def __init__(self, lines: Optional[list[str]] = None):
        self._lines: list[str] = list(lines) if lines else [""]
        self.actions = ActionLog()
        self.dirty = False

    @classmethod
    def from_text(cls, text: str) -> "Document":
        """Split file content on newlines.

        A single trailing newline terminates the last line rather than
        starting a new one.
        """
        lines = text.split("\n")
        if len(lines) > 1 and lines[-1] == "":
            lines.pop()
        return cls(lines)

    def to_text(self) -> str:
        return "\n".join(self._lines) + "\n"

    # --- read access ---

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, index: int) -> str:
        return self._lines[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def wrap(self, index: int) -> int:
        return index % len(self._lines)

    def line_at(self, index: int) -> str:
        """Return the line at ``index`` wrapped into range."""
        return self._lines[self.wrap(index)]

    # --- untracked edits ---

    def replace_line(self, index: int, text: str):
        self._lines[index] = text

    def replace_all(self, fn: Callable[[str], str]):
        self._lines = [fn(line) for line in self._lines]

    # --- tracked edits ---

    def delete_at(self, index: int) -> bool:
        if not 0 <= index < len(self._lines):
            raise IndexError(f"line {index} out of range")
        if len(self._lines) == 1:
            return False
        self.actions.push(Delete(index, self._lines[index]))
        del self._lines[index]
        self.dirty = True
        return True

    def insert_blank_after(self, index: int):
        self.actions.push(InsertBlank(index + 1))
        self._lines.insert(index + 1, "")

    def paste_at(self, index: int):
        last = self.actions.last()
        if last is None:
            return
        self.actions.push(PasteRepeat(index, last.line))
        self._lines.insert(index, last.line)
        self.dirty = True

    def undo(self) -> Optional[ActionRecord]:
        record = self.actions.pop()
        if record is None:
            return None
        if isinstance(record, InsertBlank):
            del self._lines[record.index]
        elif isinstance(record, (Delete, PasteRepeat)):
            self._lines.insert(record.index, record.line)
        else:
            raise TypeError(f"unknown action record {record!r}")
        return record
