"""Line-level undo records and the log that holds them."""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Delete:
    """A removed line; undo puts it back at ``index``."""
    index: int
    line: str


@dataclass(frozen=True)
class InsertBlank:
    """An opened blank line; undo removes it."""
    index: int
    line: str = ""


@dataclass(frozen=True)
class PasteRepeat:
    """A repeated line; undo inserts ``line`` again at ``index``."""
    index: int
    line: str


ActionRecord = Union[Delete, InsertBlank, PasteRepeat]


class ActionLog:
    """History of tracked line edits, newest last."""

    def __init__(self):
        self._records: list[ActionRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    def push(self, record: ActionRecord):
        self._records.append(record)

    def last(self) -> Optional[ActionRecord]:
        if not self._records:
            return None
        return self._records[-1]

    def pop(self) -> Optional[ActionRecord]:
        if not self._records:
            return None
        return self._records.pop()

    def records(self) -> list[ActionRecord]:
        return list(self._records)
