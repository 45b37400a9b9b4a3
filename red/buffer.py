"""Buffer: one open file with its cursor."""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from .constants import EditorConstants
from .document import Document
from .undo import ActionRecord

logger = logging.getLogger(__name__)

# A separator followed by a run of word characters
WORD_PATTERN = re.compile(r"\s\w+")


@dataclass
class Cursor:
    """Logical cursor; either coordinate may run out of the document."""
    row: int = 0
    col: int = 0


def language_for(path: str) -> str:
    """Classify a path by suffix into a highlighting language tag."""
    if path.endswith(EditorConstants.GO_SUFFIX):
        return EditorConstants.GO_LANGUAGE
    return EditorConstants.DEFAULT_LANGUAGE


class Buffer:
    """A Document plus cursor, path and dirty flag."""

    def __init__(self, path: str, document: Optional[Document] = None):
        self.path = path
        self.document = document if document is not None else Document()
        self.cursor = Cursor()

    @classmethod
    def open(cls, path: str) -> "Buffer":
        """Load ``path``; a missing file starts as a single empty line."""
        try:
            with open(path, 'r', encoding='utf-8', newline='') as f:
                document = Document.from_text(f.read())
        except FileNotFoundError:
            logger.info("opening new file %s", path)
            document = Document()
        return cls(path, document)

    @property
    def dirty(self) -> bool:
        return self.document.dirty

    @property
    def language(self) -> str:
        return language_for(self.path)

    @property
    def pos(self) -> int:
        """Current row wrapped into the document."""
        return self.document.wrap(self.cursor.row)

    @property
    def current_line(self) -> str:
        return self.document.line_at(self.cursor.row)

    def contents(self, index: int) -> tuple[int, str]:
        """Return ``(wrapped_index, line)`` for any integer row."""
        wrapped = self.document.wrap(index)
        return wrapped, self.document[wrapped]

    def status(self) -> str:
        s = f"{self.path}({self.cursor.row},{self.cursor.col})"
        if self.dirty:
            s += "(+)"
        return s

    # --- motion ---

    def left(self):
        if self.cursor.col > 0:
            self.cursor.col -= 1

    def right(self):
        self.cursor.col += 1

    def up(self):
        self.cursor.row -= 1

    def down(self):
        self.cursor.row += 1

    def first(self):
        self.cursor.col = 0

    def last(self):
        self.cursor.col = len(self.current_line)

    def first_line(self):
        self.cursor.row = 0

    def last_line(self):
        self.cursor.row = len(self.document) - 1

    def word(self):
        line = self.current_line
        match = WORD_PATTERN.search(line, self.cursor.col + 1)
        if match:
            self.cursor.col = match.start()

    def bword(self):
        line = self.current_line
        start = len(line) - self.cursor.col + 1
        if start < 0:
            return
        match = WORD_PATTERN.search(line[::-1], start)
        if match:
            self.cursor.col = len(line) - match.start()

    # --- character edits (not undo-tracked) ---

    def insert(self, text: str):
        old = self.current_line
        col = self.cursor.col
        self.document.replace_line(self.pos, old[:col] + text + old[col:])
        self.cursor.col += len(text)

    def remove_previous(self):
        old = self.current_line
        col = self.cursor.col
        if col > 0:
            self.document.replace_line(self.pos, old[:col - 1] + old[col:])
        self.left()

    def remove_next(self):
        old = self.current_line
        col = self.cursor.col
        self.document.replace_line(self.pos, old[:col] + old[col + 1:])

    # --- line edits ---

    def new_line(self):
        """Open a blank line below the cursor and move onto it."""
        pos = self.pos
        self.document.insert_blank_after(pos)
        self.cursor.row = pos + 1
        self.cursor.col = 0

    def new_line_above(self):
        pos = self.pos
        self.document.insert_blank_after(pos - 1)
        self.cursor.row = pos
        self.cursor.col = 0

    def delete(self) -> bool:
        return self.document.delete_at(self.pos)

    def paste(self):
        self.document.paste_at(self.pos)

    def undo(self) -> Optional[ActionRecord]:
        return self.document.undo()

    def search(self, needle: str) -> bool:
        """Move to the first line at or below the cursor containing ``needle``."""
        for i in range(self.pos, len(self.document)):
            if needle in self.document[i]:
                self.cursor.row = i
                return True
        return False
