"""Ordered collection of open buffers with one active index."""

import logging
from typing import Callable, Iterator, Optional

from .buffer import Buffer

logger = logging.getLogger(__name__)


class BufferRegistry:
    """Open buffers in the order they were opened.

    The active index stays in ``[0, len)`` while any buffer is open.
    """

    def __init__(self, buffers: Optional[list[Buffer]] = None,
                 opener: Callable[[str], Buffer] = Buffer.open):
        self._buffers: list[Buffer] = list(buffers or [])
        self._opener = opener
        self.index = 0

    @classmethod
    def from_paths(cls, paths: list[str],
                   opener: Callable[[str], Buffer] = Buffer.open) -> "BufferRegistry":
        return cls([opener(p) for p in paths], opener=opener)

    def __len__(self) -> int:
        return len(self._buffers)

    def __iter__(self) -> Iterator[Buffer]:
        return iter(self._buffers)

    def __getitem__(self, index: int) -> Buffer:
        return self._buffers[index]

    @property
    def active(self) -> Buffer:
        return self._buffers[self.index]

    @property
    def empty(self) -> bool:
        return not self._buffers

    def open(self, path: str) -> Buffer:
        """Open ``path`` as a new buffer and make it active."""
        buffer = self._opener(path)
        self._buffers.append(buffer)
        self.index = len(self._buffers) - 1
        logger.info("opened %s as buffer %d", path, self.index)
        return buffer

    def close_active(self) -> bool:
        """Remove the active buffer.

        Returns:
            True if buffers remain open
        """
        closed = self._buffers.pop(self.index)
        logger.info("closed %s", closed.path)
        if not self._buffers:
            self.index = 0
            return False
        if self.index >= len(self._buffers):
            self.index = len(self._buffers) - 1
        return True

    def cycle(self, step: int):
        if self._buffers:
            self.index = (self.index + step) % len(self._buffers)

    def statuses(self) -> list[str]:
        """Status strings of all buffers, the active one padded with spaces."""
        return [
            f" {b.status()} " if i == self.index else b.status()
            for i, b in enumerate(self._buffers)
        ]
