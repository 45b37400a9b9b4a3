"""Buffer-scoped textual commands: save and substitute."""

import logging
import re
from typing import TYPE_CHECKING

from .constants import EditorConstants

if TYPE_CHECKING:
    from .buffer import Buffer

logger = logging.getLogger(__name__)

SUBSTITUTE_PATTERN = re.compile(r"%s,(.+),(.+),g")


def write_buffer(buffer: 'Buffer') -> str:
    """Overwrite the buffer's file with its lines.

    Returns:
        Status string for the user
    """
    try:
        with open(buffer.path, 'w', encoding='utf-8', newline='') as f:
            f.write(buffer.document.to_text())
    except OSError as e:
        logger.error("could not write %s: %s", buffer.path, e)
        return f"{buffer.path}: {e.strerror or e}"
    buffer.document.dirty = False
    logger.info("wrote %d lines to %s", len(buffer.document), buffer.path)
    return EditorConstants.RESULT_WRITTEN


def substitute(buffer: 'Buffer', find: str, replace: str) -> str:
    buffer.document.replace_all(lambda line: line.replace(find, replace))
    return EditorConstants.RESULT_SUBSTITUTED


def run_command(buffer: 'Buffer', command: str) -> str:
    """Execute ``command`` against ``buffer`` and return a status string.

    Unrecognized input leaves the document untouched.
    """
    if command == "w":
        return write_buffer(buffer)
    match = SUBSTITUTE_PATTERN.search(command)
    if match:
        return substitute(buffer, match.group(1), match.group(2))
    logger.debug("unknown command %r", command)
    return EditorConstants.UNKNOWN_COMMAND_MESSAGE.format(command)
