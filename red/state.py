from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Mode(Enum):
    NORMAL = "normal"
    INSERT = "insert"
    COMMAND = "command"
    SEARCH = "search"


@dataclass(frozen=True)
class DispatcherState:
    """Everything the dispatcher carries from one key to the next.

    ``pending_operator`` holds the first key of a two-key Normal mode
    sequence (``dd``). ``awaiting_escape`` is set after the escape
    delimiter is typed in Insert mode.
    """
    mode: Mode = Mode.NORMAL
    pending: str = ""
    result: str = ""
    pending_operator: Optional[str] = None
    awaiting_escape: bool = False
    running: bool = True
