"""Constants and configuration for the red editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    APP_NAME = "red"
    APP_AUTHOR = "red"

    # Files
    SCRATCH_PATH = "untitled"
    SETTINGS_FILENAME = "settings.json"
    LOG_FILENAME = "red.log"
    LOG_MAX_BYTES = 1024 * 1024
    LOG_BACKUP_COUNT = 3

    # Language tags for highlighting
    GO_SUFFIX = ".go"
    GO_LANGUAGE = "go"
    DEFAULT_LANGUAGE = "python"

    # Insert mode defaults (overridable through settings)
    DEFAULT_TAB_WIDTH = 2
    DEFAULT_ESCAPE_DELIMITER = ","

    # Shown in place of \r in lines read from CRLF files
    CARRIAGE_RETURN_DISPLAY = "^M"

    # Status line
    STATUS_SEPARATOR = "─"
    MODE_COLORS = {
        "normal": 4,   # blue
        "insert": 2,   # green
        "command": 1,  # red
        "search": 5,   # magenta
    }

    # Command results
    RESULT_OK = "ok"
    RESULT_WRITTEN = "written"
    RESULT_SUBSTITUTED = "done"
    UNKNOWN_COMMAND_MESSAGE = "{}: unknown command"
    NOT_FOUND_MESSAGE = "{}: not found"

    # Resize handling
    RESIZE_PIPE_MARKER = b'R'
