"""File logging; the terminal is owned by the editor while it runs."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import platformdirs

from .constants import EditorConstants


def log_path(log_dir: Optional[Path] = None) -> Path:
    directory = log_dir or Path(
        platformdirs.user_log_dir(EditorConstants.APP_NAME, EditorConstants.APP_AUTHOR)
    )
    return directory / EditorConstants.LOG_FILENAME


def configure_logging(level: str = "WARNING", log_dir: Optional[Path] = None) -> Optional[Path]:
    """Send the ``red`` logger to a rotating file.

    Returns:
        The log file path, or None if the directory could not be created
    """
    path = log_path(log_dir)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            path,
            maxBytes=EditorConstants.LOG_MAX_BYTES,
            backupCount=EditorConstants.LOG_BACKUP_COUNT,
            encoding='utf-8',
        )
    except OSError:
        return None
    handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)-8s - %(name)s - %(message)s"
    ))
    logger = logging.getLogger(EditorConstants.APP_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.addHandler(handler)
    return path
