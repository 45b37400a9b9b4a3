"""User settings for the red editor.

Settings are read from a JSON file in the OS-appropriate config
directory. A missing or malformed file leaves the defaults in place.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)


@dataclass
class EditorSettings:
    tab_width: int = EditorConstants.DEFAULT_TAB_WIDTH
    escape_delimiter: str = EditorConstants.DEFAULT_ESCAPE_DELIMITER
    highlight: bool = True
    background: str = "dark"  # pygments TerminalFormatter bg: 'dark' or 'light'
    log_level: str = "WARNING"

    @property
    def tab(self) -> str:
        return " " * self.tab_width


class SettingsStore:
    """Loads EditorSettings from ``settings.json`` in the user config dir."""

    def __init__(self, config_dir: Optional[Path] = None):
        self._config_dir = config_dir or Path(
            platformdirs.user_config_dir(EditorConstants.APP_NAME, EditorConstants.APP_AUTHOR)
        )
        self._settings_file = self._config_dir / EditorConstants.SETTINGS_FILENAME

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    def _read(self) -> Dict[str, Any]:
        if not self._settings_file.exists():
            return {}
        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            return {}
        return data

    def load(self) -> EditorSettings:
        """Return settings from disk merged over the defaults."""
        settings = EditorSettings()
        data = self._read()
        for field in fields(EditorSettings):
            if field.name not in data:
                continue
            value = data[field.name]
            default = getattr(settings, field.name)
            # bool is an int subclass; require the exact type
            if type(value) is not type(default):
                logger.warning(f"Ignoring setting {field.name}={value!r}: expected {type(default).__name__}")
                continue
            setattr(settings, field.name, value)
        if settings.tab_width < 0:
            logger.warning(f"Ignoring negative tab_width {settings.tab_width}")
            settings.tab_width = EditorConstants.DEFAULT_TAB_WIDTH
        if len(settings.escape_delimiter) != 1:
            logger.warning(f"Ignoring escape_delimiter {settings.escape_delimiter!r}: must be one character")
            settings.escape_delimiter = EditorConstants.DEFAULT_ESCAPE_DELIMITER
        return settings


def load_settings() -> EditorSettings:
    return SettingsStore().load()
