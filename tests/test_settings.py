"""Unit tests for user settings."""

import json
import shutil
import tempfile
import unittest
from pathlib import Path

from red.settings import EditorSettings, SettingsStore


class TestSettingsStore(unittest.TestCase):
    """Test loading settings from the config directory."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.store = SettingsStore(Path(self.temp_dir))

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def write(self, data):
        with open(self.store.settings_file, 'w', encoding='utf-8') as f:
            if isinstance(data, str):
                f.write(data)
            else:
                json.dump(data, f)

    def test_missing_file_gives_defaults(self):
        self.assertEqual(self.store.load(), EditorSettings())

    def test_defaults(self):
        settings = EditorSettings()
        self.assertEqual(settings.tab_width, 2)
        self.assertEqual(settings.escape_delimiter, ",")
        self.assertEqual(settings.tab, "  ")
        self.assertTrue(settings.highlight)

    def test_values_override_defaults(self):
        self.write({"tab_width": 4, "escape_delimiter": ";", "highlight": False})
        settings = self.store.load()
        self.assertEqual(settings.tab_width, 4)
        self.assertEqual(settings.tab, "    ")
        self.assertEqual(settings.escape_delimiter, ";")
        self.assertFalse(settings.highlight)
        self.assertEqual(settings.background, "dark")

    def test_unknown_keys_are_ignored(self):
        self.write({"font_name": "Courier", "tab_width": 8})
        self.assertEqual(self.store.load().tab_width, 8)

    def test_malformed_json_gives_defaults(self):
        self.write("{not json")
        with self.assertLogs("red.settings", level="WARNING"):
            settings = self.store.load()
        self.assertEqual(settings, EditorSettings())

    def test_non_dict_gives_defaults(self):
        self.write([1, 2, 3])
        with self.assertLogs("red.settings", level="WARNING"):
            settings = self.store.load()
        self.assertEqual(settings, EditorSettings())

    def test_wrong_types_are_ignored(self):
        """A bool is not accepted where an int is expected."""
        self.write({"tab_width": True, "highlight": "yes", "background": "light"})
        settings = self.store.load()
        self.assertEqual(settings.tab_width, 2)
        self.assertTrue(settings.highlight)
        self.assertEqual(settings.background, "light")

    def test_negative_tab_width_is_rejected(self):
        self.write({"tab_width": -1})
        self.assertEqual(self.store.load().tab_width, 2)

    def test_delimiter_must_be_one_character(self):
        self.write({"escape_delimiter": "jk"})
        self.assertEqual(self.store.load().escape_delimiter, ",")

        self.write({"escape_delimiter": ""})
        self.assertEqual(self.store.load().escape_delimiter, ",")


if __name__ == '__main__':
    unittest.main()
