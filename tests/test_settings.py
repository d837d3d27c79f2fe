"""Unit tests for settings loading."""

import json
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from hecto.settings import LOG_LEVEL_ENV, Settings, load_settings


class TestLoadSettings(unittest.TestCase):
    """Test reading settings.json and environment overrides."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.settings_file = Path(self.temp_dir) / "settings.json"

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def _write(self, data):
        self.settings_file.write_text(
            data if isinstance(data, str) else json.dumps(data), encoding="utf-8")

    def test_missing_file_gives_defaults(self):
        settings = load_settings(self.settings_file, environ={})
        self.assertEqual(settings.log_level, "WARNING")
        self.assertFalse(settings.alternate_screen)
        self.assertEqual(settings.log_file.name, "hecto.log")

    def test_values_are_read(self):
        log_file = Path(self.temp_dir) / "custom.log"
        self._write({"log_level": "debug", "log_file": str(log_file),
                     "alternate_screen": True})
        settings = load_settings(self.settings_file, environ={})
        self.assertEqual(settings.log_level, "DEBUG")
        self.assertEqual(settings.log_file, log_file)
        self.assertTrue(settings.alternate_screen)

    def test_environment_overrides_file(self):
        self._write({"log_level": "ERROR"})
        settings = load_settings(self.settings_file, environ={LOG_LEVEL_ENV: "info"})
        self.assertEqual(settings.log_level, "INFO")

    def test_invalid_json_falls_back_to_defaults(self):
        self._write("{not json")
        with self.assertLogs("hecto.settings", level="WARNING") as logs:
            settings = load_settings(self.settings_file, environ={})
        self.assertEqual(settings, Settings(log_file=settings.log_file))
        self.assertIn("Could not load settings", logs.output[0])

    def test_non_dict_is_ignored(self):
        self._write([1, 2, 3])
        with self.assertLogs("hecto.settings", level="WARNING"):
            settings = load_settings(self.settings_file, environ={})
        self.assertEqual(settings.log_level, "WARNING")

    def test_bad_values_keep_defaults(self):
        self._write({"log_level": "LOUD", "log_file": 42, "alternate_screen": "yes"})
        with self.assertLogs("hecto.settings", level="WARNING") as logs:
            settings = load_settings(self.settings_file, environ={})
        self.assertEqual(settings.log_level, "WARNING")
        self.assertFalse(settings.alternate_screen)
        self.assertEqual(settings.log_file.name, "hecto.log")
        self.assertEqual(len(logs.output), 3)

    def test_default_location_uses_platformdirs(self):
        with patch("hecto.settings.platformdirs.user_config_dir", return_value=self.temp_dir):
            self._write({"alternate_screen": True})
            settings = load_settings(environ={})
        self.assertTrue(settings.alternate_screen)
