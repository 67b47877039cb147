from __future__ import annotations

import logging
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from datadirs.config import load_settings


class SettingsTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.home = Path(self.tmp.name) / "home"

    def tearDown(self) -> None:
        self.tmp.cleanup()

    def test_defaults(self) -> None:
        with patch.dict(os.environ, {"DATADIRS_HOME": str(self.home)}, clear=True):
            settings = load_settings()

        self.assertEqual(settings.paths.root, self.home)
        self.assertEqual(settings.data_dirs, f"[DISK]{self.home / 'data'}")
        self.assertEqual(settings.log_level, logging.WARNING)
        self.assertIsNone(settings.log_file)
        self.assertFalse(self.home.exists())

    def test_overrides(self) -> None:
        log_file = Path(self.tmp.name) / "logs" / "datadirs.log"
        env = {
            "DATADIRS_HOME": str(self.home),
            "DATADIRS_DATA_DIRS": " [SSD]/a,/b ",
            "DATADIRS_LOG_LEVEL": "debug",
            "DATADIRS_LOG_FILE": str(log_file),
        }
        with patch.dict(os.environ, env, clear=True):
            settings = load_settings()

        self.assertEqual(settings.data_dirs, "[SSD]/a,/b")
        self.assertEqual(settings.log_level, logging.DEBUG)
        self.assertEqual(settings.log_file, log_file)
        self.assertFalse(log_file.parent.exists())

    def test_placeholders_are_treated_as_unset(self) -> None:
        env = {
            "DATADIRS_HOME": str(self.home),
            "DATADIRS_DATA_DIRS": "${DATA_DIRS}",
            "DATADIRS_LOG_LEVEL": "nonsense",
            "DATADIRS_LOG_FILE": "${LOG_FILE}",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = load_settings()

        self.assertTrue(settings.data_dirs.startswith("[DISK]"))
        self.assertEqual(settings.log_level, logging.WARNING)
        self.assertIsNone(settings.log_file)


if __name__ == "__main__":
    unittest.main()
