"""Tests for config persistence and input sanitization."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirtree import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_config_loads_as_empty_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "absent" / "config.json"
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                self.assertIsNone(config.load_theme_name())
                self.assertFalse(config.load_no_color())
                self.assertEqual(config.load_default_depth(), 1)

    def test_malformed_config_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

            config_path.write_text("[1, 2]", encoding="utf-8")
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_preferences_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                config.save_theme_name("ocean")
                config.save_no_color(True)
                config.save_default_depth(4)

                self.assertEqual(config.load_theme_name(), "ocean")
                self.assertTrue(config.load_no_color())
                self.assertEqual(config.load_default_depth(), 4)
                self.assertEqual(
                    config.load_config(),
                    {"theme": "ocean", "no_color": True, "default_depth": 4},
                )

    def test_invalid_values_fall_back(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                config.save_config({"theme": 3, "no_color": "yes", "default_depth": True})
                self.assertIsNone(config.load_theme_name())
                self.assertFalse(config.load_no_color())
                self.assertEqual(config.load_default_depth(), 1)

                config.save_config({"default_depth": 0})
                self.assertEqual(config.load_default_depth(), 1)

    def test_save_default_depth_clamps_to_one(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                config.save_default_depth(-3)
                self.assertEqual(config.load_default_depth(), 1)


if __name__ == "__main__":
    unittest.main()
