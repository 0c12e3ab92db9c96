"""Config persistence and sanitization tests."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from infotree import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_or_malformed_config_loads_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("infotree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})
                config_path.write_text("{broken", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

    def test_depth_round_trip_and_sanitization(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("infotree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_default_depth(), config.DEFAULT_DEPTH)
                config.save_default_depth(4)
                self.assertEqual(config.load_default_depth(), 4)

                for bad in (True, 0, -3, 2.5, "3"):
                    with self.subTest(bad=bad):
                        config.save_config({"depth": bad})
                        self.assertEqual(config.load_default_depth(), config.DEFAULT_DEPTH)

    def test_strings_are_stripped_and_blank_values_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("infotree.config.CONFIG_PATH", config_path):
                config.save_theme_name("  ocean ")
                config.save_theme_name("   ")
                config.save_style("native")
                self.assertEqual(config.load_theme_name(), "ocean")
                self.assertEqual(config.load_style(), "native")

                config.save_config({"style": 5, "theme": ""})
                self.assertIsNone(config.load_theme_name())
                self.assertEqual(config.load_style(), config.DEFAULT_STYLE)

    def test_snapshot_path_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            snapshot = Path(tmp) / "index.json"
            with mock.patch("infotree.config.CONFIG_PATH", config_path):
                self.assertIsNone(config.load_snapshot_path())
                config.save_snapshot_path(snapshot)
                self.assertEqual(config.load_snapshot_path(), snapshot)


if __name__ == "__main__":
    unittest.main()
