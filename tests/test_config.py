"""Tests for configuration loading and validation."""

from __future__ import annotations

import tempfile
from pathlib import Path
import unittest

from dropins.config import DEFAULT_CONFIG, load_config


class ConfigTests(unittest.TestCase):
    """Validate config merge and fallback behavior."""

    def test_missing_config_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config = load_config(config_path=Path(temp_dir) / "config.toml")
        self.assertEqual(config, DEFAULT_CONFIG)
        self.assertEqual(config["logging"]["level"], "INFO")
        self.assertTrue(config["tagged_logger"]["enabled"])

    def test_partial_config_overrides_selected_values(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.toml"
            config_path.write_text(
                """
[logging]
level = "debug"

[tagged_logger]
default_tag = "  Worker  "
                """.strip(),
                encoding="utf-8",
            )
            config = load_config(config_path=config_path)
        self.assertEqual(config["logging"]["level"], "DEBUG")
        self.assertTrue(config["logging"]["structured"])
        self.assertEqual(config["tagged_logger"]["default_tag"], "Worker")
        self.assertTrue(config["tagged_logger"]["enabled"])

    def test_invalid_values_fall_back_to_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.toml"
            config_path.write_text('[logging]\nlevel = "LOUD"\n', encoding="utf-8")
            with self.assertLogs("dropins.config", level="WARNING"):
                config = load_config(config_path=config_path)
        self.assertEqual(config, DEFAULT_CONFIG)

    def test_unparseable_file_falls_back_to_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.toml"
            config_path.write_text("[logging\nlevel = ", encoding="utf-8")
            with self.assertLogs("dropins.config", level="WARNING") as logs:
                config = load_config(config_path=config_path)
        self.assertEqual(config, DEFAULT_CONFIG)
        self.assertTrue(any("Failed to parse config" in line for line in logs.output))

    def test_defaults_are_not_mutated_by_loading(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config = load_config(config_path=Path(temp_dir) / "missing.toml")
        config["logging"]["level"] = "ERROR"
        self.assertEqual(DEFAULT_CONFIG["logging"]["level"], "INFO")


if __name__ == "__main__":
    unittest.main()
