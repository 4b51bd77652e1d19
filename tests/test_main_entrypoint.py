"""Tests for CLI entrypoint wiring."""

from __future__ import annotations

from contextlib import redirect_stderr, redirect_stdout
import io
import tempfile
from pathlib import Path
import unittest
from unittest.mock import patch

from dropins.__main__ import main


class MainEntrypointTests(unittest.TestCase):
    """Validate top-level main() behavior."""

    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.config_path = Path(self._tmp.name) / "config.toml"
        patcher = patch("dropins.__main__.configure_logging")
        self.configure_mock = patcher.start()
        self.addCleanup(patcher.stop)

    def _run(self, *argv: str) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(["--config", str(self.config_path), *argv])
        return code, out.getvalue(), err.getvalue()

    def test_format_command_prints_result(self) -> None:
        code, out, _ = self._run("format", "a {0} b {1}", "X", "Y")
        self.assertEqual(code, 0)
        self.assertEqual(out, "a X b Y\n")
        self.configure_mock.assert_called_once()

    def test_pad_command(self) -> None:
        code, out, _ = self._run("pad", "5", "--char", "0", "--length", "3", "--end")
        self.assertEqual(code, 0)
        self.assertEqual(out, "500\n")

    def test_pad_command_rejects_long_pad_char(self) -> None:
        code, out, err = self._run("pad", "x", "--char", "00", "--length", "2")
        self.assertEqual(code, 2)
        self.assertEqual(out, "")
        self.assertTrue(err.startswith("error: pad:"))

    def test_log_command_uses_config_defaults(self) -> None:
        self.config_path.write_text('[tagged_logger]\ndefault_tag = "Cli"\n', encoding="utf-8")
        with patch("dropins.__main__.TaggedLogger") as logger_cls:
            code, _, _ = self._run("log", "--level", "warn", "hello", "world")
        self.assertEqual(code, 0)
        logger_cls.assert_called_once_with("Cli", enabled=True)
        logger_cls.return_value.warn.assert_called_once_with("hello", "world")

    def test_version_flag(self) -> None:
        code, out, _ = self._run("--version")
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith("dropins "))
        self.configure_mock.assert_not_called()


if __name__ == "__main__":
    unittest.main()
