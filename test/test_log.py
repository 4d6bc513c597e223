"""Tests for logging setup and debug-only pipeline logging."""

import logging
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from PlainQuery.parser import parse_query
from PlainQuery.utils.log import configure_logging, log


def _reset_log() -> None:
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()
    log.setLevel(logging.NOTSET)


class TestConfigureLogging(unittest.TestCase):
    def tearDown(self) -> None:
        _reset_log()

    def test_console_only(self) -> None:
        self.assertIsNone(configure_logging(level="info"))
        self.assertEqual(len(log.handlers), 1)
        self.assertEqual(log.level, logging.INFO)
        self.assertFalse(log.propagate)

    def test_file_handler_logs_debug(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = configure_logging(level="WARNING", action="translate", log_to_file=True, log_dir=tmp)
            self.assertIsNotNone(path)
            self.assertEqual(path.parent, Path(tmp) / "translate")
            self.assertEqual(log.level, logging.DEBUG)
            log.debug("hello file")
            for handler in log.handlers:
                handler.flush()
            self.assertIn("[DEBG] hello file", path.read_text(encoding="utf-8"))
            _reset_log()

    def test_reconfigure_closes_previous_file_handler(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            configure_logging(action="translate", log_to_file=True, log_dir=tmp)
            first = [h for h in log.handlers if isinstance(h, logging.FileHandler)][0]
            self.assertIsNotNone(first.stream)

            configure_logging(action="translate", log_to_file=True, log_dir=tmp)
            self.assertIsNone(first.stream)
            self.assertNotIn(first, log.handlers)
            _reset_log()


class TestParseQueryLogging(unittest.TestCase):
    def tearDown(self) -> None:
        log.setLevel(logging.NOTSET)

    def test_tree_is_not_described_without_debug(self) -> None:
        log.setLevel(logging.WARNING)
        with patch("PlainQuery.parser.describe") as describe:
            parse_query("apple not banana")
        describe.assert_not_called()

    def test_tree_is_described_with_debug(self) -> None:
        log.setLevel(logging.DEBUG)
        with patch("PlainQuery.parser.describe", return_value="tree") as describe:
            parse_query("apple not banana")
        self.assertEqual(describe.call_count, 2)


if __name__ == "__main__":
    unittest.main()
