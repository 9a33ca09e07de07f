"""
Tests for formatking.utils.logging module.
"""

import logging
import shutil
import tempfile
import unittest
from pathlib import Path

from formatking.utils.logging import (
    CLI_FORMAT,
    ColoredFormatter,
    PerformanceLogger,
    setup_logging,
)


class TestSetupLogging(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.root = logging.getLogger()
        self.saved_handlers = list(self.root.handlers)
        self.saved_level = self.root.level

    def tearDown(self):
        for handler in self.root.handlers:
            handler.close()
        self.root.handlers[:] = self.saved_handlers
        self.root.setLevel(self.saved_level)
        shutil.rmtree(self.test_dir)

    def test_level_and_single_console_handler(self):
        setup_logging(level="debug", format_string=CLI_FORMAT)
        setup_logging(level="INFO")
        self.assertEqual(self.root.level, logging.INFO)
        self.assertEqual(len(self.root.handlers), 1)

    def test_unknown_level_falls_back_to_warning(self):
        setup_logging(level="chatty")
        self.assertEqual(self.root.level, logging.WARNING)

    def test_log_file(self):
        log_file = Path(self.test_dir) / "logs" / "formatking.log"
        setup_logging(level="INFO", log_file=log_file)
        logging.getLogger("formatking.test").info("parsed 3 tables")
        for handler in self.root.handlers:
            handler.flush()

        self.assertIn("parsed 3 tables", log_file.read_text(encoding="utf-8"))


class TestLoggers(unittest.TestCase):
    def test_colored_formatter_restores_levelname(self):
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)
        text = ColoredFormatter("%(levelname)s %(message)s").format(record)
        self.assertIn("\033[31m", text)
        self.assertEqual(record.levelname, "ERROR")

    def test_performance_logger(self):
        logger = logging.getLogger("formatking.test.perf")
        with self.assertLogs(logger, level="DEBUG") as cm:
            with PerformanceLogger("Classifying input", logger, level="DEBUG"):
                pass
        self.assertIn("Classifying input started", cm.output[0])
        self.assertIn("Classifying input completed in", cm.output[1])

    def test_performance_logger_failure(self):
        logger = logging.getLogger("formatking.test.perf")
        with self.assertLogs(logger, level="INFO") as cm:
            with self.assertRaises(ValueError):
                with PerformanceLogger("Parsing", logger):
                    raise ValueError("bad row")
        self.assertIn("Parsing failed after", cm.output[-1])
        self.assertIn("bad row", cm.output[-1])


if __name__ == "__main__":
    unittest.main()
