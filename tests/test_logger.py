"""Tests for logging setup."""
import logging
import shutil
import tempfile
import unittest
from logging.handlers import RotatingFileHandler
from pathlib import Path

from drive_uploader.utils.logger import (
    TargetContextFilter,
    configure_logging,
    get_logger,
    set_target_context,
)


class TestTargetContextFilter(unittest.TestCase):
    def _record(self):
        return logging.LogRecord("drive_uploader", logging.INFO, __file__, 1, "msg", None, None)

    def test_default_target(self):
        record = self._record()
        self.assertTrue(TargetContextFilter().filter(record))
        self.assertEqual(record.target, "-")

    def test_target_is_stamped(self):
        context_filter = TargetContextFilter()
        context_filter.target = "out/report.xlsx"
        record = self._record()
        context_filter.filter(record)
        self.assertEqual(record.target, "out/report.xlsx")


class TestFileLogging(unittest.TestCase):
    def setUp(self):
        self.test_dir = Path(tempfile.mkdtemp())
        self.logger = get_logger()
        self.handlers_before = list(self.logger.handlers)
        self.level_before = self.logger.level

    def tearDown(self):
        for handler in list(self.logger.handlers):
            if handler not in self.handlers_before:
                self.logger.removeHandler(handler)
                handler.close()
        self.logger.setLevel(self.level_before)
        set_target_context(None)
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_log_file_receives_formatted_records(self):
        log_file = self.test_dir / "logs" / "upload.log"

        logger = configure_logging("DEBUG", log_file=str(log_file), max_file_size_mb=1, backup_count=2)
        set_target_context("out/report.xlsx")
        logger.debug("Resolved folder")
        set_target_context(None)
        logger.info("Done")

        file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
        self.assertEqual(len(file_handlers), 1)
        self.assertEqual(file_handlers[0].maxBytes, 1024 * 1024)
        self.assertEqual(file_handlers[0].backupCount, 2)
        for handler in file_handlers:
            handler.flush()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        self.assertEqual(len(lines), 2)
        self.assertIn("[DEBUG] [target:out/report.xlsx] Resolved folder", lines[0])
        self.assertIn("[INFO] [target:-] Done", lines[1])

    def test_without_log_file_no_file_handler(self):
        logger = configure_logging("INFO")
        self.assertFalse(any(isinstance(h, RotatingFileHandler) for h in logger.handlers))
        self.assertEqual(logger.level, logging.INFO)


if __name__ == "__main__":
    unittest.main()
