"""Tests for logging setup."""
import logging
import unittest
import tempfile
import shutil
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ledgercheck.config.settings import AppSettings
from ledgercheck.utils import logger as logger_mod
from ledgercheck.utils.exceptions import ConfigError


class TestLogger(unittest.TestCase):
    """Test logger configuration and account context."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = Path(tempfile.mkdtemp())
        self.instance = logger_mod._get_instance()

    def tearDown(self):
        """Clean up test fixtures."""
        for handler in list(self.instance.logger.handlers):
            if isinstance(handler, RotatingFileHandler):
                self.instance.logger.removeHandler(handler)
                handler.close()
        self.instance.set_level("INFO")
        logger_mod.set_account_context(None)
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_console_handler_avoids_stdout(self):
        import sys
        streams = [
            h.stream for h in self.instance.logger.handlers
            if type(h) is logging.StreamHandler
        ]
        self.assertTrue(streams)
        self.assertNotIn(sys.stdout, streams)

    def test_configure_logging_writes_file_with_context(self):
        log_file = self.test_dir / "logs" / "ledgercheck.log"
        settings = AppSettings(log_level="DEBUG", log_file=str(log_file))

        log = logger_mod.configure_logging(settings)
        logger_mod.set_account_context("acct-9")
        log.debug("hello")
        for handler in log.handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        self.assertIn("[DEBUG] [account:acct-9] hello", content)
        self.assertEqual(log.level, logging.DEBUG)

    def test_default_context_is_system(self):
        record = logging.LogRecord("ledgercheck", logging.INFO, __file__, 1, "msg", None, None)
        self.instance.account_filter.filter(record)
        self.assertEqual(record.account_id, "system")

    def test_file_handler_replaced_not_duplicated(self):
        first = AppSettings(log_file=str(self.test_dir / "a.log"))
        second = AppSettings(log_file=str(self.test_dir / "b.log"))

        logger_mod.configure_logging(first)
        log = logger_mod.configure_logging(second)

        file_handlers = [h for h in log.handlers if isinstance(h, RotatingFileHandler)]
        self.assertEqual(len(file_handlers), 1)
        self.assertTrue(file_handlers[0].baseFilename.endswith("b.log"))

    def test_unwritable_log_path_raises_config_error(self):
        blocker = self.test_dir / "blocker"
        blocker.write_text("not a directory")
        settings = AppSettings(log_file=str(blocker / "sub" / "ledgercheck.log"))

        with self.assertRaises(ConfigError):
            logger_mod.configure_logging(settings)

        file_handlers = [
            h for h in self.instance.logger.handlers if isinstance(h, RotatingFileHandler)
        ]
        self.assertEqual(file_handlers, [])


if __name__ == "__main__":
    unittest.main()
