"""Logging infrastructure with account context."""
import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional

from .exceptions import ConfigError


class AccountContextFilter(logging.Filter):
    """Add account context to log records."""

    def __init__(self):
        super().__init__()
        self.account_id: Optional[str] = None

    def filter(self, record):
        """Add account_id to record."""
        record.account_id = self.account_id or "system"
        return True


class LedgerCheckLogger:
    """Centralized logging manager."""

    def __init__(self, log_level: str = "INFO"):
        self.account_filter = AccountContextFilter()
        self.log_file: Optional[Path] = None

        self.logger = logging.getLogger("ledgercheck")
        self.logger.setLevel(getattr(logging, log_level.upper()))
        self.logger.propagate = False

        # Remove existing handlers
        self.logger.handlers.clear()

        self.formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [account:%(account_id)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

        # stdout is reserved for the balance report
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(self.formatter)
        console_handler.addFilter(self.account_filter)
        self.logger.addHandler(console_handler)

    def set_level(self, log_level: str):
        """Change the logger level."""
        self.logger.setLevel(getattr(logging, log_level.upper()))

    def add_file_handler(self, log_file: Path, max_bytes: int, backup_count: int):
        """Attach a rotating file handler, replacing any previous one."""
        for handler in list(self.logger.handlers):
            if isinstance(handler, RotatingFileHandler):
                self.logger.removeHandler(handler)
                handler.close()

        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(self.formatter)
        file_handler.addFilter(self.account_filter)
        self.logger.addHandler(file_handler)
        self.log_file = log_file

    def set_account_context(self, account_id: Optional[str]):
        """Set current account context for logging."""
        self.account_filter.account_id = account_id

    def get_logger(self) -> logging.Logger:
        """Get the configured logger."""
        return self.logger


# Global logger instance
_logger_instance: Optional[LedgerCheckLogger] = None


def _get_instance(log_level: str = "INFO") -> LedgerCheckLogger:
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = LedgerCheckLogger(log_level)
    return _logger_instance


def get_logger(log_level: str = "INFO") -> logging.Logger:
    """Get or create global logger instance."""
    return _get_instance(log_level).get_logger()


def configure_logging(settings) -> logging.Logger:
    """Apply level and optional log file from application settings."""
    instance = _get_instance()
    instance.set_level(settings.log_level)
    if settings.log_file:
        try:
            instance.add_file_handler(
                Path(settings.log_file),
                max_bytes=settings.log_max_file_size_mb * 1024 * 1024,
                backup_count=settings.log_backup_count
            )
        except OSError as e:
            raise ConfigError(f"Cannot open log file {settings.log_file}: {e}") from e
    return instance.get_logger()


def set_account_context(account_id: Optional[str]):
    """Set account context for logging."""
    if _logger_instance:
        _logger_instance.set_account_context(account_id)
