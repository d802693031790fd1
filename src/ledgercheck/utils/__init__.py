"""Utility modules."""
from .logger import get_logger, set_account_context, configure_logging
from .exceptions import (
    LedgerCheckError,
    ConfigError,
    AccountError,
    AccountIOError,
    ParseError,
    NegativeBalance
)

__all__ = [
    "get_logger",
    "set_account_context",
    "configure_logging",
    "LedgerCheckError",
    "ConfigError",
    "AccountError",
    "AccountIOError",
    "ParseError",
    "NegativeBalance"
]
