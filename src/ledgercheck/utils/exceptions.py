"""Custom exception classes for LedgerCheck."""
from typing import Optional


class LedgerCheckError(Exception):
    """Base exception for LedgerCheck."""
    pass


class ConfigError(LedgerCheckError):
    """Configuration-related errors."""
    pass


class AccountError(LedgerCheckError):
    """Base class for account loading and validation failures."""

    kind: str = ""
    description: str = "Account error"

    def __init__(self, cause: Optional[BaseException] = None):
        super().__init__(self.description)
        self.cause = cause

    def __str__(self):
        return self.description


class AccountIOError(AccountError):
    """Account file is missing or unreadable."""

    kind = "io"
    description = "IO error"

    @classmethod
    def from_os_error(cls, error: OSError) -> "AccountIOError":
        """Wrap a low-level OS error."""
        return cls(cause=error)


class ParseError(AccountError):
    """Account file is not valid JSON or does not match the account schema."""

    kind = "json"
    description = "JSON error"

    @classmethod
    def from_validation_error(cls, error: Exception) -> "ParseError":
        """Wrap a pydantic validation error (which also covers malformed JSON)."""
        return cls(cause=error)


class NegativeBalance(AccountError):
    """Computed balance is below zero."""

    kind = "negative_balance"
    description = "Negative balance"

    def __init__(self, amount: int):
        super().__init__()
        self.amount = amount
        self.args = (amount,)

    def __str__(self):
        return f"{self.description}: {self.amount}"

    def __eq__(self, other):
        if not isinstance(other, NegativeBalance):
            return NotImplemented
        return self.amount == other.amount

    def __hash__(self):
        return hash((self.kind, self.amount))
