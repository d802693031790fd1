"""Data models for account validation."""
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Transaction:
    """Transaction data."""
    id: str
    amount: int  # signed 64-bit


@dataclass(frozen=True)
class Account:
    """Account record with its transactions, in file order."""
    id: str
    transactions: Tuple[Transaction, ...] = ()

    @classmethod
    def load(cls, path) -> "Account":
        """Load an account from a JSON file."""
        from .loader import load
        return load(path)

    def balance(self) -> int:
        """Sum of transaction amounts; raises NegativeBalance below zero."""
        from .calculator import balance
        return balance(self)
