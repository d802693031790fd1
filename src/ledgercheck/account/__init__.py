"""Account loading and validation module."""
from .models import Account, Transaction
from .loader import load, AccountSchema, TransactionSchema
from .calculator import balance, wrapping_add_i64

__all__ = [
    "Account",
    "Transaction",
    "AccountSchema",
    "TransactionSchema",
    "load",
    "balance",
    "wrapping_add_i64"
]
