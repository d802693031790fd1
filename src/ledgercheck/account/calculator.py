"""Balance calculation over account transactions."""
from functools import reduce

from .models import Account
from ledgercheck.utils.exceptions import NegativeBalance

_U64 = 1 << 64
_I64_SIGN = 1 << 63


def wrapping_add_i64(a: int, b: int) -> int:
    """Add two signed 64-bit integers with two's complement wraparound."""
    total = (a + b) % _U64
    return total - _U64 if total >= _I64_SIGN else total


def balance(account: Account) -> int:
    """
    Sum transaction amounts left to right, starting at 0.

    Overflow wraps like unchecked 64-bit addition, so a sum that wraps
    below zero is reported as a negative balance.

    Raises:
        NegativeBalance: The sum is below zero
    """
    total = reduce(wrapping_add_i64, (t.amount for t in account.transactions), 0)
    if total < 0:
        raise NegativeBalance(total)
    return total
