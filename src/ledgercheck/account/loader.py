"""Account file loading and schema validation."""
from pathlib import Path
from typing import List, Union

from pydantic import BaseModel, Field, StrictInt, StrictStr, ValidationError

from .models import Account, Transaction
from ledgercheck.utils.logger import get_logger
from ledgercheck.utils.exceptions import AccountIOError, ParseError

logger = get_logger()

I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1


class TransactionSchema(BaseModel):
    """Pydantic schema for a transaction entry."""
    id: StrictStr = Field(description="Transaction identifier")
    amount: StrictInt = Field(ge=I64_MIN, le=I64_MAX, description="Signed amount")

    def to_transaction(self) -> Transaction:
        return Transaction(id=self.id, amount=self.amount)


class AccountSchema(BaseModel):
    """Pydantic schema for the account file."""
    id: StrictStr = Field(description="Account identifier")
    transactions: List[TransactionSchema]

    def to_account(self) -> Account:
        return Account(
            id=self.id,
            transactions=tuple(t.to_transaction() for t in self.transactions)
        )


def load(path: Union[str, Path]) -> Account:
    """
    Load an account from a JSON file.

    Args:
        path: Path to the account file

    Returns:
        Fully populated Account

    Raises:
        AccountIOError: File cannot be opened or read
        ParseError: Contents are not valid JSON matching the account schema
    """
    logger.debug(f"Loading account from {path}")

    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        logger.debug(f"Cannot read {path}: {e}")
        raise AccountIOError.from_os_error(e) from e

    try:
        account = AccountSchema.model_validate_json(data).to_account()
    except ValidationError as e:
        logger.debug(f"Invalid account data in {path}: {e}")
        raise ParseError.from_validation_error(e) from e

    logger.info(f"Loaded account {account.id} with {len(account.transactions)} transactions")
    return account
