"""Main entry point: load the account file and report its balance."""
import sys
import argparse
from pathlib import Path
from typing import List, Optional

from ledgercheck.account import Account
from ledgercheck.config.settings import AppSettings
from ledgercheck.utils.exceptions import AccountError, ConfigError, NegativeBalance
from ledgercheck.utils.logger import get_logger, configure_logging, set_account_context

logger = get_logger()


def run(account_path: Path) -> str:
    """Load the account and return the balance report line."""
    account = Account.load(account_path)
    set_account_context(account.id)
    balance = account.balance()
    logger.debug(f"Computed balance {balance} over {len(account.transactions)} transactions")
    return f"Balance of account {account.id} is {balance}"


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for LedgerCheck."""
    parser = argparse.ArgumentParser(
        description="Report the balance of the account stored in the configured account file"
    )
    parser.parse_args(argv)

    try:
        settings = AppSettings.load()
        configure_logging(settings)
    except ConfigError as e:
        logger.critical(f"Invalid configuration: {e}")
        return 1

    set_account_context(None)
    account_path = Path(settings.account_file)

    try:
        report = run(account_path)
    except NegativeBalance as e:
        logger.critical(f"Impossible balance: {e}")
        return 1
    except AccountError as e:
        logger.critical(f"Aaand it's all gone: {e}")
        return 1

    print(report)
    return 0


def cli():
    """Console script wrapper."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
