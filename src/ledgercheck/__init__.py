"""LedgerCheck: load an account record and verify its balance."""

__version__ = "0.1.0"
