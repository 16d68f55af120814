"""
Bank Ledger

A minimal banking ledger: accounts holding an exact Decimal balance
and an atomic two-party transfer between them.
"""

from .accounts import Account
from .exceptions import (
    ErrorKind, LedgerError, NullInput, InvalidArgument, InsufficientFunds
)
from .transfers import TransferService

__version__ = "1.0.0"

__all__ = [
    "Account",
    "TransferService",
    "ErrorKind",
    "LedgerError",
    "NullInput",
    "InvalidArgument",
    "InsufficientFunds",
]
