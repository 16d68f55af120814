"""
Ledger Error Types

Every failure in the ledger is one of three kinds. Each exception
carries its ErrorKind so callers can dispatch on the closed set
instead of matching class names.
"""

from decimal import Decimal
from enum import Enum


class ErrorKind(Enum):
    """Closed set of ledger failure categories"""
    NULL_INPUT = "null_input"                   # Required argument missing
    INVALID_ARGUMENT = "invalid_argument"       # Value breaks a domain rule
    INSUFFICIENT_FUNDS = "insufficient_funds"   # Debit above available balance


class LedgerError(Exception):
    """Base class for all ledger errors"""
    kind: ErrorKind


class NullInput(LedgerError, TypeError):
    """A required amount or account reference was None."""
    kind = ErrorKind.NULL_INPUT


class InvalidArgument(LedgerError, ValueError):
    """A present value failed a domain rule (non-positive amount, self-transfer)."""
    kind = ErrorKind.INVALID_ARGUMENT


class InsufficientFunds(LedgerError):
    """
    A withdrawal asked for more than the account holds.

    The requested and available amounts are kept on the exception so
    callers can report them without re-reading the account.
    """
    kind = ErrorKind.INSUFFICIENT_FUNDS

    def __init__(self, requested: Decimal, available: Decimal):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient funds: available {available}, requested {requested}"
        )
