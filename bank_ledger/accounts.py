"""
Account Module

An account holds a single non-negative Decimal balance that changes
only through deposit and withdraw. Every operation validates fully
before mutating, so a failed call leaves the balance untouched.
"""

from decimal import Decimal
from typing import Optional
import uuid

from .currency import AmountLike, validate_amount, exact_add, exact_subtract
from .exceptions import LedgerError, InsufficientFunds
from .logging_config import get_logger, log_action


class Account:
    """
    Bank account with an exact decimal balance

    Accounts compare by identity: two accounts holding the same balance
    are still different accounts.
    """

    def __init__(self, name: Optional[str] = None):
        self.id = str(uuid.uuid4())
        self.name = name
        self._balance = Decimal('0')
        self.logger = get_logger("bank_ledger.accounts")

    @property
    def balance(self) -> Decimal:
        """Current balance"""
        return self._balance

    def get_balance(self) -> Decimal:
        """Current balance"""
        return self._balance

    @property
    def resource(self) -> str:
        return f"account:{self.id}"

    def deposit(self, amount: AmountLike) -> None:
        """
        Credit the account

        Args:
            amount: Strictly positive Decimal (or int) amount

        Raises:
            NullInput: If amount is None
            InvalidArgument: If amount is not positive
        """
        try:
            value = validate_amount(amount)
        except LedgerError as e:
            self._log_rejected("deposit", amount, e)
            raise

        self._balance = exact_add(self._balance, value)

        log_action(
            self.logger, "debug", "Deposit applied",
            action="deposit", resource=self.resource,
            extra={"amount": str(value), "balance": str(self._balance)}
        )

    def withdraw(self, amount: AmountLike) -> None:
        """
        Debit the account

        Withdrawing the whole balance is allowed; anything above it is
        refused, never clamped.

        Args:
            amount: Strictly positive Decimal (or int) amount

        Raises:
            NullInput: If amount is None
            InvalidArgument: If amount is not positive
            InsufficientFunds: If amount exceeds the balance
        """
        try:
            value = validate_amount(amount)
            if value > self._balance:
                raise InsufficientFunds(requested=value, available=self._balance)
        except LedgerError as e:
            self._log_rejected("withdraw", amount, e)
            raise

        self._balance = exact_subtract(self._balance, value)

        log_action(
            self.logger, "debug", "Withdrawal applied",
            action="withdraw", resource=self.resource,
            extra={"amount": str(value), "balance": str(self._balance)}
        )

    def _log_rejected(self, action: str, amount, error: LedgerError) -> None:
        log_action(
            self.logger, "warning", f"{action.capitalize()} rejected: {error}",
            action=action, resource=self.resource,
            extra={"amount": repr(amount), "error_kind": error.kind.value}
        )

    def __repr__(self) -> str:
        label = f" {self.name!r}" if self.name else ""
        return f"<Account{label} id={self.id[:8]} balance={self._balance}>"
