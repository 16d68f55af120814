"""
Transfer Module

Moves an exact amount between two accounts as one logical operation.
"""

from typing import Optional

from .accounts import Account
from .currency import AmountLike, validate_amount
from .exceptions import LedgerError, NullInput, InvalidArgument
from .logging_config import get_logger, log_action


class TransferService:
    """
    Stateless transfer orchestrator

    All request validation happens before either account is touched.
    The source is then debited and the destination credited; the credit
    cannot fail once the amount has been validated, so no rollback is
    needed. Not safe for concurrent use on the same accounts.
    """

    def __init__(self):
        self.logger = get_logger("bank_ledger.transfers")

    def transfer(
        self,
        source: Optional[Account],
        destination: Optional[Account],
        amount: Optional[AmountLike]
    ) -> None:
        """
        Transfer amount from source to destination

        Args:
            source: Account to debit
            destination: Account to credit
            amount: Strictly positive Decimal (or int) amount

        Raises:
            NullInput: If source or destination is None
            InvalidArgument: If source and destination are the same account,
                or amount is missing, zero or negative
            InsufficientFunds: If source holds less than amount; neither
                balance changes
        """
        try:
            value = self._validate_request(source, destination, amount)
            source.withdraw(value)
        except LedgerError as e:
            log_action(
                self.logger, "warning", f"Transfer rejected: {e}",
                action="transfer",
                extra={
                    "source": getattr(source, "id", None),
                    "destination": getattr(destination, "id", None),
                    "amount": repr(amount),
                    "error_kind": e.kind.value
                }
            )
            raise

        destination.deposit(value)

        log_action(
            self.logger, "info", "Transfer completed",
            action="transfer", resource=source.resource,
            extra={
                "source": source.id,
                "destination": destination.id,
                "amount": str(value)
            }
        )

    @staticmethod
    def _validate_request(source, destination, amount):
        if source is None:
            raise NullInput("Source account is required")
        if destination is None:
            raise NullInput("Destination account is required")

        for role, account in (("Source", source), ("Destination", destination)):
            if not isinstance(account, Account):
                raise InvalidArgument(
                    f"{role} must be an Account, got {type(account).__name__}"
                )

        if source is destination:
            raise InvalidArgument("Cannot transfer to the same account")

        # A missing transfer amount is a bad request, not a null reference
        if amount is None:
            raise InvalidArgument("Transfer amount is required")

        return validate_amount(amount)
