"""Transaction model for the account ledger."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from bank_ledger.models.enums import TransactionKind


@dataclass(frozen=True)
class Transaction:
    """Balance-affecting event recorded in an account's history.

    ``amount`` is always non-negative; the direction comes from ``kind``.
    """

    kind: TransactionKind
    amount: Decimal
    timestamp: datetime

    @property
    def signed_amount(self) -> Decimal:
        """Amount as it contributes to the balance."""
        if self.kind == TransactionKind.WITHDRAW:
            return -self.amount
        return self.amount
