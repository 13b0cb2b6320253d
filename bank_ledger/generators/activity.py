"""Deposit and withdrawal request generator for demo sessions."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterator

from bank_ledger.commands import OpenAccount, Transact
from bank_ledger.generators.base import BaseGenerator
from bank_ledger.models import AccountType, Operation


class ActivityGenerator(BaseGenerator):
    """Generate account openings and transactions.

    Amounts follow a Pareto distribution (many small movements, a few
    large ones), capped at ``MAX_AMOUNT``.
    """

    ACCOUNT_TYPES = [AccountType.SAVINGS, AccountType.CURRENT]
    ACCOUNT_TYPE_WEIGHTS = [0.55, 0.45]

    OPERATIONS = list(Operation)
    OPERATION_WEIGHTS = [0.6, 0.4]

    MAX_AMOUNT = 5000.0

    def generate_openings(self, customer_id: int) -> Iterator[OpenAccount]:
        """Generate one to three account openings for a customer."""
        num_accounts = self.random.choices([1, 2, 3], weights=[0.6, 0.3, 0.1], k=1)[0]
        for _ in range(num_accounts):
            account_type = self.random.choices(
                self.ACCOUNT_TYPES, weights=self.ACCOUNT_TYPE_WEIGHTS, k=1
            )[0]
            yield OpenAccount(
                customer_id=customer_id,
                account_type=account_type,
                initial_balance=self._amount(scale=200),
            )

    def generate_transactions(
        self,
        customer_id: int,
        num_accounts: int,
        count: int,
    ) -> Iterator[Transact]:
        """Generate ``count`` deposits/withdrawals spread over a customer's accounts."""
        for _ in range(count):
            operation = self.random.choices(
                self.OPERATIONS, weights=self.OPERATION_WEIGHTS, k=1
            )[0]
            yield Transact(
                customer_id=customer_id,
                operation=operation,
                amount=self._amount(scale=50),
                account_index=self.random.randrange(num_accounts),
            )

    def _amount(self, scale: float) -> Decimal:
        amount = min(self.random.paretovariate(1.5) * scale, self.MAX_AMOUNT)
        return Decimal(str(round(amount, 2)))
