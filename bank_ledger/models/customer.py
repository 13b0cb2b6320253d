"""Customer model for the ledger."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Callable

from bank_ledger.exceptions import AccountNotFoundError, NoAccountsError
from bank_ledger.models.account import Account
from bank_ledger.models.enums import AccountType


@dataclass
class Customer:
    """Bank customer owning an ordered list of accounts."""

    customer_id: int
    name: str
    national_id: str
    created_at: datetime = field(default_factory=datetime.now)
    accounts: list[Account] = field(default_factory=list)

    def open_account(
        self,
        account_type: AccountType,
        initial_balance: Decimal | int | str,
        account_number: int,
        interest_rate: Decimal | int | str = 0,
        overdraft_limit: Decimal | int | str = 0,
        clock: Callable[[], datetime] = datetime.now,
    ) -> Account:
        """Open a new account of ``account_type`` and append it."""
        account = Account.open(
            account_number=account_number,
            customer_id=self.customer_id,
            account_type=account_type,
            initial_balance=initial_balance,
            interest_rate=interest_rate,
            overdraft_limit=overdraft_limit,
            clock=clock,
        )
        self.accounts.append(account)
        return account

    def get_account(self, index: int = 0) -> Account:
        """Return the account at ``index`` in opening order.

        Raises
        ------
        NoAccountsError
            If the customer has not opened any account.
        AccountNotFoundError
            If ``index`` is outside the account list.
        """
        if not self.accounts:
            raise NoAccountsError(f"Customer {self.customer_id} has no accounts")
        if not 0 <= index < len(self.accounts):
            raise AccountNotFoundError(
                f"Customer {self.customer_id} has no account at position {index}"
            )
        return self.accounts[index]

    def total_balance(self) -> Decimal:
        """Sum of balances across all accounts."""
        return sum((a.balance for a in self.accounts), Decimal("0"))
