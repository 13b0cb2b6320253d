"""Account model for the ledger."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Callable

from bank_ledger.models import rules
from bank_ledger.models.enums import AccountType, TransactionKind
from bank_ledger.models.transaction import Transaction

logger = logging.getLogger(__name__)


@dataclass
class Account:
    """Bank account holding a balance and its transaction ledger.

    Account types:
    - BASIC: no overdraft, no interest
    - SAVINGS: no overdraft, earns ``interest_rate`` percent
    - CURRENT: may go below zero down to ``-overdraft_limit``, no interest

    ``balance`` always equals the signed sum of ``history``; use
    ``deposit``/``withdraw`` rather than assigning to it.
    """

    account_number: int
    customer_id: int
    account_type: AccountType
    balance: Decimal
    created_at: datetime
    interest_rate: Decimal = Decimal("0")
    overdraft_limit: Decimal = Decimal("0")
    clock: Callable[[], datetime] = field(default=datetime.now, repr=False, compare=False)
    _history: list[Transaction] = field(default_factory=list, repr=False)

    @classmethod
    def open(
        cls,
        account_number: int,
        customer_id: int,
        account_type: AccountType,
        initial_balance: Decimal | int | str = 0,
        interest_rate: Decimal | int | str = 0,
        overdraft_limit: Decimal | int | str = 0,
        clock: Callable[[], datetime] = datetime.now,
    ) -> Account:
        """Open an account and record its opening balance.

        A negative ``initial_balance`` is clamped to zero.

        Raises
        ------
        InvalidAmountError
            If any amount is not a finite number, or ``interest_rate`` or
            ``overdraft_limit`` is negative.
        """
        rate = rules.validate_non_negative(interest_rate, "Interest rate")
        limit = rules.validate_non_negative(overdraft_limit, "Overdraft limit")
        opening = max(rules.ZERO, rules.validate_finite(initial_balance, "Initial balance"))
        now = clock()
        account = cls(
            account_number=account_number,
            customer_id=customer_id,
            account_type=account_type,
            balance=opening,
            created_at=now,
            interest_rate=rate,
            overdraft_limit=limit,
            clock=clock,
        )
        account._history.append(Transaction(TransactionKind.OPENING_BALANCE, opening, now))
        return account

    @property
    def history(self) -> tuple[Transaction, ...]:
        """Transactions in chronological order, opening balance first."""
        return tuple(self._history)

    def deposit(self, amount: Decimal | int | str) -> Transaction:
        """Add ``amount`` to the balance.

        Raises
        ------
        InvalidAmountError
            If ``amount`` is not positive.
        """
        amt = rules.validate_positive(amount)
        return self._apply(TransactionKind.DEPOSIT, amt, self.balance + amt)

    def withdraw(self, amount: Decimal | int | str) -> Transaction:
        """Take ``amount`` from the balance under this account type's rule.

        Raises
        ------
        InvalidAmountError
            If ``amount`` is not positive.
        InsufficientFundsError
            BASIC/SAVINGS account without enough balance.
        OverdraftExceededError
            CURRENT account beyond its overdraft limit.
        """
        amt = rules.validate_positive(amount)
        rules.check_withdrawal(self.account_type, self.balance, amt, self.overdraft_limit)
        return self._apply(TransactionKind.WITHDRAW, amt, self.balance - amt)

    def calculate_interest(self) -> Decimal:
        """Interest on the current balance; does not touch the ledger."""
        return rules.calculate_interest(self.account_type, self.balance, self.interest_rate)

    def available_funds(self) -> Decimal:
        """Largest amount a withdrawal could take right now."""
        if self.account_type == AccountType.CURRENT:
            return self.balance + self.overdraft_limit
        return self.balance

    def _apply(self, kind: TransactionKind, amount: Decimal, new_balance: Decimal) -> Transaction:
        tx = Transaction(kind, amount, self.clock())
        self._history.append(tx)
        self.balance = new_balance
        logger.debug(
            "Account %d: %s %s, balance %s", self.account_number, kind.value, amount, new_balance
        )
        return tx
