"""Customer registry with explicit id sequences."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Callable, Iterator

from bank_ledger.exceptions import CustomerNotFoundError
from bank_ledger.models import AccountType, Customer
from bank_ledger.store.sequence import Sequence

logger = logging.getLogger(__name__)


@dataclass
class Registry:
    """In-memory store for customers for the lifetime of one session.

    Customer ids and account numbers come from two independent sequences
    owned by the registry. Account numbers are shared by all account types
    and customers, so they are unique across the whole registry.
    """

    customer_ids: Sequence = field(default_factory=lambda: Sequence(1))
    account_numbers: Sequence = field(default_factory=lambda: Sequence(1000))
    clock: Callable[[], datetime] = field(default=datetime.now, repr=False)
    _customers: list[Customer] = field(default_factory=list)

    def add_customer(self, name: str, national_id: str) -> int:
        """Create and store a customer, returning its id."""
        customer = Customer(
            customer_id=self.customer_ids.next(),
            name=name,
            national_id=national_id,
            created_at=self.clock(),
        )
        self._customers.append(customer)
        logger.info("Added customer %d (%s)", customer.customer_id, name)
        return customer.customer_id

    def find_customer(self, customer_id: int) -> Customer:
        """Find a customer by id.

        Raises
        ------
        CustomerNotFoundError
            If no customer has ``customer_id``.
        """
        for customer in self._customers:
            if customer.customer_id == customer_id:
                return customer
        raise CustomerNotFoundError(f"Customer {customer_id} not found")

    def list_customers(self) -> Iterator[Customer]:
        """Iterate customers in the order they were added."""
        yield from self._customers

    def open_account(
        self,
        customer_id: int,
        account_type: AccountType,
        initial_balance: Decimal | int | str = 0,
        interest_rate: Decimal | int | str = 0,
        overdraft_limit: Decimal | int | str = 0,
    ) -> int:
        """Open an account for a customer, returning its account number.

        The account number is only consumed once the customer exists and
        the account parameters are valid.
        """
        customer = self.find_customer(customer_id)
        account = customer.open_account(
            account_type,
            initial_balance,
            account_number=self.account_numbers.peek(),
            interest_rate=interest_rate,
            overdraft_limit=overdraft_limit,
            clock=self.clock,
        )
        self.account_numbers.next()
        logger.info(
            "Opened %s account %d for customer %d with balance %s",
            account_type.value,
            account.account_number,
            customer_id,
            account.balance,
        )
        return account.account_number

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        accounts = [a for c in self._customers for a in c.accounts]
        return {
            "customers": len(self._customers),
            "accounts": len(accounts),
            "transactions": sum(len(a.history) for a in accounts),
        }
