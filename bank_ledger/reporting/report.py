"""Read-only report over a registry's customers, accounts and ledgers."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from bank_ledger.models import AccountType, TransactionKind
from bank_ledger.store import Registry


@dataclass(frozen=True)
class TransactionLine:
    """One ledger entry as shown in the report."""

    timestamp: datetime
    kind: TransactionKind
    amount: Decimal


@dataclass(frozen=True)
class AccountSection:
    """Account figures followed by its ledger."""

    account_number: int
    account_type: AccountType
    balance: Decimal
    interest: Decimal
    transactions: tuple[TransactionLine, ...] = ()


@dataclass(frozen=True)
class CustomerSection:
    """Customer header followed by their accounts."""

    customer_id: int
    name: str
    accounts: tuple[AccountSection, ...] = ()


@dataclass(frozen=True)
class BankReport:
    """Full report, customers in registry order."""

    generated_at: datetime
    customers: tuple[CustomerSection, ...] = field(default_factory=tuple)

    @property
    def total_balance(self) -> Decimal:
        """Sum of all account balances in the report."""
        return sum(
            (a.balance for c in self.customers for a in c.accounts),
            Decimal("0"),
        )


def generate_report(registry: Registry, generated_at: datetime | None = None) -> BankReport:
    """Project the registry into a ``BankReport`` without modifying it.

    Parameters
    ----------
    registry : Registry
        Registry to read.
    generated_at : datetime | None
        Report timestamp; defaults to the registry clock.

    Returns
    -------
    BankReport
        Customers, accounts and transactions in insertion order.
    """
    customers = tuple(
        CustomerSection(
            customer_id=customer.customer_id,
            name=customer.name,
            accounts=tuple(
                AccountSection(
                    account_number=account.account_number,
                    account_type=account.account_type,
                    balance=account.balance,
                    interest=account.calculate_interest(),
                    transactions=tuple(
                        TransactionLine(tx.timestamp, tx.kind, tx.amount)
                        for tx in account.history
                    ),
                )
                for account in customer.accounts
            ),
        )
        for customer in registry.list_customers()
    )
    return BankReport(
        generated_at=generated_at if generated_at is not None else registry.clock(),
        customers=customers,
    )
