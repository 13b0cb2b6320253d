"""Ledger domain models."""

from bank_ledger.models.account import Account
from bank_ledger.models.customer import Customer
from bank_ledger.models.enums import AccountType, Operation, TransactionKind
from bank_ledger.models.transaction import Transaction

__all__ = [
    "Account",
    "AccountType",
    "Customer",
    "Operation",
    "Transaction",
    "TransactionKind",
]
