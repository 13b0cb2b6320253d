"""Enumeration types for ledger entities."""

from enum import Enum


class AccountType(str, Enum):
    BASIC = "BASIC"
    SAVINGS = "SAVINGS"
    CURRENT = "CURRENT"


class TransactionKind(str, Enum):
    OPENING_BALANCE = "OPENING_BALANCE"
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"

    @property
    def label(self) -> str:
        """Human-readable label used in reports."""
        return self.value.replace("_", " ").title()


class Operation(str, Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"
