"""In-memory registry of customers and their accounts."""

from bank_ledger.store.registry import Registry
from bank_ledger.store.sequence import Sequence

__all__ = ["Registry", "Sequence"]
