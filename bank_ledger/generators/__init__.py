"""Demo data generators."""

from bank_ledger.generators.activity import ActivityGenerator
from bank_ledger.generators.customer import CustomerProfile, CustomerProfileGenerator

__all__ = [
    "ActivityGenerator",
    "CustomerProfile",
    "CustomerProfileGenerator",
]
