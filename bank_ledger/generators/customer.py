"""Customer profile generator for demo sessions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from bank_ledger.generators.base import BaseGenerator


@dataclass(frozen=True)
class CustomerProfile:
    """Name and national id for a customer to be registered."""

    name: str
    national_id: str


class CustomerProfileGenerator(BaseGenerator):
    """Generate synthetic customer names and national ids."""

    def generate(self) -> CustomerProfile:
        """Generate a single customer profile."""
        return CustomerProfile(
            name=self.fake.name(),
            national_id=self.fake.ssn(),
        )

    def generate_batch(self, count: int) -> Iterator[CustomerProfile]:
        """Generate multiple customer profiles.

        Parameters
        ----------
        count : int
            Number of profiles to generate.

        Yields
        ------
        CustomerProfile
            Generated profiles.
        """
        for _ in range(count):
            yield self.generate()
