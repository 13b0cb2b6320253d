"""Demo scenario filling a bank with synthetic customers and activity."""

import logging

from bank_ledger.commands import Bank
from bank_ledger.generators import ActivityGenerator, CustomerProfileGenerator

logger = logging.getLogger(__name__)


class DemoScenario:
    """Populate a ``Bank`` through its dispatcher.

    Every customer gets one to three Savings or Current accounts and a
    stream of deposits and withdrawals. Withdrawals the account rules
    reject are left rejected, so the resulting ledgers look like a real
    session's.
    """

    def __init__(
        self,
        num_customers: int = 10,
        transactions_per_account: int = 5,
        seed: int | None = None,
    ) -> None:
        """Initialize demo scenario.

        Parameters
        ----------
        num_customers : int
            Number of customers to register.
        transactions_per_account : int
            Average transactions attempted per account.
        seed : int | None
            Random seed for reproducibility.
        """
        self.num_customers = num_customers
        self.transactions_per_account = transactions_per_account
        self.seed = seed

        self._customer_gen = CustomerProfileGenerator(seed=seed)
        self._activity_gen = ActivityGenerator(seed=seed)

    def generate(self, bank: Bank | None = None) -> Bank:
        """Run the scenario against ``bank`` (a fresh one if omitted).

        Returns
        -------
        Bank
            The populated bank.
        """
        bank = bank or Bank()
        rejected = 0

        logger.info("Generating %d demo customers...", self.num_customers)
        for profile in self._customer_gen.generate_batch(self.num_customers):
            customer_id = bank.add_customer(profile.name, profile.national_id).value

            num_accounts = 0
            for opening in self._activity_gen.generate_openings(customer_id):
                if bank.dispatch(opening).ok:
                    num_accounts += 1

            requests = self._activity_gen.generate_transactions(
                customer_id,
                num_accounts,
                self.transactions_per_account * num_accounts,
            )
            for request in requests:
                if not bank.dispatch(request).ok:
                    rejected += 1

        summary = bank.registry.summary()
        logger.info(
            "Demo data ready: %d customers, %d accounts, %d transactions (%d rejected)",
            summary["customers"],
            summary["accounts"],
            summary["transactions"],
            rejected,
        )
        return bank
