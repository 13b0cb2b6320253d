"""Command dispatcher between the interactive shell and the registry.

The shell builds one of the request types below and hands it to
``Bank.dispatch``. Domain errors come back as a failed ``CommandResult``
instead of propagating, so a rejected deposit or an unknown customer id
never ends the session.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Callable, Union

from bank_ledger.config import BankConfig
from bank_ledger.exceptions import LedgerError
from bank_ledger.models import AccountType, Operation, Transaction, rules
from bank_ledger.reporting import BankReport, generate_report
from bank_ledger.store import Registry, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddCustomer:
    """Register a new customer."""

    name: str
    national_id: str


@dataclass(frozen=True)
class OpenAccount:
    """Open an account with the configured default rate or overdraft."""

    customer_id: int
    account_type: AccountType
    initial_balance: Decimal | int | str = Decimal("0")


@dataclass(frozen=True)
class Transact:
    """Deposit into or withdraw from one of a customer's accounts."""

    customer_id: int
    operation: Operation
    amount: Decimal | int | str
    account_index: int = 0


@dataclass(frozen=True)
class GenerateReport:
    """Build a report of every customer, account and transaction."""


Request = Union[AddCustomer, OpenAccount, Transact, GenerateReport]


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a dispatched request.

    ``value`` holds the customer id, account number, recorded
    ``Transaction`` or ``BankReport`` depending on the request.
    """

    ok: bool
    value: Any = None
    error: LedgerError | None = field(default=None, compare=False)

    @property
    def message(self) -> str:
        """Error text for failed results, empty otherwise."""
        return str(self.error) if self.error is not None else ""


class Bank:
    """Front door to a ``Registry`` for one session.

    Parameters
    ----------
    config : BankConfig | None
        Account defaults used when opening accounts.
    registry : Registry | None
        Registry to operate on; a fresh one numbered from the config
        defaults is created when omitted.
    """

    def __init__(
        self,
        config: BankConfig | None = None,
        registry: Registry | None = None,
    ) -> None:
        self.config = config or BankConfig()
        if registry is None:
            defaults = self.config.defaults
            registry = Registry(
                customer_ids=Sequence(defaults.first_customer_id),
                account_numbers=Sequence(defaults.first_account_number),
            )
        self.registry = registry
        self._handlers: dict[type, Callable[[Any], Any]] = {
            AddCustomer: self._add_customer,
            OpenAccount: self._open_account,
            Transact: self._transact,
            GenerateReport: self._generate_report,
        }

    def dispatch(self, request: Request) -> CommandResult:
        """Run ``request`` and report its outcome.

        Raises
        ------
        TypeError
            If ``request`` is not one of the known request types.
        """
        handler = self._handlers.get(type(request))
        if handler is None:
            raise TypeError(f"Unsupported request: {type(request).__name__}")

        try:
            value = handler(request)
        except LedgerError as e:
            logger.info("%s rejected: %s", type(request).__name__, e)
            return CommandResult(ok=False, error=e)
        return CommandResult(ok=True, value=value)

    # Convenience wrappers

    def add_customer(self, name: str, national_id: str) -> CommandResult:
        return self.dispatch(AddCustomer(name, national_id))

    def open_account(
        self,
        customer_id: int,
        account_type: AccountType,
        initial_balance: Decimal | int | str = 0,
    ) -> CommandResult:
        return self.dispatch(OpenAccount(customer_id, account_type, initial_balance))

    def transact(
        self,
        customer_id: int,
        operation: Operation,
        amount: Decimal | int | str,
        account_index: int = 0,
    ) -> CommandResult:
        return self.dispatch(Transact(customer_id, operation, amount, account_index))

    def generate_report(self) -> CommandResult:
        return self.dispatch(GenerateReport())

    # Handlers

    def _add_customer(self, request: AddCustomer) -> int:
        return self.registry.add_customer(request.name, request.national_id)

    def _open_account(self, request: OpenAccount) -> int:
        defaults = self.config.defaults
        interest_rate = Decimal("0")
        overdraft_limit = Decimal("0")
        if request.account_type == AccountType.SAVINGS:
            interest_rate = defaults.savings_interest_rate
        elif request.account_type == AccountType.CURRENT:
            overdraft_limit = defaults.current_overdraft_limit

        return self.registry.open_account(
            request.customer_id,
            request.account_type,
            rules.to_decimal(request.initial_balance),
            interest_rate=interest_rate,
            overdraft_limit=overdraft_limit,
        )

    def _transact(self, request: Transact) -> Transaction:
        customer = self.registry.find_customer(request.customer_id)
        account = customer.get_account(request.account_index)
        if request.operation == Operation.DEPOSIT:
            tx = account.deposit(rules.to_decimal(request.amount))
        else:
            tx = account.withdraw(rules.to_decimal(request.amount))
        logger.info(
            "%s of %s on account %d, balance %s",
            request.operation.value.title(),
            tx.amount,
            account.account_number,
            account.balance,
        )
        return tx

    def _generate_report(self, request: GenerateReport) -> BankReport:
        return generate_report(self.registry)
