"""Interactive menu shell for bank-ledger.

Usage::

    bank-ledger
    bank-ledger --demo-customers 5 --seed 42
    bank-ledger --export-json output/ --log-level DEBUG

All terminal parsing happens here; the ``Bank`` dispatcher only ever
receives well-typed requests.
"""

from __future__ import annotations

import argparse
import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Callable

from bank_ledger.commands import AddCustomer, Bank, GenerateReport, OpenAccount, Transact
from bank_ledger.config import BankConfig
from bank_ledger.exceptions import (
    CustomerNotFoundError,
    InvalidAmountError,
    LedgerError,
    NoAccountsError,
    OverdraftExceededError,
)
from bank_ledger.logging import setup_logging
from bank_ledger.models import AccountType, Customer, Operation
from bank_ledger.sinks import ConsoleSink, JsonFileSink

logger = logging.getLogger(__name__)

MENU = """
--- Main Menu ---
1. Add New Customer
2. Open New Account
3. Deposit / Withdraw
4. Show Full Report
5. Exit"""

ACCOUNT_TYPE_CHOICES = {"1": AccountType.SAVINGS, "2": AccountType.CURRENT}
OPERATION_CHOICES = {"1": Operation.DEPOSIT, "2": Operation.WITHDRAW}


class InvalidInput(Exception):
    """Raised when terminal input cannot be parsed; never leaves the shell."""


class Shell:
    """Menu loop translating terminal input into dispatcher requests."""

    def __init__(
        self,
        bank: Bank,
        console: ConsoleSink | None = None,
        exporter: JsonFileSink | None = None,
        input_fn: Callable[[str], str] | None = None,
    ) -> None:
        self.bank = bank
        self.console = console or ConsoleSink()
        self.exporter = exporter
        self._input = input_fn or input
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.add_customer,
            "2": self.open_account,
            "3": self.transact,
            "4": self.show_report,
        }

    def run(self) -> None:
        """Read menu choices until Exit or end of input."""
        print("=== Welcome to the Bank Ledger ===")
        while True:
            print(MENU)
            try:
                choice = self._input("Choose (1-5): ").strip()
                if choice == "5":
                    break
                action = self._actions.get(choice)
                if action is None:
                    print("Invalid choice!")
                    continue
                action()
            except InvalidInput as e:
                print(e)
            except (EOFError, KeyboardInterrupt):
                print("")
                break
        print("Goodbye.")

    def add_customer(self) -> None:
        name = self._input("Enter Name: ").strip()
        national_id = self._input("Enter National ID: ").strip()
        result = self.bank.dispatch(AddCustomer(name, national_id))
        print(f"Customer Added! Your ID is: {result.value}")

    def open_account(self) -> None:
        customer = self._find_customer()
        if customer is None:
            return

        choice = self._input("Account Type: 1. Savings   2. Current\n").strip()
        account_type = ACCOUNT_TYPE_CHOICES.get(choice)
        if account_type is None:
            raise InvalidInput("Invalid account type!")
        initial_balance = self._read_decimal("Initial Balance: ")

        result = self.bank.dispatch(
            OpenAccount(customer.customer_id, account_type, initial_balance)
        )
        if result.ok:
            print(f"{account_type.value.title()} Account Created. Account number: {result.value}")
        else:
            print(f"Error: {result.message}")

    def transact(self) -> None:
        customer = self._find_customer()
        if customer is None:
            return
        if not customer.accounts:
            print("No accounts found.")
            return

        index = self._choose_account(customer)
        account = customer.accounts[index]
        print(f"Current Balance: {account.balance}")

        choice = self._input("1. Deposit   2. Withdraw\n").strip()
        operation = OPERATION_CHOICES.get(choice)
        if operation is None:
            raise InvalidInput("Invalid operation!")
        amount = self._read_decimal("Amount: ")

        result = self.bank.dispatch(Transact(customer.customer_id, operation, amount, index))
        print(describe_result(operation, result.ok, result.error, account.account_type))

    def show_report(self) -> None:
        result = self.bank.dispatch(GenerateReport())
        self.console.write_report(result.value)
        if self.exporter is not None:
            path = self.exporter.write_report(result.value)
            print(f"Report exported to {path}")

    def _find_customer(self) -> Customer | None:
        customer_id = self._read_int("Enter Customer ID: ")
        try:
            return self.bank.registry.find_customer(customer_id)
        except CustomerNotFoundError:
            print("Customer Not Found!")
            return None

    def _choose_account(self, customer: Customer) -> int:
        if len(customer.accounts) == 1:
            return 0
        for i, account in enumerate(customer.accounts, start=1):
            print(f"{i}. Acc#: {account.account_number} ({account.account_type.value.title()})")
        position = self._read_int("Choose account: ")
        if not 1 <= position <= len(customer.accounts):
            raise InvalidInput("Invalid account choice!")
        return position - 1

    def _read_int(self, prompt: str) -> int:
        raw = self._input(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            raise InvalidInput(f"Invalid number: {raw!r}") from None

    def _read_decimal(self, prompt: str) -> Decimal:
        raw = self._input(prompt).strip()
        try:
            value = Decimal(raw)
        except InvalidOperation:
            raise InvalidInput(f"Invalid amount: {raw!r}") from None
        if not value.is_finite():
            raise InvalidInput(f"Invalid amount: {raw!r}")
        return value


def describe_result(
    operation: Operation,
    ok: bool,
    error: LedgerError | None,
    account_type: AccountType,
) -> str:
    """Message shown after a deposit or withdrawal attempt.

    Every successful withdrawal from a Current account reports the
    overdraft facility, whether or not the balance went below zero.
    """
    if ok:
        if operation == Operation.DEPOSIT:
            return "Deposit Successful."
        if account_type == AccountType.CURRENT:
            return "Withdraw Successful (Overdraft Used)."
        return "Withdraw Successful."
    if isinstance(error, InvalidAmountError):
        return "Invalid Amount."
    if isinstance(error, OverdraftExceededError):
        return "Error: Exceeded Overdraft Limit."
    if isinstance(error, NoAccountsError):
        return "No accounts found."
    return "Error: Insufficient Funds."


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive in-memory bank ledger")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (DEBUG, INFO, WARNING, ...); defaults to LOG_LEVEL or WARNING",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default=None,
        help="Log format; defaults to LOG_FORMAT or standard",
    )
    parser.add_argument(
        "--demo-customers",
        type=int,
        default=0,
        help="Pre-populate the session with N synthetic customers",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for demo data")
    parser.add_argument(
        "--export-json",
        nargs="?",
        const="",
        default=None,
        metavar="DIR",
        help="Also write each report as JSON into DIR (defaults to OUTPUT_DIR)",
    )
    parser.add_argument("--pretty", action="store_true", help="Pretty-print exported JSON")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = BankConfig.from_env()

    setup_logging(
        level=args.log_level or config.log_level,
        format_type=args.log_format or config.log_format,
    )

    bank = Bank(config)
    logger.info(
        "Session started (savings rate %s%%, overdraft limit %s)",
        config.defaults.savings_interest_rate,
        config.defaults.current_overdraft_limit,
    )
    if args.demo_customers > 0:
        from bank_ledger.scenarios import DemoScenario

        seed = args.seed if args.seed is not None else config.seed
        DemoScenario(num_customers=args.demo_customers, seed=seed).generate(bank)

    exporter = None
    if args.export_json is not None:
        output_dir = Path(args.export_json) if args.export_json else config.output.json_output_dir
        exporter = JsonFileSink(output_dir, pretty=args.pretty or config.output.pretty_json)

    console = ConsoleSink()
    try:
        Shell(bank, console=console, exporter=exporter).run()
    finally:
        console.close()
        if exporter is not None:
            exporter.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
