"""Tests for the command dispatcher."""

from decimal import Decimal

import pytest

from bank_ledger.commands import (
    AddCustomer,
    Bank,
    CommandResult,
    GenerateReport,
    OpenAccount,
    Transact,
)
from bank_ledger.config import AccountDefaults, BankConfig
from bank_ledger.exceptions import (
    AccountNotFoundError,
    CustomerNotFoundError,
    InsufficientFundsError,
    InvalidAmountError,
    NoAccountsError,
    OverdraftExceededError,
)
from bank_ledger.models import AccountType, Operation, TransactionKind
from bank_ledger.reporting import BankReport


@pytest.fixture
def customer_id(bank: Bank) -> int:
    """Registered customer without accounts."""
    return bank.add_customer("Omar Khaled", "30001010101010").value


class TestAddCustomer:
    """Tests for AddCustomer requests."""

    def test_returns_customer_id(self, bank: Bank) -> None:
        result = bank.dispatch(AddCustomer("Omar Khaled", "300"))

        assert result == CommandResult(ok=True, value=1)
        assert bank.registry.find_customer(1).name == "Omar Khaled"


class TestOpenAccount:
    """Tests for OpenAccount requests."""

    def test_savings_uses_default_rate(self, bank: Bank, customer_id: int) -> None:
        result = bank.dispatch(OpenAccount(customer_id, AccountType.SAVINGS, Decimal("100")))

        assert result.ok
        assert result.value == 1000
        account = bank.registry.find_customer(customer_id).accounts[0]
        assert account.interest_rate == Decimal("10")
        assert account.overdraft_limit == 0
        assert account.calculate_interest() == Decimal("10")

    def test_current_uses_default_overdraft(self, bank: Bank, customer_id: int) -> None:
        bank.open_account(customer_id, AccountType.CURRENT, 0)
        account = bank.registry.find_customer(customer_id).accounts[0]

        assert account.overdraft_limit == Decimal("1000")
        assert account.interest_rate == 0

    def test_basic_account_has_no_parameters(self, bank: Bank, customer_id: int) -> None:
        bank.open_account(customer_id, AccountType.BASIC, 50)
        account = bank.registry.find_customer(customer_id).accounts[0]

        assert account.overdraft_limit == 0
        assert account.interest_rate == 0

    def test_custom_defaults(self) -> None:
        config = BankConfig(
            defaults=AccountDefaults(
                savings_interest_rate=Decimal("4"),
                current_overdraft_limit=Decimal("250"),
                first_account_number=5000,
                first_customer_id=100,
            )
        )
        bank = Bank(config)
        customer_id = bank.add_customer("A", "1").value

        assert customer_id == 100
        assert bank.open_account(customer_id, AccountType.CURRENT, 0).value == 5000
        assert bank.registry.find_customer(100).accounts[0].overdraft_limit == Decimal("250")

    def test_unknown_customer(self, bank: Bank) -> None:
        result = bank.open_account(7, AccountType.SAVINGS, 10)

        assert not result.ok
        assert isinstance(result.error, CustomerNotFoundError)
        assert result.message == "Customer 7 not found"

    def test_negative_initial_balance_clamped(self, bank: Bank, customer_id: int) -> None:
        bank.open_account(customer_id, AccountType.SAVINGS, -40)
        assert bank.registry.find_customer(customer_id).accounts[0].balance == 0

    @pytest.mark.parametrize("initial_balance", [Decimal("NaN"), Decimal("Infinity"), "lots"])
    def test_invalid_initial_balance_reported(
        self, bank: Bank, customer_id: int, initial_balance: object
    ) -> None:
        result = bank.dispatch(OpenAccount(customer_id, AccountType.SAVINGS, initial_balance))

        assert not result.ok
        assert isinstance(result.error, InvalidAmountError)
        assert bank.registry.find_customer(customer_id).accounts == []
        assert bank.open_account(customer_id, AccountType.SAVINGS, 10).value == 1000


class TestTransact:
    """Tests for Transact requests."""

    def test_deposit(self, bank: Bank, customer_id: int) -> None:
        bank.open_account(customer_id, AccountType.SAVINGS, 100)
        result = bank.dispatch(Transact(customer_id, Operation.DEPOSIT, Decimal("50")))

        assert result.ok
        assert result.value.kind == TransactionKind.DEPOSIT
        account = bank.registry.find_customer(customer_id).accounts[0]
        assert account.balance == Decimal("150")
        assert len(account.history) == 2

    def test_savings_scenario(self, bank: Bank, customer_id: int) -> None:
        bank.open_account(customer_id, AccountType.SAVINGS, 100)
        account = bank.registry.find_customer(customer_id).accounts[0]
        assert account.calculate_interest() == Decimal("10.0")

        assert bank.transact(customer_id, Operation.DEPOSIT, 50).ok
        assert account.balance == Decimal("150")
        assert len(account.history) == 2

        result = bank.transact(customer_id, Operation.WITHDRAW, 200)
        assert not result.ok
        assert isinstance(result.error, InsufficientFundsError)
        assert not isinstance(result.error, OverdraftExceededError)
        assert account.balance == Decimal("150")

    def test_current_scenario(self, bank: Bank, customer_id: int) -> None:
        bank.open_account(customer_id, AccountType.CURRENT, 0)
        account = bank.registry.find_customer(customer_id).accounts[0]

        assert bank.transact(customer_id, Operation.WITHDRAW, 800).ok
        assert account.balance == Decimal("-800")

        result = bank.transact(customer_id, Operation.WITHDRAW, 300)
        assert not result.ok
        assert isinstance(result.error, OverdraftExceededError)
        assert account.balance == Decimal("-800")

    def test_invalid_deposit_reported(self, bank: Bank, customer_id: int) -> None:
        bank.open_account(customer_id, AccountType.SAVINGS, 100)
        result = bank.transact(customer_id, Operation.DEPOSIT, 0)

        assert not result.ok
        assert isinstance(result.error, InvalidAmountError)
        assert len(bank.registry.find_customer(customer_id).accounts[0].history) == 1

    def test_negative_withdrawal_rejected(self, bank: Bank, customer_id: int) -> None:
        bank.open_account(customer_id, AccountType.SAVINGS, 100)
        result = bank.transact(customer_id, Operation.WITHDRAW, -25)

        assert isinstance(result.error, InvalidAmountError)
        assert bank.registry.find_customer(customer_id).accounts[0].balance == Decimal("100")

    @pytest.mark.parametrize("operation", [Operation.DEPOSIT, Operation.WITHDRAW])
    def test_unparsable_amount_reported(
        self, bank: Bank, customer_id: int, operation: Operation
    ) -> None:
        bank.open_account(customer_id, AccountType.SAVINGS, 100)
        result = bank.transact(customer_id, operation, "ten")

        assert not result.ok
        assert isinstance(result.error, InvalidAmountError)
        assert bank.registry.find_customer(customer_id).accounts[0].balance == Decimal("100")

    def test_non_finite_amount_reported(self, bank: Bank, customer_id: int) -> None:
        bank.open_account(customer_id, AccountType.CURRENT, 0)
        result = bank.dispatch(Transact(customer_id, Operation.WITHDRAW, Decimal("NaN")))

        assert isinstance(result.error, InvalidAmountError)

    def test_customer_without_accounts(self, bank: Bank, customer_id: int) -> None:
        result = bank.transact(customer_id, Operation.DEPOSIT, 10)

        assert not result.ok
        assert isinstance(result.error, NoAccountsError)

    def test_unknown_customer(self, bank: Bank) -> None:
        result = bank.transact(404, Operation.DEPOSIT, 10)
        assert isinstance(result.error, CustomerNotFoundError)

    def test_account_index_selects_account(self, bank: Bank, customer_id: int) -> None:
        bank.open_account(customer_id, AccountType.SAVINGS, 100)
        bank.open_account(customer_id, AccountType.CURRENT, 0)

        assert bank.transact(customer_id, Operation.WITHDRAW, 500, account_index=1).ok

        savings, current = bank.registry.find_customer(customer_id).accounts
        assert savings.balance == Decimal("100")
        assert current.balance == Decimal("-500")

    def test_account_index_out_of_range(self, bank: Bank, customer_id: int) -> None:
        bank.open_account(customer_id, AccountType.SAVINGS, 100)
        result = bank.transact(customer_id, Operation.DEPOSIT, 10, account_index=3)

        assert isinstance(result.error, AccountNotFoundError)


class TestGenerateReport:
    """Tests for GenerateReport requests."""

    def test_returns_report(self, bank: Bank, customer_id: int) -> None:
        bank.open_account(customer_id, AccountType.SAVINGS, 100)
        result = bank.dispatch(GenerateReport())

        assert result.ok
        assert isinstance(result.value, BankReport)
        assert result.value.customers[0].customer_id == customer_id

    def test_report_on_empty_bank(self, bank: Bank) -> None:
        report = bank.generate_report().value
        assert report.customers == ()


class TestDispatch:
    """Tests for dispatch plumbing."""

    def test_unsupported_request(self, bank: Bank) -> None:
        with pytest.raises(TypeError, match="Unsupported request"):
            bank.dispatch("withdraw everything")  # type: ignore[arg-type]

    def test_failed_result_message(self, bank: Bank) -> None:
        result = bank.transact(1, Operation.DEPOSIT, 1)
        assert result.message == "Customer 1 not found"

    def test_successful_result_has_empty_message(self, bank: Bank) -> None:
        assert bank.add_customer("A", "1").message == ""

    def test_default_registry_numbering(self) -> None:
        bank = Bank()
        customer_id = bank.add_customer("A", "1").value

        assert customer_id == 1
        assert bank.open_account(customer_id, AccountType.SAVINGS, 1).value == 1000
