"""Tests for report generation and text rendering."""

from datetime import datetime
from decimal import Decimal

import pytest

from bank_ledger.commands import Bank
from bank_ledger.models import AccountType, Operation, TransactionKind
from bank_ledger.reporting import BankReport, generate_report, render_text
from bank_ledger.store import Registry


@pytest.fixture
def populated(bank: Bank) -> Bank:
    """Two customers: one with Savings + Current, one without accounts."""
    first = bank.add_customer("Mona Adel", "111").value
    bank.add_customer("Karim Nabil", "222")
    bank.open_account(first, AccountType.SAVINGS, 100)
    bank.open_account(first, AccountType.CURRENT, 0)
    bank.transact(first, Operation.DEPOSIT, 50)
    bank.transact(first, Operation.WITHDRAW, 300, account_index=1)
    return bank


class TestGenerateReport:
    """Tests for generate_report."""

    def test_structure_follows_registry_order(self, populated: Bank) -> None:
        report = generate_report(populated.registry)

        assert [c.customer_id for c in report.customers] == [1, 2]
        assert [c.name for c in report.customers] == ["Mona Adel", "Karim Nabil"]
        assert report.customers[1].accounts == ()

        savings, current = report.customers[0].accounts
        assert savings.account_number == 1000
        assert savings.account_type == AccountType.SAVINGS
        assert savings.balance == Decimal("150")
        assert savings.interest == Decimal("15")
        assert [t.kind for t in savings.transactions] == [
            TransactionKind.OPENING_BALANCE,
            TransactionKind.DEPOSIT,
        ]

        assert current.account_number == 1001
        assert current.balance == Decimal("-300")
        assert current.interest == 0
        assert [(t.kind, t.amount) for t in current.transactions] == [
            (TransactionKind.OPENING_BALANCE, Decimal("0")),
            (TransactionKind.WITHDRAW, Decimal("300")),
        ]

    def test_transactions_keep_timestamps(self, populated: Bank) -> None:
        report = generate_report(populated.registry)
        account = populated.registry.find_customer(1).accounts[0]

        assert [t.timestamp for t in report.customers[0].accounts[0].transactions] == [
            tx.timestamp for tx in account.history
        ]

    def test_report_is_read_only(self, populated: Bank) -> None:
        before = populated.registry.summary()
        balances = [a.balance for a in populated.registry.find_customer(1).accounts]

        generate_report(populated.registry)
        generate_report(populated.registry)

        assert populated.registry.summary() == before
        assert [a.balance for a in populated.registry.find_customer(1).accounts] == balances

    def test_report_is_deterministic(self, populated: Bank) -> None:
        stamp = datetime(2024, 6, 1)
        first = generate_report(populated.registry, generated_at=stamp)
        second = generate_report(populated.registry, generated_at=stamp)
        assert first == second

    def test_generated_at_defaults_to_registry_clock(self) -> None:
        stamp = datetime(2030, 1, 1)
        report = generate_report(Registry(clock=lambda: stamp))
        assert report.generated_at == stamp

    def test_total_balance(self, populated: Bank) -> None:
        assert generate_report(populated.registry).total_balance == Decimal("-150")

    def test_empty_registry(self, registry: Registry) -> None:
        report = generate_report(registry)
        assert report.customers == ()
        assert report.total_balance == 0


class TestRenderText:
    """Tests for render_text."""

    def test_layout(self, populated: Bank) -> None:
        text = render_text(generate_report(populated.registry))
        lines = text.splitlines()

        assert lines[0] == "=== BANK REPORT ==="
        assert lines[1] == "ID: 1 | Name: Mona Adel"
        assert lines[2] == "   - Acc#: 1000 | Type: Savings | Bal: 150 | Interest: 15.0"
        assert lines[3].startswith("     * 2024-01-01 ")
        assert lines[3].endswith(" - Opening Balance: 100")
        assert lines[4].endswith(" - Deposit: 50")
        assert lines[5] == "   - Acc#: 1001 | Type: Current | Bal: -300 | Interest: 0"
        assert lines[7].endswith(" - Withdraw: 300")
        assert lines[8] == "-------------------"
        assert lines[9] == "ID: 2 | Name: Karim Nabil"
        assert lines[10] == "-------------------"
        assert len(lines) == 11

    def test_empty_report(self) -> None:
        assert render_text(BankReport(generated_at=datetime(2024, 1, 1))) == "=== BANK REPORT ==="
