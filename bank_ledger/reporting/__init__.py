"""Report generation and rendering."""

from bank_ledger.reporting.report import (
    AccountSection,
    BankReport,
    CustomerSection,
    TransactionLine,
    generate_report,
)
from bank_ledger.reporting.text import render_text

__all__ = [
    "AccountSection",
    "BankReport",
    "CustomerSection",
    "TransactionLine",
    "generate_report",
    "render_text",
]
