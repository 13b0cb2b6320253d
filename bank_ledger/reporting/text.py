"""Plain-text rendering of a ``BankReport``."""

from bank_ledger.reporting.report import BankReport

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
SEPARATOR = "-------------------"


def render_text(report: BankReport) -> str:
    """Render the report the way the shell prints it."""
    lines = ["=== BANK REPORT ==="]
    for customer in report.customers:
        lines.append(f"ID: {customer.customer_id} | Name: {customer.name}")
        for account in customer.accounts:
            lines.append(
                f"   - Acc#: {account.account_number} | Type: {account.account_type.value.title()}"
                f" | Bal: {account.balance} | Interest: {account.interest}"
            )
            for tx in account.transactions:
                lines.append(
                    f"     * {tx.timestamp.strftime(TIMESTAMP_FORMAT)} - {tx.kind.label}: {tx.amount}"
                )
        lines.append(SEPARATOR)
    return "\n".join(lines)
