"""Conversion of report dataclasses into JSON-safe structures."""

from dataclasses import fields, is_dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any

from bank_ledger.reporting import BankReport


def report_to_dict(report: BankReport) -> dict[str, Any]:
    """Serialize a report, adding the bank-wide total balance."""
    data = dataclass_to_dict(report)
    data["total_balance"] = serialize_value(report.total_balance)
    return data


def dataclass_to_dict(obj: Any) -> dict:
    """Serialize the public fields of a dataclass instance."""
    return {
        f.name: serialize_value(getattr(obj, f.name))
        for f in fields(obj)
        if not f.name.startswith("_")
    }


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output.

    Amounts are written as strings so they keep their exact decimal digits.
    Dates and datetimes become ISO 8601 strings, enums their value.
    """
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    if is_dataclass(value) and not isinstance(value, type):
        return dataclass_to_dict(value)
    if isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
