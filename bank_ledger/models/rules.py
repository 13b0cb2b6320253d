"""Withdrawal and interest rules per account type.

Each rule is a pure function over the account's state; ``Account`` looks
the rule up by ``AccountType`` instead of overriding methods per variant:

- BASIC / SAVINGS: withdrawals limited to the current balance
- CURRENT: withdrawals may draw the balance down to ``-overdraft_limit``
- SAVINGS: simple interest ``balance * rate / 100``; other types earn none
"""

from decimal import Decimal, InvalidOperation
from typing import Callable

from bank_ledger.exceptions import (
    InsufficientFundsError,
    InvalidAmountError,
    OverdraftExceededError,
)
from bank_ledger.models.enums import AccountType

ZERO = Decimal("0")

WithdrawalRule = Callable[[Decimal, Decimal, Decimal], None]
InterestRule = Callable[[Decimal, Decimal], Decimal]


def to_decimal(value: object) -> Decimal:
    """Convert int/str/float/Decimal input to ``Decimal``."""
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        raise InvalidAmountError(f"Not a number: {value!r}") from e


def validate_finite(value: object, name: str = "Amount") -> Decimal:
    """Return ``value`` as ``Decimal``, rejecting NaN and infinities."""
    amt = to_decimal(value)
    if not amt.is_finite():
        raise InvalidAmountError(f"{name} must be a finite number, got {amt}")
    return amt


def validate_non_negative(value: object, name: str = "Amount") -> Decimal:
    """Return ``value`` as a finite ``Decimal`` that is zero or more."""
    amt = validate_finite(value, name)
    if amt < ZERO:
        raise InvalidAmountError(f"{name} must be non-negative, got {amt}")
    return amt


def validate_positive(amount: object) -> Decimal:
    """Return ``amount`` as ``Decimal``, rejecting zero and negatives."""
    amt = to_decimal(amount)
    if not amt.is_finite() or amt <= ZERO:
        raise InvalidAmountError(f"Amount must be positive, got {amt}")
    return amt


def _withdraw_within_balance(balance: Decimal, amount: Decimal, overdraft_limit: Decimal) -> None:
    if balance < amount:
        raise InsufficientFundsError(
            f"Insufficient funds: balance {balance}, requested {amount}"
        )


def _withdraw_within_overdraft(balance: Decimal, amount: Decimal, overdraft_limit: Decimal) -> None:
    if balance + overdraft_limit < amount:
        raise OverdraftExceededError(
            f"Overdraft limit exceeded: available {balance + overdraft_limit}, requested {amount}"
        )


def _no_interest(balance: Decimal, interest_rate: Decimal) -> Decimal:
    return ZERO


def _simple_interest(balance: Decimal, interest_rate: Decimal) -> Decimal:
    return balance * (interest_rate / Decimal("100"))


WITHDRAWAL_RULES: dict[AccountType, WithdrawalRule] = {
    AccountType.BASIC: _withdraw_within_balance,
    AccountType.SAVINGS: _withdraw_within_balance,
    AccountType.CURRENT: _withdraw_within_overdraft,
}

INTEREST_RULES: dict[AccountType, InterestRule] = {
    AccountType.BASIC: _no_interest,
    AccountType.SAVINGS: _simple_interest,
    AccountType.CURRENT: _no_interest,
}


def check_withdrawal(
    account_type: AccountType,
    balance: Decimal,
    amount: Decimal,
    overdraft_limit: Decimal = ZERO,
) -> None:
    """Raise if ``amount`` cannot be withdrawn from an account in this state.

    Raises
    ------
    InsufficientFundsError
        BASIC or SAVINGS account with ``balance < amount``.
    OverdraftExceededError
        CURRENT account with ``balance + overdraft_limit < amount``.
    """
    WITHDRAWAL_RULES[account_type](balance, amount, overdraft_limit)


def calculate_interest(
    account_type: AccountType,
    balance: Decimal,
    interest_rate: Decimal = ZERO,
) -> Decimal:
    """Interest earned on ``balance`` for the given account type."""
    return INTEREST_RULES[account_type](balance, interest_rate)
