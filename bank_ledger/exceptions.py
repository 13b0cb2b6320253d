"""Custom exception hierarchy for bank-ledger."""


class LedgerError(Exception):
    """Base exception for all bank-ledger errors."""


class InvalidAmountError(LedgerError):
    """Raised when an amount is zero, negative or otherwise unusable."""


class InsufficientFundsError(LedgerError):
    """Raised when a withdrawal exceeds the account balance."""


class OverdraftExceededError(InsufficientFundsError):
    """Raised when a withdrawal exceeds balance plus overdraft limit."""


class EntityNotFoundError(LedgerError):
    """Raised when a referenced entity does not exist."""


class CustomerNotFoundError(EntityNotFoundError):
    """Raised when no customer has the requested id."""


class AccountNotFoundError(EntityNotFoundError):
    """Raised when a customer has no account at the requested position."""


class NoAccountsError(LedgerError):
    """Raised when a transaction targets a customer without accounts."""


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""
