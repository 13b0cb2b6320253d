"""Configuration management for bank-ledger."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path

from bank_ledger.exceptions import ConfigurationError


@dataclass
class AccountDefaults:
    """Parameters applied when the shell opens a new account."""

    savings_interest_rate: Decimal = Decimal("10")
    current_overdraft_limit: Decimal = Decimal("1000")
    first_account_number: int = 1000
    first_customer_id: int = 1


@dataclass
class OutputConfig:
    """Report export configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class BankConfig:
    """Main configuration for bank-ledger."""

    defaults: AccountDefaults = field(default_factory=AccountDefaults)
    output: OutputConfig = field(default_factory=OutputConfig)
    log_level: str = "WARNING"
    log_format: str = "standard"
    seed: int | None = None

    @classmethod
    def from_env(cls) -> "BankConfig":
        """Create config from environment variables."""
        import os

        defaults = AccountDefaults(
            savings_interest_rate=_decimal_env("SAVINGS_INTEREST_RATE", "10"),
            current_overdraft_limit=_decimal_env("CURRENT_OVERDRAFT_LIMIT", "1000"),
        )
        if defaults.savings_interest_rate < 0 or defaults.current_overdraft_limit < 0:
            raise ConfigurationError("Interest rate and overdraft limit must be non-negative")

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        seed_str = os.getenv("SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError as e:
            raise ConfigurationError(f"SEED must be an integer, got {seed_str!r}") from e

        return cls(
            defaults=defaults,
            output=output,
            log_level=os.getenv("LOG_LEVEL", "WARNING"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            seed=seed,
        )


def _decimal_env(name: str, default: str) -> Decimal:
    """Read a decimal environment variable."""
    import os

    raw = os.getenv(name, default)
    try:
        return Decimal(raw)
    except InvalidOperation as e:
        raise ConfigurationError(f"{name} must be a decimal number, got {raw!r}") from e
