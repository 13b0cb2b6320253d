"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta
from typing import Callable

import pytest

from bank_ledger.commands import Bank
from bank_ledger.store import Registry


class FixedClock:
    """Clock advancing one minute per call from a fixed start."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 9, 0, 0)) -> None:
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current += timedelta(minutes=1)
        return now


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def clock() -> Callable[[], datetime]:
    """Deterministic clock."""
    return FixedClock()


@pytest.fixture
def registry(clock: Callable[[], datetime]) -> Registry:
    """Fresh registry with a deterministic clock."""
    return Registry(clock=clock)


@pytest.fixture
def bank(registry: Registry) -> Bank:
    """Bank with default config wrapping the fixture registry."""
    return Bank(registry=registry)
