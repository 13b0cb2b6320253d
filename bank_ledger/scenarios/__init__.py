"""Scenarios that populate a bank with demo data."""

from bank_ledger.scenarios.demo import DemoScenario

__all__ = ["DemoScenario"]
