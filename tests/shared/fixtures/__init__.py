"""Shared test fixtures."""

from tests.shared.fixtures.factories import TODAY, LedgerFactory

__all__ = ["TODAY", "LedgerFactory"]
