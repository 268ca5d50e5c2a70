"""Shared domain components.

This module exports shared value objects, exceptions and helpers used
across domain boundaries.
"""

from cashcast.domain.shared.exceptions import (
    DataSourceError,
    DecryptionError,
    DomainException,
    EncryptionError,
    ErrorCode,
    ValidationError,
)
from cashcast.domain.shared.money import round_cents, round_whole, to_decimal
from cashcast.domain.shared.time import today_utc, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "DataSourceError",
    "EncryptionError",
    "DecryptionError",
    # Utilities
    "round_cents",
    "round_whole",
    "to_decimal",
    "today_utc",
    "utc_now",
]
