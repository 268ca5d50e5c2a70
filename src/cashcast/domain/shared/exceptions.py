"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy for the engine. Leaf
analytics components never raise for data conditions; these exceptions are
raised by the IO-touching layers (adapters, credential handling) and are
neutralized at the aggregator boundary.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for programmatic handling."""

    # Validation Errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_DATE = "INVALID_DATE"

    # Data source Errors
    DATA_SOURCE_UNAVAILABLE = "DATA_SOURCE_UNAVAILABLE"
    DATA_SOURCE_UNAUTHORIZED = "DATA_SOURCE_UNAUTHORIZED"
    INVALID_RESPONSE = "INVALID_RESPONSE"

    # Security Errors
    ENCRYPTION_FAILED = "ENCRYPTION_FAILED"
    DECRYPTION_FAILED = "DECRYPTION_FAILED"
    MISSING_CREDENTIALS = "MISSING_CREDENTIALS"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all engine errors.

    Attributes
    ----------
    message
        Human-readable error message
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged, never shown to end users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class DataSourceError(DomainException):
    """Raised when the external ledger store cannot serve a read."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.DATA_SOURCE_UNAVAILABLE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class EncryptionError(DomainException):
    """Raised when a secret cannot be encrypted."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ENCRYPTION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class DecryptionError(DomainException):
    """Raised when a stored secret cannot be decrypted."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.DECRYPTION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)
