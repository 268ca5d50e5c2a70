"""Secure string value object for API keys and other credentials."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import SecretStr


@dataclass(frozen=True)
class SecureString:
    """
    Wraps a credential so it never leaks through str(), repr() or logs.

    The real value is only reachable through get_value().
    """

    _value: str

    def __post_init__(self):
        if not isinstance(self._value, str):
            msg = "SecureString value must be a string"
            raise TypeError(msg)

        if not self._value:
            msg = "SecureString cannot be empty"
            raise ValueError(msg)

    def get_value(self) -> str:
        return self._value

    def __str__(self) -> str:
        return "*****"

    def __repr__(self) -> str:
        return "SecureString(*****)"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SecureString):
            return False
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    @classmethod
    def from_secret(cls, secret: SecretStr) -> SecureString:
        """Convert a pydantic SecretStr coming from settings."""
        return cls(secret.get_secret_value())
