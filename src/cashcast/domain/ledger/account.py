"""Account value object."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CURRENCY = "USD"


class Account(BaseModel):
    """A user's account as stored by the external ledger.

    Read-only to the engine; only the ledger mutates the balance.
    """

    balance: Decimal = Field(default=Decimal("0"), description="Current balance")
    currency: str = Field(default=DEFAULT_CURRENCY, max_length=3)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_validator("balance", mode="before")
    @classmethod
    def _null_balance_is_zero(cls, v):
        return Decimal("0") if v is None else v

    @field_validator("currency", mode="before")
    @classmethod
    def _normalize_currency(cls, v):
        if not v:
            return DEFAULT_CURRENCY
        return str(v).upper()

    @classmethod
    def empty(cls) -> "Account":
        return cls(balance=Decimal("0"))
