"""PostgREST ledger adapter."""

from cashcast.infrastructure.persistence.postgrest.postgrest_ledger_read_adapter import (  # NOQA: E501
    LEDGER_API_KEY,
    PostgrestLedgerReadAdapter,
)

__all__ = ["LEDGER_API_KEY", "PostgrestLedgerReadAdapter"]
