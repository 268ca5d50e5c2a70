"""Application ports (interfaces to external collaborators)."""

from cashcast.application.ports.ledger_read_port import LedgerReadPort

__all__ = ["LedgerReadPort"]
