"""Persistence gateways for ledger entities."""

from ledger.store.base import LedgerRepository
from ledger.store.memory import InMemoryLedgerStore

__all__ = ["InMemoryLedgerStore", "LedgerRepository"]
