"""Ledger domain models."""

from ledger.models.company import Company
from ledger.models.customer import Customer
from ledger.models.enums import TransactionKind
from ledger.models.transaction import Transaction

__all__ = ["Company", "Customer", "Transaction", "TransactionKind"]
