"""Synthetic ledger data generators."""

from ledger.generators.entities import CompanyGenerator, CustomerGenerator
from ledger.generators.transaction import TransactionRequest, TransactionRequestGenerator

__all__ = [
    "CompanyGenerator",
    "CustomerGenerator",
    "TransactionRequest",
    "TransactionRequestGenerator",
]
