"""Ledger use cases."""

from ledger.services.registry import CompanyService, CustomerService
from ledger.services.transaction import TransactionService

__all__ = ["CompanyService", "CustomerService", "TransactionService"]
