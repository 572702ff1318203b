"""Persistence gateway interface for ledger entities."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from decimal import Decimal

from ledger.models import Company, Customer, Transaction


class LedgerRepository(ABC):
    """Storage contract consumed by the ledger services.

    Lookups by natural key (CPF/CNPJ) expect digits-only identifiers and raise
    :class:`~ledger.exceptions.EntityNotFoundError` when nothing matches.
    """

    # Natural-key lookups
    @abstractmethod
    def find_customer_by_cpf(self, cpf: str) -> Customer: ...

    @abstractmethod
    def find_company_by_cnpj(self, cnpj: str) -> Company: ...

    # Surrogate-key lookups
    @abstractmethod
    def get_customer(self, customer_id: int) -> Customer: ...

    @abstractmethod
    def get_company(self, company_id: int) -> Company: ...

    @abstractmethod
    def list_customers(self) -> list[Customer]: ...

    @abstractmethod
    def list_companies(self) -> list[Company]: ...

    @abstractmethod
    def list_transactions(self) -> list[Transaction]: ...

    # Writes
    @abstractmethod
    def add_customer(self, customer: Customer) -> Customer: ...

    @abstractmethod
    def add_company(self, company: Company) -> Company: ...

    @abstractmethod
    def save_customer(self, customer: Customer) -> Customer: ...

    @abstractmethod
    def save_company(self, company: Company) -> Company: ...

    @abstractmethod
    def delete_customer(self, customer_id: int) -> None: ...

    @abstractmethod
    def save_transaction(self, transaction: Transaction) -> Transaction: ...

    # Balance mutation
    @abstractmethod
    def company_lock(self, cnpj: str) -> AbstractContextManager[None]:
        """Return the serialization scope for balance changes on one company."""

    @abstractmethod
    def commit_transaction(self, transaction: Transaction, new_balance: Decimal) -> Transaction:
        """Set the company balance and store the transaction as one unit."""
