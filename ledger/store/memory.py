"""In-memory ledger store with natural-key indexes and per-company locks."""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from ledger.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidEntityStateError,
)
from ledger.models import Company, Customer, Transaction
from ledger.store.base import LedgerRepository

logger = logging.getLogger(__name__)


@dataclass
class InMemoryLedgerStore(LedgerRepository):
    """Dict-backed store for customers, companies and transactions.

    Surrogate ids are sequential per entity type, starting at 1. Company
    balances are only changed through :meth:`commit_transaction`, which
    callers run inside :meth:`company_lock` for the company involved.
    """

    # Primary entities
    customers: dict[int, Customer] = field(default_factory=dict)
    companies: dict[int, Company] = field(default_factory=dict)
    transactions: list[Transaction] = field(default_factory=list)

    # Natural-key indexes
    _customers_by_cpf: dict[str, int] = field(default_factory=dict)
    _companies_by_cnpj: dict[str, int] = field(default_factory=dict)
    _customer_transactions: dict[int, list[int]] = field(default_factory=dict)

    _next_ids: dict[str, int] = field(
        default_factory=lambda: {"customers": 1, "companies": 1, "transactions": 1}
    )
    _lock: threading.RLock = field(default_factory=threading.RLock)
    _company_locks: dict[str, threading.Lock] = field(default_factory=dict)

    def _next_id(self, entity_type: str) -> int:
        next_id = self._next_ids[entity_type]
        self._next_ids[entity_type] = next_id + 1
        return next_id

    # Lookups
    def find_customer_by_cpf(self, cpf: str) -> Customer:
        """Get a customer by CPF."""
        customer_id = self._customers_by_cpf.get(cpf)
        if customer_id is None:
            raise EntityNotFoundError("Cliente não encontrado")
        return self.customers[customer_id]

    def find_company_by_cnpj(self, cnpj: str) -> Company:
        """Get a company by CNPJ."""
        company_id = self._companies_by_cnpj.get(cnpj)
        if company_id is None:
            raise EntityNotFoundError("Empresa não encontrada")
        return self.companies[company_id]

    def get_customer(self, customer_id: int) -> Customer:
        """Get a customer by id."""
        try:
            return self.customers[customer_id]
        except KeyError:
            raise EntityNotFoundError("Cliente não encontrado!") from None

    def get_company(self, company_id: int) -> Company:
        """Get a company by id."""
        try:
            return self.companies[company_id]
        except KeyError:
            raise EntityNotFoundError("Empresa não encontrada!") from None

    def list_customers(self) -> list[Customer]:
        """Get all customers, ordered by id."""
        return list(self.customers.values())

    def list_companies(self) -> list[Company]:
        """Get all companies, ordered by id."""
        return list(self.companies.values())

    def list_transactions(self) -> list[Transaction]:
        """Get all committed transactions, in commit order."""
        with self._lock:
            return list(self.transactions)

    # Writes
    def add_customer(self, customer: Customer) -> Customer:
        """Add a customer, assigning its id."""
        with self._lock:
            if customer.cpf in self._customers_by_cpf:
                raise DuplicateEntityError(f"CPF {customer.cpf} já cadastrado")

            customer.customer_id = self._next_id("customers")
            if customer.created_at is None:
                customer.created_at = datetime.now()
            self.customers[customer.customer_id] = customer
            self._customers_by_cpf[customer.cpf] = customer.customer_id
            self._customer_transactions[customer.customer_id] = []
        return customer

    def add_company(self, company: Company) -> Company:
        """Add a company, assigning its id."""
        with self._lock:
            if company.cnpj in self._companies_by_cnpj:
                raise DuplicateEntityError(f"CNPJ {company.cnpj} já cadastrado")

            company.company_id = self._next_id("companies")
            if company.created_at is None:
                company.created_at = datetime.now()
            self.companies[company.company_id] = company
            self._companies_by_cnpj[company.cnpj] = company.company_id
            self._company_locks[company.cnpj] = threading.Lock()
        return company

    def save_customer(self, customer: Customer) -> Customer:
        """Replace a stored customer. The CPF cannot change."""
        with self._lock:
            current = self.get_customer(customer.customer_id)
            if current.cpf != customer.cpf:
                raise InvalidEntityStateError("CPF não pode ser alterado")
            self.customers[customer.customer_id] = customer
        return customer

    def save_company(self, company: Company) -> Company:
        """Replace a stored company. The CNPJ cannot change."""
        with self._lock:
            current = self.get_company(company.company_id)
            if current.cnpj != company.cnpj:
                raise InvalidEntityStateError("CNPJ não pode ser alterado")
            self.companies[company.company_id] = company
        return company

    def delete_customer(self, customer_id: int) -> None:
        """Remove a customer that has no transactions."""
        with self._lock:
            customer = self.get_customer(customer_id)
            if self._customer_transactions.get(customer_id):
                raise InvalidEntityStateError(
                    f"Cliente {customer_id} possui transações e não pode ser removido"
                )
            del self.customers[customer_id]
            del self._customers_by_cpf[customer.cpf]
            self._customer_transactions.pop(customer_id, None)

    def save_transaction(self, transaction: Transaction) -> Transaction:
        """Store a transaction, assigning its id."""
        customer_id = transaction.customer.customer_id
        with self._lock:
            if customer_id not in self.customers:
                raise EntityNotFoundError(f"Cliente {customer_id} não encontrado")
            if transaction.company.company_id not in self.companies:
                raise EntityNotFoundError(f"Empresa {transaction.company.company_id} não encontrada")

            # index first: nothing is appended unless every step succeeded
            self._customer_transactions[customer_id].append(len(self.transactions))
            transaction.transaction_id = self._next_id("transactions")
            self.transactions.append(transaction)
        return transaction

    # Balance mutation
    def company_lock(self, cnpj: str) -> threading.Lock:
        """Get the lock serializing balance changes for one company."""
        try:
            return self._company_locks[cnpj]
        except KeyError:
            raise EntityNotFoundError("Empresa não encontrada") from None

    def commit_transaction(self, transaction: Transaction, new_balance: Decimal) -> Transaction:
        """Apply ``new_balance`` to the company and store the transaction.

        Runs under the store lock, so no customer can be deleted mid-commit.
        The previous balance is restored if the transaction cannot be stored.
        """
        company = transaction.company
        with self._lock:
            previous_balance = company.balance
            company.balance = new_balance
            try:
                self.save_company(company)
                return self.save_transaction(transaction)
            except Exception:
                company.balance = previous_balance
                logger.warning(
                    "Rolled back balance of company %s to %s", company.cnpj, previous_balance
                )
                raise

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "customers": len(self.customers),
            "companies": len(self.companies),
            "transactions": len(self.transactions),
        }
