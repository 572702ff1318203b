"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest

from ledger.models import Company, Customer
from ledger.services import CompanyService, CustomerService, TransactionService
from ledger.store import InMemoryLedgerStore


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def valid_cpf() -> str:
    """Checksum-valid CPF."""
    return "12345678909"


@pytest.fixture
def other_cpf() -> str:
    """Second checksum-valid CPF."""
    return "52998224725"


@pytest.fixture
def valid_cnpj() -> str:
    """Checksum-valid CNPJ."""
    return "11222333000181"


@pytest.fixture
def other_cnpj() -> str:
    """Second checksum-valid CNPJ."""
    return "11444777000161"


@pytest.fixture
def store() -> InMemoryLedgerStore:
    """Create a fresh store for each test."""
    return InMemoryLedgerStore()


@pytest.fixture
def customer(store: InMemoryLedgerStore, valid_cpf: str) -> Customer:
    """Registered customer."""
    return CustomerService(store).register(valid_cpf, "cliente@example.com")


@pytest.fixture
def company(store: InMemoryLedgerStore, valid_cnpj: str) -> Company:
    """Registered company with balance 1000.00 and admin fee rate 50.00."""
    return CompanyService(store).register(
        valid_cnpj,
        balance=Decimal("1000.00"),
        admin_fee_rate=Decimal("50.00"),
        callback_url="https://hooks.example.com/ledger",
    )


@pytest.fixture
def service(store: InMemoryLedgerStore) -> TransactionService:
    """Transaction service without notifications."""
    return TransactionService(store)
