"""Tests for customer and company registration services."""

from decimal import Decimal

import pytest

from ledger.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidEntityStateError,
    InvalidInputError,
)
from ledger.models import Company, Customer
from ledger.services import CompanyService, CustomerService, TransactionService
from ledger.store import InMemoryLedgerStore


@pytest.fixture
def customers(store: InMemoryLedgerStore) -> CustomerService:
    return CustomerService(store)


@pytest.fixture
def companies(store: InMemoryLedgerStore) -> CompanyService:
    return CompanyService(store)


class TestCustomerService:
    """Tests for CustomerService."""

    def test_register_normalizes_cpf(self, customers: CustomerService) -> None:
        customer = customers.register("123.456.789-09", "cliente@example.com")

        assert customer.customer_id == 1
        assert customer.cpf == "12345678909"
        assert customer.email == "cliente@example.com"

    @pytest.mark.parametrize("cpf", ["12345678900", "11111111111", "123", ""])
    def test_register_invalid_cpf(
        self, customers: CustomerService, store: InMemoryLedgerStore, cpf: str
    ) -> None:
        with pytest.raises(InvalidInputError, match="CPF inválido!"):
            customers.register(cpf, "cliente@example.com")

        assert store.list_customers() == []

    def test_register_duplicate(self, customers: CustomerService, valid_cpf: str) -> None:
        customers.register(valid_cpf)

        with pytest.raises(DuplicateEntityError):
            customers.register("123.456.789-09")

    def test_get(self, customers: CustomerService, customer: Customer) -> None:
        assert customers.get(customer.customer_id) is customer

    def test_get_missing(self, customers: CustomerService) -> None:
        with pytest.raises(EntityNotFoundError, match="Cliente não encontrado!"):
            customers.get(1)

    def test_list_all(self, customers: CustomerService, valid_cpf: str, other_cpf: str) -> None:
        customers.register(valid_cpf)
        customers.register(other_cpf)

        assert [c.cpf for c in customers.list_all()] == [valid_cpf, other_cpf]

    def test_list_all_empty(self, customers: CustomerService) -> None:
        with pytest.raises(EntityNotFoundError, match="Nenhum cliente encontrado!"):
            customers.list_all()

    def test_update_email(self, customers: CustomerService, customer: Customer) -> None:
        updated = customers.update(customer.customer_id, "novo@example.com")

        assert updated.email == "novo@example.com"
        assert updated.cpf == customer.cpf

    def test_update_missing(self, customers: CustomerService) -> None:
        with pytest.raises(EntityNotFoundError):
            customers.update(5, "x@example.com")

    def test_delete(self, customers: CustomerService, customer: Customer) -> None:
        customers.delete(customer.customer_id)

        with pytest.raises(EntityNotFoundError):
            customers.get(customer.customer_id)

    def test_delete_with_transactions(
        self,
        customers: CustomerService,
        service: TransactionService,
        customer: Customer,
        company: Company,
    ) -> None:
        service.execute_transaction(customer.cpf, company.cnpj, "100", "deposito")

        with pytest.raises(InvalidEntityStateError):
            customers.delete(customer.customer_id)


class TestCompanyService:
    """Tests for CompanyService."""

    def test_register(self, companies: CompanyService) -> None:
        company = companies.register("11.222.333/0001-81", "1000.00", "50.00")

        assert company.company_id == 1
        assert company.cnpj == "11222333000181"
        assert company.balance == Decimal("1000.00")
        assert company.admin_fee_rate == Decimal("50.00")
        assert company.callback_url is None

    @pytest.mark.parametrize("cnpj", ["11222333000182", "00000000000000", "12345678909"])
    def test_register_invalid_cnpj(
        self, companies: CompanyService, store: InMemoryLedgerStore, cnpj: str
    ) -> None:
        with pytest.raises(InvalidInputError, match="CNPJ inválido!"):
            companies.register(cnpj, "1000", "50")

        assert store.list_companies() == []

    def test_register_negative_balance(self, companies: CompanyService, valid_cnpj: str) -> None:
        with pytest.raises(InvalidInputError):
            companies.register(valid_cnpj, "-1", "50")

    def test_register_negative_fee_rate(self, companies: CompanyService, valid_cnpj: str) -> None:
        with pytest.raises(InvalidInputError):
            companies.register(valid_cnpj, "100", "-0.01")

    def test_register_duplicate(self, companies: CompanyService, company: Company) -> None:
        with pytest.raises(DuplicateEntityError):
            companies.register(company.cnpj, "0", "0")

    def test_list_all_empty(self, companies: CompanyService) -> None:
        with pytest.raises(EntityNotFoundError, match="Nenhuma empresa encontrada!"):
            companies.list_all()

    def test_list_all(self, companies: CompanyService, company: Company, other_cnpj: str) -> None:
        other = companies.register(other_cnpj, "0", "0")

        assert companies.list_all() == [company, other]

    def test_get_missing(self, companies: CompanyService) -> None:
        with pytest.raises(EntityNotFoundError, match="Empresa não encontrada!"):
            companies.get(3)

    def test_update_fee_rate(self, companies: CompanyService, company: Company) -> None:
        updated = companies.update(company.company_id, admin_fee_rate="75.00")

        assert updated.admin_fee_rate == Decimal("75.00")
        assert updated.balance == Decimal("1000.00")
        assert updated.callback_url == "https://hooks.example.com/ledger"

    def test_update_clears_callback(self, companies: CompanyService, company: Company) -> None:
        updated = companies.update(company.company_id, callback_url=None)

        assert updated.callback_url is None
        assert updated.admin_fee_rate == Decimal("50.00")

    def test_update_negative_fee_rate(self, companies: CompanyService, company: Company) -> None:
        with pytest.raises(InvalidInputError):
            companies.update(company.company_id, admin_fee_rate="-5")

        assert company.admin_fee_rate == Decimal("50.00")
