"""Tests for data generators."""

from decimal import Decimal

from ledger.generators import (
    CompanyGenerator,
    CustomerGenerator,
    TransactionRequestGenerator,
)
from ledger.models import TransactionKind
from ledger.services import CompanyService, CustomerService, TransactionService
from ledger.store import InMemoryLedgerStore
from ledger.validators import is_valid_cnpj, is_valid_cpf


class TestCustomerGenerator:
    """Tests for CustomerGenerator."""

    def test_generate_customer(self, seed: int) -> None:
        customer = CustomerGenerator(seed=seed).generate()

        assert len(customer.cpf) == 11
        assert customer.cpf.isdigit()
        assert is_valid_cpf(customer.cpf)
        assert customer.email
        assert customer.customer_id is None

    def test_generate_batch_unique(self, seed: int) -> None:
        customers = list(CustomerGenerator(seed=seed).generate_batch(20))

        assert len(customers) == 20
        assert len({c.cpf for c in customers}) == 20

    def test_reproducible(self, seed: int) -> None:
        first = CustomerGenerator(seed=seed).generate()
        second = CustomerGenerator(seed=seed).generate()

        assert first == second


class TestCompanyGenerator:
    """Tests for CompanyGenerator."""

    def test_generate_company(self, seed: int) -> None:
        company = CompanyGenerator(seed=seed, min_balance=100, max_balance=200).generate()

        assert len(company.cnpj) == 14
        assert is_valid_cnpj(company.cnpj)
        assert Decimal("100") <= company.balance <= Decimal("200")
        assert company.admin_fee_rate in CompanyGenerator.FEE_RATES

    def test_callback_rate(self, seed: int) -> None:
        always = CompanyGenerator(seed=seed, callback_rate=1.0).generate()
        never = CompanyGenerator(seed=seed, callback_rate=0.0).generate()

        assert always.callback_url.startswith("https://")
        assert never.callback_url is None

    def test_generate_batch_unique(self, seed: int) -> None:
        companies = list(CompanyGenerator(seed=seed).generate_batch(10))

        assert len({c.cnpj for c in companies}) == 10


class TestTransactionRequestGenerator:
    """Tests for TransactionRequestGenerator."""

    def test_requests_reference_registered_entities(self, seed: int) -> None:
        store = InMemoryLedgerStore()
        customers = [
            CustomerService(store).register(c.cpf, c.email)
            for c in CustomerGenerator(seed=seed).generate_batch(5)
        ]
        companies = [
            CompanyService(store).register(c.cnpj, c.balance, c.admin_fee_rate)
            for c in CompanyGenerator(seed=seed).generate_batch(2)
        ]
        cpfs = {c.cpf for c in customers}
        cnpjs = {c.cnpj for c in companies}

        requests = list(TransactionRequestGenerator(seed=seed).generate_batch(customers, companies, 30))

        assert len(requests) == 30
        for request in requests:
            assert request.customer_cpf in cpfs
            assert request.company_cnpj in cnpjs
            assert request.requested_amount >= Decimal("20")
            assert request.kind in (TransactionKind.DEPOSIT, TransactionKind.WITHDRAWAL)

    def test_deposits_execute(self, seed: int) -> None:
        store = InMemoryLedgerStore()
        customer = CustomerService(store).register("12345678909")
        company = CompanyService(store).register("11222333000181", "0", "25.00")
        service = TransactionService(store)
        generator = TransactionRequestGenerator(seed=seed)

        for request in generator.generate_batch([customer], [company], 10):
            service.execute_transaction(
                request.customer_cpf,
                request.company_cnpj,
                request.requested_amount,
                TransactionKind.DEPOSIT,
                request.system_fee,
            )

        total = sum(t.amount for t in store.list_transactions())
        assert company.balance == total
