"""Generators for customers and companies with valid national IDs."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterator

from ledger.generators.base import BaseGenerator
from ledger.models import Company, Customer
from ledger.validators import only_digits


class CustomerGenerator(BaseGenerator):
    """Generate unregistered customers (no id yet)."""

    def generate(self) -> Customer:
        """Generate a single customer.

        Returns
        -------
        Customer
            Customer with a checksum-valid, digits-only CPF.
        """
        return Customer(
            cpf=only_digits(self.fake.cpf()),
            email=self.fake.email(),
        )

    def generate_batch(self, count: int) -> Iterator[Customer]:
        """Generate customers with distinct CPFs.

        Parameters
        ----------
        count : int
            Number of customers to generate.

        Yields
        ------
        Customer
            Generated customers.
        """
        seen: set[str] = set()
        while len(seen) < count:
            customer = self.generate()
            if customer.cpf in seen:
                continue
            seen.add(customer.cpf)
            yield customer


class CompanyGenerator(BaseGenerator):
    """Generate unregistered companies (no id yet)."""

    # Administrative fee rates charged by partner companies (BRL)
    FEE_RATES = [Decimal("25.00"), Decimal("50.00"), Decimal("75.00"), Decimal("100.00")]
    FEE_WEIGHTS = [0.3, 0.4, 0.2, 0.1]

    def __init__(
        self,
        seed: int | None = None,
        min_balance: int = 1_000,
        max_balance: int = 100_000,
        callback_rate: float = 0.5,
    ) -> None:
        super().__init__(seed)
        self.min_balance = min_balance
        self.max_balance = max_balance
        self.callback_rate = callback_rate

    def generate(self) -> Company:
        """Generate a single company.

        Returns
        -------
        Company
            Company with a checksum-valid, digits-only CNPJ.
        """
        cents = self.random.randint(self.min_balance * 100, self.max_balance * 100)
        fee_rate = self.random.choices(self.FEE_RATES, weights=self.FEE_WEIGHTS, k=1)[0]
        callback_url = None
        if self.random.random() < self.callback_rate:
            callback_url = f"https://{self.fake.domain_name()}/webhooks/ledger"

        return Company(
            cnpj=only_digits(self.fake.cnpj()),
            balance=Decimal(cents) / 100,
            admin_fee_rate=fee_rate,
            callback_url=callback_url,
        )

    def generate_batch(self, count: int) -> Iterator[Company]:
        """Generate companies with distinct CNPJs."""
        seen: set[str] = set()
        while len(seen) < count:
            company = self.generate()
            if company.cnpj in seen:
                continue
            seen.add(company.cnpj)
            yield company
