"""Generator for transaction requests against registered entities."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator

from ledger.generators.base import BaseGenerator
from ledger.models import Company, Customer, TransactionKind


@dataclass
class TransactionRequest:
    """Arguments for one ``TransactionService.execute_transaction`` call."""

    customer_cpf: str
    company_cnpj: str
    requested_amount: Decimal
    kind: TransactionKind
    system_fee: Decimal | None = None


class TransactionRequestGenerator(BaseGenerator):
    """Generate deposit/withdrawal requests between known customers and companies."""

    KINDS = list(TransactionKind)
    KIND_WEIGHTS = [0.6, 0.4]

    # Fixed system fees (BRL); None means the caller omits the fee
    SYSTEM_FEES = [None, Decimal("5.00"), Decimal("10.00")]
    SYSTEM_FEE_WEIGHTS = [0.3, 0.3, 0.4]

    def generate(self, customers: list[Customer], companies: list[Company]) -> TransactionRequest:
        """Generate a single request.

        Parameters
        ----------
        customers : list[Customer]
            Registered customers to pick from.
        companies : list[Company]
            Registered companies to pick from.
        """
        kind = self.random.choices(self.KINDS, weights=self.KIND_WEIGHTS, k=1)[0]
        system_fee = self.random.choices(self.SYSTEM_FEES, weights=self.SYSTEM_FEE_WEIGHTS, k=1)[0]
        # Log-normal amounts: mostly small, occasional large ones
        amount = max(20.0, min(self.random.lognormvariate(mu=5.5, sigma=1.0), 50_000.0))

        return TransactionRequest(
            customer_cpf=self.random.choice(customers).cpf,
            company_cnpj=self.random.choice(companies).cnpj,
            requested_amount=Decimal(str(round(amount, 2))),
            kind=kind,
            system_fee=system_fee,
        )

    def generate_batch(
        self, customers: list[Customer], companies: list[Company], count: int
    ) -> Iterator[TransactionRequest]:
        """Generate ``count`` requests."""
        for _ in range(count):
            yield self.generate(customers, companies)
