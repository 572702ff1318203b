"""Transaction model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from ledger.models.company import Company
from ledger.models.customer import Customer
from ledger.models.enums import TransactionKind


@dataclass
class Transaction:
    """A committed money movement between a customer and a company."""

    customer: Customer
    company: Company
    amount: Decimal  # net amount applied to the balance, after fees
    kind: TransactionKind
    timestamp: datetime
    system_fee: Decimal = Decimal("0")
    fee: Decimal = Decimal("0")  # total deducted: admin share + system_fee
    requested_amount: Decimal | None = None
    transaction_id: int | None = None  # assigned by the store
