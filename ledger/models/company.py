"""Company model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass
class Company:
    """Company identified by CNPJ, holding the balance customers move funds against.

    ``balance`` is only changed by committed transactions. ``admin_fee_rate``
    is a per-company static rate; 2% of it is charged on every transaction.
    """

    cnpj: str  # 14 digits, no punctuation
    balance: Decimal
    admin_fee_rate: Decimal
    callback_url: str | None = None
    company_id: int | None = None  # assigned by the store
    created_at: datetime | None = None
