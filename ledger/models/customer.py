"""Customer model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Customer:
    """Individual customer identified by CPF."""

    cpf: str  # 11 digits, no punctuation
    email: str | None = None
    customer_id: int | None = None  # assigned by the store
    created_at: datetime | None = None
