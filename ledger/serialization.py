"""JSON-safe payloads for ledger entities."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from ledger.models import Company, Customer, Transaction


def customer_payload(customer: Customer) -> dict:
    """Build the JSON representation of a customer."""
    return {
        "customer_id": customer.customer_id,
        "cpf": customer.cpf,
        "email": customer.email,
        "created_at": serialize_value(customer.created_at),
    }


def company_payload(company: Company, with_balance: bool = False) -> dict:
    """Build the JSON representation of a company.

    Parameters
    ----------
    company : Company
        Company to serialize.
    with_balance : bool
        Include the current balance. Off by default so payloads that leave
        the service never disclose it.
    """
    payload = {
        "company_id": company.company_id,
        "cnpj": company.cnpj,
        "admin_fee_rate": serialize_value(company.admin_fee_rate),
        "callback_url": company.callback_url,
        "created_at": serialize_value(company.created_at),
    }
    if with_balance:
        payload["balance"] = serialize_value(company.balance)
    return payload


def transaction_payload(transaction: Transaction) -> dict:
    """Build the callback representation of a committed transaction.

    Customer and company are referenced by id and national ID only; the
    company balance and customer email are not disclosed.
    """
    return {
        "transaction_id": transaction.transaction_id,
        "kind": serialize_value(transaction.kind),
        "amount": serialize_value(transaction.amount),
        "requested_amount": serialize_value(transaction.requested_amount),
        "fee": serialize_value(transaction.fee),
        "system_fee": serialize_value(transaction.system_fee),
        "timestamp": serialize_value(transaction.timestamp),
        "customer": {
            "customer_id": transaction.customer.customer_id,
            "cpf": transaction.customer.cpf,
        },
        "company": {
            "company_id": transaction.company.company_id,
            "cnpj": transaction.company.cnpj,
        },
    }


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    return value
