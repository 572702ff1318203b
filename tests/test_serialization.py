"""Tests for entity serialization."""

import json
from datetime import datetime
from decimal import Decimal

from ledger.models import Company, Customer, Transaction, TransactionKind
from ledger.serialization import (
    company_payload,
    customer_payload,
    serialize_value,
    transaction_payload,
)


def make_transaction() -> Transaction:
    return Transaction(
        customer=Customer(cpf="12345678909", email="cliente@example.com", customer_id=1),
        company=Company(
            cnpj="11222333000181",
            balance=Decimal("1489.00"),
            admin_fee_rate=Decimal("50.00"),
            company_id=2,
        ),
        amount=Decimal("489.00"),
        kind=TransactionKind.WITHDRAWAL,
        timestamp=datetime(2024, 5, 1, 12, 30),
        system_fee=Decimal("10.00"),
        fee=Decimal("11.00"),
        requested_amount=Decimal("500.00"),
        transaction_id=3,
    )


class TestSerializeValue:
    """Tests for serialize_value."""

    def test_decimal_as_string(self) -> None:
        assert serialize_value(Decimal("10.50")) == "10.50"

    def test_enum_value(self) -> None:
        assert serialize_value(TransactionKind.DEPOSIT) == "deposito"

    def test_datetime(self) -> None:
        assert serialize_value(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05"

    def test_passthrough(self) -> None:
        assert serialize_value(None) is None
        assert serialize_value(5) == 5


class TestEntityPayloads:
    """Tests for customer and company payloads."""

    def test_customer(self) -> None:
        customer = Customer(
            cpf="12345678909",
            email="cliente@example.com",
            customer_id=1,
            created_at=datetime(2024, 5, 1, 9, 0),
        )

        assert customer_payload(customer) == {
            "customer_id": 1,
            "cpf": "12345678909",
            "email": "cliente@example.com",
            "created_at": "2024-05-01T09:00:00",
        }

    def test_company_hides_balance_by_default(self) -> None:
        company = make_transaction().company

        payload = company_payload(company)

        assert payload == {
            "company_id": 2,
            "cnpj": "11222333000181",
            "admin_fee_rate": "50.00",
            "callback_url": None,
            "created_at": None,
        }
        assert "1489.00" not in json.dumps(payload)

    def test_company_with_balance(self) -> None:
        payload = company_payload(make_transaction().company, with_balance=True)

        assert payload["balance"] == "1489.00"
        json.dumps(payload)


class TestTransactionPayload:
    """Tests for the callback payload."""

    def test_payload_fields(self) -> None:
        payload = transaction_payload(make_transaction())

        assert payload == {
            "transaction_id": 3,
            "kind": "saque",
            "amount": "489.00",
            "requested_amount": "500.00",
            "fee": "11.00",
            "system_fee": "10.00",
            "timestamp": "2024-05-01T12:30:00",
            "customer": {"customer_id": 1, "cpf": "12345678909"},
            "company": {"company_id": 2, "cnpj": "11222333000181"},
        }

    def test_payload_hides_balance_and_email(self) -> None:
        text = json.dumps(transaction_payload(make_transaction()))

        assert "1489.00" not in text
        assert "cliente@example.com" not in text
