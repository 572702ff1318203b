#!/usr/bin/env python3
"""Seed an in-memory ledger and run sample transactions.

Registers generated customers and companies (with valid CPF/CNPJ), executes a
batch of random deposits and withdrawals through ``TransactionService`` and
writes the resulting entities to JSON files for inspection.

Rejected requests (insufficient balance, fee larger than the amount) are
counted, not fatal. Notifications are disabled unless ``--notify`` is given,
in which case SMTP/callback settings come from the environment.
"""

import argparse
import json
import logging
import sys
from collections import Counter
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ledger.config import LedgerConfig
from ledger.exceptions import LedgerError
from ledger.generators import CompanyGenerator, CustomerGenerator, TransactionRequestGenerator
from ledger.logging import setup_logging
from ledger.notifications import NotificationDispatcher
from ledger.serialization import company_payload, customer_payload, transaction_payload
from ledger.services import CompanyService, CustomerService, TransactionService
from ledger.store import InMemoryLedgerStore

logger = logging.getLogger(__name__)


def save_json(records: list[dict], filename: str, output_dir: Path) -> None:
    """Save records to a JSON file."""
    filepath = output_dir / filename
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(records, f, indent=2, ensure_ascii=False)
    print(f"Saved {len(records)} records to {filepath}")


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Seed a ledger and run sample transactions")
    parser.add_argument(
        "--customers",
        type=int,
        default=20,
        help="Number of customers to register (default: 20)",
    )
    parser.add_argument(
        "--companies",
        type=int,
        default=5,
        help="Number of companies to register (default: 5)",
    )
    parser.add_argument(
        "--transactions",
        type=int,
        default=100,
        help="Number of transactions to attempt (default: 100)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=project_root / "local",
        help="Directory for JSON output (default: ./local)",
    )
    parser.add_argument(
        "--notify",
        action="store_true",
        help="Send callbacks and emails using environment configuration",
    )
    args = parser.parse_args()

    config = LedgerConfig.from_env()
    setup_logging(config.log_level, config.log_format)

    store = InMemoryLedgerStore()
    customer_service = CustomerService(store)
    company_service = CompanyService(store)
    dispatcher = NotificationDispatcher.from_config(config) if args.notify else None
    transaction_service = TransactionService(store, dispatcher=dispatcher, config=config)

    customers = [
        customer_service.register(c.cpf, c.email)
        for c in CustomerGenerator(seed=args.seed).generate_batch(args.customers)
    ]
    companies = [
        company_service.register(c.cnpj, c.balance, c.admin_fee_rate, c.callback_url)
        for c in CompanyGenerator(seed=args.seed).generate_batch(args.companies)
    ]

    outcomes: Counter[str] = Counter()
    request_gen = TransactionRequestGenerator(seed=args.seed)
    for request in request_gen.generate_batch(customers, companies, args.transactions):
        try:
            transaction_service.execute_transaction(
                request.customer_cpf,
                request.company_cnpj,
                request.requested_amount,
                request.kind,
                request.system_fee,
            )
        except LedgerError as exc:
            outcomes[type(exc).__name__] += 1
            logger.debug("Request rejected: %s", exc)
        else:
            outcomes["committed"] += 1

    if dispatcher is not None:
        dispatcher.shutdown(wait=True)

    args.output_dir.mkdir(parents=True, exist_ok=True)
    save_json([customer_payload(c) for c in store.list_customers()], "customers.json", args.output_dir)
    save_json(
        [company_payload(c, with_balance=True) for c in store.list_companies()],
        "companies.json",
        args.output_dir,
    )
    save_json(
        [transaction_payload(t) for t in store.list_transactions()],
        "transactions.json",
        args.output_dir,
    )

    print("\n" + "=" * 60)
    print("Summary")
    print("=" * 60)
    for entity_type, count in store.summary().items():
        print(f"  {entity_type}: {count}")
    for outcome, count in sorted(outcomes.items()):
        print(f"  {outcome}: {count}")


if __name__ == "__main__":
    main()
