"""Transaction ledger: customers move funds against company balances."""

__version__ = "0.1.0"
