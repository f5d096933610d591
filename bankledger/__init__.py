"""Account ledger: user registration, deposits, withdrawals and balances over PostgreSQL."""

__version__ = "0.1.0"