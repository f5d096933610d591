"""Errors raised by the banking domain."""

from __future__ import annotations


class BankingError(Exception):
    """Base class of the domain errors; each subclass carries its own message."""

    default_message = "banking error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)


class FailedToAcquireTransaction(BankingError):
    """Raised when an operation needs an open database transaction and has none."""

    default_message = "failed to acquire transaction key"


class InsufficientBalance(BankingError):
    """Raised when a debit exceeds the balance of the account."""

    default_message = "user account balance is insufficient to perform such amount"


class UserAccountNotFound(BankingError):
    """Raised when no account carries the requested account number."""

    default_message = "user account is not found"