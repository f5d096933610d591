"""Bank accounts and the transactions recorded against them."""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from enum import Enum

from bankledger.errors import InsufficientBalance


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class TransactionType(str, Enum):
    """Direction of a transaction."""

    CREDIT = "CREDIT"
    DEBIT = "DEBIT"


@dataclass
class TransactionHistory:
    """One credit or debit recorded on an account."""

    id: str
    user_account_id: str
    transaction_type: TransactionType
    amount: int
    created_at: int
    created_by: str
    updated_at: int | None = None
    updated_by: str | None = None


@dataclass
class UserAccount:
    """A user's bank account with its running balance."""

    id: str
    user_id: str
    account_no: str
    total_balance: int = 0
    created_at: int = 0
    created_by: str = ""
    updated_at: int | None = None
    updated_by: str | None = None
    transaction_histories: list[TransactionHistory] = field(default_factory=list)

    @classmethod
    def open(cls, id: str, user_id: str, account_no: str) -> UserAccount:
        """Create a new, empty account owned by ``user_id``."""
        return cls(
            id=id,
            user_id=user_id,
            account_no=account_no,
            created_at=_now_ms(),
            created_by=user_id,
        )

    def credit(self, amount: int) -> TransactionHistory:
        """Add ``amount`` to the balance and record the transaction."""
        self.total_balance += amount
        return self._record(TransactionType.CREDIT, amount)

    def debit(self, amount: int) -> TransactionHistory:
        """Take ``amount`` from the balance and record the transaction."""
        if amount > self.total_balance:
            raise InsufficientBalance()
        self.total_balance -= amount
        return self._record(TransactionType.DEBIT, amount)

    def _record(self, transaction_type: TransactionType, amount: int) -> TransactionHistory:
        self.updated_at = _now_ms()
        self.updated_by = self.user_id
        history = TransactionHistory(
            id=str(uuid.uuid4()),
            user_account_id=self.id,
            transaction_type=transaction_type,
            amount=amount,
            created_at=_now_ms(),
            created_by=self.user_id,
        )
        self.transaction_histories.append(history)
        return history


@dataclass(frozen=True)
class GetBalanceOutput:
    """Balance of an account as reported to callers."""

    balance: int = 0
    account_no: str = ""


@dataclass(frozen=True)
class TransactionInput:
    """A request to move money into or out of an account."""

    account_no: str
    amount: int