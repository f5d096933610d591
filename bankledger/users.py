"""Bank customers and the inputs and outputs of their registration."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from bankledger.accounts import UserAccount


@dataclass
class User:
    """A registered customer with the accounts they own."""

    id: str
    name: str
    phone_no: str
    identity_no: str
    created_at: int = 0
    created_by: str = ""
    updated_at: int | None = None
    updated_by: str | None = None
    accounts: list[UserAccount] = field(default_factory=list)

    @classmethod
    def create(
        cls, id: str, name: str, phone_no: str, identity_no: str, account: UserAccount
    ) -> User:
        """Create a new user owning ``account``."""
        return cls(
            id=id,
            name=name,
            phone_no=phone_no,
            identity_no=identity_no,
            created_at=time.time_ns() // 1_000_000,
            created_by=id,
            accounts=[account],
        )


@dataclass(frozen=True)
class RegisterUserInput:
    """Data needed to register a user."""

    name: str
    phone_no: str
    identity_no: str


@dataclass(frozen=True)
class RegisterUserOutput:
    """Identifiers produced by registering a user."""

    user_id: str
    bank_account_no: str