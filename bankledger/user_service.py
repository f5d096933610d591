"""Registration of new users."""

from __future__ import annotations

import uuid
from typing import Protocol

from bankledger.accounts import UserAccount
from bankledger.users import RegisterUserInput, RegisterUserOutput, User


class _Repository(Protocol):
    def insert_user(self, user: User) -> None: ...


class UserService:
    """Creates users, each with a fresh bank account."""

    def __init__(self, repository: _Repository) -> None:
        self.repository = repository

    def register_user(self, input: RegisterUserInput) -> RegisterUserOutput:
        """Create and store a user with a new account; return their identifiers."""
        user_id = str(uuid.uuid4())
        account_id = str(uuid.uuid4())
        account = UserAccount.open(account_id, user_id, str(uuid.uuid4()))
        user = User.create(user_id, input.name, input.phone_no, input.identity_no, account)

        self.repository.insert_user(user)

        return RegisterUserOutput(user_id=user_id, bank_account_no=account.account_no)