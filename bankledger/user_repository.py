"""Persistence of newly registered users together with their first account."""

from __future__ import annotations

from sqlalchemy import BigInteger, Column, String, Table, insert
from sqlalchemy.engine import Engine

from bankledger.account_repository import metadata, user_accounts_table
from bankledger.users import User

users_table = Table(
    "users",
    metadata,
    Column("id", String, primary_key=True),
    Column("name", String, nullable=False),
    Column("phone_number", String, nullable=False),
    Column("identity_number", String, nullable=False),
    Column("created_at", BigInteger, nullable=False),
    Column("created_by", String, nullable=False),
    Column("updated_at", BigInteger),
    Column("updated_by", String),
    schema="public",
)


class UserRepository:
    """Writes users and their accounts through a SQLAlchemy engine."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def insert_user(self, user: User) -> None:
        """Store ``user`` and its first account in one transaction.

        Nothing is stored if either insert fails.
        """
        if not user.accounts:
            raise ValueError("user has no account to store")
        account = user.accounts[0]

        with self.engine.begin() as connection:
            connection.execute(
                insert(users_table).values(
                    id=user.id,
                    name=user.name,
                    phone_number=user.phone_no,
                    identity_number=user.identity_no,
                    created_at=user.created_at,
                    created_by=user.created_by,
                )
            )
            connection.execute(
                insert(user_accounts_table).values(
                    id=account.id,
                    user_id=account.user_id,
                    account_number=account.account_no,
                    total_balance=account.total_balance,
                    created_at=account.created_at,
                    created_by=account.created_by,
                )
            )