"""Persistence of user accounts and their transactions."""

from __future__ import annotations

from typing import Any

from sqlalchemy import (
    BigInteger,
    Column,
    MetaData,
    String,
    Table,
    insert,
    select,
    update,
)
from sqlalchemy.engine import Connection, Engine

from bankledger.accounts import TransactionHistory, UserAccount
from bankledger.errors import FailedToAcquireTransaction, UserAccountNotFound

metadata = MetaData()

user_accounts_table = Table(
    "user_accounts",
    metadata,
    Column("id", String, primary_key=True),
    Column("user_id", String, nullable=False),
    Column("account_number", String, nullable=False, unique=True),
    Column("total_balance", BigInteger, nullable=False, default=0),
    Column("created_at", BigInteger, nullable=False),
    Column("created_by", String, nullable=False),
    Column("updated_at", BigInteger),
    Column("updated_by", String),
    schema="public",
)

transactions_table = Table(
    "transactions",
    metadata,
    Column("id", String, primary_key=True),
    Column("user_account_id", String, nullable=False),
    Column("transaction_type", String, nullable=False),
    Column("amount", BigInteger, nullable=False),
    Column("created_at", BigInteger, nullable=False),
    Column("created_by", String, nullable=False),
    Column("updated_at", BigInteger),
    Column("updated_by", String),
    schema="public",
)


def _to_account(row: Any) -> UserAccount:
    return UserAccount(
        id=row.id,
        user_id=row.user_id,
        account_no=row.account_number,
        total_balance=row.total_balance,
        created_at=row.created_at,
        created_by=row.created_by,
        updated_at=row.updated_at,
        updated_by=row.updated_by,
    )


def _require_transaction(tx: Any) -> Connection:
    if not isinstance(tx, Connection) or tx.closed or not tx.in_transaction():
        raise FailedToAcquireTransaction()
    return tx


class AccountRepository:
    """Reads and writes accounts through a SQLAlchemy engine."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def find_by_account_no(self, account_no: str) -> UserAccount:
        """Return the account with ``account_no``; raise UserAccountNotFound if absent."""
        statement = select(user_accounts_table).where(
            user_accounts_table.c.account_number == account_no
        )
        with self.engine.connect() as connection:
            row = connection.execute(statement).first()
        if row is None:
            raise UserAccountNotFound()
        return _to_account(row)

    def begin_transaction(self) -> Connection:
        """Open a connection with a transaction begun on it."""
        connection = self.engine.connect()
        try:
            connection.begin()
        except Exception:
            connection.close()
            raise
        return connection

    def find_by_account_no_for_update(self, tx: Connection, account_no: str) -> UserAccount:
        """Fetch and lock an account inside ``tx``; roll ``tx`` back on failure."""
        connection = _require_transaction(tx)
        statement = (
            select(user_accounts_table)
            .where(user_accounts_table.c.account_number == account_no)
            .with_for_update()
        )
        try:
            row = connection.execute(statement).first()
            if row is None:
                raise UserAccountNotFound()
        except Exception:
            connection.rollback()
            raise
        return _to_account(row)

    def save_transaction(
        self, tx: Connection, account: UserAccount, history: TransactionHistory
    ) -> None:
        """Store the new balance and the transaction record, then commit ``tx``."""
        connection = _require_transaction(tx)
        try:
            connection.execute(
                update(user_accounts_table)
                .where(user_accounts_table.c.account_number == account.account_no)
                .values(
                    total_balance=account.total_balance,
                    updated_at=account.updated_at,
                    updated_by=account.updated_by,
                )
            )
            connection.execute(
                insert(transactions_table).values(
                    id=history.id,
                    user_account_id=history.user_account_id,
                    transaction_type=history.transaction_type.value,
                    amount=history.amount,
                    created_at=history.created_at,
                    created_by=history.created_by,
                )
            )
        except Exception:
            connection.rollback()
            raise
        connection.commit()