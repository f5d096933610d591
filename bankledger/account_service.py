"""Business operations on user accounts."""

from __future__ import annotations

from contextlib import closing
from typing import Any, Protocol

from bankledger.accounts import (
    GetBalanceOutput,
    TransactionHistory,
    TransactionInput,
    UserAccount,
)


class _Transaction(Protocol):
    def close(self) -> None: ...


class _Repository(Protocol):
    def find_by_account_no(self, account_no: str) -> UserAccount: ...

    def begin_transaction(self) -> Any: ...

    def find_by_account_no_for_update(self, tx: Any, account_no: str) -> UserAccount: ...

    def save_transaction(
        self, tx: Any, account: UserAccount, history: TransactionHistory
    ) -> None: ...


class AccountService:
    """Balance enquiries, deposits and withdrawals."""

    def __init__(self, repository: _Repository) -> None:
        self.repository = repository

    def get_balance(self, account_no: str) -> GetBalanceOutput:
        """Return the balance of the account with ``account_no``."""
        account = self.repository.find_by_account_no(account_no)
        return GetBalanceOutput(balance=account.total_balance, account_no=account.account_no)

    def store_cash(self, input: TransactionInput) -> GetBalanceOutput:
        """Credit ``input.amount`` to the account and return the new balance."""
        with closing(self.repository.begin_transaction()) as tx:
            account = self.repository.find_by_account_no_for_update(tx, input.account_no)
            history = account.credit(input.amount)
            self.repository.save_transaction(tx, account, history)
        return GetBalanceOutput(balance=account.total_balance)

    def withdraw_cash(self, input: TransactionInput) -> GetBalanceOutput:
        """Debit ``input.amount`` from the account and return the new balance."""
        with closing(self.repository.begin_transaction()) as tx:
            account = self.repository.find_by_account_no_for_update(tx, input.account_no)
            history = account.debit(input.amount)
            self.repository.save_transaction(tx, account, history)
        return GetBalanceOutput(balance=account.total_balance)