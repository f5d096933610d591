import dataclasses

import pytest

from bankledger.accounts import UserAccount
from bankledger.users import RegisterUserInput, RegisterUserOutput, User


def test_create_user_owns_account():
    account = UserAccount.open("account-id", "user-id", "ACC-TEST-1")
    user = User.create("user-id", "John Doe", "0000-test", "1122334455667788", account)
    assert user.id == "user-id"
    assert user.name == "John Doe"
    assert user.identity_no == "1122334455667788"
    assert user.created_by == user.id
    assert user.created_at > 0
    assert user.updated_at is None
    assert user.accounts == [account]


def test_accounts_are_not_shared():
    first = User("a", "A", "p", "i")
    second = User("b", "B", "p", "i")
    first.accounts.append(UserAccount.open("x", "a", "ACC-TEST-2"))
    assert second.accounts == []


def test_register_types_are_frozen():
    request = RegisterUserInput(name="John Doe", phone_no="0000-test", identity_no="1122334455667788")
    with pytest.raises(dataclasses.FrozenInstanceError):
        request.name = "other"
    output = RegisterUserOutput(user_id="user-id", bank_account_no="ACC-TEST-1")
    assert output.bank_account_no == "ACC-TEST-1"