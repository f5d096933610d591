import uuid

import pytest

from bankledger.user_service import UserService
from bankledger.users import RegisterUserInput


class _RecordingRepository:
    def __init__(self, error=None):
        self.users = []
        self.error = error

    def insert_user(self, user):
        self.users.append(user)
        if self.error is not None:
            raise self.error


INPUT = RegisterUserInput(name="John Doe", phone_no="no-hp-test", identity_no="nik-0000-example")


def test_register_user_stores_user_with_input_data():
    repository = _RecordingRepository()
    UserService(repository).register_user(INPUT)

    assert len(repository.users) == 1
    user = repository.users[0]
    assert user.name == INPUT.name
    assert user.phone_no == INPUT.phone_no
    assert user.identity_no == INPUT.identity_no
    assert user.created_by == user.id


def test_register_user_output_matches_stored_user():
    repository = _RecordingRepository()
    output = UserService(repository).register_user(INPUT)

    user = repository.users[0]
    assert output.user_id == user.id
    assert len(user.accounts) == 1
    assert output.bank_account_no == user.accounts[0].account_no


def test_register_user_account_belongs_to_user():
    repository = _RecordingRepository()
    UserService(repository).register_user(INPUT)

    user = repository.users[0]
    account = user.accounts[0]
    assert account.user_id == user.id
    assert account.created_by == user.id
    assert account.total_balance == 0
    assert account.id not in (user.id, account.account_no)


def test_register_user_generates_uuid_identifiers():
    repository = _RecordingRepository()
    output = UserService(repository).register_user(INPUT)

    account = repository.users[0].accounts[0]
    for value in (output.user_id, output.bank_account_no, account.id):
        assert str(uuid.UUID(value)) == value


def test_register_user_generates_distinct_ids_per_call():
    repository = _RecordingRepository()
    service = UserService(repository)
    first = service.register_user(INPUT)
    second = service.register_user(INPUT)

    assert first.user_id != second.user_id
    assert first.bank_account_no != second.bank_account_no


def test_register_user_propagates_repository_error():
    repository = _RecordingRepository(error=RuntimeError("some error"))
    with pytest.raises(RuntimeError, match="some error"):
        UserService(repository).register_user(INPUT)
    assert len(repository.users) == 1