import pytest

from bankledger.errors import (
    BankingError,
    FailedToAcquireTransaction,
    InsufficientBalance,
    UserAccountNotFound,
)


@pytest.mark.parametrize(
    ("error_type", "message"),
    [
        (FailedToAcquireTransaction, "failed to acquire transaction key"),
        (InsufficientBalance, "user account balance is insufficient to perform such amount"),
        (UserAccountNotFound, "user account is not found"),
    ],
)
def test_default_messages(error_type, message):
    error = error_type()
    assert str(error) == message
    assert isinstance(error, BankingError)


def test_custom_message_keeps_type():
    error = UserAccountNotFound("no rows in result set")
    assert str(error) == "no rows in result set"
    with pytest.raises(BankingError):
        raise error


@pytest.mark.parametrize(
    ("first", "second"),
    [
        (InsufficientBalance, UserAccountNotFound),
        (UserAccountNotFound, FailedToAcquireTransaction),
        (FailedToAcquireTransaction, InsufficientBalance),
    ],
)
def test_errors_are_distinct(first, second):
    error = first()
    assert not isinstance(error, second)
    assert not isinstance(second(), first)
    assert str(error) != str(second())