"""HTTP-level handlers for account balance and cash transactions."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Protocol

from bankledger.account_repository import AccountRepository
from bankledger.account_service import AccountService
from bankledger.accounts import GetBalanceOutput, TransactionInput
from bankledger.dependency import Dependency
from bankledger.responses import JsonResponse, bad_request, error_response
from bankledger.validation import ValidationError, Validator, rule


@dataclass(frozen=True)
class TransactionRequest:
    """Body of a deposit or withdrawal request."""

    no_rekening: str = ""
    nominal: int = field(default=0, metadata=rule("nominal", gt=0))


class _Service(Protocol):
    def get_balance(self, account_no: str) -> GetBalanceOutput: ...

    def store_cash(self, input: TransactionInput) -> GetBalanceOutput: ...

    def withdraw_cash(self, input: TransactionInput) -> GetBalanceOutput: ...


_REQUEST_FIELDS = (("no_rekening", str, "string"), ("nominal", int, "int64"))


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def _bind(body: str | bytes | Mapping[str, Any]) -> TransactionRequest:
    if isinstance(body, Mapping):
        data: Any = body
    else:
        if isinstance(body, (bytes, bytearray)):
            body = body.decode("utf-8")
        try:
            data = json.loads(body)
        except json.JSONDecodeError as err:
            raise ValueError(f"invalid JSON body: {err}") from err
    if not isinstance(data, Mapping):
        raise ValueError(f"request body must be a JSON object, got {_json_type(data)}")

    values: dict[str, Any] = {}
    for name, kind, expected in _REQUEST_FIELDS:
        value = data.get(name)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, kind):
            raise ValueError(
                f"Unmarshal type error: expected={expected}, got={_json_type(value)}, field={name}"
            )
        values[name] = value
    return TransactionRequest(**values)


@dataclass
class AccountHandler:
    """Turns requests into service calls and service results into responses."""

    logger: logging.Logger
    service: _Service
    validator: Validator = field(default_factory=Validator)

    @classmethod
    def from_dependency(cls, deps: Dependency) -> AccountHandler:
        """Build a handler backed by the database in ``deps``."""
        service = AccountService(AccountRepository(deps.db))
        return cls(logger=deps.logger, service=service)

    def account_balance_get(self, account_no: str) -> JsonResponse:
        """Respond with the balance of ``account_no``."""
        try:
            output = self.service.get_balance(account_no)
        except Exception as err:
            return error_response(err, self.logger)
        return JsonResponse(int(HTTPStatus.OK), {"saldo": output.balance})

    def transaction_credit_post(self, body: str | bytes | Mapping[str, Any]) -> JsonResponse:
        """Deposit the amount in ``body`` and respond with the new balance."""
        return self._transact(body, self.service.store_cash)

    def transaction_debit_post(self, body: str | bytes | Mapping[str, Any]) -> JsonResponse:
        """Withdraw the amount in ``body`` and respond with the new balance."""
        return self._transact(body, self.service.withdraw_cash)

    def _transact(
        self,
        body: str | bytes | Mapping[str, Any],
        operation: Callable[[TransactionInput], GetBalanceOutput],
    ) -> JsonResponse:
        try:
            request = _bind(body)
        except ValueError as err:
            return bad_request(err, self.logger)
        try:
            self.validator.validate(request)
        except ValidationError as err:
            return bad_request(err, self.logger)

        try:
            result = operation(TransactionInput(request.no_rekening, request.nominal))
        except Exception as err:
            return error_response(err, self.logger)
        return JsonResponse(int(HTTPStatus.OK), {"saldo": result.balance})