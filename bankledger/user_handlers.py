"""HTTP-level handler for user registration."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Protocol

from bankledger.dependency import Dependency
from bankledger.responses import JsonResponse, bad_request, error_response
from bankledger.user_repository import UserRepository
from bankledger.user_service import UserService
from bankledger.users import RegisterUserInput, RegisterUserOutput
from bankledger.validation import ValidationError, Validator, rule


@dataclass(frozen=True)
class UserPostRequest:
    """Body of a registration request."""

    nama: str = ""
    nik: str = field(default="", metadata=rule("nik", length=16))
    no_hp: str = ""


class _Service(Protocol):
    def register_user(self, input: RegisterUserInput) -> RegisterUserOutput: ...


_REQUEST_FIELDS = ("nama", "nik", "no_hp")


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


def _bind(body: str | bytes | Mapping[str, Any]) -> UserPostRequest:
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

    values: dict[str, str] = {}
    for name in _REQUEST_FIELDS:
        value = data.get(name)
        if value is None:
            continue
        if not isinstance(value, str):
            raise ValueError(
                f"Unmarshal type error: expected=string, got={_json_type(value)}, field={name}"
            )
        values[name] = value
    return UserPostRequest(**values)


@dataclass
class UserHandler:
    """Turns registration requests into service calls and results into responses."""

    logger: logging.Logger
    service: _Service
    validator: Validator = field(default_factory=Validator)

    @classmethod
    def from_dependency(cls, deps: Dependency) -> UserHandler:
        """Build a handler backed by the database in ``deps``."""
        service = UserService(UserRepository(deps.db))
        return cls(logger=deps.logger, service=service)

    def user_post(self, body: str | bytes | Mapping[str, Any]) -> JsonResponse:
        """Register the user in ``body`` and respond with their account number."""
        try:
            request = _bind(body)
        except ValueError as err:
            return bad_request(err, self.logger)
        try:
            self.validator.validate(request)
        except ValidationError as err:
            return bad_request(err, self.logger)

        try:
            output = self.service.register_user(
                RegisterUserInput(
                    name=request.nama,
                    phone_no=request.no_hp,
                    identity_no=request.nik,
                )
            )
        except Exception as err:
            return error_response(err, self.logger)
        return JsonResponse(int(HTTPStatus.OK), {"no_rekening": output.bank_account_no})