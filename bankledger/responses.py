"""JSON error responses built from exceptions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any

from bankledger.errors import (
    BankingError,
    FailedToAcquireTransaction,
    InsufficientBalance,
    UserAccountNotFound,
)

UNKNOWN_ERROR = "unknown error"

_CLIENT_ERRORS: dict[type[BankingError], HTTPStatus] = {
    FailedToAcquireTransaction: HTTPStatus.BAD_REQUEST,
    InsufficientBalance: HTTPStatus.BAD_REQUEST,
    UserAccountNotFound: HTTPStatus.BAD_REQUEST,
}


@dataclass(frozen=True)
class JsonResponse:
    """An HTTP status with the JSON body to send."""

    status: int
    body: dict[str, Any] = field(default_factory=dict)


def error_response(err: BaseException, logger: logging.Logger) -> JsonResponse:
    """Map ``err`` to a response; unknown errors become a 500 with a generic message."""
    status = HTTPStatus.INTERNAL_SERVER_ERROR
    message = UNKNOWN_ERROR
    for error_type, code in _CLIENT_ERRORS.items():
        if isinstance(err, error_type):
            status = code
            message = error_type.default_message

    if status == HTTPStatus.INTERNAL_SERVER_ERROR:
        logger.error("error occured", extra={"error": str(err)}, stacklevel=2)
    else:
        logger.warning("responding with client error", extra={"error": str(err)}, stacklevel=2)
    return JsonResponse(int(status), {"remarks": message})


def bad_request(err: BaseException, logger: logging.Logger) -> JsonResponse:
    """Respond with 400 and the error's own message."""
    logger.warning("responding with client error", extra={"error": str(err)}, stacklevel=2)
    return JsonResponse(int(HTTPStatus.BAD_REQUEST), {"remarks": str(err)})