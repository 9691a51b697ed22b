"""Response classification into a closed set of outcomes.

Architecture:
    The HTTP layer hands every raw response (status code + body text) to
    ``classify_response`` and every transport exception to
    ``classify_transport_error``. Exactly one ``Outcome`` is produced per
    request. Nothing outside this module inspects raw status integers.

Outcome cases:
    - Success(payload): 2xx with a JSON body
    - InvalidParameters(detail): 400
    - AuthFailure: 401, body ignored
    - PaymentRequired: 402, body ignored
    - ServerFailure(status, detail): any other status
    - TransportFailure(kind, detail): no status was ever received

A 2xx body that is not valid JSON is not an outcome: ``ParseError`` is
raised directly.
"""

from __future__ import annotations

import asyncio
import json
import socket
from dataclasses import dataclass
from typing import Any, Union

import aiohttp

from .enums import TransportErrorKind
from .exceptions import (
    ApiError,
    AuthError,
    InvalidParamsError,
    KrystalError,
    ParseError,
    PaymentRequiredError,
    TransportError,
)


@dataclass(frozen=True)
class Success:
    payload: Any


@dataclass(frozen=True)
class AuthFailure:
    def to_error(self) -> KrystalError:
        return AuthError()


@dataclass(frozen=True)
class PaymentRequired:
    def to_error(self) -> KrystalError:
        return PaymentRequiredError()


@dataclass(frozen=True)
class InvalidParameters:
    detail: str

    def to_error(self) -> KrystalError:
        return InvalidParamsError(f"Bad request: {self.detail}", status_code=400)


@dataclass(frozen=True)
class ServerFailure:
    """Non-2xx status other than 400/401/402."""

    status: int
    detail: str

    @property
    def retryable(self) -> bool:
        return 500 <= self.status <= 599

    def to_error(self) -> KrystalError:
        hint = (
            "The API is temporarily unavailable. Please retry later."
            if self.retryable
            else "The API rejected the request. Inspect the response for details."
        )
        return ApiError(self.detail, status_code=self.status, hint=hint, retryable=self.retryable)


@dataclass(frozen=True)
class TransportFailure:
    kind: TransportErrorKind
    detail: str

    def to_error(self) -> KrystalError:
        return TransportError(f"HTTP request failed: {self.detail}", kind=self.kind)


Outcome = Union[
    Success, AuthFailure, PaymentRequired, InvalidParameters, ServerFailure, TransportFailure
]


def classify_response(status: int, body: bytes | str) -> Outcome:
    """Classify a raw HTTP response.

    Args:
        status: HTTP status code
        body: Response body, raw bytes or already decoded text

    Returns:
        The single matching outcome

    Raises:
        ParseError: If a 2xx body is not UTF-8 encoded JSON
    """
    if 200 <= status <= 299:
        try:
            text = body.decode("utf-8") if isinstance(body, bytes) else body
            return Success(json.loads(text))
        except UnicodeDecodeError as e:
            raise ParseError(f"JSON error: body is not valid UTF-8: {e}") from e
        except json.JSONDecodeError as e:
            raise ParseError(f"JSON error: {e}") from e

    # Error bodies are kept as diagnostic text
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    if status == 400:
        return InvalidParameters(body)
    if status == 401:
        return AuthFailure()
    if status == 402:
        return PaymentRequired()
    return ServerFailure(status, body)


def classify_transport_error(error: BaseException) -> TransportFailure:
    """Map an aiohttp/asyncio exception onto a transport failure."""
    if isinstance(error, (asyncio.TimeoutError, aiohttp.ServerTimeoutError)):
        return TransportFailure(TransportErrorKind.TIMEOUT, str(error) or "request timed out")
    if isinstance(error, aiohttp.ClientConnectorError):
        if isinstance(error.os_error, socket.gaierror):
            return TransportFailure(TransportErrorKind.DNS, str(error))
        return TransportFailure(TransportErrorKind.CONNECT, str(error))
    return TransportFailure(TransportErrorKind.OTHER, str(error) or type(error).__name__)


def unwrap(outcome: Outcome) -> Any:
    """Return the success payload or raise the outcome's typed error."""
    if isinstance(outcome, Success):
        return outcome.payload
    raise outcome.to_error()
