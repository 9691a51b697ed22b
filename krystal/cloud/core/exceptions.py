"""Custom exception hierarchy.

Every error carries a technical ``message`` (``str(error)``), a separate
remediation ``hint`` for the command-line layer, and a ``retryable`` flag
that the retry executor consults.
"""

from __future__ import annotations

from .enums import TransportErrorKind


class KrystalError(Exception):
    """Base exception for all library errors."""

    default_hint = "See the error message for details."

    def __init__(self, message: str, *, hint: str | None = None, retryable: bool = False) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint or self.default_hint
        self.retryable = retryable

    def user_message(self) -> str:
        """Message plus remediation hint, suitable for end users."""
        message = self.message.rstrip().rstrip(".")
        return f"{message}. {self.hint}" if message else self.hint


class ConfigurationError(KrystalError):
    """Client could not be configured (e.g. missing API key)."""

    default_hint = "Set the KRYSTAL_API_KEY environment variable or pass an API key explicitly."


class TransportError(KrystalError):
    """Request never produced an HTTP status (timeout, connect, DNS)."""

    _HINTS = {
        TransportErrorKind.TIMEOUT: "Request timed out. Please try again or check your internet connection.",
        TransportErrorKind.CONNECT: "Could not connect to the API. Please check your internet connection.",
        TransportErrorKind.DNS: "Could not resolve the API host. Check the base URL and your DNS settings.",
        TransportErrorKind.OTHER: "The request failed in transit. Please retry later.",
    }

    def __init__(self, message: str, kind: TransportErrorKind = TransportErrorKind.OTHER) -> None:
        super().__init__(message, hint=self._HINTS[kind], retryable=True)
        self.kind = kind


class ApiError(KrystalError):
    """API answered with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        *,
        hint: str | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message, hint=hint, retryable=retryable)
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"API returned error: {self.status_code} - {self.message}"


class AuthError(ApiError):
    """Missing or invalid API key."""

    default_hint = "Please check your API key is correct and has proper permissions."

    def __init__(self, message: str = "Authentication failed: Missing or invalid API key") -> None:
        super().__init__(message, status_code=401)

    def __str__(self) -> str:
        return self.message


class PaymentRequiredError(ApiError):
    """Account has no credit left."""

    default_hint = "Your account has no remaining credits. Please top up your balance to continue."

    def __init__(self, message: str = "Payment required: No credit left") -> None:
        super().__init__(message, status_code=402)

    def __str__(self) -> str:
        return self.message


class InvalidParamsError(ApiError):
    """Request parameters were rejected, locally or by the server.

    ``status_code`` is 400 when the server rejected the request and ``None``
    when local validation blocked it before dispatch.
    """

    default_hint = "Check the request parameters and try again."

    def __init__(self, detail: str, status_code: int | None = 400) -> None:
        super().__init__(f"Invalid parameters: {detail}", status_code=status_code)
        self.detail = detail

    def __str__(self) -> str:
        return self.message


class ParseError(KrystalError):
    """Response body did not match the expected structure."""

    default_hint = "The API response format was not recognised. The upstream API may have changed."
