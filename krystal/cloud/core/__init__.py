"""Core components."""

from .config import (
    API_KEY_ENV,
    API_KEY_HEADER,
    DEFAULT_BASE_URL,
    ClientConfig,
    load_api_key,
)
from .enums import PoolSortBy, PositionStatus, TransportErrorKind
from .exceptions import (
    ApiError,
    AuthError,
    ConfigurationError,
    InvalidParamsError,
    KrystalError,
    ParseError,
    PaymentRequiredError,
    TransportError,
)
from .outcome import (
    AuthFailure,
    InvalidParameters,
    Outcome,
    PaymentRequired,
    ServerFailure,
    Success,
    TransportFailure,
    classify_response,
    classify_transport_error,
    unwrap,
)

__all__ = [
    # Config
    "ClientConfig",
    "load_api_key",
    "API_KEY_ENV",
    "API_KEY_HEADER",
    "DEFAULT_BASE_URL",
    # Enums
    "PoolSortBy",
    "PositionStatus",
    "TransportErrorKind",
    # Exceptions
    "KrystalError",
    "ConfigurationError",
    "TransportError",
    "ApiError",
    "AuthError",
    "PaymentRequiredError",
    "InvalidParamsError",
    "ParseError",
    # Outcomes
    "Outcome",
    "Success",
    "AuthFailure",
    "PaymentRequired",
    "InvalidParameters",
    "ServerFailure",
    "TransportFailure",
    "classify_response",
    "classify_transport_error",
    "unwrap",
]
