"""Client configuration and credential loading.

This module centralizes the base URL, header names and environment
variable names so the client and transport stay small and focused.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://cloud-api.krystal.app"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "krystal-cloud-python/0.1.0"

API_KEY_HEADER = "KC-APIKey"
CONTENT_TYPE = "application/json"

API_KEY_ENV = "KRYSTAL_API_KEY"
BASE_URL_ENV = "KRYSTAL_BASE_URL"
TIMEOUT_ENV = "KRYSTAL_TIMEOUT"
MAX_REQUESTS_ENV = "KRYSTAL_MAX_REQUESTS"
RATE_WINDOW_ENV = "KRYSTAL_RATE_WINDOW"
MAX_CONCURRENCY_ENV = "KRYSTAL_MAX_CONCURRENCY"


@dataclass(frozen=True)
class ClientConfig:
    """Immutable connection settings for one client.

    Attributes:
        base_url: API root, without trailing slash
        timeout: Total request timeout in seconds
        user_agent: Client identification string sent as User-Agent
        max_requests: Requests admitted per ``rate_window`` (None disables the gate)
        rate_window: Sliding window length in seconds
        max_concurrency: Maximum in-flight requests (None means unbounded)
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    max_requests: int | None = None
    rate_window: float = 1.0
    max_concurrency: int | None = None

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ConfigurationError("base_url must not be empty", hint="Provide a valid API base URL.")
        if self.timeout <= 0:
            raise ConfigurationError("timeout must be positive", hint="Use a timeout above zero seconds.")
        if self.rate_window <= 0:
            raise ConfigurationError("rate_window must be positive", hint="Use a window above zero seconds.")
        if self.max_requests is not None and self.max_requests < 1:
            raise ConfigurationError("max_requests must be at least 1", hint="Use a positive request budget.")
        if self.max_concurrency is not None and self.max_concurrency < 1:
            raise ConfigurationError("max_concurrency must be at least 1", hint="Use a positive concurrency cap.")
        # Normalise once so path joining never doubles the slash
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Build a config from ``KRYSTAL_*`` environment variables.

        Unset variables fall back to the defaults.
        """
        env = os.environ if environ is None else environ
        try:
            return cls(
                base_url=env.get(BASE_URL_ENV) or DEFAULT_BASE_URL,
                timeout=float(env.get(TIMEOUT_ENV) or DEFAULT_TIMEOUT),
                max_requests=_optional_int(env.get(MAX_REQUESTS_ENV)),
                rate_window=float(env.get(RATE_WINDOW_ENV) or 1.0),
                max_concurrency=_optional_int(env.get(MAX_CONCURRENCY_ENV)),
            )
        except ValueError as e:
            raise ConfigurationError(
                f"Environment variable error: {e}",
                hint="Check the KRYSTAL_* environment variables hold numbers.",
            ) from e


def load_api_key(environ: Mapping[str, str] | None = None) -> str:
    """Read the API key from ``KRYSTAL_API_KEY``.

    Raises:
        ConfigurationError: If the variable is unset or blank
    """
    env = os.environ if environ is None else environ
    api_key = (env.get(API_KEY_ENV) or "").strip()
    if not api_key:
        raise ConfigurationError(f"Environment variable error: {API_KEY_ENV} is not set")
    return api_key


def _optional_int(value: str | None) -> int | None:
    if value is None or value.strip() == "":
        return None
    return int(value)
