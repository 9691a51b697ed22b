"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_KRYSTAL_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_KRYSTAL_NETWORK_TESTS") != "1",
    reason="Requires network access and KRYSTAL_API_KEY. Set RUN_KRYSTAL_NETWORK_TESTS=1 to run",
)
