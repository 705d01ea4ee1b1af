"""Shared fixtures for integration tests."""

import os

import pytest

from sonora.webapi import Token

# Skip all integration tests unless RUN_SONORA_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_SONORA_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_SONORA_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def token() -> Token:
    """Token from SONORA_ACCESS_TOKEN and the space separated SONORA_TOKEN_SCOPES."""
    access_token = os.environ.get("SONORA_ACCESS_TOKEN")
    if not access_token:
        pytest.skip("SONORA_ACCESS_TOKEN is not set")
    return Token.from_scope_string(access_token, os.environ.get("SONORA_TOKEN_SCOPES", ""))
