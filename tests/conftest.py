"""Pytest configuration and shared fixtures for coinbase-client-core tests."""

import httpx
import pytest

from coinbase_client import CoinbaseClient
from coinbase_client.testing import RecordingHandler


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear test-related environment variables before each test.

    This prevents a developer's real Coinbase credentials from leaking into
    credential resolution tests.
    """
    import os

    test_prefixes = ("TEST_", "COINBASE_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def handler():
    """A MockTransport handler with no routes registered."""
    return RecordingHandler()


@pytest.fixture
def make_client(handler):
    """Factory building a CoinbaseClient whose HTTP calls go to ``handler``."""

    def _make(auth=None):
        return CoinbaseClient(auth, transport=httpx.MockTransport(handler))

    return _make
