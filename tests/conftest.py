"""Pytest configuration and shared fixtures for http-client-core tests."""

import httpx
import pytest


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Clear credential-like environment variables before each test."""
    import os

    test_prefixes = ("TEST_", "API_", "CLIENT_", "HTTP_CLIENT_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def request_factory():
    """Build fresh GET requests; header decorators mutate the request they get."""

    def factory(url: str = "https://api.example.com/test", **kwargs) -> httpx.Request:
        return httpx.Request(kwargs.pop("method", "GET"), url, **kwargs)

    return factory


@pytest.fixture
def recorded_sleeps():
    """Sleep replacement recording requested delays instead of blocking."""
    delays: list[float] = []
    return delays
