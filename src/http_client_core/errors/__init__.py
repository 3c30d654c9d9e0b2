"""Exceptions raised by composed clients and the status-checking layer."""

from http_client_core.errors.exceptions import (
    ClientStatusError,
    ConfigurationError,
    HTTPClientError,
    RateLimitedError,
    ResponseStatusError,
    ServerStatusError,
)
from http_client_core.errors.handler import raise_for_status

__all__ = [
    "ClientStatusError",
    "ConfigurationError",
    "HTTPClientError",
    "RateLimitedError",
    "ResponseStatusError",
    "ServerStatusError",
    "raise_for_status",
]
