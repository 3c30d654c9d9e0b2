"""Structured exceptions for composed HTTP clients.

Failures raised by the underlying transport (``httpx.HTTPError`` and friends)
are never wrapped; the classes here cover what this library raises itself.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class HTTPClientError(Exception):
    """Base exception for errors raised by http_client_core."""

    pass


class ConfigurationError(HTTPClientError, ValueError):
    """A decorator or adapter was built with invalid configuration."""

    pass


class ResponseStatusError(HTTPClientError):
    """The server answered with an error status code."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        request: "httpx.Request | None" = None,
        response: "httpx.Response | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.request = request
        self.response = response


class ClientStatusError(ResponseStatusError):
    """4xx client errors."""

    pass


class RateLimitedError(ClientStatusError):
    """429 Too Many Requests."""

    def __init__(self, message: str, *, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerStatusError(ResponseStatusError):
    """5xx server errors."""

    pass
