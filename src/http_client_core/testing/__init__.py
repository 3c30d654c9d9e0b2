"""Test doubles for code built on composable clients.

Example:
    ```python
    from http_client_core.testing import RecordingClient

    root = RecordingClient(failures=2)
    client = new(root, fault_tolerance(3))
    client.execute(httpx.Request("GET", "https://example.com"))
    assert root.calls == 3
    ```
"""

from collections.abc import Callable

import httpx


class RecordingClient:
    """Fake root client recording every request it receives.

    Args:
        failures: Number of leading calls that raise instead of answering.
            ``None`` fails forever.
        error_factory: Builds the exception raised by a failing call; it
            gets the request. Defaults to ``httpx.ConnectError``.
        responder: Builds the response for a successful call. Defaults to
            an empty 200 response.
    """

    def __init__(
        self,
        *,
        failures: int | None = 0,
        error_factory: Callable[[httpx.Request], Exception] | None = None,
        responder: Callable[[httpx.Request], httpx.Response] | None = None,
    ) -> None:
        self.failures = failures
        self.error_factory = error_factory or _connect_error
        self.responder = responder or _ok
        self.requests: list[httpx.Request] = []
        self.errors: list[Exception] = []

    @property
    def calls(self) -> int:
        return len(self.requests)

    def execute(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.failures is None or self.calls <= self.failures:
            error = self.error_factory(request)
            self.errors.append(error)
            raise error
        return self.responder(request)


def _connect_error(request: httpx.Request) -> Exception:
    return httpx.ConnectError("connection failed", request=request)


def _ok(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, request=request)


__all__ = ["RecordingClient"]
