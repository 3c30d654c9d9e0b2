"""Bridges between the Client contract and httpx.

- ``TransportClient``: root client over any ``httpx.BaseTransport``.
- ``HTTPXClient``: root client over ``httpx.Client.send``.
- ``ComposedTransport``: exposes a composed client as an httpx transport, so
  decorated chains plug into ``httpx.Client(transport=...)``.

Example:
    ```python
    composed = new(TransportClient(httpx.HTTPTransport(retries=0)), bearer_authorization(token))

    with httpx.Client(transport=ComposedTransport(composed), base_url="https://api.example.com") as client:
        client.get("/users")
    ```
"""

import logging
from typing import Any

import httpx

from http_client_core.client import Client

logger = logging.getLogger(__name__)


class TransportClient:
    """Root client delegating to an httpx transport.

    Args:
        transport: Any ``httpx.BaseTransport``; ``httpx.HTTPTransport`` for
            real traffic, ``httpx.MockTransport`` in tests.
    """

    def __init__(self, transport: httpx.BaseTransport) -> None:
        self._transport = transport

    def execute(self, request: httpx.Request) -> httpx.Response:
        return self._transport.handle_request(request)

    def close(self) -> None:
        self._transport.close()

    def __enter__(self):
        self._transport.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._transport.__exit__(exc_type, exc_val, exc_tb)

    def __repr__(self) -> str:
        return f"TransportClient({type(self._transport).__name__})"


class HTTPXClient:
    """Root client delegating to ``httpx.Client.send``.

    When no client is given one is created from ``client_kwargs`` and owned
    by this object: ``close`` (or leaving the ``with`` block) closes it. A
    client passed in stays the caller's responsibility.

    Args:
        client: Existing ``httpx.Client`` to send through.
        **client_kwargs: Arguments for a new ``httpx.Client`` (timeout,
            verify, proxy, ...).
    """

    def __init__(self, client: httpx.Client | None = None, **client_kwargs: Any) -> None:
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(**client_kwargs)

    def execute(self, request: httpx.Request) -> httpx.Response:
        return self._client.send(request)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        return "HTTPXClient()"


class ComposedTransport(httpx.BaseTransport):
    """httpx transport running every request through a composed client.

    Args:
        client: The composed client; its root must not send through an
            ``httpx.Client`` that uses this transport.
    """

    def __init__(self, client: Client) -> None:
        self._client = client

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        return self._client.execute(request)

    def close(self) -> None:
        close = getattr(self._client, "close", None)
        if callable(close):
            logger.debug(f"Closing {self._client!r}")
            close()
