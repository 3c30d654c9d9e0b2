"""Decorators and httpx bridges for composable clients.

Modules:
    retry: ``fault_tolerance`` retry with linear backoff
    headers: ``header`` injection
    status: ``raise_for_status`` turning error statuses into exceptions
    httpx_clients: root clients over httpx and the ``ComposedTransport`` bridge

Example:
    ```python
    from http_client_core import new
    from http_client_core.transport import TransportClient, fault_tolerance, header

    client = new(
        TransportClient(httpx.HTTPTransport()),
        header("Accept", "application/json"),
        fault_tolerance(3, backoff=0.25),
    )
    ```
"""

from http_client_core.transport.headers import append_header, header
from http_client_core.transport.httpx_clients import ComposedTransport, HTTPXClient, TransportClient
from http_client_core.transport.retry import calculate_backoff_delay, fault_tolerance
from http_client_core.transport.status import raise_for_status

__all__ = [
    "ComposedTransport",
    "HTTPXClient",
    "TransportClient",
    "append_header",
    "calculate_backoff_delay",
    "fault_tolerance",
    "header",
    "raise_for_status",
]
