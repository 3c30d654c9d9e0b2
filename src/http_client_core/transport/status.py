"""Decorator turning HTTP error statuses into exceptions."""

import httpx

from http_client_core.client import Client, ClientFunc, Decorator
from http_client_core.errors import handler


def raise_for_status() -> Decorator:
    """Raise a ResponseStatusError for every 4xx/5xx response.

    Error responses are read and closed before raising, so their pooled
    connection is released and ``exc.response.content`` is still available.

    Place it inside ``fault_tolerance`` (listed before it in ``new``) so that
    server errors count as failed attempts.

    Example:
        ```python
        client = new(root, raise_for_status(), fault_tolerance(3, 0.5))
        ```
    """

    def decorate(client: Client) -> Client:
        def execute(request: httpx.Request) -> httpx.Response:
            response = client.execute(request)
            if response.is_error:
                # release the connection before raising; content stays on the exception
                try:
                    response.read()
                finally:
                    response.close()
            handler.raise_for_status(response, request)
            return response

        return ClientFunc(execute)

    return decorate
