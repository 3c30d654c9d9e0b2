"""HTTP Client Core - composable layers around an HTTP transport.

A client is anything with ``execute(request) -> response``. Decorators wrap
a client with extra behaviour and ``new`` stacks them:
- Retry with linear backoff (``fault_tolerance``)
- Header injection (``header``)
- Authorization (``authorization``, ``basic_authorization``, ``bearer_authorization``)
- Error status to exception mapping (``raise_for_status``)

Example:
    ```python
    import httpx

    from http_client_core import new
    from http_client_core.auth import basic_authorization
    from http_client_core.transport import TransportClient, fault_tolerance

    client = new(
        TransportClient(httpx.HTTPTransport()),
        basic_authorization("user", "pass"),
        fault_tolerance(attempts=3, backoff=0.5),
    )
    response = client.execute(httpx.Request("GET", "https://api.example.com/me"))
    ```
"""

from http_client_core.client import Client, ClientFunc, Decorator, new

__version__ = "0.1.0"

__all__ = ["Client", "ClientFunc", "Decorator", "__version__", "new"]
