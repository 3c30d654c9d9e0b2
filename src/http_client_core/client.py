"""Client contract, function adapter and decorator composition.

Everything in this library is built from three pieces:

- ``Client``: anything with ``execute(request) -> response``. Success is a
  returned ``httpx.Response``; failure is a raised exception.
- ``ClientFunc``: adapts a plain function (or closure) to ``Client``.
- ``Decorator``: a function ``Client -> Client`` that layers behaviour.

``new`` applies decorators to a root client in list order. Each decorator
wraps everything built before it, so the LAST decorator is the outermost
layer and runs first on a call:

Example:
    ```python
    from http_client_core import new
    from http_client_core.auth import bearer_authorization
    from http_client_core.transport import TransportClient, fault_tolerance

    client = new(
        TransportClient(httpx.HTTPTransport()),
        bearer_authorization("s3cr3t"),  # innermost, runs on every attempt
        fault_tolerance(3, backoff=0.5),  # outermost, runs first
    )
    response = client.execute(httpx.Request("GET", "https://api.example.com"))
    ```
"""

import logging
from collections.abc import Callable
from typing import Protocol, TypeAlias, runtime_checkable

import httpx

from http_client_core.errors import ConfigurationError

logger = logging.getLogger(__name__)


@runtime_checkable
class Client(Protocol):
    """Executes an HTTP request and returns its response or raises."""

    def execute(self, request: httpx.Request) -> httpx.Response: ...


class ClientFunc:
    """Adapter that lets a plain callable act as a Client.

    Args:
        func: Callable taking an ``httpx.Request`` and returning an
            ``httpx.Response``.

    Example:
        ```python
        echo = ClientFunc(lambda request: httpx.Response(200, request=request))
        echo.execute(httpx.Request("GET", "https://example.com"))
        ```
    """

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[httpx.Request], httpx.Response]) -> None:
        if not callable(func):
            raise ConfigurationError(f"ClientFunc needs a callable, got {type(func).__name__}")
        self._func = func

    def execute(self, request: httpx.Request) -> httpx.Response:
        return self._func(request)

    __call__ = execute

    def __repr__(self) -> str:
        name = getattr(self._func, "__qualname__", repr(self._func))
        return f"ClientFunc({name})"


Decorator: TypeAlias = Callable[[Client], Client]


def new(root: Client, *decorators: Decorator) -> Client:
    """Build a client from ``root`` wrapped by every decorator, in order.

    The first decorator wraps ``root`` directly and the last one ends up
    outermost, so on ``execute`` the last decorator runs first. With no
    decorators ``root`` itself is returned. Neither ``root`` nor any
    intermediate client is modified.

    Args:
        root: Client performing the actual request.
        *decorators: Decorators applied left to right.

    Returns:
        The composed client.
    """
    decorated = root
    for decorate in decorators:
        decorated = decorate(decorated)
    if decorators:
        logger.debug(f"Composed {len(decorators)} decorator(s) around {root!r}")
    return decorated
