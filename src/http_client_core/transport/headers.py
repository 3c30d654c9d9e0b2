"""Header injection decorator."""

import httpx

from http_client_core.client import Client, ClientFunc, Decorator


def append_header(request: httpx.Request, key: str, value: str) -> None:
    """Append ``key: value`` to ``request`` in place, keeping existing values.

    ``httpx.Headers.__setitem__`` replaces every value for a key, so the
    header list is rebuilt with the new pair at the end instead. The request
    gets a new ``httpx.Headers`` object; a reference to the previous one does
    not see the appended value.
    """
    headers = request.headers
    request.headers = httpx.Headers([*headers.multi_items(), (key, value)], encoding=headers.encoding)


def header(key: str, value: str) -> Decorator:
    """Add ``key: value`` to every request before delegating.

    The pair is appended, never replacing earlier values for the same key.
    The caller's request object is mutated, so executing the same request
    twice through this decorator carries the value twice.

    Args:
        key: Header name.
        value: Header value.

    Returns:
        A decorator injecting the header.
    """

    def decorate(client: Client) -> Client:
        def execute(request: httpx.Request) -> httpx.Response:
            append_header(request, key, value)
            return client.execute(request)

        return ClientFunc(execute)

    return decorate
