"""Status code to exception mapping."""

import httpx

from http_client_core.errors.exceptions import (
    ClientStatusError,
    RateLimitedError,
    ResponseStatusError,
    ServerStatusError,
)


def _parse_retry_after(response: httpx.Response) -> int | None:
    value = response.headers.get("retry-after")
    if value is None:
        return None
    try:
        seconds = int(value)
    except ValueError:
        # HTTP-date form is left to the caller
        return None
    return seconds if seconds >= 0 else None


def raise_for_status(response: httpx.Response, request: httpx.Request | None = None) -> None:
    """Raise the matching ResponseStatusError for a 4xx/5xx response.

    Args:
        response: Response returned by a client.
        request: The request that produced it. Transports do not attach the
            request to the response, so decorators pass it explicitly.

    Raises:
        RateLimitedError: For 429, with ``retry_after`` parsed from the
            ``Retry-After`` header when it holds delay-seconds.
        ClientStatusError: For other 4xx codes.
        ServerStatusError: For 5xx codes.
    """
    status_code = response.status_code
    if status_code < 400:
        return

    target = f" for {request.method} {request.url}" if request is not None else ""
    message = f"HTTP {status_code}{target}"

    if status_code == 429:
        raise RateLimitedError(
            message,
            retry_after=_parse_retry_after(response),
            status_code=status_code,
            request=request,
            response=response,
        )

    if status_code < 500:
        exc_class: type[ResponseStatusError] = ClientStatusError
    elif status_code < 600:
        exc_class = ServerStatusError
    else:
        exc_class = ResponseStatusError

    raise exc_class(message, status_code=status_code, request=request, response=response)
