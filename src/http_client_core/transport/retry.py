"""Fault tolerance decorator: retry failed executions with linear backoff.

Backoff grows linearly, not exponentially. With ``backoff=0.5`` and
``attempts=4`` a client that keeps failing is called four times with
0.5s, 1.0s and 1.5s of sleep in between.

| Call | Delay before it |
|------|-----------------|
| 1st  | none            |
| 2nd  | backoff * 1     |
| 3rd  | backoff * 2     |
| nth  | backoff * (n-1) |

## Example

```python
from http_client_core import new
from http_client_core.transport import TransportClient, fault_tolerance, raise_for_status

client = new(
    TransportClient(httpx.HTTPTransport()),
    raise_for_status(),  # turn 5xx into exceptions so they are retried
    fault_tolerance(attempts=3, backoff=1.0),
)
```
"""

import logging
import time
from collections.abc import Callable
from datetime import timedelta

import httpx

from http_client_core.client import Client, ClientFunc, Decorator
from http_client_core.errors import ConfigurationError

logger = logging.getLogger(__name__)


def _backoff_seconds(backoff: float | timedelta) -> float:
    if isinstance(backoff, timedelta):
        return backoff.total_seconds()
    return float(backoff)


def calculate_backoff_delay(backoff: float, retry_number: int) -> float:
    """Delay before retry ``retry_number`` (1-indexed): ``backoff * retry_number``."""
    return backoff * retry_number


def fault_tolerance(
    attempts: int,
    backoff: float | timedelta = 0.0,
    *,
    retry_on: tuple[type[BaseException], ...] = (Exception,),
    sleep: Callable[[float], None] | None = None,
) -> Decorator:
    """Retry the wrapped client until it succeeds or ``attempts`` calls fail.

    A call fails when the wrapped client raises one of ``retry_on``. The
    first successful response is returned as is. When every attempt fails
    the exception from the last attempt is re-raised unchanged. Exceptions
    outside ``retry_on`` propagate immediately.

    The calling thread is blocked while sleeping between attempts.

    Args:
        attempts: Total number of calls allowed, at least 1.
        backoff: Base delay in seconds (or a timedelta); the delay before
            retry ``r`` is ``backoff * r``. The first retry therefore waits
            ``backoff`` rather than retrying immediately, and no delay follows
            the final failed attempt.
        retry_on: Exception types treated as retryable failures.
        sleep: Blocking sleep function, ``time.sleep`` when omitted.

    Returns:
        A decorator applying the retry policy.

    Raises:
        ConfigurationError: If ``attempts`` is below 1 or ``backoff`` is
            negative.
    """
    if attempts < 1:
        raise ConfigurationError(f"attempts must be at least 1, got {attempts}")
    base_delay = _backoff_seconds(backoff)
    if base_delay < 0:
        raise ConfigurationError(f"backoff must not be negative, got {backoff}")

    def decorate(client: Client) -> Client:
        def execute(request: httpx.Request) -> httpx.Response:
            for attempt in range(1, attempts + 1):
                try:
                    return client.execute(request)
                except retry_on as e:
                    if attempt >= attempts:
                        if attempts > 1:
                            logger.error(
                                f"Request {request.method} {request.url} failed with {e!r}, "
                                f"giving up after {attempts} attempts"
                            )
                        raise

                    delay = calculate_backoff_delay(base_delay, attempt)
                    logger.warning(
                        f"Request {request.method} {request.url} failed with {e!r}, "
                        f"retrying in {delay}s (attempt {attempt}/{attempts})"
                    )
                    if delay > 0:
                        (sleep or time.sleep)(delay)
            # attempts >= 1 guarantees the loop returns or raises
            raise AssertionError("unreachable")

        return ClientFunc(execute)

    return decorate
