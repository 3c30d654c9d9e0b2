"""Authorization header decorators.

``authorization`` sends its token verbatim; ``basic_authorization`` and
``bearer_authorization`` build the usual scheme prefixes on top of it. The
``*_from_env`` variants look credentials up once, when the decorator is
built, through ``CredentialResolver``.

Example:
    ```python
    client = new(root, basic_authorization("user", "pass"))
    # every request now carries "Authorization: Basic dXNlcjpwYXNz"
    ```
"""

import base64

from http_client_core.auth.credentials import CredentialResolver
from http_client_core.client import Decorator
from http_client_core.transport.headers import header

AUTHORIZATION = "Authorization"


def encode_basic_credentials(username: str, password: str) -> str:
    """Base64 of ``username:password``; colons are not escaped."""
    return base64.b64encode(f"{username}:{password}".encode()).decode("ascii")


def authorization(token: str) -> Decorator:
    """Inject ``Authorization: <token>`` into every request."""
    return header(AUTHORIZATION, token)


def basic_authorization(username: str, password: str) -> Decorator:
    """Inject ``Authorization: Basic <base64(username:password)>``."""
    return authorization("Basic " + encode_basic_credentials(username, password))


def bearer_authorization(token: str) -> Decorator:
    """Inject ``Authorization: Bearer <token>``."""
    return authorization("Bearer " + token)


def credential_authorization(
    *,
    token: str | None = None,
    env_var_name: str | None = None,
    scheme: str | None = "Bearer",
    resolver: CredentialResolver | None = None,
) -> Decorator:
    """Authorization decorator for a token resolved from value or environment.

    Args:
        token: Explicit token; wins over the environment.
        env_var_name: Environment variable holding the token.
        scheme: Prefix such as ``"Bearer"``; ``None`` sends the token as is.
        resolver: Resolver to use; a default one (loading .env) otherwise.

    Raises:
        CredentialNotFoundError: If no token can be resolved.
    """
    resolver = resolver or CredentialResolver()
    resolved = resolver.resolve(value=token, env_var_name=env_var_name, required=True)
    if scheme is None:
        return authorization(resolved)
    return authorization(f"{scheme} {resolved}")


def basic_authorization_from_env(
    username_env_var: str,
    password_env_var: str,
    *,
    resolver: CredentialResolver | None = None,
) -> Decorator:
    """Basic authorization with username and password read from the environment.

    Raises:
        CredentialNotFoundError: If either variable is unset.
    """
    resolver = resolver or CredentialResolver()
    username = resolver.resolve(env_var_name=username_env_var, required=True)
    password = resolver.resolve(env_var_name=password_env_var, required=True)
    return basic_authorization(username, password)
