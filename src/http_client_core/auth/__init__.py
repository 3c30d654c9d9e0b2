"""Authorization decorators and credential resolution.

Example:
    ```python
    from http_client_core.auth import basic_authorization, credential_authorization

    client = new(root, credential_authorization(env_var_name="API_TOKEN"))
    ```
"""

from http_client_core.auth.credentials import CredentialResolver
from http_client_core.auth.decorators import (
    authorization,
    basic_authorization,
    basic_authorization_from_env,
    bearer_authorization,
    credential_authorization,
    encode_basic_credentials,
)
from http_client_core.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)

__all__ = [
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "authorization",
    "basic_authorization",
    "basic_authorization_from_env",
    "bearer_authorization",
    "credential_authorization",
    "encode_basic_credentials",
]
