"""Credential lookup for authorization decorators.

Resolution order, first match wins:
1. Explicitly provided value
2. Environment variable (including values loaded from a .env file)
3. Default value

Values are never logged; only where they came from.
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from http_client_core.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)

MASK = "***"


class CredentialResolver:
    """Resolve tokens, usernames and passwords from several sources.

    Args:
        dotenv_path: .env file to load. ``None`` lets python-dotenv search
            parent directories.
        load_dotenv: Set to False to skip .env loading entirely.

    Example:
        ```python
        resolver = CredentialResolver()
        token = resolver.resolve(env_var_name="API_TOKEN", required=True)
        ```
    """

    def __init__(self, dotenv_path: str | Path | None = None, load_dotenv: bool = True):
        self._dotenv_path = dotenv_path
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        if load_dotenv:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return
        with self._dotenv_lock:
            if self._dotenv_loaded:
                return
            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Return the first credential found, or None.

        Raises:
            CredentialNotFoundError: If ``required`` and nothing was found.
        """
        if value is not None:
            result, source = value, "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result, source = os.environ[env_var_name], f"environment variable '{env_var_name}'"
        else:
            result, source = default, "default value"

        if result is not None:
            logger.debug(f"Resolved credential from {source}: {MASK}")
            return result

        if required:
            message = "Required credential not found"
            if env_var_name:
                message += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(message, env_var_name=env_var_name)
        return None

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a credential from a file, stripped of surrounding whitespace.

        The path comes from ``file_path`` or, failing that, from the
        environment variable ``env_var_name``. ``~`` and ``$VAR`` are
        expanded.

        Raises:
            CredentialFileError: If ``required`` and no path was given or
                the file could not be read.
        """
        path = str(file_path) if file_path is not None else None
        if path is None and env_var_name:
            path = self.resolve(env_var_name=env_var_name)

        if path is None:
            if required:
                message = "No file path provided for credential resolution"
                if env_var_name:
                    message += f" (env var '{env_var_name}' not set)"
                raise CredentialFileError(message)
            return None

        credential_file = Path(os.path.expanduser(os.path.expandvars(path)))
        try:
            content = credential_file.read_text().strip()
        except OSError as e:
            message = f"Cannot read credential file {credential_file}: {e.strerror or e}"
            if required:
                raise CredentialFileError(message) from e
            logger.warning(message)
            return None

        logger.debug(f"Resolved credential from file: {credential_file} ({MASK})")
        return content
