"""Tests for authorization decorators."""

import base64

import pytest

from http_client_core import new
from http_client_core.auth import (
    CredentialNotFoundError,
    CredentialResolver,
    authorization,
    basic_authorization,
    basic_authorization_from_env,
    bearer_authorization,
    credential_authorization,
    encode_basic_credentials,
)
from http_client_core.testing import RecordingClient


def sent_authorization(decorator, request_factory) -> list[str]:
    root = RecordingClient()
    new(root, decorator).execute(request_factory())
    return root.requests[0].headers.get_list("Authorization")


class TestAuthorization:
    """Token-based authorization headers."""

    @pytest.mark.unit
    def test_token_sent_verbatim(self, request_factory):
        assert sent_authorization(authorization("Token abc"), request_factory) == ["Token abc"]

    @pytest.mark.unit
    def test_bearer_prefix(self, request_factory):
        assert sent_authorization(bearer_authorization("abc"), request_factory) == ["Bearer abc"]

    @pytest.mark.unit
    def test_basic_user_pass(self, request_factory):
        """The canonical user/pass example encodes to dXNlcjpwYXNz."""
        assert sent_authorization(basic_authorization("user", "pass"), request_factory) == ["Basic dXNlcjpwYXNz"]

    @pytest.mark.unit
    def test_basic_does_not_escape_colons(self):
        encoded = encode_basic_credentials("us:er", "p:ss")

        assert base64.b64decode(encoded).decode() == "us:er:p:ss"

    @pytest.mark.unit
    def test_basic_encodes_utf8(self):
        encoded = encode_basic_credentials("jürgen", "pässword")

        assert base64.b64decode(encoded).decode("utf-8") == "jürgen:pässword"

    @pytest.mark.unit
    def test_appends_to_existing_authorization(self, request_factory):
        """Authorization goes through header injection, so it appends."""
        root = RecordingClient()
        new(root, authorization("first"), authorization("second")).execute(request_factory())

        assert root.requests[0].headers.get_list("Authorization") == ["second", "first"]


class TestCredentialAuthorization:
    """Authorization built from resolved credentials."""

    @pytest.mark.unit
    def test_token_from_environment(self, monkeypatch, request_factory):
        monkeypatch.setenv("API_TOKEN", "env-token")
        decorator = credential_authorization(
            env_var_name="API_TOKEN", resolver=CredentialResolver(load_dotenv=False)
        )

        assert sent_authorization(decorator, request_factory) == ["Bearer env-token"]

    @pytest.mark.unit
    def test_explicit_token_wins(self, monkeypatch, request_factory):
        monkeypatch.setenv("API_TOKEN", "env-token")
        decorator = credential_authorization(
            token="explicit", env_var_name="API_TOKEN", resolver=CredentialResolver(load_dotenv=False)
        )

        assert sent_authorization(decorator, request_factory) == ["Bearer explicit"]

    @pytest.mark.unit
    def test_custom_scheme_and_no_scheme(self, request_factory):
        resolver = CredentialResolver(load_dotenv=False)

        assert sent_authorization(
            credential_authorization(token="k", scheme="Token", resolver=resolver), request_factory
        ) == ["Token k"]
        assert sent_authorization(
            credential_authorization(token="k", scheme=None, resolver=resolver), request_factory
        ) == ["k"]

    @pytest.mark.unit
    def test_missing_token_raises_at_construction(self):
        with pytest.raises(CredentialNotFoundError) as exc_info:
            credential_authorization(env_var_name="API_TOKEN", resolver=CredentialResolver(load_dotenv=False))

        assert exc_info.value.env_var_name == "API_TOKEN"

    @pytest.mark.unit
    def test_token_from_dotenv_file(self, tmp_path, request_factory):
        import os

        dotenv_file = tmp_path / ".env"
        dotenv_file.write_text("TEST_DOTENV_TOKEN=from-dotenv\n")

        try:
            decorator = credential_authorization(
                env_var_name="TEST_DOTENV_TOKEN", resolver=CredentialResolver(dotenv_path=dotenv_file)
            )
            assert sent_authorization(decorator, request_factory) == ["Bearer from-dotenv"]
        finally:
            os.environ.pop("TEST_DOTENV_TOKEN", None)

    @pytest.mark.unit
    def test_basic_from_env(self, monkeypatch, request_factory):
        monkeypatch.setenv("API_USER", "user")
        monkeypatch.setenv("API_PASS", "pass")
        decorator = basic_authorization_from_env(
            "API_USER", "API_PASS", resolver=CredentialResolver(load_dotenv=False)
        )

        assert sent_authorization(decorator, request_factory) == ["Basic dXNlcjpwYXNz"]

    @pytest.mark.unit
    def test_basic_from_env_missing_password(self, monkeypatch):
        monkeypatch.setenv("API_USER", "user")

        with pytest.raises(CredentialNotFoundError) as exc_info:
            basic_authorization_from_env("API_USER", "API_PASS", resolver=CredentialResolver(load_dotenv=False))

        assert exc_info.value.env_var_name == "API_PASS"
