"""Tests for forge_core.models and the error hierarchy."""

from __future__ import annotations

import pytest

from forge_core.auth.base import ConfigurationProvider
from forge_core.exceptions import (
    ConfigError,
    ErrorKind,
    ForgeError,
    InvalidUsageError,
    LogicError,
    RuntimeError_,
)
from forge_core.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_TOKEN_FAILURE,
)
from forge_core.models import DEFAULT_HOST, Configuration, TokenRequest


class TestConfiguration:
    def test_defaults(self) -> None:
        config = Configuration()
        assert config.get_host() == DEFAULT_HOST
        assert config.get_client_id() == ""
        assert config.request.timeout == 30.0

    def test_satisfies_provider_interface(self) -> None:
        assert isinstance(Configuration(), ConfigurationProvider)

    def test_duck_typed_provider(self) -> None:
        class EnvProvider:
            def get_host(self) -> str:
                return "h"

            def get_client_id(self) -> str:
                return "i"

            def get_client_secret(self) -> str:
                return "s"

        assert isinstance(EnvProvider(), ConfigurationProvider)

    def test_incomplete_object_is_not_provider(self) -> None:
        class HostOnly:
            def get_host(self) -> str:
                return "h"

        assert not isinstance(HostOnly(), ConfigurationProvider)


class TestTokenRequest:
    def test_scope_joined(self) -> None:
        request = TokenRequest(path="p", grant_type="g", scopes=["a", "b"])
        assert request.scope == "a b"

    def test_form_params_order_and_merge(self) -> None:
        request = TokenRequest(
            path="p",
            grant_type="client_credentials",
            scopes=["data:read"],
            additional_params={"audience": "viewer", "grant_type": "override"},
        )

        params = request.form_params("cid", "secret")

        assert list(params) == ["client_id", "client_secret", "grant_type", "scope", "audience"]
        assert params["grant_type"] == "override"
        assert params["audience"] == "viewer"


class TestErrorHierarchy:
    @pytest.mark.parametrize(
        ("exc", "exit_code"),
        [
            (LogicError("x"), EXIT_INVALID_USAGE),
            (InvalidUsageError("x"), EXIT_INVALID_USAGE),
            (RuntimeError_("x"), EXIT_TOKEN_FAILURE),
            (ConfigError("x"), EXIT_GENERIC_FAILURE),
            (ForgeError("x"), EXIT_GENERIC_FAILURE),
        ],
    )
    def test_exit_codes(self, exc: ForgeError, exit_code: int) -> None:
        assert exc.exit_code == exit_code
        assert isinstance(exc, ForgeError)

    def test_exit_code_override(self) -> None:
        assert ForgeError("x", exit_code=42).exit_code == 42

    def test_runtime_error_fields(self) -> None:
        exc = RuntimeError_("Bad scope", kind=ErrorKind.SERVER_DIAGNOSTIC, status_code=400)
        assert str(exc) == "Bad scope"
        assert exc.message == "Bad scope"
        assert exc.kind == ErrorKind.SERVER_DIAGNOSTIC
        assert exc.status_code == 400
        assert isinstance(exc, RuntimeError)

    def test_runtime_error_defaults_to_transport(self) -> None:
        exc = RuntimeError_("Failed to fetch token")
        assert exc.kind == ErrorKind.TRANSPORT
        assert exc.status_code is None
