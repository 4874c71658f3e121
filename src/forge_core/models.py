"""Canonical Pydantic models shared across forge-core modules.

The models fall into two groups:

**Configuration models** -- loaded from a JSON file and the environment by
:func:`~forge_core.config.load_configuration`:
    :class:`RequestConfig` and :class:`Configuration`.

**Token exchange models** -- built per call by
:class:`~forge_core.auth.token_fetcher.TokenFetcher`:
    :class:`TokenRequest` and the :data:`TokenResponse` alias.

All models use Pydantic v2.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

DEFAULT_HOST = "https://developer.api.autodesk.com"
"""Authorization host used when no other value is configured."""

TokenResponse = dict[str, Any]
"""Decoded JSON object returned by the authorization endpoint, unmodified."""


# --- Configuration ---


class RequestConfig(BaseModel):
    """HTTP settings applied to the transport that talks to the authorization host."""

    timeout: float = Field(default=30.0, description="Request timeout in seconds")


class Configuration(BaseModel):
    """Authorization host and client credentials.

    Satisfies the :class:`~forge_core.auth.base.ConfigurationProvider`
    interface through its ``get_*`` accessors. The client secret is kept
    out of ``repr()`` so configurations can be logged safely.

    Example::

        Configuration(
            host="https://developer.api.autodesk.com",
            client_id="abc",
            client_secret="xyz",
        )
    """

    host: str = Field(default=DEFAULT_HOST, description="Authorization base URL")
    client_id: str = Field(default="", description="OAuth client id")
    client_secret: str = Field(default="", repr=False, description="OAuth client secret")
    request: RequestConfig = Field(default_factory=RequestConfig)

    def get_host(self) -> str:
        return self.host

    def get_client_id(self) -> str:
        return self.client_id

    def get_client_secret(self) -> str:
        return self.client_secret


# --- Token exchange ---


class TokenRequest(BaseModel):
    """A single token exchange, built fresh for every fetch.

    ``scopes`` is not validated here; an empty list is rejected by
    :meth:`~forge_core.auth.token_fetcher.TokenFetcher.fetch` before any
    network call.
    """

    path: str
    grant_type: str
    scopes: list[str] = Field(default_factory=list)
    additional_params: dict[str, str] = Field(default_factory=dict)

    @property
    def scope(self) -> str:
        """Scopes joined by a single space, as sent on the wire."""
        return " ".join(self.scopes)

    def form_params(self, client_id: str, client_secret: str) -> dict[str, str]:
        """Build the form-encoded body for this request.

        Additional parameters are merged after the fixed fields, so a
        colliding key in ``additional_params`` wins.
        """
        params = {
            "client_id": client_id,
            "client_secret": client_secret,
            "grant_type": self.grant_type,
            "scope": self.scope,
        }
        params.update(self.additional_params)
        return params
