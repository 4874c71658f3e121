"""OAuth2 token exchange against the configured authorization host.

This module provides :class:`TokenFetcher`, which POSTs client
credentials, a grant type, the requested scopes and any extra form
fields to an endpoint on the authorization host and returns the decoded
JSON token response.

Every failure is normalised into one of three errors:

- :class:`~forge_core.exceptions.LogicError` -- no scopes were given.
  Raised before any network call.
- :class:`~forge_core.exceptions.RuntimeError_` with the server's
  ``developerMessage`` -- the endpoint answered with an error response
  whose JSON body carries that field.
- :class:`~forge_core.exceptions.RuntimeError_` with
  :data:`FETCH_FAILED_MESSAGE` -- anything else went wrong. The original
  exception is chained as ``__cause__``.

The fetcher holds no state of its own: no token cache, no retries. Two
identical calls issue two requests.

See Also:
    :class:`forge_core.client.transport.HttpxTransport` for the default
    transport.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

import httpx
from pydantic import ValidationError

from forge_core.auth.base import ConfigurationProvider
from forge_core.client.transport import Transport
from forge_core.exceptions import ErrorKind, LogicError, RuntimeError_
from forge_core.models import TokenRequest, TokenResponse

logger = logging.getLogger(__name__)

GRANT_CLIENT_CREDENTIALS = "client_credentials"
GRANT_AUTHORIZATION_CODE = "authorization_code"
GRANT_REFRESH_TOKEN = "refresh_token"

AUTHENTICATE_PATH = "authentication/v1/authenticate"
"""Token endpoint for two-legged (client credentials) authentication."""

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

NO_SCOPES_MESSAGE = "Cannot fetch token when no scopes where defined"
FETCH_FAILED_MESSAGE = "Failed to fetch token"


class TokenFetcher:
    """Exchange client credentials for an access token.

    Args:
        configuration: Supplies the host and the client credentials.
            Not owned; read on every call.
        transport: Performs the POST. Not owned; never closed here.

    Example::

        with HttpxTransport(config.request) as transport:
            fetcher = TokenFetcher(config, transport)
            token = fetcher.fetch(
                AUTHENTICATE_PATH,
                GRANT_CLIENT_CREDENTIALS,
                ["data:read"],
            )
            token["access_token"]
    """

    def __init__(self, configuration: ConfigurationProvider, transport: Transport) -> None:
        self._configuration = configuration
        self._transport = transport

    def fetch(
        self,
        path: str,
        grant_type: str,
        scopes: Sequence[str],
        additional_params: Optional[Mapping[str, str]] = None,
    ) -> TokenResponse:
        """Request a token from ``host`` + ``path``.

        Args:
            path: Endpoint path relative to the configured host.
            grant_type: OAuth2 ``grant_type`` value.
            scopes: Requested scopes. Must not be empty.
            additional_params: Extra form fields. Merged after the fixed
                fields, so they override ``client_id``, ``scope`` etc. on
                collision.

        Returns:
            The decoded JSON object returned by the endpoint.

        Raises:
            LogicError: If *scopes* is empty or an argument is not a string.
            RuntimeError_: If the request fails for any reason.
        """
        if not scopes:
            raise LogicError(NO_SCOPES_MESSAGE)

        try:
            request = TokenRequest(
                path=path,
                grant_type=grant_type,
                scopes=list(scopes),
                additional_params=dict(additional_params or {}),
            )
        except ValidationError as exc:
            raise LogicError(f"Invalid token request: {exc}") from exc
        return self.fetch_request(request)

    def fetch_request(self, request: TokenRequest) -> TokenResponse:
        """Same as :meth:`fetch`, taking a prepared :class:`~forge_core.models.TokenRequest`."""
        if not request.scopes:
            raise LogicError(NO_SCOPES_MESSAGE)

        url = join_url(self._configuration.get_host(), request.path)
        data = request.form_params(
            self._configuration.get_client_id(),
            self._configuration.get_client_secret(),
        )
        headers = {"Content-Type": FORM_CONTENT_TYPE}

        logger.debug(
            "Fetching token from %s (grant_type=%s, scope=%s)",
            url, request.grant_type, request.scope,
        )

        try:
            response = self._transport.post(url, headers=headers, data=data)
        except httpx.HTTPStatusError as exc:
            raise _status_error(exc) from exc
        except Exception as exc:
            logger.warning("Token request to %s failed: %s", url, exc)
            raise RuntimeError_(FETCH_FAILED_MESSAGE) from exc

        try:
            body = response.json()
        except ValueError as exc:
            logger.warning("Token response from %s is not valid JSON", url)
            raise RuntimeError_(FETCH_FAILED_MESSAGE) from exc

        if not isinstance(body, dict):
            logger.warning("Token response from %s is not a JSON object", url)
            raise RuntimeError_(FETCH_FAILED_MESSAGE)

        return body


def join_url(host: str, path: str) -> str:
    """Join *host* and *path* with exactly one ``/`` between them.

    ``join_url("www.test.com/", "/somepage.php")`` and
    ``join_url("www.test.com", "somepage.php")`` both give
    ``"www.test.com/somepage.php"``. An empty *path* returns *host* as is.
    """
    if not path:
        return host
    return f"{host.rstrip('/')}/{path.lstrip('/')}"


def _status_error(exc: httpx.HTTPStatusError) -> RuntimeError_:
    """Map an HTTP error response to a :class:`RuntimeError_`."""
    status = exc.response.status_code
    message = _developer_message(exc.response)
    if message is None:
        logger.warning("Token request failed with HTTP %s", status)
        return RuntimeError_(FETCH_FAILED_MESSAGE, status_code=status)

    logger.warning("Token request failed with HTTP %s: %s", status, message)
    return RuntimeError_(message, kind=ErrorKind.SERVER_DIAGNOSTIC, status_code=status)


def _developer_message(response: httpx.Response) -> Optional[str]:
    """Return the ``developerMessage`` of a JSON error body, or ``None``."""
    try:
        body: Any = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    message = body.get("developerMessage")
    if isinstance(message, str) and message:
        return message
    return None
