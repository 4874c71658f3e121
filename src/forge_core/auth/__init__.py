"""OAuth2 token acquisition for forge-core.

The main entry points are:

- :class:`ConfigurationProvider` -- capability interface for the host and
  client credentials.
- :class:`TokenFetcher` -- exchanges client credentials for a token and
  normalises failures into :mod:`forge_core.exceptions` errors.

Typical usage::

    from forge_core.auth import AUTHENTICATE_PATH, GRANT_CLIENT_CREDENTIALS, TokenFetcher

    fetcher = TokenFetcher(configuration, transport)
    token = fetcher.fetch(AUTHENTICATE_PATH, GRANT_CLIENT_CREDENTIALS, ["data:read"])
"""

from forge_core.auth.base import ConfigurationProvider
from forge_core.auth.token_fetcher import (
    AUTHENTICATE_PATH,
    GRANT_AUTHORIZATION_CODE,
    GRANT_CLIENT_CREDENTIALS,
    GRANT_REFRESH_TOKEN,
    TokenFetcher,
)

__all__ = [
    "AUTHENTICATE_PATH",
    "ConfigurationProvider",
    "GRANT_AUTHORIZATION_CODE",
    "GRANT_CLIENT_CREDENTIALS",
    "GRANT_REFRESH_TOKEN",
    "TokenFetcher",
]
