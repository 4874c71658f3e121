"""Capability interface for configuration providers.

:class:`~forge_core.auth.token_fetcher.TokenFetcher` needs three values
from its configuration: the authorization host and the client
credentials. :class:`ConfigurationProvider` names exactly that capability
so tests and host applications can substitute their own source without
depending on :class:`~forge_core.models.Configuration`.

Any object exposing ``get_host``, ``get_client_id`` and
``get_client_secret`` is treated as a provider by ``isinstance`` checks,
in the same way :mod:`collections.abc` recognises containers.

See Also:
    :class:`forge_core.client.transport.Transport` for the HTTP side.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

_REQUIRED_METHODS = ("get_host", "get_client_id", "get_client_secret")


class ConfigurationProvider(ABC):
    """Supplies the authorization host and client credentials."""

    @abstractmethod
    def get_host(self) -> str:
        """Return the authorization base URL (e.g. ``https://developer.api.autodesk.com``)."""
        ...

    @abstractmethod
    def get_client_id(self) -> str:
        """Return the OAuth client id."""
        ...

    @abstractmethod
    def get_client_secret(self) -> str:
        """Return the OAuth client secret."""
        ...

    @classmethod
    def __subclasshook__(cls, subclass: type) -> bool:
        if cls is ConfigurationProvider:
            if all(
                callable(getattr(subclass, name, None)) for name in _REQUIRED_METHODS
            ):
                return True
        return NotImplemented
