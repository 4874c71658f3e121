"""HTTP transport used to reach the authorization host.

This module provides two types:

- :class:`Transport` -- the capability interface the token fetcher depends
  on: a single form-encoded POST that either returns a successful
  response or raises.
- :class:`HttpxTransport` -- the default implementation, backed by
  :class:`httpx.Client`.

Failures are reported with httpx's own exception types so callers can
tell the two shapes apart:

- :class:`httpx.HTTPStatusError` -- the server answered with a non-2xx
  status. The exception carries the :class:`httpx.Response`.
- any other :class:`httpx.HTTPError` -- the exchange itself failed
  (connection refused, timeout, protocol error).

Retries, backoff and TLS settings are deliberately absent; host
applications that need them configure their own :class:`httpx.Client`
and pass it in.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

import httpx

from forge_core.models import RequestConfig

logger = logging.getLogger(__name__)


class Transport(ABC):
    """Issues form-encoded POST requests.

    Implementations must raise :class:`httpx.HTTPStatusError` for error
    responses and may raise any other exception for transport failures.
    """

    @abstractmethod
    def post(
        self,
        url: str,
        headers: dict[str, str],
        data: dict[str, str],
    ) -> httpx.Response:
        """POST *data* form-encoded to *url* and return the successful response.

        Args:
            url: Absolute URL to post to.
            headers: Request headers.
            data: Form fields, sent as ``application/x-www-form-urlencoded``.

        Returns:
            The :class:`httpx.Response` for a 2xx answer.

        Raises:
            httpx.HTTPStatusError: If the server answered with anything but
                2xx. Unfollowed 3xx redirects count as errors.
        """
        ...


class HttpxTransport(Transport):
    """:class:`Transport` backed by :class:`httpx.Client`.

    Can be used as a context manager, in which case the underlying client
    is opened on entry and closed on exit. When :meth:`post` is called
    outside a ``with`` block the client is created lazily and stays open
    until :meth:`close`.

    Args:
        request_config: Timeout settings for the underlying client.
        client: An existing :class:`httpx.Client` to reuse. A client
            passed in is not owned and is never closed by this transport.

    Example::

        with HttpxTransport(config.request) as transport:
            fetcher = TokenFetcher(config, transport)
            token = fetcher.fetch("authentication/v1/authenticate", ...)
    """

    def __init__(
        self,
        request_config: Optional[RequestConfig] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._request_config = request_config or RequestConfig()
        self._client = client
        self._owns_client = client is None

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> HttpxTransport:
        self._ensure_client()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    # ------------------------------------------------------------------ #
    # Transport
    # ------------------------------------------------------------------ #

    def post(
        self,
        url: str,
        headers: dict[str, str],
        data: dict[str, str],
    ) -> httpx.Response:
        client = self._ensure_client()
        logger.debug("POST %s", url)
        response = client.post(url, headers=headers, data=data)
        logger.debug("POST %s -> HTTP %s", url, response.status_code)
        response.raise_for_status()
        return response

    def _ensure_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(timeout=self._request_config.timeout)
            self._owns_client = True
        return self._client
