"""Tests for the httpx-backed transport."""

from __future__ import annotations

from urllib.parse import parse_qs

import httpx
import pytest

from forge_core.client.transport import HttpxTransport, Transport
from forge_core.models import RequestConfig


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _client_from_handler(handler) -> httpx.Client:
    """Create an httpx.Client backed by an httpx.MockTransport."""
    return httpx.Client(transport=httpx.MockTransport(handler))


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


class TestLifecycle:
    def test_is_a_transport(self) -> None:
        assert isinstance(HttpxTransport(), Transport)

    def test_enter_creates_client_and_exit_closes_it(self) -> None:
        transport = HttpxTransport(RequestConfig(timeout=5))
        assert transport._client is None
        with transport:
            inner = transport._client
            assert inner is not None
            assert inner.timeout.connect == 5
        assert transport._client is None
        assert inner.is_closed

    def test_injected_client_is_not_closed(self) -> None:
        client = httpx.Client()
        with HttpxTransport(client=client) as transport:
            assert transport._client is client
        assert not client.is_closed
        client.close()

    def test_close_without_client_is_noop(self) -> None:
        transport = HttpxTransport()
        transport.close()
        assert transport._client is None

    def test_default_timeout(self) -> None:
        with HttpxTransport() as transport:
            assert transport._client.timeout.read == 30.0


# ---------------------------------------------------------------------------
# POST
# ---------------------------------------------------------------------------


class TestPost:
    def test_sends_form_body_and_headers(self) -> None:
        captured: dict[str, httpx.Request] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["request"] = request
            return httpx.Response(200, json={"access_token": "tok"})

        transport = HttpxTransport(client=_client_from_handler(handler))
        response = transport.post(
            "https://auth.example.com/token",
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            data={"client_id": "cid", "scope": "a b"},
        )

        assert response.status_code == 200
        assert response.json() == {"access_token": "tok"}

        request = captured["request"]
        assert request.method == "POST"
        assert str(request.url) == "https://auth.example.com/token"
        assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
        assert parse_qs(request.content.decode()) == {"client_id": ["cid"], "scope": ["a b"]}

    def test_client_error_raises_http_status_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"developerMessage": "Bad request"})

        transport = HttpxTransport(client=_client_from_handler(handler))

        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            transport.post("https://auth.example.com/token", headers={}, data={})

        assert exc_info.value.response.status_code == 400
        assert exc_info.value.response.json() == {"developerMessage": "Bad request"}

    def test_server_error_raises_http_status_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, text="unavailable")

        transport = HttpxTransport(client=_client_from_handler(handler))

        with pytest.raises(httpx.HTTPStatusError):
            transport.post("https://auth.example.com/token", headers={}, data={})

    def test_unfollowed_redirect_raises_http_status_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(302, headers={"Location": "https://elsewhere.example.com/"})

        transport = HttpxTransport(client=_client_from_handler(handler))

        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            transport.post("https://auth.example.com/token", headers={}, data={})

        assert exc_info.value.response.status_code == 302

    def test_network_error_propagates(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        transport = HttpxTransport(client=_client_from_handler(handler))

        with pytest.raises(httpx.ConnectError):
            transport.post("https://auth.example.com/token", headers={}, data={})

    def test_post_outside_context_creates_client_lazily(self) -> None:
        transport = HttpxTransport()
        assert transport._client is None
        client = transport._ensure_client()
        assert transport._client is client
        assert transport._ensure_client() is client
        transport.close()
        assert client.is_closed
