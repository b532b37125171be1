"""Tests del cliente de existencia remota.

Remote existence client tests — 2xx means present, 404 means absent and
everything else (other statuses, network errors) is a 503 for the caller.
"""

import httpx
import pytest

from storefront.clients.existence import ExistenceClient
from storefront.utils.exceptions import UpstreamServiceError


def _client(handler) -> ExistenceClient:
    return ExistenceClient(
        "http://users.test",
        "/api/users/{id}",
        "usuarios",
        transport=httpx.MockTransport(handler),
    )


class TestExistenceClient:
    """Traducción de respuestas remotas."""

    async def test_success_means_exists(self):
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, json={"success": True})

        assert await _client(handler).exists(7) is True
        assert seen == ["http://users.test/api/users/7"]

    async def test_not_found_means_absent(self):
        client = _client(lambda request: httpx.Response(404, json={"success": False}))
        assert await client.exists(7) is False

    async def test_server_error_is_upstream_failure(self):
        client = _client(lambda request: httpx.Response(500))
        with pytest.raises(UpstreamServiceError) as exc_info:
            await client.exists(7)
        assert exc_info.value.status_code == 503
        assert "usuarios" in exc_info.value.detail

    async def test_bad_request_is_upstream_failure(self):
        """Un 400 remoto no confirma ni descarta la entidad."""
        client = _client(lambda request: httpx.Response(400))
        with pytest.raises(UpstreamServiceError):
            await client.exists(7)

    async def test_connection_error_is_upstream_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        with pytest.raises(UpstreamServiceError) as exc_info:
            await _client(handler).exists(7)
        assert "ConnectError" in exc_info.value.detail

    async def test_timeout_is_upstream_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(UpstreamServiceError):
            await _client(handler).exists(7)
