# -*- coding: utf-8 -*-
"""
Tests for the aiohttp transport and its session manager.
"""

import asyncio
import pytest
import aiohttp
import pytest_asyncio
from unittest.mock import AsyncMock, Mock, patch

from bpx_client.errors import TransportFailure
from bpx_client.models.config import ConnectionConfig, RetryConfig
from bpx_client.session_manager import SessionManager
from bpx_client.transport import AiohttpTransport, TransportResponse

URL = "https://api.example.com/api/v1/markets"


def mock_http_response(status: int = 200, body: bytes = b"[]") -> Mock:
    response = Mock()
    response.status = status
    response.read = AsyncMock(return_value=body)
    return response


@pytest.fixture
def config() -> ConnectionConfig:
    return ConnectionConfig(base_url="https://api.example.com", timeout=5, api_key="test-key")


@pytest.fixture
def retry_config() -> RetryConfig:
    return RetryConfig(max_retries=2, retry_delay=0.5, backoff_factor=2.0)


@pytest_asyncio.fixture
async def transport(config, retry_config):
    transport = AiohttpTransport(config, retry_config)
    yield transport
    await transport.close()


class TestSessionManager:
    """Test session lifecycle."""

    @pytest.mark.asyncio
    async def test_default_headers(self, config):
        manager = SessionManager(config)
        session = await manager.create_session()
        try:
            assert session.headers["X-API-Key"] == "test-key"
            assert session.headers["Accept"] == "application/json"
            assert session.headers["User-Agent"].startswith("bpx-client/")
            assert session.timeout.total == 5
        finally:
            await manager.close_session()

    @pytest.mark.asyncio
    async def test_no_api_key_header_without_key(self):
        manager = SessionManager(ConnectionConfig(base_url="https://api.example.com"))
        session = await manager.create_session()
        try:
            assert "X-API-Key" not in session.headers
        finally:
            await manager.close_session()

    @pytest.mark.asyncio
    async def test_session_reused_until_closed(self, config):
        manager = SessionManager(config)
        first = await manager.create_session()
        assert await manager.create_session() is first

        await manager.close_session()
        assert first.closed
        assert manager.session is None

        second = await manager.create_session()
        assert second is not first
        await manager.close_session()


class TestSend:
    """Test request execution."""

    @pytest.mark.asyncio
    async def test_success(self, transport):
        with patch('aiohttp.ClientSession.request') as mock_request:
            mock_request.return_value.__aenter__.return_value = mock_http_response(200, b'[{"a": 1}]')

            result = await transport.send("get", URL)

            assert result == TransportResponse(status=200, body=b'[{"a": 1}]')
            mock_request.assert_called_once_with("GET", URL, data=None, headers={})

    @pytest.mark.asyncio
    async def test_client_error_status_returned_without_retry(self, transport):
        with patch('aiohttp.ClientSession.request') as mock_request:
            mock_request.return_value.__aenter__.return_value = mock_http_response(400, b'{"code":"X"}')

            result = await transport.send("GET", URL)

            assert result.status == 400
            assert mock_request.call_count == 1

    @pytest.mark.asyncio
    async def test_signer_headers_added(self, config):
        signer = Mock(return_value={"X-Signature": "sig", "X-Timestamp": "1"})
        transport = AiohttpTransport(config, signer=signer)

        with patch('aiohttp.ClientSession.request') as mock_request:
            mock_request.return_value.__aenter__.return_value = mock_http_response(200, b"")

            await transport.send("PATCH", URL, b'{"autoLend":true}')

            signer.assert_called_once_with("PATCH", URL, b'{"autoLend":true}')
            mock_request.assert_called_once_with(
                "PATCH", URL, data=b'{"autoLend":true}',
                headers={"X-Signature": "sig", "X-Timestamp": "1"},
            )
        await transport.close()


class TestRetry:
    """Test retry and backoff behavior."""

    @pytest.mark.asyncio
    async def test_retry_on_server_error_then_success(self, transport):
        with patch('aiohttp.ClientSession.request') as mock_request, \
                patch('asyncio.sleep', new_callable=AsyncMock) as mock_sleep:
            mock_request.return_value.__aenter__.side_effect = [
                mock_http_response(503, b"unavailable"),
                mock_http_response(502, b"bad gateway"),
                mock_http_response(200, b"[]"),
            ]

            result = await transport.send("GET", URL)

            assert result.status == 200
            assert mock_request.call_count == 3
            assert [c.args[0] for c in mock_sleep.await_args_list] == [0.5, 1.0]

    @pytest.mark.asyncio
    async def test_exhausted_retry_status_returns_last_response(self, transport):
        with patch('aiohttp.ClientSession.request') as mock_request, \
                patch('asyncio.sleep', new_callable=AsyncMock):
            mock_request.return_value.__aenter__.return_value = mock_http_response(500, b"boom")

            result = await transport.send("GET", URL)

            assert result == TransportResponse(status=500, body=b"boom")
            assert mock_request.call_count == 3

    @pytest.mark.asyncio
    async def test_connection_errors_exhausted(self, transport):
        with patch('aiohttp.ClientSession.request') as mock_request, \
                patch('asyncio.sleep', new_callable=AsyncMock):
            mock_request.side_effect = aiohttp.ClientConnectionError("connection reset")

            with pytest.raises(TransportFailure) as exc_info:
                await transport.send("GET", URL)

            assert exc_info.value.method == "GET"
            assert exc_info.value.url == URL
            assert isinstance(exc_info.value.__cause__, aiohttp.ClientConnectionError)
            assert mock_request.call_count == 3

    @pytest.mark.asyncio
    async def test_timeout_then_success(self, transport):
        with patch('aiohttp.ClientSession.request') as mock_request, \
                patch('asyncio.sleep', new_callable=AsyncMock):
            mock_request.return_value.__aenter__.side_effect = [
                asyncio.TimeoutError(),
                mock_http_response(200, b"{}"),
            ]

            result = await transport.send("GET", URL)

            assert result.status == 200

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["POST", "PATCH"])
    async def test_non_idempotent_methods_not_retried(self, transport, method):
        with patch('aiohttp.ClientSession.request') as mock_request:
            mock_request.side_effect = aiohttp.ClientConnectionError("connection reset")

            with pytest.raises(TransportFailure):
                await transport.send(method, URL, b"{}")

            assert mock_request.call_count == 1

    @pytest.mark.asyncio
    async def test_server_error_on_post_returned_once(self, transport):
        with patch('aiohttp.ClientSession.request') as mock_request:
            mock_request.return_value.__aenter__.return_value = mock_http_response(503, b"")

            result = await transport.send("POST", URL, b"{}")

            assert result.status == 503
            assert mock_request.call_count == 1
