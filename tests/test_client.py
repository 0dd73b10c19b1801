"""Tests for the Observatory API client."""

import asyncio
import json

import httpx
import pytest
import respx
from httpx import Response

from safepi.client import API_URL, USER_AGENT, ObservatoryClient
from safepi.exceptions import (
    InvalidResponseError,
    RequestTimeoutError,
    ResponseTooLargeError,
    TransportError,
)


class TestObservatoryClient:
    """Test ObservatoryClient functionality."""

    @respx.mock
    async def test_scan_posts_flags_and_host(self, sample_payload):
        """Test the request shape and the decoded response."""
        route = respx.post(API_URL, params={"host": "example.com"}).mock(
            return_value=Response(200, json=sample_payload)
        )

        async with ObservatoryClient() as client:
            response = await client.scan("example.com", hidden=False, rescan=True)

        assert route.called
        request = route.calls.last.request
        assert json.loads(request.content) == {"hidden": False, "rescan": True}
        assert request.headers["user-agent"] == USER_AGENT
        assert request.headers["content-type"] == "application/json"
        assert response.status_code == 200
        assert response.data["score"] == 105

    @respx.mock
    async def test_non_200_is_returned(self):
        """Test that HTTP errors are returned for the caller to classify."""
        respx.post(API_URL).mock(return_value=Response(429, json={"error": "rate-limited"}))

        async with ObservatoryClient() as client:
            response = await client.scan("example.com")

        assert response.status_code == 429
        assert response.data == {"error": "rate-limited"}

    @respx.mock
    async def test_invalid_json(self):
        """Test that a malformed body fails with a descriptive error."""
        respx.post(API_URL).mock(return_value=Response(200, text="<html>oops</html>"))

        async with ObservatoryClient() as client:
            with pytest.raises(InvalidResponseError, match="Invalid JSON response"):
                await client.scan("example.com")

    @respx.mock
    async def test_oversize_response(self):
        """Test that responses over the cap are rejected."""
        respx.post(API_URL).mock(return_value=Response(200, content=b"x" * 64))

        async with ObservatoryClient(max_response_bytes=32) as client:
            with pytest.raises(ResponseTooLargeError):
                await client.scan("example.com")

    @respx.mock
    async def test_oversize_streamed_response(self):
        """Test the cap without a Content-Length header."""

        async def body():
            for _ in range(4):
                yield b"x" * 16

        respx.post(API_URL).mock(return_value=Response(200, content=body()))

        async with ObservatoryClient(max_response_bytes=32) as client:
            with pytest.raises(ResponseTooLargeError):
                await client.scan("example.com")

    @respx.mock
    async def test_timeout(self):
        """Test that timeouts are classified."""
        respx.post(API_URL).mock(side_effect=httpx.ReadTimeout("timed out"))

        async with ObservatoryClient() as client:
            with pytest.raises(RequestTimeoutError, match="timed out"):
                await client.scan("example.com")

    @respx.mock
    async def test_slow_body_hits_overall_timeout(self):
        """Test that the timeout covers the whole exchange, not each read."""

        async def trickle():
            for _ in range(8):
                await asyncio.sleep(0.1)
                yield b" "

        respx.post(API_URL).mock(return_value=Response(200, content=trickle()))

        async with ObservatoryClient(timeout=0.3) as client:
            with pytest.raises(RequestTimeoutError, match="timed out after 0.3s"):
                await client.scan("example.com")

    @respx.mock
    async def test_connection_error(self):
        """Test that network failures become TransportError."""
        respx.post(API_URL).mock(side_effect=httpx.ConnectError("connection refused"))

        async with ObservatoryClient() as client:
            with pytest.raises(TransportError, match="connection refused"):
                await client.scan("example.com")

    async def test_rejects_unexpected_host(self):
        """Test that a misconfigured API URL is refused before any request."""
        async with ObservatoryClient(api_url="https://evil.example/api/v2/scan") as client:
            with pytest.raises(TransportError, match="unexpected API host"):
                await client.scan("example.com")

    def test_rejects_plain_http(self):
        client = ObservatoryClient(api_url="http://observatory-api.mdn.mozilla.net/api/v2/scan")
        with pytest.raises(TransportError):
            client.build_scan_url("example.com")

    def test_scan_url_encodes_domain(self):
        url = ObservatoryClient().build_scan_url("example.com")
        assert str(url) == f"{API_URL}?host=example.com"

    async def test_requires_context_manager(self):
        with pytest.raises(RuntimeError, match="Client not initialized"):
            await ObservatoryClient().scan("example.com")
