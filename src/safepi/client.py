"""Client for the Mozilla Observatory scan API."""

import asyncio
import json
import time
from dataclasses import dataclass
from typing import Any

import httpx

from .exceptions import (
    InvalidResponseError,
    RequestTimeoutError,
    ResponseTooLargeError,
    TransportError,
)
from .utils.debug import debug_print

API_HOST = "observatory-api.mdn.mozilla.net"
API_URL = f"https://{API_HOST}/api/v2/scan"
USER_AGENT = "SafePI/1.1"
REQUEST_TIMEOUT = 30.0
MAX_RESPONSE_BYTES = 1024 * 1024


@dataclass
class ApiResponse:
    """Status code and decoded JSON body of an API call."""

    status_code: int
    data: Any
    response_time: float = 0.0


class ObservatoryClient:
    """Async client issuing one scan request per domain.

    Certificates are always verified and redirects are never followed.
    """

    def __init__(
        self,
        api_url: str = API_URL,
        timeout: float = REQUEST_TIMEOUT,
        max_response_bytes: int = MAX_RESPONSE_BYTES,
    ):
        self.api_url = api_url
        self.timeout = timeout
        self.max_response_bytes = max_response_bytes
        self.client: httpx.AsyncClient | None = None

    async def __aenter__(self):
        self.client = httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=False,
            verify=True,
            headers={
                "User-Agent": USER_AGENT,
                "Content-Type": "application/json",
            },
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.client:
            await self.client.aclose()
            self.client = None

    def build_scan_url(self, domain: str) -> httpx.URL:
        """Build the scan URL, refusing anything but the Observatory host over HTTPS."""
        url = httpx.URL(self.api_url, params={"host": domain})
        if url.scheme != "https" or url.host != API_HOST:
            raise TransportError(f"Refusing to contact unexpected API host '{url.host}'")
        return url

    async def scan(self, domain: str, hidden: bool = True, rescan: bool = True) -> ApiResponse:
        """POST a scan request for ``domain`` and return the decoded response."""
        if not self.client:
            raise RuntimeError("Client not initialized. Use async context manager.")

        url = self.build_scan_url(domain)
        payload = {"hidden": hidden, "rescan": rescan}
        debug_print("api", f"POST {url}", Body=payload)

        start = time.time()
        try:
            # bounds the whole exchange, including a slowly streamed body
            async with asyncio.timeout(self.timeout):
                async with self.client.stream("POST", url, json=payload) as response:
                    body = await self._read_body(response)
                    status_code = response.status_code
        except (httpx.TimeoutException, TimeoutError) as exc:
            raise RequestTimeoutError(f"Request timed out after {self.timeout:g}s") from exc
        except httpx.HTTPError as exc:
            raise TransportError(str(exc) or exc.__class__.__name__) from exc
        elapsed = time.time() - start

        try:
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise InvalidResponseError(
                f"Invalid JSON response: {exc}", status_code=status_code
            ) from exc

        debug_print("api", f"HTTP {status_code} in {elapsed:.2f}s", Response=data)
        return ApiResponse(status_code=status_code, data=data, response_time=elapsed)

    async def _read_body(self, response: httpx.Response) -> bytes:
        limit = self.max_response_bytes
        declared = response.headers.get("content-length", "")
        if declared.isdigit() and int(declared) > limit:
            raise ResponseTooLargeError(f"Response exceeds {limit} bytes")

        body = bytearray()
        async for chunk in response.aiter_bytes():
            body.extend(chunk)
            if len(body) > limit:
                # leaving the stream context closes the connection
                raise ResponseTooLargeError(f"Response exceeds {limit} bytes")
        return bytes(body)
