"""
HTTP transport layer for the REST scoring backends.

Provides:
- HTTPClientError: Non-success status or transport failure, with status and body
- HTTPClient: Async single-shot HTTP client with bearer-key authentication

Each call is exactly one request. There is no retry or backoff here: a
failed scoring call is reported once and the user re-triggers it. This
layer separates HTTP concerns from response adaptation in the providers.
"""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class HTTPClientError(Exception):
    """Base exception for HTTP client errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class HTTPClient:
    """
    Async HTTP client for one-request/one-response backend calls.

    Features:
    - Optional API key sent as a header on every request
    - Non-2xx statuses raised as HTTPClientError carrying status and body
    - Network failures raised as HTTPClientError chained to the httpx error
    - Context manager for proper resource cleanup

    Example:
        async with HTTPClient() as client:
            response = await client.get(
                "https://api.cerebras.ai/v1/models",
                api_key=key,
                api_key_header="Authorization",
                api_key_prefix="Bearer ",
            )
    """

    def __init__(self, timeout: float | None = None):
        """
        Initialize HTTP client.

        Args:
            timeout: Request timeout in seconds. None disables the client-side timeout.
        """
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "HTTPClient":
        """Enter async context manager, create client."""
        self._client = httpx.AsyncClient(timeout=self.timeout)
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager, close client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        api_key: str | None = None,
        api_key_header: str = "Authorization",
        api_key_prefix: str = "Bearer ",
    ) -> httpx.Response:
        """
        Perform GET request.

        Args:
            url: Request URL
            params: Query parameters
            headers: Request headers
            api_key: Optional API key for authentication
            api_key_header: Header name for API key
            api_key_prefix: Prefix for API key in header

        Returns:
            httpx.Response on success

        Raises:
            HTTPClientError: On non-2xx status or transport failure
        """
        return await self._request(
            method="GET",
            url=url,
            params=params,
            headers=headers,
            api_key=api_key,
            api_key_header=api_key_header,
            api_key_prefix=api_key_prefix,
        )

    async def post(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        json_body: dict[str, Any] | None = None,
        api_key: str | None = None,
        api_key_header: str = "Authorization",
        api_key_prefix: str = "Bearer ",
    ) -> httpx.Response:
        """
        Perform POST request with a JSON body.

        Args:
            url: Request URL
            params: Query parameters
            headers: Request headers
            json_body: JSON body to send
            api_key: Optional API key for authentication
            api_key_header: Header name for API key
            api_key_prefix: Prefix for API key in header

        Returns:
            httpx.Response on success

        Raises:
            HTTPClientError: On non-2xx status or transport failure
        """
        return await self._request(
            method="POST",
            url=url,
            params=params,
            headers=headers,
            json_body=json_body,
            api_key=api_key,
            api_key_header=api_key_header,
            api_key_prefix=api_key_prefix,
        )

    async def _request(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        json_body: dict[str, Any] | None = None,
        api_key: str | None = None,
        api_key_header: str = "Authorization",
        api_key_prefix: str = "Bearer ",
    ) -> httpx.Response:
        """Execute a single HTTP request and check its status."""
        if not self._client:
            raise RuntimeError("HTTPClient must be used as async context manager")

        request_headers = dict(headers) if headers else {}
        if api_key:
            request_headers[api_key_header] = f"{api_key_prefix}{api_key}"

        try:
            response = await self._client.request(
                method,
                url,
                params=params,
                headers=request_headers or None,
                json=json_body,
            )
        except httpx.HTTPError as e:
            logger.warning(f"{method} {url} failed: {type(e).__name__}: {e}")
            raise HTTPClientError(f"Request to {url} failed: {e}") from e

        if response.status_code >= 400:
            raise HTTPClientError(
                f"Request failed with status {response.status_code}",
                status_code=response.status_code,
                response_body=response.text,
            )

        return response
