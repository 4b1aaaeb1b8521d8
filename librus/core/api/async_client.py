"""
Async HTTP client shared by both Librus backends.

One aiohttp session with a cookie jar carries the login cookies across the
handshake and every later request.
"""
import asyncio
import logging
from typing import Any, Dict, Optional

import aiohttp
from aiohttp.abc import AbstractCookieJar

from .config import APIConfig
from .request import ApiResponse, RequestBuilder, ResponseHandler
from ..exceptions import ApiError, TransportError

TRANSPORT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError)


class AsyncAPIClient:
    """
    Asynchronous request executor.

    Features:
    - Automatic cookie retention across requests
    - Configurable proxy, SSL, timeouts
    - Classification of non-2xx responses into ApiError
    - No retries: transport failures surface immediately as TransportError

    Example:
        >>> async with AsyncAPIClient() as client:
        ...     response = await client.get(client.config.synergia_api_base, 'Me')
    """

    def __init__(
        self,
        config: Optional[APIConfig] = None,
        session: Optional[aiohttp.ClientSession] = None
    ):
        """
        Initialize async API client.

        Args:
            config: API configuration (uses defaults if not provided)
            session: Pre-built aiohttp session; the client creates its own
                     cookie-retaining session when omitted
        """
        self._config = config or APIConfig.default()
        self._session = session
        self._owns_session = session is None
        self._connector: Optional[aiohttp.TCPConnector] = None
        self._closed = False

        from ..logging import get_logger
        self._logger = get_logger('librus.api')
        root_logger = logging.getLogger()
        if not root_logger.handlers:
            self._logger.setLevel(self._config.log_level)

    @property
    def config(self) -> APIConfig:
        """Get current configuration."""
        return self._config

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def cookie_jar(self) -> Optional[AbstractCookieJar]:
        """Cookie jar of the underlying session (None before first use)."""
        return self._session.cookie_jar if self._session is not None else None

    async def __aenter__(self) -> 'AsyncAPIClient':
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        if self._closed:
            raise RuntimeError("Client is closed")

        if self._session is None or self._session.closed:
            self._connector = aiohttp.TCPConnector(
                **self._config.get_connector_kwargs()
            )
            self._session = aiohttp.ClientSession(
                connector=self._connector,
                cookie_jar=aiohttp.CookieJar(),
                **self._config.get_session_kwargs()
            )
            self._owns_session = True
        return self._session

    async def close(self):
        """Close client and release resources."""
        self._closed = True

        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
        self._session = None

        if self._connector and not self._connector.closed:
            await self._connector.close()
        self._connector = None

    def _request_kwargs(self, headers: Optional[Dict[str, str]], data: Any) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {}
        if headers:
            kwargs['headers'] = headers
        if data is not None:
            kwargs['data'] = data
        if self._config.proxy:
            kwargs['proxy'] = self._config.proxy.to_aiohttp_proxy()
        return kwargs

    async def request(
        self,
        method: str,
        url: str,
        data: Any = None,
        headers: Optional[Dict[str, str]] = None
    ) -> ApiResponse:
        """
        Send a request and read the full response, whatever its status.

        Args:
            method: HTTP method
            url: Absolute URL
            data: Form data or body
            headers: Extra request headers

        Returns:
            ApiResponse with status and body

        Raises:
            TransportError: On network, TLS, timeout or connection failure
        """
        session = await self._ensure_session()
        self._logger.debug(f"{method} {url}")

        try:
            async with session.request(
                method, url, **self._request_kwargs(headers, data)
            ) as response:
                body = await response.read()
                self._logger.debug(f"{method} {url} -> {response.status} ({len(body)} bytes)")
                return ApiResponse(url=url, status=response.status, body=body)
        except TRANSPORT_ERRORS as e:
            self._logger.error(f"Network error on {method} {url}: {e!r}")
            raise TransportError(e, url) from e

    async def get(
        self,
        base_url: str,
        path: str,
        headers: Optional[Dict[str, str]] = None
    ) -> ApiResponse:
        """
        GET base_url + path and classify the response.

        Args:
            base_url: API root ending with '/'
            path: Relative path without a leading '/'
            headers: Extra request headers

        Returns:
            ApiResponse for a 2xx status

        Raises:
            ApiError: On any status outside 200-299 (body kept verbatim)
            TransportError: On network failure
        """
        url = RequestBuilder(base_url).build_url(path)
        response = await self.request('GET', url, headers=headers)
        if not response.ok:
            self._logger.warning(f"GET {url} returned {response.status}")
        return ResponseHandler.check_status(response)

    async def get_bytes(self, url: str) -> bytes:
        """
        GET a binary payload (e.g. an attachment).

        On failure the body is read best-effort for the error: if reading
        fails the error body is empty, and if it is not UTF-8 the error
        message is empty.

        Args:
            url: Absolute URL

        Returns:
            Raw response bytes

        Raises:
            ApiError: On any status outside 200-299
            TransportError: On network failure
        """
        session = await self._ensure_session()
        self._logger.debug(f"GET {url} (binary)")

        try:
            async with session.request(
                'GET', url, **self._request_kwargs(None, None)
            ) as response:
                status = response.status
                if 200 <= status < 300:
                    return await response.read()

                try:
                    body = await response.read()
                except TRANSPORT_ERRORS:
                    body = b''
                try:
                    message = body.decode('utf-8')
                except UnicodeDecodeError:
                    message = ''

                self._logger.warning(f"GET {url} returned {status}")
                raise ApiError(status, body, url=url, message=message)
        except TRANSPORT_ERRORS as e:
            self._logger.error(f"Network error on GET {url}: {e!r}")
            raise TransportError(e, url) from e
