"""HTTP transport layer built on aiohttp.

The transport is the only place that talks to the network. It keeps an
optionally provided ``aiohttp.ClientSession`` or creates its own lazily,
and maps aiohttp failures onto the library's exception hierarchy.
"""

from __future__ import annotations

import asyncio
import logging
import ssl
from dataclasses import dataclass
from typing import Any

import aiohttp

from .exceptions import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    ConnectionError,
    DroneMobileError,
    TimeoutError,
)

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportResponse:
    """Status code and decoded body of an HTTP response."""

    status: int
    body: Any

    @property
    def ok(self) -> bool:
        """Return True for a 2xx status."""
        return 200 <= self.status < 300


class AiohttpTransport:
    """Async HTTP transport for a single base URL.

    Args:
        base_url: Base URL that request paths are joined onto.
        session: Optional existing aiohttp session. It is never closed
            by the transport.
        timeout: Total request timeout in seconds. ``None`` keeps
            aiohttp's default.
        ssl_context: Optional SSL context for custom certificates.
    """

    def __init__(
        self,
        base_url: str,
        session: aiohttp.ClientSession | None = None,
        timeout: float | None = None,
        ssl_context: ssl.SSLContext | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._session = session
        self._owns_session = session is None
        self._timeout = (
            aiohttp.ClientTimeout(total=timeout) if timeout is not None else None
        )
        self._ssl_context = ssl_context
        self._closed = False

    @property
    def closed(self) -> bool:
        """Return True once the transport has been closed."""
        return self._closed

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._closed:
            raise ConnectionError("Transport is closed")

        if self._session is None or self._session.closed:
            if self._ssl_context is not None:
                connector = aiohttp.TCPConnector(ssl=self._ssl_context)
            else:
                connector = aiohttp.TCPConnector()
            kwargs: dict[str, Any] = {"connector": connector}
            if self._timeout is not None:
                kwargs["timeout"] = self._timeout
            self._session = aiohttp.ClientSession(**kwargs)
            self._owns_session = True
        return self._session

    def _url(self, path: str) -> str:
        if not path or path == "/":
            return f"{self.base_url}/"
        return f"{self.base_url}/{path.lstrip('/')}"

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any | None = None,
        data: Any | None = None,
        headers: dict[str, str] | None = None,
    ) -> TransportResponse:
        """Send a request and return its status and body.

        Non-2xx statuses are returned, not raised.

        Raises:
            TimeoutError: If the request times out.
            ConnectionError: If the request cannot be completed.
        """
        session = await self._get_session()
        url = self._url(path)
        _LOGGER.debug("%s %s", method, url)

        try:
            async with session.request(
                method, url, params=params, json=json, data=data, headers=headers
            ) as resp:
                body = await self._read_body(resp)
                _LOGGER.debug("%s %s -> %s", method, url, resp.status)
                return TransportResponse(resp.status, body)
        except asyncio.TimeoutError as e:
            raise TimeoutError(f"Request to {url} timed out") from e
        except aiohttp.ClientConnectorError as e:
            raise ConnectionError(f"Failed to connect to {url}: {e}") from e
        except aiohttp.ClientError as e:
            raise ConnectionError(f"Request failed: {e}") from e

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any | None = None,
        data: Any | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Send a request and return the decoded body of a 2xx response.

        Raises:
            AuthenticationError: On HTTP 401.
            AuthorizationError: On HTTP 403.
            ApiError: On any other non-2xx status.
            TimeoutError: If the request times out.
            ConnectionError: If the request cannot be completed.
        """
        response = await self.send(
            method, path, params=params, json=json, data=data, headers=headers
        )
        if not response.ok:
            raise self._map_http_error(response.status, "", response.body)
        return response.body

    async def _read_body(self, resp: aiohttp.ClientResponse) -> Any:
        content_type = resp.headers.get("Content-Type", "")
        if "json" in content_type:
            try:
                return await resp.json(content_type=None)
            except ValueError:
                return await resp.text()
        return await resp.text()

    def _map_http_error(
        self, status: int, message: str, body: Any = None
    ) -> DroneMobileError:
        if status == 401:
            return AuthenticationError(message or "Authentication failed")
        if status == 403:
            return AuthorizationError(message or "Access denied")
        return ApiError(
            message or f"HTTP {status}",
            status_code=status,
            response_body=body,
        )

    async def close(self) -> None:
        """Close the transport, and its session if it created it."""
        if self._closed:
            return
        self._closed = True
        if self._session is not None and self._owns_session:
            if not self._session.closed:
                await self._session.close()
        self._session = None
