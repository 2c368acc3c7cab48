"""Transport boundary between the client and the network."""

import asyncio
import logging
from typing import Protocol

import aiohttp
from multidict import CIMultiDict

from ..exceptions import RegistryConnectionError, RegistryTimeoutError
from .session import create_session, parse_json_response
from .types import RequestResult, TransportRequest

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Anything able to send a request and return a uniform result."""

    async def send(self, request: TransportRequest) -> RequestResult: ...


class AiohttpTransport:
    """Transport backed by an aiohttp client session."""

    def __init__(
        self,
        timeout: float = 10,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            timeout: Request timeout in seconds, used when creating the session
            session: Existing session to reuse; it is not closed by this transport
        """
        self.timeout = timeout
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self) -> "AiohttpTransport":
        await self._get_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _get_session(self) -> aiohttp.ClientSession:
        if self.session is None or self.session.closed:
            self.session = await create_session(self.timeout)
            self._owns_session = True
        return self.session

    async def close(self) -> None:
        """Close the session if this transport created it."""
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def send(self, request: TransportRequest) -> RequestResult:
        """Send a request and read the full response.

        Raises:
            RegistryTimeoutError: If the request times out
            RegistryConnectionError: If the registry cannot be reached
        """
        session = await self._get_session()
        try:
            async with session.request(
                request.method,
                request.url,
                headers=request.headers,
                data=request.data,
                allow_redirects=True,
            ) as resp:
                data = await resp.read()
                headers = CIMultiDict(resp.headers)
                status = resp.status
        except asyncio.TimeoutError as e:
            raise RegistryTimeoutError(
                f"{request.method} {request.url} timed out after {self.timeout}s"
            ) from e
        except aiohttp.ClientError as e:
            raise RegistryConnectionError(
                f"Failed to reach {request.url}: {e}"
            ) from e

        logger.debug("%s %s -> %d", request.method, request.url, status)
        json_data = None
        if data and "json" in headers.get("Content-Type", ""):
            json_data = parse_json_response(data.decode("utf-8", errors="replace"))
        return RequestResult(
            status_code=status, headers=headers, data=data, json_data=json_data
        )
