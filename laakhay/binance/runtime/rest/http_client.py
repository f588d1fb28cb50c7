"""HTTP client helper."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import aiohttp
from yarl import URL

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HTTPResponse:
    """Status and raw body of one HTTP exchange."""

    status: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class HTTPClient:
    """Async HTTP client wrapper.

    URLs are sent exactly as given (``encoded=True``): the query string of a
    signed request must reach the exchange byte-for-byte as it was signed.
    Connection, TLS and timeout errors propagate as ``aiohttp`` raised them.
    """

    def __init__(self, timeout: Optional[float] = None) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
    ) -> HTTPResponse:
        """Send one request with an empty body and return status and text."""
        target = URL(url, encoded=True)
        async with self.session.request(method.upper(), target, headers=headers) as response:
            body = await response.text()
            logger.debug(f"{method.upper()} {target.path} -> {response.status}")
            return HTTPResponse(status=response.status, body=body)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "HTTPClient":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
