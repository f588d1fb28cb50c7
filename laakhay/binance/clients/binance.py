"""High-level Binance client.

Bundles credentials, configuration, one HTTP connection pool and the
request dispatcher behind a small surface:

- ``request(descriptor, ...)`` performs one REST call for any product
- ``websocket(decoder, topics)`` / ``stream(decoder, topics)`` open a
  multiplexed streaming session for the decoder's product

Notes:
- The client holds no per-request state; concurrent ``request`` calls are
  independent and share only the immutable credentials and config.
- Streaming sessions own their own connection and outlive nothing: closing
  the client does not close sessions it handed out.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from ..config import ClientConfig
from ..core.credentials import Credentials
from ..runtime.rest import HTTPClient, RequestDescriptor, RequestDispatcher
from ..runtime.rest.descriptor import RequestT, ResponseT
from ..runtime.rest.signing import current_timestamp_ms
from ..runtime.ws import BinanceWebsocket, MessageDecoder
from ..runtime.ws.decoder import MessageT

logger = logging.getLogger(__name__)


class Binance:
    """Entry point for Binance REST calls and streams.

    Example:
        >>> async with Binance.with_key_and_secret(key, secret) as client:
        ...     info = await client.request(spot.rest.ACCOUNT_INFORMATION)
        ...     async with await client.stream(SpotDecoder(), ["bnbbtc@trade"]) as ws:
        ...         async for message in ws:
        ...             print(message)
    """

    def __init__(
        self,
        credentials: Credentials | None = None,
        *,
        config: ClientConfig | None = None,
        http: HTTPClient | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self.credentials = credentials or Credentials()
        self.config = config or ClientConfig()
        self._owns_http = http is None
        self._http = http or HTTPClient(timeout=self.config.timeout)
        self._dispatcher = RequestDispatcher(
            self._http,
            self.credentials,
            self.config,
            clock or current_timestamp_ms,
        )

    @classmethod
    def with_key(cls, api_key: str, **kwargs: Any) -> Binance:
        """Client able to call keyed (unsigned) endpoints."""
        return cls(Credentials(api_key=api_key), **kwargs)

    @classmethod
    def with_key_and_secret(cls, api_key: str, api_secret: str, **kwargs: Any) -> Binance:
        """Client able to call keyed and signed endpoints."""
        return cls(Credentials(api_key=api_key, api_secret=api_secret), **kwargs)

    @classmethod
    def from_env(cls, **kwargs: Any) -> Binance:
        """Client with credentials read from ``BINANCE_API_KEY`` / ``BINANCE_API_SECRET``."""
        return cls(Credentials.from_env(), **kwargs)

    @property
    def dispatcher(self) -> RequestDispatcher:
        return self._dispatcher

    async def request(
        self,
        descriptor: RequestDescriptor[RequestT, ResponseT],
        request: RequestT | None = None,
        /,
        **fields: Any,
    ) -> ResponseT:
        """Perform one REST call.

        Args:
            descriptor: Endpoint descriptor, e.g. ``spot.rest.PING``
            request: Prebuilt request model, or
            **fields: Request fields by name or wire alias

        Returns:
            The descriptor's typed response model.
        """
        return await self._dispatcher.run(descriptor, request, **fields)

    def websocket(
        self,
        decoder: MessageDecoder[MessageT],
        topics: Iterable[str] | str,
        **kwargs: Any,
    ) -> BinanceWebsocket[MessageT]:
        """Build an unstarted session; ``ws_base_url`` defaults to the config's."""
        kwargs["ws_base_url"] = kwargs.get("ws_base_url") or self.config.ws_base_url(
            decoder.product
        )
        return BinanceWebsocket(decoder, topics, **kwargs)

    async def stream(
        self,
        decoder: MessageDecoder[MessageT],
        topics: Iterable[str] | str,
        **kwargs: Any,
    ) -> BinanceWebsocket[MessageT]:
        """Build and start a session."""
        ws = self.websocket(decoder, topics, **kwargs)
        await ws.start()
        return ws

    async def close(self) -> None:
        """Close the HTTP pool if this client created it."""
        if self._owns_http:
            await self._http.close()

    async def __aenter__(self) -> Binance:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
