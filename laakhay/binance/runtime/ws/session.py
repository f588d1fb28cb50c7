"""Multiplexed Binance stream session.

One session is one WebSocket connection to the combined-stream endpoint
(``<ws_base>/stream?streams=a/b/c``) carrying a fixed topic list. Messages
are pulled one at a time by a single consumer; nothing is read from the
socket until the next pull.

State machine::

    CONNECTING --start()--> OPEN --close frame / transport error / close()--> CLOSED

There is no reconnection. When the session is CLOSED every pull raises
``WebsocketClosedError``; build a new session to resubscribe.
"""

from __future__ import annotations

import base64
import json
import logging
import os
from collections.abc import Iterable
from decimal import Decimal
from enum import Enum
from typing import Any, Generic

import aiohttp
from aiohttp import WSMsgType
from pydantic import ValidationError

from ...core.exceptions import (
    DeserializationError,
    EmptyTopicsError,
    StartWebsocketError,
    WebsocketClosedError,
)
from ...models.base import WireModel
from .decoder import MessageDecoder, MessageT

logger = logging.getLogger(__name__)

_CLOSE_TYPES = (WSMsgType.CLOSE, WSMsgType.CLOSING, WSMsgType.CLOSED)


class SessionState(str, Enum):
    """Lifecycle of a streaming session."""

    CONNECTING = "connecting"
    OPEN = "open"
    CLOSED = "closed"


class MultiplexedFrame(WireModel):
    """Combined-stream envelope: ``{"stream": "<topic>", "data": {...}}``."""

    stream: str
    data: Any


def normalize_topics(topics: Iterable[str] | str) -> tuple[str, ...]:
    """Ordered, de-duplicated topic tuple; raises ``EmptyTopicsError`` if empty."""
    if isinstance(topics, str):
        topics = [topics]
    ordered = tuple(dict.fromkeys(topic for topic in topics if topic))
    if not ordered:
        raise EmptyTopicsError()
    return ordered


def build_stream_url(ws_base_url: str, topics: tuple[str, ...]) -> str:
    return f"{ws_base_url.rstrip('/')}/stream?streams={'/'.join(topics)}"


class BinanceWebsocket(Generic[MessageT]):
    """Single-consumer stream of decoded messages for one product.

    Each ``recv()`` returns one decoded message. A frame that fails to decode
    raises for that pull only; the session stays open. Transport pings are
    answered with a pong automatically and produce no message unless
    ``emit_keepalive`` is set, in which case the decoder's ``Keepalive`` is
    returned for them.

    Example:
        >>> async with BinanceWebsocket(SpotDecoder(), ["bnbbtc@trade"]) as ws:
        ...     async for message in ws:
        ...         print(message)
    """

    def __init__(
        self,
        decoder: MessageDecoder[MessageT],
        topics: Iterable[str] | str,
        *,
        ws_base_url: str | None = None,
        session: aiohttp.ClientSession | None = None,
        emit_keepalive: bool = False,
    ) -> None:
        self.topics = normalize_topics(topics)
        self.decoder = decoder
        self.url = build_stream_url(ws_base_url or decoder.product.ws_base_url, self.topics)
        self.emit_keepalive = emit_keepalive
        self._session = session
        self._owns_session = session is None
        self._ws: aiohttp.ClientWebSocketResponse | None = None
        self._state = SessionState.CONNECTING

    @classmethod
    async def connect(
        cls,
        decoder: MessageDecoder[MessageT],
        topics: Iterable[str] | str,
        **kwargs: Any,
    ) -> BinanceWebsocket[MessageT]:
        """Create a session and perform the handshake."""
        ws = cls(decoder, topics, **kwargs)
        await ws.start()
        return ws

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is SessionState.OPEN

    async def start(self) -> None:
        """Perform the WebSocket handshake."""
        if self._state is not SessionState.CONNECTING:
            raise RuntimeError("A websocket session can only be started once")

        if self._session is None:
            self._session = aiohttp.ClientSession()
        try:
            # Pings are surfaced so the session answers them itself
            self._ws = await self._session.ws_connect(self.url, autoping=False)
        except aiohttp.WSServerHandshakeError as exc:
            body = await self._rejection_body(exc)
            await self._shutdown()
            raise StartWebsocketError(exc.status, body) from exc
        except BaseException:
            await self._shutdown()
            raise

        self._state = SessionState.OPEN
        logger.info(
            f"Websocket open on {self.decoder.product} with {len(self.topics)} topic(s)"
        )

    async def _rejection_body(self, exc: aiohttp.WSServerHandshakeError) -> str:
        """Text of a rejected upgrade response.

        aiohttp discards the body before raising, so the same upgrade request
        is sent once more and the rejection read in full. Falls back to
        aiohttp's reason when that is not possible.
        """
        if exc.status == 101 or self._session is None:
            return exc.message
        headers = {
            "Upgrade": "websocket",
            "Connection": "Upgrade",
            "Sec-WebSocket-Version": "13",
            "Sec-WebSocket-Key": base64.b64encode(os.urandom(16)).decode(),
        }
        try:
            async with self._session.get(self.url, headers=headers) as resp:
                if resp.status == 101:
                    return exc.message
                return await resp.text()
        except aiohttp.ClientError as err:
            logger.debug(f"Could not read handshake rejection body: {err}")
            return exc.message

    async def recv(self) -> MessageT:
        """Pull the next decoded message."""
        while True:
            if self._state is SessionState.CONNECTING:
                raise RuntimeError("Websocket session has not been started")
            if self._state is SessionState.CLOSED or self._ws is None:
                raise WebsocketClosedError()

            msg = await self._ws.receive()

            if msg.type == WSMsgType.TEXT:
                return self._decode(msg.data)

            if msg.type == WSMsgType.PING:
                try:
                    await self._ws.pong(msg.data)
                except Exception:
                    await self._shutdown()
                    raise
                if self.emit_keepalive:
                    return self.decoder.keepalive()
                continue

            if msg.type in _CLOSE_TYPES:
                logger.info(f"Websocket closed by remote on {self.decoder.product}: {msg.data}")
                await self._shutdown()
                raise WebsocketClosedError()

            if msg.type == WSMsgType.ERROR:
                logger.warning(f"Websocket transport error on {self.decoder.product}: {msg.data}")
                await self._shutdown()
                if isinstance(msg.data, BaseException):
                    raise msg.data
                raise WebsocketClosedError(f"Websocket transport error: {msg.data!r}")

            # PONG and BINARY frames carry nothing for the consumer
            logger.debug(f"Ignoring {msg.type.name} frame")

    def _decode(self, text: str) -> MessageT:
        try:
            frame = MultiplexedFrame.model_validate(json.loads(text, parse_float=Decimal))
        except (json.JSONDecodeError, ValidationError) as exc:
            raise DeserializationError(f"Malformed combined stream frame: {exc}", raw=text) from exc
        return self.decoder.decode(frame.stream, frame.data)

    async def close(self) -> None:
        """Close the connection; further pulls raise ``WebsocketClosedError``."""
        if self._state is not SessionState.CLOSED:
            logger.info(f"Closing websocket on {self.decoder.product}")
        await self._shutdown()

    async def _shutdown(self) -> None:
        self._state = SessionState.CLOSED
        ws, self._ws = self._ws, None
        try:
            if ws is not None and not ws.closed:
                await ws.close()
        finally:
            if self._owns_session and self._session is not None and not self._session.closed:
                await self._session.close()

    def __aiter__(self) -> BinanceWebsocket[MessageT]:
        return self

    async def __anext__(self) -> MessageT:
        try:
            return await self.recv()
        except WebsocketClosedError:
            raise StopAsyncIteration from None

    async def __aenter__(self) -> BinanceWebsocket[MessageT]:
        if self._state is SessionState.CONNECTING:
            await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
