"""Streaming runtime abstractions."""

from .decoder import Keepalive, MessageDecoder, stream_type
from .session import (
    BinanceWebsocket,
    MultiplexedFrame,
    SessionState,
    build_stream_url,
    normalize_topics,
)

__all__ = [
    "BinanceWebsocket",
    "SessionState",
    "MultiplexedFrame",
    "MessageDecoder",
    "Keepalive",
    "build_stream_url",
    "normalize_topics",
    "stream_type",
]
