"""Runtime layer: REST dispatch and streaming sessions."""

from .rest import HTTPClient, RequestDescriptor, RequestDispatcher
from .ws import BinanceWebsocket, MessageDecoder, SessionState

__all__ = [
    "HTTPClient",
    "RequestDescriptor",
    "RequestDispatcher",
    "BinanceWebsocket",
    "MessageDecoder",
    "SessionState",
]
