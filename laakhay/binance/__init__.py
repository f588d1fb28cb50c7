"""Laakhay Binance - typed async client for the Binance REST and WebSocket APIs."""

from . import connectors
from .clients import Binance
from .config import API_KEY_HEADER, DEFAULT_RECV_WINDOW, ClientConfig
from .connectors import (
    MarginDecoder,
    PortfolioMarginDecoder,
    SpotDecoder,
    UsdMFuturesDecoder,
)
from .core import (
    BinanceError,
    BinanceResponseError,
    ConfigurationError,
    Credentials,
    DeserializationError,
    EmptyTopicsError,
    MissingApiKeyError,
    MissingApiSecretError,
    Product,
    ProtocolError,
    StartWebsocketError,
    StreamNotImplementedError,
    UnknownStreamError,
    UserDataStreamEventNotImplementedError,
    WebsocketClosedError,
)
from .runtime import BinanceWebsocket, RequestDescriptor, SessionState

__version__ = "0.1.0"

__all__ = [
    # Client
    "Binance",
    "ClientConfig",
    "Credentials",
    "Product",
    "API_KEY_HEADER",
    "DEFAULT_RECV_WINDOW",
    # Runtime
    "RequestDescriptor",
    "BinanceWebsocket",
    "SessionState",
    # Connectors
    "connectors",
    "SpotDecoder",
    "MarginDecoder",
    "PortfolioMarginDecoder",
    "UsdMFuturesDecoder",
    # Exceptions
    "BinanceError",
    "ConfigurationError",
    "MissingApiKeyError",
    "MissingApiSecretError",
    "EmptyTopicsError",
    "ProtocolError",
    "StartWebsocketError",
    "UnknownStreamError",
    "StreamNotImplementedError",
    "UserDataStreamEventNotImplementedError",
    "BinanceResponseError",
    "WebsocketClosedError",
    "DeserializationError",
]
