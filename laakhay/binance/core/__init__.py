"""Core components."""

from .credentials import Credentials
from .enums import PRODUCT_ENDPOINTS, Product, ProductEndpoints
from .exceptions import (
    BinanceError,
    BinanceResponseError,
    ConfigurationError,
    DeserializationError,
    EmptyTopicsError,
    MissingApiKeyError,
    MissingApiSecretError,
    ProtocolError,
    StartWebsocketError,
    StreamNotImplementedError,
    UnknownStreamError,
    UserDataStreamEventNotImplementedError,
    WebsocketClosedError,
)

__all__ = [
    "Credentials",
    "Product",
    "ProductEndpoints",
    "PRODUCT_ENDPOINTS",
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
