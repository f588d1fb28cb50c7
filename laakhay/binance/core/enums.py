"""Product registry for the Binance API families.

Architecture:
    Every Binance product (spot, margin, portfolio margin, futures, options)
    lives on its own host with its own streaming endpoint. This module holds
    the static table mapping a product to those endpoints so both the REST
    dispatcher and the streaming session resolve URLs the same way.

Design Decisions:
    - String enum: products serialize cleanly and compare by value
    - Frozen dataclass: endpoint records are immutable
    - Base URLs carry no trailing slash; request paths and the
      ``/stream`` suffix are appended by callers

See Also:
    - RequestDescriptor: binds every endpoint to one product
    - BinanceWebsocket: builds combined-stream URLs from ``ws_base_url``
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class ProductEndpoints:
    """Static connection details of one product."""

    rest_base_url: str
    ws_base_url: str
    uses_recv_window: bool = True


class Product(str, Enum):
    """Binance API product family.

    Each product has its own REST host, WebSocket host and signing rules.
    """

    SPOT = "spot"
    MARGIN = "margin"
    PORTFOLIO_MARGIN = "portfolio_margin"
    USDM_FUTURES = "usdm_futures"
    COINM_FUTURES = "coinm_futures"
    EUROPEAN_OPTIONS = "european_options"

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value

    @property
    def endpoints(self) -> ProductEndpoints:
        """Endpoint record of this product."""
        return PRODUCT_ENDPOINTS[self]

    @property
    def rest_base_url(self) -> str:
        """REST base URL, e.g. ``https://api.binance.com``."""
        return self.endpoints.rest_base_url

    @property
    def ws_base_url(self) -> str:
        """WebSocket base URL without the ``/stream`` suffix."""
        return self.endpoints.ws_base_url

    @property
    def uses_recv_window(self) -> bool:
        """Whether signed requests carry a ``recvWindow`` parameter."""
        return self.endpoints.uses_recv_window


# Margin shares the spot hosts; its private endpoints live under /sapi.
PRODUCT_ENDPOINTS: dict[Product, ProductEndpoints] = {
    Product.SPOT: ProductEndpoints(
        rest_base_url="https://api.binance.com",
        ws_base_url="wss://stream.binance.com:9443",
    ),
    Product.MARGIN: ProductEndpoints(
        rest_base_url="https://api.binance.com",
        ws_base_url="wss://stream.binance.com:9443",
    ),
    Product.PORTFOLIO_MARGIN: ProductEndpoints(
        rest_base_url="https://papi.binance.com",
        ws_base_url="wss://fstream.binance.com/pm",
    ),
    Product.USDM_FUTURES: ProductEndpoints(
        rest_base_url="https://fapi.binance.com",
        ws_base_url="wss://fstream.binance.com",
    ),
    Product.COINM_FUTURES: ProductEndpoints(
        rest_base_url="https://dapi.binance.com",
        ws_base_url="wss://dstream.binance.com",
    ),
    Product.EUROPEAN_OPTIONS: ProductEndpoints(
        rest_base_url="https://eapi.binance.com",
        ws_base_url="wss://nbstream.binance.com/eoptions",
        uses_recv_window=False,
    ),
}
