"""Client configuration.

Holds the knobs shared by every request and stream: signing receive
window, optional HTTP timeout, and per-product base URL overrides (used to
point the client at a testnet).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .core.enums import Product

# Header carrying the API key on keyed and signed requests
API_KEY_HEADER = "X-MBX-APIKEY"

DEFAULT_RECV_WINDOW = 5000

TESTNET_REST_URLS = {
    Product.SPOT: "https://testnet.binance.vision",
    Product.USDM_FUTURES: "https://testnet.binancefuture.com",
}

TESTNET_WS_URLS = {
    Product.SPOT: "wss://stream.testnet.binance.vision",
    Product.USDM_FUTURES: "wss://stream.binancefuture.com",
}


@dataclass(frozen=True)
class ClientConfig:
    """Immutable client settings.

    ``recv_window`` is appended to signed requests of products that accept
    it; ``None`` leaves it out and lets the exchange default apply.
    ``timeout`` is the total HTTP timeout in seconds; ``None`` means callers
    bound their own calls.
    """

    recv_window: int | None = DEFAULT_RECV_WINDOW
    timeout: float | None = None
    rest_base_urls: dict[Product, str] = field(default_factory=dict)
    ws_base_urls: dict[Product, str] = field(default_factory=dict)

    @classmethod
    def testnet(cls, **kwargs) -> ClientConfig:
        """Config pointing spot and USD-M futures at the public testnets."""
        return cls(
            rest_base_urls=dict(TESTNET_REST_URLS),
            ws_base_urls=dict(TESTNET_WS_URLS),
            **kwargs,
        )

    def rest_base_url(self, product: Product) -> str:
        return self.rest_base_urls.get(product, product.rest_base_url)

    def ws_base_url(self, product: Product) -> str:
        return self.ws_base_urls.get(product, product.ws_base_url)
