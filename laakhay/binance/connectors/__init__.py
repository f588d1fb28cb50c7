"""Per-product endpoint descriptors and stream decoders.

Each product module exposes a ``rest`` namespace of request descriptors and
a ``MessageDecoder`` for its streams:

    >>> from laakhay.binance.connectors import spot
    >>> await client.request(spot.rest.PING)
"""

from . import margin, portfolio_margin, spot, usdm
from .margin import MarginDecoder
from .portfolio_margin import PortfolioMarginDecoder
from .spot import SpotDecoder
from .usdm import UsdMFuturesDecoder

__all__ = [
    "spot",
    "margin",
    "portfolio_margin",
    "usdm",
    "SpotDecoder",
    "MarginDecoder",
    "PortfolioMarginDecoder",
    "UsdMFuturesDecoder",
]
