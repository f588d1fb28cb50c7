"""Binance cross margin stream decoder.

Margin market data and the margin user data stream use the spot event
schema on the spot stream host.
"""

from __future__ import annotations

from laakhay.binance.core.enums import Product

from ..spot.ws import SpotDecoder, SpotMessage

MarginMessage = SpotMessage


class MarginDecoder(SpotDecoder):
    product = Product.MARGIN
