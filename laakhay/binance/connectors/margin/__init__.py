"""Binance cross margin connector."""

from . import rest
from .ws import MarginDecoder, MarginMessage

__all__ = ["rest", "MarginDecoder", "MarginMessage"]
