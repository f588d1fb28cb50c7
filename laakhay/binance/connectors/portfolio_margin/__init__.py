"""Binance portfolio margin connector."""

from . import rest
from .ws import PortfolioMarginDecoder, PortfolioMarginMessage

__all__ = ["rest", "PortfolioMarginDecoder", "PortfolioMarginMessage"]
