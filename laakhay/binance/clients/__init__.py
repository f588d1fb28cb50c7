"""High-level clients."""

from .binance import Binance

__all__ = ["Binance"]
