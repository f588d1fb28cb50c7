"""Binance USD-M futures connector."""

from . import rest
from .ws import UsdMFuturesDecoder, UsdMFuturesMessage

__all__ = ["rest", "UsdMFuturesDecoder", "UsdMFuturesMessage"]
