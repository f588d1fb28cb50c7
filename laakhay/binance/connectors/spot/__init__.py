"""Binance spot connector: REST endpoint descriptors and stream decoder."""

from . import rest
from .ws import SpotDecoder, SpotMessage

__all__ = ["rest", "SpotDecoder", "SpotMessage"]
