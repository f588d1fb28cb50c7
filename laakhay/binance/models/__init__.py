"""Wire schemas shared across products.

Architecture:
    All models are Pydantic v2, immutable (frozen=True) and map every wire
    field through an explicit alias. Product-specific stream messages live
    next to their decoders under ``connectors``.

Design Decisions:
    - Decimal for prices and quantities, decoded from the wire string
    - Unknown wire fields are ignored so additive API changes do not break
    - Tagged unions for polymorphic payloads (symbol filters)
"""

from .base import WireDecimal, WireModel
from .common import CodeMessage, EmptyResponse, ExchangeError, ListenKey, ServerTime
from .market import (
    ExchangeInfo,
    Filter,
    IcebergParts,
    LotSize,
    MarketLotSize,
    MaxNumAlgoOrders,
    MaxNumIcebergOrders,
    MaxNumOrders,
    MaxPosition,
    MinNotional,
    Notional,
    PercentPrice,
    PercentPriceBySide,
    PriceFilter,
    RateLimit,
    RateLimitInterval,
    RateLimitType,
    SymbolInfo,
    TrailingDelta,
    UnknownFilter,
)

__all__ = [
    "WireModel",
    "WireDecimal",
    "ExchangeError",
    "EmptyResponse",
    "CodeMessage",
    "ListenKey",
    "ServerTime",
    # Market metadata
    "ExchangeInfo",
    "SymbolInfo",
    "RateLimit",
    "RateLimitInterval",
    "RateLimitType",
    "Filter",
    "PriceFilter",
    "PercentPrice",
    "PercentPriceBySide",
    "LotSize",
    "MinNotional",
    "Notional",
    "IcebergParts",
    "MaxNumOrders",
    "MaxNumAlgoOrders",
    "MaxNumIcebergOrders",
    "MaxPosition",
    "MarketLotSize",
    "TrailingDelta",
    "UnknownFilter",
]
