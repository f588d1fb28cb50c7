"""Exchange metadata schemas (``exchangeInfo``).

These models use the exact field names returned by Binance as aliases.
Symbol filters form a tagged union on ``filterType``; filter types this
module does not know decode to ``UnknownFilter`` instead of failing the
whole response.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import ConfigDict, Discriminator, Field, Tag

from .base import WireDecimal, WireModel


class RateLimitInterval(str, Enum):
    SECOND = "SECOND"
    MINUTE = "MINUTE"
    HOUR = "HOUR"
    DAY = "DAY"


class RateLimitType(str, Enum):
    REQUEST_WEIGHT = "REQUEST_WEIGHT"
    ORDERS = "ORDERS"
    RAW_REQUESTS = "RAW_REQUESTS"


class RateLimit(WireModel):
    """One rate limit rule from exchangeInfo."""

    rate_limit_type: RateLimitType = Field(..., alias="rateLimitType")
    interval: RateLimitInterval
    interval_num: int = Field(..., alias="intervalNum")
    limit: int


class PriceFilter(WireModel):
    filter_type: Literal["PRICE_FILTER"] = Field(..., alias="filterType")
    min_price: WireDecimal = Field(..., alias="minPrice")
    max_price: WireDecimal = Field(..., alias="maxPrice")
    tick_size: WireDecimal = Field(..., alias="tickSize")


class PercentPrice(WireModel):
    filter_type: Literal["PERCENT_PRICE"] = Field(..., alias="filterType")
    multiplier_up: WireDecimal = Field(..., alias="multiplierUp")
    multiplier_down: WireDecimal = Field(..., alias="multiplierDown")
    avg_price_mins: int | None = Field(None, alias="avgPriceMins")


class PercentPriceBySide(WireModel):
    filter_type: Literal["PERCENT_PRICE_BY_SIDE"] = Field(..., alias="filterType")
    bid_multiplier_up: WireDecimal = Field(..., alias="bidMultiplierUp")
    bid_multiplier_down: WireDecimal = Field(..., alias="bidMultiplierDown")
    ask_multiplier_up: WireDecimal = Field(..., alias="askMultiplierUp")
    ask_multiplier_down: WireDecimal = Field(..., alias="askMultiplierDown")
    avg_price_mins: int | None = Field(None, alias="avgPriceMins")


class LotSize(WireModel):
    filter_type: Literal["LOT_SIZE"] = Field(..., alias="filterType")
    min_qty: WireDecimal = Field(..., alias="minQty")
    max_qty: WireDecimal = Field(..., alias="maxQty")
    step_size: WireDecimal = Field(..., alias="stepSize")


class MinNotional(WireModel):
    filter_type: Literal["MIN_NOTIONAL"] = Field(..., alias="filterType")
    notional: WireDecimal | None = None
    min_notional: WireDecimal | None = Field(None, alias="minNotional")
    apply_to_market: bool | None = Field(None, alias="applyToMarket")
    avg_price_mins: int | None = Field(None, alias="avgPriceMins")


class Notional(WireModel):
    filter_type: Literal["NOTIONAL"] = Field(..., alias="filterType")
    min_notional: WireDecimal | None = Field(None, alias="minNotional")
    apply_min_to_market: bool | None = Field(None, alias="applyMinToMarket")
    max_notional: WireDecimal | None = Field(None, alias="maxNotional")
    apply_max_to_market: bool | None = Field(None, alias="applyMaxToMarket")
    avg_price_mins: int | None = Field(None, alias="avgPriceMins")


class IcebergParts(WireModel):
    filter_type: Literal["ICEBERG_PARTS"] = Field(..., alias="filterType")
    limit: int | None = None


class MaxNumOrders(WireModel):
    filter_type: Literal["MAX_NUM_ORDERS"] = Field(..., alias="filterType")
    max_num_orders: int | None = Field(None, alias="maxNumOrders")


class MaxNumAlgoOrders(WireModel):
    filter_type: Literal["MAX_NUM_ALGO_ORDERS"] = Field(..., alias="filterType")
    max_num_algo_orders: int | None = Field(None, alias="maxNumAlgoOrders")


class MaxNumIcebergOrders(WireModel):
    filter_type: Literal["MAX_NUM_ICEBERG_ORDERS"] = Field(..., alias="filterType")
    max_num_iceberg_orders: int = Field(..., alias="maxNumIcebergOrders")


class MaxPosition(WireModel):
    filter_type: Literal["MAX_POSITION"] = Field(..., alias="filterType")
    max_position: WireDecimal = Field(..., alias="maxPosition")


class MarketLotSize(WireModel):
    filter_type: Literal["MARKET_LOT_SIZE"] = Field(..., alias="filterType")
    min_qty: WireDecimal = Field(..., alias="minQty")
    max_qty: WireDecimal = Field(..., alias="maxQty")
    step_size: WireDecimal = Field(..., alias="stepSize")


class TrailingDelta(WireModel):
    filter_type: Literal["TRAILING_DELTA"] = Field(..., alias="filterType")
    min_trailing_above_delta: int | None = Field(None, alias="minTrailingAboveDelta")
    max_trailing_above_delta: int | None = Field(None, alias="maxTrailingAboveDelta")
    min_trailing_below_delta: int | None = Field(None, alias="minTrailingBelowDelta")
    max_trailing_below_delta: int | None = Field(None, alias="maxTrailingBelowDelta")


class UnknownFilter(WireModel):
    """Filter type not modelled here; raw fields are kept as extras."""

    model_config = ConfigDict(extra="allow")

    filter_type: str = Field(..., alias="filterType")


KNOWN_FILTERS: dict[str, type[WireModel]] = {
    "PRICE_FILTER": PriceFilter,
    "PERCENT_PRICE": PercentPrice,
    "PERCENT_PRICE_BY_SIDE": PercentPriceBySide,
    "LOT_SIZE": LotSize,
    "MIN_NOTIONAL": MinNotional,
    "NOTIONAL": Notional,
    "ICEBERG_PARTS": IcebergParts,
    "MAX_NUM_ORDERS": MaxNumOrders,
    "MAX_NUM_ALGO_ORDERS": MaxNumAlgoOrders,
    "MAX_NUM_ICEBERG_ORDERS": MaxNumIcebergOrders,
    "MAX_POSITION": MaxPosition,
    "MARKET_LOT_SIZE": MarketLotSize,
    "TRAILING_DELTA": TrailingDelta,
}


def _filter_tag(value: Any) -> str:
    if isinstance(value, dict):
        tag = value.get("filterType", value.get("filter_type"))
    else:
        tag = getattr(value, "filter_type", None)
    return tag if tag in KNOWN_FILTERS else "UNKNOWN"


Filter = Annotated[
    Union[
        Annotated[PriceFilter, Tag("PRICE_FILTER")],
        Annotated[PercentPrice, Tag("PERCENT_PRICE")],
        Annotated[PercentPriceBySide, Tag("PERCENT_PRICE_BY_SIDE")],
        Annotated[LotSize, Tag("LOT_SIZE")],
        Annotated[MinNotional, Tag("MIN_NOTIONAL")],
        Annotated[Notional, Tag("NOTIONAL")],
        Annotated[IcebergParts, Tag("ICEBERG_PARTS")],
        Annotated[MaxNumOrders, Tag("MAX_NUM_ORDERS")],
        Annotated[MaxNumAlgoOrders, Tag("MAX_NUM_ALGO_ORDERS")],
        Annotated[MaxNumIcebergOrders, Tag("MAX_NUM_ICEBERG_ORDERS")],
        Annotated[MaxPosition, Tag("MAX_POSITION")],
        Annotated[MarketLotSize, Tag("MARKET_LOT_SIZE")],
        Annotated[TrailingDelta, Tag("TRAILING_DELTA")],
        Annotated[UnknownFilter, Tag("UNKNOWN")],
    ],
    Discriminator(_filter_tag),
]


class SymbolInfo(WireModel):
    """Trading rules of one symbol."""

    symbol: str
    status: str
    base_asset: str = Field(..., alias="baseAsset")
    base_asset_precision: int | None = Field(None, alias="baseAssetPrecision")
    quote_asset: str = Field(..., alias="quoteAsset")
    quote_asset_precision: int | None = Field(None, alias="quoteAssetPrecision")
    order_types: list[str] = Field(default_factory=list, alias="orderTypes")
    is_spot_trading_allowed: bool | None = Field(None, alias="isSpotTradingAllowed")
    is_margin_trading_allowed: bool | None = Field(None, alias="isMarginTradingAllowed")
    filters: list[Filter] = Field(default_factory=list)
    permissions: list[str] = Field(default_factory=list)

    def get_filter(self, filter_type: str) -> WireModel | None:
        """First filter of the given ``filterType``, if any."""
        for item in self.filters:
            if item.filter_type == filter_type:
                return item
        return None


class ExchangeInfo(WireModel):
    """Response of ``GET /api/v3/exchangeInfo``."""

    timezone: str
    server_time: int = Field(..., alias="serverTime")
    rate_limits: list[RateLimit] = Field(default_factory=list, alias="rateLimits")
    symbols: list[SymbolInfo] = Field(default_factory=list)

    def get_symbol(self, symbol: str) -> SymbolInfo | None:
        symbol = symbol.upper()
        for info in self.symbols:
            if info.symbol == symbol:
                return info
        return None
