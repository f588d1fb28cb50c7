"""Binance spot stream messages and decoder.

Market streams and the spot user data stream share one tagged union keyed
on ``"e"``. Individual book ticker streams carry no tag and are routed by
topic.

See https://github.com/binance/binance-spot-api-docs/blob/master/web-socket-streams.md
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import Field

from laakhay.binance.core.enums import Product
from laakhay.binance.models.base import WireDecimal, WireModel
from laakhay.binance.runtime.ws.decoder import Keepalive, MessageDecoder

PriceLevel = tuple[WireDecimal, WireDecimal]


class AggregateTrade(WireModel):
    """Trade information aggregated for a single taker order."""

    event_type: Literal["aggTrade"] = Field("aggTrade", alias="e")
    event_time: int = Field(..., alias="E")
    symbol: str = Field(..., alias="s")
    aggregated_trade_id: int = Field(..., alias="a")
    price: WireDecimal = Field(..., alias="p")
    qty: WireDecimal = Field(..., alias="q")
    first_break_trade_id: int = Field(..., alias="f")
    last_break_trade_id: int = Field(..., alias="l")
    trade_order_time: int = Field(..., alias="T")
    is_buyer_maker: bool = Field(..., alias="m")


class Trade(WireModel):
    event_type: Literal["trade"] = Field("trade", alias="e")
    event_time: int = Field(..., alias="E")
    symbol: str = Field(..., alias="s")
    trade_id: int = Field(..., alias="t")
    price: WireDecimal = Field(..., alias="p")
    qty: WireDecimal = Field(..., alias="q")
    trade_time: int = Field(..., alias="T")
    is_buyer_maker: bool = Field(..., alias="m")


class KlineData(WireModel):
    start_time: int = Field(..., alias="t")
    close_time: int = Field(..., alias="T")
    symbol: str = Field(..., alias="s")
    interval: str = Field(..., alias="i")
    first_trade_id: int = Field(..., alias="f")
    last_trade_id: int = Field(..., alias="L")
    open_price: WireDecimal = Field(..., alias="o")
    close_price: WireDecimal = Field(..., alias="c")
    high_price: WireDecimal = Field(..., alias="h")
    low_price: WireDecimal = Field(..., alias="l")
    base_asset_volume: WireDecimal = Field(..., alias="v")
    number_of_trades: int = Field(..., alias="n")
    is_closed: bool = Field(..., alias="x")
    quote_asset_volume: WireDecimal = Field(..., alias="q")
    taker_buy_base_asset_volume: WireDecimal = Field(..., alias="V")
    taker_buy_quote_asset_volume: WireDecimal = Field(..., alias="Q")


class Kline(WireModel):
    event_type: Literal["kline"] = Field("kline", alias="e")
    event_time: int = Field(..., alias="E")
    symbol: str = Field(..., alias="s")
    kline_data: KlineData = Field(..., alias="k")


class MiniTicker(WireModel):
    event_type: Literal["24hrMiniTicker"] = Field("24hrMiniTicker", alias="e")
    event_time: int = Field(..., alias="E")
    symbol: str = Field(..., alias="s")
    close_price: WireDecimal = Field(..., alias="c")
    open_price: WireDecimal = Field(..., alias="o")
    high_price: WireDecimal = Field(..., alias="h")
    low_price: WireDecimal = Field(..., alias="l")
    total_traded_base_asset_volume: WireDecimal = Field(..., alias="v")
    total_traded_quote_asset_volume: WireDecimal = Field(..., alias="q")


class Ticker24hr(WireModel):
    event_type: Literal["24hrTicker"] = Field("24hrTicker", alias="e")
    event_time: int = Field(..., alias="E")
    symbol: str = Field(..., alias="s")
    price_change: WireDecimal = Field(..., alias="p")
    price_change_percent: WireDecimal = Field(..., alias="P")
    weighted_average_price: WireDecimal = Field(..., alias="w")
    first_trade_price: WireDecimal = Field(..., alias="x")
    last_price: WireDecimal = Field(..., alias="c")
    last_quantity: WireDecimal = Field(..., alias="Q")
    best_bid_price: WireDecimal = Field(..., alias="b")
    best_bid_quantity: WireDecimal = Field(..., alias="B")
    best_ask_price: WireDecimal = Field(..., alias="a")
    best_ask_quantity: WireDecimal = Field(..., alias="A")
    open_price: WireDecimal = Field(..., alias="o")
    high_price: WireDecimal = Field(..., alias="h")
    low_price: WireDecimal = Field(..., alias="l")
    total_traded_base_asset_volume: WireDecimal = Field(..., alias="v")
    total_traded_quote_asset_volume: WireDecimal = Field(..., alias="q")
    statistics_open_time: int = Field(..., alias="O")
    statistics_close_time: int = Field(..., alias="C")
    first_trade_id: int = Field(..., alias="F")
    last_trade_id: int = Field(..., alias="L")
    total_number_of_trades: int = Field(..., alias="n")


class Ticker1hr(WireModel):
    """Rolling window ticker; the tag names the window size."""

    event_type: Literal["1hTicker"] = Field("1hTicker", alias="e")
    event_time: int = Field(..., alias="E")
    symbol: str = Field(..., alias="s")
    price_change: WireDecimal = Field(..., alias="p")
    price_change_percent: WireDecimal = Field(..., alias="P")
    open_price: WireDecimal = Field(..., alias="o")
    high_price: WireDecimal = Field(..., alias="h")
    low_price: WireDecimal = Field(..., alias="l")
    last_price: WireDecimal = Field(..., alias="c")
    weighted_average_price: WireDecimal = Field(..., alias="w")
    total_traded_base_asset_volume: WireDecimal = Field(..., alias="v")
    total_traded_quote_asset_volume: WireDecimal = Field(..., alias="q")
    statistics_open_time: int = Field(..., alias="O")
    statistics_close_time: int = Field(..., alias="C")
    first_trade_id: int = Field(..., alias="F")
    last_trade_id: int = Field(..., alias="L")
    total_number_of_trades: int = Field(..., alias="n")


class AveragePrice(WireModel):
    event_type: Literal["avgPrice"] = Field("avgPrice", alias="e")
    event_time: int = Field(..., alias="E")
    symbol: str = Field(..., alias="s")
    interval: str = Field(..., alias="i")
    weighted_average_price: WireDecimal = Field(..., alias="w")
    last_trade_time: int = Field(..., alias="T")


class DepthUpdate(WireModel):
    """Diff depth update; levels are ``(price, quantity)`` pairs."""

    event_type: Literal["depthUpdate"] = Field("depthUpdate", alias="e")
    event_time: int = Field(..., alias="E")
    symbol: str = Field(..., alias="s")
    first_update_id: int = Field(..., alias="U")
    final_update_id: int = Field(..., alias="u")
    bids: list[PriceLevel] = Field(..., alias="b")
    asks: list[PriceLevel] = Field(..., alias="a")


class BookTicker(WireModel):
    """Best bid/ask update; the wire payload has no event tag."""

    update_id: int = Field(..., alias="u")
    symbol: str = Field(..., alias="s")
    best_bid_price: WireDecimal = Field(..., alias="b")
    best_bid_qty: WireDecimal = Field(..., alias="B")
    best_ask_price: WireDecimal = Field(..., alias="a")
    best_ask_qty: WireDecimal = Field(..., alias="A")


class Balance(WireModel):
    asset: str = Field(..., alias="a")
    free: WireDecimal = Field(..., alias="f")
    locked: WireDecimal = Field(..., alias="l")


class OutboundAccountPosition(WireModel):
    event_type: Literal["outboundAccountPosition"] = Field(
        "outboundAccountPosition", alias="e"
    )
    event_time: int = Field(..., alias="E")
    last_account_update_time: int = Field(..., alias="u")
    balances: list[Balance] = Field(..., alias="B")


class BalanceUpdate(WireModel):
    event_type: Literal["balanceUpdate"] = Field("balanceUpdate", alias="e")
    event_time: int = Field(..., alias="E")
    asset: str = Field(..., alias="a")
    balance_delta: WireDecimal = Field(..., alias="d")
    clear_time: int = Field(..., alias="T")


class ExecutionReport(WireModel):
    event_type: Literal["executionReport"] = Field("executionReport", alias="e")
    event_time: int = Field(..., alias="E")
    symbol: str = Field(..., alias="s")
    client_order_id: str = Field(..., alias="c")
    side: str = Field(..., alias="S")
    order_type: str = Field(..., alias="o")
    time_in_force: str = Field(..., alias="f")
    order_quantity: WireDecimal = Field(..., alias="q")
    order_price: WireDecimal = Field(..., alias="p")
    stop_price: WireDecimal = Field(..., alias="P")
    iceberg_quantity: WireDecimal = Field(..., alias="F")
    order_list_id: int = Field(..., alias="g")
    original_client_order_id: str = Field(..., alias="C")
    current_execution_type: str = Field(..., alias="x")
    current_order_status: str = Field(..., alias="X")
    order_reject_reason: str = Field(..., alias="r")
    order_id: int = Field(..., alias="i")
    last_executed_quantity: WireDecimal = Field(..., alias="l")
    cumulative_filled_quantity: WireDecimal = Field(..., alias="z")
    last_executed_price: WireDecimal = Field(..., alias="L")
    commission_amount: WireDecimal = Field(..., alias="n")
    commission_asset: str | None = Field(None, alias="N")
    transaction_time: int = Field(..., alias="T")
    trade_id: int = Field(..., alias="t")
    is_working: bool = Field(..., alias="w")
    is_maker: bool = Field(..., alias="m")
    order_creation_time: int = Field(..., alias="O")
    cumulative_quote_asset_transacted_quantity: WireDecimal = Field(..., alias="Z")
    last_quote_asset_transacted_quantity: WireDecimal = Field(..., alias="Y")
    quote_order_quantity: WireDecimal = Field(..., alias="Q")


class ListStatusOrder(WireModel):
    symbol: str = Field(..., alias="s")
    order_id: int = Field(..., alias="i")
    client_order_id: str = Field(..., alias="c")


class ListStatus(WireModel):
    """Status update of an order list (OCO)."""

    event_type: Literal["listStatus"] = Field("listStatus", alias="e")
    event_time: int = Field(..., alias="E")
    symbol: str = Field(..., alias="s")
    order_list_id: int = Field(..., alias="g")
    contingency_type: str = Field(..., alias="c")
    list_status_type: str = Field(..., alias="l")
    list_order_status: str = Field(..., alias="L")
    list_reject_reason: str = Field(..., alias="r")
    list_client_order_id: str = Field(..., alias="C")
    transaction_time: int = Field(..., alias="T")
    orders: list[ListStatusOrder] = Field(..., alias="O")


class ListenKeyExpired(WireModel):
    event_type: Literal["listenKeyExpired"] = Field("listenKeyExpired", alias="e")
    event_time: int = Field(..., alias="E")
    listen_key: str = Field(..., alias="listenKey")


SpotMessage = Union[
    Keepalive,
    AggregateTrade,
    Trade,
    Kline,
    MiniTicker,
    Ticker24hr,
    Ticker1hr,
    AveragePrice,
    DepthUpdate,
    BookTicker,
    OutboundAccountPosition,
    BalanceUpdate,
    ExecutionReport,
    ListStatus,
    ListenKeyExpired,
]


class SpotDecoder(MessageDecoder[SpotMessage]):
    product = Product.SPOT
    events = {
        "aggTrade": AggregateTrade,
        "trade": Trade,
        "kline": Kline,
        "24hrMiniTicker": MiniTicker,
        "24hrTicker": Ticker24hr,
        "1hTicker": Ticker1hr,
        "avgPrice": AveragePrice,
        "depthUpdate": DepthUpdate,
        "outboundAccountPosition": OutboundAccountPosition,
        "balanceUpdate": BalanceUpdate,
        "executionReport": ExecutionReport,
        "listStatus": ListStatus,
        "listenKeyExpired": ListenKeyExpired,
    }
    topic_variants = {
        "bookTicker": BookTicker,
    }
    unimplemented_events = frozenset({"eventStreamTerminated", "externalLockUpdate"})
    unimplemented_streams = frozenset({"depth5", "depth10", "depth20"})
