"""Binance USD-M futures stream messages and decoder."""

from __future__ import annotations

from typing import Literal, Union

from pydantic import Field

from laakhay.binance.core.enums import Product
from laakhay.binance.models.base import WireDecimal, WireModel
from laakhay.binance.runtime.ws.decoder import Keepalive, MessageDecoder

from ..spot.ws import KlineData


class AggregateTrade(WireModel):
    event_type: Literal["aggTrade"] = Field("aggTrade", alias="e")
    event_time: int = Field(..., alias="E")
    symbol: str = Field(..., alias="s")
    aggregated_trade_id: int = Field(..., alias="a")
    price: WireDecimal = Field(..., alias="p")
    qty: WireDecimal = Field(..., alias="q")
    first_trade_id: int = Field(..., alias="f")
    last_trade_id: int = Field(..., alias="l")
    trade_time: int = Field(..., alias="T")
    is_buyer_maker: bool = Field(..., alias="m")


class MarkPriceUpdate(WireModel):
    event_type: Literal["markPriceUpdate"] = Field("markPriceUpdate", alias="e")
    event_time: int = Field(..., alias="E")
    symbol: str = Field(..., alias="s")
    mark_price: WireDecimal = Field(..., alias="p")
    index_price: WireDecimal = Field(..., alias="i")
    estimated_settle_price: WireDecimal = Field(..., alias="P")
    funding_rate: WireDecimal = Field(..., alias="r")
    next_funding_time: int = Field(..., alias="T")


class Kline(WireModel):
    event_type: Literal["kline"] = Field("kline", alias="e")
    event_time: int = Field(..., alias="E")
    symbol: str = Field(..., alias="s")
    kline_data: KlineData = Field(..., alias="k")


class Order(WireModel):
    symbol: str = Field(..., alias="s")
    client_order_id: str = Field(..., alias="c")
    side: str = Field(..., alias="S")
    order_type: str = Field(..., alias="o")
    time_in_force: str = Field(..., alias="f")
    original_quantity: WireDecimal = Field(..., alias="q")
    original_price: WireDecimal = Field(..., alias="p")
    average_price: WireDecimal = Field(..., alias="ap")
    stop_price: WireDecimal = Field(..., alias="sp")
    execution_type: str = Field(..., alias="x")
    order_status: str = Field(..., alias="X")
    order_id: int = Field(..., alias="i")
    order_last_filled_quantity: WireDecimal = Field(..., alias="l")
    order_filled_accumulated_quantity: WireDecimal = Field(..., alias="z")
    last_filled_price: WireDecimal = Field(..., alias="L")
    commission_asset: str | None = Field(None, alias="N")
    commission: WireDecimal | None = Field(None, alias="n")
    order_trade_time: int = Field(..., alias="T")
    trade_id: int = Field(..., alias="t")
    bids_notional: WireDecimal = Field(..., alias="b")
    ask_notional: WireDecimal = Field(..., alias="a")
    is_maker: bool = Field(..., alias="m")
    is_reduce_only: bool = Field(..., alias="R")
    stop_price_working_type: str = Field(..., alias="wt")
    original_order_type: str = Field(..., alias="ot")
    position_side: str = Field(..., alias="ps")
    is_close_all: bool = Field(..., alias="cp")
    activation_price: WireDecimal | None = Field(None, alias="AP")
    callback_rate: WireDecimal | None = Field(None, alias="cr")
    price_protect: bool = Field(False, alias="pP")
    realized_profit: WireDecimal = Field(..., alias="rp")
    stp_mode: str = Field(..., alias="V")
    price_match_mode: str = Field(..., alias="pm")
    gtd_time: int = Field(..., alias="gtd")


class OrderTradeUpdate(WireModel):
    event_type: Literal["ORDER_TRADE_UPDATE"] = Field("ORDER_TRADE_UPDATE", alias="e")
    event_time: int = Field(..., alias="E")
    transaction_time: int = Field(..., alias="T")
    order: Order = Field(..., alias="o")


class Balance(WireModel):
    asset: str = Field(..., alias="a")
    wallet_balance: WireDecimal = Field(..., alias="wb")
    cross_wallet_balance: WireDecimal = Field(..., alias="cw")
    balance_change: WireDecimal = Field(..., alias="bc")


class Position(WireModel):
    symbol: str = Field(..., alias="s")
    position_amount: WireDecimal = Field(..., alias="pa")
    entry_price: WireDecimal = Field(..., alias="ep")
    breakeven_price: WireDecimal = Field(..., alias="bep")
    accumulated_realized: WireDecimal = Field(..., alias="cr")
    unrealized_pnl: WireDecimal = Field(..., alias="up")
    margin_type: str = Field(..., alias="mt")
    isolated_wallet: WireDecimal = Field(..., alias="iw")
    position_side: str = Field(..., alias="ps")


class UpdateData(WireModel):
    event_reason_type: str = Field(..., alias="m")
    balances: list[Balance] = Field(..., alias="B")
    positions: list[Position] = Field(..., alias="P")


class AccountUpdate(WireModel):
    event_type: Literal["ACCOUNT_UPDATE"] = Field("ACCOUNT_UPDATE", alias="e")
    event_time: int = Field(..., alias="E")
    transaction_time: int = Field(..., alias="T")
    update_data: UpdateData = Field(..., alias="a")


class TradePairConfig(WireModel):
    symbol: str = Field(..., alias="s")
    leverage: int = Field(..., alias="l")


class AccountInfoConfig(WireModel):
    multi_assets_mode: bool = Field(..., alias="j")


class AccountConfigUpdate(WireModel):
    """Leverage change (``ac``) or multi-assets mode change (``ai``)."""

    event_type: Literal["ACCOUNT_CONFIG_UPDATE"] = Field("ACCOUNT_CONFIG_UPDATE", alias="e")
    event_time: int = Field(..., alias="E")
    transaction_time: int = Field(..., alias="T")
    trade_pair: TradePairConfig | None = Field(None, alias="ac")
    account_info: AccountInfoConfig | None = Field(None, alias="ai")


class ListenKeyExpired(WireModel):
    event_type: Literal["listenKeyExpired"] = Field("listenKeyExpired", alias="e")
    event_time: int = Field(..., alias="E")
    listen_key: str | None = Field(None, alias="listenKey")


UsdMFuturesMessage = Union[
    Keepalive,
    AggregateTrade,
    MarkPriceUpdate,
    Kline,
    OrderTradeUpdate,
    AccountUpdate,
    AccountConfigUpdate,
    ListenKeyExpired,
]


class UsdMFuturesDecoder(MessageDecoder[UsdMFuturesMessage]):
    product = Product.USDM_FUTURES
    events = {
        "aggTrade": AggregateTrade,
        "markPriceUpdate": MarkPriceUpdate,
        "kline": Kline,
        "ORDER_TRADE_UPDATE": OrderTradeUpdate,
        "ACCOUNT_UPDATE": AccountUpdate,
        "ACCOUNT_CONFIG_UPDATE": AccountConfigUpdate,
        "listenKeyExpired": ListenKeyExpired,
    }
    unimplemented_events = frozenset(
        {"MARGIN_CALL", "TRADE_LITE", "STRATEGY_UPDATE", "GRID_UPDATE"}
    )
