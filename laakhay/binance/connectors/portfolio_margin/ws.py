"""Binance portfolio margin user data stream messages and decoder.

Events from the UM futures, CM futures and margin business units arrive on
one stream; ``business_unit`` (``"fs"``) tells them apart where present.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import Field

from laakhay.binance.core.enums import Product
from laakhay.binance.models.base import WireDecimal, WireModel
from laakhay.binance.runtime.ws.decoder import Keepalive, MessageDecoder


class AccountConfig(WireModel):
    symbol: str = Field(..., alias="s")
    leverage: int = Field(..., alias="l")


class Balance(WireModel):
    asset: str = Field(..., alias="a")
    wallet_balance: WireDecimal = Field(..., alias="wb")
    cross_wallet_balance: WireDecimal = Field(..., alias="cw")
    balance_change: WireDecimal = Field(..., alias="bc")


class Position(WireModel):
    symbol: str = Field(..., alias="s")
    position_amount: WireDecimal = Field(..., alias="pa")
    entry_price: WireDecimal = Field(..., alias="ep")
    accumulated_realized: WireDecimal = Field(..., alias="cr")
    unrealized_pnl: WireDecimal = Field(..., alias="up")
    position_side: str = Field(..., alias="ps")
    breakeven_price: WireDecimal = Field(..., alias="bep")


class UpdateData(WireModel):
    event_reason_type: str = Field(..., alias="m")
    balances: list[Balance] = Field(..., alias="B")
    positions: list[Position] = Field(..., alias="P")


class ConditionalOrder(WireModel):
    symbol: str = Field(..., alias="s")
    strategy_client_order_id: str = Field(..., alias="c")
    strategy_id: int = Field(..., alias="si")
    side: str = Field(..., alias="S")
    strategy_type: str = Field(..., alias="st")
    time_in_force: str = Field(..., alias="f")
    quantity: WireDecimal = Field(..., alias="q")
    price: WireDecimal = Field(..., alias="p")
    stop_price: WireDecimal = Field(..., alias="sp")
    strategy_order_status: str = Field(..., alias="os")
    order_book_time: int = Field(..., alias="T")
    order_update_time: int = Field(..., alias="ut")
    is_reduce_only: bool = Field(..., alias="R")
    stop_price_working_type: str = Field(..., alias="wt")
    position_side: str = Field(..., alias="ps")
    is_close_all: bool = Field(..., alias="cp")
    activation_price: WireDecimal | None = Field(None, alias="AP")
    callback_rate: WireDecimal | None = Field(None, alias="cr")
    order_id: int | None = Field(None, alias="i")
    stp_mode: str = Field(..., alias="V")
    gtd_time: int = Field(..., alias="gtd")


class OpenOrderLossUpdate(WireModel):
    asset: str = Field(..., alias="a")
    amount: WireDecimal = Field(..., alias="o")


class FuturesOrder(WireModel):
    symbol: str = Field(..., alias="s")
    client_order_id: str = Field(..., alias="c")
    side: str = Field(..., alias="S")
    order_type: str = Field(..., alias="o")
    time_in_force: str = Field(..., alias="f")
    original_quantity: WireDecimal = Field(..., alias="q")
    original_price: WireDecimal = Field(..., alias="p")
    average_price: WireDecimal = Field(..., alias="ap")
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
    position_side: str = Field(..., alias="ps")
    realized_profit: WireDecimal = Field(..., alias="rp")
    strategy_type: str | None = Field(None, alias="st")
    strategy_id: int | None = Field(None, alias="si")
    stp_mode: str = Field(..., alias="V")
    gtd_time: int = Field(..., alias="gtd")


class BalancePosition(WireModel):
    asset: str = Field(..., alias="a")
    free_amount: WireDecimal = Field(..., alias="f")
    locked_amount: WireDecimal = Field(..., alias="l")


class AccountConfigUpdate(WireModel):
    event_type: Literal["ACCOUNT_CONFIG_UPDATE"] = Field("ACCOUNT_CONFIG_UPDATE", alias="e")
    business_unit: str = Field(..., alias="fs")
    event_time: int = Field(..., alias="E")
    transaction_time: int = Field(..., alias="T")
    account_config: AccountConfig = Field(..., alias="ac")


class AccountUpdate(WireModel):
    event_type: Literal["ACCOUNT_UPDATE"] = Field("ACCOUNT_UPDATE", alias="e")
    business_unit: str = Field(..., alias="fs")
    event_time: int = Field(..., alias="E")
    transaction_time: int = Field(..., alias="T")
    account_alias: str = Field(..., alias="i")
    update_data: UpdateData = Field(..., alias="a")


class BalanceUpdate(WireModel):
    event_type: Literal["balanceUpdate"] = Field("balanceUpdate", alias="e")
    event_time: int = Field(..., alias="E")
    asset: str = Field(..., alias="a")
    balance_delta: WireDecimal = Field(..., alias="d")
    event_update_id: int = Field(..., alias="U")
    clear_time: int = Field(..., alias="T")


class ConditionalOrderTradeUpdate(WireModel):
    event_type: Literal["CONDITIONAL_ORDER_TRADE_UPDATE"] = Field(
        "CONDITIONAL_ORDER_TRADE_UPDATE", alias="e"
    )
    transaction_time: int = Field(..., alias="T")
    event_time: int = Field(..., alias="E")
    business_unit: str = Field(..., alias="fs")
    strategy_order: ConditionalOrder = Field(..., alias="so")


class ExecutionReport(WireModel):
    """Margin order update; strategy and prevention fields are conditional."""

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
    trailing_delta: WireDecimal | None = Field(None, alias="d")
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
    commission_amount: WireDecimal | None = Field(None, alias="n")
    commission_asset: str | None = Field(None, alias="N")
    order_trade_time: int = Field(..., alias="T")
    trade_id: int = Field(..., alias="t")
    prevent_match_id: int | None = Field(None, alias="v")
    is_order_on_book: bool = Field(..., alias="w")
    is_maker: bool = Field(..., alias="m")
    order_creation_time: int = Field(..., alias="O")
    cumulative_quote_asset_transacted_quantity: WireDecimal = Field(..., alias="Z")
    last_quote_asset_transacted_quantity: WireDecimal = Field(..., alias="Y")
    quote_order_quantity: WireDecimal = Field(..., alias="Q")
    trailing_time: int | None = Field(None, alias="D")
    strategy_id: int | None = Field(None, alias="j")
    strategy_type: int | None = Field(None, alias="J")
    working_time: int = Field(..., alias="W")
    self_trade_prevention_mode: str = Field(..., alias="V")
    trade_group_id: int | None = Field(None, alias="u")
    counter_order_id: int | None = Field(None, alias="U")
    prevented_quantity: WireDecimal | None = Field(None, alias="A")
    last_prevented_quantity: WireDecimal | None = Field(None, alias="B")


class LiabilityChange(WireModel):
    event_type: Literal["liabilityChange"] = Field("liabilityChange", alias="e")
    event_time: int = Field(..., alias="E")
    asset: str = Field(..., alias="a")
    type: str = Field(..., alias="t")
    transaction_id: int = Field(..., alias="tx")
    principal: WireDecimal = Field(..., alias="p")
    interest: WireDecimal = Field(..., alias="i")
    total_liability: WireDecimal = Field(..., alias="l")


class ListenKeyExpired(WireModel):
    event_type: Literal["listenKeyExpired"] = Field("listenKeyExpired", alias="e")
    event_time: int = Field(..., alias="E")


class OpenOrderLoss(WireModel):
    event_type: Literal["openOrderLoss"] = Field("openOrderLoss", alias="e")
    event_time: int = Field(..., alias="E")
    update_data: list[OpenOrderLossUpdate] = Field(..., alias="O")


class OrderTradeUpdate(WireModel):
    event_type: Literal["ORDER_TRADE_UPDATE"] = Field("ORDER_TRADE_UPDATE", alias="e")
    business_unit: str = Field(..., alias="fs")
    event_time: int = Field(..., alias="E")
    transaction_time: int = Field(..., alias="T")
    account_alias: str = Field(..., alias="i")
    update: FuturesOrder = Field(..., alias="o")


class OutboundAccountPosition(WireModel):
    event_type: Literal["outboundAccountPosition"] = Field(
        "outboundAccountPosition", alias="e"
    )
    event_time: int = Field(..., alias="E")
    time_of_last_account_update: int = Field(..., alias="u")
    event_update_id: int = Field(..., alias="U")
    balances: list[BalancePosition] = Field(..., alias="B")


class RiskLevelChange(WireModel):
    event_type: Literal["riskLevelChange"] = Field("riskLevelChange", alias="e")
    event_time: int = Field(..., alias="E")
    maintenance_margin_rate: WireDecimal = Field(..., alias="u")
    status: str = Field(..., alias="s")
    account_equity: WireDecimal = Field(..., alias="eq")
    actual_equity: WireDecimal = Field(..., alias="ae")


PortfolioMarginMessage = Union[
    Keepalive,
    AccountConfigUpdate,
    AccountUpdate,
    BalanceUpdate,
    ConditionalOrderTradeUpdate,
    ExecutionReport,
    LiabilityChange,
    ListenKeyExpired,
    OpenOrderLoss,
    OrderTradeUpdate,
    OutboundAccountPosition,
    RiskLevelChange,
]


class PortfolioMarginDecoder(MessageDecoder[PortfolioMarginMessage]):
    product = Product.PORTFOLIO_MARGIN
    events = {
        "ACCOUNT_CONFIG_UPDATE": AccountConfigUpdate,
        "ACCOUNT_UPDATE": AccountUpdate,
        "balanceUpdate": BalanceUpdate,
        "CONDITIONAL_ORDER_TRADE_UPDATE": ConditionalOrderTradeUpdate,
        "executionReport": ExecutionReport,
        "liabilityChange": LiabilityChange,
        "listenKeyExpired": ListenKeyExpired,
        "openOrderLoss": OpenOrderLoss,
        "ORDER_TRADE_UPDATE": OrderTradeUpdate,
        "outboundAccountPosition": OutboundAccountPosition,
        "riskLevelChange": RiskLevelChange,
    }
    unimplemented_events = frozenset({"MARGIN_CALL", "CONDITIONAL_ORDER_TRIGGER_REJECT"})
