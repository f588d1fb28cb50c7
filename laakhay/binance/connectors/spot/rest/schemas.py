"""Binance spot REST response schemas.

Models use the exact field names returned by Binance as aliases.
"""

from __future__ import annotations

from pydantic import Field

from laakhay.binance.models.base import WireDecimal, WireModel


class AssetBalance(WireModel):
    asset: str
    free: WireDecimal
    locked: WireDecimal


class AccountInformation(WireModel):
    """Response of ``GET /api/v3/account``."""

    maker_commission: int = Field(..., alias="makerCommission")
    taker_commission: int = Field(..., alias="takerCommission")
    buyer_commission: int = Field(..., alias="buyerCommission")
    seller_commission: int = Field(..., alias="sellerCommission")
    can_trade: bool = Field(..., alias="canTrade")
    can_withdraw: bool = Field(..., alias="canWithdraw")
    can_deposit: bool = Field(..., alias="canDeposit")
    update_time: int = Field(..., alias="updateTime")
    account_type: str = Field(..., alias="accountType")
    balances: list[AssetBalance] = Field(default_factory=list)
    permissions: list[str] = Field(default_factory=list)

    def get_balance(self, asset: str) -> AssetBalance | None:
        asset = asset.upper()
        for balance in self.balances:
            if balance.asset == asset:
                return balance
        return None


class Order(WireModel):
    """Order as returned by ``GET /api/v3/order``."""

    symbol: str
    order_id: int = Field(..., alias="orderId")
    order_list_id: int = Field(..., alias="orderListId")
    client_order_id: str = Field(..., alias="clientOrderId")
    price: WireDecimal
    orig_qty: WireDecimal = Field(..., alias="origQty")
    executed_qty: WireDecimal = Field(..., alias="executedQty")
    # Binance spells it with a double "m"
    cummulative_quote_qty: WireDecimal = Field(..., alias="cummulativeQuoteQty")
    status: str
    time_in_force: str = Field(..., alias="timeInForce")
    type: str
    side: str
    stop_price: WireDecimal | None = Field(None, alias="stopPrice")
    iceberg_qty: WireDecimal | None = Field(None, alias="icebergQty")
    time: int
    update_time: int = Field(..., alias="updateTime")
    is_working: bool = Field(..., alias="isWorking")
    orig_quote_order_qty: WireDecimal | None = Field(None, alias="origQuoteOrderQty")
